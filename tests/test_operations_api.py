"""API tests for fines, inspections, utility bills and their type tables."""

import pytest


@pytest.fixture
def fine_type(client):
    response = client.post("/api/fine-types/", json={"fine_type": "Noise"})
    assert response.status_code == 200, response.text
    return response.json()["data"]


@pytest.fixture
def inspection_type(client):
    response = client.post("/api/inspection-types/", json={"inspection_type": "Fire safety"})
    assert response.status_code == 200, response.text
    return response.json()["data"]


@pytest.fixture
def utility_type(client):
    response = client.post("/api/utility-types/", json={
        "utility_name": "Water",
        "utility_provider": "City Water Co",
    })
    assert response.status_code == 200, response.text
    return response.json()["data"]


@pytest.fixture
def fine(client, property_record, fine_type, payment_type, payment_category):
    def _fine(**overrides):
        body = {
            "fine_id": "F-2024-001",
            "property_id": property_record["id"],
            "fine_type_id": fine_type["id"],
            "payment_type_id": payment_type["id"],
            "payment_category_id": payment_category["id"],
            "fine_date": "2024-02-01",
            "fine_due_date": "2024-02-15",
            "fine_amount": 75,
        }
        body.update(overrides)
        return client.post("/api/fines/", json=body)

    return _fine


@pytest.fixture
def inspection(client, property_record, inspection_type, payment_type):
    def _inspection(**overrides):
        body = {
            "property_id": property_record["id"],
            "inspection_type_id": inspection_type["id"],
            "payment_type_id": payment_type["id"],
            "inspection_date": "2024-02-20",
            "inspected_by": "J. Ortiz",
            "inspection_amount": 150,
        }
        body.update(overrides)
        return client.post("/api/inspections/", json=body)

    return _inspection


@pytest.fixture
def utility(client, property_record, utility_type, payment_type, payment_category):
    def _utility(**overrides):
        body = {
            "property_id": property_record["id"],
            "utility_type_id": utility_type["id"],
            "payment_type_id": payment_type["id"],
            "payment_category_id": payment_category["id"],
            "reading_date": "2024-02-28",
            "meter_reading": 1234.5,
            "amount": 88.4,
            "payment_date": "2024-03-05",
        }
        body.update(overrides)
        return client.post("/api/utilities/", json=body)

    return _utility


class TestExpenseTypes:

    def test_create_defaults_description(self, client):
        response = client.post("/api/expense-types/", json={"expense_type": "Repairs"})

        assert response.status_code == 200
        assert response.json()["data"]["description"] == ""

    def test_name_too_short(self, client):
        response = client.post("/api/expense-types/", json={"expense_type": "R"})
        assert response.status_code == 422

    def test_duplicate(self, client):
        client.post("/api/expense-types/", json={"expense_type": "Repairs"})

        response = client.post("/api/expense-types/", json={"expense_type": "repairs"})

        assert response.status_code == 409

    def test_lookup_and_delete(self, client):
        created = client.post("/api/expense-types/", json={"expense_type": "Taxes"}).json()["data"]

        assert client.get("/api/expense-types/lookup").json() == [
            {"id": created["id"], "name": "Taxes"}]
        assert client.delete(f"/api/expense-types/{created['id']}").status_code == 200
        assert client.get("/api/expense-types/lookup").json() == []


class TestFines:

    def test_create(self, fine):
        response = fine()

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["fine_id"] == "F-2024-001"
        assert data["fine_type"] == "Noise"
        assert data["property_name"] == "Maple Court"
        assert data["fine_amount"] == 75

    def test_fine_id_charset(self, fine):
        assert fine(fine_id="F 001").status_code == 422

    def test_duplicate_fine_id(self, fine):
        fine()

        response = fine()

        assert response.status_code == 409
        assert response.json()["message"] == "Fine with ID F-2024-001 already exists"

    def test_due_date_before_fine_date(self, fine):
        assert fine(fine_due_date="2024-01-15").status_code == 422

    def test_unknown_fine_type(self, fine):
        response = fine(fine_type_id=99)

        assert response.status_code == 400
        assert response.json()["message"] == "Referenced Fine type 99 does not exist"

    def test_update_checks_stored_fine_date(self, client, fine):
        created = fine().json()["data"]

        response = client.put("/api/fines/", json={
            "id": created["id"], "fine_due_date": "2024-01-31"})

        assert response.status_code == 400
        assert response.json()["message"] == "Fine due date must be on or after fine date"

    def test_fine_type_delete_blocked(self, client, fine, fine_type):
        fine()

        response = client.delete(f"/api/fine-types/{fine_type['id']}")

        assert response.status_code == 400
        assert response.json()["message"] == "Fine type is used by fines"

    def test_category_delete_blocked(self, client, fine, payment_category):
        fine()

        response = client.delete(f"/api/payment-categories/{payment_category['id']}")

        assert response.json()["message"] == "Payment category is used by fines"

    def test_property_delete_blocked(self, client, fine, property_record):
        fine()

        response = client.delete(f"/api/properties/{property_record['id']}")

        assert response.json()["message"] == "Property has assigned fines"

    def test_delete_then_type_delete(self, client, fine, fine_type):
        created = fine().json()["data"]

        assert client.delete(f"/api/fines/{created['id']}").status_code == 200
        assert client.delete(f"/api/fine-types/{fine_type['id']}").status_code == 200


class TestInspections:

    def test_create(self, inspection):
        response = inspection(notes="Smoke detectors replaced")

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["inspection_type"] == "Fire safety"
        assert data["inspected_by"] == "J. Ortiz"

    def test_inspector_required(self, inspection):
        assert inspection(inspected_by="").status_code == 422

    def test_unknown_property(self, inspection):
        response = inspection(property_id=404)

        assert response.status_code == 400
        assert response.json()["message"] == "Referenced Property 404 does not exist"

    def test_search_by_inspector(self, client, inspection):
        inspection()
        inspection(inspected_by="M. Chen")

        body = client.get("/api/inspections/all", params={"search": "chen"}).json()

        assert [i["inspected_by"] for i in body["items"]] == ["M. Chen"]

    def test_inspection_type_delete_blocked(self, client, inspection, inspection_type):
        inspection()

        response = client.delete(f"/api/inspection-types/{inspection_type['id']}")

        assert response.status_code == 400
        assert response.json()["message"] == "Inspection type is used by inspections"

    def test_payment_type_delete_blocked(self, client, inspection, payment_type):
        inspection()

        response = client.delete(f"/api/payment-types/{payment_type['id']}")

        assert response.json()["message"] == "Payment type is used by inspections"


class TestUtilityTypes:

    def test_same_name_other_provider(self, client, utility_type):
        response = client.post("/api/utility-types/", json={
            "utility_name": "Water", "utility_provider": "County Water"})
        assert response.status_code == 200

    def test_duplicate_pair(self, client, utility_type):
        response = client.post("/api/utility-types/", json={
            "utility_name": "water", "utility_provider": "city water co"})
        assert response.status_code == 409

    def test_lookup_skips_inactive(self, client, utility_type):
        client.put("/api/utility-types/", json={"id": utility_type["id"], "active": False})

        assert client.get("/api/utility-types/lookup").json() == []
        body = client.get("/api/utility-types/all", params={"active": False}).json()
        assert body["total"] == 1


class TestUtilities:

    def test_create(self, utility):
        response = utility()

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["utility_name"] == "Water"
        assert data["amount"] == 88.4

    def test_reading_after_payment(self, utility):
        assert utility(reading_date="2024-03-10").status_code == 422

    def test_reading_date_optional(self, utility):
        response = utility(reading_date=None, meter_reading=None)

        assert response.status_code == 200
        assert response.json()["data"]["reading_date"] is None

    def test_update_checks_stored_payment_date(self, client, utility):
        created = utility().json()["data"]

        response = client.put("/api/utilities/", json={
            "id": created["id"], "reading_date": "2024-03-06"})

        assert response.status_code == 400
        assert response.json()["message"] == "Reading date cannot be after payment date"

    def test_utility_type_delete_blocked(self, client, utility, utility_type):
        utility()

        response = client.delete(f"/api/utility-types/{utility_type['id']}")

        assert response.status_code == 400
        assert response.json()["message"] == "Utility type is used by utilities"

    def test_filter_by_property(self, client, utility, property_record):
        utility()

        body = client.get("/api/utilities/all", params={"property_id": property_record["id"] + 1}).json()

        assert body["total"] == 0
