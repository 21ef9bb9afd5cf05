"""API tests for payment types, payment categories and expenses."""


class TestPaymentTypes:

    def test_duplicate_is_case_insensitive(self, client, payment_type):
        response = client.post("/api/payment-types/", json={"payment_type": "CHECK"})
        assert response.status_code == 409

    def test_rename(self, client, payment_type):
        response = client.put("/api/payment-types/", json={
            "id": payment_type["id"], "payment_type": "Cheque"})

        assert response.status_code == 200
        assert client.get("/api/payment-types/lookup").json() == [
            {"id": payment_type["id"], "name": "Cheque"}]

    def test_delete_blocked_by_payment(self, client, payment_type, pay):
        pay(500, "2024-02-01")

        response = client.delete(f"/api/payment-types/{payment_type['id']}")

        assert response.status_code == 400
        assert response.json()["message"] == "Payment type is used by lease payments"

    def test_delete(self, client, payment_type):
        assert client.delete(f"/api/payment-types/{payment_type['id']}").status_code == 200
        assert client.get(f"/api/payment-types/{payment_type['id']}").status_code == 404


class TestPaymentCategories:

    def test_name_too_short(self, client):
        response = client.post("/api/payment-categories/", json={"payment_category": "R"})
        assert response.status_code == 422

    def test_description_defaults_to_empty(self, client):
        response = client.post("/api/payment-categories/", json={"payment_category": "Deposit"})

        assert response.status_code == 200
        assert response.json()["data"]["description"] == ""

    def test_duplicate(self, client, payment_category):
        response = client.post("/api/payment-categories/", json={"payment_category": "rent"})
        assert response.status_code == 409

    def test_search(self, client, payment_category):
        client.post("/api/payment-categories/", json={"payment_category": "Late fee"})

        body = client.get("/api/payment-categories/all", params={"search": "monthly"}).json()

        assert [c["payment_category"] for c in body["items"]] == ["Rent"]


class TestExpenses:

    def expense(self, client, property_record, payment_type, payment_category, **overrides):
        body = {
            "property_id": property_record["id"],
            "payment_type_id": payment_type["id"],
            "payment_category_id": payment_category["id"],
            "expense_date": "2024-02-10",
            "expense_amount": 125.5,
            "check_number": 1001,
            "notes": "Plumbing",
        }
        body.update(overrides)
        return client.post("/api/expenses/", json=body)

    def test_create(self, client, property_record, payment_type, payment_category):
        response = self.expense(client, property_record, payment_type, payment_category)

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["property_name"] == "Maple Court"
        assert data["expense_amount"] == 125.5

    def test_unknown_category(self, client, property_record, payment_type):
        response = self.expense(client, property_record, payment_type, {"id": 77})

        assert response.status_code == 400
        assert response.json()["message"] == "Referenced Payment category 77 does not exist"

    def test_negative_check_number(self, client, property_record, payment_type, payment_category):
        response = self.expense(client, property_record, payment_type, payment_category,
                                check_number=-1)
        assert response.status_code == 422

    def test_month_filter(self, client, property_record, payment_type, payment_category):
        self.expense(client, property_record, payment_type, payment_category)
        self.expense(client, property_record, payment_type, payment_category,
                     expense_date="2023-12-31")

        body = client.get("/api/expenses/all", params={"month": "2023-12"}).json()

        assert body["total"] == 1
        assert body["items"][0]["expense_date"] == "2023-12-31"

    def test_bad_month(self, client):
        response = client.get("/api/expenses/all", params={"month": "December"})

        assert response.status_code == 400
        assert "YYYY-MM" in response.json()["message"]

    def test_property_delete_blocked(self, client, property_record, payment_type, payment_category):
        self.expense(client, property_record, payment_type, payment_category)

        response = client.delete(f"/api/properties/{property_record['id']}")

        assert response.json()["message"] == "Property has assigned expenses"

    def test_category_delete_blocked(self, client, property_record, payment_type, payment_category):
        self.expense(client, property_record, payment_type, payment_category)

        response = client.delete(f"/api/payment-categories/{payment_category['id']}")

        assert response.json()["message"] == "Payment category is used by expenses"

    def test_update_and_delete(self, client, property_record, payment_type, payment_category):
        created = self.expense(client, property_record, payment_type, payment_category).json()["data"]

        updated = client.put("/api/expenses/", json={"id": created["id"], "notes": "Roof"})
        deleted = client.delete(f"/api/expenses/{created['id']}")

        assert updated.json()["data"]["notes"] == "Roof"
        assert deleted.status_code == 200
        assert client.get(f"/api/expenses/{created['id']}").status_code == 404
