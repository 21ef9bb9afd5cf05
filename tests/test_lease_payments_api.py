"""
API tests for lease payments and the running ledger.

The ledger clock is pinned to 2024-03-15 by the ``client`` fixture; lease
L-100 starts 2024-01-01 at 1000 a month, so 2000 of rent has accrued.
"""


def payments_of(client, lease_id="L-100"):
    response = client.get("/api/lease-payments/all", params={"lease_id": lease_id})
    assert response.status_code == 200
    # newest first on the list endpoint
    return {p["id"]: p for p in response.json()["items"]}


class TestCreatePayment:

    def test_first_payment(self, pay):
        response = pay(500, "2024-03-15")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "Success"
        assert body["status_code"] == "101"
        assert body["message"] == "Lease payment 1 created"

        data = body["data"]
        assert data["lease_id"] == "L-100"
        assert data["payment_type"] == "Check"
        assert data["payment_category"] == "Rent"
        assert data["monthly_rent"] == 1000
        assert data["total_paid"] == 500
        assert data["balance"] == 1500

    def test_running_totals(self, pay):
        pay(400, "2024-01-05")
        second = pay(300, "2024-02-05").json()["data"]

        assert second["total_paid"] == 700
        assert second["balance"] == 1300

    def test_unknown_lease_is_not_found(self, client, pay):
        response = pay(500, "2024-02-01", lease_id="L-404")

        assert response.status_code == 404
        assert response.json()["status"] == "Failure"
        assert response.json()["message"] == "Lease with ID L-404 not found"
        assert client.get("/api/lease-payments/all").json()["total"] == 0

    def test_unknown_lease_wins_over_unknown_type(self, pay):
        response = pay(500, "2024-02-01", lease_id="L-404", payment_type_id=999)

        assert response.status_code == 404
        assert response.json()["status_code"] == "205"

    def test_unknown_payment_type_is_rejected(self, pay):
        response = pay(500, "2024-02-01", payment_type_id=999)

        assert response.status_code == 400
        assert response.json()["status_code"] == "206"
        assert "Payment type 999" in response.json()["message"]

    def test_future_payment_date_is_rejected(self, pay):
        response = pay(500, "2999-01-01")

        assert response.status_code == 422
        assert "cannot be in the future" in response.json()["message"]

    def test_negative_amount_is_rejected(self, pay):
        assert pay(-5, "2024-02-01").status_code == 422

    def test_due_date_before_payment_date_is_rejected(self, pay):
        response = pay(500, "2024-02-10", payment_due_date="2024-02-01")
        assert response.status_code == 422

    def test_blank_lease_id_is_rejected(self, client, lease_record, payment_type, payment_category):
        # blank strings are cleaned to None before validation
        response = client.post("/api/lease-payments/", json={
            "lease_id": "   ",
            "payment_type_id": payment_type["id"],
            "payment_category_id": payment_category["id"],
            "payment_date": "2024-02-01",
            "payment_amount": 500,
        })
        assert response.status_code == 422


class TestDeletePayment:

    def test_survivors_are_recomputed(self, client, pay):
        first = pay(400, "2024-01-05").json()["data"]
        middle = pay(300, "2024-02-05").json()["data"]
        last = pay(200, "2024-03-05").json()["data"]

        response = client.delete(f"/api/lease-payments/{middle['id']}")
        assert response.status_code == 200
        assert response.json()["status_code"] == "103"

        remaining = payments_of(client)
        assert sorted(remaining) == [first["id"], last["id"]]
        assert remaining[first["id"]]["total_paid"] == 400
        assert remaining[first["id"]]["balance"] == 1600
        assert remaining[last["id"]]["total_paid"] == 600
        assert remaining[last["id"]]["balance"] == 1400

    def test_deleting_only_payment(self, client, pay):
        only = pay(500, "2024-02-01").json()["data"]

        response = client.delete(f"/api/lease-payments/{only['id']}")

        assert response.status_code == 200
        assert payments_of(client) == {}

    def test_unknown_payment(self, client, lease_record):
        response = client.delete("/api/lease-payments/42")

        assert response.status_code == 404
        assert response.json()["status_code"] == "205"


class TestUpdatePayment:

    def test_amount_change_rewrites_ledger(self, client, pay):
        first = pay(400, "2024-01-05").json()["data"]
        second = pay(300, "2024-02-05").json()["data"]

        response = client.put("/api/lease-payments/", json={"id": first["id"], "payment_amount": 1000})
        assert response.status_code == 200
        assert response.json()["data"]["total_paid"] == 1000

        remaining = payments_of(client)
        assert remaining[second["id"]]["total_paid"] == 1300
        assert remaining[second["id"]]["balance"] == 700

    def test_moving_to_another_lease(self, client, pay, property_record, unit_record):
        created = client.post("/api/leases/", json={
            "lease_id": "L-200",
            "property_id": property_record["id"],
            "unit_id": unit_record["id"],
            "lease_date": "2024-02-01",
            "monthly_rent": 800,
        })
        assert created.status_code == 200

        first = pay(400, "2024-01-05").json()["data"]
        second = pay(300, "2024-02-05").json()["data"]

        response = client.put("/api/lease-payments/", json={"id": first["id"], "lease_id": "L-200"})
        assert response.status_code == 200

        moved = response.json()["data"]
        assert moved["lease_id"] == "L-200"
        assert moved["monthly_rent"] == 800
        assert moved["total_paid"] == 400
        # L-200 starts in February: one month accrued
        assert moved["balance"] == 400

        assert payments_of(client)[second["id"]]["total_paid"] == 300

    def test_moving_to_unknown_lease(self, client, pay):
        first = pay(400, "2024-01-05").json()["data"]

        response = client.put("/api/lease-payments/", json={"id": first["id"], "lease_id": "L-404"})

        assert response.status_code == 404
        assert payments_of(client)[first["id"]]["lease_id"] == "L-100"

    def test_clearing_a_required_field(self, client, pay):
        first = pay(400, "2024-01-05").json()["data"]

        response = client.put("/api/lease-payments/", json={"id": first["id"], "payment_amount": None})

        assert response.status_code == 400
        assert response.json()["message"] == "Payment amount is required"

    def test_unknown_payment(self, client, lease_record):
        response = client.put("/api/lease-payments/", json={"id": 77, "notes": "x"})
        assert response.status_code == 404


class TestReadPayments:

    def test_get_by_id(self, client, pay):
        created = pay(500, "2024-02-01").json()["data"]

        response = client.get(f"/api/lease-payments/{created['id']}")

        assert response.status_code == 200
        assert response.json()["balance"] == 1500

    def test_get_unknown(self, client):
        assert client.get("/api/lease-payments/9").status_code == 404

    def test_date_filters(self, client, pay):
        pay(100, "2024-01-05")
        pay(200, "2024-02-05")
        pay(300, "2024-03-05")

        response = client.get("/api/lease-payments/all", params={
            "date_from": "2024-02-01", "date_to": "2024-02-28"})

        body = response.json()
        assert body["total"] == 1
        assert body["items"][0]["payment_amount"] == 200

    def test_list_is_newest_first(self, client, pay):
        pay(100, "2024-01-05")
        pay(300, "2024-03-05")

        items = client.get("/api/lease-payments/all").json()["items"]

        assert [i["payment_date"] for i in items] == ["2024-03-05", "2024-01-05"]


class TestLedgerSummary:

    def test_summary(self, client, pay):
        pay(1000, "2024-01-05")
        pay(400, "2024-02-05")

        response = client.get("/api/lease-payments/ledger/L-100")

        assert response.status_code == 200
        body = response.json()
        assert body["as_of"] == "2024-03-15"
        assert body["months_elapsed"] == 2
        assert body["expected_total_rent"] == 2000
        assert body["total_paid"] == 1400
        assert body["balance"] == 600
        assert body["standing"] == "arrears"
        assert [p["payment_amount"] for p in body["payments"]] == [1000, 400]

    def test_credit_standing(self, client, pay):
        pay(2500, "2024-01-05")

        body = client.get("/api/lease-payments/ledger/L-100").json()

        assert body["balance"] == -500
        assert body["standing"] == "credit"

    def test_unknown_lease(self, client):
        response = client.get("/api/lease-payments/ledger/L-404")

        assert response.status_code == 404
        assert response.json()["status_code"] == "205"
