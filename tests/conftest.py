"""
Pytest fixtures for the property service test suite.

Every test runs against a fresh in-memory SQLite database. The ledger clock
is pinned to ``TODAY`` so running balances are deterministic.
"""

import os

# must be set before shared.core.config is imported
os.environ["DATABASE_URL"] = "sqlite://"
os.environ.setdefault("LOG_LEVEL", "WARNING")

from datetime import date

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from shared.core.database import Base, get_property_db, property_engine
from property_service.app.core.dependencies import get_ledger_clock
from property_service.app.main import app

TODAY = date(2024, 3, 15)

TestingSessionLocal = sessionmaker(
    autocommit=False, autoflush=False, bind=property_engine)


@pytest.fixture(autouse=True)
def fresh_schema():
    Base.metadata.drop_all(bind=property_engine)
    Base.metadata.create_all(bind=property_engine)
    yield
    Base.metadata.drop_all(bind=property_engine)


@pytest.fixture
def client():
    def override_get_db():
        session = TestingSessionLocal()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_property_db] = override_get_db
    app.dependency_overrides[get_ledger_clock] = lambda: (lambda: TODAY)
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def property_record(client):
    response = client.post("/api/properties/", json={
        "name": "Maple Court",
        "address": "12 Maple St",
        "city": "Springfield",
        "state": "il",
        "zipcode": 62701,
        "unit_count": 4,
    })
    assert response.status_code == 200, response.text
    return response.json()["data"]


@pytest.fixture
def unit_record(client, property_record):
    response = client.post("/api/units/", json={
        "property_id": property_record["id"],
        "unit_number": "1A",
        "bedrooms": 2,
        "bathrooms": 1,
    })
    assert response.status_code == 200, response.text
    return response.json()["data"]


@pytest.fixture
def lease_record(client, property_record, unit_record):
    response = client.post("/api/leases/", json={
        "lease_id": "L-100",
        "property_id": property_record["id"],
        "unit_id": unit_record["id"],
        "lease_date": "2024-01-01",
        "lease_start_date": "2024-01-01",
        "lease_end_date": "2024-12-31",
        "lease_term": 12,
        "monthly_rent": "1000.00",
        "security_deposit": "1000.00",
    })
    assert response.status_code == 200, response.text
    return response.json()["data"]


@pytest.fixture
def payment_type(client):
    response = client.post("/api/payment-types/", json={"payment_type": "Check"})
    assert response.status_code == 200, response.text
    return response.json()["data"]


@pytest.fixture
def payment_category(client):
    response = client.post("/api/payment-categories/", json={
        "payment_category": "Rent",
        "description": "Monthly rent",
    })
    assert response.status_code == 200, response.text
    return response.json()["data"]


@pytest.fixture
def pay(client, lease_record, payment_type, payment_category):
    """Post a lease payment on L-100 and return the HTTP response."""

    def _pay(amount, payment_date, lease_id=None, **extra):
        body = {
            "lease_id": lease_id or lease_record["lease_id"],
            "payment_type_id": payment_type["id"],
            "payment_category_id": payment_category["id"],
            "payment_date": payment_date,
            "payment_amount": amount,
        }
        body.update(extra)
        return client.post("/api/lease-payments/", json=body)

    return _pay
