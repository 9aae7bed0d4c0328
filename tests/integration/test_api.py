"""Integration tests for API endpoints"""

import pytest
from datetime import date
from decimal import Decimal
from unittest.mock import patch
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session
from time_deposits.infrastructure.database.repositories import (
    TimeDepositRepository,
    WithdrawalRepository,
)
from time_deposits.infrastructure.database.session import seed_default_deposits


@pytest.fixture
def seeded(db: Session) -> Session:
    """Reference deposits plus one withdrawal on the basic deposit"""
    seed_default_deposits(db)
    basic = TimeDepositRepository(db).find_by_plan_type("basic")[0]
    WithdrawalRepository(db).create(basic.id, Decimal("500.00"), date(2024, 1, 15))
    db.commit()
    return db


def test_health_endpoint(client: TestClient):
    """Test health check endpoint"""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_metrics_endpoint(client: TestClient):
    """Test Prometheus metrics endpoint"""
    response = client.get("/metrics")
    assert response.status_code == 200
    assert "time_deposit_accruals_total" in response.text


def test_request_id_header(client: TestClient):
    """Every response is tagged with a request ID, the caller's if given"""
    assert client.get("/health").headers["X-Request-ID"]
    response = client.get("/health", headers={"X-Request-ID": "req-123"})
    assert response.headers["X-Request-ID"] == "req-123"


def test_get_all_time_deposits(client: TestClient, seeded: Session):
    """GET /api/v1/time-deposits returns seeded deposits with withdrawals"""
    response = client.get("/api/v1/time-deposits")

    assert response.status_code == 200
    data = response.json()
    assert len(data) == 3
    assert sorted(d["plan_type"] for d in data) == ["basic", "premium", "student"]

    basic = next(d for d in data if d["plan_type"] == "basic")
    assert basic["balance"] == 10000.0
    assert basic["days"] == 45
    assert basic["withdrawals"] == [{"id": 1, "amount": 500.0, "date": "2024-01-15"}]


def test_get_all_time_deposits_empty(client: TestClient):
    response = client.get("/api/v1/time-deposits")
    assert response.status_code == 200
    assert response.json() == []


def test_get_time_deposit_by_id(client: TestClient, seeded: Session):
    deposit_id = TimeDepositRepository(seeded).find_by_plan_type("premium")[0].id

    response = client.get(f"/api/v1/time-deposits/{deposit_id}")

    assert response.status_code == 200
    assert response.json()["plan_type"] == "premium"
    assert response.json()["balance"] == 50000.0


def test_get_time_deposit_not_found(client: TestClient):
    """Unknown ids get the uniform 404 body"""
    response = client.get("/api/v1/time-deposits/999")

    assert response.status_code == 404
    body = response.json()
    assert body["error_code"] == "NOT_FOUND"
    assert "timestamp" in body


def test_get_time_deposit_invalid_id(client: TestClient):
    """Non-integer ids are a bad request"""
    response = client.get("/api/v1/time-deposits/abc")

    assert response.status_code == 400
    assert response.json()["error_code"] == "BAD_REQUEST"


def test_unknown_route_not_found(client: TestClient):
    response = client.get("/api/v1/nothing-here")
    assert response.status_code == 404
    assert response.json()["error_code"] == "NOT_FOUND"


def test_update_balances_endpoint(client: TestClient, seeded: Session):
    """POST update-balances reports the count and persists new balances"""
    response = client.post("/api/v1/time-deposits/update-balances")

    assert response.status_code == 200
    data = response.json()
    assert data["message"] == "Balances updated successfully"
    assert data["updated_count"] == 3
    assert data["timestamp"]

    balances = {d["plan_type"]: d["balance"] for d in client.get("/api/v1/time-deposits").json()}
    assert balances["basic"] == pytest.approx(10008.33, abs=0.01)
    assert balances["student"] == pytest.approx(5012.50, abs=0.01)
    assert balances["premium"] == pytest.approx(50208.33, abs=0.01)


def test_update_balances_twice_compounds(client: TestClient, seeded: Session):
    """Each run credits interest again on the grown balance"""
    client.post("/api/v1/time-deposits/update-balances")
    first = {d["plan_type"]: d["balance"] for d in client.get("/api/v1/time-deposits").json()}
    client.post("/api/v1/time-deposits/update-balances")
    second = {d["plan_type"]: d["balance"] for d in client.get("/api/v1/time-deposits").json()}

    assert all(second[plan] > first[plan] for plan in first)


def test_update_balances_no_deposits(client: TestClient):
    response = client.post("/api/v1/time-deposits/update-balances")

    assert response.status_code == 200
    assert response.json()["updated_count"] == 0


@patch("time_deposits.services.deposits.TimeDepositService.update_all_balances")
def test_update_balances_failure_hides_details(mock_update, client: TestClient):
    """Unexpected failures return a generic 500 body"""
    mock_update.side_effect = RuntimeError("connection reset by peer")

    response = client.post("/api/v1/time-deposits/update-balances")

    assert response.status_code == 500
    body = response.json()
    assert body["error_code"] == "INTERNAL_ERROR"
    assert "connection reset" not in body["message"]
