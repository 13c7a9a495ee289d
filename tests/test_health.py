"""Tests for the /health endpoint."""

from fastapi.testclient import TestClient


def test_health_returns_ok(client: TestClient) -> None:
    """GET /health should return 200 with status 'ok'."""
    response = client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["city"] == "ready"


def test_health_without_city(client: TestClient) -> None:
    """Before startup the city slot is empty."""
    client.app.state.city = None
    response = client.get("/health")
    assert response.json()["status"] == "error"
