"""Tests for correlation ID header on all responses."""

from fastapi.testclient import TestClient

from powgate.main import app
from powgate.middleware.rate_limit import limiter


def test_correlation_id_on_success(client):
    """Test that correlation ID is included on successful responses."""
    response = client.get("/health")
    assert response.status_code == 200
    assert "X-Correlation-ID" in response.headers
    assert len(response.headers["X-Correlation-ID"]) == 8  # 4 bytes as hex


def test_correlation_id_on_bad_request(client):
    """Test that correlation ID is included on 400 responses (HTTPException)."""
    response = client.get("/api/v1/challenge", params={"difficulty": 0})
    assert response.status_code == 400
    assert len(response.headers["X-Correlation-ID"]) == 8


def test_correlation_id_on_validation_error(client):
    """Test that correlation ID is included on validation error (422) responses."""
    response = client.post("/api/v1/solution", json={"data": "only-data"})
    assert response.status_code == 422
    assert len(response.headers["X-Correlation-ID"]) == 8


def test_correlation_id_on_rejected_solution(client):
    """Test that correlation ID is included when a solution is rejected."""
    response = client.post(
        "/api/v1/solution",
        json={"data": "!!InvalidBase64!!", "value": "0", "hash": "0" * 64},
    )
    assert response.status_code == 200
    assert len(response.headers["X-Correlation-ID"]) == 8


def test_correlation_id_on_unhandled_exception(monkeypatch):
    """Test that correlation ID is included on 500 responses from unhandled exceptions."""
    from powgate.routers import challenges

    def raise_error(*args, **kwargs):
        raise RuntimeError("Unexpected clock error")

    monkeypatch.setattr(challenges, "get_timelimit", raise_error)
    limiter.enabled = False

    try:
        with TestClient(app, raise_server_exceptions=False) as test_client:
            response = test_client.post(
                "/api/v1/solution",
                json={"data": "!!InvalidBase64!!", "value": "0", "hash": "0" * 64},
            )

            assert response.status_code == 500
            assert len(response.headers["X-Correlation-ID"]) == 8
            assert response.json()["detail"] == "Internal Server Error"
    finally:
        limiter.enabled = True


def test_correlation_ids_unique_across_requests(client):
    """Test that each request gets a unique correlation ID."""
    response1 = client.get("/health")
    response2 = client.get("/health")

    corr_id_1 = response1.headers.get("X-Correlation-ID")
    corr_id_2 = response2.headers.get("X-Correlation-ID")

    assert corr_id_1 != corr_id_2, "Correlation IDs should be unique across requests"
