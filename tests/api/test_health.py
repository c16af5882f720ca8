"""
Test suite for health endpoint and shared middleware.

System role: Verification of liveness probe
"""

from fastapi.testclient import TestClient


class TestHealth:
    """Test suite for GET /health."""

    def test_health_ok(self, client: TestClient) -> None:
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "message": "Server Healthy"}

    def test_correlation_id_minted(self, client: TestClient) -> None:
        response = client.get("/health")
        assert response.headers.get("X-Correlation-ID")

    def test_correlation_id_echoed(self, client: TestClient) -> None:
        response = client.get("/health", headers={"X-Correlation-ID": "abc-123"})
        assert response.headers["X-Correlation-ID"] == "abc-123"

    def test_cors_allows_any_origin(self, client: TestClient) -> None:
        response = client.get("/health", headers={"Origin": "http://example.com"})
        assert response.headers["access-control-allow-origin"] == "*"
