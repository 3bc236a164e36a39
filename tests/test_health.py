# =============================================================================
# tests/test_health.py - Health and Root Endpoint Tests
# =============================================================================

from app.config import settings


class TestHealthEndpoints:
    """Tests for the health check routes."""

    def test_health_check(self, client):
        """Test the basic health check response."""
        response = client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["environment"] == settings.ENVIRONMENT
        assert body["version"] == settings.APP_VERSION
        assert body["timestamp"]

    def test_liveness_check(self, client):
        """Test the liveness probe."""
        response = client.get("/health/live")

        assert response.status_code == 200
        assert response.json()["status"] == "alive"


class TestRootEndpoint:
    """Tests for GET /."""

    def test_root_returns_api_info(self, client):
        """Test that the root lists name, version and useful links."""
        response = client.get("/")

        assert response.status_code == 200
        body = response.json()
        assert body["name"] == "Web API Example"
        assert body["health"] == "/health"
        # conftest runs the app in development mode
        assert body["docs"] == "/docs"

    def test_unknown_route_is_not_found(self, client):
        """Test that unmatched paths fall through to the framework's 404."""
        response = client.get("/api/unknown")

        assert response.status_code == 404
