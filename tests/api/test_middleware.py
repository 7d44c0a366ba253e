"""Tests for API middleware and error formatting."""

from fastapi.testclient import TestClient

from products_api.infrastructure.catalog_loader import get_catalog_loader
from products_api.main import app


class ExplodingCatalogLoader:
    """Loader that fails with an error the service does not expect."""

    async def load(self):
        raise RuntimeError("disk on fire")


class TestRequestIdMiddleware:
    """Tests for request ID correlation middleware."""

    def test_generates_request_id_if_not_provided(self, client: TestClient) -> None:
        """Should generate request ID if not in request headers."""
        response = client.get("/health")
        assert response.status_code == 200
        assert "X-Request-ID" in response.headers
        # UUID format
        request_id = response.headers["X-Request-ID"]
        assert len(request_id) == 36

    def test_uses_provided_request_id(self, client: TestClient) -> None:
        """Should use request ID from request headers."""
        custom_id = "custom-request-id-12345"
        response = client.get(
            "/health",
            headers={"X-Request-ID": custom_id},
        )
        assert response.status_code == 200
        assert response.headers["X-Request-ID"] == custom_id


class TestErrorFormat:
    """Tests for the uniform error body."""

    def test_error_carries_request_id(self, client: TestClient) -> None:
        """Error bodies echo the request ID."""
        response = client.get(
            "/products/abc",
            headers={"X-Request-ID": "req-1"},
        )
        assert response.status_code == 400
        data = response.json()
        assert set(data) == {"error_code", "message", "details", "request_id"}
        assert data["request_id"] == "req-1"

    def test_unknown_route_uses_error_format(self, client: TestClient) -> None:
        """Routing errors use the same body as domain errors."""
        response = client.get("/nope")
        assert response.status_code == 404
        assert response.json()["error_code"] == "ERROR"

    def test_method_not_allowed_keeps_allow_header(self, client: TestClient) -> None:
        """Starlette's 405 keeps its Allow header inside the uniform body."""
        response = client.post("/products")
        assert response.status_code == 405
        assert "GET" in response.headers["allow"]
        data = response.json()
        assert data["error_code"] == "ERROR"
        assert data["details"] == []

    def test_unhandled_error_becomes_internal_error(self, client: TestClient) -> None:
        """Unexpected exceptions answer 500 with the uniform body."""
        app.dependency_overrides[get_catalog_loader] = ExplodingCatalogLoader
        with TestClient(app, raise_server_exceptions=False) as failing_client:
            response = failing_client.get(
                "/products", headers={"X-Request-ID": "req-500"}
            )
        assert response.status_code == 500
        assert response.json() == {
            "error_code": "INTERNAL_ERROR",
            "message": "An internal error occurred",
            "details": [],
            "request_id": "req-500",
        }
