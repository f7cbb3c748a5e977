"""Integration tests for health check endpoints."""

from collections.abc import Callable
from unittest.mock import AsyncMock, MagicMock, patch

from fastapi.testclient import TestClient

from conftest import USER_A


class TestHealthEndpoints:
    """Tests for the liveness, readiness and auth probes."""

    def test_health_returns_healthy(self, client: TestClient) -> None:
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    @patch("wishlist_api.api.routes.health.check_database_connection", new_callable=AsyncMock)
    def test_ready_when_database_answers(self, mock_check: AsyncMock, client: TestClient) -> None:
        mock_check.return_value = {"healthy": True}

        response = client.get("/health/ready")

        assert response.status_code == 200
        assert response.json()["checks"][0]["name"] == "database"

    @patch("wishlist_api.api.routes.health.check_database_connection", new_callable=AsyncMock)
    def test_not_ready_when_database_fails(self, mock_check: AsyncMock, client: TestClient) -> None:
        mock_check.return_value = {"healthy": False, "error": "timeout"}

        response = client.get("/health/ready")

        assert response.status_code == 503
        data = response.json()
        assert data["status"] == "unhealthy"
        assert data["checks"][0]["error"] == "timeout"

    def test_auth_probe_echoes_identity(
        self, client: TestClient, auth_headers: Callable[..., dict[str, str]]
    ) -> None:
        response = client.get("/health/auth", headers=auth_headers())

        assert response.status_code == 200
        assert response.json()["user_id"] == USER_A

    def test_auth_probe_requires_token(self, client: TestClient) -> None:
        assert client.get("/health/auth").status_code == 401

    @patch("wishlist_api.api.middleware.request_size.get_settings")
    def test_oversized_body_is_rejected(
        self, mock_settings: MagicMock, client: TestClient, auth_headers: Callable[..., dict[str, str]]
    ) -> None:
        mock_settings.return_value.max_request_body_size = 16

        response = client.post(
            "/wishlists",
            headers=auth_headers(),
            json={"wishlist": {"name": "Bday", "item": "A very long item description"}},
        )

        assert response.status_code == 413
        assert response.json()["error"] == "request_too_large"
