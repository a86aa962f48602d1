"""Tests for health check endpoints."""

from unittest.mock import MagicMock, patch

from fastapi.testclient import TestClient

from api import app


client = TestClient(app)


class TestHealthEndpoints:
    def test_health_check(self):
        """Health endpoint should return 200 with status."""
        response = client.get("/api/health")
        assert response.status_code == 200
        data = response.json()
        assert set(data.keys()) == {"status", "version"}
        assert data["status"] == "healthy"

    @patch("api.routes.health.get_supabase_client")
    @patch("api.routes.health.get_settings")
    def test_ready(self, mock_settings, mock_client):
        mock_settings.return_value.supabase_jwt_secret = "secret"
        mock_settings.return_value.profiles_table = "user_profiles"
        mock_client.return_value = MagicMock()

        response = client.get("/api/ready")

        assert response.status_code == 200
        assert response.json() == {"status": "ready", "database": "connected", "auth": "configured"}
        mock_client.return_value.table.assert_called_once_with("user_profiles")

    @patch("api.routes.health.get_supabase_client")
    @patch("api.routes.health.get_settings")
    def test_not_ready_without_database(self, mock_settings, mock_client):
        """An unreachable store is reported, not raised."""
        mock_settings.return_value.supabase_jwt_secret = "secret"
        mock_settings.return_value.profiles_table = "user_profiles"
        mock_client.side_effect = RuntimeError("Supabase configuration missing")

        response = client.get("/api/ready")

        assert response.status_code == 200
        assert response.json()["status"] == "not_ready"
        assert response.json()["database"] == "unavailable"

    @patch("api.routes.health.get_supabase_client")
    @patch("api.routes.health.get_settings")
    def test_not_ready_without_jwt_secret(self, mock_settings, mock_client):
        mock_settings.return_value.supabase_jwt_secret = ""
        mock_settings.return_value.profiles_table = "user_profiles"
        mock_client.return_value = MagicMock()

        data = client.get("/api/ready").json()

        assert data["status"] == "not_ready"
        assert data["auth"] == "not_configured"
