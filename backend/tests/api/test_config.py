"""Tests for API configuration."""

from api.config import APISettings


class TestAPISettings:
    def test_default_values(self):
        """Should have sensible defaults."""
        settings = APISettings(_env_file=None)
        assert settings.host == "0.0.0.0"
        assert settings.port == 8000
        assert settings.debug is False
        assert settings.reload is False
        assert settings.supabase_db_url == ""

    def test_env_override(self, monkeypatch):
        """Server settings use the GATEHOUSE_ prefix."""
        monkeypatch.setenv("GATEHOUSE_PORT", "9000")
        monkeypatch.setenv("GATEHOUSE_DEBUG", "true")
        monkeypatch.setenv("PORT", "1234")
        settings = APISettings(_env_file=None)
        assert settings.port == 9000
        assert settings.debug is True

    def test_cors_defaults(self):
        settings = APISettings(_env_file=None)
        assert "http://localhost:5173" in settings.cors_origins
        assert settings.cors_allow_credentials is True
        assert settings.cors_allow_methods == ["*"]
