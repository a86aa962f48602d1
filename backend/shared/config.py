"""
Centralized configuration for the Gatehouse backend.

All settings are loaded from environment variables with sensible defaults.
Module-specific settings should be namespaced (e.g., STRIPE_*, SUPABASE_*).
"""

from functools import lru_cache
from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Gatehouse API"
    app_version: str = "0.1.0"
    debug: bool = False

    # Logging
    log_level: str = "INFO"
    log_format: str = "json"  # "json" or "text"

    # Supabase
    supabase_url: str = ""
    supabase_anon_key: str = ""
    supabase_service_role_key: str = ""
    supabase_jwt_secret: str = ""

    # Tables owned by this service and views owned by the Stripe sync pipeline
    profiles_table: str = "user_profiles"
    events_table: str = "events"
    suggestions_table: str = "event_suggestions"
    subscriptions_view: str = "stripe_user_subscriptions"

    # Checkout (Stripe session creation runs in a Supabase edge function)
    checkout_endpoint: Optional[str] = None
    checkout_timeout_seconds: float = 30.0

    # Frontend URLs (for redirects)
    frontend_url: str = "http://localhost:5173"

    @property
    def resolved_checkout_endpoint(self) -> str:
        """Checkout endpoint, defaulting to the stripe-checkout edge function."""
        if self.checkout_endpoint:
            return self.checkout_endpoint
        return f"{self.supabase_url.rstrip('/')}/functions/v1/stripe-checkout"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
