"""
Supabase client factory.

Two kinds of client are handed out:

- the service-role client, cached for the process, used where the backend
  acts on its own authority (profile bootstrap, admission decisions,
  identity deletion);
- user-scoped clients, built per call from a member's bearer token, for
  views whose RLS policies filter on ``auth.uid()``.
"""

from typing import Optional
from supabase import create_client, Client

from .config import Settings, get_settings

_service_client: Optional[Client] = None


def _require(settings: Settings, key_field: str, key_env: str) -> tuple[str, str]:
    """Return (url, key) or fail with the variables that need setting."""
    url = settings.supabase_url
    key = getattr(settings, key_field)
    if not url or not key:
        raise RuntimeError(
            "Supabase configuration missing. "
            f"Set SUPABASE_URL and {key_env} environment variables."
        )
    return url, key


def get_supabase_client() -> Client:
    """
    Get the service-role Supabase client (bypasses RLS).

    Raises:
        RuntimeError: If SUPABASE_URL or SUPABASE_SERVICE_ROLE_KEY is unset
    """
    global _service_client

    if _service_client is None:
        url, key = _require(get_settings(), "supabase_service_role_key", "SUPABASE_SERVICE_ROLE_KEY")
        _service_client = create_client(url, key)

    return _service_client


def get_supabase_user_client(access_token: str) -> Client:
    """
    Get a Supabase client that queries as the member owning ``access_token``.

    Only the PostgREST side is authorized with the token; nothing is
    stored in the client's auth session, so the client is safe to throw
    away after one request.
    """
    url, key = _require(get_settings(), "supabase_anon_key", "SUPABASE_ANON_KEY")
    client = create_client(url, key)
    client.postgrest.auth(access_token)
    return client


def reset_client_cache() -> None:
    """Drop the cached service-role client (tests, config reloads)."""
    global _service_client
    _service_client = None
