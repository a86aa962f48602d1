"""
API test fixtures.

Routes run against a real AuthService (validating test tokens) and the
in-memory profile store; the Supabase client is a MagicMock.
"""

import pytest
from unittest.mock import MagicMock, patch
from fastapi.testclient import TestClient

from api import app
from api.dependencies import (
    get_access_service,
    get_admission_controller,
    get_identity_provider,
    get_profile_repository,
)
from modules.access.service import AccessService
from modules.admission.service import AdmissionController
from modules.auth.service import AuthService


@pytest.fixture
def identity(jwt_secret):
    """AuthService that accepts tokens from token_factory."""
    with patch("modules.auth.service.get_settings") as mock_settings:
        mock_settings.return_value.supabase_jwt_secret = jwt_secret
        service = AuthService(db=MagicMock())
    return service


@pytest.fixture
def client(identity, memory_profiles):
    """TestClient with identity and profile dependencies overridden."""
    app.dependency_overrides[get_identity_provider] = lambda: identity
    app.dependency_overrides[get_profile_repository] = lambda: memory_profiles
    app.dependency_overrides[get_access_service] = lambda: AccessService(
        identity, memory_profiles, memory_profiles.notifier,
    )
    app.dependency_overrides[get_admission_controller] = lambda: AdmissionController(
        memory_profiles, identity,
    )
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def headers_for(token_factory):
    """Authorization headers for a given identity."""
    def _headers(user_id: str, email: str = None) -> dict[str, str]:
        token = token_factory(user_id=user_id, email=email or f"{user_id}@example.com")
        return {"Authorization": f"Bearer {token}"}
    return _headers


@pytest.fixture
def member(memory_profiles, profile_factory):
    """An approved, non-admin member."""
    return memory_profiles.add(profile_factory(
        user_id="member", email="member@example.com", is_approved=True, full_name="Member One",
        created_at="2024-02-01T00:00:00+00:00",
    ))


@pytest.fixture
def admin(memory_profiles, profile_factory):
    """An approved administrator."""
    return memory_profiles.add(profile_factory(
        user_id="admin", email="admin@example.com", is_approved=True, is_admin=True,
        created_at="2024-01-01T00:00:00+00:00",
    ))


@pytest.fixture
def pending(memory_profiles, profile_factory):
    """A signed-up user awaiting approval."""
    return memory_profiles.add(profile_factory(
        user_id="pending", email="pending@example.com",
        created_at="2024-03-01T00:00:00+00:00",
    ))
