"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules.
"""

import pytest
from datetime import datetime, timezone, timedelta
from typing import Optional
import jwt  # PyJWT

from api.dependencies import reset_container
from modules.auth.service import reset_auth_service
from modules.profiles.exceptions import ProfileNotFoundError, ProfileStoreError
from modules.profiles.models import (
    MembershipUpdate,
    Profile,
    ProfileChange,
    ProfileChangeKind,
    ProfileUpdate,
)
from modules.profiles.notifier import ProfileChangeNotifier, reset_profile_notifier
from modules.profiles.repository import reset_profile_repository


# Test JWT secret (only for testing)
TEST_JWT_SECRET = "test-secret-key-for-testing-only"


def create_test_token(
    user_id: str = "test-user-123",
    email: str = "test@example.com",
    expired: bool = False,
    email_verified: bool = True,
    secret: str = TEST_JWT_SECRET,
    audience: str = "authenticated",
) -> str:
    """
    Create a test JWT token for authentication.

    Args:
        user_id: User ID to include in the token
        email: Email to include in the token
        expired: If True, creates an expired token
        email_verified: Whether the email should be marked as verified
        secret: Signing secret
        audience: Audience claim

    Returns:
        JWT token string
    """
    now = datetime.now(timezone.utc)
    exp = now - timedelta(hours=1) if expired else now + timedelta(hours=1)

    payload = {
        "sub": user_id,
        "email": email,
        "email_confirmed_at": now.isoformat() if email_verified else None,
        "aud": audience,
        "role": "authenticated",
        "exp": int(exp.timestamp()),
        "iat": int(now.timestamp()),
    }
    return jwt.encode(payload, secret, algorithm="HS256")


def make_profile(
    user_id: str = "test-user-123",
    email: str = "test@example.com",
    is_approved: bool = False,
    is_admin: bool = False,
    full_name: Optional[str] = None,
    created_at: str = "2024-01-01T00:00:00+00:00",
) -> Profile:
    """Build a Profile with sensible defaults."""
    return Profile(
        id=f"profile-{user_id}",
        user_id=user_id,
        email=email,
        full_name=full_name,
        is_approved=is_approved,
        is_admin=is_admin,
        created_at=created_at,
        updated_at=created_at,
    )


def profile_row(**overrides) -> dict:
    """A user_profiles row as the store returns it."""
    row = {
        "id": "profile-1",
        "user_id": "test-user-123",
        "email": "test@example.com",
        "full_name": "",
        "phone_number": None,
        "bio": None,
        "profile_image_url": None,
        "is_approved": False,
        "is_admin": False,
        "created_at": "2024-01-01T00:00:00+00:00",
        "updated_at": "2024-01-01T00:00:00+00:00",
    }
    row.update(overrides)
    return row


@pytest.fixture(autouse=True)
def reset_singletons():
    """Reset service singletons before and after each test."""
    reset_auth_service()
    reset_profile_repository()
    reset_profile_notifier()
    reset_container()
    yield
    reset_auth_service()
    reset_profile_repository()
    reset_profile_notifier()
    reset_container()


@pytest.fixture
def test_user_id() -> str:
    """Provide a consistent test user ID."""
    return "test-user-123"


@pytest.fixture
def test_user_email() -> str:
    """Provide a consistent test user email."""
    return "test@example.com"


@pytest.fixture
def auth_token(test_user_id: str, test_user_email: str) -> str:
    """Create a valid auth token for testing."""
    return create_test_token(user_id=test_user_id, email=test_user_email)


@pytest.fixture
def auth_headers(auth_token: str) -> dict[str, str]:
    """Create authorization headers with a valid token."""
    return {"Authorization": f"Bearer {auth_token}"}


@pytest.fixture
def jwt_secret() -> str:
    """The secret test tokens are signed with."""
    return TEST_JWT_SECRET


@pytest.fixture
def token_factory():
    """Factory fixture for signed test tokens."""
    return create_test_token


@pytest.fixture
def profile_factory():
    """Factory fixture for Profile models."""
    return make_profile


@pytest.fixture
def row_factory():
    """Factory fixture for raw user_profiles rows."""
    return profile_row


class InMemoryProfiles:
    """Dict-backed stand-in for ProfileRepository that still publishes changes."""

    def __init__(self, notifier: Optional[ProfileChangeNotifier] = None):
        self.rows: dict[str, Profile] = {}
        self.notifier = notifier or ProfileChangeNotifier()
        self.fail_restore = False

    def add(self, profile: Profile) -> Profile:
        self.rows[profile.user_id] = profile
        return profile

    async def get(self, user_id: str) -> Profile:
        if user_id not in self.rows:
            raise ProfileNotFoundError(user_id)
        return self.rows[user_id]

    async def find(self, user_id: str) -> Optional[Profile]:
        return self.rows.get(user_id)

    async def ensure(self, user_id: str, email: str) -> Profile:
        if user_id not in self.rows:
            self._write(ProfileChangeKind.CREATED, make_profile(user_id=user_id, email=email))
        return self.rows[user_id]

    async def update(self, user_id: str, changes: ProfileUpdate) -> Profile:
        return self._apply(user_id, changes.changes())

    async def update_membership(self, user_id: str, changes: MembershipUpdate) -> Profile:
        return self._apply(user_id, changes.changes())

    async def delete(self, user_id: str) -> Profile:
        profile = await self.get(user_id)
        del self.rows[user_id]
        self.notifier.publish(ProfileChange(kind=ProfileChangeKind.DELETED, user_id=user_id, profile=profile))
        return profile

    async def restore(self, profile: Profile) -> Profile:
        if self.fail_restore:
            raise ProfileStoreError("restore refused", operation="restore")
        return self._write(ProfileChangeKind.CREATED, profile)

    async def list_pending(self) -> list[Profile]:
        return [p for p in await self.list_all() if not p.is_approved]

    async def list_all(self) -> list[Profile]:
        return sorted(self.rows.values(), key=lambda p: p.created_at, reverse=True)

    def _apply(self, user_id: str, values: dict) -> Profile:
        if user_id not in self.rows:
            raise ProfileNotFoundError(user_id)
        profile = self.rows[user_id].model_copy(update=values)
        return self._write(ProfileChangeKind.UPDATED, profile)

    def _write(self, kind: ProfileChangeKind, profile: Profile) -> Profile:
        self.rows[profile.user_id] = profile
        self.notifier.publish(ProfileChange(kind=kind, user_id=profile.user_id, profile=profile))
        return profile


@pytest.fixture
def memory_profiles() -> InMemoryProfiles:
    """An empty in-memory profile store with its own notifier."""
    return InMemoryProfiles()
