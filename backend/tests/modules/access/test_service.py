"""
Tests for AccessService and its interplay with admission.
"""

import pytest
from unittest.mock import AsyncMock, MagicMock

from modules.access.models import AccessState, PENDING_APPROVAL_MESSAGE
from modules.access.service import AccessService
from modules.admission.service import AdmissionController
from modules.auth.exceptions import IdentityServiceError
from modules.profiles.exceptions import ProfileStoreError
from shared.models import AuthenticatedUser


def _user(user_id: str = "u1") -> AuthenticatedUser:
    return AuthenticatedUser(id=user_id, email=f"{user_id}@example.com", access_token=f"token-{user_id}")


@pytest.fixture
def identity():
    mock = MagicMock()
    mock.get_current_user = AsyncMock(side_effect=lambda token: _user(token.removeprefix("token-")) if token else None)
    mock.delete_identity = AsyncMock()
    return mock


@pytest.fixture
def service(identity, memory_profiles):
    return AccessService(identity, memory_profiles, memory_profiles.notifier)


class TestResolve:
    @pytest.mark.asyncio
    async def test_no_token_is_unauthenticated(self, service):
        """No bearer token means no session."""
        decision = await service.resolve(None)
        assert decision.state == AccessState.UNAUTHENTICATED
        assert decision.redirect_to == "/login"

    @pytest.mark.asyncio
    async def test_first_sign_in_creates_pending_profile(self, service, memory_profiles):
        """A first sign-in creates an unapproved profile and lands on pending."""
        decision = await service.resolve("token-u1")

        assert decision.state == AccessState.PENDING_APPROVAL
        assert decision.message == PENDING_APPROVAL_MESSAGE
        assert memory_profiles.rows["u1"].is_approved is False

    @pytest.mark.asyncio
    async def test_approved_member_is_admitted(self, service, memory_profiles, profile_factory):
        """An approved profile is admitted."""
        memory_profiles.add(profile_factory(user_id="u1", is_approved=True))
        decision = await service.resolve("token-u1")
        assert decision.state == AccessState.ADMITTED

    @pytest.mark.asyncio
    async def test_identity_failure_degrades_to_unauthenticated(self, memory_profiles):
        """Identity provider errors are logged, not raised."""
        identity = MagicMock()
        identity.get_current_user = AsyncMock(side_effect=IdentityServiceError("down", operation="get_user"))
        service = AccessService(identity, memory_profiles)

        decision = await service.resolve("token-u1")

        assert decision.state == AccessState.UNAUTHENTICATED

    @pytest.mark.asyncio
    async def test_profile_store_failure_degrades_to_pending(self, identity, caplog):
        """A profile store failure never admits and never leaks the raw error."""
        profiles = MagicMock()
        profiles.ensure = AsyncMock(side_effect=ProfileStoreError("boom", operation="ensure"))
        service = AccessService(identity, profiles)

        decision = await service.resolve("token-u1")

        assert decision.state == AccessState.PENDING_APPROVAL
        assert "boom" not in (decision.message or "")
        assert "Profile load failed" in caplog.text

    @pytest.mark.asyncio
    async def test_resolve_releases_subscription(self, service, memory_profiles):
        """One-shot resolution leaves no listener behind."""
        await service.resolve("token-u1")
        assert memory_profiles.notifier.listener_count == 0


class TestApprovalFlow:
    @pytest.mark.asyncio
    async def test_approval_admits_on_next_evaluation(
        self, service, identity, memory_profiles, profile_factory
    ):
        """Sign in pending, get approved, be admitted on the very next check."""
        memory_profiles.add(profile_factory(user_id="admin", is_approved=True, is_admin=True))
        admission = AdmissionController(memory_profiles, identity)

        assert (await service.resolve("token-u1")).state == AccessState.PENDING_APPROVAL

        await admission.approve("admin", "u1")

        assert (await service.resolve("token-u1")).state == AccessState.ADMITTED

    @pytest.mark.asyncio
    async def test_open_context_follows_approval(
        self, service, identity, memory_profiles, profile_factory
    ):
        """A live context flips to ADMITTED when the approval is written."""
        memory_profiles.add(profile_factory(user_id="admin", is_approved=True, is_admin=True))
        admission = AdmissionController(memory_profiles, identity)
        context = service.open_context()
        states = []
        context.subscribe(lambda decision: states.append(decision.state))

        await service.load(context, "token-u1")
        await admission.approve("admin", "u1")

        assert context.decision.state == AccessState.ADMITTED
        assert states[-1] == AccessState.ADMITTED
        context.close()

    @pytest.mark.asyncio
    async def test_open_context_follows_rejection(
        self, service, identity, memory_profiles, profile_factory
    ):
        """A live context loses admission when the member is rejected."""
        memory_profiles.add(profile_factory(user_id="admin", is_approved=True, is_admin=True))
        memory_profiles.add(profile_factory(user_id="u1", is_approved=True))
        admission = AdmissionController(memory_profiles, identity)
        context = service.open_context()

        await service.load(context, "token-u1")
        assert context.decision.state == AccessState.ADMITTED

        await admission.reject("admin", "u1")

        assert context.decision.state == AccessState.PENDING_APPROVAL
        context.close()
