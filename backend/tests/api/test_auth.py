"""
Tests for the authentication and membership dependencies.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from api import app
from api.dependencies import get_community_service


@pytest.fixture
def community():
    service = MagicMock()
    service.list_events = AsyncMock(return_value=[])
    app.dependency_overrides[get_community_service] = lambda: service
    return service


class TestAuthentication:
    def test_missing_auth_header(self, client):
        """Request without auth header should return 401."""
        response = client.get("/api/users/me")
        assert response.status_code == 401
        assert response.json()["detail"] == "Missing authorization header"
        assert response.headers["WWW-Authenticate"] == "Bearer"

    def test_expired_token(self, client, token_factory):
        """Expired tokens are rejected with a specific message."""
        token = token_factory(expired=True)
        response = client.get("/api/users/me", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 401
        assert "expired" in response.json()["detail"].lower()

    def test_wrong_secret(self, client, token_factory):
        """Tokens signed with another secret are invalid."""
        token = token_factory(secret="some-other-secret")
        response = client.get("/api/users/me", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 401
        assert "invalid token" in response.json()["detail"].lower()

    def test_unusable_claims(self, client, headers_for):
        """A signed token whose claims don't validate is a 401, not a 500."""
        response = client.get("/api/users/me", headers=headers_for("u9", email="u9@corp.local"))
        assert response.status_code == 401
        assert "invalid token claims" in response.json()["detail"].lower()

    def test_valid_token_without_approval(self, client, headers_for, memory_profiles):
        """Signing in is enough to read one's own profile, which is created pending."""
        response = client.get("/api/users/me", headers=headers_for("newcomer"))
        assert response.status_code == 200
        assert response.json()["is_approved"] is False
        assert "newcomer" in memory_profiles.rows


class TestMembershipGate:
    def test_no_session(self, client, community):
        """Gated routes without a session are 401."""
        response = client.get("/api/community/events")
        assert response.status_code == 401
        assert response.json()["detail"] == "Authentication required"

    def test_bad_token_counts_as_no_session(self, client, community):
        """A garbage token is treated as signed out."""
        response = client.get("/api/community/events", headers={"Authorization": "Bearer nope"})
        assert response.status_code == 401

    def test_pending_member_is_refused(self, client, community, pending, headers_for):
        """Unapproved members get the pending-approval message."""
        response = client.get("/api/community/events", headers=headers_for("pending"))
        assert response.status_code == 403
        body = response.json()
        assert body["error"] == "MEMBERSHIP_PENDING"
        assert "awaiting approval" in body["message"]
        community.list_events.assert_not_awaited()

    def test_first_sign_in_is_pending(self, client, community, headers_for, memory_profiles):
        """A brand-new identity is admitted to nothing."""
        response = client.get("/api/community/events", headers=headers_for("fresh"))
        assert response.status_code == 403
        assert memory_profiles.rows["fresh"].is_approved is False

    def test_approved_member_passes(self, client, community, member, headers_for):
        response = client.get("/api/community/events", headers=headers_for("member"))
        assert response.status_code == 200

    def test_approval_takes_effect_on_next_request(self, client, community, admin, pending, headers_for):
        """Nothing is cached: approval is visible immediately."""
        assert client.get("/api/community/events", headers=headers_for("pending")).status_code == 403

        approve = client.post("/api/admin/members/pending/approve", headers=headers_for("admin"))
        assert approve.status_code == 200

        assert client.get("/api/community/events", headers=headers_for("pending")).status_code == 200

    def test_non_admin_cannot_reach_admin_routes(self, client, member, headers_for):
        response = client.get("/api/admin/members", headers=headers_for("member"))
        assert response.status_code == 403
        assert response.json()["error"] == "NOT_ADMIN"


class TestAccessEndpoint:
    def test_unauthenticated(self, client):
        """No token: unauthenticated, sent to login."""
        data = client.get("/api/access").json()
        assert data["state"] == "unauthenticated"
        assert data["redirect_to"] == "/login"

    def test_pending(self, client, pending, headers_for):
        data = client.get("/api/access", headers=headers_for("pending")).json()
        assert data["state"] == "pending_approval"
        assert data["redirect_to"] == "/login"
        assert data["user_id"] == "pending"
        assert "awaiting approval" in data["message"]

    def test_admitted_admin(self, client, admin, headers_for):
        data = client.get("/api/access", headers=headers_for("admin")).json()
        assert data["state"] == "admitted"
        assert data["is_admin"] is True
        assert data["redirect_to"] is None

    def test_expired_token_is_unauthenticated(self, client, token_factory):
        """The access endpoint never errors on a bad token."""
        token = token_factory(expired=True)
        response = client.get("/api/access", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 200
        assert response.json()["state"] == "unauthenticated"

    def test_unusable_email_claim_is_unauthenticated(self, client, headers_for):
        """A correctly signed token with an undeliverable email domain is no session."""
        response = client.get("/api/access", headers=headers_for("u9", email="u9@corp.local"))
        assert response.status_code == 200
        assert response.json()["state"] == "unauthenticated"
