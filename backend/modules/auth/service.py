"""
Authentication service implementation.

Validates Supabase JWT tokens and wraps the Supabase Auth admin API.
"""

import logging
from datetime import datetime, timezone
from typing import Optional
import jwt

from pydantic import ValidationError
from supabase import Client

from shared.config import get_settings
from shared.database import get_supabase_client
from shared.models import AuthenticatedUser

from .interfaces import IIdentityProvider
from .models import JWTPayload
from .exceptions import (
    AuthNotConfiguredError,
    InvalidTokenError,
    ExpiredTokenError,
    MissingTokenError,
    IdentityNotFoundError,
    IdentityServiceError,
)

logger = logging.getLogger(__name__)


class AuthService(IIdentityProvider):
    """
    Supabase Auth implementation of the identity provider.

    Tokens are validated locally with the project's JWT secret; sign-out
    and deletion go through the service-role admin API.
    """

    def __init__(self, db: Optional[Client] = None):
        self._settings = get_settings()
        self._db = db

    @property
    def db(self) -> Client:
        # Token validation never needs the client, so create it lazily
        if self._db is None:
            self._db = get_supabase_client()
        return self._db

    async def validate_token(self, token: str) -> AuthenticatedUser:
        """
        Validate a JWT token and return the authenticated user.

        This implementation validates Supabase JWTs using the JWT secret.
        """
        if not token:
            raise MissingTokenError()

        if not self._settings.supabase_jwt_secret:
            raise AuthNotConfiguredError()

        try:
            payload = jwt.decode(
                token,
                self._settings.supabase_jwt_secret,
                algorithms=["HS256"],
                audience="authenticated",
            )
        except jwt.ExpiredSignatureError:
            raise ExpiredTokenError()
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError(f"Invalid token: {e}")

        try:
            jwt_payload = JWTPayload(**payload)
            if not jwt_payload.email:
                raise InvalidTokenError("Invalid token: no email claim")

            return AuthenticatedUser(
                id=jwt_payload.sub,
                email=jwt_payload.email,
                email_verified=jwt_payload.email_confirmed_at is not None,
                last_sign_in=datetime.fromtimestamp(jwt_payload.iat, tz=timezone.utc),
                access_token=token,
            )
        except ValidationError as e:
            # Signed but unusable claims, e.g. an undeliverable email domain
            raise InvalidTokenError(
                f"Invalid token claims: {e.error_count()} invalid field(s)"
            ) from e

    async def get_current_user(self, token: Optional[str]) -> Optional[AuthenticatedUser]:
        """Return the session's user, or None for a missing or unusable token."""
        if not token:
            return None
        try:
            return await self.validate_token(token)
        except (MissingTokenError, InvalidTokenError, ExpiredTokenError) as e:
            logger.debug(f"No current user: {e.message}")
            return None

    async def sign_out(self, token: str) -> None:
        """Revoke every session of the token's user."""
        if not token:
            raise MissingTokenError()
        try:
            self.db.auth.admin.sign_out(token)
        except Exception as e:
            raise IdentityServiceError(f"Sign-out failed: {e}", operation="sign_out") from e

    async def delete_identity(self, user_id: str) -> None:
        """Delete an auth user through the admin API."""
        try:
            self.db.auth.admin.delete_user(user_id)
        except Exception as e:
            if getattr(e, "status", None) == 404:
                raise IdentityNotFoundError(user_id) from e
            raise IdentityServiceError(
                f"Failed to delete identity {user_id}: {e}",
                operation="delete_identity",
            ) from e
        logger.info("Deleted identity", extra={"user_id": user_id})


# Module-level instance getter
_service_instance: Optional[AuthService] = None


def get_auth_service() -> AuthService:
    """Get the auth service singleton."""
    global _service_instance
    if _service_instance is None:
        _service_instance = AuthService()
    return _service_instance


def reset_auth_service() -> None:
    """Reset the auth service singleton (for testing)."""
    global _service_instance
    _service_instance = None
