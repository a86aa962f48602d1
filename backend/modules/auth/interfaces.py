"""
Identity provider interface.

Other modules should depend on IIdentityProvider, not the concrete
implementation. This enables testing with mocks and swapping Supabase
Auth for another provider.
"""

from typing import Protocol, Optional, runtime_checkable

from shared.models import AuthenticatedUser


@runtime_checkable
class IIdentityProvider(Protocol):
    """
    Interface for identity operations.

    Covers token validation, current-user lookup, sign-out and the
    administrative deletion used when a membership request is rejected.
    """

    async def validate_token(self, token: str) -> AuthenticatedUser:
        """
        Validate a JWT token and return the authenticated user.

        Args:
            token: JWT access token from Supabase Auth

        Returns:
            AuthenticatedUser with user ID and basic info

        Raises:
            AuthenticationError: If token is missing, invalid or expired
        """
        ...

    async def get_current_user(self, token: Optional[str]) -> Optional[AuthenticatedUser]:
        """
        Look up the user behind a session token.

        Returns:
            AuthenticatedUser, or None when there is no valid session
        """
        ...

    async def sign_out(self, token: str) -> None:
        """
        Revoke the session behind a token.

        Raises:
            IdentityServiceError: If the provider call fails
        """
        ...

    async def delete_identity(self, user_id: str) -> None:
        """
        Permanently delete an identity from the provider.

        Raises:
            IdentityNotFoundError: If the identity does not exist
            IdentityServiceError: If the provider call fails
        """
        ...
