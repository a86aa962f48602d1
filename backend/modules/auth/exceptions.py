"""
Authentication module exceptions.

These exceptions are raised by the auth module and can be caught
by API error handlers to return appropriate HTTP responses.
"""

from shared.exceptions import AuthenticationError, ExternalServiceError, NotFoundError


class InvalidTokenError(AuthenticationError):
    """Raised when a JWT token is invalid or malformed."""

    def __init__(self, message: str = "Invalid authentication token"):
        super().__init__(message, code="INVALID_TOKEN")


class ExpiredTokenError(AuthenticationError):
    """Raised when a JWT token has expired."""

    def __init__(self, message: str = "Authentication token has expired"):
        super().__init__(message, code="TOKEN_EXPIRED")


class MissingTokenError(AuthenticationError):
    """Raised when no authentication token is provided."""

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message, code="MISSING_TOKEN")


class AuthNotConfiguredError(AuthenticationError):
    """Raised when the server has no JWT secret to validate tokens with."""

    def __init__(self):
        super().__init__(
            "Server authentication not configured",
            code="AUTH_NOT_CONFIGURED",
        )


class IdentityNotFoundError(NotFoundError):
    """Raised when the identity provider has no account for an identity."""

    def __init__(self, user_id: str):
        super().__init__(
            f"Identity not found: {user_id}",
            code="IDENTITY_NOT_FOUND",
            details={"user_id": user_id},
        )


class IdentityServiceError(ExternalServiceError):
    """Raised when a call to the identity provider fails."""

    def __init__(self, message: str, operation: str):
        super().__init__(
            message,
            service="supabase_auth",
            code="IDENTITY_SERVICE_ERROR",
            details={"operation": operation},
        )
