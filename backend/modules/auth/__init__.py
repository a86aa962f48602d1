"""
Authentication module.

Handles JWT validation and the identity provider boundary (Supabase Auth).

Public API:
- IIdentityProvider: Interface for identity operations
- JWTPayload: Decoded Supabase token claims
- Auth exceptions: InvalidTokenError, ExpiredTokenError, etc.
"""

from .interfaces import IIdentityProvider
from .models import JWTPayload
from .exceptions import (
    InvalidTokenError,
    ExpiredTokenError,
    MissingTokenError,
    AuthNotConfiguredError,
    IdentityNotFoundError,
    IdentityServiceError,
)

__all__ = [
    # Interface
    "IIdentityProvider",
    # Models
    "JWTPayload",
    # Exceptions
    "InvalidTokenError",
    "ExpiredTokenError",
    "MissingTokenError",
    "AuthNotConfiguredError",
    "IdentityNotFoundError",
    "IdentityServiceError",
]
