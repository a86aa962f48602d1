"""
Profiles module exceptions.
"""

from typing import Any, Optional

from shared.exceptions import (
    ConflictError,
    ExternalServiceError,
    NotFoundError,
    ValidationError,
)


class ProfileNotFoundError(NotFoundError):
    """Raised when no profile exists for an identity."""

    def __init__(self, user_id: str):
        super().__init__(
            f"Profile not found: {user_id}",
            code="PROFILE_NOT_FOUND",
            details={"user_id": user_id},
        )


class ProfileConflictError(ConflictError):
    """Raised when a concurrent profile creation could not be reconciled."""

    def __init__(self, user_id: str):
        super().__init__(
            f"Profile creation raced and no profile could be read back: {user_id}",
            code="PROFILE_CONFLICT",
            details={"user_id": user_id},
        )


class ProtectedFieldError(ValidationError):
    """Raised when a user-facing update tries to set a protected field."""

    def __init__(self, fields: list[str]):
        super().__init__(
            f"Fields cannot be changed through a profile update: {', '.join(fields)}",
            code="PROTECTED_FIELD",
            details={"fields": fields},
        )


class InvalidProfileUpdateError(ValidationError):
    """Raised when a profile update payload fails validation."""

    def __init__(self, errors: list[dict[str, Any]]):
        super().__init__(
            "Invalid profile update",
            code="INVALID_PROFILE_UPDATE",
            details={"errors": errors},
        )


class ProfileStoreError(ExternalServiceError):
    """Raised when the profile store rejects or fails a query."""

    def __init__(self, message: str, operation: str, store_code: Optional[str] = None):
        super().__init__(
            message,
            service="supabase",
            code="PROFILE_STORE_ERROR",
            details={"operation": operation, "store_code": store_code},
        )
