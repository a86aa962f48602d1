"""
Base exception classes for the Gatehouse backend.

Each module should define its own exceptions that inherit from these bases.
This enables consistent error handling across the application: the API
error handler maps each base class to one HTTP status.
"""

from typing import Optional, Any


class GatehouseError(Exception):
    """
    Base exception for all Gatehouse errors.

    All custom exceptions should inherit from this class.
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class NotFoundError(GatehouseError):
    """Resource not found."""

    pass


class ValidationError(GatehouseError):
    """Input validation failed."""

    pass


class AuthenticationError(GatehouseError):
    """Authentication failed (invalid, expired or missing session)."""

    pass


class AuthorizationError(GatehouseError):
    """Authorization failed (insufficient permissions)."""

    pass


class ConflictError(GatehouseError):
    """A concurrent write collided with this one and could not be resolved."""

    pass


class ExternalServiceError(GatehouseError):
    """Error communicating with an external service."""

    def __init__(
        self,
        message: str,
        service: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, code, details)
        self.service = service
        self.details["service"] = service


class PartialFailureError(GatehouseError):
    """
    A multi-step operation stopped halfway and left inconsistent state.

    Distinct from a clean failure: something was mutated and could not be
    put back, so an operator has to reconcile by hand.
    """

    def __init__(
        self,
        message: str,
        completed: list[str],
        failed: str,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, code="PARTIAL_FAILURE", details=details)
        self.completed = completed
        self.failed = failed
        self.details["completed"] = completed
        self.details["failed"] = failed
