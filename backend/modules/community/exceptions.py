"""
Community module exceptions.
"""

from shared.exceptions import AuthorizationError, ExternalServiceError, NotFoundError, ValidationError


class EventNotFoundError(NotFoundError):
    """Raised when an event doesn't exist."""

    def __init__(self, event_id: str):
        super().__init__(
            f"Event not found: {event_id}",
            code="EVENT_NOT_FOUND",
            details={"event_id": event_id},
        )


class SuggestionNotFoundError(NotFoundError):
    """Raised when a suggestion doesn't exist."""

    def __init__(self, suggestion_id: str):
        super().__init__(
            f"Suggestion not found: {suggestion_id}",
            code="SUGGESTION_NOT_FOUND",
            details={"suggestion_id": suggestion_id},
        )


class NotOwnerError(AuthorizationError):
    """Raised when a member deletes content they neither own nor administer."""

    def __init__(self, resource: str, resource_id: str, user_id: str):
        super().__init__(
            f"Only the author or an administrator can delete this {resource}",
            code="NOT_OWNER",
            details={"resource": resource, "resource_id": resource_id, "user_id": user_id},
        )


class InvalidSuggestionError(ValidationError):
    """Raised when a suggestion is empty after trimming."""

    def __init__(self):
        super().__init__("Suggestion cannot be empty", code="INVALID_SUGGESTION")


class CommunityStoreError(ExternalServiceError):
    """Raised when the store rejects a community query."""

    def __init__(self, message: str, operation: str):
        super().__init__(
            message,
            service="supabase",
            code="COMMUNITY_STORE_ERROR",
            details={"operation": operation},
        )
