"""
Community module.

Friday events and member suggestions, visible to admitted members.

Public API:
- ICommunityService: Interface for community operations
- Event, EventSuggestion, CreateEventRequest: Community models
- Community exceptions: EventNotFoundError, NotOwnerError, etc.
"""

from .interfaces import ICommunityService
from .models import (
    Event,
    EventSuggestion,
    CreateEventRequest,
    CreateSuggestionRequest,
    DEFAULT_EVENT_TIME,
)
from .exceptions import (
    EventNotFoundError,
    SuggestionNotFoundError,
    NotOwnerError,
    InvalidSuggestionError,
    CommunityStoreError,
)

__all__ = [
    # Interface
    "ICommunityService",
    # Models
    "Event",
    "EventSuggestion",
    "CreateEventRequest",
    "CreateSuggestionRequest",
    "DEFAULT_EVENT_TIME",
    # Exceptions
    "EventNotFoundError",
    "SuggestionNotFoundError",
    "NotOwnerError",
    "InvalidSuggestionError",
    "CommunityStoreError",
]
