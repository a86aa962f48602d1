"""
Community service interface.
"""

from typing import Protocol, runtime_checkable

from modules.profiles.models import Profile

from .models import CreateEventRequest, Event, EventSuggestion


@runtime_checkable
class ICommunityService(Protocol):
    """
    Events and suggestions for admitted members.

    Deletion is limited to the creator or author and administrators.
    """

    async def list_events(self) -> list[Event]:
        """All events, soonest first."""
        ...

    async def create_event(self, creator: Profile, request: CreateEventRequest) -> Event:
        """Create an event, defaulting to next Friday at 18:00."""
        ...

    async def delete_event(self, actor: Profile, event_id: str) -> None:
        """
        Delete an event.

        Raises:
            EventNotFoundError: If the event doesn't exist
            NotOwnerError: If the actor is neither creator nor admin
        """
        ...

    async def list_suggestions(self) -> list[EventSuggestion]:
        """All suggestions, newest first."""
        ...

    async def create_suggestion(self, author: Profile, text: str) -> EventSuggestion:
        """
        Post a suggestion.

        Raises:
            InvalidSuggestionError: If the text is blank
        """
        ...

    async def delete_suggestion(self, actor: Profile, suggestion_id: str) -> None:
        """
        Delete a suggestion.

        Raises:
            SuggestionNotFoundError: If the suggestion doesn't exist
            NotOwnerError: If the actor is neither author nor admin
        """
        ...
