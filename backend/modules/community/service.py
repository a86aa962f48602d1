"""
Community service implementation.
"""

import logging
from datetime import date, timedelta
from typing import Callable, Optional

from modules.profiles.models import Profile

from .exceptions import (
    EventNotFoundError,
    InvalidSuggestionError,
    NotOwnerError,
    SuggestionNotFoundError,
)
from .interfaces import ICommunityService
from .models import DEFAULT_EVENT_TIME, CreateEventRequest, Event, EventSuggestion
from .repository import EventRepository, SuggestionRepository

logger = logging.getLogger(__name__)

FRIDAY = 4


def next_friday(today: date) -> date:
    """The next Friday strictly after today."""
    days = (FRIDAY - today.weekday()) % 7 or 7
    return today + timedelta(days=days)


class CommunityService(ICommunityService):
    """Events and suggestions backed by Supabase tables."""

    def __init__(
        self,
        events: EventRepository,
        suggestions: SuggestionRepository,
        today: Optional[Callable[[], date]] = None,
    ):
        self._events = events
        self._suggestions = suggestions
        self._today = today or date.today

    async def list_events(self) -> list[Event]:
        return await self._events.list_all()

    async def create_event(self, creator: Profile, request: CreateEventRequest) -> Event:
        data = request.model_dump(mode="json")
        if request.event_date is None:
            data["event_date"] = next_friday(self._today()).isoformat()
        if request.event_time is None:
            data["event_time"] = DEFAULT_EVENT_TIME
        data["created_by"] = creator.user_id

        event = await self._events.create(data)
        logger.info(f"Created event {event.id} for {event.event_date}", extra={"user_id": creator.user_id})
        return event

    async def delete_event(self, actor: Profile, event_id: str) -> None:
        event = await self._events.get(event_id)
        if event is None:
            raise EventNotFoundError(event_id)
        if event.created_by != actor.user_id and not actor.is_admin:
            raise NotOwnerError("event", event_id, actor.user_id)

        if not await self._events.delete(event_id):
            raise EventNotFoundError(event_id)
        logger.info(f"Deleted event {event_id}", extra={"actor_id": actor.user_id})

    async def list_suggestions(self) -> list[EventSuggestion]:
        return await self._suggestions.list_all()

    async def create_suggestion(self, author: Profile, text: str) -> EventSuggestion:
        text = text.strip()
        if not text:
            raise InvalidSuggestionError()
        return await self._suggestions.create(author.user_id, author.display_name, text)

    async def delete_suggestion(self, actor: Profile, suggestion_id: str) -> None:
        suggestion = await self._suggestions.get(suggestion_id)
        if suggestion is None:
            raise SuggestionNotFoundError(suggestion_id)
        if suggestion.user_id != actor.user_id and not actor.is_admin:
            raise NotOwnerError("suggestion", suggestion_id, actor.user_id)

        if not await self._suggestions.delete(suggestion_id):
            raise SuggestionNotFoundError(suggestion_id)
        logger.info(f"Deleted suggestion {suggestion_id}", extra={"actor_id": actor.user_id})
