"""
Community repositories for database access.

Events and suggestions are plain tables; ownership checks live in the
service, not here.
"""

from typing import Any, Optional

from postgrest.exceptions import APIError
from supabase import Client

from shared.config import get_settings
from shared.repository import BaseRepository

from .exceptions import CommunityStoreError
from .models import Event, EventSuggestion


def _execute(query: Any, operation: str) -> Any:
    try:
        return query.execute()
    except APIError as e:
        raise CommunityStoreError(
            f"Community store rejected {operation}: {e.message}",
            operation=operation,
        ) from e


class EventRepository(BaseRepository[Event]):
    """Repository for the events table."""

    def __init__(self, db: Client, table: Optional[str] = None) -> None:
        super().__init__(db)
        self._table = table or get_settings().events_table

    async def get(self, event_id: str) -> Optional[Event]:
        result = _execute(
            self._db.table(self._table).select("*").eq("id", event_id).limit(1),
            "get_event",
        )
        if not result.data:
            return None
        return self._map_to_event(result.data[0])

    async def list_all(self) -> list[Event]:
        result = _execute(
            self._db.table(self._table).select("*").order("event_date", desc=False),
            "list_events",
        )
        return [self._map_to_event(row) for row in result.data]

    async def create(self, data: dict[str, Any]) -> Event:
        result = _execute(self._db.table(self._table).insert(data), "create_event")
        return self._map_to_event(result.data[0])

    async def delete(self, event_id: str) -> bool:
        result = _execute(
            self._db.table(self._table).delete().eq("id", event_id),
            "delete_event",
        )
        return bool(result.data)

    def _map_to_event(self, data: dict[str, Any]) -> Event:
        """Map database row to Event model."""
        return Event(
            id=str(data["id"]),
            title=data["title"],
            description=data.get("description") or "",
            event_date=data["event_date"],
            event_time=str(data["event_time"])[:5],
            location_name=data.get("location_name") or "",
            location_lat=data.get("location_lat"),
            location_lng=data.get("location_lng"),
            created_by=str(data["created_by"]),
            created_at=data["created_at"],
            updated_at=data["updated_at"],
        )


class SuggestionRepository(BaseRepository[EventSuggestion]):
    """Repository for the event_suggestions table."""

    def __init__(self, db: Client, table: Optional[str] = None) -> None:
        super().__init__(db)
        self._table = table or get_settings().suggestions_table

    async def get(self, suggestion_id: str) -> Optional[EventSuggestion]:
        result = _execute(
            self._db.table(self._table).select("*").eq("id", suggestion_id).limit(1),
            "get_suggestion",
        )
        if not result.data:
            return None
        return self._map_to_suggestion(result.data[0])

    async def list_all(self) -> list[EventSuggestion]:
        result = _execute(
            self._db.table(self._table).select("*").order("created_at", desc=True),
            "list_suggestions",
        )
        return [self._map_to_suggestion(row) for row in result.data]

    async def create(self, user_id: str, user_name: str, suggestion: str) -> EventSuggestion:
        result = _execute(
            self._db.table(self._table).insert({
                "user_id": user_id,
                "user_name": user_name,
                "suggestion": suggestion,
            }),
            "create_suggestion",
        )
        return self._map_to_suggestion(result.data[0])

    async def delete(self, suggestion_id: str) -> bool:
        result = _execute(
            self._db.table(self._table).delete().eq("id", suggestion_id),
            "delete_suggestion",
        )
        return bool(result.data)

    def _map_to_suggestion(self, data: dict[str, Any]) -> EventSuggestion:
        """Map database row to EventSuggestion model."""
        return EventSuggestion(
            id=str(data["id"]),
            user_id=str(data["user_id"]),
            user_name=data["user_name"],
            suggestion=data["suggestion"],
            created_at=data["created_at"],
            updated_at=data["updated_at"],
        )
