"""
Base repository class for database access.

Provides a common abstraction layer for all repositories, encapsulating
Supabase client access and providing shared utilities for data operations.
"""

from datetime import datetime, timezone
from typing import TypeVar, Generic
from supabase import Client


T = TypeVar("T")

# Postgres SQLSTATE for unique_violation
UNIQUE_VIOLATION = "23505"


class BaseRepository(Generic[T]):
    """
    Base class for all repositories.

    Provides common functionality for database operations:
    - Supabase client access via self._db
    - Generic type parameter for model type hints

    Subclasses should implement domain-specific data access methods
    and handle dict-to-Pydantic model mapping internally.

    Example:
        class EventRepository(BaseRepository[Event]):
            async def get(self, event_id: str) -> Optional[Event]:
                result = self._db.table("events").select("*").eq("id", event_id).execute()
                if not result.data:
                    return None
                return self._map_to_event(result.data[0])
    """

    def __init__(self, db: Client) -> None:
        """
        Initialize the repository with a Supabase client.

        Args:
            db: Supabase client instance for database operations.
        """
        self._db = db

    @staticmethod
    def _now() -> str:
        """Current UTC time as an ISO string for timestamp columns."""
        return datetime.now(timezone.utc).isoformat()
