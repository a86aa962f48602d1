"""
Profile repository for database access.

Encapsulates all Supabase queries and data mapping for the profile table
(``user_profiles`` by default). One row per identity is guaranteed by a
unique constraint on ``user_id``; creation goes through an upsert that
ignores conflicts so two first requests racing for the same identity both
end up reading the same row.
"""

import logging
from typing import Any, Optional

from postgrest.exceptions import APIError
from supabase import Client

from shared.config import get_settings
from shared.repository import BaseRepository, UNIQUE_VIOLATION

from .exceptions import ProfileConflictError, ProfileNotFoundError, ProfileStoreError
from .models import (
    MembershipUpdate,
    Profile,
    ProfileChange,
    ProfileChangeKind,
    ProfileUpdate,
)
from .notifier import ProfileChangeNotifier, get_profile_notifier

logger = logging.getLogger(__name__)


class ProfileRepository(BaseRepository[Profile]):
    """
    Repository for profile data access.

    All methods return Pydantic models mapped from database rows and
    publish a ProfileChange after each successful mutation.

    Note: This repository does NOT perform authorization checks.
    Callers decide who may invoke update_membership.
    """

    def __init__(
        self,
        db: Client,
        notifier: Optional[ProfileChangeNotifier] = None,
        table: Optional[str] = None,
    ) -> None:
        super().__init__(db)
        self._notifier = notifier or get_profile_notifier()
        self._table = table or get_settings().profiles_table

    @property
    def notifier(self) -> ProfileChangeNotifier:
        return self._notifier

    # -------------------------------------------------------------------------
    # Reads
    # -------------------------------------------------------------------------

    async def get(self, user_id: str) -> Profile:
        profile = await self.find(user_id)
        if profile is None:
            raise ProfileNotFoundError(user_id)
        return profile

    async def find(self, user_id: str) -> Optional[Profile]:
        result = self._execute(
            self._db.table(self._table).select("*").eq("user_id", user_id).limit(1),
            "find",
        )
        if not result.data:
            return None
        return self._map_to_profile(result.data[0])

    async def list_pending(self) -> list[Profile]:
        result = self._execute(
            self._db.table(self._table)
            .select("*")
            .eq("is_approved", False)
            .order("created_at", desc=True),
            "list_pending",
        )
        return [self._map_to_profile(row) for row in result.data]

    async def list_all(self) -> list[Profile]:
        result = self._execute(
            self._db.table(self._table).select("*").order("created_at", desc=True),
            "list_all",
        )
        return [self._map_to_profile(row) for row in result.data]

    # -------------------------------------------------------------------------
    # Writes
    # -------------------------------------------------------------------------

    async def ensure(self, user_id: str, email: str) -> Profile:
        """
        Return the existing profile or create the default one.

        A lost race shows up either as an empty upsert result (conflict
        ignored) or as a unique violation; both are resolved by reading
        the winner's row.
        """
        existing = await self.find(user_id)
        if existing is not None:
            return existing

        data = {
            "user_id": user_id,
            "email": email or "",
            "full_name": "",
            "is_approved": False,
            "is_admin": False,
        }

        rows: list[dict[str, Any]] = []
        try:
            result = (
                self._db.table(self._table)
                .upsert(data, on_conflict="user_id", ignore_duplicates=True)
                .execute()
            )
            rows = result.data or []
        except APIError as e:
            if e.code != UNIQUE_VIOLATION:
                raise ProfileStoreError(
                    f"Profile store rejected ensure: {e.message}",
                    operation="ensure",
                    store_code=e.code,
                ) from e
            logger.debug("Profile insert hit unique constraint", extra={"user_id": user_id})

        if rows:
            profile = self._map_to_profile(rows[0])
            logger.info("Created profile", extra={"user_id": user_id})
            self._publish(ProfileChangeKind.CREATED, profile)
            return profile

        profile = await self.find(user_id)
        if profile is None:
            raise ProfileConflictError(user_id)
        return profile

    async def update(self, user_id: str, changes: ProfileUpdate) -> Profile:
        return await self._apply(user_id, changes.changes(), "update")

    async def update_membership(self, user_id: str, changes: MembershipUpdate) -> Profile:
        return await self._apply(user_id, changes.changes(), "update_membership")

    async def delete(self, user_id: str) -> Profile:
        result = self._execute(
            self._db.table(self._table).delete().eq("user_id", user_id),
            "delete",
        )
        if not result.data:
            raise ProfileNotFoundError(user_id)
        profile = self._map_to_profile(result.data[0])
        self._publish(ProfileChangeKind.DELETED, profile)
        return profile

    async def restore(self, profile: Profile) -> Profile:
        result = self._execute(
            self._db.table(self._table).insert(profile.model_dump(mode="json")),
            "restore",
        )
        restored = self._map_to_profile(result.data[0]) if result.data else profile
        self._publish(ProfileChangeKind.CREATED, restored)
        return restored

    # -------------------------------------------------------------------------
    # Private helpers
    # -------------------------------------------------------------------------

    async def _apply(self, user_id: str, values: dict[str, Any], operation: str) -> Profile:
        if not values:
            return await self.get(user_id)

        values["updated_at"] = self._now()
        result = self._execute(
            self._db.table(self._table).update(values).eq("user_id", user_id),
            operation,
        )
        if not result.data:
            raise ProfileNotFoundError(user_id)
        profile = self._map_to_profile(result.data[0])
        self._publish(ProfileChangeKind.UPDATED, profile)
        return profile

    def _execute(self, query: Any, operation: str) -> Any:
        try:
            return query.execute()
        except APIError as e:
            raise ProfileStoreError(
                f"Profile store rejected {operation}: {e.message}",
                operation=operation,
                store_code=e.code,
            ) from e

    def _publish(self, kind: ProfileChangeKind, profile: Profile) -> None:
        self._notifier.publish(
            ProfileChange(kind=kind, user_id=profile.user_id, profile=profile)
        )

    def _map_to_profile(self, data: dict[str, Any]) -> Profile:
        """Map database row to Profile model."""
        return Profile(
            id=str(data["id"]),
            user_id=str(data["user_id"]),
            email=data.get("email") or "",
            full_name=data.get("full_name"),
            phone_number=data.get("phone_number"),
            bio=data.get("bio"),
            profile_image_url=data.get("profile_image_url"),
            is_approved=bool(data.get("is_approved", False)),
            is_admin=bool(data.get("is_admin", False)),
            created_at=data["created_at"],
            updated_at=data["updated_at"],
        )


# Module-level instance getter
_repository_instance: Optional[ProfileRepository] = None


def get_profile_repository() -> ProfileRepository:
    """Get the profile repository singleton."""
    global _repository_instance
    if _repository_instance is None:
        from shared.database import get_supabase_client
        _repository_instance = ProfileRepository(get_supabase_client())
    return _repository_instance


def reset_profile_repository() -> None:
    """Reset the profile repository singleton (for testing)."""
    global _repository_instance
    _repository_instance = None
