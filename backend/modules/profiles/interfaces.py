"""
Profile repository interface.

The access and admission modules depend on IProfileRepository, not on the
Supabase-backed implementation.
"""

from typing import Protocol, Optional, runtime_checkable

from .models import MembershipUpdate, Profile, ProfileUpdate


@runtime_checkable
class IProfileRepository(Protocol):
    """Contract for reading and mutating member profiles."""

    async def get(self, user_id: str) -> Profile:
        """
        Fetch a profile by identity.

        Raises:
            ProfileNotFoundError: If no profile exists
        """
        ...

    async def find(self, user_id: str) -> Optional[Profile]:
        """Fetch a profile by identity, or None."""
        ...

    async def ensure(self, user_id: str, email: str) -> Profile:
        """
        Return the identity's profile, creating an unapproved one if absent.

        Safe under concurrent calls for the same identity.

        Raises:
            ProfileConflictError: If a creation race could not be resolved
        """
        ...

    async def update(self, user_id: str, changes: ProfileUpdate) -> Profile:
        """
        Apply a member's own edit to user-editable fields.

        Raises:
            ProfileNotFoundError: If no profile exists
        """
        ...

    async def update_membership(self, user_id: str, changes: MembershipUpdate) -> Profile:
        """
        Set approval or admin flags. Reserved for the Admission Controller.

        Raises:
            ProfileNotFoundError: If no profile exists
        """
        ...

    async def delete(self, user_id: str) -> Profile:
        """
        Remove a profile and return the removed row.

        Raises:
            ProfileNotFoundError: If no profile exists
        """
        ...

    async def restore(self, profile: Profile) -> Profile:
        """Re-insert a previously deleted profile exactly as it was."""
        ...

    async def list_pending(self) -> list[Profile]:
        """All unapproved profiles, newest first."""
        ...

    async def list_all(self) -> list[Profile]:
        """All profiles, newest first."""
        ...
