"""
Admission Controller interface.
"""

from typing import Optional, Protocol, runtime_checkable

from modules.profiles.models import Profile


@runtime_checkable
class IAdmissionController(Protocol):
    """
    Administrator-only membership transitions.

    Every method takes the acting user's identity first and refuses with
    NotAdminError unless that user's profile is an approved administrator.
    """

    async def approve(self, actor_id: str, user_id: str) -> Profile:
        """Admit a member. Idempotent."""
        ...

    async def reject(self, actor_id: str, user_id: str) -> Optional[Profile]:
        """
        Remove a member's profile and identity. Irreversible.

        Returns:
            The removed profile, or None when only a leftover identity
            (from an earlier partial failure) was deleted

        Raises:
            ProfileNotFoundError: If the member has neither profile nor identity
            ExternalServiceError: If the identity could not be deleted
                (the profile has been put back)
            PartialFailureError: If the identity could not be deleted and
                the profile could not be put back either
        """
        ...

    async def set_admin(self, actor_id: str, user_id: str, desired: bool) -> Profile:
        """Grant or revoke administrator rights. Idempotent per value."""
        ...

    async def list_pending(self, actor_id: str) -> list[Profile]:
        """Unapproved profiles, newest first."""
        ...

    async def list_all(self, actor_id: str) -> list[Profile]:
        """All profiles, newest first."""
        ...
