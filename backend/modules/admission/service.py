"""
Admission Controller implementation.

Authorization is checked here against the actor's profile rather than
left to the store's row-level security alone.
"""

import logging
from typing import Optional

from modules.auth.exceptions import IdentityNotFoundError
from modules.auth.interfaces import IIdentityProvider
from modules.profiles.exceptions import ProfileNotFoundError
from modules.profiles.interfaces import IProfileRepository
from modules.profiles.models import MembershipUpdate, Profile
from shared.exceptions import GatehouseError, PartialFailureError

from .exceptions import MemberNotApprovedError, NotAdminError
from .interfaces import IAdmissionController

logger = logging.getLogger(__name__)


class AdmissionController(IAdmissionController):
    """
    Moves members between pending, approved and administrator.

    Rejection spans two stores with no shared transaction. It deletes the
    profile first and the identity second; when the identity deletion
    fails the profile is restored from the snapshot taken by the delete.
    Rejecting again after a partial failure deletes the leftover identity.
    """

    def __init__(self, profiles: IProfileRepository, identity: IIdentityProvider):
        self._profiles = profiles
        self._identity = identity

    async def approve(self, actor_id: str, user_id: str) -> Profile:
        await self._require_admin(actor_id)
        profile = await self._profiles.get(user_id)
        if profile.is_approved:
            return profile

        profile = await self._profiles.update_membership(
            user_id, MembershipUpdate(is_approved=True)
        )
        logger.info("Approved member", extra={"user_id": user_id, "actor_id": actor_id})
        return profile

    async def reject(self, actor_id: str, user_id: str) -> Optional[Profile]:
        await self._require_admin(actor_id)
        try:
            snapshot = await self._profiles.delete(user_id)
        except ProfileNotFoundError as missing:
            await self._finish_identity_delete(actor_id, user_id, missing)
            return None

        try:
            await self._identity.delete_identity(user_id)
        except IdentityNotFoundError:
            logger.info(
                "Identity already absent during rejection",
                extra={"user_id": user_id, "actor_id": actor_id},
            )
        except GatehouseError as identity_error:
            logger.warning(
                f"Identity deletion failed, restoring profile: {identity_error.message}",
                extra={"user_id": user_id, "actor_id": actor_id, "error_code": identity_error.code},
            )
            try:
                await self._profiles.restore(snapshot)
            except GatehouseError as restore_error:
                logger.error(
                    "Rejection left profile deleted but identity present",
                    extra={"user_id": user_id, "actor_id": actor_id, "error_code": "PARTIAL_FAILURE"},
                )
                raise PartialFailureError(
                    f"Rejection of {user_id} partially applied: profile deleted, identity kept",
                    completed=["delete_profile"],
                    failed="delete_identity",
                    details={
                        "user_id": user_id,
                        "identity_error": identity_error.message,
                        "restore_error": restore_error.message,
                    },
                ) from restore_error
            raise

        logger.info("Rejected member", extra={"user_id": user_id, "actor_id": actor_id})
        return snapshot

    async def _finish_identity_delete(
        self, actor_id: str, user_id: str, missing: ProfileNotFoundError
    ) -> None:
        # Profile already gone: an earlier rejection stopped after deleting it
        try:
            await self._identity.delete_identity(user_id)
        except IdentityNotFoundError:
            raise missing from None
        logger.info(
            "Completed rejection of identity with no profile",
            extra={"user_id": user_id, "actor_id": actor_id},
        )

    async def set_admin(self, actor_id: str, user_id: str, desired: bool) -> Profile:
        await self._require_admin(actor_id)
        profile = await self._profiles.get(user_id)
        if profile.is_admin == desired:
            return profile

        if desired and not profile.is_approved:
            raise MemberNotApprovedError(user_id)

        if not desired and user_id == actor_id:
            # Allowed; the last administrator can lock everyone out this way
            logger.warning(
                "Administrator removed their own admin rights",
                extra={"user_id": user_id, "actor_id": actor_id},
            )

        profile = await self._profiles.update_membership(
            user_id, MembershipUpdate(is_admin=desired)
        )
        logger.info(
            f"{'Granted' if desired else 'Revoked'} admin rights",
            extra={"user_id": user_id, "actor_id": actor_id},
        )
        return profile

    async def list_pending(self, actor_id: str) -> list[Profile]:
        await self._require_admin(actor_id)
        return await self._profiles.list_pending()

    async def list_all(self, actor_id: str) -> list[Profile]:
        await self._require_admin(actor_id)
        return await self._profiles.list_all()

    async def _require_admin(self, actor_id: str) -> Profile:
        actor = await self._profiles.find(actor_id)
        if actor is None or not (actor.is_admin and actor.is_approved):
            raise NotAdminError(actor_id)
        return actor
