"""
User-related endpoints.

Provides endpoints for the member's own profile and session.
"""

from typing import Any

from fastapi import APIRouter, Body, Depends

from modules.access.models import Member
from modules.auth.interfaces import IIdentityProvider
from modules.profiles.interfaces import IProfileRepository
from modules.profiles.models import Profile, ProfileUpdate
from shared.models import AuthenticatedUser

from ..dependencies import get_identity_provider, get_profile_repository
from ..middleware.auth import get_current_user, require_member

router = APIRouter()


@router.get("/me", response_model=Profile)
async def get_my_profile(
    user: AuthenticatedUser = Depends(get_current_user),
    profiles: IProfileRepository = Depends(get_profile_repository),
) -> Profile:
    """
    Get the current user's profile, creating it on first sign-in.

    Requires authentication but not approval, so a pending member can
    see their own request.
    """
    return await profiles.ensure(user.id, user.email)


@router.patch("/me", response_model=Profile)
async def update_my_profile(
    payload: dict[str, Any] = Body(...),
    member: Member = Depends(require_member),
    profiles: IProfileRepository = Depends(get_profile_repository),
) -> Profile:
    """
    Update the current member's display fields.

    Approval and admin flags cannot be set here (400).
    """
    changes = ProfileUpdate.from_payload(payload)
    return await profiles.update(member.user_id, changes)


@router.post("/sign-out", status_code=204)
async def sign_out(
    user: AuthenticatedUser = Depends(get_current_user),
    identity: IIdentityProvider = Depends(get_identity_provider),
) -> None:
    """Revoke the current session's refresh tokens."""
    await identity.sign_out(user.access_token)
