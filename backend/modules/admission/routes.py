"""
Admin member-management endpoints.

All endpoints require an admitted administrator. The controller checks
admin rights again against the stored profile.
"""

from fastapi import APIRouter, Depends

from api.dependencies import get_admission_controller
from api.middleware.auth import require_admin
from modules.access.models import Member
from modules.profiles.models import Profile

from .interfaces import IAdmissionController
from .models import MemberListResponse, RejectionResponse, SetAdminRequest

router = APIRouter()


@router.get("/pending", response_model=MemberListResponse)
async def list_pending_members(
    admin: Member = Depends(require_admin),
    controller: IAdmissionController = Depends(get_admission_controller),
) -> MemberListResponse:
    """List membership requests awaiting approval, newest first."""
    members = await controller.list_pending(admin.user_id)
    return MemberListResponse(members=members, total=len(members))


@router.get("", response_model=MemberListResponse)
async def list_members(
    admin: Member = Depends(require_admin),
    controller: IAdmissionController = Depends(get_admission_controller),
) -> MemberListResponse:
    """List every profile, newest first."""
    members = await controller.list_all(admin.user_id)
    return MemberListResponse(members=members, total=len(members))


@router.post("/{user_id}/approve", response_model=Profile)
async def approve_member(
    user_id: str,
    admin: Member = Depends(require_admin),
    controller: IAdmissionController = Depends(get_admission_controller),
) -> Profile:
    """Approve a membership request. Approving twice is a no-op."""
    return await controller.approve(admin.user_id, user_id)


@router.delete("/{user_id}", response_model=RejectionResponse)
async def reject_member(
    user_id: str,
    admin: Member = Depends(require_admin),
    controller: IAdmissionController = Depends(get_admission_controller),
) -> RejectionResponse:
    """
    Reject a membership request.

    Deletes the profile and the identity. This cannot be undone. Repeating
    the call after a partial failure deletes the remaining identity.
    """
    removed = await controller.reject(admin.user_id, user_id)
    if removed is None:
        return RejectionResponse(user_id=user_id)
    return RejectionResponse(user_id=removed.user_id, email=removed.email)


@router.put("/{user_id}/admin", response_model=Profile)
async def set_member_admin(
    user_id: str,
    request: SetAdminRequest,
    admin: Member = Depends(require_admin),
    controller: IAdmissionController = Depends(get_admission_controller),
) -> Profile:
    """Grant or revoke administrator rights."""
    return await controller.set_admin(admin.user_id, user_id, request.is_admin)
