"""
Admission module data models.
"""

from typing import Optional

from pydantic import BaseModel, Field

from modules.profiles.models import Profile


class SetAdminRequest(BaseModel):
    """Request to grant or revoke administrator rights."""

    is_admin: bool = Field(..., description="Desired administrator flag")


class MemberListResponse(BaseModel):
    """API response for member listings."""

    members: list[Profile] = Field(..., description="Profiles, newest first")
    total: int = Field(..., description="Number of profiles returned")


class RejectionResponse(BaseModel):
    """API response after a membership request was rejected."""

    user_id: str = Field(..., description="Identity that was removed")
    email: Optional[str] = Field(
        default=None,
        description="Email of the removed profile; absent when only the identity remained",
    )
    removed: bool = Field(default=True)
