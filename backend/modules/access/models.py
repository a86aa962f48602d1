"""
Access module data models.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from modules.profiles.models import Profile
from shared.models import AuthenticatedUser


LOGIN_PATH = "/login"

PENDING_APPROVAL_MESSAGE = (
    "Your account is awaiting approval from the administrators. "
    "You'll receive access once your membership is confirmed."
)


class AccessState(str, Enum):
    """Where a session stands with respect to protected content."""

    UNAUTHENTICATED = "unauthenticated"
    LOADING = "loading"
    PENDING_APPROVAL = "pending_approval"
    ADMITTED = "admitted"


class AccessDecision(BaseModel):
    """Outcome of one Session Gate evaluation."""

    model_config = {"frozen": True}

    state: AccessState = Field(..., description="Access state")
    redirect_to: Optional[str] = Field(None, description="Where the client should go instead")
    message: Optional[str] = Field(None, description="Explanation shown to the member")
    user_id: Optional[str] = Field(None, description="Identity the decision is about")
    is_admin: bool = Field(default=False, description="Whether admin tools may be offered")

    @property
    def admitted(self) -> bool:
        return self.state == AccessState.ADMITTED

    @property
    def final(self) -> bool:
        """False while a fetch is still in flight."""
        return self.state != AccessState.LOADING


class Member(BaseModel):
    """An admitted session: who they are and their profile as last read."""

    model_config = {"frozen": True}

    user: AuthenticatedUser
    profile: Profile

    @property
    def user_id(self) -> str:
        return self.user.id

    @property
    def is_admin(self) -> bool:
        return self.profile.is_admin
