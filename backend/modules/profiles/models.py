"""
Profiles module data models.

A profile is this system's record of a member: display fields the member
edits themselves, and the membership fields only administrators change.
"""

from datetime import datetime
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from .exceptions import InvalidProfileUpdateError, ProtectedFieldError


# Fields a member may change on their own profile
USER_EDITABLE_FIELDS = frozenset({"full_name", "phone_number", "bio", "profile_image_url"})

# Fields only the Admission Controller may change
MEMBERSHIP_FIELDS = frozenset({"is_approved", "is_admin"})

# Fields nobody changes through an update
IMMUTABLE_FIELDS = frozenset({"id", "user_id", "email", "created_at", "updated_at"})


class Profile(BaseModel):
    """A row of the profile store, one per identity."""

    id: str = Field(..., description="Row ID (UUID)")
    user_id: str = Field(..., description="Identity reference (Supabase user ID)")
    email: str = Field(default="", description="Email address at sign-up")
    full_name: Optional[str] = Field(None, description="Display name")
    phone_number: Optional[str] = Field(None, description="Phone number")
    bio: Optional[str] = Field(None, description="Short biography")
    profile_image_url: Optional[str] = Field(None, description="Avatar URL")
    is_approved: bool = Field(default=False, description="Admitted by an administrator")
    is_admin: bool = Field(default=False, description="Holds administrator rights")
    created_at: datetime = Field(..., description="Creation time")
    updated_at: datetime = Field(..., description="Last update time")

    @property
    def display_name(self) -> str:
        """Full name, falling back to the local part of the email."""
        if self.full_name:
            return self.full_name
        return self.email.split("@")[0]


class ProfileUpdate(BaseModel):
    """
    Partial update a member applies to their own profile.

    Unknown fields are rejected. Use ``from_payload`` for untyped input so
    attempts to touch membership or identity fields get a specific error
    instead of a generic one.
    """

    model_config = ConfigDict(extra="forbid")

    full_name: Optional[str] = Field(None, max_length=200)
    phone_number: Optional[str] = Field(None, max_length=50)
    bio: Optional[str] = Field(None, max_length=2000)
    profile_image_url: Optional[str] = Field(None, max_length=2048)

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> "ProfileUpdate":
        """
        Build an update from a raw request body.

        Raises:
            ProtectedFieldError: payload names a membership or immutable field
            InvalidProfileUpdateError: payload fails validation otherwise
        """
        protected = sorted(set(payload) & (MEMBERSHIP_FIELDS | IMMUTABLE_FIELDS))
        if protected:
            raise ProtectedFieldError(protected)
        try:
            return cls.model_validate(payload)
        except PydanticValidationError as e:
            raise InvalidProfileUpdateError(
                e.errors(include_url=False, include_context=False)
            ) from e

    def changes(self) -> dict[str, Any]:
        """Only the fields the caller actually set."""
        return self.model_dump(exclude_unset=True)


class MembershipUpdate(BaseModel):
    """Approval and role change, applied by the Admission Controller only."""

    model_config = ConfigDict(extra="forbid")

    is_approved: Optional[bool] = None
    is_admin: Optional[bool] = None

    def changes(self) -> dict[str, Any]:
        return self.model_dump(exclude_none=True)


class ProfileChangeKind(str, Enum):
    """What happened to a profile."""

    CREATED = "created"
    UPDATED = "updated"
    DELETED = "deleted"


class ProfileChange(BaseModel):
    """Notification published after a profile mutation."""

    model_config = {"frozen": True}

    kind: ProfileChangeKind
    user_id: str
    profile: Optional[Profile] = Field(
        None,
        description="Profile after the change; the removed row for deletions",
    )
