"""
Profiles module.

Owns the member profile: display fields, approval and admin flags.

Public API:
- IProfileRepository: Interface for profile storage
- Profile, ProfileUpdate, MembershipUpdate: Profile models
- ProfileChange, ProfileChangeNotifier: Change notifications
- Profile exceptions: ProfileNotFoundError, ProfileConflictError, etc.
"""

from .interfaces import IProfileRepository
from .models import (
    Profile,
    ProfileUpdate,
    MembershipUpdate,
    ProfileChange,
    ProfileChangeKind,
    USER_EDITABLE_FIELDS,
    MEMBERSHIP_FIELDS,
)
from .notifier import ProfileChangeNotifier
from .exceptions import (
    ProfileNotFoundError,
    ProfileConflictError,
    ProtectedFieldError,
    InvalidProfileUpdateError,
    ProfileStoreError,
)

__all__ = [
    # Interface
    "IProfileRepository",
    # Models
    "Profile",
    "ProfileUpdate",
    "MembershipUpdate",
    "ProfileChange",
    "ProfileChangeKind",
    "USER_EDITABLE_FIELDS",
    "MEMBERSHIP_FIELDS",
    "ProfileChangeNotifier",
    # Exceptions
    "ProfileNotFoundError",
    "ProfileConflictError",
    "ProtectedFieldError",
    "InvalidProfileUpdateError",
    "ProfileStoreError",
]
