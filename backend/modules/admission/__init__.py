"""
Admission module.

Administrator actions over membership: approve, reject, promote, demote,
and the member listings the admin panel shows.

Public API:
- IAdmissionController: Interface for admission operations
- Admission exceptions: NotAdminError, MemberNotApprovedError
"""

from .interfaces import IAdmissionController
from .models import SetAdminRequest, MemberListResponse, RejectionResponse
from .exceptions import NotAdminError, MemberNotApprovedError

__all__ = [
    # Interface
    "IAdmissionController",
    # Models
    "SetAdminRequest",
    "MemberListResponse",
    "RejectionResponse",
    # Exceptions
    "NotAdminError",
    "MemberNotApprovedError",
]
