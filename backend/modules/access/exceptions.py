"""
Access module exceptions.
"""

from typing import Optional

from shared.exceptions import AuthorizationError

from .models import PENDING_APPROVAL_MESSAGE


class MembershipPendingError(AuthorizationError):
    """Raised when an authenticated but unapproved session hits protected content."""

    def __init__(self, user_id: Optional[str] = None):
        super().__init__(
            PENDING_APPROVAL_MESSAGE,
            code="MEMBERSHIP_PENDING",
            details={"user_id": user_id} if user_id else {},
        )
