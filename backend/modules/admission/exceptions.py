"""
Admission module exceptions.
"""

from shared.exceptions import AuthorizationError, ValidationError


class NotAdminError(AuthorizationError):
    """Raised when a non-administrator invokes an administrator action."""

    def __init__(self, actor_id: str):
        super().__init__(
            "Administrator rights required",
            code="NOT_ADMIN",
            details={"actor_id": actor_id},
        )


class MemberNotApprovedError(ValidationError):
    """Raised when promoting a member who has not been approved yet."""

    def __init__(self, user_id: str):
        super().__init__(
            f"Member must be approved before becoming an administrator: {user_id}",
            code="MEMBER_NOT_APPROVED",
            details={"user_id": user_id},
        )
