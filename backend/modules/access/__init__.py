"""
Access module.

The Session Gate: decides whether a session sees protected content,
waits, is sent to log in, or is told its membership is pending.

Public API:
- evaluate_access: Pure gate evaluation
- SessionContext: Per-session state holder with change subscriptions
- AccessDecision, AccessState, Member: Access models
- MembershipPendingError: Raised by protected routes for unapproved members
"""

from .gate import evaluate_access
from .context import SessionContext
from .models import (
    AccessDecision,
    AccessState,
    Member,
    LOGIN_PATH,
    PENDING_APPROVAL_MESSAGE,
)
from .exceptions import MembershipPendingError

__all__ = [
    # Gate
    "evaluate_access",
    "SessionContext",
    # Models
    "AccessDecision",
    "AccessState",
    "Member",
    "LOGIN_PATH",
    "PENDING_APPROVAL_MESSAGE",
    # Exceptions
    "MembershipPendingError",
]
