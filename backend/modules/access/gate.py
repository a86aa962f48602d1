"""
The Session Gate.

A pure function of what is known about a session and its profile. It holds
no state, so a decision can never outlive the inputs it was computed from.
"""

from typing import Optional

from modules.profiles.models import Profile

from .models import AccessDecision, AccessState, LOGIN_PATH, PENDING_APPROVAL_MESSAGE


def evaluate_access(
    session_present: bool,
    session_loading: bool,
    profile: Optional[Profile],
    profile_loading: bool,
) -> AccessDecision:
    """
    Decide which access state applies.

    A session whose profile finished loading but is absent is treated as
    pending: protected content is only rendered for an approved profile.
    """
    if session_loading:
        return AccessDecision(state=AccessState.LOADING)

    if not session_present:
        return AccessDecision(state=AccessState.UNAUTHENTICATED, redirect_to=LOGIN_PATH)

    if profile_loading:
        return AccessDecision(state=AccessState.LOADING)

    if profile is None or not profile.is_approved:
        return AccessDecision(
            state=AccessState.PENDING_APPROVAL,
            redirect_to=LOGIN_PATH,
            message=PENDING_APPROVAL_MESSAGE,
            user_id=profile.user_id if profile else None,
        )

    return AccessDecision(
        state=AccessState.ADMITTED,
        user_id=profile.user_id,
        is_admin=profile.is_admin,
    )
