"""
Authentication and membership dependencies.

Bearer tokens are validated by the identity provider; membership is
decided by the Session Gate on a fresh SessionContext per request.
"""

from typing import AsyncIterator, Optional
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from modules.access.context import SessionContext
from modules.access.exceptions import MembershipPendingError
from modules.access.models import AccessState, Member
from modules.access.service import AccessService
from modules.admission.exceptions import NotAdminError
from modules.auth.interfaces import IIdentityProvider
from shared.exceptions import AuthenticationError
from shared.models import AuthenticatedUser

from ..dependencies import get_access_service, get_identity_provider

# Bearer token extractor
bearer_scheme = HTTPBearer(auto_error=False)


class AuthError(HTTPException):
    """Authentication error with consistent format."""
    def __init__(self, detail: str):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=detail,
            headers={"WWW-Authenticate": "Bearer"},
        )


def get_bearer_token(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> Optional[str]:
    """The raw bearer token, if one was sent."""
    if credentials is None:
        return None
    return credentials.credentials


async def get_current_user(
    token: Optional[str] = Depends(get_bearer_token),
    identity: IIdentityProvider = Depends(get_identity_provider),
) -> AuthenticatedUser:
    """
    Dependency that requires authentication.

    Use this for endpoints that need a signed-in user but not an
    approved membership (for example, reading one's own profile while
    pending).

    Usage:
        @router.get("/protected")
        async def protected_route(user: AuthenticatedUser = Depends(get_current_user)):
            return {"user_id": user.id}
    """
    if token is None:
        raise AuthError("Missing authorization header")

    try:
        return await identity.validate_token(token)
    except AuthenticationError as e:
        raise AuthError(e.message)


async def get_optional_user(
    token: Optional[str] = Depends(get_bearer_token),
    identity: IIdentityProvider = Depends(get_identity_provider),
) -> Optional[AuthenticatedUser]:
    """
    Dependency that optionally extracts user if authenticated.

    Invalid or expired tokens are treated as no session.
    """
    return await identity.get_current_user(token)


async def get_session_context(
    token: Optional[str] = Depends(get_bearer_token),
    access: AccessService = Depends(get_access_service),
) -> AsyncIterator[SessionContext]:
    """A loaded SessionContext for this request, closed when it ends."""
    context = access.open_context()
    try:
        await access.load(context, token)
        yield context
    finally:
        context.close()


async def require_member(
    context: SessionContext = Depends(get_session_context),
) -> Member:
    """
    Dependency that requires an admitted member.

    Raises 401 without a valid session and 403 with the pending-approval
    message for anyone not yet approved.
    """
    decision = context.decision
    if decision.state == AccessState.UNAUTHENTICATED:
        raise AuthError("Authentication required")

    if not decision.admitted or context.session is None or context.profile is None:
        raise MembershipPendingError(decision.user_id)

    return Member(user=context.session, profile=context.profile)


async def require_admin(member: Member = Depends(require_member)) -> Member:
    """Dependency that requires an admitted administrator."""
    if not member.is_admin:
        raise NotAdminError(member.user_id)
    return member


# Type aliases for cleaner route definitions
RequireAuth = Depends(get_current_user)
OptionalAuth = Depends(get_optional_user)
RequireMember = Depends(require_member)
RequireAdmin = Depends(require_admin)
