"""
Access service.

Runs the Session Gate for a request: validate the session, ensure the
profile exists, evaluate. Failures degrade to a safe state instead of
reaching the client.
"""

import logging
from typing import Optional

from modules.auth.interfaces import IIdentityProvider
from modules.profiles.interfaces import IProfileRepository
from modules.profiles.notifier import ProfileChangeNotifier
from shared.exceptions import GatehouseError

from .context import SessionContext
from .models import AccessDecision

logger = logging.getLogger(__name__)


class AccessService:
    """
    Loads session contexts and evaluates access for them.

    Nothing is cached between calls: each load re-reads the session and
    the profile, so an approval is visible on the very next evaluation.
    """

    def __init__(
        self,
        identity: IIdentityProvider,
        profiles: IProfileRepository,
        notifier: Optional[ProfileChangeNotifier] = None,
    ):
        self._identity = identity
        self._profiles = profiles
        self._notifier = notifier

    def open_context(self) -> SessionContext:
        """A fresh context, bound to profile changes when a notifier is wired."""
        return SessionContext(self._notifier)

    async def load(self, context: SessionContext, token: Optional[str]) -> AccessDecision:
        """Populate a context from a bearer token and return its decision."""
        context.begin_session_load()
        try:
            user = await self._identity.get_current_user(token)
        except GatehouseError as e:
            logger.warning(
                f"Session lookup failed, treating as signed out: {e.message}",
                extra={"error_code": e.code},
            )
            user = None
        context.set_session(user)
        if user is None:
            return context.decision

        context.begin_profile_load()
        try:
            profile = await self._profiles.ensure(user.id, user.email)
        except GatehouseError as e:
            logger.warning(
                f"Profile load failed, holding session at pending: {e.message}",
                extra={"user_id": user.id, "error_code": e.code},
            )
            context.profile_load_failed()
            return context.decision

        context.set_profile(profile)
        return context.decision

    async def resolve(self, token: Optional[str]) -> AccessDecision:
        """One-shot evaluation for a token."""
        context = self.open_context()
        try:
            return await self.load(context, token)
        finally:
            context.close()
