"""
Per-session state holder read by the Session Gate.

Replaces ambient global session/profile state with an explicit object that
is passed to whoever needs it. Listeners are told about every change, and
the decision is recomputed from current state on every read.
"""

import logging
from typing import Callable, Optional

from modules.profiles.models import Profile, ProfileChange, ProfileChangeKind
from modules.profiles.notifier import ProfileChangeNotifier
from shared.models import AuthenticatedUser

from .gate import evaluate_access
from .models import AccessDecision

logger = logging.getLogger(__name__)

DecisionListener = Callable[[AccessDecision], None]


class SessionContext:
    """
    Session and profile for one client session.

    Binding to a ProfileChangeNotifier keeps the held profile in step with
    the repository: an approval, demotion or removal of this session's
    identity replaces or drops the profile as soon as it is written.
    """

    def __init__(self, notifier: Optional[ProfileChangeNotifier] = None) -> None:
        self._session: Optional[AuthenticatedUser] = None
        self._session_loading = False
        self._profile: Optional[Profile] = None
        self._profile_loading = False
        self._listeners: list[DecisionListener] = []
        self._unbind: Optional[Callable[[], None]] = None
        if notifier is not None:
            self.bind(notifier)

    @property
    def session(self) -> Optional[AuthenticatedUser]:
        return self._session

    @property
    def profile(self) -> Optional[Profile]:
        return self._profile

    @property
    def decision(self) -> AccessDecision:
        return evaluate_access(
            session_present=self._session is not None,
            session_loading=self._session_loading,
            profile=self._profile,
            profile_loading=self._profile_loading,
        )

    # -------------------------------------------------------------------------
    # State transitions
    # -------------------------------------------------------------------------

    def begin_session_load(self) -> None:
        self._session_loading = True
        self._changed()

    def set_session(self, user: Optional[AuthenticatedUser]) -> None:
        """Install the session; clearing it or switching users drops the profile."""
        if user is None or (self._session is not None and self._session.id != user.id):
            self._profile = None
            self._profile_loading = False
        self._session = user
        self._session_loading = False
        self._changed()

    def begin_profile_load(self) -> None:
        self._profile_loading = True
        self._changed()

    def set_profile(self, profile: Optional[Profile]) -> None:
        self._profile = profile
        self._profile_loading = False
        self._changed()

    def profile_load_failed(self) -> None:
        self.set_profile(None)

    def clear(self) -> None:
        """Forget everything, as on sign-out."""
        self.set_session(None)

    # -------------------------------------------------------------------------
    # Subscriptions
    # -------------------------------------------------------------------------

    def subscribe(self, listener: DecisionListener) -> Callable[[], None]:
        """Register a listener called with the new decision after each change."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def bind(self, notifier: ProfileChangeNotifier) -> None:
        if self._unbind is not None:
            self._unbind()
        self._unbind = notifier.subscribe(self._on_profile_change)

    def close(self) -> None:
        """Detach from the notifier and drop listeners."""
        if self._unbind is not None:
            self._unbind()
            self._unbind = None
        self._listeners.clear()

    def _on_profile_change(self, change: ProfileChange) -> None:
        if self._session is None or change.user_id != self._session.id:
            return
        logger.debug(
            f"Profile {change.kind.value} for active session",
            extra={"user_id": change.user_id},
        )
        if change.kind == ProfileChangeKind.DELETED:
            self.set_profile(None)
        else:
            self.set_profile(change.profile)

    def _changed(self) -> None:
        if not self._listeners:
            return
        decision = self.decision
        for listener in list(self._listeners):
            listener(decision)
