"""
In-process change notifications for profiles.

The repository publishes a ProfileChange after every mutation. Session
contexts subscribe so they stop trusting a profile that an administrator
has since approved, demoted or removed.
"""

import logging
from typing import Callable, Optional

from .models import ProfileChange

logger = logging.getLogger(__name__)

ProfileListener = Callable[[ProfileChange], None]


class ProfileChangeNotifier:
    """Synchronous publish/subscribe hub for profile changes."""

    def __init__(self) -> None:
        self._listeners: list[ProfileListener] = []

    def subscribe(self, listener: ProfileListener) -> Callable[[], None]:
        """
        Register a listener.

        Returns:
            A callable that removes the listener again
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def publish(self, change: ProfileChange) -> None:
        """Deliver a change to every listener registered at call time."""
        for listener in list(self._listeners):
            try:
                listener(change)
            except Exception:
                # Delivery is best-effort; the write has already happened
                logger.exception(
                    f"Profile listener failed for {change.kind.value} change",
                    extra={"user_id": change.user_id},
                )

    @property
    def listener_count(self) -> int:
        return len(self._listeners)


_notifier: Optional[ProfileChangeNotifier] = None


def get_profile_notifier() -> ProfileChangeNotifier:
    """Get the process-wide notifier."""
    global _notifier
    if _notifier is None:
        _notifier = ProfileChangeNotifier()
    return _notifier


def reset_profile_notifier() -> None:
    """Drop the process-wide notifier (for testing)."""
    global _notifier
    _notifier = None
