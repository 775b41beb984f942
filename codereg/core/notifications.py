"""
Transient banner notifications

Every posted message gets a strictly increasing token. A clear request only
takes effect when its token matches the message currently shown, so an old
timer can never blank a newer message.
"""
import itertools
import logging
import time
from typing import Callable, Optional

from codereg.models import Notification


logger = logging.getLogger(__name__)

DEFAULT_TTL = 3.0


class Notifier:
    """Holds at most one current notification"""

    def __init__(self, ttl: float = DEFAULT_TTL, clock: Callable[[], float] = time.monotonic):
        self.ttl = ttl
        self._clock = clock
        self._tokens = itertools.count(1)
        self._current: Optional[Notification] = None

    def post(self, message: str, level: str = "info") -> Notification:
        """Replace the banner with a new message"""
        notification = Notification(
            token=next(self._tokens),
            message=message,
            level=level,
            posted_at=self._clock()
        )
        self._current = notification
        return notification

    def current(self) -> Optional[Notification]:
        """Live notification, or None once ttl has elapsed"""
        if self._current is None:
            return None
        if self._clock() - self._current.posted_at >= self.ttl:
            self._current = None
        return self._current

    def clear(self, token: int) -> bool:
        """
        Clear the banner if token belongs to the message being shown

        Returns:
            True if the banner was cleared, False for a stale token
        """
        if self._current is None or self._current.token != token:
            logger.debug(f"Ignoring stale clear for token {token}")
            return False
        self._current = None
        return True

    def reset(self) -> None:
        self._current = None
