"""
Notification center shared by the editor and the list controller.

Notifications are queued in push order and auto-dismiss once older than the
configured time-to-live. Each one is also written to the log at a level
matching its severity.
"""

import itertools
import logging
import time
from collections import deque
from typing import Callable, Deque, List, Optional

from domain.models import Notification, Severity

logger = logging.getLogger(__name__)

_LOG_LEVELS = {
    Severity.SUCCESS: logging.INFO,
    Severity.INFO: logging.INFO,
    Severity.WARNING: logging.WARNING,
    Severity.ERROR: logging.ERROR,
}


class NotificationCenter:
    """
    Queue of transient, auto-dismissing status messages.

    Usage:
        >>> center = NotificationCenter(ttl_seconds=2.0)
        >>> note = center.success("Saved")
        >>> [n.message for n in center.active()]
        ['Saved']
    """

    def __init__(
        self,
        ttl_seconds: float = 2.0,
        *,
        clock: Callable[[], float] = time.monotonic,
        max_queued: int = 50,
    ) -> None:
        self._ttl = ttl_seconds
        self._clock = clock
        self._queue: Deque[Notification] = deque(maxlen=max_queued)
        self._ids = itertools.count(1)

    def push(self, message: str, severity: Severity) -> Notification:
        notification = Notification(
            id=next(self._ids),
            message=message,
            severity=severity,
            created_at=self._clock(),
        )
        self._queue.append(notification)
        logger.log(_LOG_LEVELS[severity], f"Notification ({severity.value}): {message}")
        return notification

    def success(self, message: str) -> Notification:
        return self.push(message, Severity.SUCCESS)

    def error(self, message: str) -> Notification:
        return self.push(message, Severity.ERROR)

    def warning(self, message: str) -> Notification:
        return self.push(message, Severity.WARNING)

    def info(self, message: str) -> Notification:
        return self.push(message, Severity.INFO)

    def _expire(self) -> None:
        now = self._clock()
        while self._queue and now - self._queue[0].created_at >= self._ttl:
            self._queue.popleft()

    def active(self) -> List[Notification]:
        """Notifications still visible, oldest first."""
        self._expire()
        return list(self._queue)

    def latest(self) -> Optional[Notification]:
        """Most recent visible notification, if any."""
        self._expire()
        return self._queue[-1] if self._queue else None

    def dismiss(self, notification_id: int) -> bool:
        for notification in self._queue:
            if notification.id == notification_id:
                self._queue.remove(notification)
                return True
        return False

    def clear(self) -> None:
        self._queue.clear()
