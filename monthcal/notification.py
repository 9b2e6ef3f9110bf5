"""Single-slot transient notifications."""

import logging
import threading
import time
from dataclasses import dataclass
from typing import Callable

from monthcal.constants import NOTIFICATION_DELAY

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Notification:
    """A message and the monotonic time at which it expires."""

    message: str
    expires_at: float


class Notifier:
    """Holds at most one message; a new message replaces the old one.

    Each ``show`` restarts the dismissal delay. The slot is cleared by a
    daemon timer when ``auto_dismiss`` is enabled; reading ``message``
    after the expiry time returns None either way.
    """

    def __init__(
        self,
        delay: float = NOTIFICATION_DELAY,
        clock: Callable[[], float] = time.monotonic,
        auto_dismiss: bool = True,
    ):
        self.delay = delay
        self._clock = clock
        self._auto_dismiss = auto_dismiss
        self._lock = threading.Lock()
        self._current: Notification | None = None
        self._timer: threading.Timer | None = None

    def show(self, message: str) -> Notification:
        """Display message, replacing any previous one."""
        with self._lock:
            self._cancel_timer()
            notification = Notification(message, self._clock() + self.delay)
            self._current = notification
            if self._auto_dismiss:
                self._timer = threading.Timer(
                    self.delay, self._expire, args=(notification,)
                )
                self._timer.daemon = True
                self._timer.start()
        logger.info(f"Notification: {message}")
        return notification

    def dismiss(self) -> None:
        """Clear the slot immediately."""
        with self._lock:
            self._cancel_timer()
            self._current = None

    @property
    def current(self) -> Notification | None:
        """The visible notification, or None if empty or expired."""
        with self._lock:
            if self._current is not None and self._clock() >= self._current.expires_at:
                self._current = None
            return self._current

    @property
    def message(self) -> str | None:
        notification = self.current
        return notification.message if notification else None

    def close(self) -> None:
        """Cancel any pending timer."""
        self.dismiss()

    def _expire(self, notification: Notification) -> None:
        with self._lock:
            # A newer message owns the slot; leave it alone
            if self._current is notification:
                self._current = None
                self._timer = None

    def _cancel_timer(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None
