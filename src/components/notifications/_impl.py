"""
NotificationScheduler - one visible message with automatic expiry.

Invariants:
- At most one message is visible
- A publish replaces the visible message at once and restarts expiry
- An expiry that belongs to a superseded publish never clears the newer
  message (checked by generation, not by timer cancellation alone)
"""

from __future__ import annotations

import logging
import threading

from .models import Notification
from .ports import NotificationListener, TimerHandle, TimerPort

logger = logging.getLogger(__name__)

DEFAULT_DURATION_MS = 3000


class NotificationScheduler:
    """Publishes transient user-facing messages."""

    def __init__(self, timer: TimerPort, default_duration_ms: int = DEFAULT_DURATION_MS) -> None:
        """
        Initialize the scheduler.

        Args:
            timer: Timer used to schedule expiry
            default_duration_ms: Lifetime of a message published without one
        """
        if default_duration_ms <= 0:
            raise ValueError("default_duration_ms must be positive")

        self._timer = timer
        self._default_duration_ms = default_duration_ms
        self._lock = threading.Lock()
        self._message = ""
        self._generation = 0
        self._handle: TimerHandle | None = None
        self._listeners: list[NotificationListener] = []

    @property
    def current(self) -> str:
        """The visible message, or "" when nothing is shown."""
        with self._lock:
            return self._message

    @property
    def generation(self) -> int:
        with self._lock:
            return self._generation

    def subscribe(self, listener: NotificationListener) -> None:
        self._listeners.append(listener)

    def _notify(self, message: str) -> None:
        for listener in list(self._listeners):
            listener(message)

    def publish(self, message: str, duration_ms: int | None = None) -> Notification:
        """
        Show message now and clear it after duration_ms.

        Raises:
            ValueError: If duration_ms is not positive
        """
        duration = self._default_duration_ms if duration_ms is None else duration_ms
        if duration <= 0:
            raise ValueError(f"duration_ms must be positive, got {duration}")

        with self._lock:
            self._generation += 1
            generation = self._generation
            self._message = message
            previous, self._handle = self._handle, None

        if previous is not None:
            previous.cancel()

        handle = self._timer.schedule(duration, lambda: self._expire(generation))
        with self._lock:
            if self._generation == generation:
                self._handle = handle

        logger.debug("Notification #%d for %dms: %s", generation, duration, message)
        self._notify(message)
        return Notification(message=message, generation=generation, duration_ms=duration)

    def _expire(self, generation: int) -> None:
        with self._lock:
            if generation != self._generation:
                logger.debug("Ignoring stale expiry #%d", generation)
                return
            self._message = ""
            self._handle = None

        self._notify("")

    def dismiss(self) -> None:
        """Clear the visible message now and drop its pending expiry."""
        with self._lock:
            self._generation += 1
            had_message = self._message != ""
            self._message = ""
            previous, self._handle = self._handle, None

        if previous is not None:
            previous.cancel()
        if had_message:
            self._notify("")

    def close(self) -> None:
        """Cancel any pending expiry (teardown)."""
        with self._lock:
            previous, self._handle = self._handle, None
        if previous is not None:
            previous.cancel()
