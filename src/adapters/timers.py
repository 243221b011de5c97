"""
Thread-backed timer adapter.

Implements TimerPort with daemon `threading.Timer`s so pending callbacks never
keep the process alive. Callbacks run on the timer thread; callers guard
their own state.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable

logger = logging.getLogger(__name__)


class ThreadTimerHandle:
    def __init__(self, timer: threading.Timer) -> None:
        self._timer = timer

    def cancel(self) -> None:
        self._timer.cancel()


class ThreadTimerService:
    """Schedules one-shot callbacks on background threads."""

    def schedule(self, delay_ms: int, callback: Callable[[], None]) -> ThreadTimerHandle:
        timer = threading.Timer(max(delay_ms, 0) / 1000.0, self._guarded(callback))
        timer.daemon = True
        timer.start()
        return ThreadTimerHandle(timer)

    @staticmethod
    def _guarded(callback: Callable[[], None]) -> Callable[[], None]:
        def fire() -> None:
            try:
                callback()
            except Exception:
                logger.exception("Timer callback failed")

        return fire
