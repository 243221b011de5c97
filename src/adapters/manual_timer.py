"""
Manual timer adapter.

Implements TimerPort over a virtual millisecond clock that only moves when
advance() is called. Used for deterministic tests and for driving the core
headless (no background threads).
"""

from __future__ import annotations

import itertools
from collections.abc import Callable


class ManualTimerHandle:
    def __init__(self, due_ms: int, seq: int, callback: Callable[[], None]) -> None:
        self.due_ms = due_ms
        self.seq = seq
        self.callback = callback
        self.cancelled = False
        self.fired = False

    def cancel(self) -> None:
        self.cancelled = True


class ManualTimerService:
    """
    Virtual-time scheduler.

    With honor_cancel=False cancelled callbacks still fire, which models a
    timer that had already been queued when it was cancelled.
    """

    def __init__(self, *, honor_cancel: bool = True) -> None:
        self.now_ms = 0
        self.honor_cancel = honor_cancel
        self._seq = itertools.count()
        self._timers: list[ManualTimerHandle] = []

    def schedule(self, delay_ms: int, callback: Callable[[], None]) -> ManualTimerHandle:
        handle = ManualTimerHandle(self.now_ms + max(delay_ms, 0), next(self._seq), callback)
        self._timers = [*self._live(), handle]
        return handle

    def _live(self) -> list[ManualTimerHandle]:
        return [
            t for t in self._timers
            if not t.fired and not (t.cancelled and self.honor_cancel)
        ]

    @property
    def pending_count(self) -> int:
        return len(self._live())

    @property
    def tracked_count(self) -> int:
        """Handles still held, including cancelled ones kept to fire anyway."""
        return len(self._timers)

    def advance(self, delta_ms: int) -> None:
        """Move the clock forward, firing due callbacks in due order."""
        target = self.now_ms + delta_ms
        while True:
            due = [t for t in self._live() if t.due_ms <= target]
            if not due:
                break
            timer = min(due, key=lambda t: (t.due_ms, t.seq))
            self.now_ms = timer.due_ms
            timer.fired = True
            timer.callback()
        self.now_ms = target
        self._timers = self._live()

    def run_all(self) -> None:
        """Fire everything still pending, including timers scheduled meanwhile."""
        while self._live():
            nxt = min(self._live(), key=lambda t: (t.due_ms, t.seq))
            self.advance(nxt.due_ms - self.now_ms)
