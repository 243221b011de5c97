"""
Session component port definitions.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Protocol

from src.domain.entities import Lead
from src.ports.clock import ClockPort
from src.ports.storage import KeyValueStorePort
from src.ports.timer import TimerHandle, TimerPort

SessionListener = Callable[[], None]


class LeadIntakePort(Protocol):
    """Where leads submitted from the public suggestion form go."""

    def __call__(self, lead: Lead) -> Any: ...


class NotifyPort(Protocol):
    def publish(self, message: str, duration_ms: int | None = None) -> Any: ...


__all__ = [
    "ClockPort",
    "KeyValueStorePort",
    "LeadIntakePort",
    "NotifyPort",
    "SessionListener",
    "TimerHandle",
    "TimerPort",
]
