"""
Notification component port definitions.
"""

from __future__ import annotations

from collections.abc import Callable

from src.ports.timer import TimerHandle, TimerPort

NotificationListener = Callable[[str], None]

__all__ = ["NotificationListener", "TimerHandle", "TimerPort"]
