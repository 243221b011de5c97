"""
Notification component - transient user-facing messages.

Invariants:
- A later publish always wins over an earlier one
- Invalid durations are reported, never scheduled
"""

from __future__ import annotations

from ._impl import NotificationScheduler
from .models import DismissInput, NotificationOutput, PublishInput


def run_publish(inp: PublishInput, scheduler: NotificationScheduler) -> NotificationOutput:
    try:
        notification = scheduler.publish(inp.message, inp.duration_ms)
    except ValueError as e:
        return NotificationOutput(visible=scheduler.current, success=False, error=str(e))

    return NotificationOutput(notification=notification, visible=scheduler.current)


def run_dismiss(inp: DismissInput, scheduler: NotificationScheduler) -> NotificationOutput:
    scheduler.dismiss()
    return NotificationOutput(visible=scheduler.current)


def run(
    inp: PublishInput | DismissInput,
    *,
    scheduler: NotificationScheduler,
) -> NotificationOutput:
    if isinstance(inp, PublishInput):
        return run_publish(inp, scheduler)

    elif isinstance(inp, DismissInput):
        return run_dismiss(inp, scheduler)

    else:
        raise ValueError(f"Unknown input type: {type(inp)}")
