"""
Notifications component - Transient messages with automatic expiry.
"""

from ._impl import DEFAULT_DURATION_MS, NotificationScheduler
from .component import run, run_dismiss, run_publish
from .models import DismissInput, Notification, NotificationOutput, PublishInput
from .ports import NotificationListener, TimerHandle, TimerPort

__all__ = [
    # Entry points
    "run",
    "run_dismiss",
    "run_publish",
    # Service
    "NotificationScheduler",
    "DEFAULT_DURATION_MS",
    # Models
    "DismissInput",
    "Notification",
    "NotificationOutput",
    "PublishInput",
    # Ports
    "NotificationListener",
    "TimerHandle",
    "TimerPort",
]
