"""
Notification component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Notification:
    """A published message and the generation that owns its expiry."""

    message: str
    generation: int
    duration_ms: int


# --- Input Models ---


@dataclass(frozen=True)
class PublishInput:
    message: str
    duration_ms: int | None = None


@dataclass(frozen=True)
class DismissInput:
    pass


# --- Output Models ---


@dataclass(frozen=True)
class NotificationOutput:
    notification: Notification | None = None
    visible: str = ""
    success: bool = True
    error: str | None = None
