"""
Navigation component port definitions.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Protocol

from src.domain.entities import ViewType

from .models import NavigationAction

NavigationListener = Callable[[ViewType, NavigationAction | None], None]


class NotifyPort(Protocol):
    def publish(self, message: str, duration_ms: int | None = None) -> None: ...


class StorePort(Protocol):
    """The slice of AppStore the feature-view boundary reads from."""

    profile: Any

    def collection(self, name: str) -> Any: ...
