"""
Navigator - active view and consumed-once pending action.

Invariants:
- navigate() always replaces the pending action; omitting it discards any
  previous one
- A pending action is delivered only to the view it targets and disappears
  once acknowledged
- Navigating closes the sidebar overlay
"""

from __future__ import annotations

import logging
import threading

from src.domain.entities import ViewType

from .models import NavigationAction
from .ports import NavigationListener

logger = logging.getLogger(__name__)


class Navigator:
    """Navigation state for the authenticated shell."""

    def __init__(self, initial_view: ViewType = ViewType.DASHBOARD) -> None:
        self._lock = threading.Lock()
        self._active_view = initial_view
        self._pending: NavigationAction | None = None
        self._sidebar_open = False
        self._listeners: list[NavigationListener] = []

    @property
    def active_view(self) -> ViewType:
        return self._active_view

    @property
    def pending_action(self) -> NavigationAction | None:
        return self._pending

    @property
    def sidebar_open(self) -> bool:
        return self._sidebar_open

    def subscribe(self, listener: NavigationListener) -> None:
        self._listeners.append(listener)

    def navigate(self, view: ViewType, action: NavigationAction | None = None) -> None:
        """
        Switch to view, carrying action (or nothing) into it.

        Args:
            view: View to activate
            action: Optional one-shot instruction for the target view
        """
        with self._lock:
            self._active_view = view
            self._pending = action
            self._sidebar_open = False

        logger.info("Navigate to: %s%s", view.value, f" ({action})" if action else "")
        for listener in list(self._listeners):
            listener(view, action)

    def pending_for(self, view: ViewType) -> NavigationAction | None:
        """The pending action if it targets view, else None."""
        with self._lock:
            action = self._pending
        if action is not None and action.target_view == view:
            return action
        return None

    def acknowledge(self, action: NavigationAction) -> bool:
        """
        Mark action as consumed.

        Returns False (and changes nothing) when action is no longer the
        pending one, e.g. because a newer navigate() replaced it.
        """
        with self._lock:
            if self._pending is not action:
                return False
            self._pending = None
        logger.debug("Acknowledged %s", action)
        return True

    def toggle_sidebar(self) -> bool:
        with self._lock:
            self._sidebar_open = not self._sidebar_open
            return self._sidebar_open

    def close_sidebar(self) -> None:
        with self._lock:
            self._sidebar_open = False
