"""
Navigation component models.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any

from src.domain.entities import SubTab, ViewType

# --- Navigation Action ---


@dataclass(frozen=True)
class NavigationAction:
    """
    One-shot instruction carried into a view by a navigate call.

    kind names what the target view should do (e.g. "open", "create");
    entity_id and sub_tab pick the record and the tab to show.
    """

    target_view: ViewType
    entity_id: str | None = None
    sub_tab: SubTab | None = None
    kind: str = "open"


# --- Feature View Boundary ---


@dataclass(frozen=True)
class FeatureProps:
    """
    Everything a feature view receives from the shell.

    collections maps collection names to read/replace handles. initial_action
    is set only for deep-linkable views with a pending action addressed to
    them; clear_action acknowledges it.
    """

    view: ViewType
    collections: Mapping[str, Any]
    show_notification: Callable[..., None]
    profile: Any = None
    navigate: Callable[..., None] | None = None
    initial_action: NavigationAction | None = None
    clear_action: Callable[[], bool] = field(default=lambda: False)
