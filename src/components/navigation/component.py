"""
Navigation component - feature-view boundary.

Describes what each view of the authenticated shell receives from the
store and navigator, and assembles that bundle on demand.

Invariants:
- Only deep-linkable views are handed a pending action
- A view's clear_action acknowledges exactly the action it was given
"""

from __future__ import annotations

from src.domain.entities import ViewType

from ._impl import Navigator
from .models import FeatureProps
from .ports import NotifyPort, StorePort

VIEW_COLLECTIONS: dict[ViewType, tuple[str, ...]] = {
    ViewType.DASHBOARD: ("projects", "clients", "transactions", "pockets", "packages", "leads"),
    ViewType.CLIENTS: ("clients", "projects", "packages", "add_ons", "transactions"),
    ViewType.PROJECTS: (
        "projects",
        "clients",
        "packages",
        "team_members",
        "team_project_payments",
        "transactions",
    ),
    ViewType.TEAM: (
        "team_members",
        "team_project_payments",
        "team_payment_records",
        "transactions",
        "projects",
        "reward_ledger_entries",
    ),
    ViewType.FINANCE: ("transactions", "pockets", "projects"),
    ViewType.KPI_KLIEN: ("clients", "projects", "leads"),
    ViewType.CALENDAR: ("projects", "team_members"),
    ViewType.PACKAGES: ("packages", "add_ons", "projects"),
    ViewType.SETTINGS: ("transactions", "projects"),
}

# Views that read the profile singleton
PROFILE_VIEWS = frozenset(
    {
        ViewType.CLIENTS,
        ViewType.PROJECTS,
        ViewType.TEAM,
        ViewType.FINANCE,
        ViewType.CALENDAR,
        ViewType.SETTINGS,
    }
)

# Views that accept a pending action (open entity X at sub-tab Y)
DEEP_LINK_VIEWS = frozenset({ViewType.CLIENTS, ViewType.PROJECTS, ViewType.TEAM})


def build_feature_props(
    view: ViewType,
    store: StorePort,
    navigator: Navigator,
    notifier: NotifyPort,
) -> FeatureProps:
    """Assemble the props handed to the feature view for view."""
    collections = {name: store.collection(name) for name in VIEW_COLLECTIONS[view]}

    action = navigator.pending_for(view) if view in DEEP_LINK_VIEWS else None

    def clear_action() -> bool:
        if action is None:
            return False
        return navigator.acknowledge(action)

    return FeatureProps(
        view=view,
        collections=collections,
        show_notification=notifier.publish,
        profile=store.profile if view in PROFILE_VIEWS else None,
        navigate=navigator.navigate if view == ViewType.DASHBOARD else None,
        initial_action=action,
        clear_action=clear_action,
    )
