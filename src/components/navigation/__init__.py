"""
Navigation component - Active view and deep-link actions.

Tracks which feature view is shown and carries one-shot actions into it.
"""

from ._impl import Navigator
from .component import (
    DEEP_LINK_VIEWS,
    PROFILE_VIEWS,
    VIEW_COLLECTIONS,
    build_feature_props,
)
from .models import FeatureProps, NavigationAction
from .ports import NavigationListener, NotifyPort, StorePort

__all__ = [
    # Service
    "Navigator",
    # Boundary
    "build_feature_props",
    "DEEP_LINK_VIEWS",
    "PROFILE_VIEWS",
    "VIEW_COLLECTIONS",
    # Models
    "FeatureProps",
    "NavigationAction",
    # Ports
    "NavigationListener",
    "NotifyPort",
    "StorePort",
]
