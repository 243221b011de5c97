from src.components.navigation import NavigationAction
from src.components.store import COLLECTION_NAMES
from src.domain.entities import ViewType
from src.ui.layout import RAIL_VIEWS
from src.ui.theme import AppTheme
from src.ui.views.feature import COLLECTION_LABELS, describe_action


def test_app_theme_modes():
    """Test that AppTheme returns correct color schemes for modes."""
    light = AppTheme.light_theme()
    assert light.color_scheme.primary == AppTheme.primary_light

    dark = AppTheme.dark_theme()
    assert dark.color_scheme.primary == AppTheme.primary_dark


def test_every_view_has_rail_icons():
    assert set(AppTheme.view_icons) == set(ViewType)
    icon, selected = AppTheme.icons_for(ViewType.FINANCE)
    assert icon and selected


def test_rail_starts_at_dashboard():
    assert RAIL_VIEWS[0] is ViewType.DASHBOARD
    assert len(RAIL_VIEWS) == len(ViewType)


def test_every_collection_has_a_label():
    assert set(COLLECTION_LABELS) == set(COLLECTION_NAMES)


def test_describe_action():
    action = NavigationAction(ViewType.PROJECTS, entity_id="PRJ001", sub_tab="payment")
    assert describe_action(action) == "Membuka PRJ001 tab payment"

    create = NavigationAction(ViewType.CLIENTS, kind="create")
    assert describe_action(create) == "Membuka baru (create)"
