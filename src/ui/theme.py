import flet as ft

from src.domain.entities import ViewType


class AppTheme:
    """
    Centralized theme configuration for the console.
    Warm neutrals with a deep indigo accent, matching the studio branding.
    """

    # Fonts
    font_family = "Inter"  # Requires Google Fonts loading or system font

    # Colors - Light
    primary_light = "#3b3f9a"  # Indigo
    on_primary_light = "#ffffff"
    secondary_light = "#c47f2c"  # Amber
    surface_light = "#ffffff"
    error_light = "#d64545"

    # Colors - Dark
    primary_dark = "#8c90e8"
    on_primary_dark = "#14152e"
    secondary_dark = "#e2a65a"
    surface_dark = "#1c1c22"

    # Notification banner
    banner_bg = "#e8f5e9"
    banner_fg = "#1b5e20"

    # Navigation rail icons per view
    view_icons: dict[ViewType, tuple[str, str]] = {
        ViewType.DASHBOARD: (ft.Icons.DASHBOARD_OUTLINED, ft.Icons.DASHBOARD),
        ViewType.CLIENTS: (ft.Icons.PEOPLE_OUTLINE, ft.Icons.PEOPLE),
        ViewType.PROJECTS: (ft.Icons.FOLDER_OUTLINED, ft.Icons.FOLDER),
        ViewType.TEAM: (ft.Icons.BADGE_OUTLINED, ft.Icons.BADGE),
        ViewType.FINANCE: (ft.Icons.ACCOUNT_BALANCE_WALLET_OUTLINED, ft.Icons.ACCOUNT_BALANCE_WALLET),
        ViewType.CALENDAR: (ft.Icons.CALENDAR_MONTH_OUTLINED, ft.Icons.CALENDAR_MONTH),
        ViewType.PACKAGES: (ft.Icons.INVENTORY_2_OUTLINED, ft.Icons.INVENTORY_2),
        ViewType.KPI_KLIEN: (ft.Icons.INSIGHTS_OUTLINED, ft.Icons.INSIGHTS),
        ViewType.SETTINGS: (ft.Icons.SETTINGS_OUTLINED, ft.Icons.SETTINGS),
    }

    @classmethod
    def light_theme(cls) -> ft.Theme:
        return ft.Theme(
            color_scheme=ft.ColorScheme(
                primary=cls.primary_light,
                on_primary=cls.on_primary_light,
                secondary=cls.secondary_light,
                surface=cls.surface_light,
                error=cls.error_light,
            ),
            font_family=cls.font_family,
            use_material3=True,
        )

    @classmethod
    def dark_theme(cls) -> ft.Theme:
        return ft.Theme(
            color_scheme=ft.ColorScheme(
                primary=cls.primary_dark,
                on_primary=cls.on_primary_dark,
                secondary=cls.secondary_dark,
                surface=cls.surface_dark,
                error=cls.error_light,  # Keep red for error
            ),
            font_family=cls.font_family,
            use_material3=True,
        )

    @classmethod
    def icons_for(cls, view: ViewType) -> tuple[str, str]:
        """(icon, selected_icon) for a navigation rail destination."""
        return cls.view_icons[view]
