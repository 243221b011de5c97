from collections.abc import Callable
from typing import Any

import flet as ft

from src.domain.entities import ViewType
from src.ui.context import AppContext
from src.ui.theme import AppTheme

RAIL_VIEWS: tuple[ViewType, ...] = tuple(ViewType)


class MainLayout(ft.Row):  # type: ignore
    """
    The authenticated shell.
    - NavigationRail (Left) over every ViewType, extended while the sidebar is open
    - Header with page title, sidebar toggle, theme toggle and logout
    - Notification banner above the feature content
    """

    def __init__(
        self,
        page: ft.Page,
        ctx: AppContext,
        content: ft.Control,  # The feature view
        on_logout: Callable[[], None],
        on_toggle_sidebar: Callable[[], None],
        toggle_theme: Callable[[], None],
    ):
        super().__init__(expand=True, spacing=0)
        self.page = page
        self.ctx = ctx
        self.on_logout = on_logout
        self.on_toggle_sidebar = on_toggle_sidebar
        self.toggle_theme = toggle_theme

        active = ctx.navigator.active_view

        destinations = []
        for view in RAIL_VIEWS:
            icon, selected_icon = AppTheme.icons_for(view)
            destinations.append(
                ft.NavigationRailDestination(icon=icon, selected_icon=selected_icon, label=view.value)
            )

        # Navigation Rail
        self.rail = ft.NavigationRail(
            selected_index=RAIL_VIEWS.index(active),
            extended=ctx.navigator.sidebar_open,
            label_type=(
                ft.NavigationRailLabelType.NONE
                if ctx.navigator.sidebar_open
                else ft.NavigationRailLabelType.ALL
            ),
            min_width=100,
            min_extended_width=220,
            leading=ft.Container(
                content=ft.Icon(ft.Icons.CAMERA_ALT, size=32, color="primary"),
                padding=20,
            ),
            group_alignment=-0.9,
            destinations=destinations,
            on_change=self._rail_change,
            bgcolor="surface",
        )

        # Notification banner
        message = ctx.notifications.current
        self.banner = ft.Container(
            content=ft.Row(
                [
                    ft.Icon(ft.Icons.CHECK_CIRCLE, color=AppTheme.banner_fg),
                    ft.Text(message, color=AppTheme.banner_fg, expand=True),
                    ft.IconButton(
                        ft.Icons.CLOSE,
                        icon_color=AppTheme.banner_fg,
                        on_click=lambda _: self.ctx.notifications.dismiss(),
                    ),
                ]
            ),
            bgcolor=AppTheme.banner_bg,
            padding=ft.padding.symmetric(horizontal=20, vertical=6),
            visible=bool(message),
        )

        # Content Wrapper
        self.content_area = ft.Container(
            content=content,
            expand=True,
            padding=20,
            alignment=ft.alignment.top_left,
        )

        # Header
        self.app_bar = ft.Container(
            content=ft.Row(
                [
                    ft.IconButton(ft.Icons.MENU, on_click=lambda _: self.on_toggle_sidebar()),
                    ft.Text(active.value, size=20, weight=ft.FontWeight.BOLD, color="primary"),
                    ft.Container(expand=True),
                    ft.IconButton(
                        ft.Icons.DARK_MODE if page.theme_mode == ft.ThemeMode.LIGHT else ft.Icons.LIGHT_MODE,
                        on_click=lambda _: self.toggle_theme(),
                    ),
                    ft.PopupMenuButton(
                        icon=ft.Icons.PERSON,
                        items=[
                            ft.PopupMenuItem(text=ctx.store.profile.get().full_name),
                            ft.PopupMenuItem(text="Keluar", on_click=lambda _: self.on_logout()),
                        ],
                    ),
                ],
                alignment=ft.MainAxisAlignment.SPACE_BETWEEN,
            ),
            padding=ft.padding.symmetric(horizontal=20, vertical=10),
            bgcolor="surfaceVariant",
        )

        right_panel = ft.Column(
            [
                self.app_bar,
                self.banner,
                self.content_area,
            ],
            expand=True,
            spacing=0,
        )

        self.controls = [
            self.rail,
            ft.VerticalDivider(width=1, color="outlineVariant"),
            right_panel,
        ]

    def _rail_change(self, e: Any) -> None:
        idx = e.control.selected_index
        self.ctx.navigator.navigate(RAIL_VIEWS[idx])
