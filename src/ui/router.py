import logging
from collections.abc import Callable
from typing import NamedTuple

import flet as ft

from src.components.navigation import NavigationAction
from src.components.session import Screen
from src.domain.entities import ViewType
from src.ui.context import AppContext

logger = logging.getLogger(__name__)


class RouteConfig(NamedTuple):
    builder: Callable[[ft.Page], ft.View]
    protected: bool


class Router:
    """
    Renders the screen tree the session gate selects.

    Public screens (login, signup, suggestion) are keyed by Screen; the
    authenticated shell is keyed by the navigator's active view. Any change
    in gate, navigator, store or notifications triggers a re-render.
    """

    def __init__(self, page: ft.Page, ctx: AppContext):
        self.page = page
        self.ctx = ctx
        self.screens: dict[Screen, RouteConfig] = {}
        self.views: dict[ViewType, RouteConfig] = {}

    def register_screen(self, screen: Screen, builder: Callable[[ft.Page], ft.View]) -> None:
        self.screens[screen] = RouteConfig(builder, protected=False)

    def register_view(self, view: ViewType, builder: Callable[[ft.Page], ft.View]) -> None:
        self.views[view] = RouteConfig(builder, protected=True)

    def attach(self) -> None:
        """Subscribe to state changes so the page follows them."""
        self.ctx.gate.subscribe(self.render)
        self.ctx.navigator.subscribe(self._on_navigate)
        self.ctx.store.subscribe(self._on_store_change)
        self.ctx.notifications.subscribe(self._on_notification)

    def _on_navigate(self, view: ViewType, action: NavigationAction | None) -> None:
        self.render()

    def _on_store_change(self, name: str) -> None:
        logger.debug(f"Store changed: {name}")
        self.render()

    def _on_notification(self, message: str) -> None:
        self.render()

    def _resolve(self) -> tuple[str, RouteConfig | None]:
        screen = self.ctx.gate.screen
        if screen is not Screen.APP:
            return screen.value, self.screens.get(screen)

        view = self.ctx.navigator.active_view
        return view.value, self.views.get(view)

    def render(self) -> None:
        name, config = self._resolve()
        logger.info(f"Render: {name}")

        # Clear existing views
        self.page.views.clear()

        if not config:
            logger.warning(f"No builder registered for: {name}")
            self.page.views.append(
                ft.View(
                    "/404",
                    [ft.AppBar(title=ft.Text("404")), ft.Text(f"Halaman tidak ditemukan: {name}")],
                )
            )
            self.page.update()
            return

        # Auth Guard
        if config.protected and not self.ctx.gate.authenticated:
            logger.info(f"Access denied to {name}. Showing login.")
            self.ctx.gate.show_login()
            return

        try:
            view = config.builder(self.page)
            self.page.views.append(view)
            self.page.update()
        except TypeError as err:
            logger.error(f"Error building view for {name}: {err}")
            self.page.views.append(ft.View("/error", [ft.Text(f"Error: {err}")]))
            self.page.update()
