import logging
import os

import flet as ft

from src.components.navigation import build_feature_props
from src.components.session import Screen
from src.config.loader import load_config
from src.domain.entities import ViewType
from src.ui.context import AppContext
from src.ui.layout import MainLayout
from src.ui.router import Router
from src.ui.theme import AppTheme
from src.ui.views.feature import FeatureView
from src.ui.views.login import LoginView
from src.ui.views.signup import SignupView
from src.ui.views.suggestion import SuggestionView

# Logging setup
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

# Configuration from environment (with sensible defaults for local dev)
CONFIG_PATH = os.environ.get("VENA_CONFIG_PATH", "config.yaml")


def main(page: ft.Page) -> None:
    from pathlib import Path

    # 1. Load Config
    config_path = Path(CONFIG_PATH)
    try:
        config = load_config(config_path)
    except (FileNotFoundError, ValueError) as err:
        logger.error(f"Config error: {err}")
        page.add(ft.Text(f"Error: {err}", color="red", size=20))
        return
    logger.info(f"Config loaded from {config_path.absolute()}")

    page.title = config.app.title

    # 2. Theme Setup
    page.theme = AppTheme.light_theme()
    page.dark_theme = AppTheme.dark_theme()
    page.theme_mode = ft.ThemeMode.LIGHT

    # 3. Create Context
    ctx = AppContext.create(config)

    # 4. Routing Setup
    router = Router(page, ctx)

    # --- Layout Wrapper ---
    def make_view(name: str, content: ft.Control, *, shell: bool) -> ft.View:
        if not shell:
            return ft.View(f"/{name}", [content], padding=20, vertical_alignment=ft.MainAxisAlignment.CENTER)

        def handle_logout() -> None:
            ctx.gate.logout()

        def handle_toggle_sidebar() -> None:
            ctx.navigator.toggle_sidebar()
            router.render()

        def toggle_theme() -> None:
            if page.theme_mode == ft.ThemeMode.LIGHT:
                page.theme_mode = ft.ThemeMode.DARK
            else:
                page.theme_mode = ft.ThemeMode.LIGHT
            page.update()

        layout = MainLayout(
            page=page,
            ctx=ctx,
            content=content,
            on_logout=handle_logout,
            on_toggle_sidebar=handle_toggle_sidebar,
            toggle_theme=toggle_theme,
        )
        return ft.View(f"/{name}", [layout], padding=0)

    # --- Builders ---

    def login_builder(_: ft.Page) -> ft.View:
        return make_view("login", LoginView(page, ctx), shell=False)

    def signup_builder(_: ft.Page) -> ft.View:
        return make_view("signup", SignupView(page, ctx), shell=False)

    def suggestion_builder(_: ft.Page) -> ft.View:
        return make_view("suggestion", SuggestionView(page, ctx), shell=False)

    def feature_builder(view: ViewType):  # type: ignore[no-untyped-def]
        def build(_: ft.Page) -> ft.View:
            props = build_feature_props(view, ctx.store, ctx.navigator, ctx.notifications)
            return make_view(view.value, FeatureView(page, props), shell=True)

        return build

    # --- Register Screens ---

    router.register_screen(Screen.LOGIN, login_builder)
    router.register_screen(Screen.SIGNUP, signup_builder)
    router.register_screen(Screen.SUGGESTION, suggestion_builder)

    for view in ViewType:
        router.register_view(view, feature_builder(view))

    # Wire up events
    router.attach()
    page.on_disconnect = lambda _: ctx.close()

    router.render()


def run() -> None:
    ft.app(target=main)


if __name__ == "__main__":
    run()
