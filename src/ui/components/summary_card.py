from typing import Any

import flet as ft


class SummaryCard(ft.Container):  # type: ignore
    """
    Card showing one collection's headline figure, e.g. "Klien: 3".
    """

    def __init__(
        self,
        label: str,
        value: str,
        icon: str | None = None,
        on_click: Any | None = None,
        width: float | None = 200,
    ):
        header: list[ft.Control] = []
        if icon:
            header.append(ft.Icon(icon, color="primary", size=20))
        header.append(ft.Text(label, size=13, color="onSurfaceVariant"))

        super().__init__(
            content=ft.Column(
                [
                    ft.Row(header, spacing=8),
                    ft.Text(value, size=24, weight=ft.FontWeight.BOLD),
                ],
                spacing=6,
            ),
            width=width,
            padding=16,
            border_radius=ft.border_radius.all(12),
            bgcolor="surfaceVariant",  # Adapts to theme
            on_click=on_click,
            shadow=ft.BoxShadow(
                spread_radius=0,
                blur_radius=10,
                color="#1A000000",
                offset=ft.Offset(0, 4),
            ),
        )
