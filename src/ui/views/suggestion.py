import flet as ft

from src.components.session import SuggestionInput
from src.ui.context import AppContext

CONTACT_CHANNELS = ("Website", "Instagram", "WhatsApp", "Email", "Lainnya")


class SuggestionView(ft.Column):  # type: ignore
    """Public form that turns a visitor's suggestion into a lead."""

    def __init__(self, page: ft.Page, ctx: AppContext) -> None:
        super().__init__()
        self.page = page
        self.ctx = ctx
        gate = ctx.gate

        self.name = ft.TextField(label="Nama", width=300)
        self.channel = ft.Dropdown(
            label="Kontak Melalui",
            width=300,
            value=CONTACT_CHANNELS[0],
            options=[ft.dropdown.Option(c) for c in CONTACT_CHANNELS],
        )
        self.location = ft.TextField(label="Lokasi", width=300)
        self.notes = ft.TextField(label="Saran", width=300, multiline=True, min_lines=3)
        self.error_text = ft.Text(gate.error, color="red", visible=bool(gate.error))

        self.alignment = ft.MainAxisAlignment.CENTER
        self.horizontal_alignment = ft.CrossAxisAlignment.CENTER
        self.controls = [
            ft.Text("Kirim Saran", style="headlineMedium"),
            self.name,
            self.channel,
            self.location,
            self.notes,
            self.error_text,
            ft.ElevatedButton("Kirim", on_click=self.submit_click),
            ft.TextButton("Kembali ke halaman masuk", on_click=lambda _: gate.show_login()),
        ]

    def submit_click(self, e: ft.ControlEvent) -> None:
        self.ctx.gate.submit_suggestion(
            SuggestionInput(
                name=self.name.value or "",
                contact_channel=self.channel.value or CONTACT_CHANNELS[0],
                location=self.location.value or "",
                notes=self.notes.value or "",
            )
        )
