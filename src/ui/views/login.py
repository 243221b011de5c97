import flet as ft

from src.ui.context import AppContext


class LoginView(ft.Column):  # type: ignore
    def __init__(self, page: ft.Page, ctx: AppContext) -> None:
        super().__init__()
        self.page = page
        self.ctx = ctx
        gate = ctx.gate

        self.email = ft.TextField(label="Email", width=300)
        self.password = ft.TextField(
            label="Kata Sandi", width=300, password=True, can_reveal_password=True
        )
        self.error_text = ft.Text(gate.error, color="red", visible=bool(gate.error))
        self.submit = ft.ElevatedButton(
            "Memproses..." if gate.pending else "Masuk",
            on_click=self.login_click,
            disabled=gate.pending,
        )

        # Setup Column properties
        self.alignment = ft.MainAxisAlignment.CENTER
        self.horizontal_alignment = ft.CrossAxisAlignment.CENTER
        self.controls = [
            ft.Text(ctx.config.app.title, style="headlineMedium"),
            self.email,
            self.password,
            self.error_text,
            self.submit,
            ft.TextButton("Belum punya akun? Daftar", on_click=lambda _: gate.show_signup()),
            ft.TextButton("Kirim saran", on_click=lambda _: gate.show_suggestion()),
        ]

    def login_click(self, e: ft.ControlEvent) -> None:
        self.ctx.gate.submit_login(self.email.value or "", self.password.value or "")
