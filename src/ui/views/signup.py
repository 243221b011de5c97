import flet as ft

from src.components.session import SignupInput
from src.ui.context import AppContext


class SignupView(ft.Column):  # type: ignore
    def __init__(self, page: ft.Page, ctx: AppContext) -> None:
        super().__init__()
        self.page = page
        self.ctx = ctx
        gate = ctx.gate

        self.full_name = ft.TextField(label="Nama Lengkap", width=300)
        self.company_name = ft.TextField(label="Nama Perusahaan", width=300)
        self.email = ft.TextField(label="Email", width=300)
        self.password = ft.TextField(
            label="Kata Sandi", width=300, password=True, can_reveal_password=True
        )
        self.confirm_password = ft.TextField(
            label="Konfirmasi Kata Sandi", width=300, password=True, can_reveal_password=True
        )
        self.error_text = ft.Text(gate.error, color="red", visible=bool(gate.error))

        self.alignment = ft.MainAxisAlignment.CENTER
        self.horizontal_alignment = ft.CrossAxisAlignment.CENTER
        self.controls = [
            ft.Text("Buat Akun", style="headlineMedium"),
            self.full_name,
            self.company_name,
            self.email,
            self.password,
            self.confirm_password,
            self.error_text,
            ft.ElevatedButton(
                "Memproses..." if gate.pending else "Daftar",
                on_click=self.signup_click,
                disabled=gate.pending,
            ),
            ft.TextButton("Sudah punya akun? Masuk", on_click=lambda _: gate.show_login()),
        ]

    def signup_click(self, e: ft.ControlEvent) -> None:
        self.ctx.gate.submit_signup(
            SignupInput(
                full_name=self.full_name.value or "",
                company_name=self.company_name.value or "",
                email=self.email.value or "",
                password=self.password.value or "",
                confirm_password=self.confirm_password.value or "",
            )
        )
