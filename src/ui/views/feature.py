"""
Feature view shell.

Renders a view's collection summary from its FeatureProps and consumes the
pending navigation action it was handed.
"""

from __future__ import annotations

import logging

import flet as ft

from src.components.navigation import FeatureProps, NavigationAction
from src.domain.entities import Project, ViewType
from src.ui.components.summary_card import SummaryCard

logger = logging.getLogger(__name__)

COLLECTION_LABELS = {
    "clients": "Klien",
    "projects": "Proyek",
    "team_members": "Freelancer",
    "transactions": "Transaksi",
    "packages": "Paket",
    "add_ons": "Add-On",
    "team_project_payments": "Fee Proyek",
    "team_payment_records": "Slip Pembayaran",
    "pockets": "Kantong",
    "leads": "Prospek",
    "reward_ledger_entries": "Hadiah",
}


def describe_action(action: NavigationAction) -> str:
    """Human-readable line for the record a view was asked to open."""
    parts = [f"Membuka {action.entity_id or 'baru'}"]
    if action.sub_tab:
        parts.append(f"tab {action.sub_tab}")
    if action.kind != "open":
        parts.append(f"({action.kind})")
    return " ".join(parts)


class FeatureView(ft.Column):  # type: ignore
    def __init__(self, page: ft.Page, props: FeatureProps) -> None:
        super().__init__(expand=True, spacing=16, scroll=ft.ScrollMode.AUTO)
        self.page = page
        self.props = props

        controls: list[ft.Control] = [ft.Text(props.view.value, style="headlineSmall")]

        if props.initial_action is not None:
            controls.append(
                ft.Container(
                    content=ft.Text(describe_action(props.initial_action)),
                    bgcolor="secondaryContainer",
                    padding=12,
                    border_radius=8,
                )
            )
            # Consumed once: a re-render without a new navigate shows nothing
            if props.clear_action():
                logger.debug("%s consumed %s", props.view.value, props.initial_action)

        cards = [
            SummaryCard(COLLECTION_LABELS.get(name, name), str(len(handle.get())))
            for name, handle in props.collections.items()
        ]
        controls.append(ft.Row(cards, wrap=True, spacing=12, run_spacing=12))

        if props.profile is not None:
            profile = props.profile.get()
            controls.append(ft.Text(f"{profile.company_name} · {profile.email}", size=12))

        if props.view == ViewType.DASHBOARD and props.navigate is not None:
            controls.append(self._outstanding_projects())

        self.controls = controls

    def _outstanding_projects(self) -> ft.Control:
        """Dashboard shortcuts into the project view's payment tab."""
        projects: tuple[Project, ...] = self.props.collections["projects"].get()
        outstanding = [p for p in projects if p.balance_due > 0]

        tiles = [
            ft.ListTile(
                title=ft.Text(p.project_name),
                subtitle=ft.Text(f"Sisa tagihan Rp {p.balance_due:,}".replace(",", ".")),
                on_click=lambda _, p=p: self._open_payment(p),
            )
            for p in outstanding
        ]
        return ft.Column([ft.Text("Tagihan belum lunas", weight=ft.FontWeight.BOLD), *tiles])

    def _open_payment(self, project: Project) -> None:
        assert self.props.navigate
        self.props.navigate(
            ViewType.PROJECTS,
            NavigationAction(ViewType.PROJECTS, entity_id=project.id, sub_tab="payment"),
        )
