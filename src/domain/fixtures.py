"""
Seed data for a fresh session.

Every process start builds its collections from these records. Consumers
must copy them (see `seed_collections`) so the module-level fixtures are
never touched by later mutations.
"""

from datetime import date, datetime
from typing import Any

from src.domain.entities import (
    AddOn,
    Client,
    FinancialPocket,
    Lead,
    Package,
    Profile,
    Project,
    RewardLedgerEntry,
    TeamMember,
    TeamPaymentRecord,
    TeamProjectPayment,
    Transaction,
)

MOCK_USER_PROFILE = Profile(
    full_name="Andi Pratama",
    email="admin@venapictures.com",
    phone="081234567890",
    company_name="Vena Pictures",
    website="https://venapictures.com",
    address="Jl. Melati No. 12, Bandung",
    bank_account="BCA 1234567890 a.n. Vena Pictures",
    bio="Studio foto dan video pernikahan.",
)

MOCK_PACKAGES = [
    Package(id="PKG001", name="Paket Silver", price=7_500_000, description="Foto 8 jam, 1 fotografer"),
    Package(id="PKG002", name="Paket Gold", price=12_000_000, description="Foto + video, 2 kru"),
    Package(id="PKG003", name="Paket Platinum", price=20_000_000, description="Full team, drone, album"),
]

MOCK_ADDONS = [
    AddOn(id="ADD001", name="Drone", price=1_500_000),
    AddOn(id="ADD002", name="Album Tambahan", price=1_000_000),
    AddOn(id="ADD003", name="Same Day Edit", price=2_500_000),
]

MOCK_CLIENTS = [
    Client(
        id="CLI001",
        name="Rina & Budi",
        email="rina.budi@example.com",
        phone="081111111111",
        instagram="@rinabudi",
        since=date(2024, 1, 10),
        status="active",
        last_contact=date(2024, 5, 2),
    ),
    Client(
        id="CLI002",
        name="PT Sinar Jaya",
        email="humas@sinarjaya.co.id",
        phone="0227654321",
        since=date(2023, 11, 20),
        status="active",
        last_contact=date(2024, 4, 18),
    ),
    Client(
        id="CLI003",
        name="Dewi Lestari",
        email="dewi@example.com",
        since=date(2023, 6, 1),
        status="churned",
    ),
]

MOCK_PROJECTS = [
    Project(
        id="PRJ001",
        project_name="Pernikahan Rina & Budi",
        client_id="CLI001",
        client_name="Rina & Budi",
        project_type="Pernikahan",
        package_id="PKG002",
        add_on_ids=("ADD001",),
        date=date(2024, 6, 15),
        location="Bandung",
        status="Dikonfirmasi",
        total_cost=13_500_000,
        amount_paid=5_000_000,
        payment_status="DP Terbayar",
        team_member_ids=("TM001", "TM002"),
    ),
    Project(
        id="PRJ002",
        project_name="Company Profile Sinar Jaya",
        client_id="CLI002",
        client_name="PT Sinar Jaya",
        project_type="Korporat",
        package_id="PKG001",
        date=date(2024, 3, 5),
        location="Jakarta",
        status="Selesai",
        total_cost=7_500_000,
        amount_paid=7_500_000,
        payment_status="Lunas",
        team_member_ids=("TM001",),
    ),
]

MOCK_TEAM_MEMBERS = [
    TeamMember(
        id="TM001",
        name="Sari Wulandari",
        role="Fotografer",
        email="sari@example.com",
        phone="082222222222",
        standard_fee=1_500_000,
        reward_balance=250_000,
        rating=4.8,
    ),
    TeamMember(
        id="TM002",
        name="Rizky Hidayat",
        role="Videografer",
        email="rizky@example.com",
        phone="083333333333",
        standard_fee=1_750_000,
        rating=4.6,
    ),
]

MOCK_TEAM_PROJECT_PAYMENTS = [
    TeamProjectPayment(
        id="TPP001",
        project_id="PRJ002",
        team_member_id="TM001",
        team_member_name="Sari Wulandari",
        date=date(2024, 3, 5),
        fee=1_500_000,
        status="Paid",
    ),
    TeamProjectPayment(
        id="TPP002",
        project_id="PRJ001",
        team_member_id="TM001",
        team_member_name="Sari Wulandari",
        date=date(2024, 6, 15),
        fee=1_500_000,
        reward=100_000,
        status="Unpaid",
    ),
    TeamProjectPayment(
        id="TPP003",
        project_id="PRJ001",
        team_member_id="TM002",
        team_member_name="Rizky Hidayat",
        date=date(2024, 6, 15),
        fee=1_750_000,
        status="Unpaid",
    ),
]

MOCK_TEAM_PAYMENT_RECORDS = [
    TeamPaymentRecord(
        id="TPR001",
        record_number="PAY-20240310-001",
        team_member_id="TM001",
        date=date(2024, 3, 10),
        project_payment_ids=("TPP001",),
        total_amount=1_500_000,
    ),
]

MOCK_FINANCIAL_POCKETS = [
    FinancialPocket(
        id="POC001",
        name="Dana Operasional",
        description="Kebutuhan operasional harian",
        icon="wallet",
        balance=10_000_000,
    ),
    FinancialPocket(
        id="POC002",
        name="Tabungan Alat",
        description="Upgrade kamera dan lensa",
        icon="piggy-bank",
        balance=4_000_000,
        goal_amount=25_000_000,
    ),
]

MOCK_TRANSACTIONS = [
    Transaction(
        id="TRN001",
        date=date(2024, 3, 1),
        description="Pelunasan Company Profile Sinar Jaya",
        amount=7_500_000,
        category="Pelunasan",
        project_id="PRJ002",
    ),
    Transaction(
        id="TRN002",
        date=date(2024, 3, 10),
        description="Pembayaran fee Sari Wulandari",
        amount=-1_500_000,
        category="Gaji Freelancer",
        team_project_payment_id="TPP001",
        team_payment_record_id="TPR001",
    ),
    Transaction(
        id="TRN003",
        date=date(2024, 2, 1),
        description="DP Pernikahan Rina & Budi",
        amount=5_000_000,
        category="DP Proyek",
        project_id="PRJ001",
    ),
]

MOCK_LEADS = [
    Lead(
        id="LEAD002",
        name="Maya Sari",
        contact_channel="Instagram",
        location="Bandung",
        status="Menunggu Follow Up",
        date=datetime(2024, 5, 20, 9, 30),
    ),
    Lead(
        id="LEAD001",
        name="Hendra Gunawan",
        contact_channel="WhatsApp",
        location="Cimahi",
        status="Sedang Diskusi",
        date=datetime(2024, 5, 12, 14, 0),
        notes="Tanya paket prewedding",
    ),
]

MOCK_REWARD_LEDGER_ENTRIES = [
    RewardLedgerEntry(
        id="RWD001",
        team_member_id="TM001",
        project_id="PRJ002",
        date=date(2024, 3, 10),
        description="Bonus klien puas",
        amount=250_000,
    ),
]

FIXTURES: dict[str, Any] = {
    "clients": MOCK_CLIENTS,
    "projects": MOCK_PROJECTS,
    "team_members": MOCK_TEAM_MEMBERS,
    "transactions": MOCK_TRANSACTIONS,
    "packages": MOCK_PACKAGES,
    "add_ons": MOCK_ADDONS,
    "team_project_payments": MOCK_TEAM_PROJECT_PAYMENTS,
    "team_payment_records": MOCK_TEAM_PAYMENT_RECORDS,
    "pockets": MOCK_FINANCIAL_POCKETS,
    "leads": MOCK_LEADS,
    "reward_ledger_entries": MOCK_REWARD_LEDGER_ENTRIES,
}


def seed_collections() -> dict[str, list[Any]]:
    """Deep copies of every fixture collection, keyed by collection name."""
    return {
        name: [record.model_copy(deep=True) for record in records]
        for name, records in FIXTURES.items()
    }


def seed_profile() -> Profile:
    return MOCK_USER_PROFILE.model_copy(deep=True)
