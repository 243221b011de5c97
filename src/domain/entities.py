import datetime as dt
from enum import Enum
from typing import Literal
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field

# --- Enums / Literals ---
ClientStatus = Literal["lead", "active", "inactive", "churned"]
PaymentStatus = Literal["Lunas", "DP Terbayar", "Belum Bayar"]
ObligationStatus = Literal["Unpaid", "Paid"]
LeadStatus = Literal["Sedang Diskusi", "Menunggu Follow Up", "Dikonversi", "Ditolak"]
SubTab = Literal["info", "project", "payment", "invoice"]


class ViewType(str, Enum):
    DASHBOARD = "Dashboard"
    CLIENTS = "Klien"
    PROJECTS = "Proyek"
    TEAM = "Freelancer"
    FINANCE = "Keuangan"
    CALENDAR = "Kalender"
    PACKAGES = "Paket"
    KPI_KLIEN = "KPI Klien"
    SETTINGS = "Pengaturan"


def new_id() -> str:
    return str(uuid4())


class Record(BaseModel):
    """Base for collection records: frozen, identified by an opaque string id."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=new_id)


# --- Clients & Projects ---

class Client(Record):
    name: str
    email: str = ""
    phone: str = ""
    instagram: str = ""
    since: dt.date = Field(default_factory=dt.date.today)
    status: ClientStatus = "active"
    last_contact: dt.date | None = None


class Project(Record):
    project_name: str
    client_id: str
    client_name: str = ""
    project_type: str = ""
    package_id: str | None = None
    add_on_ids: tuple[str, ...] = ()
    date: dt.date
    location: str = ""
    status: str = "Persiapan"
    total_cost: int = 0
    amount_paid: int = 0
    payment_status: PaymentStatus = "Belum Bayar"
    team_member_ids: tuple[str, ...] = ()

    @property
    def balance_due(self) -> int:
        return self.total_cost - self.amount_paid


class Package(Record):
    name: str
    price: int
    description: str = ""


class AddOn(Record):
    name: str
    price: int


# --- Team ---

class TeamMember(Record):
    name: str
    role: str
    email: str = ""
    phone: str = ""
    standard_fee: int = 0
    reward_balance: int = 0
    rating: float = 0.0


class TeamProjectPayment(Record):
    project_id: str
    team_member_id: str
    team_member_name: str = ""
    date: dt.date
    fee: int
    reward: int = 0
    status: ObligationStatus = "Unpaid"


class TeamPaymentRecord(Record):
    record_number: str
    team_member_id: str
    date: dt.date
    project_payment_ids: tuple[str, ...] = ()
    total_amount: int = 0

    def settles(self, payment_id: str) -> bool:
        return payment_id in self.project_payment_ids


class RewardLedgerEntry(Record):
    team_member_id: str | None = None
    lead_id: str | None = None
    project_id: str | None = None
    date: dt.date
    description: str = ""
    amount: int = 0


# --- Finance ---

class Transaction(Record):
    date: dt.date
    description: str
    amount: int  # signed: positive income, negative expense
    category: str
    method: str = "Transfer Bank"
    project_id: str | None = None
    team_project_payment_id: str | None = None
    team_payment_record_id: str | None = None
    pocket_id: str | None = None


class FinancialPocket(Record):
    name: str
    description: str = ""
    icon: str = "piggy-bank"
    balance: int = 0
    goal_amount: int | None = None


# --- Leads ---

class Lead(Record):
    name: str
    contact_channel: str = "Website"
    location: str = ""
    status: LeadStatus = "Sedang Diskusi"
    date: dt.datetime = Field(default_factory=dt.datetime.now)
    notes: str = ""


# --- Profile (singleton, no id) ---

class Profile(BaseModel):
    model_config = ConfigDict(frozen=True)

    full_name: str
    email: str
    phone: str = ""
    company_name: str = ""
    website: str = ""
    address: str = ""
    bank_account: str = ""
    bio: str = ""
