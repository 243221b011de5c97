"""
Store component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date

from src.domain.entities import (
    FinancialPocket,
    Lead,
    TeamPaymentRecord,
    TeamProjectPayment,
    Transaction,
)

# --- Validation Error ---


@dataclass(frozen=True)
class StoreValidationError:
    """Reason a composite mutation was not applied."""

    code: str
    message: str
    record_id: str | None = None


# --- Input Models ---


@dataclass(frozen=True)
class AddLeadInput:
    """Input for adding a lead to the front of the lead list."""

    lead: Lead


@dataclass(frozen=True)
class SettlePaymentInput:
    """
    Input for settling one or more payment obligations of a team member.

    record_id extends an existing payment record instead of creating one.
    pocket_id tags the payout transaction to a pocket and debits it.
    """

    payment_ids: tuple[str, ...]
    paid_on: date | None = None
    record_id: str | None = None
    pocket_id: str | None = None
    method: str | None = None
    description: str | None = None


@dataclass(frozen=True)
class RecordTransactionInput:
    """Input for appending a transaction (and moving its pocket balance)."""

    transaction: Transaction


# --- Output Models ---


@dataclass(frozen=True)
class AddLeadOutput:
    leads: tuple[Lead, ...]
    success: bool = True


@dataclass(frozen=True)
class SettlePaymentOutput:
    payments: tuple[TeamProjectPayment, ...] = ()
    transaction: Transaction | None = None
    record: TeamPaymentRecord | None = None
    pocket: FinancialPocket | None = None
    errors: list[StoreValidationError] = field(default_factory=list)
    success: bool = True


@dataclass(frozen=True)
class RecordTransactionOutput:
    transaction: Transaction | None = None
    pocket: FinancialPocket | None = None
    errors: list[StoreValidationError] = field(default_factory=list)
    success: bool = True
