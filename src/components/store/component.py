"""
Store component - composite mutations over the entity collections.

Single-collection edits go straight through a CollectionHandle. The entry
points here cover user actions that must touch several collections at once.

Invariants:
- After add-lead the lead list is sorted by date, newest first; a new
  lead precedes existing leads with the same timestamp
- Settling obligations updates obligations, transactions and payment
  records (and the tagged pocket) together or not at all
- A pocket balance moves only with a transaction tagged to it
"""

from __future__ import annotations

import logging
import re
from datetime import date

from src.config.models import FinanceSection
from src.domain.entities import (
    FinancialPocket,
    TeamPaymentRecord,
    TeamProjectPayment,
    Transaction,
    new_id,
)

from ._impl import AppStore
from .models import (
    AddLeadInput,
    AddLeadOutput,
    RecordTransactionInput,
    RecordTransactionOutput,
    SettlePaymentInput,
    SettlePaymentOutput,
    StoreValidationError,
)
from .ports import ClockPort

logger = logging.getLogger(__name__)

RECORD_NUMBER_RE = re.compile(r"PAY-\d{8}-(\d+)")


def run_add_lead(inp: AddLeadInput, store: AppStore) -> AddLeadOutput:
    with store.batch():
        leads = [inp.lead, *store.leads.get()]
        # sorted() is stable with reverse=True, so the prepended lead wins ties.
        # timestamp() reads naive dates as local time, so naive and aware mix.
        leads = sorted(leads, key=lambda lead: lead.date.timestamp(), reverse=True)
        store.leads.replace(leads)

    logger.info("Lead added: %s", inp.lead.id)
    return AddLeadOutput(leads=tuple(leads))


def _rejected_settlement(errors: list[StoreValidationError]) -> SettlePaymentOutput:
    for err in errors:
        logger.warning("Settlement rejected (%s): %s", err.code, err.message)
    return SettlePaymentOutput(errors=errors, success=False)


def _next_record_number(records: tuple[TeamPaymentRecord, ...], paid_on: date) -> str:
    """Next PAY-YYYYMMDD-NNN number, one past the highest sequence in use."""
    sequences = [
        int(match.group(1))
        for record in records
        if (match := RECORD_NUMBER_RE.fullmatch(record.record_number))
    ]
    return f"PAY-{paid_on:%Y%m%d}-{max(sequences, default=0) + 1:03d}"


def run_settle_payment(
    inp: SettlePaymentInput,
    store: AppStore,
    clock: ClockPort,
    finance: FinanceSection | None = None,
) -> SettlePaymentOutput:
    finance = finance or FinanceSection()
    payment_ids = tuple(dict.fromkeys(inp.payment_ids))

    if not payment_ids:
        return _rejected_settlement(
            [StoreValidationError(code="empty", message="No payment obligations given")]
        )

    with store.batch():
        obligations: list[TeamProjectPayment] = []
        errors: list[StoreValidationError] = []

        for payment_id in payment_ids:
            obligation = store.team_project_payments.find(payment_id)
            if obligation is None:
                errors.append(
                    StoreValidationError(
                        code="not_found",
                        message=f"Payment obligation {payment_id} does not exist",
                        record_id=payment_id,
                    )
                )
            elif obligation.status == "Paid":
                errors.append(
                    StoreValidationError(
                        code="already_paid",
                        message=f"Payment obligation {payment_id} is already paid",
                        record_id=payment_id,
                    )
                )
            else:
                obligations.append(obligation)

        if errors:
            return _rejected_settlement(errors)

        member_ids = {o.team_member_id for o in obligations}
        if len(member_ids) != 1:
            return _rejected_settlement(
                [
                    StoreValidationError(
                        code="mixed_members",
                        message="Obligations belong to different team members",
                    )
                ]
            )
        member_id = member_ids.pop()

        existing: TeamPaymentRecord | None = None
        if inp.record_id is not None:
            existing = store.team_payment_records.find(inp.record_id)
            if existing is None:
                return _rejected_settlement(
                    [
                        StoreValidationError(
                            code="record_not_found",
                            message=f"Payment record {inp.record_id} does not exist",
                            record_id=inp.record_id,
                        )
                    ]
                )
            if existing.team_member_id != member_id:
                return _rejected_settlement(
                    [
                        StoreValidationError(
                            code="record_member_mismatch",
                            message=f"Payment record {inp.record_id} belongs to another member",
                            record_id=inp.record_id,
                        )
                    ]
                )

        pocket: FinancialPocket | None = None
        if inp.pocket_id is not None:
            pocket = store.pockets.find(inp.pocket_id)
            if pocket is None:
                return _rejected_settlement(
                    [
                        StoreValidationError(
                            code="pocket_not_found",
                            message=f"Pocket {inp.pocket_id} does not exist",
                            record_id=inp.pocket_id,
                        )
                    ]
                )

        paid_on = inp.paid_on or clock.today()
        total = sum(o.fee for o in obligations)
        records = store.team_payment_records.get()

        if existing is not None:
            record = existing.model_copy(
                update={
                    "project_payment_ids": existing.project_payment_ids + payment_ids,
                    "total_amount": existing.total_amount + total,
                }
            )
            new_records = [record if r.id == record.id else r for r in records]
        else:
            record = TeamPaymentRecord(
                id=new_id(),
                record_number=_next_record_number(records, paid_on),
                team_member_id=member_id,
                date=paid_on,
                project_payment_ids=payment_ids,
                total_amount=total,
            )
            new_records = [*records, record]

        member = store.team_members.find(member_id)
        member_name = member.name if member else obligations[0].team_member_name
        transaction = Transaction(
            id=new_id(),
            date=paid_on,
            description=inp.description or f"Pembayaran fee {member_name}".strip(),
            amount=-total,
            category=finance.freelancer_payment_category,
            method=inp.method or finance.default_payment_method,
            team_project_payment_id=payment_ids[0] if len(payment_ids) == 1 else None,
            team_payment_record_id=record.id,
            pocket_id=inp.pocket_id,
        )

        settled = {o.id: o.model_copy(update={"status": "Paid"}) for o in obligations}
        new_payments = [settled.get(p.id, p) for p in store.team_project_payments.get()]

        changes: dict[str, list[object]] = {
            "team_project_payments": list(new_payments),
            "transactions": [*store.transactions.get(), transaction],
            "team_payment_records": list(new_records),
        }
        if pocket is not None:
            pocket = pocket.model_copy(update={"balance": pocket.balance - total})
            changes["pockets"] = [
                pocket if p.id == pocket.id else p for p in store.pockets.get()
            ]

        store.commit(changes)

    logger.info(
        "Settled %d obligation(s) for %s in record %s",
        len(obligations),
        member_id,
        record.record_number,
    )
    return SettlePaymentOutput(
        payments=tuple(settled.values()),
        transaction=transaction,
        record=record,
        pocket=pocket,
    )


def run_record_transaction(inp: RecordTransactionInput, store: AppStore) -> RecordTransactionOutput:
    transaction = inp.transaction

    with store.batch():
        pocket: FinancialPocket | None = None
        changes: dict[str, list[object]] = {
            "transactions": [*store.transactions.get(), transaction],
        }

        if transaction.pocket_id is not None:
            pocket = store.pockets.find(transaction.pocket_id)
            if pocket is None:
                err = StoreValidationError(
                    code="pocket_not_found",
                    message=f"Pocket {transaction.pocket_id} does not exist",
                    record_id=transaction.pocket_id,
                )
                logger.warning("Transaction rejected: %s", err.message)
                return RecordTransactionOutput(errors=[err], success=False)

            pocket = pocket.model_copy(update={"balance": pocket.balance + transaction.amount})
            changes["pockets"] = [
                pocket if p.id == pocket.id else p for p in store.pockets.get()
            ]

        store.commit(changes)

    return RecordTransactionOutput(transaction=transaction, pocket=pocket)


def run(
    inp: AddLeadInput | SettlePaymentInput | RecordTransactionInput,
    *,
    store: AppStore,
    clock: ClockPort | None = None,
    finance: FinanceSection | None = None,
) -> AddLeadOutput | SettlePaymentOutput | RecordTransactionOutput:
    if isinstance(inp, AddLeadInput):
        return run_add_lead(inp, store)

    elif isinstance(inp, SettlePaymentInput):
        assert clock
        return run_settle_payment(inp, store, clock, finance)

    elif isinstance(inp, RecordTransactionInput):
        return run_record_transaction(inp, store)

    else:
        raise ValueError(f"Unknown input type: {type(inp)}")
