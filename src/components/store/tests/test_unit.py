"""
Store component unit tests.

Tests for collection handles, seeding and composite mutations.
"""

from __future__ import annotations

from datetime import date, datetime, timezone

import pytest

from src.components.store import (
    COLLECTION_NAMES,
    AddLeadInput,
    AppStore,
    RecordTransactionInput,
    SettlePaymentInput,
    run,
    run_add_lead,
    run_record_transaction,
    run_settle_payment,
)
from src.config.models import FinanceSection
from src.domain.entities import (
    Client,
    FinancialPocket,
    Lead,
    TeamMember,
    TeamPaymentRecord,
    TeamProjectPayment,
    Transaction,
)
from src.domain.fixtures import MOCK_CLIENTS, MOCK_LEADS

# --- Mock Implementations ---


class MockClock:
    """Fixed-date clock for deterministic testing."""

    def __init__(self, today: date | None = None) -> None:
        self._today = today or date(2024, 7, 1)

    def today(self) -> date:
        return self._today


# --- Fixtures ---


@pytest.fixture
def clock() -> MockClock:
    return MockClock()


@pytest.fixture
def store() -> AppStore:
    """Small store with two members, three obligations and one pocket."""
    return AppStore(
        {
            "team_members": [
                TeamMember(id="TM1", name="Sari", role="Fotografer"),
                TeamMember(id="TM2", name="Rizky", role="Videografer"),
            ],
            "team_project_payments": [
                TeamProjectPayment(
                    id="P1", project_id="PRJ1", team_member_id="TM1",
                    team_member_name="Sari", date=date(2024, 6, 1), fee=1_000_000,
                ),
                TeamProjectPayment(
                    id="P2", project_id="PRJ2", team_member_id="TM1",
                    team_member_name="Sari", date=date(2024, 6, 2), fee=500_000,
                ),
                TeamProjectPayment(
                    id="P3", project_id="PRJ1", team_member_id="TM2",
                    team_member_name="Rizky", date=date(2024, 6, 1), fee=750_000,
                ),
                TeamProjectPayment(
                    id="P4", project_id="PRJ0", team_member_id="TM1",
                    team_member_name="Sari", date=date(2024, 5, 1), fee=300_000,
                    status="Paid",
                ),
            ],
            "team_payment_records": [
                TeamPaymentRecord(
                    id="R1", record_number="PAY-20240501-001", team_member_id="TM1",
                    date=date(2024, 5, 1), project_payment_ids=("P4",), total_amount=300_000,
                ),
            ],
            "pockets": [
                FinancialPocket(id="POC1", name="Operasional", balance=5_000_000),
            ],
        }
    )


def _snapshot(store: AppStore) -> dict[str, tuple[object, ...]]:
    return {name: store.collection(name).get() for name in COLLECTION_NAMES}


def _lead(lead_id: str, day: int) -> Lead:
    return Lead(id=lead_id, name=lead_id, date=datetime(2024, 1, day))


# --- Collection handles ---


class TestCollectionHandles:
    def test_replace_overwrites_whole_collection(self, store: AppStore) -> None:
        client = Client(id="C1", name="Rina")
        store.clients.replace([client])

        assert store.clients.get() == (client,)

        store.clients.replace([])
        assert store.clients.get() == ()

    def test_get_returns_immutable_snapshot(self, store: AppStore) -> None:
        store.clients.replace([Client(id="C1", name="Rina")])
        snapshot = store.clients.get()

        store.clients.replace([*snapshot, Client(id="C2", name="Budi")])

        assert isinstance(snapshot, tuple)
        assert len(snapshot) == 1
        assert len(store.clients.get()) == 2

    def test_records_are_frozen(self, store: AppStore) -> None:
        store.clients.replace([Client(id="C1", name="Rina")])
        client = store.clients.get()[0]

        with pytest.raises(Exception):
            client.name = "Changed"  # type: ignore[misc]

    def test_find_by_id(self, store: AppStore) -> None:
        assert store.team_members.find("TM2") is not None
        assert store.team_members.find("TM2").name == "Rizky"  # type: ignore[union-attr]
        assert store.team_members.find("missing") is None

    def test_no_validation_beyond_shape(self, store: AppStore) -> None:
        """Dangling foreign ids are stored as given."""
        txn = Transaction(
            id="T1", date=date(2024, 1, 1), description="x", amount=1,
            category="Lain-lain", project_id="DOES-NOT-EXIST",
        )
        store.transactions.replace([txn])

        assert store.transactions.get() == (txn,)

    def test_collection_lookup_by_name(self, store: AppStore) -> None:
        assert store.collection("pockets") is store.pockets
        with pytest.raises(KeyError):
            store.collection("invoices")

    def test_unknown_initial_collection_rejected(self) -> None:
        with pytest.raises(KeyError):
            AppStore({"invoices": []})

    def test_listeners_notified_per_changed_collection(self, store: AppStore) -> None:
        seen: list[str] = []
        store.subscribe(seen.append)

        store.clients.replace([])
        store.commit({"leads": [], "packages": []})

        assert seen == ["clients", "leads", "packages"]

    def test_profile_replace(self, store: AppStore) -> None:
        seen: list[str] = []
        store.subscribe(seen.append)
        updated = store.profile.get().model_copy(update={"company_name": "Studio Baru"})

        store.profile.replace(updated)

        assert store.profile.get().company_name == "Studio Baru"
        assert seen == ["profile"]


class TestSeeding:
    def test_from_fixtures_seeds_every_collection(self) -> None:
        store = AppStore.from_fixtures()

        for name in COLLECTION_NAMES:
            assert len(store.collection(name)) > 0, name
        assert store.profile.get().email == "admin@venapictures.com"

    def test_fixtures_are_copied_not_shared(self) -> None:
        first = AppStore.from_fixtures()
        second = AppStore.from_fixtures()

        first.clients.replace([])

        assert len(second.clients) == len(MOCK_CLIENTS)
        assert first.leads.get()[0] is not MOCK_LEADS[0]
        assert first.leads.get()[0] == MOCK_LEADS[0]


# --- Add lead ---


class TestAddLead:
    def test_leads_sorted_newest_first(self) -> None:
        store = AppStore()
        l1, l2, l3 = _lead("L1", 10), _lead("L2", 30), _lead("L3", 20)

        for lead in (l1, l2, l3):
            run_add_lead(AddLeadInput(lead=lead), store)

        assert [lead.id for lead in store.leads.get()] == ["L2", "L3", "L1"]

    def test_new_lead_wins_tie(self) -> None:
        store = AppStore({"leads": [_lead("OLD", 15)]})

        out = run_add_lead(AddLeadInput(lead=_lead("NEW", 15)), store)

        assert out.success
        assert [lead.id for lead in out.leads] == ["NEW", "OLD"]
        assert store.leads.get() == out.leads

    def test_resorts_unsorted_existing_sequence(self) -> None:
        store = AppStore({"leads": [_lead("A", 1), _lead("B", 9)]})

        run_add_lead(AddLeadInput(lead=_lead("C", 5)), store)

        assert [lead.id for lead in store.leads.get()] == ["B", "C", "A"]

    def test_accepts_aware_date_among_naive_ones(self) -> None:
        store = AppStore({"leads": [_lead("A", 1), _lead("B", 20)]})
        aware = Lead(id="UTC", name="UTC", date=datetime(2024, 1, 10, tzinfo=timezone.utc))

        out = run_add_lead(AddLeadInput(lead=aware), store)

        assert out.success
        assert [lead.id for lead in out.leads] == ["B", "UTC", "A"]

    def test_naive_lead_added_after_aware_one(self) -> None:
        store = AppStore.from_fixtures()
        run_add_lead(
            AddLeadInput(lead=Lead(id="AW", name="AW", date=datetime(2030, 1, 1, tzinfo=timezone.utc))),
            store,
        )

        out = run_add_lead(AddLeadInput(lead=_lead("NAIVE", 2)), store)

        assert out.success
        assert out.leads[0].id == "AW"
        assert len(out.leads) == len(MOCK_LEADS) + 2


# --- Settle payment ---


class TestSettlePayment:
    def test_settles_single_obligation(self, store: AppStore, clock: MockClock) -> None:
        out = run_settle_payment(SettlePaymentInput(payment_ids=("P1",)), store, clock)

        assert out.success
        assert store.team_project_payments.find("P1").status == "Paid"  # type: ignore[union-attr]
        assert store.team_project_payments.find("P2").status == "Unpaid"  # type: ignore[union-attr]

        txn = store.transactions.get()[-1]
        assert txn == out.transaction
        assert txn.amount == -1_000_000
        assert txn.category == "Gaji Freelancer"
        assert txn.team_project_payment_id == "P1"
        assert txn.team_payment_record_id == out.record.id  # type: ignore[union-attr]
        assert txn.date == date(2024, 7, 1)

        record = store.team_payment_records.get()[-1]
        assert record == out.record
        assert record.project_payment_ids == ("P1",)
        assert record.total_amount == 1_000_000
        assert record.record_number == "PAY-20240701-002"

    def test_settles_batch_into_one_record(self, store: AppStore, clock: MockClock) -> None:
        out = run_settle_payment(
            SettlePaymentInput(payment_ids=("P1", "P2"), paid_on=date(2024, 7, 5)),
            store,
            clock,
        )

        assert out.success
        assert len(out.payments) == 2
        assert out.transaction.amount == -1_500_000  # type: ignore[union-attr]
        assert out.transaction.team_project_payment_id is None  # type: ignore[union-attr]
        assert out.record.project_payment_ids == ("P1", "P2")  # type: ignore[union-attr]
        assert len(store.team_payment_records) == 2

    def test_extends_existing_record(self, store: AppStore, clock: MockClock) -> None:
        out = run_settle_payment(
            SettlePaymentInput(payment_ids=("P2",), record_id="R1"), store, clock
        )

        assert out.success
        assert len(store.team_payment_records) == 1
        record = store.team_payment_records.find("R1")
        assert record is not None
        assert record.project_payment_ids == ("P4", "P2")
        assert record.total_amount == 800_000

    def test_pocket_debited_with_transaction(self, store: AppStore, clock: MockClock) -> None:
        out = run_settle_payment(
            SettlePaymentInput(payment_ids=("P3",), pocket_id="POC1"), store, clock
        )

        assert out.success
        assert store.pockets.find("POC1").balance == 4_250_000  # type: ignore[union-attr]
        assert out.transaction.pocket_id == "POC1"  # type: ignore[union-attr]

    def test_uses_configured_category(self, store: AppStore, clock: MockClock) -> None:
        finance = FinanceSection(freelancer_payment_category="Fee Kru")

        out = run_settle_payment(
            SettlePaymentInput(payment_ids=("P1",)), store, clock, finance
        )

        assert out.transaction.category == "Fee Kru"  # type: ignore[union-attr]

    @pytest.mark.parametrize(
        ("inp", "code"),
        [
            (SettlePaymentInput(payment_ids=()), "empty"),
            (SettlePaymentInput(payment_ids=("NOPE",)), "not_found"),
            (SettlePaymentInput(payment_ids=("P1", "NOPE")), "not_found"),
            (SettlePaymentInput(payment_ids=("P4",)), "already_paid"),
            (SettlePaymentInput(payment_ids=("P1", "P3")), "mixed_members"),
            (SettlePaymentInput(payment_ids=("P1",), record_id="R9"), "record_not_found"),
            (SettlePaymentInput(payment_ids=("P3",), record_id="R1"), "record_member_mismatch"),
            (SettlePaymentInput(payment_ids=("P1",), pocket_id="POC9"), "pocket_not_found"),
        ],
    )
    def test_rejection_applies_nothing(
        self, store: AppStore, clock: MockClock, inp: SettlePaymentInput, code: str
    ) -> None:
        before = _snapshot(store)
        seen: list[str] = []
        store.subscribe(seen.append)

        out = run_settle_payment(inp, store, clock)

        assert not out.success
        assert out.errors[0].code == code
        assert out.transaction is None
        assert out.record is None
        assert _snapshot(store) == before
        assert seen == []

    def test_settled_twice_is_rejected(self, store: AppStore, clock: MockClock) -> None:
        run_settle_payment(SettlePaymentInput(payment_ids=("P1",)), store, clock)
        txn_count = len(store.transactions)

        out = run_settle_payment(SettlePaymentInput(payment_ids=("P1",)), store, clock)

        assert not out.success
        assert len(store.transactions) == txn_count

    def test_listeners_see_all_three_collections_change(
        self, store: AppStore, clock: MockClock
    ) -> None:
        seen: list[str] = []
        store.subscribe(seen.append)

        run_settle_payment(SettlePaymentInput(payment_ids=("P1",)), store, clock)

        assert sorted(seen) == ["team_payment_records", "team_project_payments", "transactions"]

    def test_record_numbers_stay_unique_after_removal(
        self, store: AppStore, clock: MockClock
    ) -> None:
        first = run_settle_payment(SettlePaymentInput(payment_ids=("P1",)), store, clock)
        assert first.record.record_number == "PAY-20240701-002"  # type: ignore[union-attr]

        store.team_payment_records.replace(
            [r for r in store.team_payment_records.get() if r.id != "R1"]
        )
        second = run_settle_payment(SettlePaymentInput(payment_ids=("P3",)), store, clock)

        assert second.record.record_number == "PAY-20240701-003"  # type: ignore[union-attr]
        numbers = [r.record_number for r in store.team_payment_records.get()]
        assert len(numbers) == len(set(numbers))


# --- Record transaction ---


class TestRecordTransaction:
    def test_pocket_balance_follows_tagged_transaction(self, store: AppStore) -> None:
        txn = Transaction(
            id="T1", date=date(2024, 7, 1), description="Beli lensa",
            amount=-2_000_000, category="Peralatan", pocket_id="POC1",
        )

        out = run_record_transaction(RecordTransactionInput(transaction=txn), store)

        assert out.success
        assert store.transactions.get() == (txn,)
        assert store.pockets.find("POC1").balance == 3_000_000  # type: ignore[union-attr]

    def test_untagged_transaction_leaves_pockets(self, store: AppStore) -> None:
        txn = Transaction(
            id="T1", date=date(2024, 7, 1), description="DP", amount=1_000, category="DP Proyek"
        )

        out = run_record_transaction(RecordTransactionInput(transaction=txn), store)

        assert out.success
        assert out.pocket is None
        assert store.pockets.find("POC1").balance == 5_000_000  # type: ignore[union-attr]

    def test_unknown_pocket_rejected(self, store: AppStore) -> None:
        txn = Transaction(
            id="T1", date=date(2024, 7, 1), description="x", amount=-1,
            category="Lain-lain", pocket_id="POC9",
        )

        out = run_record_transaction(RecordTransactionInput(transaction=txn), store)

        assert not out.success
        assert store.transactions.get() == ()


class TestDispatcher:
    def test_routes_by_input_type(self, store: AppStore, clock: MockClock) -> None:
        out = run(SettlePaymentInput(payment_ids=("P1",)), store=store, clock=clock)
        assert out.success

        out = run(AddLeadInput(lead=_lead("L1", 1)), store=store)
        assert out.success

    def test_unknown_input_raises(self, store: AppStore) -> None:
        with pytest.raises(ValueError):
            run(object(), store=store)  # type: ignore[arg-type]
