"""
AppStore - owner of every entity collection.

Holds eleven ordered collections plus the profile singleton. Each collection
is exposed as a CollectionHandle with a snapshot read and a whole-sequence
replace; the store indexes nothing and validates nothing beyond shape.

Invariants:
- A read returns an immutable tuple of frozen records
- Commits are serialized by one re-entrant lock; a batch of replacements
  becomes visible all at once
- Listeners run after the lock is released, once per changed collection
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterator, Mapping, Sequence
from contextlib import contextmanager
from typing import Any, Generic, TypeVar

from src.domain.entities import (
    AddOn,
    Client,
    FinancialPocket,
    Lead,
    Package,
    Profile,
    Project,
    Record,
    RewardLedgerEntry,
    TeamMember,
    TeamPaymentRecord,
    TeamProjectPayment,
    Transaction,
)
from src.domain.fixtures import seed_collections, seed_profile

from .ports import StoreListener

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Record)

PROFILE = "profile"

COLLECTION_NAMES: tuple[str, ...] = (
    "clients",
    "projects",
    "team_members",
    "transactions",
    "packages",
    "add_ons",
    "team_project_payments",
    "team_payment_records",
    "pockets",
    "leads",
    "reward_ledger_entries",
)


class CollectionHandle(Generic[T]):
    """Read/replace capability over one collection of an AppStore."""

    def __init__(self, store: AppStore, name: str, records: Sequence[T]) -> None:
        self._store = store
        self.name = name
        self._records: tuple[T, ...] = tuple(records)

    def get(self) -> tuple[T, ...]:
        with self._store._lock:
            return self._records

    def replace(self, records: Sequence[T]) -> None:
        self._store.commit({self.name: records})

    def find(self, record_id: str) -> T | None:
        for record in self.get():
            if record.id == record_id:
                return record
        return None

    def __len__(self) -> int:
        return len(self.get())

    def __repr__(self) -> str:
        return f"CollectionHandle({self.name!r}, {len(self._records)} records)"


class ProfileHandle:
    def __init__(self, store: AppStore, profile: Profile) -> None:
        self._store = store
        self._profile = profile

    def get(self) -> Profile:
        with self._store._lock:
            return self._profile

    def replace(self, profile: Profile) -> None:
        self._store.commit_profile(profile)


class AppStore:
    """
    Central store for all collections (single source of truth).

    Usage:
        store = AppStore.from_fixtures()
        clients = store.clients.get()
        store.clients.replace([*clients, new_client])
    """

    def __init__(
        self,
        collections: Mapping[str, Sequence[Any]] | None = None,
        profile: Profile | None = None,
    ) -> None:
        """
        Initialize the store.

        Args:
            collections: Initial records keyed by collection name; missing
                names start empty
            profile: Initial profile; defaults to the seeded profile

        Raises:
            KeyError: If collections names an unknown collection
        """
        data = dict(collections or {})
        unknown = set(data) - set(COLLECTION_NAMES)
        if unknown:
            raise KeyError(f"Unknown collections: {', '.join(sorted(unknown))}")

        self._lock = threading.RLock()
        self._depth = 0
        self._changed: list[str] = []
        self._listeners: list[StoreListener] = []

        self.clients: CollectionHandle[Client] = CollectionHandle(
            self, "clients", data.get("clients", ())
        )
        self.projects: CollectionHandle[Project] = CollectionHandle(
            self, "projects", data.get("projects", ())
        )
        self.team_members: CollectionHandle[TeamMember] = CollectionHandle(
            self, "team_members", data.get("team_members", ())
        )
        self.transactions: CollectionHandle[Transaction] = CollectionHandle(
            self, "transactions", data.get("transactions", ())
        )
        self.packages: CollectionHandle[Package] = CollectionHandle(
            self, "packages", data.get("packages", ())
        )
        self.add_ons: CollectionHandle[AddOn] = CollectionHandle(
            self, "add_ons", data.get("add_ons", ())
        )
        self.team_project_payments: CollectionHandle[TeamProjectPayment] = CollectionHandle(
            self, "team_project_payments", data.get("team_project_payments", ())
        )
        self.team_payment_records: CollectionHandle[TeamPaymentRecord] = CollectionHandle(
            self, "team_payment_records", data.get("team_payment_records", ())
        )
        self.pockets: CollectionHandle[FinancialPocket] = CollectionHandle(
            self, "pockets", data.get("pockets", ())
        )
        self.leads: CollectionHandle[Lead] = CollectionHandle(
            self, "leads", data.get("leads", ())
        )
        self.reward_ledger_entries: CollectionHandle[RewardLedgerEntry] = CollectionHandle(
            self, "reward_ledger_entries", data.get("reward_ledger_entries", ())
        )
        self.profile = ProfileHandle(self, profile if profile is not None else seed_profile())

    @classmethod
    def from_fixtures(cls) -> AppStore:
        """Build a store seeded with fresh copies of the fixture data."""
        return cls(seed_collections(), seed_profile())

    def collection(self, name: str) -> CollectionHandle[Any]:
        """Get a collection handle by name. Raises KeyError if unknown."""
        if name not in COLLECTION_NAMES:
            raise KeyError(f"Unknown collection: {name}")
        handle: CollectionHandle[Any] = getattr(self, name)
        return handle

    def subscribe(self, listener: StoreListener) -> None:
        """Register a listener called with the collection name after each change."""
        self._listeners.append(listener)

    @contextmanager
    def batch(self) -> Iterator[None]:
        """
        Hold the store lock across a read-compute-commit sequence.

        Commits made inside the block are announced to listeners once the
        outermost block exits.
        """
        with self._lock:
            self._depth += 1
            try:
                yield
            finally:
                self._depth -= 1
                changed: list[str] = []
                if self._depth == 0:
                    changed, self._changed = self._changed, []

        for name in changed:
            for listener in list(self._listeners):
                listener(name)

    def commit(self, changes: Mapping[str, Sequence[Any]]) -> None:
        """
        Replace several collections as one step.

        Raises:
            KeyError: If changes names an unknown collection (nothing applied)
        """
        handles = [(self.collection(name), records) for name, records in changes.items()]
        with self.batch():
            for handle, records in handles:
                handle._records = tuple(records)
                if handle.name not in self._changed:
                    self._changed.append(handle.name)
                logger.debug("Replaced %s (%d records)", handle.name, len(handle._records))

    def commit_profile(self, profile: Profile) -> None:
        with self.batch():
            self.profile._profile = profile
            if PROFILE not in self._changed:
                self._changed.append(PROFILE)
