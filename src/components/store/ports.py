"""
Store component port definitions.

Feature views depend on these capabilities rather than on AppStore itself,
so a view can be exercised against a plain in-memory fake.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from datetime import date
from typing import Protocol, TypeVar

from src.domain.entities import Profile, Record

T = TypeVar("T", bound=Record)

StoreListener = Callable[[str], None]


class CollectionPort(Protocol[T]):
    """Read/replace capability for one collection."""

    name: str

    def get(self) -> tuple[T, ...]:
        """Current ordered snapshot."""
        ...

    def replace(self, records: Sequence[T]) -> None:
        """Overwrite the whole collection with a new ordered sequence."""
        ...

    def find(self, record_id: str) -> T | None:
        """Look a record up by id."""
        ...


class ProfilePort(Protocol):
    def get(self) -> Profile: ...

    def replace(self, profile: Profile) -> None: ...


class ClockPort(Protocol):
    """Date source for composite mutations - enables deterministic testing."""

    def today(self) -> date: ...
