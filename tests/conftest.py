from collections.abc import Iterator
from datetime import date, datetime
from pathlib import Path

import pytest

from src.adapters.local_storage import InMemoryKeyValueStore
from src.adapters.manual_timer import ManualTimerService
from src.config.loader import load_config
from src.config.models import AppConfig
from src.ui.context import AppContext

PROJECT_ROOT = Path(__file__).parent.parent


class FakeClock:
    def __init__(self) -> None:
        self._now = datetime(2024, 6, 20, 10, 0, 0)

    def now(self) -> datetime:
        return self._now

    def today(self) -> date:
        return self._now.date()


@pytest.fixture
def app_config() -> AppConfig:
    """The real config.yaml from the project root."""
    return load_config(PROJECT_ROOT / "config.yaml")


@pytest.fixture
def memory_storage() -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore()


@pytest.fixture
def manual_timer() -> ManualTimerService:
    return ManualTimerService()


@pytest.fixture
def fake_clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def test_ctx(
    app_config: AppConfig,
    memory_storage: InMemoryKeyValueStore,
    manual_timer: ManualTimerService,
    fake_clock: FakeClock,
) -> Iterator[AppContext]:
    """
    Creates a full AppContext on fixture data, in-memory storage and virtual time.
    """
    ctx = AppContext.create(app_config, storage=memory_storage, timer=manual_timer, clock=fake_clock)
    yield ctx
    ctx.close()
