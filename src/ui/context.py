from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from src.adapters.clock import SystemClock
from src.adapters.local_storage import create_local_storage
from src.adapters.timers import ThreadTimerService
from src.components.navigation import Navigator
from src.components.notifications import NotificationScheduler
from src.components.session import SessionGate
from src.components.store import AddLeadInput, AppStore, run_add_lead
from src.config.models import AppConfig
from src.domain.entities import Lead
from src.ports.storage import KeyValueStorePort
from src.ports.timer import TimerPort


@dataclass
class AppContext:
    store: AppStore
    navigator: Navigator
    notifications: NotificationScheduler
    gate: SessionGate
    config: AppConfig
    clock: Any = None  # For testing/injection

    @classmethod
    def create(
        cls,
        config: AppConfig,
        storage: KeyValueStorePort | None = None,
        timer: TimerPort | None = None,
        clock: Any = None,
    ) -> AppContext:
        # Adapters
        if storage is None:
            storage = create_local_storage(default_path=config.session.storage_path)
        timer = timer or ThreadTimerService()
        clock = clock or SystemClock()

        # Components
        store = AppStore.from_fixtures()
        navigator = Navigator()
        notifications = NotificationScheduler(
            timer, default_duration_ms=config.notifications.default_duration_ms
        )

        def add_lead(lead: Lead) -> None:
            run_add_lead(AddLeadInput(lead=lead), store)

        gate = SessionGate(
            storage,
            timer,
            clock,
            auth=config.auth,
            flag_key=config.session.flag_key,
            add_lead=add_lead,
            notify=notifications,
        )

        return cls(
            store=store,
            navigator=navigator,
            notifications=notifications,
            gate=gate,
            config=config,
            clock=clock,
        )

    def close(self) -> None:
        self.gate.close()
        self.notifications.close()
