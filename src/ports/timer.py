from collections.abc import Callable
from typing import Protocol


class TimerHandle(Protocol):
    def cancel(self) -> None:
        """Stop the callback from firing. No-op once it has fired."""
        ...


class TimerPort(Protocol):
    def schedule(self, delay_ms: int, callback: Callable[[], None]) -> TimerHandle:
        """Run callback once, delay_ms milliseconds from now."""
        ...
