from typing import Protocol


class KeyValueStorePort(Protocol):
    """Durable string key-value store (the browser's localStorage, in spirit)."""

    def get(self, key: str) -> str | None:
        """Return the stored value, or None when the key is absent."""
        ...

    def set(self, key: str, value: str) -> None: ...

    def remove(self, key: str) -> None:
        """Remove the key. Missing keys are ignored."""
        ...
