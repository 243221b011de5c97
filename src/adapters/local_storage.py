"""
Local key-value storage adapters.

Implements KeyValueStorePort for the session flag. The JSON file variant is
the durable store used by the running app; the in-memory variant backs tests
and throwaway sessions.

Invariants:
- Values are strings; the file always holds one flat JSON object
- A missing or empty file reads as an empty store
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)


class JsonFileKeyValueStore:
    """
    Durable key-value store persisted as a single JSON object.

    Every write rewrites the file through a temporary sibling and an atomic
    rename, so a crash mid-write leaves the previous contents in place.
    """

    def __init__(self, path: str | Path, *, create_dirs: bool = True) -> None:
        """
        Initialize the store.

        Args:
            path: JSON file holding the entries
            create_dirs: Whether to create the parent directory if missing
        """
        self.path = Path(path)
        if create_dirs:
            self.path.parent.mkdir(parents=True, exist_ok=True)

    def _load(self) -> dict[str, str]:
        if not self.path.exists():
            return {}

        with open(self.path) as f:
            content = f.read()

        if not content.strip():
            return {}

        try:
            data = json.loads(content)
        except json.JSONDecodeError:
            logger.warning("Ignoring unreadable storage file %s", self.path)
            return {}

        if not isinstance(data, dict):
            logger.warning("Ignoring non-object storage file %s", self.path)
            return {}

        return {str(k): str(v) for k, v in data.items()}

    def _write(self, data: dict[str, str]) -> None:
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        with open(tmp_path, "w") as f:
            json.dump(data, f, indent=2, sort_keys=True)
        os.replace(tmp_path, self.path)

    def get(self, key: str) -> str | None:
        return self._load().get(key)

    def set(self, key: str, value: str) -> None:
        data = self._load()
        data[key] = value
        self._write(data)

    def remove(self, key: str) -> None:
        data = self._load()
        if key not in data:
            return
        del data[key]
        self._write(data)


class InMemoryKeyValueStore:
    """In-memory storage - suitable for tests and ephemeral sessions."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def remove(self, key: str) -> None:
        self._data.pop(key, None)

    def clear(self) -> None:
        """Clear all entries - useful for testing."""
        self._data.clear()


def create_local_storage(
    path: str | Path | None = None,
    *,
    env_var: str = "VENA_STORAGE_PATH",
    default_path: str = ".vena/local_storage.json",
) -> JsonFileKeyValueStore:
    """
    Factory function to create JsonFileKeyValueStore from config.

    Args:
        path: Explicit file path (overrides env var)
        env_var: Environment variable name for the storage path
        default_path: Default path if not configured

    Returns:
        Configured JsonFileKeyValueStore instance
    """
    if path is None:
        path = os.environ.get(env_var, default_path)

    return JsonFileKeyValueStore(path)
