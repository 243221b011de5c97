"""
Local key-value storage tests.

Verifies that the session flag survives a reopen and that damaged files
degrade to an empty store.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from src.adapters.local_storage import (
    InMemoryKeyValueStore,
    JsonFileKeyValueStore,
    create_local_storage,
)


@pytest.fixture
def storage(tmp_path: Path) -> JsonFileKeyValueStore:
    return JsonFileKeyValueStore(tmp_path / "state" / "local_storage.json")


class TestJsonFileKeyValueStore:
    def test_missing_file_reads_as_empty(self, storage: JsonFileKeyValueStore) -> None:
        assert storage.get("isAuthenticated") is None

    def test_value_survives_reopen(self, storage: JsonFileKeyValueStore) -> None:
        storage.set("isAuthenticated", "true")

        reopened = JsonFileKeyValueStore(storage.path)

        assert reopened.get("isAuthenticated") == "true"

    def test_remove_deletes_key_only(self, storage: JsonFileKeyValueStore) -> None:
        storage.set("isAuthenticated", "true")
        storage.set("theme", "dark")

        storage.remove("isAuthenticated")

        assert storage.get("isAuthenticated") is None
        assert storage.get("theme") == "dark"

    def test_remove_missing_key_is_noop(self, storage: JsonFileKeyValueStore) -> None:
        storage.remove("isAuthenticated")

        assert not storage.path.exists()

    def test_no_temp_file_left_behind(self, storage: JsonFileKeyValueStore) -> None:
        storage.set("isAuthenticated", "true")

        assert [p.name for p in storage.path.parent.iterdir()] == ["local_storage.json"]

    @pytest.mark.parametrize("content", ["{not json", "[1, 2]", "   "])
    def test_damaged_file_reads_as_empty(
        self, storage: JsonFileKeyValueStore, content: str
    ) -> None:
        storage.path.write_text(content)

        assert storage.get("isAuthenticated") is None

        storage.set("isAuthenticated", "true")
        assert storage.get("isAuthenticated") == "true"


class TestInMemoryKeyValueStore:
    def test_initial_values_are_copied(self) -> None:
        initial = {"isAuthenticated": "true"}
        storage = InMemoryKeyValueStore(initial)

        storage.remove("isAuthenticated")

        assert initial == {"isAuthenticated": "true"}

    def test_clear(self) -> None:
        storage = InMemoryKeyValueStore({"a": "1", "b": "2"})

        storage.clear()

        assert storage.get("a") is None


class TestCreateLocalStorage:
    def test_explicit_path_wins(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("VENA_STORAGE_PATH", str(tmp_path / "env.json"))

        storage = create_local_storage(tmp_path / "explicit.json")

        assert storage.path == tmp_path / "explicit.json"

    def test_env_var_used(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("VENA_STORAGE_PATH", str(tmp_path / "env.json"))

        storage = create_local_storage()

        assert storage.path == tmp_path / "env.json"

    def test_default_path(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("VENA_STORAGE_PATH", raising=False)

        storage = create_local_storage(default_path=str(tmp_path / "default.json"))

        assert storage.path == tmp_path / "default.json"
