from __future__ import annotations

from pathlib import Path

from infrastructure.storage.in_memory_store import InMemoryKeyValueStore
from infrastructure.storage.json_file_store import JsonFileKeyValueStore
from tests.mock_logger import RecordingLogger


def test_save_and_load_round_trip(tmp_path: Path) -> None:
    store = JsonFileKeyValueStore(tmp_path / "data", RecordingLogger())

    assert store.save("apiTester_config", {"current_env": "staging"}) is True

    assert (tmp_path / "data" / "apiTester_config.json").exists()
    assert store.load("apiTester_config") == {"current_env": "staging"}


def test_missing_key_returns_default_copy(tmp_path: Path) -> None:
    store = JsonFileKeyValueStore(tmp_path, RecordingLogger())
    default = {"a": []}

    loaded = store.load("nope", default)
    loaded["a"].append(1)

    assert default == {"a": []}


def test_corrupt_file_is_logged_and_defaults(tmp_path: Path) -> None:
    logger = RecordingLogger()
    (tmp_path / "apiTester_history.json").write_text("{broken", encoding="utf-8")
    store = JsonFileKeyValueStore(tmp_path, logger)

    assert store.load("apiTester_history", []) == []
    assert logger.names() == ["storage.load_failed"]


def test_unserializable_value_reports_false(tmp_path: Path) -> None:
    logger = RecordingLogger()
    store = JsonFileKeyValueStore(tmp_path, logger)

    assert store.save("bad", {"x": object()}) is False
    assert logger.names() == ["storage.save_failed"]
    assert store.load("bad") is None


def test_remove_and_clear(tmp_path: Path) -> None:
    store = JsonFileKeyValueStore(tmp_path, RecordingLogger())
    store.save("a", 1)
    store.save("b", 2)

    assert store.remove("a") is True
    assert store.remove("a") is True
    assert store.load("a") is None

    store.clear()
    assert store.load("b") is None


def test_in_memory_store_isolates_values() -> None:
    store = InMemoryKeyValueStore()
    value = {"tests": []}
    store.save("k", value)
    value["tests"].append("mutated")

    loaded = store.load("k")
    loaded["tests"].append("also mutated")

    assert store.load("k") == {"tests": []}
    store.clear()
    assert store.load("k", "gone") == "gone"
