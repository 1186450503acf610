from __future__ import annotations

from typing import Any, Callable, Dict, List

from application.ports.storage import KeyValueStorePort
from infrastructure.repositories.clock import new_id, now_iso
from infrastructure.storage.keys import STORAGE_KEYS

MAX_HISTORY_ENTRIES = 100


class HistoryRepository:
    """Newest-first run history, capped at MAX_HISTORY_ENTRIES."""

    def __init__(
        self,
        store: KeyValueStorePort,
        max_entries: int = MAX_HISTORY_ENTRIES,
        clock: Callable[[], str] = now_iso,
    ):
        self._store = store
        self._max = max_entries
        self._clock = clock

    def get_all(self) -> List[Dict[str, Any]]:
        history = self._store.load(STORAGE_KEYS["HISTORY"], [])
        return history if isinstance(history, list) else []

    def add(self, entry: Dict[str, Any]) -> Dict[str, Any]:
        record = dict(entry)
        record["id"] = new_id("hist")
        record["timestamp"] = self._clock()

        history = self.get_all()
        history.insert(0, record)
        del history[self._max:]

        self._store.save(STORAGE_KEYS["HISTORY"], history)
        return record

    def clear(self) -> bool:
        return self._store.save(STORAGE_KEYS["HISTORY"], [])

    def get_by_endpoint(self, endpoint: str) -> List[Dict[str, Any]]:
        return [h for h in self.get_all() if h.get("endpoint") == endpoint]
