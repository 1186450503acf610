from __future__ import annotations

import copy
from threading import Lock
from typing import Any, Dict

from application.ports.storage import KeyValueStorePort


class InMemoryKeyValueStore(KeyValueStorePort):
    def __init__(self) -> None:
        self._data: Dict[str, Any] = {}
        self._lock = Lock()

    def load(self, key: str, default: Any = None) -> Any:
        with self._lock:
            if key not in self._data:
                return copy.deepcopy(default)
            return copy.deepcopy(self._data[key])

    def save(self, key: str, value: Any) -> bool:
        with self._lock:
            self._data[key] = copy.deepcopy(value)
            return True

    def remove(self, key: str) -> bool:
        with self._lock:
            self._data.pop(key, None)
            return True

    def clear(self) -> None:
        with self._lock:
            self._data.clear()
