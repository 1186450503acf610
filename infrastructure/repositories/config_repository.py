from __future__ import annotations

from typing import Any, Dict

from application.ports.storage import KeyValueStorePort
from infrastructure.storage.keys import STORAGE_KEYS

DEFAULT_CONFIG: Dict[str, Any] = {
    "current_env": "default",
    "active_collection": None,
}


class ConfigRepository:
    def __init__(self, store: KeyValueStorePort):
        self._store = store

    def get(self) -> Dict[str, Any]:
        loaded = self._store.load(STORAGE_KEYS["CONFIG"], {})
        config = dict(DEFAULT_CONFIG)
        if isinstance(loaded, dict):
            config.update(loaded)
        return config

    def update(self, **changes: Any) -> bool:
        config = self.get()
        config.update(changes)
        return self._store.save(STORAGE_KEYS["CONFIG"], config)

    def reset(self) -> bool:
        return self._store.save(STORAGE_KEYS["CONFIG"], dict(DEFAULT_CONFIG))
