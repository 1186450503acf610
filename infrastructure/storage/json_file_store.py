# infrastructure/storage/json_file_store.py
from __future__ import annotations

import copy
import json
from pathlib import Path
from threading import Lock
from typing import Any

from application.ports.logger import LoggerPort
from application.ports.storage import KeyValueStorePort


class JsonFileKeyValueStore(KeyValueStorePort):
    """
    One `<key>.json` document per key. Read/write faults are logged and
    reported as a default value (load) or False (save/remove).
    """

    def __init__(self, base_dir: Path, logger: LoggerPort):
        self._base_dir = Path(base_dir)
        self._logger = logger
        self._lock = Lock()

    def _path(self, key: str) -> Path:
        return self._base_dir / f"{key}.json"

    def load(self, key: str, default: Any = None) -> Any:
        path = self._path(key)
        with self._lock:
            if not path.exists():
                return copy.deepcopy(default)
            try:
                with path.open("r", encoding="utf-8") as handle:
                    return json.load(handle)
            except (OSError, ValueError) as e:
                self._logger.error("storage.load_failed", key=key, error=str(e))
                return copy.deepcopy(default)

    def save(self, key: str, value: Any) -> bool:
        path = self._path(key)
        tmp = path.with_suffix(".json.tmp")
        with self._lock:
            try:
                self._base_dir.mkdir(parents=True, exist_ok=True)
                with tmp.open("w", encoding="utf-8") as handle:
                    json.dump(value, handle, ensure_ascii=False, indent=2)
                tmp.replace(path)
                return True
            except (OSError, TypeError, ValueError) as e:
                self._logger.error("storage.save_failed", key=key, error=str(e))
                return False

    def remove(self, key: str) -> bool:
        with self._lock:
            try:
                self._path(key).unlink(missing_ok=True)
                return True
            except OSError as e:
                self._logger.error("storage.remove_failed", key=key, error=str(e))
                return False

    def clear(self) -> None:
        with self._lock:
            if not self._base_dir.exists():
                return
            for path in self._base_dir.glob("*.json"):
                try:
                    path.unlink()
                except OSError as e:
                    self._logger.error("storage.remove_failed", key=path.stem, error=str(e))
