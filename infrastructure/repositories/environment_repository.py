# infrastructure/repositories/environment_repository.py
from __future__ import annotations

import copy
from typing import Any, Dict, Optional

from application.ports.storage import KeyValueStorePort
from domain.exceptions import NotFoundError, ValidationError
from infrastructure.repositories.config_repository import ConfigRepository
from infrastructure.storage.keys import STORAGE_KEYS

DEFAULT_ENV_ID = "default"

DEFAULT_ENVIRONMENTS: Dict[str, Any] = {
    DEFAULT_ENV_ID: {
        "name": "Default",
        "variables": {
            "BASE_URL": "http://localhost:8000",
            "API_KEY": "",
        },
    },
}


class EnvironmentRepository:
    """
    Named variable sets. The one selected in Config backs the persistent layer
    of the variable store (see get_variables).
    """

    def __init__(self, store: KeyValueStorePort, config: ConfigRepository):
        self._store = store
        self._config = config

    def get_all(self) -> Dict[str, Any]:
        envs = self._store.load(STORAGE_KEYS["ENVIRONMENTS"], DEFAULT_ENVIRONMENTS)
        return envs if isinstance(envs, dict) else copy.deepcopy(DEFAULT_ENVIRONMENTS)

    def get(self, env_id: str) -> Optional[Dict[str, Any]]:
        return self.get_all().get(env_id)

    def set(self, env_id: str, data: Dict[str, Any]) -> bool:
        if not env_id:
            raise ValidationError("Environment id is required")
        variables = data.get("variables") or {}
        if not isinstance(variables, dict):
            raise ValidationError("Environment variables must be an object")
        envs = self.get_all()
        envs[env_id] = {"name": data.get("name") or env_id, "variables": dict(variables)}
        return self._store.save(STORAGE_KEYS["ENVIRONMENTS"], envs)

    def delete(self, env_id: str) -> bool:
        if env_id == DEFAULT_ENV_ID:
            return False
        envs = self.get_all()
        if env_id not in envs:
            return False
        del envs[env_id]
        if self._config.get().get("current_env") == env_id:
            self._config.update(current_env=DEFAULT_ENV_ID)
        return self._store.save(STORAGE_KEYS["ENVIRONMENTS"], envs)

    def current_id(self) -> str:
        return self._config.get().get("current_env") or DEFAULT_ENV_ID

    def select(self, env_id: str) -> bool:
        if self.get(env_id) is None:
            raise NotFoundError(f"Environment not found: {env_id}")
        return self._config.update(current_env=env_id)

    def get_variables(self) -> Dict[str, Any]:
        env = self.get(self.current_id())
        if not env:
            return {}
        return dict(env.get("variables") or {})

    def get_variable(self, key: str, default: Any = "") -> Any:
        return self.get_variables().get(key, default)

    def set_variable(self, key: str, value: Any) -> bool:
        env_id = self.current_id()
        env = self.get(env_id)
        if env is None:
            return False
        variables = dict(env.get("variables") or {})
        variables[key] = value
        return self.set(env_id, {"name": env.get("name"), "variables": variables})
