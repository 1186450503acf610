from __future__ import annotations

import re
from typing import Any, Dict, Optional, Protocol

from domain.compare import stringify
from domain.path import UNDEFINED

_PLACEHOLDER = re.compile(r"\{\{(\w+)\}\}")


class EnvironmentVariablesPort(Protocol):
    def get_variables(self) -> Dict[str, Any]:
        ...


class VariableStore:
    """
    Two-layer variable lookup: a runtime layer written by extraction, over the
    persisted variables of the active environment.

    {{name}} placeholders are replaced with the resolved value; unresolved
    placeholders are left as-is.
    """

    def __init__(self, environment: Optional[EnvironmentVariablesPort] = None):
        self._runtime: Dict[str, Any] = {}
        self._environment = environment

    def set(self, name: str, value: Any) -> None:
        self._runtime[name] = value

    def get(self, name: str) -> Any:
        if name in self._runtime:
            return self._runtime[name]
        env_vars = self._environment.get_variables() if self._environment else {}
        if name in env_vars:
            return env_vars[name]
        return UNDEFINED

    def clear(self) -> None:
        self._runtime = {}

    def runtime_snapshot(self) -> Dict[str, Any]:
        return dict(self._runtime)

    def interpolate(self, text: Any) -> Any:
        if not isinstance(text, str) or "{{" not in text:
            return text
        return _PLACEHOLDER.sub(self._replace, text)

    def interpolate_object(self, value: Any) -> Any:
        if isinstance(value, str):
            return self.interpolate(value)
        if isinstance(value, list):
            return [self.interpolate_object(v) for v in value]
        if isinstance(value, dict):
            return {k: self.interpolate_object(v) for k, v in value.items()}
        return value

    def _replace(self, m: "re.Match[str]") -> str:
        value = self.get(m.group(1))
        if value is UNDEFINED:
            return m.group(0)
        return stringify(value)
