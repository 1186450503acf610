from __future__ import annotations

from typing import Any, Dict, Mapping

from application.ports.logger import LoggerPort
from application.services.variable_store import VariableStore
from domain.path import UNDEFINED, resolve_path


class VariableExtractor:
    """Copy values out of a response body into the runtime variable layer."""

    def extract(
        self,
        rules: Mapping[str, str],
        body: Any,
        variables: VariableStore,
        logger: LoggerPort,
    ) -> Dict[str, Any]:
        extracted: Dict[str, Any] = {}
        if not rules or body is None or body == "":
            return extracted

        for name, path in rules.items():
            value = resolve_path(body, path)
            if value is UNDEFINED:
                logger.debug("extract.skipped", name=name, path=path)
                continue
            variables.set(name, value)
            extracted[name] = value
            logger.debug("extract.set", name=name, path=path)

        return extracted
