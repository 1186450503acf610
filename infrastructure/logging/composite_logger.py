from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List

from application.ports.logger import LoggerPort


@dataclass(frozen=True)
class CompositeLogger(LoggerPort):
    """Sends every event to each sink; bind() binds each sink separately."""

    sinks: List[LoggerPort]

    def bind(self, **fields: Any) -> "CompositeLogger":
        return CompositeLogger([sink.bind(**fields) for sink in self.sinks])

    def debug(self, event: str, **fields: Any) -> None:
        self._fan_out("debug", event, fields)

    def info(self, event: str, **fields: Any) -> None:
        self._fan_out("info", event, fields)

    def warning(self, event: str, **fields: Any) -> None:
        self._fan_out("warning", event, fields)

    def error(self, event: str, **fields: Any) -> None:
        self._fan_out("error", event, fields)

    def _fan_out(self, level: str, event: str, fields: Dict[str, Any]) -> None:
        for sink in self.sinks:
            getattr(sink, level)(event, **fields)
