# infrastructure/logging/loguru_logger.py
from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import Any, Dict

from loguru import logger as _loguru

from application.ports.logger import LoggerPort

_FORMAT = "<green>{time:HH:mm:ss.SSS}</green> | <level>{level: <7}</level> | {message} {extra}"


def setup_logging(level: str = "INFO") -> None:
    _loguru.remove()
    _loguru.add(sys.stderr, level=level.upper(), format=_FORMAT)


@dataclass(frozen=True)
class LoguruLogger(LoggerPort):
    """LoggerPort over loguru; bound fields travel in loguru's `extra`."""

    bound: Dict[str, Any] = field(default_factory=dict)

    def bind(self, **fields: Any) -> "LoguruLogger":
        merged = dict(self.bound)
        merged.update(fields)
        return LoguruLogger(bound=merged)

    def debug(self, event: str, **fields: Any) -> None:
        self._emit("DEBUG", event, fields)

    def info(self, event: str, **fields: Any) -> None:
        self._emit("INFO", event, fields)

    def warning(self, event: str, **fields: Any) -> None:
        self._emit("WARNING", event, fields)

    def error(self, event: str, **fields: Any) -> None:
        self._emit("ERROR", event, fields)

    def _emit(self, level: str, event: str, fields: Dict[str, Any]) -> None:
        extra = dict(self.bound)
        extra.update(fields)
        # opt(depth=2) attributes the record to the engine call site
        _loguru.bind(**extra).opt(depth=2).log(level, event)
