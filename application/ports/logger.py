from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class LoggerPort(ABC):
    """
    Structured event logger used by the engine.

    Events are dotted names ("http.request", "collection.end") plus keyword
    fields. Values that may carry credentials are masked by the caller.
    """

    @abstractmethod
    def debug(self, event: str, **fields: Any) -> None: ...

    @abstractmethod
    def info(self, event: str, **fields: Any) -> None: ...

    @abstractmethod
    def warning(self, event: str, **fields: Any) -> None: ...

    @abstractmethod
    def error(self, event: str, **fields: Any) -> None: ...

    @abstractmethod
    def bind(self, **fields: Any) -> "LoggerPort":
        """Child logger that adds fields (collection_id, test_id) to every event."""
