from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class KeyValueStorePort(ABC):
    """Whole-document persistence keyed by fixed identifiers."""

    @abstractmethod
    def load(self, key: str, default: Any = None) -> Any:
        ...

    @abstractmethod
    def save(self, key: str, value: Any) -> bool:
        ...

    @abstractmethod
    def remove(self, key: str) -> bool:
        ...

    @abstractmethod
    def clear(self) -> None:
        ...
