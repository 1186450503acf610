# infrastructure/collection/base_loader.py
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import replace
from pathlib import Path
from typing import Any, Dict, List, Union

from application.services.test_case_parser import TestCaseParser
from domain.exceptions import ValidationError
from domain.test_case import Collection, TestCase


class CollectionLoadError(Exception):
    pass


class CollectionLoaderBase(ABC):
    """Reads a collection file (same layout as an exported collection)."""

    def __init__(self, parser: TestCaseParser | None = None) -> None:
        self._parser = parser or TestCaseParser()

    def load_from_file(self, path: Union[str, Path]) -> Collection:
        p = Path(path)
        if not p.exists():
            raise CollectionLoadError(f"Collection file not found: {path}")

        data = self._load_file(p)
        if data is None:
            raise CollectionLoadError(f"Collection file is empty: {path}")
        if not isinstance(data, dict):
            raise CollectionLoadError(f"Collection file is invalid: {path}")

        return self.load_from_dict(data, default_name=p.stem)

    def load_from_dict(self, data: Dict[str, Any], default_name: str = "") -> Collection:
        tests_data = data.get("tests") or []
        if not isinstance(tests_data, list):
            raise CollectionLoadError("tests must be a list")

        tests: List[TestCase] = []
        for i, test_data in enumerate(tests_data):
            try:
                test = self._parser.parse_dict(test_data)
            except ValidationError as e:
                raise CollectionLoadError(f"test #{i + 1}: {e}") from e
            if not test.id:
                test = replace(test, id=f"test_{i + 1}")
            tests.append(test)

        return Collection(
            id=str(data.get("id") or default_name),
            name=data.get("name") or default_name,
            tests=tests,
            created_at=data.get("createdAt"),
            updated_at=data.get("updatedAt"),
            imported_at=data.get("importedAt"),
        )

    @abstractmethod
    def _load_file(self, path: Path) -> Any:
        ...
