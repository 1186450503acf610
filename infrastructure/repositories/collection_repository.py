# infrastructure/repositories/collection_repository.py
from __future__ import annotations

import json
from dataclasses import replace
from typing import Any, Callable, Dict, List, Optional

from application.ports.logger import LoggerPort
from application.ports.storage import KeyValueStorePort
from application.services.test_case_parser import TestCaseParser
from domain.exceptions import NotFoundError, ValidationError
from domain.test_case import Collection, TestCase
from infrastructure.repositories.clock import new_id, now_iso
from infrastructure.storage.keys import STORAGE_KEYS


class CollectionRepository:
    """
    Collections are stored as one JSON array. Every mutation rewrites the whole
    document, matching the key-value storage contract.
    """

    def __init__(
        self,
        store: KeyValueStorePort,
        logger: LoggerPort,
        clock: Callable[[], str] = now_iso,
        id_factory: Callable[[str], str] = new_id,
        parser: Optional[TestCaseParser] = None,
    ):
        self._store = store
        self._logger = logger
        self._clock = clock
        self._new_id = id_factory
        self._parser = parser or TestCaseParser()

    def get_all(self) -> List[Collection]:
        raw = self._store.load(STORAGE_KEYS["COLLECTIONS"], [])
        if not isinstance(raw, list):
            return []
        return [Collection.from_dict(c) for c in raw if isinstance(c, dict)]

    def get(self, collection_id: str) -> Optional[Collection]:
        for c in self.get_all():
            if c.id == collection_id:
                return c
        return None

    def require(self, collection_id: str) -> Collection:
        collection = self.get(collection_id)
        if collection is None:
            raise NotFoundError(f"Collection not found: {collection_id}")
        return collection

    def add(self, name: str, tests: Optional[List[TestCase]] = None, collection_id: Optional[str] = None) -> Collection:
        collection = Collection(
            id=collection_id or self._new_id("col"),
            name=name,
            tests=[self._with_test_id(t) for t in tests or []],
            created_at=self._clock(),
        )
        collections = self.get_all()
        collections.append(collection)
        self._save(collections)
        return collection

    def update(self, collection_id: str, name: Optional[str] = None, tests: Optional[List[TestCase]] = None) -> Collection:
        collections = self.get_all()
        idx = self._index_of(collections, collection_id)
        current = collections[idx]
        updated = replace(
            current,
            name=current.name if name is None else name,
            tests=current.tests if tests is None else list(tests),
            updated_at=self._clock(),
        )
        collections[idx] = updated
        self._save(collections)
        return updated

    def delete(self, collection_id: str) -> bool:
        collections = self.get_all()
        remaining = [c for c in collections if c.id != collection_id]
        if len(remaining) == len(collections):
            return False
        return self._save(remaining)

    def add_test(self, collection_id: str, test: TestCase) -> TestCase:
        collection = self.require(collection_id)
        stored = self._with_test_id(test)
        self.update(collection_id, tests=list(collection.tests) + [stored])
        return stored

    def update_test(self, collection_id: str, test_id: str, test: TestCase) -> TestCase:
        collection = self.require(collection_id)
        tests = list(collection.tests)
        for i, t in enumerate(tests):
            if t.id == test_id:
                tests[i] = replace(test, id=test_id)
                self.update(collection_id, tests=tests)
                return tests[i]
        raise NotFoundError(f"Test not found: {test_id}")

    def delete_test(self, collection_id: str, test_id: str) -> bool:
        collection = self.require(collection_id)
        tests = [t for t in collection.tests if t.id != test_id]
        if len(tests) == len(collection.tests):
            return False
        self.update(collection_id, tests=tests)
        return True

    def export(self, collection_id: str) -> str:
        return json.dumps(self.require(collection_id).to_dict(), indent=2, ensure_ascii=False)

    def import_json(self, text: str) -> Collection:
        """Imported ids are never trusted: the collection gets a fresh id and import timestamp."""
        try:
            data = json.loads(text)
        except ValueError as e:
            self._logger.error("collection.import_failed", error=str(e))
            raise ValidationError(f"Collection import failed: {e}") from e

        if (
            not isinstance(data, dict)
            or not isinstance(data.get("tests") or [], list)
            or not isinstance(data.get("name") or "", str)
        ):
            self._logger.error("collection.import_failed", error="not a collection document")
            raise ValidationError("Collection import failed: not a collection document")

        tests: List[TestCase] = []
        for i, test_data in enumerate(data.get("tests") or []):
            try:
                tests.append(self._with_test_id(self._parser.parse_dict(test_data)))
            except ValidationError as e:
                self._logger.error("collection.import_failed", error=str(e), test_index=i)
                raise ValidationError(f"Collection import failed: test #{i + 1}: {e}") from e

        imported = Collection(
            id=self._new_id("col"),
            name=data.get("name") or "",
            tests=tests,
            created_at=self._clock(),
            updated_at=None,
            imported_at=self._clock(),
        )
        collections = self.get_all()
        collections.append(imported)
        self._save(collections)
        self._logger.info("collection.imported", collection_id=imported.id, tests=len(imported.tests))
        return imported

    def _with_test_id(self, test: TestCase) -> TestCase:
        if test.id:
            return test
        return replace(test, id=self._new_id("test"))

    def _index_of(self, collections: List[Collection], collection_id: str) -> int:
        for i, c in enumerate(collections):
            if c.id == collection_id:
                return i
        raise NotFoundError(f"Collection not found: {collection_id}")

    def _save(self, collections: List[Collection]) -> bool:
        payload: List[Dict[str, Any]] = [c.to_dict() for c in collections]
        return self._store.save(STORAGE_KEYS["COLLECTIONS"], payload)
