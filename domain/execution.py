# domain/execution.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from domain.assertions import AssertionResult
from domain.test_case import TestCase


@dataclass
class ExecutionResult:
    url: str
    method: str
    request_headers: Dict[str, str] = field(default_factory=dict)
    request_body: Any = None
    response_headers: Dict[str, str] = field(default_factory=dict)
    response_body: Any = None
    status: Optional[int] = None
    status_text: str = ""
    duration: int = 0
    success: bool = False
    error: Optional[str] = None
    assertions: List[AssertionResult] = field(default_factory=list)
    test_passed: bool = False
    test_id: Optional[str] = None
    test_name: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "testId": self.test_id,
            "testName": self.test_name,
            "url": self.url,
            "method": self.method,
            "requestHeaders": dict(self.request_headers),
            "requestBody": self.request_body,
            "responseHeaders": dict(self.response_headers),
            "responseBody": self.response_body,
            "status": self.status,
            "statusText": self.status_text,
            "duration": self.duration,
            "success": self.success,
            "error": self.error,
            "assertions": [a.to_dict() for a in self.assertions],
            "testPassed": self.test_passed,
        }


@dataclass(frozen=True)
class RunProgress:
    current: int
    total: int
    test: TestCase


@dataclass(frozen=True)
class CollectionRunSummary:
    collection: str
    results: List[ExecutionResult]

    @property
    def total(self) -> int:
        return len(self.results)

    @property
    def passed(self) -> int:
        return sum(1 for r in self.results if r.test_passed)

    @property
    def failed(self) -> int:
        return sum(1 for r in self.results if not r.test_passed)

    @property
    def duration(self) -> int:
        return sum(r.duration for r in self.results)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "collection": self.collection,
            "results": [r.to_dict() for r in self.results],
            "summary": {
                "total": self.total,
                "passed": self.passed,
                "failed": self.failed,
                "duration": self.duration,
            },
        }
