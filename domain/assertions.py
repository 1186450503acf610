# domain/assertions.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar, Dict, Optional

from domain.path import UNDEFINED


@dataclass(frozen=True)
class AssertionRule:
    kind: ClassVar[str] = ""

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.kind}


@dataclass(frozen=True)
class StatusAssertion(AssertionRule):
    kind: ClassVar[str] = "status"
    expected: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.kind, "expected": self.expected}


@dataclass(frozen=True)
class JsonPathAssertion(AssertionRule):
    kind: ClassVar[str] = "json_path"
    path: str = ""
    operator: str = "eq"
    value: Any = None

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.kind, "path": self.path, "operator": self.operator, "value": self.value}


@dataclass(frozen=True)
class ContainsAssertion(AssertionRule):
    kind: ClassVar[str] = "contains"
    path: str = ""
    value: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.kind, "path": self.path, "value": self.value}


@dataclass(frozen=True)
class ResponseTimeAssertion(AssertionRule):
    kind: ClassVar[str] = "response_time"
    max_ms: float = 0

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.kind, "max_ms": self.max_ms}


@dataclass(frozen=True)
class ExistsAssertion(AssertionRule):
    kind: ClassVar[str] = "exists"
    path: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.kind, "path": self.path}


@dataclass(frozen=True)
class UnknownAssertion(AssertionRule):
    """Rule whose type tag is not recognised; kept so it can be reported as failed."""

    type_name: str = ""
    raw: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        out = dict(self.raw)
        out["type"] = self.type_name
        return out


def assertion_from_dict(data: Dict[str, Any]) -> AssertionRule:
    kind = data.get("type", "")

    if kind == "status":
        return StatusAssertion(expected=data.get("expected"))
    if kind == "json_path":
        return JsonPathAssertion(
            path=data.get("path", ""),
            operator=data.get("operator") or "eq",
            value=data.get("value"),
        )
    if kind == "contains":
        return ContainsAssertion(path=data.get("path", ""), value=data.get("value", ""))
    if kind == "response_time":
        return ResponseTimeAssertion(max_ms=data.get("max_ms", 0))
    if kind == "exists":
        return ExistsAssertion(path=data.get("path", ""))

    return UnknownAssertion(type_name=str(kind), raw=dict(data))


@dataclass(frozen=True)
class AssertionResult:
    rule: AssertionRule
    passed: bool
    actual: Any = None
    message: str = ""

    def to_dict(self) -> Dict[str, Any]:
        out = self.rule.to_dict()
        out.update(
            {
                "passed": self.passed,
                "actual": None if self.actual is UNDEFINED else self.actual,
                "message": self.message,
            }
        )
        return out
