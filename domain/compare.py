# domain/compare.py
from __future__ import annotations

import json
import re
from typing import Any

from domain.path import UNDEFINED

COMPARE_OPERATORS = (
    "eq",
    "ne",
    "gt",
    "gte",
    "lt",
    "lte",
    "contains",
    "startsWith",
    "endsWith",
    "regex",
)


def stringify(value: Any) -> str:
    """Text form used for interpolation and regex matching (JSON spelling for non-strings)."""
    if value is UNDEFINED:
        return ""
    if isinstance(value, str):
        return value
    return json.dumps(value, ensure_ascii=False)


def strict_equal(actual: Any, expected: Any) -> bool:
    if actual is UNDEFINED or expected is UNDEFINED:
        return actual is expected
    # True == 1 must not hold
    if isinstance(actual, bool) != isinstance(expected, bool):
        return False
    return actual == expected


def compare_values(actual: Any, operator: str, expected: Any) -> bool:
    """
    Raises TypeError for orderings between incompatible types, re.error for a bad
    pattern and ValueError for an unknown operator.
    """
    op = operator or "eq"

    if op == "eq":
        return strict_equal(actual, expected)
    if op == "ne":
        return not strict_equal(actual, expected)

    if op in ("gt", "gte", "lt", "lte"):
        if actual is UNDEFINED or actual is None:
            return False
        if op == "gt":
            return actual > expected
        if op == "gte":
            return actual >= expected
        if op == "lt":
            return actual < expected
        return actual <= expected

    if op == "contains":
        return isinstance(actual, str) and str(expected) in actual
    if op == "startsWith":
        return isinstance(actual, str) and actual.startswith(str(expected))
    if op == "endsWith":
        return isinstance(actual, str) and actual.endswith(str(expected))
    if op == "regex":
        return re.search(str(expected), stringify(actual)) is not None

    raise ValueError(f"unknown operator: {op}")
