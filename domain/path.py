# domain/path.py
"""
Restricted path expressions over a parsed response body.

Supported forms:
  user.name
  user.items[0].id
  $.user.id        (leading "$." is stripped)
  items.0          (numeric segment indexes into a list)
"""
from __future__ import annotations

import re
from typing import Any, List


class _Undefined:
    """Marker for "nothing at this path", distinct from a JSON null."""

    _instance = None

    def __new__(cls) -> "_Undefined":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False


UNDEFINED = _Undefined()

_INDEXED_SEGMENT = re.compile(r"^(\w+)\[(\d+)\]$")


def is_undefined(value: Any) -> bool:
    return value is UNDEFINED


def split_path(path: str) -> List[str]:
    stripped = re.sub(r"^\$\.?", "", (path or "").strip())
    if stripped == "":
        return []
    return stripped.split(".")


def resolve_path(root: Any, path: str) -> Any:
    cur = root
    for part in split_path(path):
        if cur is None or cur is UNDEFINED:
            return UNDEFINED

        m = _INDEXED_SEGMENT.match(part)
        if m:
            cur = _get_field(cur, m.group(1))
            if isinstance(cur, list):
                cur = _get_index(cur, int(m.group(2)))
            continue

        cur = _get_field(cur, part)

    return cur


def _get_field(cur: Any, name: str) -> Any:
    if isinstance(cur, dict):
        return cur.get(name, UNDEFINED)
    if isinstance(cur, list) and name.isdigit():
        return _get_index(cur, int(name))
    return UNDEFINED


def _get_index(items: List[Any], idx: int) -> Any:
    if idx < 0 or idx >= len(items):
        return UNDEFINED
    return items[idx]
