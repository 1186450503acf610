# application/services/redactor.py
from __future__ import annotations

from typing import Any, Dict

SENSITIVE_KEYS = {
    "password",
    "authorization",
    "cookie",
    "set-cookie",
    "token",
    "refresh",
    "access_token",
    "refresh_token",
}


def mask_value(key: str, value: Any) -> Any:
    if key.lower() in SENSITIVE_KEYS and value not in (None, ""):
        return "********"
    return value


def mask_dict(d: Dict[str, Any]) -> Dict[str, Any]:
    return {k: mask_value(k, v) for k, v in (d or {}).items()}


def mask_body(body: Any) -> Any:
    if isinstance(body, dict):
        return {k: mask_body(mask_value(k, v)) for k, v in body.items()}
    if isinstance(body, list):
        return [mask_body(v) for v in body]
    return body
