# application/services/base_url_resolver.py
from __future__ import annotations

import re
from dataclasses import dataclass

_ABSOLUTE = re.compile(r"^https?://", re.IGNORECASE)


def is_absolute_url(url: str) -> bool:
    return bool(_ABSOLUTE.match(url or ""))


@dataclass(frozen=True)
class BaseUrlResolver:
    base_url: str

    def resolve_url(self, url: str) -> str:
        if is_absolute_url(url):
            return url
        base = self.base_url or ""
        if base.endswith("/") and url.startswith("/"):
            return base + url[1:]
        return base + url
