from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import List, Optional, Tuple


class HttpTransportError(Exception):
    """Request never produced a response (DNS, connection refused, TLS, ...)."""


class HttpTimeoutError(HttpTransportError):
    pass


@dataclass(frozen=True)
class HttpResponse:
    status: int
    status_text: str = ""
    # raw header pairs in wire order; names may repeat
    headers: List[Tuple[str, str]] = field(default_factory=list)
    text: str = ""
    url: str = ""

    def header(self, name: str) -> Optional[str]:
        found = None
        for k, v in self.headers:
            if k.lower() == name.lower():
                found = v
        return found


class HttpClientPort(ABC):
    @abstractmethod
    def send(
        self,
        method: str,
        url: str,
        headers: Optional[dict] = None,
        body: Optional[str] = None,
        timeout_sec: Optional[float] = None,
    ) -> HttpResponse:
        """
        Issue one request. Raises HttpTimeoutError when the timeout elapses and
        HttpTransportError for any other failure to obtain a response.
        """
        ...
