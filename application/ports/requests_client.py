from __future__ import annotations

import time
from typing import Dict, List, Optional, Tuple

import requests

from application.ports.http_client import (
    HttpClientPort,
    HttpResponse,
    HttpTimeoutError,
    HttpTransportError,
)


class RequestsSessionHttpClient(HttpClientPort):
    """
    requests.Session backed transport.

    The timeout is a hard cap on the whole exchange: requests only bounds each
    socket operation, so the body is streamed and the deadline is checked
    between chunks.
    """

    def __init__(
        self,
        base_headers: Optional[Dict[str, str]] = None,
        timeout_sec: float = 30,
        session: Optional[requests.Session] = None,
    ):
        self._session = session or requests.Session()
        self._base_headers = base_headers or {}
        self._timeout = timeout_sec

    def send(
        self,
        method: str,
        url: str,
        headers: Optional[Dict[str, str]] = None,
        body: Optional[str] = None,
        timeout_sec: Optional[float] = None,
    ) -> HttpResponse:
        merged = dict(self._base_headers)
        if headers:
            merged.update(headers)

        timeout = self._timeout if timeout_sec is None else timeout_sec
        started = time.monotonic()
        deadline = started + timeout

        try:
            resp = self._session.request(
                method=method.upper(),
                url=url,
                headers=merged,
                data=body.encode("utf-8") if body is not None else None,
                timeout=timeout,
                stream=True,
            )
        except requests.exceptions.Timeout as e:
            raise HttpTimeoutError(str(e)) from e
        except requests.exceptions.RequestException as e:
            raise HttpTransportError(str(e)) from e

        try:
            chunks: List[bytes] = []
            for chunk in resp.iter_content(chunk_size=8192):
                if time.monotonic() > deadline:
                    raise HttpTimeoutError(f"response body not received within {timeout}s")
                chunks.append(chunk)
        except requests.exceptions.RequestException as e:
            # iter_content reports read timeouts as ConnectionError
            if time.monotonic() - started >= timeout:
                raise HttpTimeoutError(str(e)) from e
            raise HttpTransportError(str(e)) from e
        finally:
            resp.close()

        # headers can trickle in under the per-read timeout with no body to check against
        if time.monotonic() > deadline:
            raise HttpTimeoutError(f"response not received within {timeout}s")

        content = b"".join(chunks)
        encoding = resp.encoding or "utf-8"
        try:
            text = content.decode(encoding, errors="replace")
        except LookupError:
            text = content.decode("utf-8", errors="replace")

        return HttpResponse(
            status=resp.status_code,
            status_text=resp.reason or "",
            headers=_header_pairs(resp),
            text=text,
            url=str(resp.url),
        )


def _header_pairs(resp: requests.Response) -> List[Tuple[str, str]]:
    # urllib3 keeps repeated header lines apart; requests' own mapping folds them
    raw = getattr(getattr(resp, "raw", None), "headers", None)
    source = raw if raw is not None else resp.headers
    return [(str(k), str(v)) for k, v in source.items()]
