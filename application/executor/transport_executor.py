from __future__ import annotations

import json
import time
from typing import Any, Callable, Dict, Optional

from application.ports.http_client import (
    HttpClientPort,
    HttpResponse,
    HttpTimeoutError,
    HttpTransportError,
)
from application.ports.logger import LoggerPort
from application.services.request_builder import PreparedRequest
from domain.execution import ExecutionResult

DEFAULT_TIMEOUT_MS = 30000


def _is_json_content_type(content_type: Optional[str]) -> bool:
    ctype = (content_type or "").lower()
    return "application/json" in ctype or "+json" in ctype


class TransportExecutor:
    """
    Performs exactly one network call and wraps the outcome in an
    ExecutionResult. Never evaluates assertions.
    """

    def __init__(self, http_client: HttpClientPort, clock: Callable[[], float] = time.perf_counter):
        self._http = http_client
        self._clock = clock

    def execute_prepared(
        self,
        request: PreparedRequest,
        timeout_ms: int = DEFAULT_TIMEOUT_MS,
        logger: Optional[LoggerPort] = None,
    ) -> ExecutionResult:
        return self.execute(
            method=request.method,
            url=request.url,
            headers=request.headers,
            body=request.body,
            timeout_ms=timeout_ms,
            display_body=request.display_body,
            logger=logger,
        )

    def execute(
        self,
        method: str,
        url: str,
        headers: Optional[Dict[str, str]] = None,
        body: Optional[str] = None,
        timeout_ms: int = DEFAULT_TIMEOUT_MS,
        display_body: Any = None,
        logger: Optional[LoggerPort] = None,
    ) -> ExecutionResult:
        result = ExecutionResult(
            url=url,
            method=method,
            request_headers=dict(headers or {}),
            request_body=display_body,
        )

        if logger:
            logger.info("http.request", method=method, url=url, timeout_ms=timeout_ms)

        t0 = self._clock()
        try:
            resp = self._http.send(
                method=method,
                url=url,
                headers=dict(headers or {}),
                body=body,
                timeout_sec=timeout_ms / 1000.0,
            )
        except HttpTimeoutError as e:
            result.duration = self._elapsed_ms(t0)
            result.error = f"Timeout after {timeout_ms}ms"
            if logger:
                logger.error("http.failed", url=url, error=result.error, detail=str(e), duration_ms=result.duration)
            return result
        except HttpTransportError as e:
            result.duration = self._elapsed_ms(t0)
            result.error = str(e) or type(e).__name__
            if logger:
                logger.error("http.failed", url=url, error=result.error, duration_ms=result.duration)
            return result

        result.duration = self._elapsed_ms(t0)
        self._fill_response(result, resp, logger)

        if logger:
            logger.info(
                "http.response",
                url=url,
                status=result.status,
                duration_ms=result.duration,
                success=result.success,
            )
        return result

    def _fill_response(self, result: ExecutionResult, resp: HttpResponse, logger: Optional[LoggerPort]) -> None:
        result.status = resp.status
        result.status_text = resp.status_text or ""
        result.success = 200 <= resp.status < 400

        headers: Dict[str, str] = {}
        for name, value in resp.headers:
            # later duplicates overwrite earlier ones
            headers[name.lower()] = value
        result.response_headers = headers

        text = resp.text or ""
        if _is_json_content_type(headers.get("content-type")):
            try:
                result.response_body = json.loads(text)
                return
            except ValueError as e:
                if logger:
                    logger.warning("http.json_decode_failed", url=result.url, error=str(e))
        result.response_body = text

    def _elapsed_ms(self, t0: float) -> int:
        return int(round((self._clock() - t0) * 1000))
