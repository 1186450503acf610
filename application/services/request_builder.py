from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Dict, Optional

from application.services.execution_deps import ExecutionDeps
from application.services.redactor import mask_dict
from domain.compare import stringify
from domain.path import UNDEFINED
from domain.test_case import BODYLESS_METHODS, TestCase
from application.services.base_url_resolver import BaseUrlResolver


@dataclass(frozen=True)
class PreparedRequest:
    method: str
    url: str
    headers: Dict[str, str]
    body: Optional[str]  # serialized JSON actually sent
    display_body: Any = None  # body as declared, before interpolation


def _find_header(headers: Dict[str, str], name: str) -> Optional[str]:
    for k in headers:
        if k.lower() == name.lower():
            return k
    return None


class RequestBuilder:
    """
    Turn a TestCase (or ad hoc options) into a concrete request:
    BASE_URL joining, {{var}} interpolation, JSON content type, bearer token.
    """

    def build(self, test: TestCase, deps: ExecutionDeps, account_id: Optional[str] = None) -> PreparedRequest:
        return self.build_request(
            method=test.method,
            url=self.resolve_endpoint(test.endpoint, deps),
            headers=test.headers,
            body=test.body,
            deps=deps,
            account_id=test.account_id or account_id,
        )

    def resolve_endpoint(self, endpoint: str, deps: ExecutionDeps) -> str:
        base_url = deps.variables.get("BASE_URL")
        resolver = BaseUrlResolver("" if base_url is UNDEFINED or base_url is None else str(base_url))
        return resolver.resolve_url(endpoint)

    def build_request(
        self,
        method: str,
        url: str,
        deps: ExecutionDeps,
        headers: Optional[Dict[str, str]] = None,
        body: Any = None,
        account_id: Optional[str] = None,
    ) -> PreparedRequest:
        method = (method or "GET").upper()
        sends_body = body is not None and method not in BODYLESS_METHODS

        request_headers: Dict[str, Any] = dict(headers or {})

        if sends_body and _find_header(request_headers, "Content-Type") is None:
            request_headers["Content-Type"] = "application/json"

        if account_id:
            token = deps.accounts.get_token(account_id)
            if token:
                existing = _find_header(request_headers, "Authorization")
                if existing is not None:
                    del request_headers[existing]
                request_headers["Authorization"] = f"Bearer {token}"

        interpolated_headers = {
            k: deps.variables.interpolate(v if isinstance(v, str) else stringify(v))
            for k, v in request_headers.items()
        }

        payload: Optional[str] = None
        if sends_body:
            payload = json.dumps(deps.variables.interpolate_object(body), ensure_ascii=False)

        prepared = PreparedRequest(
            method=method,
            url=deps.variables.interpolate(url),
            headers=interpolated_headers,
            body=payload,
            display_body=body,
        )
        deps.logger.debug(
            "request.built",
            method=prepared.method,
            url=prepared.url,
            headers=mask_dict(prepared.headers),
            has_body=payload is not None,
            account_id=account_id,
        )
        return prepared
