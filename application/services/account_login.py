from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Protocol

from application.ports.logger import LoggerPort
from domain.execution import ExecutionResult
from domain.path import UNDEFINED, resolve_path

LOGIN_PATH = "/accounts/login/"


class AccountWriterPort(Protocol):
    def set(self, slot: str, data: Dict[str, Any]) -> bool:
        ...


class RequestSenderPort(Protocol):
    def request(self, method: str, url: str, headers=None, body: Any = None, account_id=None) -> ExecutionResult:
        ...

    def resolve_endpoint(self, endpoint: str) -> str:
        ...


@dataclass(frozen=True)
class LoginOutcome:
    ok: bool
    account: Optional[Dict[str, Any]] = None
    error: Optional[str] = None


def _first_present(body: Any, *paths: str) -> Any:
    for p in paths:
        value = resolve_path(body, p)
        if value is not UNDEFINED and value not in (None, ""):
            return value
    return None


class AccountLoginService:
    """Log an account slot in against {BASE_URL}/accounts/login/ and keep its tokens."""

    def __init__(self, sender: RequestSenderPort, accounts: AccountWriterPort, logger: LoggerPort):
        self._sender = sender
        self._accounts = accounts
        self._logger = logger

    def login(self, slot: str, email: str, password: str) -> LoginOutcome:
        if not email or not password:
            return LoginOutcome(ok=False, error="email and password are required")

        url = self._sender.resolve_endpoint(LOGIN_PATH)
        result = self._sender.request("POST", url, body={"email": email, "password": password})

        body = result.response_body
        if not result.success or not isinstance(body, dict):
            error = result.error or _first_present(body, "detail") or "unknown error"
            self._logger.error("account.login_failed", slot=slot, status=result.status, error=str(error))
            return LoginOutcome(ok=False, error=str(error))

        account = {
            "email": email,
            "password": password,
            "token": _first_present(body, "access_token", "access") or "",
            "refresh": _first_present(body, "refresh_token", "refresh") or "",
            "pk": _first_present(body, "user.pk", "user.id", "pk"),
        }
        self._accounts.set(slot, account)
        self._logger.info("account.login", slot=slot, has_token=bool(account["token"]))
        return LoginOutcome(ok=True, account=account)
