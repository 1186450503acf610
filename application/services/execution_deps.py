from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional, Protocol

from application.ports.logger import LoggerPort
from application.services.variable_store import VariableStore


class AccountTokenPort(Protocol):
    def get_token(self, account_id: str) -> Optional[str]:
        ...


@dataclass(frozen=True)
class ExecutionDeps:
    variables: VariableStore
    accounts: AccountTokenPort
    logger: LoggerPort
    timeout_ms: int = 30000

    def with_logger(self, logger: LoggerPort) -> "ExecutionDeps":
        return replace(self, logger=logger)
