# application/engine.py
from __future__ import annotations

import time
from typing import Any, Callable, Dict, Optional

from application.executor.assertion_engine import AssertionEngine
from application.executor.collection_runner import DEFAULT_INTER_TEST_DELAY_MS, CollectionRunner
from application.executor.test_runner import TestRunner
from application.executor.transport_executor import DEFAULT_TIMEOUT_MS, TransportExecutor
from application.ports.http_client import HttpClientPort
from application.ports.logger import LoggerPort
from application.ports.run_listener import RunListener
from application.services.execution_deps import AccountTokenPort, ExecutionDeps
from application.services.request_builder import RequestBuilder
from application.services.variable_store import EnvironmentVariablesPort, VariableStore
from domain.execution import CollectionRunSummary, ExecutionResult
from domain.test_case import Collection, TestCase


class ApiTestEngine:
    """
    One engine per session. Owns the variable store; every run goes through
    this instance rather than module-level state.
    """

    def __init__(
        self,
        http_client: HttpClientPort,
        environment: EnvironmentVariablesPort,
        accounts: AccountTokenPort,
        logger: LoggerPort,
        timeout_ms: int = DEFAULT_TIMEOUT_MS,
        inter_test_delay_ms: int = DEFAULT_INTER_TEST_DELAY_MS,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.variables = VariableStore(environment)
        self._deps = ExecutionDeps(
            variables=self.variables,
            accounts=accounts,
            logger=logger,
            timeout_ms=timeout_ms,
        )
        self._builder = RequestBuilder()
        self._transport = TransportExecutor(http_client)
        self._runner = TestRunner(self._builder, self._transport, AssertionEngine())
        self._collections = CollectionRunner(self._runner, inter_test_delay_ms=inter_test_delay_ms, sleep=sleep)

    @property
    def deps(self) -> ExecutionDeps:
        return self._deps

    def run_test(
        self,
        test: TestCase,
        account_id: Optional[str] = None,
        extract_variables: bool = True,
    ) -> ExecutionResult:
        return self._runner.run_test(test, self._deps, account_id=account_id, extract_variables=extract_variables)

    def run_collection(
        self,
        collection: Collection,
        listener: Optional[RunListener] = None,
        stop_on_failure: bool = False,
    ) -> CollectionRunSummary:
        return self._collections.run(collection, self._deps, listener=listener, stop_on_failure=stop_on_failure)

    def request(
        self,
        method: str,
        url: str,
        headers: Optional[Dict[str, str]] = None,
        body: Any = None,
        account_id: Optional[str] = None,
    ) -> ExecutionResult:
        """Ad hoc request: no extraction, no assertions."""
        prepared = self._builder.build_request(
            method=method,
            url=url,
            deps=self._deps,
            headers=headers,
            body=body,
            account_id=account_id,
        )
        return self._transport.execute_prepared(prepared, timeout_ms=self._deps.timeout_ms, logger=self._deps.logger)

    def resolve_endpoint(self, endpoint: str) -> str:
        return self._builder.resolve_endpoint(endpoint, self._deps)
