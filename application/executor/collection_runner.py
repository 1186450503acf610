# application/executor/collection_runner.py
from __future__ import annotations

import time
from typing import Callable, List, Optional

from application.executor.test_runner import TestRunner
from application.ports.run_listener import NullRunListener, RunListener
from application.services.execution_deps import ExecutionDeps
from domain.execution import CollectionRunSummary, ExecutionResult, RunProgress
from domain.test_case import Collection

DEFAULT_INTER_TEST_DELAY_MS = 200


class CollectionRunner:
    """
    Runs a collection's tests strictly in order, one request in flight at a time.

    Runtime variables are cleared once per run, so values extracted by test N
    are visible to test N+1.
    """

    def __init__(
        self,
        test_runner: TestRunner,
        inter_test_delay_ms: int = DEFAULT_INTER_TEST_DELAY_MS,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self._runner = test_runner
        self._delay_ms = inter_test_delay_ms
        self._sleep = sleep

    def run(
        self,
        collection: Collection,
        deps: ExecutionDeps,
        listener: Optional[RunListener] = None,
        stop_on_failure: bool = False,
    ) -> CollectionRunSummary:
        listener = listener or NullRunListener()
        logger = deps.logger.bind(collection_id=collection.id)
        deps = deps.with_logger(logger)

        deps.variables.clear()

        tests = list(collection.tests)
        total = len(tests)
        results: List[ExecutionResult] = []
        logger.info("collection.start", name=collection.name, total=total, stop_on_failure=stop_on_failure)

        for i, test in enumerate(tests):
            listener.on_progress(RunProgress(current=i + 1, total=total, test=test))

            result = self._runner.run_test(test, deps)
            results.append(result)

            listener.on_test_complete(result, i)

            if stop_on_failure and not result.test_passed:
                logger.info("collection.stopped", test_id=test.id, executed=len(results), total=total)
                break

            if i < total - 1 and self._delay_ms > 0:
                self._sleep(self._delay_ms / 1000.0)

        summary = CollectionRunSummary(collection=collection.name, results=results)
        logger.info(
            "collection.end",
            total=summary.total,
            passed=summary.passed,
            failed=summary.failed,
            duration_ms=summary.duration,
        )
        return summary
