# application/executor/assertion_engine.py
from __future__ import annotations

from typing import List, Optional, Sequence

from application.executor.handler_registry import HandlerNotFoundError, HandlerRegistry
from application.ports.logger import LoggerPort
from domain.assertions import AssertionResult, AssertionRule, StatusAssertion, UnknownAssertion
from domain.execution import ExecutionResult


class AssertionEngine:
    def __init__(self, registry: Optional[HandlerRegistry] = None):
        self._registry = registry or HandlerRegistry.default()

    def evaluate(
        self,
        rules: Sequence[AssertionRule],
        result: ExecutionResult,
        logger: Optional[LoggerPort] = None,
    ) -> List[AssertionResult]:
        """Every rule is evaluated and reported; a failing or broken rule never stops the rest."""
        out: List[AssertionResult] = []
        for rule in rules:
            assertion = self._evaluate_one(rule, result)
            if not assertion.passed and logger:
                logger.info("assertion.failed", type=_kind_of(rule), message=assertion.message)
            out.append(assertion)
        return out

    def judge(
        self,
        rules: Sequence[AssertionRule],
        result: ExecutionResult,
        expected_status: Optional[int] = None,
        logger: Optional[LoggerPort] = None,
    ) -> ExecutionResult:
        """
        Fill result.assertions and result.test_passed.

        A transport failure skips rule evaluation and always fails the test.
        """
        if result.error is not None:
            assertions: List[AssertionResult] = []
            passed = False
        else:
            assertions = self.evaluate(rules, result, logger)
            passed = all(a.passed for a in assertions)

        if expected_status is not None and result.status != expected_status:
            passed = False
            if not any(isinstance(r, StatusAssertion) and r.expected == expected_status for r in rules):
                assertions.append(
                    AssertionResult(
                        rule=StatusAssertion(expected=expected_status),
                        passed=False,
                        actual=result.status,
                        message=f"Expected status {expected_status}, got {result.status}",
                    )
                )

        result.assertions = assertions
        result.test_passed = passed
        return result

    def _evaluate_one(self, rule: AssertionRule, result: ExecutionResult) -> AssertionResult:
        try:
            handler = self._registry.get_handler(rule)
        except HandlerNotFoundError:
            return AssertionResult(
                rule=rule,
                passed=False,
                actual=None,
                message=f"Unknown assertion type: {_kind_of(rule)}",
            )

        try:
            return handler.evaluate(rule, result)
        except Exception as e:
            return AssertionResult(rule=rule, passed=False, actual=None, message=f"Assertion error: {e}")


def _kind_of(rule: AssertionRule) -> str:
    if isinstance(rule, UnknownAssertion):
        return rule.type_name
    return rule.kind or type(rule).__name__
