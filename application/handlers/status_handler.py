# application/handlers/status_handler.py
from application.handlers.base import AssertionHandler
from domain.assertions import AssertionResult, StatusAssertion
from domain.compare import strict_equal
from domain.execution import ExecutionResult


class StatusAssertionHandler(AssertionHandler):
    def supports(self, rule) -> bool:
        return isinstance(rule, StatusAssertion)

    def evaluate(self, rule: StatusAssertion, result: ExecutionResult) -> AssertionResult:
        passed = strict_equal(result.status, rule.expected)
        return AssertionResult(
            rule=rule,
            passed=passed,
            actual=result.status,
            message="Status code matched" if passed else f"Expected {rule.expected}, got {result.status}",
        )
