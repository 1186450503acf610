# application/handlers/contains_handler.py
from application.handlers.base import AssertionHandler
from domain.assertions import AssertionResult, ContainsAssertion
from domain.execution import ExecutionResult
from domain.path import resolve_path


class ContainsAssertionHandler(AssertionHandler):
    def supports(self, rule) -> bool:
        return isinstance(rule, ContainsAssertion)

    def evaluate(self, rule: ContainsAssertion, result: ExecutionResult) -> AssertionResult:
        actual = resolve_path(result.response_body, rule.path)
        passed = isinstance(actual, str) and str(rule.value) in actual
        return AssertionResult(
            rule=rule,
            passed=passed,
            actual=actual,
            message="Contains assertion passed" if passed else f'Expected "{rule.path}" to contain "{rule.value}"',
        )
