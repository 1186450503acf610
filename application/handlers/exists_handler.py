# application/handlers/exists_handler.py
from application.handlers.base import AssertionHandler
from domain.assertions import AssertionResult, ExistsAssertion
from domain.execution import ExecutionResult
from domain.path import UNDEFINED, resolve_path


class ExistsAssertionHandler(AssertionHandler):
    def supports(self, rule) -> bool:
        return isinstance(rule, ExistsAssertion)

    def evaluate(self, rule: ExistsAssertion, result: ExecutionResult) -> AssertionResult:
        exists = resolve_path(result.response_body, rule.path) is not UNDEFINED
        return AssertionResult(
            rule=rule,
            passed=exists,
            actual=exists,
            message="Field exists" if exists else f'Field "{rule.path}" does not exist',
        )
