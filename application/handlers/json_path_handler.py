# application/handlers/json_path_handler.py
from application.handlers.base import AssertionHandler
from domain.assertions import AssertionResult, JsonPathAssertion
from domain.compare import compare_values, stringify
from domain.execution import ExecutionResult
from domain.path import UNDEFINED, resolve_path


class JsonPathAssertionHandler(AssertionHandler):
    def supports(self, rule) -> bool:
        return isinstance(rule, JsonPathAssertion)

    def evaluate(self, rule: JsonPathAssertion, result: ExecutionResult) -> AssertionResult:
        operator = rule.operator or "eq"
        actual = resolve_path(result.response_body, rule.path)
        passed = compare_values(actual, operator, rule.value)

        if passed:
            message = "JSON path assertion passed"
        else:
            shown = "undefined" if actual is UNDEFINED else stringify(actual)
            message = f"Expected {rule.path} {operator} {stringify(rule.value)}, got {shown}"

        return AssertionResult(rule=rule, passed=passed, actual=actual, message=message)
