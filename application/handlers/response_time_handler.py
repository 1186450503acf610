# application/handlers/response_time_handler.py
from application.handlers.base import AssertionHandler
from domain.assertions import AssertionResult, ResponseTimeAssertion
from domain.execution import ExecutionResult


class ResponseTimeAssertionHandler(AssertionHandler):
    def supports(self, rule) -> bool:
        return isinstance(rule, ResponseTimeAssertion)

    def evaluate(self, rule: ResponseTimeAssertion, result: ExecutionResult) -> AssertionResult:
        passed = result.duration <= rule.max_ms
        return AssertionResult(
            rule=rule,
            passed=passed,
            actual=result.duration,
            message=(
                "Response time within limit"
                if passed
                else f"Response time {result.duration}ms exceeded {rule.max_ms}ms"
            ),
        )
