# tests/application/executor/test_handler_registry.py
import pytest

from application.executor.handler_registry import HandlerNotFoundError, HandlerRegistry
from application.handlers.exists_handler import ExistsAssertionHandler
from application.handlers.status_handler import StatusAssertionHandler
from domain.assertions import (
    ContainsAssertion,
    ExistsAssertion,
    JsonPathAssertion,
    ResponseTimeAssertion,
    StatusAssertion,
    UnknownAssertion,
)


class TestHandlerRegistry:
    def test_get_handler_for_rule(self):
        registry = HandlerRegistry([StatusAssertionHandler(), ExistsAssertionHandler()])
        assert isinstance(registry.get_handler(ExistsAssertion(path="a")), ExistsAssertionHandler)

    def test_no_handler_raises(self):
        registry = HandlerRegistry([StatusAssertionHandler()])
        with pytest.raises(HandlerNotFoundError, match="ContainsAssertion"):
            registry.get_handler(ContainsAssertion(path="a", value="b"))

    def test_empty_registry(self):
        with pytest.raises(HandlerNotFoundError):
            HandlerRegistry([]).get_handler(StatusAssertion(expected=200))

    @pytest.mark.parametrize(
        "rule",
        [
            StatusAssertion(expected=200),
            JsonPathAssertion(path="a"),
            ContainsAssertion(path="a", value="b"),
            ResponseTimeAssertion(max_ms=10),
            ExistsAssertion(path="a"),
        ],
    )
    def test_default_covers_known_kinds(self, rule):
        assert HandlerRegistry.default().get_handler(rule).supports(rule)

    def test_default_rejects_unknown(self):
        with pytest.raises(HandlerNotFoundError):
            HandlerRegistry.default().get_handler(UnknownAssertion(type_name="schema"))
