# application/executor/handler_registry.py
from __future__ import annotations

from typing import List

from application.handlers.base import AssertionHandler
from application.handlers.contains_handler import ContainsAssertionHandler
from application.handlers.exists_handler import ExistsAssertionHandler
from application.handlers.json_path_handler import JsonPathAssertionHandler
from application.handlers.response_time_handler import ResponseTimeAssertionHandler
from application.handlers.status_handler import StatusAssertionHandler
from domain.assertions import AssertionRule


class HandlerNotFoundError(LookupError):
    pass


class HandlerRegistry:
    def __init__(self, handlers: List[AssertionHandler]):
        self._handlers = handlers

    def get_handler(self, rule: AssertionRule) -> AssertionHandler:
        for h in self._handlers:
            if h.supports(rule):
                return h
        raise HandlerNotFoundError(f"No handler found for assertion: {type(rule).__name__}")

    @classmethod
    def default(cls) -> "HandlerRegistry":
        return cls(
            [
                StatusAssertionHandler(),
                JsonPathAssertionHandler(),
                ContainsAssertionHandler(),
                ResponseTimeAssertionHandler(),
                ExistsAssertionHandler(),
            ]
        )
