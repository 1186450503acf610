# application/handlers/base.py
from __future__ import annotations

from abc import ABC, abstractmethod

from domain.assertions import AssertionResult, AssertionRule
from domain.execution import ExecutionResult


class AssertionHandler(ABC):
    @abstractmethod
    def supports(self, rule: AssertionRule) -> bool: ...

    @abstractmethod
    def evaluate(self, rule: AssertionRule, result: ExecutionResult) -> AssertionResult: ...
