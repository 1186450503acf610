from __future__ import annotations

from abc import ABC
from dataclasses import dataclass
from typing import Callable, Optional

from domain.execution import ExecutionResult, RunProgress


class RunListener(ABC):
    """Observer for collection runs. Both hooks default to no-ops."""

    def on_progress(self, progress: RunProgress) -> None:
        return None

    def on_test_complete(self, result: ExecutionResult, index: int) -> None:
        return None


class NullRunListener(RunListener):
    pass


@dataclass(frozen=True)
class CallbackRunListener(RunListener):
    progress_cb: Optional[Callable[[RunProgress], None]] = None
    complete_cb: Optional[Callable[[ExecutionResult, int], None]] = None

    def on_progress(self, progress: RunProgress) -> None:
        if self.progress_cb is not None:
            self.progress_cb(progress)

    def on_test_complete(self, result: ExecutionResult, index: int) -> None:
        if self.complete_cb is not None:
            self.complete_cb(result, index)
