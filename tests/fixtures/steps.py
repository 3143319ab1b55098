"""Simple step implementations used across runner tests."""

import asyncio
from typing import Callable, Optional

from stepline.pipeline import ExecutionContext, Step, StepResult


class RecordingStep(Step):
    """Custom step returning a fixed result, optionally running an action."""

    def __init__(
        self,
        name: str,
        result: StepResult = StepResult.CONTINUE,
        action: Optional[Callable[[ExecutionContext], None]] = None,
    ):
        self._name = name
        self.result = result
        self.action = action
        self.calls = 0

    @property
    def name(self) -> str:
        return self._name

    async def execute(
        self,
        context: ExecutionContext,
        cancel_event: Optional[asyncio.Event] = None,
    ) -> StepResult:
        self.calls += 1
        if self.action is not None:
            self.action(context)
        return self.result


class FailingStep(Step):
    """Custom step that always raises the given error."""

    def __init__(self, name: str, error: BaseException):
        self._name = name
        self.error = error

    @property
    def name(self) -> str:
        return self._name

    async def execute(
        self,
        context: ExecutionContext,
        cancel_event: Optional[asyncio.Event] = None,
    ) -> StepResult:
        raise self.error
