"""Shared execution/continuation guard for the built-in steps."""

import asyncio
from abc import abstractmethod
from typing import Awaitable, Callable, Optional, Union

from ..base import Step, raise_if_cancelled, resolve
from ..context import ExecutionContext
from ..result import StepResult

Predicate = Callable[[ExecutionContext], Union[bool, Awaitable[bool]]]


def _always(_: ExecutionContext) -> bool:
    return True


class ConditionalStep(Step):
    """
    Step whose body is gated by an execution condition and whose result is
    decided by a continuation condition.

    The continuation condition is evaluated after the body (or after the
    skip) and is the only thing that decides the returned StepResult.
    Whatever the body returns is ignored.
    """

    def __init__(
        self,
        name: str,
        execution_condition: Optional[Predicate] = None,
        continuation_condition: Optional[Predicate] = None,
    ):
        self._name = name
        self.execution_condition = execution_condition or _always
        self.continuation_condition = continuation_condition or _always

    @property
    def name(self) -> str:
        return self._name

    async def execute(
        self,
        context: ExecutionContext,
        cancel_event: Optional[asyncio.Event] = None,
    ) -> StepResult:
        raise_if_cancelled(cancel_event)

        if await resolve(self.execution_condition(context)):
            await self.run_body(context, cancel_event)

        if await resolve(self.continuation_condition(context)):
            return StepResult.CONTINUE
        return StepResult.STOP

    @abstractmethod
    async def run_body(
        self,
        context: ExecutionContext,
        cancel_event: Optional[asyncio.Event],
    ) -> None:
        """Do the step's work. Only called when the execution condition holds."""
        pass
