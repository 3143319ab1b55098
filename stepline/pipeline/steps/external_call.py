import asyncio
from typing import Any, Awaitable, Callable, Generic, Optional, TypeVar, Union

from ..base import raise_if_cancelled, resolve
from ..context import ExecutionContext
from .conditional import ConditionalStep, Predicate

T = TypeVar("T")


class ExternalCallStep(ConditionalStep, Generic[T]):
    """
    Calls an external system and stores the result in the context.

    Args:
        name: Step name used in execution records
        call: Function (usually async) producing a result from the context
        save_result: Function writing (context, result) back into the context
        execution_condition: Gate for whether the call happens at all
        continuation_condition: Decides CONTINUE/STOP after the step
    """

    def __init__(
        self,
        name: str,
        call: Callable[[ExecutionContext], Union[T, Awaitable[T]]],
        save_result: Callable[[ExecutionContext, T], Any],
        execution_condition: Optional[Predicate] = None,
        continuation_condition: Optional[Predicate] = None,
    ):
        super().__init__(name, execution_condition, continuation_condition)
        self.call = call
        self.save_result = save_result

    async def run_body(
        self,
        context: ExecutionContext,
        cancel_event: Optional[asyncio.Event],
    ) -> None:
        result = await resolve(self.call(context))
        raise_if_cancelled(cancel_event)
        await resolve(self.save_result(context, result))
