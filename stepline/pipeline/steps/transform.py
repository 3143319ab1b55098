import asyncio
from typing import Any, Awaitable, Callable, Optional, Union

from ..base import resolve
from ..context import ExecutionContext
from .conditional import ConditionalStep, Predicate

Handler = Callable[[ExecutionContext], Union[Any, Awaitable[Any]]]


class TransformStep(ConditionalStep):
    """In-memory transformation over data stored in the context."""

    def __init__(
        self,
        name: str,
        handler: Handler,
        execution_condition: Optional[Predicate] = None,
        continuation_condition: Optional[Predicate] = None,
    ):
        super().__init__(name, execution_condition, continuation_condition)
        self.handler = handler

    async def run_body(
        self,
        context: ExecutionContext,
        cancel_event: Optional[asyncio.Event],
    ) -> None:
        await resolve(self.handler(context))
