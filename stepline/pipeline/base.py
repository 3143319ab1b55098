import asyncio
import inspect
from abc import ABC, abstractmethod
from typing import Any, Iterator, List, Optional, Tuple

from .context import ExecutionContext
from .errors import PipelineCancelledError
from .result import StepResult


def raise_if_cancelled(cancel_event: Optional[asyncio.Event]) -> None:
    """Raise PipelineCancelledError if the cancellation event has been set."""
    if cancel_event is not None and cancel_event.is_set():
        raise PipelineCancelledError("Pipeline run was cancelled")


async def resolve(value: Any) -> Any:
    """Await value if it is awaitable, so handlers may be sync or async."""
    if inspect.isawaitable(value):
        return await value
    return value


class Step(ABC):
    """Base class for all pipeline steps. Steps mutate the shared context and return a StepResult."""

    @property
    @abstractmethod
    def name(self) -> str:
        pass

    @abstractmethod
    async def execute(
        self,
        context: ExecutionContext,
        cancel_event: Optional[asyncio.Event] = None,
    ) -> StepResult:
        """
        Execute step logic against the shared context.

        The step itself decides whether to do any work and whether the
        pipeline should continue afterwards.
        """
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"


class Pipeline:
    """Ordered, immutable sequence of steps. with_step() returns a new pipeline."""

    def __init__(self, steps: Optional[List[Step]] = None):
        self._steps: Tuple[Step, ...] = tuple(steps or ())
        for step in self._steps:
            _check_step(step)

    @property
    def steps(self) -> Tuple[Step, ...]:
        return self._steps

    def with_step(self, step: Step) -> "Pipeline":
        """
        Return new pipeline with step appended.

        Creates a new pipeline, leaves the original unchanged.
        """
        _check_step(step)
        return Pipeline(list(self._steps) + [step])

    def __iter__(self) -> Iterator[Step]:
        return iter(self._steps)

    def __len__(self) -> int:
        return len(self._steps)

    def __repr__(self) -> str:
        step_names = [s.name for s in self._steps]
        return f"Pipeline(steps={step_names})"


class PipelineBuilder:
    """Fluent builder for a Pipeline. Nothing executes at build time."""

    def __init__(self):
        self._steps: List[Step] = []

    def with_step(self, step: Step) -> "PipelineBuilder":
        _check_step(step)
        self._steps.append(step)
        return self

    def build(self) -> Pipeline:
        """Snapshot the steps added so far; the builder can keep being used."""
        return Pipeline(self._steps)


def _check_step(step: Any) -> None:
    if not isinstance(step, Step):
        raise TypeError(f"Expected a Step, got {type(step).__name__}")
