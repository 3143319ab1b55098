"""Sequential pipeline runner.

The runner executes every step of a pipeline in order against one
ExecutionContext and records a StepExecution for each attempt:
- steps run at most once per run, never reordered, retried or overlapped
- a STOP result ends the run after recording the stopping step
- an exception is recorded on the failing step and re-raised unchanged

The runner contains no business logic and performs no recovery.
"""

import asyncio
import logging
from datetime import datetime, timezone
from typing import Optional

from .base import Pipeline
from .context import ExecutionContext
from .errors import StepExecutionError
from .result import StepExecution, StepResult

logger = logging.getLogger(__name__)


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _finished(started: datetime) -> datetime:
    # wall clock may step backwards; records must not end before they start
    return max(_now(), started)


class PipelineRunner:
    """Executes pipelines sequentially and records per-step telemetry."""

    async def run(
        self,
        pipeline: Pipeline,
        context: Optional[ExecutionContext] = None,
        cancel_event: Optional[asyncio.Event] = None,
    ) -> ExecutionContext:
        """
        Run a pipeline.

        Args:
            pipeline: Pipeline to execute
            context: Context to run against (a fresh one is created if omitted)
            cancel_event: Cancellation signal passed through to every step

        Returns:
            The context the pipeline ran against

        Raises:
            Whatever the failing step raised, after it has been recorded
        """
        if context is None:
            context = ExecutionContext()

        logger.debug("Running %r", pipeline)

        for step in pipeline.steps:
            name = step.name
            started = _now()
            logger.debug("Step %s started", name)

            try:
                result = await step.execute(context, cancel_event)
                if not isinstance(result, StepResult):
                    raise StepExecutionError(
                        f"Step {name} returned {result!r}, expected a StepResult"
                    )
            except (Exception, asyncio.CancelledError) as exc:
                context._record_execution(
                    StepExecution(
                        step_name=name,
                        started_at=started,
                        finished_at=_finished(started),
                        success=False,
                        continued=False,
                        error=exc,
                    )
                )
                logger.debug("Step %s failed: %s", name, type(exc).__name__)
                raise

            context._record_execution(
                StepExecution(
                    step_name=name,
                    started_at=started,
                    finished_at=_finished(started),
                    success=True,
                    continued=result.should_continue,
                )
            )
            logger.debug("Step %s finished (%s)", name, result.value)

            if not result.should_continue:
                logger.info("Pipeline stopped by step %s", name)
                break

        return context


async def run_pipeline(
    pipeline: Pipeline,
    context: Optional[ExecutionContext] = None,
    cancel_event: Optional[asyncio.Event] = None,
) -> ExecutionContext:
    """Convenience function to run a pipeline with a default runner."""
    return await PipelineRunner().run(pipeline, context, cancel_event)
