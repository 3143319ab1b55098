"""Sequential step pipelines over a shared execution context.

This module provides a pipeline abstraction where:
- Each Step reads and writes an explicit, shared ExecutionContext
- Steps return a StepResult deciding whether the pipeline continues
- The PipelineRunner executes steps in order and records a StepExecution
  for every step it attempts
- Async execution is supported throughout
"""

from .base import Pipeline, PipelineBuilder, Step, raise_if_cancelled
from .context import ContextKey, ExecutionContext
from .errors import (
    MissingKeyError,
    OutputParseError,
    PipelineCancelledError,
    PipelineError,
    ProviderError,
    StepExecutionError,
    TypeMismatchError,
)
from .result import StepExecution, StepResult
from .runner import PipelineRunner, run_pipeline

__all__ = [
    "ContextKey",
    "ExecutionContext",
    "MissingKeyError",
    "OutputParseError",
    "Pipeline",
    "PipelineBuilder",
    "PipelineCancelledError",
    "PipelineError",
    "PipelineRunner",
    "ProviderError",
    "Step",
    "StepExecution",
    "StepExecutionError",
    "StepResult",
    "TypeMismatchError",
    "raise_if_cancelled",
    "run_pipeline",
]
