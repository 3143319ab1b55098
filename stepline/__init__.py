"""stepline: sequential step pipelines over a shared execution context.

This package provides:
- Step / Pipeline / PipelineBuilder for composing ordered steps
- ExecutionContext as the shared blackboard between steps
- PipelineRunner to execute a pipeline and record per-step telemetry
- LLM generation contracts and an OpenRouter transport adapter
"""

from .pipeline import (
    ContextKey,
    ExecutionContext,
    Pipeline,
    PipelineBuilder,
    PipelineRunner,
    Step,
    StepExecution,
    StepResult,
    run_pipeline,
)

__all__ = [
    "ContextKey",
    "ExecutionContext",
    "Pipeline",
    "PipelineBuilder",
    "PipelineRunner",
    "Step",
    "StepExecution",
    "StepResult",
    "run_pipeline",
]
