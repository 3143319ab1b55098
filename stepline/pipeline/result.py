"""Flow-control signal and per-step execution records."""

from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import Enum
from typing import Any, Dict, Optional


class StepResult(str, Enum):
    """Signal returned by every step: keep going or halt the pipeline."""

    CONTINUE = "continue"
    STOP = "stop"

    @property
    def should_continue(self) -> bool:
        return self is StepResult.CONTINUE


@dataclass(frozen=True)
class StepExecution:
    """
    Immutable record of a single step run.

    success is True when the step returned without raising. It does not
    imply the step did any work: a step may skip itself and still succeed.
    continued mirrors the returned StepResult and is always False on failure.
    """

    step_name: str
    started_at: datetime
    finished_at: datetime
    success: bool
    continued: bool
    error: Optional[BaseException] = None

    def __post_init__(self) -> None:
        if not self.success and self.continued:
            raise ValueError("A failed step execution cannot be marked as continued")
        if self.finished_at < self.started_at:
            raise ValueError("finished_at must not be earlier than started_at")

    @property
    def duration(self) -> timedelta:
        return self.finished_at - self.started_at

    def to_dict(self) -> Dict[str, Any]:
        """Convert record to dict (for serialization)."""
        return {
            "step_name": self.step_name,
            "started_at": self.started_at.isoformat(),
            "finished_at": self.finished_at.isoformat(),
            "duration_ms": self.duration.total_seconds() * 1000,
            "success": self.success,
            "continued": self.continued,
            "error": (
                f"{type(self.error).__name__}: {self.error}"
                if self.error is not None
                else None
            ),
        }
