"""Exception types raised by the pipeline engine and built-in steps."""

from typing import Any, Optional


class PipelineError(Exception):
    """Base class for all stepline errors."""


class MissingKeyError(PipelineError, KeyError):
    """Raised when reading a key that is not present in the context."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(key)

    def __str__(self) -> str:
        return f"Key not found in context: {self.key!r}"


class TypeMismatchError(PipelineError, TypeError):
    """Raised when a context value is not of the requested type."""

    def __init__(self, key: str, expected: Any, actual: type):
        self.key = key
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Context value for {key!r} is {actual.__name__}, "
            f"expected {getattr(expected, '__name__', expected)}"
        )


class OutputParseError(PipelineError, ValueError):
    """Raised when an LLM step cannot parse the raw model output."""

    def __init__(self, message: str, raw: Optional[str] = None):
        self.raw = raw
        super().__init__(message)


class StepExecutionError(PipelineError):
    """Raised by step bodies and their collaborators when work fails."""


class ProviderError(StepExecutionError):
    """Transport-level failure reported by an LLM provider."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)


class PipelineCancelledError(StepExecutionError):
    """Raised when a step observes that its cancellation event is set."""
