"""LLM generation contracts used by LLM steps."""

from .base import BaseLLMProvider, LLMRequest, LLMResponse
from .options import LLMStepOptions, StepOptionsManager

__all__ = [
    "BaseLLMProvider",
    "LLMRequest",
    "LLMResponse",
    "LLMStepOptions",
    "StepOptionsManager",
]
