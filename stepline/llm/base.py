"""Base abstract class for LLM providers."""

import asyncio
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field


class LLMRequest(BaseModel):
    """Request sent to an LLM provider."""

    prompt: str = Field(description="Fully rendered prompt text")
    model: Optional[str] = Field(default=None, description="Model identifier (e.g., 'openai/gpt-4o')")
    temperature: Optional[float] = Field(default=None, description="Sampling temperature (0-2)")
    max_tokens: Optional[int] = Field(default=None, description="Maximum tokens to generate")
    additional_parameters: Dict[str, Any] = Field(
        default_factory=dict, description="Provider-specific parameters"
    )


class LLMResponse(BaseModel):
    """Raw, unparsed response from an LLM provider."""

    content: str
    metadata: Dict[str, Any] = Field(default_factory=dict)


class BaseLLMProvider(ABC):
    """
    Abstract base class for LLM providers.

    Providers are dumb transport adapters: no retries, no parsing and no
    schema validation. Interpreting the output belongs to the LLM step.
    """

    @abstractmethod
    async def generate(
        self,
        request: LLMRequest,
        cancel_event: Optional[asyncio.Event] = None,
    ) -> LLMResponse:
        """
        Execute a prompt against a language model.

        Args:
            request: Prompt and generation parameters
            cancel_event: Optional cancellation signal

        Returns:
            LLMResponse with the raw content and metadata
        """
        pass
