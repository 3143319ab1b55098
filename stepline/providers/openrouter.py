"""OpenRouter provider implementation."""

import asyncio
import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

import httpx

from .. import config
from ..llm.base import BaseLLMProvider, LLMRequest, LLMResponse
from ..pipeline.base import raise_if_cancelled
from ..pipeline.errors import ProviderError

logger = logging.getLogger(__name__)


@dataclass
class ProviderConfig:
    """Configuration for the OpenRouter provider."""

    api_key: Optional[str] = None
    base_url: str = "https://openrouter.ai/api/v1"
    timeout: float = 120.0
    app_name: Optional[str] = None
    referer: Optional[str] = None

    @classmethod
    def from_env(cls) -> "ProviderConfig":
        """Build configuration from stepline.config (environment / .env)."""
        return cls(
            api_key=config.OPENROUTER_API_KEY,
            base_url=config.OPENROUTER_BASE_URL,
            timeout=config.OPENROUTER_TIMEOUT,
            app_name=config.OPENROUTER_APP_NAME,
            referer=config.OPENROUTER_REFERER,
        )


class OpenRouterProvider(BaseLLMProvider):
    """
    OpenRouter API provider for multi-model access.

    A transport adapter only: it maps LLMRequest to a chat completion call
    and the first choice back to LLMResponse. It does not retry.
    """

    def __init__(
        self,
        config: Optional[ProviderConfig] = None,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.config = config or ProviderConfig.from_env()
        self.api_url = self.config.base_url.rstrip("/") + "/chat/completions"
        self._client = client

    def build_headers(self) -> Dict[str, str]:
        headers = {
            "Authorization": f"Bearer {self.config.api_key}",
            "Content-Type": "application/json",
        }
        if self.config.app_name:
            headers["X-Title"] = self.config.app_name
        if self.config.referer:
            headers["HTTP-Referer"] = self.config.referer
        return headers

    def build_payload(self, request: LLMRequest) -> Dict[str, Any]:
        if not request.model:
            raise ValueError("OpenRouter requires a model identifier")

        payload: Dict[str, Any] = {
            "model": request.model,
            "messages": [{"role": "user", "content": request.prompt}],
        }

        if request.temperature is not None:
            payload["temperature"] = request.temperature

        if request.max_tokens is not None:
            payload["max_tokens"] = request.max_tokens

        payload.update(request.additional_parameters)
        return payload

    async def generate(
        self,
        request: LLMRequest,
        cancel_event: Optional[asyncio.Event] = None,
    ) -> LLMResponse:
        """
        Query a model via OpenRouter API.

        Args:
            request: Prompt and generation parameters (model is required)
            cancel_event: Checked before and after the HTTP call

        Returns:
            LLMResponse with content and token usage metadata

        Raises:
            ProviderError: On non-success status or a response without choices
        """
        payload = self.build_payload(request)
        raise_if_cancelled(cancel_event)

        logger.debug("OpenRouter request: model=%s", request.model)

        if self._client is not None:
            response = await self._post(self._client, payload)
        else:
            async with httpx.AsyncClient(timeout=self.config.timeout) as client:
                response = await self._post(client, payload)

        raise_if_cancelled(cancel_event)
        return self._parse_response(response)

    async def _post(
        self, client: httpx.AsyncClient, payload: Dict[str, Any]
    ) -> httpx.Response:
        response = await client.post(
            self.api_url, headers=self.build_headers(), json=payload
        )
        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise ProviderError(
                f"OpenRouter HTTP error: {e.response.status_code} - {e.response.text}",
                status_code=e.response.status_code,
            ) from e
        return response

    def _parse_response(self, response: httpx.Response) -> LLMResponse:
        try:
            data = response.json()
        except ValueError as e:
            raise ProviderError(
                f"OpenRouter returned a non-JSON body: {response.text[:200]}",
                status_code=response.status_code,
            ) from e
        choices = data.get("choices") or []
        if not choices:
            raise ProviderError("OpenRouter response contained no choices.")

        message = choices[0].get("message") or {}
        metadata: Dict[str, Any] = {}

        usage = data.get("usage")
        if usage:
            metadata["prompt_tokens"] = usage.get("prompt_tokens")
            metadata["completion_tokens"] = usage.get("completion_tokens")
            metadata["total_tokens"] = usage.get("total_tokens")

        if data.get("model"):
            metadata["model"] = data["model"]
        if data.get("id"):
            metadata["id"] = data["id"]

        return LLMResponse(content=message.get("content") or "", metadata=metadata)
