"""LLM step: render a prompt, call a provider, parse and store the output."""

import asyncio
import logging
from typing import Any, Callable, Generic, Mapping, Optional, TypeVar

from ... import config
from ...llm.base import BaseLLMProvider, LLMRequest
from ...llm.options import LLMStepOptions
from ..base import raise_if_cancelled, resolve
from ..context import ExecutionContext, KeyLike
from ..errors import OutputParseError
from .conditional import ConditionalStep, Predicate
from .parsers import text_parser

logger = logging.getLogger(__name__)

T = TypeVar("T")


def render_prompt(template: str, variables: Mapping[str, str]) -> str:
    """
    Substitute {key} placeholders with values from variables.

    Each key is replaced everywhere it occurs, in mapping order.
    Placeholders with no matching key are left as-is.
    """
    result = template
    for key, value in variables.items():
        result = result.replace("{" + key + "}", str(value))
    return result


class LLMStep(ConditionalStep, Generic[T]):
    """
    Invokes an LLM using a prompt template and stores the parsed output
    explicitly in the context.

    Flow when the execution condition holds:
    1. Map inputs from the context
    2. Render the prompt template
    3. Call the provider
    4. Parse the raw content (failures surface as OutputParseError)
    5. Store the parsed value under output_key
    """

    def __init__(
        self,
        name: str,
        prompt_template: str,
        input_mapper: Callable[[ExecutionContext], Mapping[str, str]],
        provider: BaseLLMProvider,
        output_key: KeyLike,
        output_parser: Callable[[str], T] = text_parser,
        options: Optional[LLMStepOptions] = None,
        execution_condition: Optional[Predicate] = None,
        continuation_condition: Optional[Predicate] = None,
    ):
        super().__init__(name, execution_condition, continuation_condition)
        self.prompt_template = prompt_template
        self.input_mapper = input_mapper
        self.provider = provider
        self.output_key = output_key
        self.output_parser = output_parser
        self.options = options or LLMStepOptions()

    def build_request(self, prompt: str) -> LLMRequest:
        return LLMRequest(
            prompt=prompt,
            model=self.options.model or config.DEFAULT_MODEL,
            temperature=self.options.temperature,
            max_tokens=self.options.max_tokens,
            additional_parameters=dict(self.options.additional_parameters),
        )

    def parse(self, raw: str) -> T:
        try:
            return self.output_parser(raw)
        except OutputParseError:
            raise
        except Exception as e:
            raise OutputParseError(
                f"Step {self.name} could not parse model output: {e}", raw=raw
            ) from e

    async def run_body(
        self,
        context: ExecutionContext,
        cancel_event: Optional[asyncio.Event],
    ) -> None:
        inputs = await resolve(self.input_mapper(context))
        prompt = render_prompt(self.prompt_template, inputs)

        request = self.build_request(prompt)
        logger.debug(
            "Step %s querying model %s (%d prompt chars)",
            self.name,
            request.model,
            len(prompt),
        )
        response = await self.provider.generate(request, cancel_event)
        raise_if_cancelled(cancel_event)

        parsed: Any = self.parse(response.content)
        context.set(self.output_key, parsed)
