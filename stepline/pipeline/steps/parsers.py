"""Output parsers for LLM steps.

A parser turns the raw response text into the value stored in the
context. Parsers raise OutputParseError when the text cannot be parsed.
"""

import json
from json import JSONDecodeError
from typing import Any, Callable, Type, TypeVar

from pydantic import BaseModel, ValidationError

from ..errors import OutputParseError

M = TypeVar("M", bound=BaseModel)

_FENCES = ["```json", "```", "~~~json", "~~~"]


def strip_code_fences(content: str) -> str:
    """Strip common markdown code fences models wrap structured output in."""
    stripped = content.strip()
    for fence in _FENCES:
        if stripped.lower().startswith(fence):
            stripped = stripped[len(fence):].strip()
        if stripped.endswith(fence):
            stripped = stripped[: -len(fence)].strip()
    return stripped


def text_parser(raw: str) -> str:
    return raw.strip()


def json_parser(raw: str) -> Any:
    """Parse a JSON document, tolerating surrounding code fences."""
    try:
        return json.loads(strip_code_fences(raw))
    except JSONDecodeError as e:
        raise OutputParseError(f"Invalid JSON output: {e}", raw=raw) from e


def model_parser(model: Type[M]) -> Callable[[str], M]:
    """Build a parser validating JSON output into a pydantic model."""

    def parse(raw: str) -> M:
        try:
            return model.model_validate_json(strip_code_fences(raw))
        except ValidationError as e:
            raise OutputParseError(
                f"Output does not match {model.__name__}: {e.error_count()} error(s)",
                raw=raw,
            ) from e

    return parse
