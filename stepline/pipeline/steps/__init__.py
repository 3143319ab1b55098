"""Built-in pipeline steps."""

from .conditional import ConditionalStep
from .external_call import ExternalCallStep
from .llm import LLMStep, render_prompt
from .parsers import json_parser, model_parser, strip_code_fences, text_parser
from .transform import TransformStep

__all__ = [
    "ConditionalStep",
    "ExternalCallStep",
    "LLMStep",
    "TransformStep",
    "json_parser",
    "model_parser",
    "render_prompt",
    "strip_code_fences",
    "text_parser",
]
