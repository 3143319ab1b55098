"""Unit tests for LLM output parsers (stepline/pipeline/steps/parsers.py)."""

import pytest
from pydantic import BaseModel

from stepline.pipeline import OutputParseError
from stepline.pipeline.steps import json_parser, model_parser, strip_code_fences, text_parser


class Ticket(BaseModel):
    priority: int
    summary: str


class TestStripCodeFences:

    @pytest.mark.parametrize(
        "content",
        [
            '```json\n{"a": 1}\n```',
            '```\n{"a": 1}\n```',
            '~~~json\n{"a": 1}\n~~~',
            '  {"a": 1}  ',
        ],
    )
    def test_fences_removed(self, content):
        assert strip_code_fences(content) == '{"a": 1}'

    def test_uppercase_fence(self):
        assert strip_code_fences('```JSON\n[1, 2]\n```') == "[1, 2]"


class TestParsers:

    def test_text_parser(self):
        assert text_parser("\n Hi there \n") == "Hi there"

    def test_json_parser_valid(self):
        assert json_parser('{"items": [1, 2]}') == {"items": [1, 2]}

    def test_json_parser_invalid(self):
        with pytest.raises(OutputParseError) as exc_info:
            json_parser('{"items": [1, 2')

        assert exc_info.value.raw == '{"items": [1, 2'
        assert isinstance(exc_info.value, ValueError)

    def test_model_parser_valid(self):
        parse = model_parser(Ticket)

        ticket = parse('```json\n{"priority": 2, "summary": "Login broken"}\n```')

        assert ticket == Ticket(priority=2, summary="Login broken")

    def test_model_parser_schema_mismatch(self):
        parse = model_parser(Ticket)

        with pytest.raises(OutputParseError) as exc_info:
            parse('{"priority": "high"}')

        assert "Ticket" in str(exc_info.value)

    def test_model_parser_malformed_json(self):
        with pytest.raises(OutputParseError):
            model_parser(Ticket)("definitely not json")
