"""
Unit tests for src/common/json_utils.py

Tests extraction of the single JSON object in generated text:
- Fenced and prose-wrapped objects
- Syntactic repair (single quotes, trailing commas)
- Rejection of text with no object, arrays and scalars
"""

import pytest
from src.common.json_utils import find_object_span, parse_llm_json, strip_code_fence


# ===== TESTS: Extraction =====

class TestExtraction:
    """Tests for locating the object inside generated text."""

    def test_parses_bare_object(self):
        assert parse_llm_json('{"demand_level": "High"}') == {"demand_level": "High"}

    def test_strips_json_fence(self):
        """Should strip ```json ... ``` wrapper."""
        result = parse_llm_json('```json\n{"growth_rate": 4.2}\n```')
        assert result == {"growth_rate": 4.2}

    def test_strips_plain_fence(self):
        result = parse_llm_json('```\n{"growth_rate": 4.2}\n```')
        assert result == {"growth_rate": 4.2}

    def test_extracts_object_from_prose(self):
        """Should find the object between leading and trailing commentary."""
        text = 'Here is the report:\n{"market_outlook": "Neutral"}\nLet me know if you need more.'
        assert parse_llm_json(text) == {"market_outlook": "Neutral"}

    def test_keeps_nested_structures(self):
        text = '{"questions": [{"question": "Q1", "options": ["a", "b"]}]}'
        result = parse_llm_json(text)
        assert result["questions"][0]["options"] == ["a", "b"]

    def test_extract_returns_outermost_span(self):
        assert find_object_span('x {"a": {"b": 1}} y') == '{"a": {"b": 1}}'

    def test_strip_markdown_leaves_unfenced_text(self):
        assert strip_code_fence('{"a": 1}') == '{"a": 1}'


# ===== TESTS: Repair =====

class TestRepair:
    """Tests for the json-repair fallback."""

    def test_repairs_single_quotes(self):
        assert parse_llm_json("{'top_skills': ['Python']}") == {"top_skills": ["Python"]}

    def test_repairs_trailing_comma(self):
        assert parse_llm_json('{"demand_level": "Low",}') == {"demand_level": "Low"}


# ===== TESTS: Rejection =====

class TestRejection:
    """Tests for text that does not contain an object."""

    @pytest.mark.parametrize("text", ["", "   ", "\n\t"])
    def test_rejects_empty_input(self, text):
        with pytest.raises(ValueError, match="Empty input"):
            parse_llm_json(text)

    def test_rejects_text_without_object(self):
        with pytest.raises(ValueError, match="No JSON object found"):
            parse_llm_json("I cannot help with that request.")

    def test_rejects_array_of_scalars(self):
        with pytest.raises(ValueError):
            parse_llm_json("[1, 2, 3]")
