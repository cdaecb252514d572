"""Unit tests for model output sanitizing."""

import pytest

from llm_json_generator.generator.sanitizer import sanitize


@pytest.mark.unit
class TestSanitize:
    """Test cases for sanitize."""

    def test_removes_json_code_fence(self) -> None:
        """Test a fenced json block is unwrapped."""
        assert sanitize('```json\n{"a":1}\n```') == '{"a":1}'

    def test_removes_plain_code_fence(self) -> None:
        """Test a fence without a language tag is unwrapped."""
        assert sanitize('```\n{"a": [1, 2]}\n```\n') == '{"a": [1, 2]}'

    def test_removes_trailing_backticks(self) -> None:
        """Test stray trailing backticks are dropped."""
        assert sanitize('{"a":1}``') == '{"a":1}'

    def test_trims_whitespace(self) -> None:
        """Test surrounding whitespace is removed."""
        assert sanitize('  \n{"a":1}\t ') == '{"a":1}'

    @pytest.mark.parametrize("text", ['{"a":1}', "[1, 2]", '{"code": "x = 1"}', ""])
    def test_clean_text_is_unchanged(self, text: str) -> None:
        """Test sanitizing clean text is a no-op."""
        assert sanitize(text) == text

    def test_idempotent(self) -> None:
        """Test applying sanitize twice equals applying it once."""
        once = sanitize('```json\n{"a":1}\n```')
        assert sanitize(once) == once
