"""Unit tests for leaf value coercion."""

from typing import Any

import pytest

from llm_json_generator.exceptions import ValidationError
from llm_json_generator.schema.coercion import (
    canonical_kind,
    coerce,
    parse_enum_options,
)


@pytest.mark.unit
class TestPassThrough:
    """Annotations coerce nothing unless they carry a known ``type:`` kind."""

    def test_untyped_annotation_returns_value_unchanged(self) -> None:
        """Test that annotations without the type: prefix are ignored."""
        value = {"nested": [1, 2]}
        assert coerce(value, "string", "name") is value

    def test_unknown_kind_returns_value_unchanged(self) -> None:
        """Test that unrecognized kinds are an escape hatch, not an error."""
        assert coerce("anything", "type:uuid", "id") == "anything"
        assert coerce(12, "type:date", "when") == 12


@pytest.mark.unit
class TestStringCoercion:
    """Test string and str kinds."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("John", "John"),
            (30, "30"),
            (4.5, "4.5"),
            (True, "true"),
            (None, "null"),
            ([1, 2], "[1,2]"),
        ],
    )
    def test_values_become_strings(self, value: Any, expected: str) -> None:
        """Test that any value is forced to its string representation."""
        assert coerce(value, "type:string", "name") == expected

    def test_str_alias(self) -> None:
        """Test the str alias behaves like string."""
        assert coerce(7, "type:str", "code") == "7"


@pytest.mark.unit
class TestNumberCoercion:
    """Test number and float kinds."""

    def test_numeric_string_parses(self) -> None:
        """Test that a numeric string becomes a float."""
        assert coerce("42.5", "type:float", "salary") == 42.5

    def test_native_integer_becomes_float(self) -> None:
        """Test that native integers are accepted."""
        result = coerce(120000, "type:number", "salary")
        assert result == 120000.0
        assert isinstance(result, float)

    def test_leading_numeric_prefix_parses(self) -> None:
        """Test that trailing text after the number is ignored."""
        assert coerce("72.5kg", "type:float", "weight") == 72.5

    @pytest.mark.parametrize("value", ["abc", "", True, None, [1.0]])
    def test_invalid_values_fail(self, value: Any) -> None:
        """Test that unparseable values raise ValidationError naming the field."""
        with pytest.raises(ValidationError, match='Field "salary" must be a number'):
            coerce(value, "type:float", "salary")

    def test_non_finite_value_fails(self) -> None:
        """Test that NaN is rejected."""
        with pytest.raises(ValidationError):
            coerce(float("nan"), "type:number", "ratio")

    def test_integer_too_large_for_float_fails(self) -> None:
        """Test an integer beyond float range raises ValidationError."""
        with pytest.raises(ValidationError, match='Field "x" must be a number'):
            coerce(10**400, "type:float", "x")


@pytest.mark.unit
class TestIntegerCoercion:
    """Test integer and int kinds."""

    def test_numeric_string_parses(self) -> None:
        """Test that "30" becomes 30."""
        result = coerce("30", "type:integer", "age")
        assert result == 30
        assert isinstance(result, int)

    @pytest.mark.parametrize(
        ("value", "expected"),
        [("30.7", 30), (30.7, 30), (-2.9, -2), ("-2.9", -2), (" 12 ", 12), (5, 5)],
    )
    def test_truncates_instead_of_rounding(self, value: Any, expected: int) -> None:
        """Test that fractional input is truncated toward zero."""
        assert coerce(value, "type:int", "count") == expected

    @pytest.mark.parametrize("value", ["abc", "", False, None, {"n": 1}])
    def test_invalid_values_fail(self, value: Any) -> None:
        """Test that "abc" and other invalid inputs raise."""
        with pytest.raises(ValidationError) as exc_info:
            coerce(value, "type:integer", "age")

        assert 'Field "age" must be an integer' in str(exc_info.value)
        assert exc_info.value.field == "age"
        assert exc_info.value.expected == "integer"


@pytest.mark.unit
class TestBooleanCoercion:
    """Test boolean and bool kinds."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [(True, True), (False, False), ("true", True), ("FALSE", False), ("True", True)],
    )
    def test_accepted_values(self, value: Any, expected: bool) -> None:
        """Test native booleans and case-insensitive string literals."""
        assert coerce(value, "type:boolean", "isEmployed") is expected

    @pytest.mark.parametrize("value", ["yes", 1, 0, None, "t"])
    def test_invalid_values_fail(self, value: Any) -> None:
        """Test that other values raise."""
        with pytest.raises(ValidationError, match='Field "active" must be a boolean'):
            coerce(value, "type:bool", "active")


@pytest.mark.unit
class TestArrayCoercion:
    """Test array and list kinds."""

    def test_native_list_is_returned(self) -> None:
        """Test that a native list passes through."""
        skills = ["JavaScript", "Python"]
        assert coerce(skills, "type:array", "skills") is skills

    def test_json_text_is_parsed(self) -> None:
        """Test that "[1,2]" becomes [1, 2]."""
        assert coerce("[1,2]", "type:list", "numbers") == [1, 2]

    @pytest.mark.parametrize("value", ['{"a": 1}', "not json", 5, None])
    def test_non_arrays_fail(self, value: Any) -> None:
        """Test both invalid JSON text and non-array JSON fail the same way."""
        with pytest.raises(ValidationError, match='Field "skills" must be an array'):
            coerce(value, "type:array", "skills")


@pytest.mark.unit
class TestEnumCoercion:
    """Test enum kinds."""

    @pytest.mark.parametrize("value", ["red", "green", "blue"])
    def test_declared_options_accepted(self, value: str) -> None:
        """Test that every declared option is accepted as-is."""
        assert coerce(value, "type:enum[red,green,blue]", "color") == value

    def test_undeclared_option_lists_allowed_set(self) -> None:
        """Test that purple is rejected with all options in the message."""
        with pytest.raises(ValidationError) as exc_info:
            coerce("purple", "type:enum[red,green,blue]", "color")

        assert str(exc_info.value) == 'Field "color" must be one of: red, green, blue'

    def test_options_are_trimmed(self) -> None:
        """Test that whitespace around options is ignored."""
        assert coerce("mage", "type:enum[warrior, mage , rogue]", "role") == "mage"

    def test_comparison_is_case_sensitive(self) -> None:
        """Test that case differences are rejected."""
        with pytest.raises(ValidationError):
            coerce("Red", "type:enum[red,green]", "color")


@pytest.mark.unit
class TestKindHelpers:
    """Test kind parsing helpers."""

    def test_canonical_kind_aliases(self) -> None:
        """Test every alias maps to its canonical kind."""
        assert canonical_kind("str") == "string"
        assert canonical_kind("Number") == "float"
        assert canonical_kind("int") == "integer"
        assert canonical_kind("bool") == "boolean"
        assert canonical_kind("list") == "array"
        assert canonical_kind("enum[a,b]") is None

    def test_parse_enum_options(self) -> None:
        """Test enum option extraction."""
        assert parse_enum_options("enum[a, b,c]") == ["a", "b", "c"]
        assert parse_enum_options("string") is None
