"""Structural validation of parsed model output against a schema tree."""

import inspect
from collections.abc import Awaitable, Callable, Mapping, Sequence
from typing import Any

from pydantic import BaseModel, Field
from pydantic import ValidationError as PydanticValidationError

from llm_json_generator.exceptions import CustomValidationError, ValidationError
from llm_json_generator.schema.coercion import coerce
from llm_json_generator.schema.nodes import ArraySchema, ObjectSchema, parse_schema


class CustomValidationResult(BaseModel):
    """Outcome of a caller-supplied validator.

    Validators may return this model or a plain mapping with the same keys,
    e.g. ``{"valid": False, "error": "Invalid email format"}``.

    Attributes:
        valid: Whether the result passed the check
        error: Message reported when ``valid`` is false
    """

    valid: bool = Field(description="Whether the result passed the check")
    error: str | None = Field(
        default=None, description="Message reported when the check fails"
    )


CustomValidator = Callable[
    [Any],
    CustomValidationResult
    | Mapping[str, Any]
    | Awaitable[CustomValidationResult | Mapping[str, Any]],
]


def validate(data: Any, schema: Any, path: str = "") -> Any:
    """Recursively validate and coerce ``data`` against ``schema``.

    Only declared keys are copied into the result, so undeclared keys in
    ``data`` are dropped. Objects and arrays are always rebuilt.

    Args:
        data: Parsed JSON value
        schema: Raw schema or parsed schema node
        path: Dotted path of ``data`` used in error messages

    Returns:
        A new structure matching the schema shape with coerced leaves.

    Raises:
        ValidationError: On a missing field, a container mismatch or a leaf
            coercion failure.
    """
    node = parse_schema(schema)

    if isinstance(node, ArraySchema):
        if not isinstance(data, list):
            raise ValidationError("Expected an array", field=path or None, expected="array")
        if node.element is None:
            return list(data)
        return [
            validate(item, node.element, f"{path}[{index}]")
            for index, item in enumerate(data)
        ]

    if isinstance(node, ObjectSchema):
        if not isinstance(data, dict):
            raise ValidationError(
                "Expected an object", field=path or None, expected="object"
            )
        validated: dict[str, Any] = {}
        for key, value_schema in node.fields:
            field_path = f"{path}.{key}" if path else key
            if key not in data:
                raise ValidationError(
                    f"Missing required field: {field_path}", field=field_path
                )
            validated[key] = validate(data[key], value_schema, field_path)
        return validated

    return coerce(data, node.annotation, path or "field")


async def run_custom_validators(
    result: Any, validators: Sequence[CustomValidator]
) -> None:
    """Run validators in order, stopping at the first rejection.

    Args:
        result: The schema-validated result
        validators: Sync or async callables returning a
            :class:`CustomValidationResult` or equivalent mapping

    Raises:
        CustomValidationError: With the rejecting validator's error message.
    """
    for validator in validators:
        try:
            outcome = validator(result)
            if inspect.isawaitable(outcome):
                outcome = await outcome
        except Exception as e:
            raise CustomValidationError(f"Custom validator failed: {e}") from e

        try:
            checked = CustomValidationResult.model_validate(
                dict(outcome) if isinstance(outcome, Mapping) else outcome
            )
        except PydanticValidationError as e:
            raise CustomValidationError(
                f"Custom validator returned an invalid result: {outcome!r}"
            ) from e
        if not checked.valid:
            raise CustomValidationError(checked.error or "Custom validation failed")
