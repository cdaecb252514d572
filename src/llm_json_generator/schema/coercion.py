"""Leaf value coercion for ``type:<kind>`` annotations.

Model output is text, so common stringified forms are accepted (``"30"`` for an
integer, ``"true"`` for a boolean, ``"[1, 2]"`` for an array). Values that cannot
be converted raise :class:`~llm_json_generator.exceptions.ValidationError` so
the generator can retry with the error message as feedback.
"""

import json
import math
import re
from collections.abc import Callable
from typing import Any

from llm_json_generator.exceptions import ValidationError
from llm_json_generator.schema.nodes import TYPE_PREFIX

ENUM_PREFIX = "enum["

# Canonical kind for every accepted spelling
KIND_ALIASES: dict[str, str] = {
    "string": "string",
    "str": "string",
    "number": "float",
    "float": "float",
    "integer": "integer",
    "int": "integer",
    "boolean": "boolean",
    "bool": "boolean",
    "array": "array",
    "list": "array",
}

_FLOAT_PREFIX = re.compile(r"^\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_INT_PREFIX = re.compile(r"^\s*[+-]?\d+")


def canonical_kind(kind: str) -> str | None:
    """Map a kind spelling (e.g. ``"int"``) to its canonical name.

    Returns:
        One of ``string``, ``float``, ``integer``, ``boolean``, ``array``, or
        ``None`` for enums and unrecognized kinds.
    """
    return KIND_ALIASES.get(kind.lower())


def parse_enum_options(kind: str) -> list[str] | None:
    """Return the options of an ``enum[a,b,c]`` kind, or ``None`` if not an enum."""
    if not kind.startswith(ENUM_PREFIX):
        return None
    return [option.strip() for option in kind[len(ENUM_PREFIX) : -1].split(",")]


def _to_string(value: Any, field_name: str) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, bool) or value is None or isinstance(value, list | dict):
        return json.dumps(value, separators=(",", ":"))
    return str(value)


def _to_float(value: Any, field_name: str) -> float:
    if isinstance(value, int | float) and not isinstance(value, bool):
        try:
            number = float(value)
        except OverflowError as e:
            raise ValidationError(
                f'Field "{field_name}" must be a number',
                field=field_name,
                expected="number",
            ) from e
    elif isinstance(value, str) and (match := _FLOAT_PREFIX.match(value)):
        number = float(match.group(0))
    else:
        raise ValidationError(
            f'Field "{field_name}" must be a number', field=field_name, expected="number"
        )
    if not math.isfinite(number):
        raise ValidationError(
            f'Field "{field_name}" must be a number', field=field_name, expected="number"
        )
    return number


def _to_integer(value: Any, field_name: str) -> int:
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if isinstance(value, float) and math.isfinite(value):
        return int(value)
    if isinstance(value, str) and (match := _INT_PREFIX.match(value)):
        return int(match.group(0))
    raise ValidationError(
        f'Field "{field_name}" must be an integer', field=field_name, expected="integer"
    )


def _to_boolean(value: Any, field_name: str) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        if value.lower() == "true":
            return True
        if value.lower() == "false":
            return False
    raise ValidationError(
        f'Field "{field_name}" must be a boolean', field=field_name, expected="boolean"
    )


def _to_array(value: Any, field_name: str) -> list[Any]:
    if isinstance(value, list):
        return value
    if isinstance(value, str):
        try:
            parsed = json.loads(value)
        except json.JSONDecodeError:
            parsed = None
        if isinstance(parsed, list):
            return parsed
    raise ValidationError(
        f'Field "{field_name}" must be an array', field=field_name, expected="array"
    )


_COERCERS: dict[str, Callable[[Any, str], Any]] = {
    "string": _to_string,
    "float": _to_float,
    "integer": _to_integer,
    "boolean": _to_boolean,
    "array": _to_array,
}


def coerce(value: Any, annotation: str, field_name: str = "field") -> Any:
    """Convert ``value`` to the native type named by ``annotation``.

    Args:
        value: Raw value from the parsed model output
        annotation: Type annotation such as ``"type:integer"`` or
            ``"type:enum[red,green]"``
        field_name: Field name used in error messages

    Returns:
        The coerced value. Annotations without the ``type:`` prefix, and
        unrecognized kinds, return ``value`` unchanged.

    Raises:
        ValidationError: If the value cannot be coerced to the declared kind.
    """
    if not annotation.startswith(TYPE_PREFIX):
        return value

    kind = annotation.split(TYPE_PREFIX, 1)[1].strip()

    canonical = canonical_kind(kind)
    if canonical is not None:
        return _COERCERS[canonical](value, field_name)

    options = parse_enum_options(kind)
    if options is not None:
        if not isinstance(value, str) or value not in options:
            raise ValidationError(
                f'Field "{field_name}" must be one of: {", ".join(options)}',
                field=field_name,
                expected=kind,
            )
        return value

    return value
