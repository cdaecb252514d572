"""Schema tree parsed from the caller's plain ``dict`` schema.

Callers describe the expected output with nested dictionaries, single-element
lists and ``type:<kind>`` annotation strings. The tree is parsed once into three
explicit node types so the formatter and validator never inspect raw values.
"""

import json
from dataclasses import dataclass
from typing import Any

TYPE_PREFIX = "type:"


@dataclass(frozen=True)
class LeafSchema:
    """A leaf annotation such as ``"type:integer"``.

    Args:
        annotation: The raw annotation text.
    """

    annotation: str

    @property
    def is_typed(self) -> bool:
        """Whether the annotation carries the ``type:`` prefix."""
        return self.annotation.startswith(TYPE_PREFIX)

    @property
    def kind(self) -> str | None:
        """The kind after ``type:`` (whitespace-trimmed), or ``None`` if untyped."""
        if not self.is_typed:
            return None
        return self.annotation.split(TYPE_PREFIX, 1)[1].strip()


@dataclass(frozen=True)
class ArraySchema:
    """An array whose items all share one element schema.

    Args:
        element: Schema of every item, or ``None`` when items are unconstrained.
    """

    element: "SchemaNode | None"


@dataclass(frozen=True)
class ObjectSchema:
    """An object with a fixed set of declared fields.

    Args:
        fields: Ordered ``(name, schema)`` pairs.
    """

    fields: tuple[tuple[str, "SchemaNode"], ...]

    @property
    def is_empty(self) -> bool:
        return not self.fields


SchemaNode = ObjectSchema | ArraySchema | LeafSchema


def parse_schema(raw: Any) -> SchemaNode:
    """Parse a plain schema value into a :data:`SchemaNode` tree.

    Args:
        raw: A ``dict`` (object), ``list`` (array of the first element's shape)
            or annotation string. Any other value becomes an untyped leaf.

    Returns:
        The root node of the parsed tree.

    Example:
        ```python
        node = parse_schema({"name": "type:string", "tags": ["type:string"]})
        assert isinstance(node, ObjectSchema)
        ```
    """
    if isinstance(raw, ObjectSchema | ArraySchema | LeafSchema):
        return raw
    if isinstance(raw, dict):
        return ObjectSchema(
            fields=tuple((str(key), parse_schema(value)) for key, value in raw.items())
        )
    if isinstance(raw, list | tuple):
        # Only the first element describes the items
        return ArraySchema(element=parse_schema(raw[0]) if raw else None)
    if isinstance(raw, str):
        return LeafSchema(annotation=raw)
    return LeafSchema(annotation=json.dumps(raw, default=str))
