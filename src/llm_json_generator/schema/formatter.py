"""Prompt construction from a schema tree.

The model receives the schema twice: the delimiter-wrapped template in the
system message (shape and nesting depth) and a flat ``path=example`` listing in
the user message (concrete expected values).
"""

import json
from typing import Any

from llm_json_generator.schema.coercion import canonical_kind, parse_enum_options
from llm_json_generator.schema.nodes import (
    ArraySchema,
    LeafSchema,
    ObjectSchema,
    SchemaNode,
    parse_schema,
)

DEFAULT_EXAMPLES: dict[str, Any] = {
    "string": "example_text",
    "integer": 42,
    "float": 42.5,
    "boolean": True,
    "array": ["item1", "item2"],
}

STRUCTURED_PROMPT_SUFFIX = (
    "Return a raw JSON object (no markdown, no code blocks) with exactly these "
    "fields and values as a template: "
)


def wrap_template(schema: Any, delimiter: str, level: int = 1) -> Any:
    """Render the schema with depth-encoding key delimiters.

    Object keys at nesting ``level`` are wrapped in ``delimiter * level`` on both
    sides; array elements are rendered one level deeper without a key; leaves
    become ``<annotation>``.

    Args:
        schema: Raw schema or parsed :data:`SchemaNode`
        delimiter: Delimiter string repeated per nesting level
        level: Nesting level of ``schema`` (1 at the root)

    Returns:
        A JSON-serializable structure mirroring the schema.

    Example:
        ```python
        wrap_template({"user": {"name": "type:string"}}, "#")
        # {"#user#": {"##name##": "<type:string>"}}
        ```
    """
    node = parse_schema(schema)
    if isinstance(node, ObjectSchema):
        marker = delimiter * level
        return {
            f"{marker}{key}{marker}": wrap_template(value, delimiter, level + 1)
            for key, value in node.fields
        }
    if isinstance(node, ArraySchema):
        if node.element is None:
            return []
        return [wrap_template(node.element, delimiter, level + 1)]
    return f"<{node.annotation}>"


def format_value(value: Any) -> str:
    """Format an example value for display in the prompt."""
    if isinstance(value, str):
        return f'"{value}"'
    if isinstance(value, list):
        return f"[{', '.join(format_value(item) for item in value)}]"
    if isinstance(value, bool) or value is None:
        return json.dumps(value)
    return str(value)


def _example_for_leaf(leaf: LeafSchema) -> Any:
    kind = leaf.kind
    if kind is None:
        return DEFAULT_EXAMPLES["string"]
    options = parse_enum_options(kind)
    if options is not None:
        return options[0]
    canonical = canonical_kind(kind)
    return DEFAULT_EXAMPLES[canonical or "string"]


def _field_examples(node: SchemaNode, path: str) -> list[str]:
    if isinstance(node, ObjectSchema):
        entries: list[str] = []
        for key, value in node.fields:
            entries.extend(_field_examples(value, f"{path}.{key}" if path else key))
        return entries
    if isinstance(node, ArraySchema):
        return [f"{path}={format_value(DEFAULT_EXAMPLES['array'])}"]
    return [f"{path}={format_value(_example_for_leaf(node))}"]


def format_field_examples(schema: Any) -> str:
    """Flatten the schema into a ``dotted.path=example`` listing.

    Args:
        schema: Raw schema or parsed :data:`SchemaNode`

    Returns:
        All leaf entries joined with ``", "``.
    """
    return ", ".join(_field_examples(parse_schema(schema), ""))


def build_structured_prompt(prompt: str, schema: Any) -> str:
    """Append the field-example listing and formatting rules to a user prompt."""
    return f"{prompt}\n{STRUCTURED_PROMPT_SUFFIX}{format_field_examples(schema)}"


def build_system_prompt(schema: Any, delimiter: str) -> str:
    """Build the default system message for schema-driven generation.

    Args:
        schema: The caller's raw schema
        delimiter: Delimiter used for the nesting guide

    Returns:
        System message text.
    """
    schema_json = json.dumps(schema, separators=(",", ":"), default=str)
    template_json = json.dumps(
        wrap_template(schema, delimiter), separators=(",", ":"), default=str
    )
    return (
        "You are a JSON generator. Generate a raw JSON object (no markdown, no "
        f"code blocks) that conforms to this schema: {schema_json}\n"
        f"Nesting guide (keys wrapped in '{delimiter}' repeated once per nesting "
        "level; the delimiters mark depth only and are not part of the key "
        f"names): {template_json}\n"
        "Important:\n"
        "- Return ONLY the raw JSON object, no markdown formatting or code blocks\n"
        "- Ensure all fields are present and match their types exactly\n"
        "- Do not include any explanation or additional text\n"
        "- Use the field names and types exactly as specified"
    )
