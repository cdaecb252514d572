"""Schema handling for structured LLM responses.

This module provides:
- Parsing of plain ``dict`` schemas into an explicit node tree
- Coercion of leaf values to their ``type:<kind>`` annotation
- Prompt rendering (wrapped template and field-example listing)
- Structural validation and custom validator execution
"""

from .coercion import coerce
from .formatter import (
    build_structured_prompt,
    build_system_prompt,
    format_field_examples,
    format_value,
    wrap_template,
)
from .nodes import ArraySchema, LeafSchema, ObjectSchema, SchemaNode, parse_schema
from .validators import (
    CustomValidationResult,
    CustomValidator,
    run_custom_validators,
    validate,
)

__all__ = [
    # Nodes
    "ArraySchema",
    "LeafSchema",
    "ObjectSchema",
    "SchemaNode",
    "parse_schema",
    # Coercion
    "coerce",
    # Formatting
    "build_structured_prompt",
    "build_system_prompt",
    "format_field_examples",
    "format_value",
    "wrap_template",
    # Validation
    "CustomValidationResult",
    "CustomValidator",
    "run_custom_validators",
    "validate",
]
