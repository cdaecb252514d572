#!/usr/bin/env python3
"""Run example generations against OpenRouter.

Demonstrates basic type coercion, enum and nested-object validation, and
custom validators. Requires ``OPENROUTER_API_KEY`` in the environment or a
``.env`` file.

Usage:
    python scripts/run_examples.py

Or with uv:
    uv run python scripts/run_examples.py
"""

import asyncio
import json
import logging
import re
import sys
from typing import Any

from llm_json_generator import JsonGenerator, JsonGeneratorError, create_generator


async def basic_example(generator: JsonGenerator) -> Any:
    """Basic type validation."""
    return await generator.generate(
        prompt=(
            "Generate a profile for a software engineer named John Doe who is 30 "
            "years old, currently employed, making $120,000 per year, with skills "
            "in JavaScript, Python, and React."
        ),
        schema={
            "name": "type:string",
            "age": "type:integer",
            "isEmployed": "type:boolean",
            "salary": "type:float",
            "skills": "type:array",
        },
    )


async def enum_example(generator: JsonGenerator) -> Any:
    """Enum validation with a nested object."""
    return await generator.generate(
        prompt=(
            "Create a level 5 warrior character named Thorgar. He should be strong "
            "and tough but not very intelligent, with balanced wisdom and "
            "above-average charisma."
        ),
        schema={
            "name": "type:string",
            "role": "type:enum[warrior,mage,rogue,cleric]",
            "level": "type:integer",
            "stats": {
                "strength": "type:integer",
                "dexterity": "type:integer",
                "constitution": "type:integer",
                "intelligence": "type:integer",
                "wisdom": "type:integer",
                "charisma": "type:integer",
            },
        },
    )


async def custom_validation_example(generator: JsonGenerator) -> Any:
    """Custom validators run after schema validation."""
    validators = [
        lambda data: {
            "valid": re.fullmatch(r"[^\s@]+@[^\s@]+\.[^\s@]+", data["email"])
            is not None,
            "error": "Invalid email format",
        },
        lambda data: {
            "valid": len(data["password"]) >= 8,
            "error": "Password must be at least 8 characters",
        },
        lambda data: {"valid": data["age"] >= 18, "error": "User must be 18 or older"},
    ]

    return await generator.generate(
        prompt=(
            "Create a user account for John Doe who is 25 years old. "
            "Use a secure password."
        ),
        schema={
            "email": "type:string",
            "password": "type:string",
            "age": "type:integer",
        },
        custom_validators=validators,
    )


async def run_examples() -> None:
    generator = create_generator(app_name="JSON Generator Example", max_retries=3)

    for title, example in (
        ("Basic Type Validation Example", basic_example),
        ("Enum Validation Example", enum_example),
        ("Custom Validation Example", custom_validation_example),
    ):
        result = await example(generator)
        print(f"{title}:", json.dumps(result, indent=2))
        print("\n---\n")


def main() -> int:
    """Run all examples, returning a process exit code."""
    logging.basicConfig(level=logging.INFO)
    print("Running examples with schema validation...\n")
    try:
        asyncio.run(run_examples())
    except JsonGeneratorError as e:
        print(f"Error: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
