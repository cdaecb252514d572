"""Configuration utilities for environment-based setup."""

import os
from typing import Any

from dotenv import load_dotenv

from llm_json_generator.exceptions import ConfigurationError
from llm_json_generator.generator.config import (
    DEFAULT_DELIMITER,
    DEFAULT_MAX_RETRIES,
    DEFAULT_MODEL,
)
from llm_json_generator.generator.json_generator import JsonGenerator

API_KEY_ENV = "OPENROUTER_API_KEY"
MODEL_ENV = "OPENROUTER_MODEL"


def load_environment() -> None:
    """Load environment variables from .env file if it exists."""
    load_dotenv()


def create_generator(
    model: str | None = None,
    api_key: str | None = None,
    **kwargs: Any,
) -> JsonGenerator:
    """Create a JSON generator with environment-based configuration.

    Args:
        model: Model id (if None, loads from OPENROUTER_MODEL or uses the default)
        api_key: OpenRouter API key (if None, loads from OPENROUTER_API_KEY env var)
        **kwargs: Further :class:`JsonGenerator` arguments (``referer``,
            ``app_name``, ``max_retries``, ``delimiter``, ``timeout``, ``transport``)

    Returns:
        Configured JsonGenerator

    Raises:
        ConfigurationError: If no API key is found in parameter or environment
    """
    load_environment()

    if api_key is None:
        api_key = os.getenv(API_KEY_ENV)

    if api_key is None:
        raise ConfigurationError(
            f"OpenRouter API key not found. Set {API_KEY_ENV} environment variable "
            "or pass api_key parameter.",
            config_key="api_key",
        )

    if model is None:
        model = os.getenv(MODEL_ENV) or DEFAULT_MODEL

    return JsonGenerator(api_key=api_key, model=model, **kwargs)


def get_default_config() -> dict[str, Any]:
    """Get the default generator settings.

    Returns:
        Dictionary with the default model, delimiter and retry count
    """
    return {
        "model": DEFAULT_MODEL,
        "delimiter": DEFAULT_DELIMITER,
        "max_retries": DEFAULT_MAX_RETRIES,
    }
