"""LLM JSON Generator - schema-validated JSON objects from text prompts."""

__version__ = "0.1.0"

# Custom exceptions
from .exceptions import (
    ConfigurationError,
    CustomValidationError,
    GenerationError,
    JsonGeneratorError,
    ParseError,
    ProviderError,
    ValidationError,
)

# Core generator classes
from .generator import GenerationRequest, GeneratorConfig, JsonGenerator, sanitize

# Schema helpers
from .schema import CustomValidationResult, coerce, validate

# Transports
from .transport import LiteLLMTransport, ModelTransport, OpenRouterHTTPTransport

# Configuration utilities
from .utils import create_generator, get_default_config, load_environment

__all__ = [
    "__version__",
    "JsonGenerator",
    "GenerationRequest",
    "GeneratorConfig",
    "sanitize",
    "coerce",
    "validate",
    "CustomValidationResult",
    "ModelTransport",
    "LiteLLMTransport",
    "OpenRouterHTTPTransport",
    "load_environment",
    "create_generator",
    "get_default_config",
    # Exceptions
    "JsonGeneratorError",
    "ConfigurationError",
    "GenerationError",
    "ProviderError",
    "ParseError",
    "ValidationError",
    "CustomValidationError",
]
