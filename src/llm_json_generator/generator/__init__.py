"""Generation orchestration: prompt assembly, model calls and retries."""

from .config import GeneratorConfig
from .json_generator import GenerationRequest, JsonGenerator
from .sanitizer import sanitize

__all__ = ["GenerationRequest", "GeneratorConfig", "JsonGenerator", "sanitize"]
