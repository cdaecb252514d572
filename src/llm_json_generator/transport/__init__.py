"""Transports that perform the external model call."""

from .base import ChatRequest, ModelTransport, TransportResponse
from .http import OPENROUTER_CHAT_URL, OpenRouterHTTPTransport
from .litellm_transport import LiteLLMTransport

__all__ = [
    "ChatRequest",
    "ModelTransport",
    "TransportResponse",
    "LiteLLMTransport",
    "OpenRouterHTTPTransport",
    "OPENROUTER_CHAT_URL",
]
