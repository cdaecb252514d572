"""Transport boundary between the generator and the model provider."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class ChatRequest:
    """A single chat-completion request.

    Args:
        model: Provider model id (e.g. ``"mistralai/mistral-nemo"``)
        messages: Ordered ``{"role", "content"}`` messages
        api_key: Bearer credential
        response_format: Response format hint, ``{"type": "json_object"}``
        provider: Provider routing options
        headers: Extra attribution headers
        timeout: Deadline in seconds, or ``None`` for no deadline
    """

    model: str
    messages: list[dict[str, str]]
    api_key: str
    response_format: dict[str, Any] = field(
        default_factory=lambda: {"type": "json_object"}
    )
    provider: dict[str, Any] = field(
        default_factory=lambda: {"require_parameters": True}
    )
    headers: dict[str, str] = field(default_factory=dict)
    timeout: float | None = None


@dataclass
class TransportResponse:
    """Provider response in an OpenAI-compatible shape.

    On success ``body["choices"][0]["message"]["content"]`` holds the generated
    text. On failure ``body`` may carry an ``error`` object or ``message``.
    """

    ok: bool
    status_code: int
    status_text: str = ""
    body: dict[str, Any] = field(default_factory=dict)


class ModelTransport(ABC):
    """Base class for objects that perform the external model call."""

    @abstractmethod
    async def send(self, request: ChatRequest) -> TransportResponse:
        """Send a chat request and return the provider response.

        Args:
            request: The chat request to send

        Returns:
            The provider response. Non-success statuses are reported through
            ``ok``/``status_code`` rather than raised.
        """
        pass
