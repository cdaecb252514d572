"""Model transport backed by LiteLLM's OpenRouter provider."""

import logging
from typing import Any

from litellm import acompletion

from llm_json_generator.transport.base import (
    ChatRequest,
    ModelTransport,
    TransportResponse,
)

logger = logging.getLogger(__name__)

OPENROUTER_PREFIX = "openrouter/"


class LiteLLMTransport(ModelTransport):
    """Send chat requests through ``litellm.acompletion``.

    Model ids are routed to OpenRouter by prefixing ``openrouter/`` unless the
    id already names that provider. Provider exceptions are converted into a
    non-ok :class:`TransportResponse` carrying the status code and message.
    """

    async def send(self, request: ChatRequest) -> TransportResponse:
        """Send ``request`` via LiteLLM.

        Args:
            request: The chat request to send

        Returns:
            The provider response normalized to an OpenAI-compatible body.
        """
        model = request.model
        if not model.startswith(OPENROUTER_PREFIX):
            model = f"{OPENROUTER_PREFIX}{model}"

        kwargs: dict[str, Any] = {
            "model": model,
            "messages": request.messages,
            "api_key": request.api_key,
            "response_format": request.response_format,
            "extra_body": {"provider": request.provider},
        }
        if request.headers:
            kwargs["extra_headers"] = request.headers
        if request.timeout is not None:
            kwargs["timeout"] = request.timeout

        try:
            response = await acompletion(**kwargs)
        except Exception as e:
            status_code = getattr(e, "status_code", None) or 0
            message = getattr(e, "message", None) or str(e)
            logger.debug("LiteLLM request for %s failed: %s", model, message)
            return TransportResponse(
                ok=False,
                status_code=int(status_code),
                status_text=type(e).__name__,
                body={"error": {"message": message}},
            )

        return TransportResponse(
            ok=True,
            status_code=200,
            status_text="OK",
            body=self._to_body(response),
        )

    def _to_body(self, response: Any) -> dict[str, Any]:
        """Convert a LiteLLM ``ModelResponse`` into a plain response body."""
        choices = []
        for choice in getattr(response, "choices", None) or []:
            message = getattr(choice, "message", None)
            choices.append(
                {"message": {"content": getattr(message, "content", None)}}
            )

        body: dict[str, Any] = {"choices": choices}
        usage = getattr(response, "usage", None)
        if usage is not None:
            body["usage"] = {
                "prompt_tokens": getattr(usage, "prompt_tokens", None),
                "completion_tokens": getattr(usage, "completion_tokens", None),
            }
        return body
