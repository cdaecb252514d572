"""Direct HTTP transport for the OpenRouter chat-completions endpoint."""

import asyncio
from typing import Any

import requests

from llm_json_generator.exceptions import ProviderError
from llm_json_generator.transport.base import (
    ChatRequest,
    ModelTransport,
    TransportResponse,
)

OPENROUTER_CHAT_URL = "https://openrouter.ai/api/v1/chat/completions"


class OpenRouterHTTPTransport(ModelTransport):
    """Post chat requests to OpenRouter with ``requests``.

    The blocking request runs in a worker thread so concurrent generations do
    not serialize on the event loop.

    Args:
        base_url: Chat-completions endpoint URL
        session: Optional ``requests.Session`` for connection reuse

    Example:
        ```python
        from llm_json_generator import JsonGenerator
        from llm_json_generator.transport import OpenRouterHTTPTransport

        generator = JsonGenerator(api_key="sk-or-...", transport=OpenRouterHTTPTransport())
        ```
    """

    def __init__(
        self,
        base_url: str = OPENROUTER_CHAT_URL,
        session: requests.Session | None = None,
    ) -> None:
        self.base_url = base_url
        self._session = session

    async def send(self, request: ChatRequest) -> TransportResponse:
        """Send ``request`` to OpenRouter.

        Raises:
            ProviderError: If the request cannot be delivered (connection
                failure, timeout).
        """
        return await asyncio.to_thread(self._post, request)

    def _build_headers(self, request: ChatRequest) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {request.api_key}",
            "Content-Type": "application/json",
            **request.headers,
        }

    def _build_payload(self, request: ChatRequest) -> dict[str, Any]:
        return {
            "model": request.model,
            "messages": request.messages,
            "response_format": request.response_format,
            "provider": request.provider,
        }

    def _post(self, request: ChatRequest) -> TransportResponse:
        post = self._session.post if self._session is not None else requests.post
        try:
            response = post(
                self.base_url,
                headers=self._build_headers(request),
                json=self._build_payload(request),
                timeout=request.timeout,
            )
        except requests.RequestException as e:
            raise ProviderError(
                f"OpenRouter request failed: {e}",
                model=request.model,
                original_error=e,
            ) from e

        try:
            body = response.json()
        except ValueError:
            body = {}

        return TransportResponse(
            ok=response.ok,
            status_code=response.status_code,
            status_text=response.reason or "",
            body=body if isinstance(body, dict) else {},
        )
