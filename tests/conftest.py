"""Shared pytest configuration and fixtures for the test suite."""

import json
import os
from collections.abc import Callable
from typing import Any

import pytest

from llm_json_generator.transport.base import (
    ChatRequest,
    ModelTransport,
    TransportResponse,
)

IS_CI = os.getenv("CI", "false").lower() == "true"


def chat_response(content: Any) -> TransportResponse:
    """Build a successful provider response whose message content is ``content``.

    Non-string content is serialized to JSON text.
    """
    text = content if isinstance(content, str) else json.dumps(content)
    return TransportResponse(
        ok=True,
        status_code=200,
        status_text="OK",
        body={"choices": [{"message": {"content": text}}]},
    )


class FakeTransport(ModelTransport):
    """Transport that replays scripted responses and records every request.

    Each scripted item is returned in order; exceptions are raised instead. The
    last item is repeated once the script is exhausted.
    """

    def __init__(self, responses: list[TransportResponse | Exception]) -> None:
        self._responses = list(responses)
        self.requests: list[ChatRequest] = []

    async def send(self, request: ChatRequest) -> TransportResponse:
        self.requests.append(request)
        index = min(len(self.requests), len(self._responses)) - 1
        item = self._responses[index]
        if isinstance(item, Exception):
            raise item
        return item

    def system_message(self, call_index: int) -> str:
        """System message content of the ``call_index``-th request."""
        return self.requests[call_index].messages[0]["content"]


@pytest.fixture
def sample_api_key() -> str:
    """Sample API key for testing."""
    return "test-api-key-12345"


@pytest.fixture
def person_schema() -> dict[str, Any]:
    """Flat schema with a string and an integer field."""
    return {"name": "type:string", "age": "type:integer"}


@pytest.fixture
def character_schema() -> dict[str, Any]:
    """Schema mixing an enum, a nested object and an array of objects."""
    return {
        "name": "type:string",
        "role": "type:enum[warrior,mage,rogue,cleric]",
        "level": "type:integer",
        "stats": {
            "strength": "type:integer",
            "wisdom": "type:integer",
        },
        "inventory": [{"item": "type:string", "weight": "type:float"}],
    }


@pytest.fixture
def make_transport() -> Callable[..., FakeTransport]:
    """Factory for FakeTransport instances.

    Accepts scripted items as positional arguments; dicts and strings are
    wrapped as successful chat responses.
    """

    def _make(*items: Any) -> FakeTransport:
        scripted: list[TransportResponse | Exception] = []
        for item in items:
            if isinstance(item, TransportResponse | Exception):
                scripted.append(item)
            else:
                scripted.append(chat_response(item))
        return FakeTransport(scripted)

    return _make


@pytest.fixture
def openrouter_api_key() -> str:
    """Real API key for integration tests; skips when none is configured."""
    api_key = os.getenv("OPENROUTER_API_KEY")
    if not api_key:
        pytest.skip("Integration tests require OPENROUTER_API_KEY to be set.")
    return api_key


# Pytest configuration
pytest_plugins: list[str] = []
