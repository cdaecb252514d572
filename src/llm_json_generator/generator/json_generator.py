"""Schema-driven JSON generation with validation and retry."""

import asyncio
import json
import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from llm_json_generator.exceptions import (
    ConfigurationError,
    GenerationError,
    ParseError,
    ProviderError,
)
from llm_json_generator.generator.config import (
    DEFAULT_DELIMITER,
    DEFAULT_MAX_RETRIES,
    DEFAULT_MODEL,
    GeneratorConfig,
)
from llm_json_generator.generator.sanitizer import sanitize
from llm_json_generator.schema.formatter import (
    build_structured_prompt,
    build_system_prompt,
)
from llm_json_generator.schema.nodes import parse_schema
from llm_json_generator.schema.validators import (
    CustomValidator,
    run_custom_validators,
    validate,
)
from llm_json_generator.transport.base import (
    ChatRequest,
    ModelTransport,
    TransportResponse,
)
from llm_json_generator.transport.litellm_transport import LiteLLMTransport

logger = logging.getLogger(__name__)

SCHEMALESS_SYSTEM_PROMPT = (
    "Generate a JSON object based on the prompt. Return only the raw JSON."
)


@dataclass(frozen=True)
class GenerationRequest:
    """Parameters of a single generation.

    Args:
        prompt: Text prompt to generate JSON from
        schema: Schema the result must match; empty for unvalidated output
        system_prompt: Optional system message override
        custom_validators: Validators run in order after schema validation
    """

    prompt: str
    schema: dict[str, Any] = field(default_factory=dict)
    system_prompt: str | None = None
    custom_validators: Sequence[CustomValidator] = ()


class JsonGenerator:
    """Generate structured JSON objects from text prompts using an LLM.

    The schema is rendered into the system and user messages, the model output
    is sanitized, parsed and validated, and failed attempts are retried with the
    previous error appended to the system message.

    Example:
        ```python
        import asyncio
        from llm_json_generator import JsonGenerator

        generator = JsonGenerator(api_key="sk-or-...")
        profile = asyncio.run(
            generator.generate(
                prompt="A 30 year old engineer named John",
                schema={"name": "type:string", "age": "type:integer"},
            )
        )
        ```
    """

    def __init__(
        self,
        api_key: str | None = None,
        model: str = DEFAULT_MODEL,
        referer: str | None = None,
        app_name: str | None = None,
        max_retries: int = DEFAULT_MAX_RETRIES,
        delimiter: str = DEFAULT_DELIMITER,
        timeout: float | None = None,
        transport: ModelTransport | None = None,
    ):
        """Initialize the generator.

        Args:
            api_key: OpenRouter API key
            model: Model to use for generation (default: 'mistralai/mistral-nemo')
            referer: Optional HTTP referer for OpenRouter analytics
            app_name: Optional app name for OpenRouter analytics
            max_retries: Maximum number of generation attempts (default: 3)
            delimiter: Delimiter for key wrapping (default: '###')
            timeout: Optional per-request deadline in seconds
            transport: Transport performing the model call
                (default: :class:`LiteLLMTransport`)

        Raises:
            ConfigurationError: If the API key is missing or a value is invalid
        """
        if not api_key:
            raise ConfigurationError(
                "OpenRouter API key is required", config_key="api_key"
            )

        try:
            self.config = GeneratorConfig(
                api_key=api_key,
                model=model,
                referer=referer,
                app_name=app_name,
                max_retries=max_retries,
                delimiter=delimiter,
                timeout=timeout,
            )
        except PydanticValidationError as e:
            first_error = e.errors()[0]
            config_key = str(first_error["loc"][0]) if first_error["loc"] else None
            raise ConfigurationError(
                f"Invalid generator configuration: {first_error['msg']}",
                config_key=config_key,
                config_value=str(first_error.get("input")),
            ) from e

        self.transport = transport or LiteLLMTransport()

    @property
    def api_key(self) -> str:
        return self.config.api_key

    @property
    def model(self) -> str:
        return self.config.model

    @property
    def referer(self) -> str | None:
        return self.config.referer

    @property
    def app_name(self) -> str | None:
        return self.config.app_name

    @property
    def max_retries(self) -> int:
        return self.config.max_retries

    @property
    def delimiter(self) -> str:
        return self.config.delimiter

    async def generate(
        self,
        prompt: str,
        schema: dict[str, Any] | None = None,
        system_prompt: str | None = None,
        custom_validators: Sequence[CustomValidator] | None = None,
    ) -> Any:
        """Generate a JSON object from a text prompt with schema validation.

        Args:
            prompt: Text prompt to generate JSON from
            schema: Schema to validate against. When empty, the parsed model
                output is returned without validation or retries.
            system_prompt: Optional system prompt override
            custom_validators: Optional validators returning ``{"valid", "error"}``

        Returns:
            The validated object, shaped exactly like ``schema``.

        Raises:
            ProviderError: If the provider reports a failure on the final attempt
            ParseError: If the final attempt's output is not valid JSON
            ValidationError: If the final attempt's output does not match the schema
            CustomValidationError: If a custom validator rejects the final attempt
        """
        if not schema:
            logger.warning(
                "No schema provided. Generating JSON without schema validation."
            )
            response = await self._send(
                system_prompt or SCHEMALESS_SYSTEM_PROMPT, prompt
            )
            return self._parse_json(self._extract_content(response))

        schema_node = parse_schema(schema)
        structured_prompt = build_structured_prompt(prompt, schema_node)
        base_system_prompt = system_prompt or build_system_prompt(
            schema, self.delimiter
        )
        validators = list(custom_validators or [])

        last_error: str | None = None

        for attempt in range(1, self.max_retries + 1):
            system_message = base_system_prompt
            if last_error:
                system_message += f"\nPrevious error: {last_error}"

            try:
                response = await self._send(system_message, structured_prompt)
                content = self._extract_content(response)
                data = self._parse_json(sanitize(content))
                result = validate(data, schema_node)
                await run_custom_validators(result, validators)
                return result
            except GenerationError as e:
                last_error = str(e)
                logger.warning(
                    "Attempt %d/%d failed: %s", attempt, self.max_retries, e
                )
                if attempt == self.max_retries:
                    raise

        # max_retries >= 1, so the loop always returns or raises
        raise RuntimeError("Retry loop exited without a result")

    async def generate_request(self, request: GenerationRequest) -> Any:
        """Run :meth:`generate` for a :class:`GenerationRequest`."""
        return await self.generate(
            prompt=request.prompt,
            schema=request.schema,
            system_prompt=request.system_prompt,
            custom_validators=request.custom_validators,
        )

    async def generate_batch(
        self,
        requests: Sequence[GenerationRequest | Mapping[str, Any]],
        return_exceptions: bool = False,
    ) -> list[Any]:
        """Generate multiple JSON objects concurrently.

        Each request runs its own independent retry loop.

        Args:
            requests: Generation requests, as :class:`GenerationRequest` or
                mappings of its fields
            return_exceptions: When true, failed items appear in the result as
                exception instances instead of failing the whole batch

        Returns:
            Results in the same order as ``requests``.

        Raises:
            GenerationError: The first failure, unless ``return_exceptions`` is set.
                No partial results are returned.
        """
        normalized = [
            request
            if isinstance(request, GenerationRequest)
            else GenerationRequest(**request)
            for request in requests
        ]
        results = await asyncio.gather(
            *(self.generate_request(request) for request in normalized),
            return_exceptions=return_exceptions,
        )
        return list(results)

    def _build_request(self, system_message: str, user_message: str) -> ChatRequest:
        return ChatRequest(
            model=self.model,
            messages=[
                {"role": "system", "content": system_message},
                {"role": "user", "content": user_message},
            ],
            api_key=self.api_key,
            headers=self.config.attribution_headers,
            timeout=self.config.timeout,
        )

    async def _send(self, system_message: str, user_message: str) -> TransportResponse:
        logger.debug("Sending generation request to %s", self.model)
        return await self.transport.send(
            self._build_request(system_message, user_message)
        )

    def _extract_content(self, response: TransportResponse) -> str:
        """Return the generated text of a provider response.

        Raises:
            ProviderError: If the response is a failure or has no message
            ParseError: If the message has no text content
        """
        if not response.ok:
            raise ProviderError(
                f"OpenRouter API error: {self._error_message(response)}",
                status_code=response.status_code,
                model=self.model,
            )

        try:
            message = response.body["choices"][0]["message"]
        except (KeyError, IndexError, TypeError) as e:
            raise ProviderError(
                "OpenRouter API error: response contains no choices",
                status_code=response.status_code,
                model=self.model,
            ) from e

        content = message.get("content") if isinstance(message, dict) else None
        if not isinstance(content, str):
            raise ParseError("Model response contains no text content")
        return content

    def _error_message(self, response: TransportResponse) -> str:
        body = response.body or {}
        error = body.get("error")
        if isinstance(error, dict) and error.get("message"):
            return str(error["message"])
        if body.get("message"):
            return str(body["message"])
        return response.status_text or f"HTTP {response.status_code}"

    def _parse_json(self, text: str) -> Any:
        try:
            return json.loads(text)
        except ValueError as e:
            raise ParseError(
                f"Invalid JSON in model response: {e}", response_text=text
            ) from e
