"""Custom exceptions for the LLM JSON generator."""


class JsonGeneratorError(Exception):
    """Base exception for the LLM JSON generator.

    All custom exceptions in this package should inherit from this base class.
    """

    pass


class ConfigurationError(JsonGeneratorError):
    """Raised when configuration errors occur.

    This exception is raised when:
    - The API key is missing at construction time
    - Invalid configuration values are provided (e.g. ``max_retries < 1``)
    - Environment setup is incorrect

    It is a precondition failure and is never retried.

    Attributes:
        config_key: The configuration key that caused the error
        config_value: The invalid configuration value
    """

    def __init__(
        self,
        message: str,
        config_key: str | None = None,
        config_value: str | None = None,
    ):
        super().__init__(message)
        self.config_key = config_key
        self.config_value = config_value


class GenerationError(JsonGeneratorError):
    """Base class for failures of a single generation attempt.

    Every subclass is caught by the retry loop of
    :meth:`~llm_json_generator.generator.json_generator.JsonGenerator.generate`
    and retried until the attempt budget is exhausted.
    """

    pass


class ProviderError(GenerationError):
    """Raised when the model provider reports a non-success response.

    Attributes:
        status_code: HTTP status code reported by the provider, if any
        model: The model that was being used
        original_error: The original exception from the transport
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        model: str | None = None,
        original_error: Exception | None = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.model = model
        self.original_error = original_error


class ParseError(GenerationError):
    """Raised when the model response is not valid JSON after sanitizing.

    Attributes:
        response_text: The text that failed to parse
    """

    def __init__(self, message: str, response_text: str | None = None):
        super().__init__(message)
        self.response_text = response_text


class ValidationError(GenerationError):
    """Raised when parsed output does not match the schema.

    Covers structural mismatches (missing fields, wrong container type) and
    leaf coercion failures.

    Attributes:
        field: Dotted path of the offending field, if known
        expected: The expected kind (e.g. ``"integer"``, ``"object"``)
    """

    def __init__(
        self,
        message: str,
        field: str | None = None,
        expected: str | None = None,
    ):
        super().__init__(message)
        self.field = field
        self.expected = expected


class CustomValidationError(GenerationError):
    """Raised when a caller-supplied validator rejects the result."""

    pass
