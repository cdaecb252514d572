"""Generator configuration model."""

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_MODEL = "mistralai/mistral-nemo"
DEFAULT_MAX_RETRIES = 3
DEFAULT_DELIMITER = "###"


class GeneratorConfig(BaseModel):
    """Immutable configuration shared by every generation of one generator.

    Attributes:
        api_key: OpenRouter API key
        model: Model id used for generation
        referer: Optional ``HTTP-Referer`` attribution header
        app_name: Optional ``X-Title`` attribution header
        max_retries: Maximum generation attempts per call
        delimiter: Delimiter used to wrap keys in the schema template
        timeout: Per-request deadline in seconds, ``None`` for no deadline
    """

    model_config = ConfigDict(frozen=True)

    api_key: str = Field(min_length=1, description="OpenRouter API key")
    model: str = Field(default=DEFAULT_MODEL, description="Model id for generation")
    referer: str | None = Field(
        default=None, description="Optional HTTP-Referer attribution header"
    )
    app_name: str | None = Field(
        default=None, description="Optional X-Title attribution header"
    )
    max_retries: int = Field(
        default=DEFAULT_MAX_RETRIES, ge=1, description="Maximum attempts per call"
    )
    delimiter: str = Field(
        default=DEFAULT_DELIMITER, min_length=1, description="Key wrapping delimiter"
    )
    timeout: float | None = Field(
        default=None, gt=0, description="Per-request deadline in seconds"
    )

    @property
    def attribution_headers(self) -> dict[str, str]:
        """Optional OpenRouter attribution headers."""
        headers: dict[str, str] = {}
        if self.referer:
            headers["HTTP-Referer"] = self.referer
        if self.app_name:
            headers["X-Title"] = self.app_name
        return headers
