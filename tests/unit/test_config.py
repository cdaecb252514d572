"""Unit tests for configuration utilities."""

from typing import Any
from unittest.mock import patch

import pytest

from llm_json_generator.exceptions import ConfigurationError
from llm_json_generator.generator.json_generator import JsonGenerator
from llm_json_generator.utils.config import (
    create_generator,
    get_default_config,
    load_environment,
)


class TestConfigurationUtils:
    """Test configuration utility functions."""

    @pytest.mark.unit
    @patch("llm_json_generator.utils.config.load_dotenv")
    def test_load_environment(self, mock_load_dotenv: Any) -> None:
        """Test loading environment variables."""
        load_environment()
        mock_load_dotenv.assert_called_once()

    @pytest.mark.unit
    @patch("llm_json_generator.utils.config.load_dotenv")
    def test_create_generator_with_env_key(
        self, mock_load_dotenv: Any, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test creating a generator with the environment API key."""
        monkeypatch.setenv("OPENROUTER_API_KEY", "test-openrouter-key")
        monkeypatch.delenv("OPENROUTER_MODEL", raising=False)

        generator = create_generator()

        assert isinstance(generator, JsonGenerator)
        assert generator.api_key == "test-openrouter-key"
        assert generator.model == "mistralai/mistral-nemo"
        assert generator.max_retries == 3
        mock_load_dotenv.assert_called_once()

    @pytest.mark.unit
    @patch("llm_json_generator.utils.config.load_dotenv")
    def test_create_generator_with_env_model(
        self, mock_load_dotenv: Any, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test the model is read from OPENROUTER_MODEL when not given."""
        monkeypatch.setenv("OPENROUTER_API_KEY", "test-openrouter-key")
        monkeypatch.setenv("OPENROUTER_MODEL", "openai/gpt-4o-mini")

        generator = create_generator()

        assert generator.model == "openai/gpt-4o-mini"

    @pytest.mark.unit
    @patch("llm_json_generator.utils.config.load_dotenv")
    def test_create_generator_with_explicit_values(
        self, mock_load_dotenv: Any, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test explicit arguments take precedence over the environment."""
        monkeypatch.setenv("OPENROUTER_MODEL", "ignored/model")

        generator = create_generator(
            model="anthropic/claude-3-haiku",
            api_key="explicit-key",
            app_name="Test App",
            max_retries=5,
        )

        assert generator.model == "anthropic/claude-3-haiku"
        assert generator.api_key == "explicit-key"
        assert generator.app_name == "Test App"
        assert generator.max_retries == 5

    @pytest.mark.unit
    @patch("llm_json_generator.utils.config.os.getenv")
    @patch("llm_json_generator.utils.config.load_dotenv")
    def test_create_generator_no_key_raises_error(
        self, mock_load_dotenv: Any, mock_getenv: Any
    ) -> None:
        """Test that a missing API key raises ConfigurationError."""
        mock_getenv.return_value = None

        with pytest.raises(ConfigurationError, match="OpenRouter API key not found"):
            create_generator()

        mock_getenv.assert_called_with("OPENROUTER_API_KEY")

    @pytest.mark.unit
    def test_get_default_config(self) -> None:
        """Test getting the default generator settings."""
        assert get_default_config() == {
            "model": "mistralai/mistral-nemo",
            "delimiter": "###",
            "max_retries": 3,
        }
