"""Unit tests for GeminiConfig.

Tests environment loading, defaults and validation.
"""

from unittest.mock import patch

import pytest
from pydantic import ValidationError

from src.agent.config import DEFAULT_BASE_URL, DEFAULT_MODEL, GeminiConfig, get_gemini_config


class TestGeminiConfig:
    """Tests for GeminiConfig validation."""

    def test_valid_config_with_all_fields(self) -> None:
        """Config accepts valid values for all fields."""
        config = GeminiConfig(
            api_key="key-12345",
            base_url="https://example.test/v1",
            model_name="gemini-1.5-pro",
            timeout_seconds=30,
        )

        assert config.api_key.get_secret_value() == "key-12345"
        assert config.base_url == "https://example.test/v1"
        assert config.model_name == "gemini-1.5-pro"
        assert config.timeout_seconds == 30

    def test_config_with_default_values(self) -> None:
        """Config uses defaults when only API key provided."""
        with patch.dict(
            "os.environ",
            {"GEMINI_MODEL": "", "GEMINI_BASE_URL": "", "GEMINI_TIMEOUT_SECONDS": "60"},
        ):
            config = GeminiConfig(api_key="key")

        assert config.model_name == DEFAULT_MODEL
        assert config.base_url == DEFAULT_BASE_URL
        assert config.timeout_seconds == 60

    def test_missing_api_key_is_allowed(self) -> None:
        """Config can be built without a key; failure happens on first use."""
        config = GeminiConfig(api_key="")

        assert config.has_api_key is False

    def test_config_strips_api_key_whitespace(self) -> None:
        """Config strips leading/trailing whitespace from API key."""
        config = GeminiConfig(api_key="  key  ")

        assert config.api_key.get_secret_value() == "key"

    def test_whitespace_api_key_counts_as_missing(self) -> None:
        """Whitespace-only key is treated as absent."""
        assert GeminiConfig(api_key="   ").has_api_key is False

    def test_api_key_not_in_repr(self) -> None:
        """The secret is masked when the config is printed."""
        config = GeminiConfig(api_key="super-secret")

        assert "super-secret" not in repr(config)
        assert "super-secret" not in str(config)

    def test_endpoint_includes_model(self) -> None:
        """Endpoint is built from base URL and model name."""
        config = GeminiConfig(
            api_key="key", base_url="https://example.test/v1beta/", model_name="m"
        )

        assert config.endpoint == "https://example.test/v1beta/models/m:generateContent"

    def test_config_fails_with_timeout_too_low(self) -> None:
        """Config rejects timeouts below one second."""
        with pytest.raises(ValidationError) as exc_info:
            GeminiConfig(api_key="key", timeout_seconds=0.5)

        assert "timeout_seconds" in str(exc_info.value)

    def test_config_fails_with_timeout_too_high(self) -> None:
        """Config rejects timeouts above ten minutes."""
        with pytest.raises(ValidationError):
            GeminiConfig(api_key="key", timeout_seconds=601)


class TestGetGeminiConfig:
    """Tests for get_gemini_config factory function."""

    def test_get_config_from_environment(self) -> None:
        """get_gemini_config loads values from environment."""
        env = {
            "GEMINI_API_KEY": "env-key",
            "GEMINI_MODEL": "gemini-env",
            "GEMINI_TIMEOUT_SECONDS": "15",
        }
        with patch.dict("os.environ", env):
            config = get_gemini_config()

        assert config.api_key.get_secret_value() == "env-key"
        assert config.model_name == "gemini-env"
        assert config.timeout_seconds == 15

    def test_falls_back_to_vite_variable(self) -> None:
        """VITE_GEMINI_API_KEY is used when GEMINI_API_KEY is unset."""
        with patch.dict("os.environ", {"VITE_GEMINI_API_KEY": "vite-key"}, clear=True):
            config = get_gemini_config()

        assert config.api_key.get_secret_value() == "vite-key"

    def test_no_key_in_environment(self) -> None:
        """Absent key does not raise at startup."""
        with patch.dict("os.environ", {}, clear=True):
            config = get_gemini_config()

        assert config.has_api_key is False

    @pytest.mark.parametrize("value", ["abc", "", "1O"])
    def test_non_numeric_timeout_in_environment(self, value: str) -> None:
        """A bad timeout variable raises a ValidationError naming the variable."""
        with (
            patch.dict("os.environ", {"GEMINI_TIMEOUT_SECONDS": value}, clear=True),
            pytest.raises(ValidationError) as exc_info,
        ):
            get_gemini_config()

        assert "GEMINI_TIMEOUT_SECONDS must be a number" in str(exc_info.value)

    def test_timeout_with_whitespace_in_environment(self) -> None:
        """Surrounding whitespace in the timeout variable is tolerated."""
        with patch.dict("os.environ", {"GEMINI_TIMEOUT_SECONDS": " 20 "}, clear=True):
            config = get_gemini_config()

        assert config.timeout_seconds == 20


class TestMain:
    """Tests for startup configuration handling."""

    def test_invalid_config_exits_cleanly(self, caplog: pytest.LogCaptureFixture) -> None:
        """main() logs the problem and exits instead of crashing with a traceback."""
        from src import main as main_module

        with (
            patch.dict("os.environ", {"GEMINI_TIMEOUT_SECONDS": "abc"}, clear=True),
            patch("nicegui.ui.run") as mock_run,
            pytest.raises(SystemExit) as exc_info,
        ):
            main_module.main()

        assert exc_info.value.code == 1
        assert "Invalid configuration" in caplog.text
        mock_run.assert_not_called()
