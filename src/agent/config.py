"""Gemini client configuration with environment variable loading.

Pydantic-based configuration for the conversation pipeline. Values are read
once from the environment (and an optional .env file) at process start.
"""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field, SecretStr, field_validator

# Load environment variables from .env file
load_dotenv()

DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"
DEFAULT_MODEL = "gemini-2.0-flash"


class GeminiConfig(BaseModel):
    """Configuration for the Gemini generateContent endpoint.

    A missing API key is allowed here. It surfaces as a classified failure
    on the first request instead of preventing startup.

    Attributes:
        api_key: Gemini API key, sent in the x-goog-api-key header.
        base_url: API base URL including the version segment.
        model_name: Model identifier used in the endpoint path.
        timeout_seconds: Per-request client timeout.
    """

    api_key: SecretStr = Field(
        default_factory=lambda: SecretStr(
            os.getenv("GEMINI_API_KEY", os.getenv("VITE_GEMINI_API_KEY", ""))
        ),
        validate_default=True,
        description="API key for the Gemini API",
    )
    base_url: str = Field(
        default_factory=lambda: os.getenv("GEMINI_BASE_URL") or DEFAULT_BASE_URL,
        validate_default=True,
        description="API base URL",
    )
    model_name: str = Field(
        default_factory=lambda: os.getenv("GEMINI_MODEL") or DEFAULT_MODEL,
        description="Model to use",
    )
    timeout_seconds: float = Field(
        default_factory=lambda: os.getenv("GEMINI_TIMEOUT_SECONDS", "60"),
        ge=1.0,
        le=600.0,
        validate_default=True,
        description="Client timeout for a single generateContent call",
    )

    @field_validator("api_key")
    @classmethod
    def strip_api_key(cls, v: SecretStr) -> SecretStr:
        """Strip surrounding whitespace from the API key."""
        return SecretStr(v.get_secret_value().strip())

    @field_validator("timeout_seconds", mode="before")
    @classmethod
    def parse_timeout(cls, v: object) -> object:
        """Reject non-numeric timeout strings with a readable message."""
        if isinstance(v, str):
            try:
                return float(v.strip())
            except ValueError:
                raise ValueError(
                    f"GEMINI_TIMEOUT_SECONDS must be a number of seconds, got {v!r}"
                ) from None
        return v

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @property
    def has_api_key(self) -> bool:
        return bool(self.api_key.get_secret_value())

    @property
    def endpoint(self) -> str:
        """Full generateContent URL for the configured model."""
        return f"{self.base_url}/models/{self.model_name}:generateContent"


def get_gemini_config() -> GeminiConfig:
    """Create Gemini configuration from environment.

    Returns:
        Configured GeminiConfig instance.

    Raises:
        pydantic.ValidationError: If an environment value is invalid.
    """
    return GeminiConfig()
