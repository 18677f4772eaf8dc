"""Pytest fixtures and shared test configuration.

Provides reusable fixtures for unit and integration tests.

Fixtures:
    - gemini_config: Config pointing at a fake endpoint with a test key
    - make_pipeline: Builds a pipeline whose HTTP calls hit a handler function
    - gemini_reply: Builds a generateContent success body

Integration tests never reach the real API; httpx.MockTransport answers instead.
"""

from collections.abc import Callable
from typing import Any

import httpx
import pytest

from src.agent.config import GeminiConfig
from src.agent.pipeline import ConversationPipeline

Handler = Callable[[httpx.Request], httpx.Response]


@pytest.fixture
def gemini_config() -> GeminiConfig:
    """Return configuration with a test API key.

    Returns:
        GeminiConfig aimed at a non-routable test host.
    """
    return GeminiConfig(
        api_key="test-api-key",
        base_url="https://gemini.test/v1beta",
        model_name="gemini-2.0-flash",
        timeout_seconds=5.0,
    )


@pytest.fixture
def make_pipeline(
    gemini_config: GeminiConfig,
) -> Callable[[Handler], ConversationPipeline]:
    """Return a factory for pipelines backed by a mock transport.

    Args:
        gemini_config: Base configuration for the pipeline.

    Returns:
        Function taking a request handler and returning a pipeline.
    """

    def factory(handler: Handler) -> ConversationPipeline:
        return ConversationPipeline(
            config=gemini_config,
            transport=httpx.MockTransport(handler),
        )

    return factory


@pytest.fixture
def gemini_reply() -> Callable[[str], dict[str, Any]]:
    """Return a builder for a single-candidate success body."""

    def build(text: str) -> dict[str, Any]:
        return {"candidates": [{"content": {"parts": [{"text": text}], "role": "model"}}]}

    return build
