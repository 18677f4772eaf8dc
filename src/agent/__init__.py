"""Gemini conversation pipeline.

Handles the request/response lifecycle of a single chat turn.

Responsibilities:
    - generateContent request construction with fixed generation/safety settings
    - HTTP call with the configured API key
    - Error classification into user-facing messages
    - Reply text normalization

Maintains clean separation from the presentation layer: it never touches
the conversation log.
"""

from src.agent.config import GeminiConfig, get_gemini_config
from src.agent.errors import classify_error
from src.agent.pipeline import ConversationPipeline, get_pipeline

__all__ = [
    "ConversationPipeline",
    "GeminiConfig",
    "classify_error",
    "get_gemini_config",
    "get_pipeline",
]
