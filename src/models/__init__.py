"""Pydantic models for the conversation log and the Gemini wire format.

Provides type safety and validation for everything crossing the network
boundary, plus the immutable turns held by the chat state.

Models:
    - Turn / TurnRole: One entry in the conversation log
    - OutboundRequest: generateContent request payload
    - GeminiResponse / GeminiErrorBody: Consumed subsets of API replies
    - Success / Failure: Outcome of a single turn
"""

from src.models.schemas import (
    DEFAULT_GENERATION_CONFIG,
    DEFAULT_SAFETY_SETTINGS,
    Failure,
    GeminiErrorBody,
    GeminiResponse,
    GenerationConfig,
    InboundResult,
    OutboundRequest,
    SafetySetting,
    Success,
    Turn,
    TurnRole,
)

__all__ = [
    "DEFAULT_GENERATION_CONFIG",
    "DEFAULT_SAFETY_SETTINGS",
    "Failure",
    "GeminiErrorBody",
    "GeminiResponse",
    "GenerationConfig",
    "InboundResult",
    "OutboundRequest",
    "SafetySetting",
    "Success",
    "Turn",
    "TurnRole",
]
