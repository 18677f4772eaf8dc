"""Gemini Chat - a single-page chat interface for the Gemini API.

Combines NiceGUI for the interface, httpx for the generateContent call,
and Pydantic for configuration and wire-format validation.

Components:
    - agent: Conversation pipeline, configuration and error classification
    - parsing: Markdown marker stripping for model replies
    - ui: Chat state container and web interface
    - models: Turn and request/response schemas
"""

__version__ = "0.1.0"
