"""NiceGUI interface - thin visualization layer for chat interactions.

Responsibilities:
    - Chat message display with per-role bubbles and timestamps
    - Loading indicator and error banner
    - Clear chat and dark/light theme toggle

State transitions live in ui.state; the page only renders them and
delegates each turn to the conversation pipeline.
"""
