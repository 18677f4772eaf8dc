"""Test package for Gemini Chat.

Structure:
    - unit/: Pure logic (normalizer, error rules, config, models, chat state)
    - integration/: Conversation pipeline against a mocked Gemini endpoint

Leverages pytest with pytest-check for soft assertions.
"""
