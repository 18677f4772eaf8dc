"""Unit tests for individual components in isolation.

Coverage:
    - parsing/: Markdown marker stripping
    - agent/: Configuration and error classification
    - models/: Request serialization and response parsing
    - ui/: Chat state transitions
"""
