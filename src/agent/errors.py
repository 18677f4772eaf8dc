"""Gemini error types and user-facing error classification.

Classification is an ordered list of rules evaluated top to bottom. The
first rule whose predicate matches supplies the message shown to the user.
"""

from collections.abc import Callable
from typing import NamedTuple

import httpx

FALLBACK_MESSAGE = "Something went wrong."


class GeminiError(Exception):
    """Base class for errors raised while talking to the Gemini API."""

    pass


class MissingAPIKeyError(GeminiError):
    """Raised when no API key is configured."""

    def __init__(self) -> None:
        super().__init__("GEMINI_API_KEY is not set")


class InvalidResponseError(GeminiError):
    """Raised when a successful response body cannot be parsed."""

    def __init__(self) -> None:
        super().__init__("Invalid response from the Gemini API")


class GeminiAPIError(GeminiError):
    """Raised when the API answers with a non-success status.

    Attributes:
        status_code: HTTP status returned by the API.
    """

    def __init__(self, message: str, status_code: int) -> None:
        super().__init__(message)
        self.status_code = status_code


class ErrorRule(NamedTuple):
    """Maps a matching exception to a user-facing message."""

    name: str
    matches: Callable[[BaseException], bool]
    message: Callable[[BaseException], str]


def _mentions(*needles: str) -> Callable[[BaseException], bool]:
    def predicate(exc: BaseException) -> bool:
        text = str(exc).lower()
        return any(needle in text for needle in needles)

    return predicate


def _fixed(message: str) -> Callable[[BaseException], str]:
    return lambda _exc: message


ERROR_RULES: tuple[ErrorRule, ...] = (
    ErrorRule(
        "credential",
        _mentions("api_key", "api key"),
        _fixed("Invalid API key. Please check your Gemini API key."),
    ),
    ErrorRule(
        "quota",
        _mentions("quota"),
        _fixed("API quota exceeded. Please try again later."),
    ),
    ErrorRule(
        "filtered",
        _mentions("filtered"),
        _fixed("Content was filtered. Please try a different question."),
    ),
    ErrorRule(
        "network",
        lambda exc: isinstance(exc, httpx.TransportError),
        _fixed("Network error. Please check your internet connection."),
    ),
    ErrorRule("message", lambda exc: bool(str(exc).strip()), lambda exc: str(exc)),
)


def classify_error(exc: BaseException) -> str:
    """Turn an exception into the message shown to the user.

    Args:
        exc: Any error raised while performing a turn.

    Returns:
        The message of the first matching rule, or a generic fallback.
    """
    for rule in ERROR_RULES:
        if rule.matches(exc):
            return rule.message(exc)
    return FALLBACK_MESSAGE
