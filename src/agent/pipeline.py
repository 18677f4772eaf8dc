"""Conversation pipeline for a single user turn against the Gemini API.

Builds the generateContent request, performs the call, and converts every
outcome into an InboundResult. Failures are classified here and never
propagate to the caller; the conversation log is owned by the caller.
"""

import logging

import httpx
from pydantic import ValidationError

from src.agent.config import GeminiConfig, get_gemini_config
from src.agent.errors import (
    GeminiAPIError,
    InvalidResponseError,
    MissingAPIKeyError,
    classify_error,
)
from src.models.schemas import (
    Failure,
    GeminiErrorBody,
    GeminiResponse,
    InboundResult,
    OutboundRequest,
    Success,
)
from src.parsing.markdown_cleaner import clean

logger = logging.getLogger(__name__)

NO_CANDIDATES_MESSAGE = "No response generated. The content might have been filtered."
EMPTY_REPLY_TEXT = "No response generated"
EMPTY_PROMPT_MESSAGE = "Please enter a message."


class ConversationPipeline:
    """Stateless request/response pipeline for the Gemini API.

    Safe to share between sessions. Each call opens its own HTTP client.
    """

    def __init__(
        self,
        config: GeminiConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the pipeline.

        Args:
            config: Optional Gemini configuration.
                    Loads from environment if not provided.
            transport: Optional httpx transport, used to stub the API in tests.
        """
        self._config = config or get_gemini_config()
        self._transport = transport

    async def send_turn(self, user_text: str) -> InboundResult:
        """Send one user message and return the normalized outcome.

        Args:
            user_text: The user's message.

        Returns:
            Success with the cleaned reply, or Failure with a user-facing message.
            Blank input fails immediately without a network call.
        """
        if not user_text.strip():
            return Failure(message=EMPTY_PROMPT_MESSAGE)

        request = OutboundRequest.for_text(user_text)
        logger.info(
            f"Sending turn to {self._config.model_name} ({len(user_text)} chars)"
        )

        try:
            data = await self._post(request)
        except Exception as e:
            message = classify_error(e)
            logger.warning(f"Turn failed: {message} ({type(e).__name__}: {e})")
            return Failure(message=message)

        if not data.candidates:
            logger.warning("Turn returned no candidates")
            return Failure(message=NO_CANDIDATES_MESSAGE)

        reply = clean(data.first_text() or EMPTY_REPLY_TEXT).strip()
        logger.info(f"Turn completed ({len(reply)} chars)")
        return Success(text=reply)

    async def _post(self, request: OutboundRequest) -> GeminiResponse:
        """Perform the HTTP call and parse a successful body.

        Raises:
            MissingAPIKeyError: If no API key is configured.
            GeminiAPIError: If the API answers with a non-success status.
            httpx.TransportError: On connection or timeout failures.
            InvalidResponseError: If the body is not valid JSON of the expected shape.
        """
        if not self._config.has_api_key:
            raise MissingAPIKeyError()

        async with httpx.AsyncClient(
            timeout=self._config.timeout_seconds,
            transport=self._transport,
        ) as client:
            response = await client.post(
                self._config.endpoint,
                json=request.to_payload(),
                headers={
                    "Content-Type": "application/json",
                    "x-goog-api-key": self._config.api_key.get_secret_value(),
                },
            )

        if not response.is_success:
            raise GeminiAPIError(_error_message(response), response.status_code)

        try:
            return GeminiResponse.model_validate_json(response.content)
        except ValidationError as e:
            logger.debug(f"Unparsable generateContent body: {e}")
            raise InvalidResponseError() from e


def _error_message(response: httpx.Response) -> str:
    """Extract the API's error message, falling back to the HTTP status."""
    try:
        body = GeminiErrorBody.model_validate_json(response.content)
    except ValidationError:
        body = None
    if body and body.error and body.error.message:
        return body.error.message
    return f"HTTP {response.status_code}: {response.reason_phrase}"


# Module-level singleton instance
_pipeline: ConversationPipeline | None = None


def get_pipeline() -> ConversationPipeline:
    """Get or create the global conversation pipeline.

    Returns:
        The ConversationPipeline instance.
    """
    global _pipeline
    if _pipeline is None:
        _pipeline = ConversationPipeline()
    return _pipeline
