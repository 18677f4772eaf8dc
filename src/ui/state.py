"""Chat state container for one browser session.

Holds the conversation log together with the loading, error and dark-mode
flags. All mutations go through the transition methods so the log always
alternates between a user turn and its assistant/error follow-up.
"""

import asyncio
import logging
from collections.abc import Callable
from typing import Protocol

from src.models.schemas import Failure, InboundResult, Success, Turn, TurnRole

logger = logging.getLogger(__name__)


class TurnInProgressError(RuntimeError):
    """Raised when a transition is not allowed while a call is in flight."""

    pass


class TurnSender(Protocol):
    async def send_turn(self, user_text: str) -> InboundResult: ...


class ChatState:
    """Manages chat state for a user session."""

    def __init__(self) -> None:
        self._turns: list[Turn] = []
        self.loading: bool = False
        self.error: str | None = None
        self.dark_mode: bool = False

    @property
    def turns(self) -> tuple[Turn, ...]:
        return tuple(self._turns)

    @property
    def is_empty(self) -> bool:
        return not self._turns

    def start_turn(self, text: str) -> Turn:
        """Append the user's turn and mark a call as in flight.

        Raises:
            ValueError: If text is blank.
            TurnInProgressError: If a previous turn has not finished.
        """
        if not text.strip():
            raise ValueError("Cannot submit a blank message")
        if self.loading:
            raise TurnInProgressError("A message is already being processed")

        turn = Turn(role=TurnRole.USER, text=text)
        self._turns.append(turn)
        self.loading = True
        self.error = None
        return turn

    def complete_turn(self, text: str) -> Turn:
        """Append the assistant reply for the pending turn."""
        return self._finish(Turn(role=TurnRole.ASSISTANT, text=text))

    def fail_turn(self, message: str) -> Turn:
        """Record a failure for the pending turn."""
        self.error = message
        return self._finish(Turn(role=TurnRole.ERROR, text=message))

    def abort_turn(self) -> None:
        """Drop the pending user turn as if it had never been submitted."""
        if not self.loading:
            return
        if self._turns and self._turns[-1].role is TurnRole.USER:
            self._turns.pop()
        self.loading = False

    def clear(self) -> None:
        """Empty the conversation log.

        Raises:
            TurnInProgressError: If a call is in flight.
        """
        if self.loading:
            raise TurnInProgressError("Cannot clear the chat while a message is pending")
        self._turns.clear()
        self.error = None

    def toggle_dark_mode(self) -> bool:
        self.dark_mode = not self.dark_mode
        return self.dark_mode

    def _finish(self, turn: Turn) -> Turn:
        if not self.loading:
            raise RuntimeError("No turn is pending")
        self._turns.append(turn)
        self.loading = False
        return turn


async def submit_turn(
    state: ChatState,
    pipeline: TurnSender,
    text: str,
    on_start: Callable[[], None] | None = None,
) -> InboundResult | None:
    """Run one full user turn against the pipeline and record the outcome.

    Args:
        state: The session's chat state.
        pipeline: Anything exposing send_turn (normally ConversationPipeline).
        text: Raw user input.
        on_start: Called once the user turn is appended, before the network call.

    Returns:
        The pipeline result, or None if text was blank and nothing happened.

    Raises:
        TurnInProgressError: If a previous turn is still in flight.
    """
    if not text.strip():
        return None

    state.start_turn(text)
    try:
        if on_start is not None:
            on_start()
        result = await pipeline.send_turn(text)
    except asyncio.CancelledError:
        logger.info("Turn cancelled, discarding pending message")
        state.abort_turn()
        raise
    except Exception as e:
        # send_turn classifies its own failures; this only guards on_start
        logger.error(f"Unexpected error while submitting turn: {e}")
        state.abort_turn()
        raise

    if isinstance(result, Success):
        state.complete_turn(result.text)
    elif isinstance(result, Failure):
        state.fail_turn(result.message)
    return result
