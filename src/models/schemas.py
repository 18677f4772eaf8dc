from datetime import datetime
from enum import Enum
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field


class TurnRole(str, Enum):
    """Speaker of a conversation turn."""

    USER = "user"
    ASSISTANT = "assistant"
    ERROR = "error"


class Turn(BaseModel):
    """A single exchange unit in the conversation log.

    Attributes:
        role: Who produced the turn (user, assistant, or error).
        text: The message content.
        created_at: When the turn was created.
    """

    model_config = ConfigDict(frozen=True)

    role: TurnRole
    text: str
    created_at: datetime = Field(default_factory=datetime.now)


class Part(BaseModel):
    text: str


class Content(BaseModel):
    parts: list[Part]


class GenerationConfig(BaseModel):
    """Sampling parameters sent with every request."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    temperature: float = 0.7
    top_k: int = Field(default=40, alias="topK")
    top_p: float = Field(default=0.95, alias="topP")
    max_output_tokens: int = Field(default=1024, alias="maxOutputTokens")


class SafetySetting(BaseModel):
    model_config = ConfigDict(frozen=True)

    category: str
    threshold: str


DEFAULT_GENERATION_CONFIG = GenerationConfig()

DEFAULT_SAFETY_SETTINGS: tuple[SafetySetting, ...] = (
    SafetySetting(category="HARM_CATEGORY_HARASSMENT", threshold="BLOCK_MEDIUM_AND_ABOVE"),
    SafetySetting(category="HARM_CATEGORY_HATE_SPEECH", threshold="BLOCK_MEDIUM_AND_ABOVE"),
)


class OutboundRequest(BaseModel):
    """JSON payload for the generateContent endpoint.

    Attributes:
        contents: Content parts, one text part per turn.
        generation_config: Fixed sampling parameters.
        safety_settings: Fixed per-category block thresholds.
    """

    model_config = ConfigDict(populate_by_name=True)

    contents: list[Content]
    generation_config: GenerationConfig = Field(
        default=DEFAULT_GENERATION_CONFIG, alias="generationConfig"
    )
    safety_settings: list[SafetySetting] = Field(
        default_factory=lambda: list(DEFAULT_SAFETY_SETTINGS), alias="safetySettings"
    )

    @classmethod
    def for_text(cls, text: str) -> "OutboundRequest":
        """Build a request carrying a single text part."""
        return cls(contents=[Content(parts=[Part(text=text)])])

    def to_payload(self) -> dict:
        """Serialize using the camelCase field names the API expects."""
        return self.model_dump(by_alias=True)


class CandidatePart(BaseModel):
    text: str | None = None


class CandidateContent(BaseModel):
    parts: list[CandidatePart] | None = None


class Candidate(BaseModel):
    content: CandidateContent | None = None


class GeminiResponse(BaseModel):
    """Subset of a successful generateContent response."""

    candidates: list[Candidate] | None = None

    def first_text(self) -> str | None:
        """Return the first candidate's first text part, if structurally present."""
        if not self.candidates:
            return None
        content = self.candidates[0].content
        if content is None or not content.parts:
            return None
        return content.parts[0].text


class GeminiErrorDetail(BaseModel):
    message: str | None = None
    code: int | str | None = None


class GeminiErrorBody(BaseModel):
    """Subset of an error response body."""

    error: GeminiErrorDetail | None = None


class Success(BaseModel):
    """Normalized assistant reply."""

    kind: Literal["success"] = "success"
    text: str


class Failure(BaseModel):
    """User-facing, already classified failure message."""

    kind: Literal["failure"] = "failure"
    message: str


InboundResult = Annotated[Success | Failure, Field(discriminator="kind")]
