from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class EntryKind(str, Enum):
    """Kinds of transcript entries."""

    QUESTION = "question"
    ANSWER = "answer"
    INFO = "info"


class RequestState(str, Enum):
    """Lifecycle of a single outbound request."""

    IDLE = "idle"
    SENDING = "sending"
    ANSWERED = "answered"
    FAILED = "failed"


class TranscriptEntry(BaseModel):
    """A single immutable entry in the chat transcript.

    Attributes:
        kind: Whether this is a question, an answer or an info notice.
        content: The literal text shown to the user.
    """

    model_config = ConfigDict(frozen=True)

    kind: EntryKind
    content: str = Field(..., min_length=1)


class Part(BaseModel):
    text: str


class Content(BaseModel):
    parts: list[Part] = Field(..., min_length=1)


class GenerateContentRequest(BaseModel):
    """Request body for the generateContent endpoint.

    Serializes to ``{"contents": [{"parts": [{"text": <prompt>}]}]}``.
    """

    contents: list[Content]

    @classmethod
    def from_prompt(cls, prompt: str) -> "GenerateContentRequest":
        """Wrap a prompt string as a single-part, single-content request."""
        return cls(contents=[Content(parts=[Part(text=prompt)])])


class Candidate(BaseModel):
    content: Content


class GenerateContentResponse(BaseModel):
    """Response body of the generateContent endpoint.

    Only the fields the application reads are modelled; extra fields such
    as ``usageMetadata`` are ignored.

    Attributes:
        candidates: Proposed answers, at least one is required.
    """

    candidates: list[Candidate] = Field(..., min_length=1)

    @property
    def text(self) -> str:
        """Text of the first part of the first candidate."""
        return self.candidates[0].content.parts[0].text


class AskRequest(BaseModel):
    """Request payload for the stateless ask endpoint.

    Attributes:
        question: User's question, may be empty when context is given.
        context: Optional background text prefixed to the question.
    """

    question: str = ""
    context: str | None = None

    @field_validator("question", "context", mode="before")
    @classmethod
    def strip_text(cls, v: str | None) -> str | None:
        """Strip whitespace before validation."""
        if isinstance(v, str):
            return v.strip()
        return v


class AskResponse(BaseModel):
    """Answer returned by the ask endpoint."""

    answer: str


class ExtractResponse(BaseModel):
    """Result of extracting text from an uploaded document.

    Attributes:
        filename: Name of the uploaded file.
        content_type: Normalized MIME type of the upload.
        pages: Number of pages (1 for plain text).
        characters: Length of the extracted text.
        text: The extracted, normalized text.
    """

    filename: str
    content_type: str
    pages: int = Field(ge=1)
    characters: int = Field(ge=0)
    text: str
