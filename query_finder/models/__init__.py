"""Pydantic models shared across the application.

Provides type safety and validation for everything that crosses a boundary.

Models:
    - EntryKind / TranscriptEntry: Items shown in the chat transcript
    - RequestState: Lifecycle of one outbound request
    - GenerateContentRequest / GenerateContentResponse: Remote wire format
    - AskRequest / AskResponse / ExtractResponse: HTTP API payloads
"""

from query_finder.models.schemas import (
    AskRequest,
    AskResponse,
    Candidate,
    Content,
    EntryKind,
    ExtractResponse,
    GenerateContentRequest,
    GenerateContentResponse,
    Part,
    RequestState,
    TranscriptEntry,
)

__all__ = [
    "AskRequest",
    "AskResponse",
    "Candidate",
    "Content",
    "EntryKind",
    "ExtractResponse",
    "GenerateContentRequest",
    "GenerateContentResponse",
    "Part",
    "RequestState",
    "TranscriptEntry",
]
