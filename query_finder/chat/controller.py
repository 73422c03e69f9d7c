"""Request orchestration for the chat page.

The controller builds one prompt per submission, calls the answer
generator once, and records the exchange. State transitions per request:

    idle -> sending -> (answered | failed) -> idle

The busy check happens synchronously before the first await, so on a
single event loop a second submission can never slip in while one is
pending.
"""

import asyncio
import logging
from collections.abc import Callable
from typing import Protocol

from query_finder.chat.session import ChatSession
from query_finder.models.schemas import EntryKind, RequestState, TranscriptEntry
from query_finder.parsing.document_parser import ExtractedDocument, extract_document

logger = logging.getLogger(__name__)

APOLOGY_MESSAGE = "Sorry - Something went wrong. Please try again!"
FILE_ONLY_PLACEHOLDER = "Using uploaded file content"
UNSUPPORTED_FILE_MESSAGE = "Unsupported file type. Please upload a PDF or text file."
SUGGESTIONS = (
    "General knowledge",
    "Technical questions",
    "Writing assistance",
    "Problem solving",
)


class AnswerGenerator(Protocol):
    """Anything that turns a prompt into answer text."""

    async def generate(self, prompt: str) -> str: ...


def build_prompt(question: str, context: str | None) -> str:
    """Prefix the question with document context when there is any."""
    if context:
        return f"{context}\n\nQuestion: {question}"
    return question


class ChatController:
    """Owns a ChatSession and performs every mutation on it."""

    def __init__(
        self,
        generator: AnswerGenerator,
        session: ChatSession | None = None,
        on_change: Callable[[], None] | None = None,
    ) -> None:
        self.session = session or ChatSession()
        self._generator = generator
        self._on_change = on_change

    def _changed(self) -> None:
        if self._on_change is not None:
            self._on_change()

    async def submit(self, question: str = "") -> TranscriptEntry | None:
        """Send a question, with any pending context, and record the answer.

        Args:
            question: Text typed by the user or a suggestion label.

        Returns:
            The answer entry, or None when nothing was sent because both
            question and context are empty or a request is in flight.
        """
        session = self.session
        question = question.strip()

        if session.is_busy:
            logger.warning("Submission refused: a request is already in flight")
            return None

        if not question and not session.has_context:
            return None

        prompt = build_prompt(question, session.pending_context)

        session.state = RequestState.SENDING
        session.append(EntryKind.QUESTION, question or FILE_ONLY_PLACEHOLDER)
        self._changed()

        try:
            answer = await self._generator.generate(prompt)
            entry = session.append(EntryKind.ANSWER, answer)
            session.last_outcome = RequestState.ANSWERED
        except Exception as e:
            # Includes empty answers, which cannot become an entry
            logger.error(f"Answer generation failed: {e}")
            entry = session.append(EntryKind.ANSWER, APOLOGY_MESSAGE)
            session.last_outcome = RequestState.FAILED
        finally:
            session.state = RequestState.IDLE

        self._changed()
        return entry

    async def upload(
        self,
        filename: str,
        content_type: str | None,
        file_content: bytes,
    ) -> ExtractedDocument:
        """Replace the pending context with the text of an uploaded file.

        Extraction runs in a worker thread; the session is only touched
        back on the event loop once the text is complete.

        Raises:
            UnsupportedFileTypeError: If the file is not PDF or plain text.
            DocumentParseError: If the file cannot be decoded.
        """
        document = await asyncio.to_thread(
            extract_document, filename, content_type, file_content
        )

        self.session.pending_context = document.text
        self.session.context_filename = document.filename
        self.session.append(EntryKind.INFO, f"Uploaded file: {document.filename}")
        logger.info(f"Pending context replaced by {document.filename}")
        self._changed()
        return document

    def clear_context(self) -> None:
        """Drop the pending context so later questions go out alone."""
        if self.session.pending_context is None:
            return
        self.session.pending_context = None
        self.session.context_filename = None
        self._changed()
