"""Application state for one chat page."""

from query_finder.models.schemas import EntryKind, RequestState, TranscriptEntry


class ChatSession:
    """Transcript, pending context and request state of one page.

    Read freely by the presentation layer; mutated only through
    ChatController.
    """

    def __init__(self) -> None:
        self._entries: list[TranscriptEntry] = []
        self.pending_context: str | None = None
        self.context_filename: str | None = None
        self.state: RequestState = RequestState.IDLE
        self.last_outcome: RequestState | None = None

    @property
    def entries(self) -> tuple[TranscriptEntry, ...]:
        return tuple(self._entries)

    @property
    def is_busy(self) -> bool:
        """True exactly while a request is in flight."""
        return self.state == RequestState.SENDING

    @property
    def has_context(self) -> bool:
        return bool(self.pending_context)

    def append(self, kind: EntryKind, content: str) -> TranscriptEntry:
        entry = TranscriptEntry(kind=kind, content=content)
        self._entries.append(entry)
        return entry

    def context_preview(self, limit: int = 100) -> str:
        """First characters of the pending context for display."""
        if not self.pending_context:
            return ""
        return f"{self.pending_context[:limit]}..."
