"""Chat state and request orchestration.

Owns the transcript, the pending document context and the busy flag, and
exposes the only operations allowed to change them.

Responsibilities:
    - Building the outbound prompt from context and question
    - Enforcing at most one in-flight request
    - Appending question, answer and info entries in order
    - Applying document uploads as the pending context

The presentation layer reads ChatSession and calls ChatController.
"""

from query_finder.chat.controller import (
    APOLOGY_MESSAGE,
    FILE_ONLY_PLACEHOLDER,
    SUGGESTIONS,
    UNSUPPORTED_FILE_MESSAGE,
    AnswerGenerator,
    ChatController,
    build_prompt,
)
from query_finder.chat.session import ChatSession

__all__ = [
    "APOLOGY_MESSAGE",
    "FILE_ONLY_PLACEHOLDER",
    "SUGGESTIONS",
    "UNSUPPORTED_FILE_MESSAGE",
    "AnswerGenerator",
    "ChatController",
    "ChatSession",
    "build_prompt",
]
