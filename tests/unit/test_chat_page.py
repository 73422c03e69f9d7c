"""Unit tests for chat page constants that drive browser-side behaviour."""

import re

from query_finder.ui.chat_page import ACCEPTED_FILES, SEND_ON_ENTER_JS


class TestSendOnEnter:
    """Enter sends the question, Shift+Enter keeps editing."""

    def test_send_guarded_by_shift(self) -> None:
        """emit() and preventDefault() only run for Enter without Shift."""
        guarded = re.search(r"if \((.*?)\) \{(.*?)\}", SEND_ON_ENTER_JS)

        assert guarded is not None
        condition, body = guarded.groups()
        assert 'e.key === "Enter"' in condition
        assert "!e.shiftKey" in condition
        assert "e.preventDefault()" in body
        assert "emit()" in body

    def test_no_unconditional_emit(self) -> None:
        assert SEND_ON_ENTER_JS.count("emit()") == 1


class TestUploadFilter:
    def test_accepts_pdf_and_text_only(self) -> None:
        accepted = set(ACCEPTED_FILES.split(","))

        assert accepted == {".pdf", ".txt", "application/pdf", "text/plain"}
