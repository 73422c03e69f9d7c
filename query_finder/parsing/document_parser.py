"""Document parsing module using pypdf.

Extracts a single normalized text blob from PDF or plain-text uploads.
"""

import io
import logging
from collections.abc import Iterable, Iterator

from pydantic import BaseModel, Field
from pypdf import PdfReader
from pypdf.errors import PdfReadError

logger = logging.getLogger(__name__)

# Constants
MAX_FILE_SIZE = 10 * 1024 * 1024  # 10MB
PDF_MAGIC_BYTES = b"%PDF"
PDF_CONTENT_TYPE = "application/pdf"
TEXT_CONTENT_TYPE = "text/plain"
SUPPORTED_CONTENT_TYPES = (PDF_CONTENT_TYPE, TEXT_CONTENT_TYPE)


class DocumentParseError(Exception):
    """Raised when a supported document cannot be decoded."""

    pass


class UnsupportedFileTypeError(Exception):
    """Raised when an upload is neither PDF nor plain text."""

    def __init__(self, content_type: str) -> None:
        super().__init__(f"Unsupported file type: {content_type or 'unknown'}")
        self.content_type = content_type


class ExtractedDocument(BaseModel):
    """Text extracted from an uploaded file.

    Attributes:
        filename: Original file name.
        content_type: Normalized MIME type.
        text: Whitespace-trimmed text content.
        pages: Number of pages (1 for plain text).
    """

    filename: str
    content_type: str
    text: str
    pages: int = Field(ge=1)


def normalize_content_type(content_type: str | None) -> str:
    """Lower-case a MIME type and drop parameters such as charset."""
    if not content_type:
        return ""
    return content_type.split(";", 1)[0].strip().lower()


def join_tokens(tokens: Iterable[str]) -> str:
    """Join the text tokens of one page with single spaces."""
    return " ".join(tokens)


def join_pages(pages: Iterable[str]) -> str:
    """Join page texts in order with newlines and trim the result."""
    return "\n".join(pages).strip()


class PageTexts:
    """Lazy, restartable sequence of page texts in page order.

    Each iteration walks the document again from the first page, reading
    one page at a time. A page that cannot be read raises
    DocumentParseError instead of being skipped.
    """

    def __init__(self, reader: PdfReader) -> None:
        self._reader = reader

    def __len__(self) -> int:
        return len(self._reader.pages)

    def __iter__(self) -> Iterator[str]:
        for number, page in enumerate(self._reader.pages, start=1):
            try:
                raw = page.extract_text()
            except Exception as e:
                raise DocumentParseError(
                    f"Failed to extract text from page {number}: {e}"
                ) from e
            yield join_tokens((raw or "").split())


def _validate_bytes(file_content: bytes) -> None:
    """Validate raw upload content before decoding.

    Raises:
        DocumentParseError: If the content is empty or too large.
    """
    if not file_content:
        raise DocumentParseError("Empty file provided")

    if len(file_content) > MAX_FILE_SIZE:
        size_mb = len(file_content) / (1024 * 1024)
        raise DocumentParseError(
            f"File size ({size_mb:.1f}MB) exceeds maximum allowed (10MB)"
        )


def open_pdf(file_content: bytes) -> PageTexts:
    """Open a PDF and return its pages as a lazy text sequence.

    Args:
        file_content: Raw bytes of the PDF file.

    Returns:
        PageTexts over the document's pages.

    Raises:
        DocumentParseError: If the file is invalid, too large, empty, or corrupt.
    """
    _validate_bytes(file_content)

    if not file_content.lstrip()[:10].startswith(PDF_MAGIC_BYTES):
        raise DocumentParseError("Invalid PDF: file does not start with PDF header")

    try:
        reader = PdfReader(io.BytesIO(file_content))
        pages = PageTexts(reader)
        count = len(pages)
    except PdfReadError as e:
        raise DocumentParseError(f"Corrupt or invalid PDF: {e}") from e
    except Exception as e:
        raise DocumentParseError(f"Failed to read PDF: {e}") from e

    if count == 0:
        raise DocumentParseError("PDF contains no pages")

    return pages


def parse_pdf(file_content: bytes) -> tuple[str, int]:
    """Extract the full text of a PDF.

    Returns:
        Tuple of (newline-joined page text, page count).

    Raises:
        DocumentParseError: If the PDF cannot be decoded.
    """
    pages = open_pdf(file_content)
    try:
        text = join_pages(pages)
    except DocumentParseError:
        raise
    except Exception as e:
        raise DocumentParseError(f"Failed to read PDF: {e}") from e
    return text, len(pages)


def parse_text(file_content: bytes) -> str:
    """Decode a UTF-8 text file and trim surrounding whitespace.

    Raises:
        DocumentParseError: If the content is empty, too large or not UTF-8.
    """
    _validate_bytes(file_content)

    try:
        text = file_content.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise DocumentParseError(f"Text file is not valid UTF-8: {e}") from e

    return text.strip()


def extract_document(
    filename: str,
    content_type: str | None,
    file_content: bytes,
) -> ExtractedDocument:
    """Convert an uploaded file into a single context blob.

    Args:
        filename: Name of the uploaded file.
        content_type: Declared MIME type of the upload.
        file_content: Raw file bytes.

    Returns:
        ExtractedDocument with the normalized text.

    Raises:
        UnsupportedFileTypeError: If the type is not PDF or plain text.
        DocumentParseError: If decoding fails or yields no text.
    """
    mime = normalize_content_type(content_type)
    if mime not in SUPPORTED_CONTENT_TYPES:
        raise UnsupportedFileTypeError(mime)

    if mime == PDF_CONTENT_TYPE:
        text, pages = parse_pdf(file_content)
    else:
        text, pages = parse_text(file_content), 1

    if not text:
        raise DocumentParseError(f"{filename} contains no extractable text")

    logger.info(f"Extracted {len(text)} characters from {filename} ({pages} pages)")

    return ExtractedDocument(
        filename=filename,
        content_type=mime,
        text=text,
        pages=pages,
    )
