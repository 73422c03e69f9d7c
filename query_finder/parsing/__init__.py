"""Document ingestion for conversation context.

Turns an uploaded file into a single text blob that can be prefixed to a
question.

Responsibilities:
    - Content-type gating (PDF and plain text only)
    - PDF page-by-page text extraction with pypdf
    - Plain-text decoding
    - Whitespace normalization of the resulting blob

Failures surface as explicit exceptions, never as truncated text.
"""

from query_finder.parsing.document_parser import (
    MAX_FILE_SIZE,
    PDF_CONTENT_TYPE,
    SUPPORTED_CONTENT_TYPES,
    TEXT_CONTENT_TYPE,
    DocumentParseError,
    ExtractedDocument,
    PageTexts,
    UnsupportedFileTypeError,
    extract_document,
    join_pages,
    join_tokens,
    normalize_content_type,
    open_pdf,
    parse_pdf,
    parse_text,
)

__all__ = [
    "MAX_FILE_SIZE",
    "PDF_CONTENT_TYPE",
    "SUPPORTED_CONTENT_TYPES",
    "TEXT_CONTENT_TYPE",
    "DocumentParseError",
    "ExtractedDocument",
    "PageTexts",
    "UnsupportedFileTypeError",
    "extract_document",
    "join_pages",
    "join_tokens",
    "normalize_content_type",
    "open_pdf",
    "parse_pdf",
    "parse_text",
]
