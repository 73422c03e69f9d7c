"""JSON endpoints for document extraction and single-shot questions.

Both endpoints are stateless: no transcript or pending context is kept
between requests.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, UploadFile, status

from query_finder.chat.controller import AnswerGenerator, build_prompt
from query_finder.generation.client import GenerationError, get_generation_client
from query_finder.models.schemas import AskRequest, AskResponse, ExtractResponse
from query_finder.parsing.document_parser import (
    MAX_FILE_SIZE,
    DocumentParseError,
    UnsupportedFileTypeError,
    extract_document,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["api"])


def get_answer_generator() -> AnswerGenerator:
    """Dependency returning the configured generation client.

    Raises:
        HTTPException: 503 if no API key is configured.
    """
    try:
        return get_generation_client()
    except ValueError as e:
        logger.error(f"Generation client unavailable: {e}")
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Generation service is not configured",
        ) from e


async def _read_and_validate_size(file: UploadFile) -> bytes:
    """Read file content and validate size.

    Raises:
        HTTPException: 413 if file exceeds size limit.
    """
    content = await file.read()

    if len(content) > MAX_FILE_SIZE:
        size_mb = len(content) / (1024 * 1024)
        raise HTTPException(
            status_code=status.HTTP_413_CONTENT_TOO_LARGE,
            detail=f"File size ({size_mb:.1f}MB) exceeds maximum allowed (10MB)",
        )

    return content


@router.post("/extract", response_model=ExtractResponse)
async def extract(file: UploadFile) -> ExtractResponse:
    """Extract the text of an uploaded PDF or plain-text file.

    Raises:
        400: Empty, corrupt or undecodable file.
        413: File exceeds 10MB limit.
        415: File is neither PDF nor plain text.
    """
    filename = file.filename or "upload"
    content = await _read_and_validate_size(file)

    try:
        document = extract_document(filename, file.content_type, content)
    except UnsupportedFileTypeError as e:
        raise HTTPException(
            status_code=status.HTTP_415_UNSUPPORTED_MEDIA_TYPE,
            detail="Only PDF and plain-text files are accepted",
        ) from e
    except DocumentParseError as e:
        logger.warning(f"Parse error for {filename}: {e}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        ) from e

    return ExtractResponse(
        filename=document.filename,
        content_type=document.content_type,
        pages=document.pages,
        characters=len(document.text),
        text=document.text,
    )


@router.post("/ask", response_model=AskResponse)
async def ask(
    request: AskRequest,
    generator: AnswerGenerator = Depends(get_answer_generator),
) -> AskResponse:
    """Answer one question, prefixed with the given context if any.

    Raises:
        422: Both question and context are empty.
        502: The generation service failed or returned an unexpected shape.
    """
    if not request.question and not request.context:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail="Either question or context is required",
        )

    prompt = build_prompt(request.question, request.context)

    try:
        answer = await generator.generate(prompt)
    except GenerationError as e:
        logger.error(f"Answer generation failed: {e}")
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="Generation service request failed",
        ) from e

    return AskResponse(answer=answer)
