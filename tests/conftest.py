"""Pytest fixtures and shared test configuration.

Fixtures:
    - pdf_factory: Builds small PDFs with known page text
    - fake_generator: Answer generator double recording prompts
    - generation_config: Config with a test API key
"""

import asyncio
from collections.abc import Callable

import pytest

from query_finder.generation.config import GenerationConfig


def _escape(text: str) -> str:
    return text.replace("\\", "\\\\").replace("(", "\\(").replace(")", "\\)")


def build_pdf(pages: list[list[str]]) -> bytes:
    """Build a PDF whose pages hold the given lines of Helvetica text.

    Each inner list is one page; each string is drawn on its own line.
    """
    count = len(pages)
    kids = " ".join(f"{4 + 2 * i} 0 R" for i in range(count))

    objects: list[bytes] = [
        b"<< /Type /Catalog /Pages 2 0 R >>",
        f"<< /Type /Pages /Kids [{kids}] /Count {count} >>".encode(),
        b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica >>",
    ]

    for i, lines in enumerate(pages):
        objects.append(
            (
                "<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] "
                "/Resources << /Font << /F1 3 0 R >> >> "
                f"/Contents {5 + 2 * i} 0 R >>"
            ).encode()
        )
        ops = ["BT", "/F1 12 Tf", "72 720 Td"]
        for j, line in enumerate(lines):
            if j:
                ops.append("0 -24 Td")
            ops.append(f"({_escape(line)}) Tj")
        ops.append("ET")
        stream = "\n".join(ops).encode("latin-1")
        objects.append(
            b"<< /Length %d >>\nstream\n" % len(stream) + stream + b"\nendstream"
        )

    out = bytearray(b"%PDF-1.4\n")
    offsets: list[int] = []
    for number, body in enumerate(objects, start=1):
        offsets.append(len(out))
        out += b"%d 0 obj\n" % number + body + b"\nendobj\n"

    xref_offset = len(out)
    out += b"xref\n0 %d\n" % (len(objects) + 1)
    out += b"0000000000 65535 f \n"
    for offset in offsets:
        out += b"%010d 00000 n \n" % offset
    out += b"trailer\n<< /Size %d /Root 1 0 R >>\n" % (len(objects) + 1)
    out += b"startxref\n%d\n%%%%EOF\n" % xref_offset
    return bytes(out)


class FakeGenerator:
    """Answer generator that records prompts.

    Args:
        answer: Text returned by generate().
        error: Exception raised by generate() instead of answering.
        gate: Event generate() waits on before answering.
    """

    def __init__(
        self,
        answer: str = "Paris",
        error: Exception | None = None,
        gate: asyncio.Event | None = None,
    ) -> None:
        self.answer = answer
        self.error = error
        self.gate = gate
        self.prompts: list[str] = []

    async def generate(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.gate is not None:
            await self.gate.wait()
        if self.error is not None:
            raise self.error
        return self.answer


@pytest.fixture
def pdf_factory() -> Callable[[list[list[str]]], bytes]:
    """Return the PDF builder."""
    return build_pdf


@pytest.fixture
def fake_generator() -> FakeGenerator:
    """Generator answering "Paris" to everything."""
    return FakeGenerator()


@pytest.fixture
def generation_config() -> GenerationConfig:
    """Config pinned to defaults with a test key."""
    return GenerationConfig(
        api_key="test-key",
        base_url="https://example.test/v1beta",
        model_name="gemini-2.0-flash-exp",
    )
