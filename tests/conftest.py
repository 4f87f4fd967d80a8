"""Shared fixtures for the flashforge_core test suite."""

import asyncio
import zipfile
from io import BytesIO

import pytest

from flashforge_core.config import Settings
from flashforge_core.generators.base import BaseCardGenerator
from flashforge_core.schemas.cards import Deck, Flashcard

PHOTOSYNTHESIS_NOTES = (
    "Photosynthesis is the process by which green plants convert sunlight "
    "into energy. Chlorophyll absorbs light."
)

DOCX_MIME = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"

_DOCUMENT_XML = """<?xml version="1.0" encoding="UTF-8" standalone="yes"?>
<w:document xmlns:w="http://schemas.openxmlformats.org/wordprocessingml/2006/main">
  <w:body>
{paragraphs}
  </w:body>
</w:document>
"""


def make_docx(paragraphs: list[str]) -> bytes:
    """Build a minimal DOCX package with one run per paragraph."""
    body = "\n".join(
        f'    <w:p><w:r><w:t xml:space="preserve">{text}</w:t></w:r></w:p>'
        for text in paragraphs
    )
    buffer = BytesIO()
    with zipfile.ZipFile(buffer, "w") as package:
        package.writestr("[Content_Types].xml", "<Types/>")
        package.writestr("word/document.xml", _DOCUMENT_XML.format(paragraphs=body))
    return buffer.getvalue()


def make_pdf(text: str) -> bytes:
    """Build a one-page PDF showing ``text`` in Helvetica, with a valid xref."""
    stream = f"BT /F1 12 Tf 72 712 Td ({text}) Tj ET".encode("latin-1")
    objects = [
        b"<< /Type /Catalog /Pages 2 0 R >>",
        b"<< /Type /Pages /Kids [3 0 R] /Count 1 >>",
        b"<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] "
        b"/Contents 4 0 R /Resources << /Font << /F1 5 0 R >> >> >>",
        b"<< /Length %d >>\nstream\n" % len(stream) + stream + b"\nendstream",
        b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica >>",
    ]

    out = bytearray(b"%PDF-1.4\n")
    offsets = []
    for number, body in enumerate(objects, start=1):
        offsets.append(len(out))
        out += b"%d 0 obj\n" % number + body + b"\nendobj\n"

    xref_at = len(out)
    out += b"xref\n0 %d\n" % (len(objects) + 1)
    out += b"0000000000 65535 f \n"
    for offset in offsets:
        out += b"%010d 00000 n \n" % offset
    out += b"trailer\n<< /Size %d /Root 1 0 R >>\n" % (len(objects) + 1)
    out += b"startxref\n%d\n%%%%EOF\n" % xref_at
    return bytes(out)


class StaticGenerator(BaseCardGenerator):
    """Returns a fixed card list and counts calls."""

    name = "static"

    def __init__(self, cards: list[Flashcard]):
        self.cards = cards
        self.calls: list[str] = []

    async def generate(self, text: str) -> list[Flashcard]:
        self.calls.append(text)
        return list(self.cards)


class BlockingGenerator(BaseCardGenerator):
    """Waits for ``release`` before returning one card."""

    name = "blocking"

    def __init__(self) -> None:
        self.started = asyncio.Event()
        self.release = asyncio.Event()

    async def generate(self, text: str) -> list[Flashcard]:
        self.started.set()
        await self.release.wait()
        return [Flashcard.basic(id="card-1", question="Q?", answer="A")]


@pytest.fixture
def settings() -> Settings:
    """Default settings, isolated from the environment's .env file."""
    return Settings(_env_file=None)


@pytest.fixture
def placeholder_settings() -> Settings:
    """Settings that use the reference placeholder extractors."""
    return Settings(_env_file=None, extraction_mode="placeholder")


@pytest.fixture
def sample_deck() -> Deck:
    """A small deck with one card of each type."""
    return Deck(
        cards=[
            Flashcard.basic(id="card-1", question="What is 2 + 2?", answer="4"),
            Flashcard.multiple_choice(
                id="card-2",
                question="Which planet is largest?",
                answer="Jupiter",
                options=["Mars", "Jupiter", "Venus", "Earth"],
                correct_option=1,
            ),
            Flashcard.fill_blank(
                id="card-3",
                question="Water boils at ___ degrees Celsius.",
                answer="100",
            ),
        ],
        source="test",
    )
