"""DOCX text extractor.

A .docx file is a zip package; the body text lives in ``word/document.xml``
as paragraphs (``w:p``) made of runs holding text (``w:t``), tabs and breaks.
"""

import zipfile
from io import BytesIO
from xml.etree import ElementTree

from flashforge_core.errors import DecodeFailedError
from flashforge_core.extractors.base import ProgressReporter, ThreadedExtractor
from flashforge_core.schemas.uploads import SupportedMimeType
from flashforge_core.utils.logging import get_logger
from flashforge_core.utils.signatures import check_docx_signature

logger = get_logger(__name__)

DOCUMENT_PART = "word/document.xml"
_W = "{http://schemas.openxmlformats.org/wordprocessingml/2006/main}"


def _paragraph_text(paragraph: ElementTree.Element) -> str:
    parts: list[str] = []
    for node in paragraph.iter():
        if node.tag == f"{_W}t":
            parts.append(node.text or "")
        elif node.tag == f"{_W}tab":
            parts.append("\t")
        elif node.tag in (f"{_W}br", f"{_W}cr"):
            parts.append("\n")
    return "".join(parts)


class DocxTextExtractor(ThreadedExtractor):
    """Join paragraph text in document order, one paragraph per line."""

    mime_type = SupportedMimeType.DOCX.value

    def decode_sync(self, data: bytes, report: ProgressReporter) -> str:
        check_docx_signature(data)

        try:
            with zipfile.ZipFile(BytesIO(data)) as package:
                xml = package.read(DOCUMENT_PART)
        except KeyError as e:
            raise DecodeFailedError(f"DOCX package has no {DOCUMENT_PART}") from e
        except zipfile.BadZipFile as e:
            raise DecodeFailedError(f"Could not open DOCX package: {e}") from e
        report(40)

        try:
            root = ElementTree.fromstring(xml)
        except ElementTree.ParseError as e:
            raise DecodeFailedError(f"Malformed DOCX document XML: {e}") from e
        report(70)

        paragraphs = [_paragraph_text(p) for p in root.iter(f"{_W}p")]
        logger.debug(f"Read {len(paragraphs)} DOCX paragraphs")
        return "\n".join(paragraphs)
