"""Text extractors, one per supported upload format.

- text/plain: strict UTF-8 decode
- application/pdf: pdfplumber page text, off the event loop
- DOCX: paragraph text from the OOXML package, off the event loop

With ``extraction_mode="placeholder"`` the binary formats return fixed
reference text instead of parsing.
"""

from typing import Literal

from flashforge_core.errors import UnsupportedTypeError
from flashforge_core.extractors.base import (
    DEFAULT_EXTRACTION_TIMEOUT,
    BaseTextExtractor,
    ProgressReporter,
    ProgressTracker,
    ThreadedExtractor,
)
from flashforge_core.extractors.docx import DocxTextExtractor
from flashforge_core.extractors.pdf import PdfTextExtractor
from flashforge_core.extractors.placeholder import (
    PlaceholderExtractor,
    placeholder_text,
)
from flashforge_core.extractors.plain import PlainTextExtractor
from flashforge_core.extractors.sources import (
    ByteSource,
    BytesSource,
    PathSource,
    guess_mime_type,
    load_upload,
)
from flashforge_core.schemas.uploads import SupportedMimeType


def get_extractor(
    mime_type: str,
    mode: Literal["native", "placeholder"] = "native",
    timeout: float = DEFAULT_EXTRACTION_TIMEOUT,
) -> BaseTextExtractor:
    """Return the extractor for a MIME type.

    Args:
        mime_type: Declared type of the upload
        mode: "native" to parse documents, "placeholder" for reference text
        timeout: Decode timeout for binary formats, in seconds

    Raises:
        UnsupportedTypeError: If no extractor handles the type
    """
    if mime_type == SupportedMimeType.TEXT.value:
        return PlainTextExtractor()
    if mime_type in (SupportedMimeType.PDF.value, SupportedMimeType.DOCX.value):
        if mode == "placeholder":
            return PlaceholderExtractor(mime_type)
        if mime_type == SupportedMimeType.PDF.value:
            return PdfTextExtractor(timeout=timeout)
        return DocxTextExtractor(timeout=timeout)
    raise UnsupportedTypeError(mime_type)


__all__ = [
    "BaseTextExtractor",
    "ThreadedExtractor",
    "ProgressReporter",
    "ProgressTracker",
    "PlainTextExtractor",
    "PdfTextExtractor",
    "DocxTextExtractor",
    "PlaceholderExtractor",
    "placeholder_text",
    "ByteSource",
    "BytesSource",
    "PathSource",
    "guess_mime_type",
    "load_upload",
    "get_extractor",
]
