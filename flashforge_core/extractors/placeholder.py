"""Deterministic stand-in for binary document decoding.

Returns a fixed sentence per format instead of the document's text. Used as
the reference behavior in tests and demos where no parser should run.
"""

from flashforge_core.extractors.base import BaseTextExtractor, ProgressTracker
from flashforge_core.schemas.uploads import SupportedMimeType

PLACEHOLDER_TEMPLATE = (
    "This is the extracted text from your {label} document. In a real "
    "application, we would use a proper {label} parsing library to extract the "
    "actual text content from your document."
)

_LABELS = {
    SupportedMimeType.PDF.value: "PDF",
    SupportedMimeType.DOCX.value: "DOCX",
}


def placeholder_text(mime_type: str) -> str:
    """Return the fixed reference text for a binary MIME type."""
    return PLACEHOLDER_TEMPLATE.format(label=_LABELS[mime_type])


class PlaceholderExtractor(BaseTextExtractor):
    """Ignore the bytes and return the reference sentence for ``mime_type``."""

    def __init__(self, mime_type: str):
        if mime_type not in _LABELS:
            raise ValueError(f"No placeholder text for {mime_type}")
        self.mime_type = mime_type

    async def decode(self, data: bytes, tracker: ProgressTracker) -> str:
        tracker.report(50)
        return placeholder_text(self.mime_type)
