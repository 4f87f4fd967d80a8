"""PDF text extractor backed by pdfplumber."""

from io import BytesIO

from flashforge_core.errors import DecodeFailedError
from flashforge_core.extractors.base import ProgressReporter, ThreadedExtractor
from flashforge_core.schemas.uploads import SupportedMimeType
from flashforge_core.utils.logging import get_logger
from flashforge_core.utils.signatures import check_pdf_signature, pdf_version

logger = get_logger(__name__)

# Share of the progress bar spent walking pages
_PAGE_PROGRESS_START = 10
_PAGE_PROGRESS_END = 95


class PdfTextExtractor(ThreadedExtractor):
    """Reconstruct page text in reading order, dropping layout and styling."""

    mime_type = SupportedMimeType.PDF.value

    def decode_sync(self, data: bytes, report: ProgressReporter) -> str:
        check_pdf_signature(data)
        logger.debug(f"Decoding PDF version {pdf_version(data)} ({len(data)} bytes)")

        import pdfplumber

        report(_PAGE_PROGRESS_START)
        pages: list[str] = []
        try:
            with pdfplumber.open(BytesIO(data)) as pdf:
                total = len(pdf.pages) or 1
                for i, page in enumerate(pdf.pages, start=1):
                    text = (page.extract_text() or "").strip()
                    if text:
                        pages.append(text)
                    span = _PAGE_PROGRESS_END - _PAGE_PROGRESS_START
                    report(_PAGE_PROGRESS_START + span * i // total)
        except Exception as e:
            raise DecodeFailedError(f"Could not read PDF: {e}") from e

        logger.debug(f"Read text from {len(pages)} PDF pages")
        return "\n\n".join(pages)
