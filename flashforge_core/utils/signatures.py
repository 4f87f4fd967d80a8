"""Magic-byte checks for the binary upload formats."""

from flashforge_core.errors import DecodeFailedError
from flashforge_core.utils.logging import get_logger

logger = get_logger(__name__)

PDF_MAGIC = b"%PDF"
# DOCX files are OOXML zip containers
ZIP_MAGIC = b"PK\x03\x04"


def check_pdf_signature(data: bytes) -> None:
    """Ensure data starts like a PDF.

    Args:
        data: Raw file bytes

    Raises:
        DecodeFailedError: If the bytes cannot be a PDF
    """
    if not data:
        raise DecodeFailedError("Empty file data")

    if len(data) < len(PDF_MAGIC):
        raise DecodeFailedError("File too small to be a valid PDF")

    if not data.startswith(PDF_MAGIC):
        raise DecodeFailedError(
            f"Invalid PDF: file does not start with PDF magic bytes. Got: {data[:4]!r}"
        )

    # Trailer is optional for many readers, only note its absence
    if b"%%EOF" not in data[-1024:]:
        logger.warning("PDF does not contain %%EOF marker near end of file")


def check_docx_signature(data: bytes) -> None:
    """Ensure data starts like a zip container.

    Raises:
        DecodeFailedError: If the bytes cannot be a DOCX package
    """
    if not data:
        raise DecodeFailedError("Empty file data")

    if not data.startswith(ZIP_MAGIC):
        raise DecodeFailedError(
            f"Invalid DOCX: file is not a zip container. Got: {data[:4]!r}"
        )


def pdf_version(data: bytes) -> str | None:
    """Read the version from a ``%PDF-x.y`` header, if present."""
    try:
        header = data[:20].decode("latin-1")
    except UnicodeDecodeError:
        return None
    if not header.startswith("%PDF-"):
        return None

    end = header.find("\n")
    if end == -1:
        end = header.find("\r")
    if end == -1:
        end = 8
    return header[5:end].strip() or None
