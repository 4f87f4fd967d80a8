"""Utility functions."""

from flashforge_core.utils.hashing import content_hash
from flashforge_core.utils.logging import get_logger, log_exceptions
from flashforge_core.utils.retry import RateLimitError, with_retry
from flashforge_core.utils.signatures import (
    check_docx_signature,
    check_pdf_signature,
    pdf_version,
)
from flashforge_core.utils.text import BOM, is_blank

__all__ = [
    "content_hash",
    "get_logger",
    "log_exceptions",
    "RateLimitError",
    "with_retry",
    "check_docx_signature",
    "check_pdf_signature",
    "pdf_version",
    "BOM",
    "is_blank",
]
