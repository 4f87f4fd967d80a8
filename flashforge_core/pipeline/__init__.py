"""Ingestion and synthesis stages.

upload -> validate_file -> extract_upload -> synthesize -> Deck
pasted text -> synthesize -> Deck
"""

from flashforge_core.pipeline.ingest import extract_upload
from flashforge_core.pipeline.synthesize import prepare_notes, synthesize
from flashforge_core.pipeline.validate import (
    DEFAULT_MAX_UPLOAD_BYTES,
    SUPPORTED_MIME_TYPES,
    validate_file,
)

__all__ = [
    "DEFAULT_MAX_UPLOAD_BYTES",
    "SUPPORTED_MIME_TYPES",
    "extract_upload",
    "prepare_notes",
    "synthesize",
    "validate_file",
]
