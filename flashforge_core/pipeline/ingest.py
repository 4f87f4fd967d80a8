"""Ingestion: validate an upload, then extract its text."""

from flashforge_core.config import Settings, get_settings
from flashforge_core.extractors import (
    ByteSource,
    ProgressReporter,
    ProgressTracker,
    get_extractor,
    load_upload,
)
from flashforge_core.pipeline.validate import validate_file
from flashforge_core.utils.logging import get_logger, log_exceptions

logger = get_logger(__name__)

# Progress milestones, in percent
VALIDATING = 10
EXTRACTING = 30
EXTRACTED = 90
DONE = 100


@log_exceptions(logger)
async def extract_upload(
    source: ByteSource,
    settings: Settings | None = None,
    progress: ProgressReporter | None = None,
) -> str:
    """Validate and extract one upload.

    Metadata is validated before any bytes are read, and the size limit is
    checked again against the bytes actually read. Extractor progress is
    mapped into the 30-90% band of the overall progress.

    Args:
        source: Where the upload comes from
        settings: Settings override
        progress: Optional callback receiving percentages (0-100)

    Returns:
        Extracted text, non-blank

    Raises:
        ValidationError: If the upload's type or size is rejected
        ExtractionError: If decoding fails or yields no text
    """
    settings = settings or get_settings()
    tracker = ProgressTracker(progress)
    tracker.report(VALIDATING)

    meta = source.meta()
    validate_file(meta, max_bytes=settings.max_upload_bytes)
    logger.info(
        f"Accepted upload {meta.name or '<unnamed>'} "
        f"({meta.mime_type}, {meta.size_bytes} bytes)"
    )
    tracker.report(EXTRACTING)

    upload = await load_upload(source)
    # The content may differ from the declared size
    validate_file(upload, max_bytes=settings.max_upload_bytes)
    extractor = get_extractor(
        upload.mime_type,
        mode=settings.extraction_mode,
        timeout=settings.extraction_timeout,
    )

    def _scaled(value: int) -> None:
        tracker.report(EXTRACTING + (EXTRACTED - EXTRACTING) * value // 100)

    text = await extractor.extract(upload, progress=_scaled)
    tracker.report(DONE)
    return text
