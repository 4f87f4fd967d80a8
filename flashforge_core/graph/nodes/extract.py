"""Extract node: turn the validated upload into notes."""

from typing import Any

from flashforge_core.config import Settings
from flashforge_core.errors import FlashForgeError
from flashforge_core.extractors import get_extractor, load_upload
from flashforge_core.pipeline.validate import validate_file
from flashforge_core.utils.logging import get_logger

logger = get_logger(__name__)


def create_extract_node(settings: Settings):
    """Create an extract node using the configured extraction mode.

    Args:
        settings: Library settings

    Returns:
        Async node function
    """

    async def extract_node(state: dict[str, Any]) -> dict[str, Any]:
        """Read and decode ``source`` into ``notes``."""
        source = state["source"]

        try:
            upload = await load_upload(source)
            validate_file(upload, max_bytes=settings.max_upload_bytes)
            extractor = get_extractor(
                upload.mime_type,
                mode=settings.extraction_mode,
                timeout=settings.extraction_timeout,
            )
            notes = await extractor.extract(upload)
        except FlashForgeError as e:
            logger.error(f"Extraction failed: {e.message}")
            return {
                "errors": [e.message],
                "error_kind": e.kind,
                "current_step": "extract",
            }

        return {"notes": notes, "current_step": "extract", "progress": 90}

    return extract_node
