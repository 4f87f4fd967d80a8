"""Validate node: check the upload's type and size."""

from typing import Any

from flashforge_core.config import Settings
from flashforge_core.errors import FlashForgeError
from flashforge_core.pipeline.validate import validate_file
from flashforge_core.utils.logging import get_logger

logger = get_logger(__name__)


def create_validate_node(settings: Settings):
    """Create a validate node bound to the upload size limit.

    Args:
        settings: Library settings

    Returns:
        Node function
    """

    def validate_node(state: dict[str, Any]) -> dict[str, Any]:
        """Validate ``source`` metadata; pasted notes pass straight through."""
        source = state.get("source")
        if source is None:
            if state.get("notes"):
                return {"current_step": "validate", "progress": 30}
            logger.error("Ingest graph invoked without source or notes")
            return {
                "errors": ["No document or notes provided"],
                "error_kind": "empty_input",
                "current_step": "validate",
            }

        try:
            validate_file(source.meta(), max_bytes=settings.max_upload_bytes)
        except FlashForgeError as e:
            logger.warning(f"Upload rejected: {e.message}")
            return {
                "errors": [e.message],
                "error_kind": e.kind,
                "current_step": "validate",
            }

        return {"current_step": "validate", "progress": 30}

    return validate_node
