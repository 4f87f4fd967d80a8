"""Synthesize node: generate the deck from notes."""

from typing import Any

from flashforge_core.config import Settings
from flashforge_core.errors import FlashForgeError
from flashforge_core.generators.base import BaseCardGenerator
from flashforge_core.pipeline.synthesize import synthesize
from flashforge_core.utils.logging import get_logger

logger = get_logger(__name__)


def create_synthesize_node(generator: BaseCardGenerator, settings: Settings):
    """Create a synthesize node with the given generator.

    Args:
        generator: Card generation strategy
        settings: Library settings

    Returns:
        Async node function
    """

    async def synthesize_node(state: dict[str, Any]) -> dict[str, Any]:
        """Generate ``deck`` from ``notes``."""
        try:
            deck = await synthesize(
                state.get("notes", ""), generator=generator, settings=settings
            )
        except FlashForgeError as e:
            logger.error(f"Synthesis failed: {e.message}")
            return {
                "errors": [e.message],
                "error_kind": e.kind,
                "current_step": "synthesize",
            }

        return {"deck": deck, "current_step": "synthesize", "progress": 100}

    return synthesize_node
