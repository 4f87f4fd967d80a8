"""Synthesis: turn notes into a deck through the configured generator."""

from flashforge_core.config import Settings, get_settings
from flashforge_core.errors import EmptyInputError, NoCardsProducedError
from flashforge_core.generators import BaseCardGenerator, build_generator
from flashforge_core.schemas.cards import Deck
from flashforge_core.utils.hashing import content_hash
from flashforge_core.utils.logging import get_logger
from flashforge_core.utils.text import is_blank

logger = get_logger(__name__)


def prepare_notes(text: str, max_chars: int) -> str:
    """Reject blank notes and cut the rest to ``max_chars`` characters.

    Raises:
        EmptyInputError: If the notes are empty after trimming
    """
    if is_blank(text):
        raise EmptyInputError()

    if len(text) > max_chars:
        logger.info(f"Truncating notes from {len(text)} to {max_chars} characters")
        return text[:max_chars]
    return text


async def synthesize(
    text: str,
    generator: BaseCardGenerator | None = None,
    settings: Settings | None = None,
) -> Deck:
    """Generate a deck from study notes.

    Args:
        text: Notes pasted by the user or extracted from a document
        generator: Strategy to use; built from settings when omitted
        settings: Settings override

    Returns:
        A non-empty deck

    Raises:
        EmptyInputError: If the notes are blank
        GenerationFailedError: If a configured generation service fails
        NoCardsProducedError: If the generator returns no cards
    """
    settings = settings or get_settings()
    notes = prepare_notes(text, settings.max_input_chars)
    generator = generator or build_generator(settings)

    cards = await generator.generate(notes)
    if not cards:
        logger.error(f"{generator.name} generator returned no cards")
        raise NoCardsProducedError()

    deck = Deck(cards=cards, source=generator.name, source_hash=content_hash(notes))
    logger.info(f"Synthesized {len(deck)} cards with {generator.name} generator")
    return deck
