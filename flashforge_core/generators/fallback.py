"""Deterministic offline card generator.

Always yields three fixed baseline cards, one of each type. When the notes
contain at least five candidate terms, two more cards are built from those
terms, giving exactly 3 or exactly 5 cards.
"""

from flashforge_core.generators.base import BaseCardGenerator
from flashforge_core.schemas.cards import Flashcard
from flashforge_core.utils.logging import get_logger
from flashforge_core.utils.text import BOM

logger = get_logger(__name__)

MIN_TERM_LENGTH = 5
DEFAULT_MAX_TERMS = 20
CONTENT_CARD_MIN_TERMS = 5
NONE_OF_THE_ABOVE = "None of the above"


def candidate_terms(text: str, limit: int = DEFAULT_MAX_TERMS) -> list[str]:
    """Pick distinct whitespace-separated tokens longer than four characters.

    Tokens keep their punctuation and case; order is first appearance.
    Byte order marks are dropped before splitting.

    Args:
        text: Source notes
        limit: Maximum number of terms returned

    Returns:
        Up to ``limit`` terms
    """
    words = [
        word
        for word in text.replace(BOM, "").split()
        if len(word) >= MIN_TERM_LENGTH
    ]
    return list(dict.fromkeys(words))[:limit]


def baseline_cards() -> list[Flashcard]:
    """The three cards emitted for any input."""
    return [
        Flashcard.basic(
            id="card-1",
            question="What is the capital of France?",
            answer="Paris",
        ),
        Flashcard.multiple_choice(
            id="card-2",
            question="Which of the following is NOT a primary color?",
            answer="Green is a secondary color formed by mixing blue and yellow.",
            options=["Red", "Blue", "Green", "Yellow"],
            correct_option=2,
        ),
        Flashcard.fill_blank(
            id="card-3",
            question=(
                "The process of plants making their own food using sunlight "
                "is called _______."
            ),
            answer="photosynthesis",
        ),
    ]


def term_cards(terms: list[str]) -> list[Flashcard]:
    """Two cards built from the first five terms; empty with fewer terms."""
    if len(terms) < CONTENT_CARD_MIN_TERMS:
        return []

    return [
        Flashcard.basic(
            id="card-4",
            question=(
                f'What is the significance of "{terms[0]}" in the context of '
                "the study material?"
            ),
            answer=(
                f'"{terms[0]}" is an important concept that relates to the main '
                "themes discussed in the material."
            ),
        ),
        Flashcard.multiple_choice(
            id="card-5",
            question=(
                f'Which of the following terms is most closely related to "{terms[1]}"?'
            ),
            answer=(
                f'"{terms[2]}" is most closely related to "{terms[1]}" as they '
                "both address similar concepts."
            ),
            options=[terms[2], terms[3], terms[4], NONE_OF_THE_ABOVE],
            correct_option=0,
        ),
    ]


class FallbackGenerator(BaseCardGenerator):
    """Offline generator with a fixed 3-or-5 card output."""

    name = "fallback"

    def __init__(self, max_terms: int = DEFAULT_MAX_TERMS):
        self.max_terms = max_terms

    async def generate(self, text: str) -> list[Flashcard]:
        terms = candidate_terms(text, limit=self.max_terms)
        cards = baseline_cards() + term_cards(terms)
        logger.debug(f"Fallback generator: {len(terms)} terms, {len(cards)} cards")
        return cards
