"""Base card generator interface."""

from abc import ABC, abstractmethod

from flashforge_core.schemas.cards import Flashcard


class BaseCardGenerator(ABC):
    """Abstract base class for flashcard generation strategies.

    Every strategy returns cards with the same shape contract, so callers
    never need to know which one produced a deck.
    """

    name: str = "generator"

    @abstractmethod
    async def generate(self, text: str) -> list[Flashcard]:
        """Generate flashcards from study notes.

        Args:
            text: Non-empty notes, already truncated to the input limit

        Returns:
            Cards in presentation order

        Raises:
            GenerationFailedError: If a remote service times out or fails
        """
        pass
