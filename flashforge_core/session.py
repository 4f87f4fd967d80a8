"""One user's study session: current notes, deck and review position."""

import asyncio
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path

from flashforge_core.config import Settings, get_settings
from flashforge_core.errors import SessionBusyError
from flashforge_core.exporters import export_json
from flashforge_core.extractors import ByteSource, ProgressReporter
from flashforge_core.generators import BaseCardGenerator, build_generator
from flashforge_core.pipeline import extract_upload, synthesize
from flashforge_core.review import CardFace, DeckNavigator, NavigatorState, render_card
from flashforge_core.schemas.cards import Deck, Flashcard
from flashforge_core.utils.logging import get_logger

logger = get_logger(__name__)


class StudySession:
    """Owns a deck and its navigator for a single user.

    Only one upload or generation runs at a time; a second request while one
    is in flight raises ``SessionBusyError``. The deck is swapped only after
    a generation succeeds, so a failed attempt leaves the previous deck and
    review position as they were.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        generator: BaseCardGenerator | None = None,
    ):
        self.settings = settings or get_settings()
        self.generator = generator or build_generator(self.settings)
        self.navigator = DeckNavigator()
        self.notes = ""
        self._lock = asyncio.Lock()

    @property
    def deck(self) -> Deck:
        return self.navigator.deck

    @property
    def state(self) -> NavigatorState:
        return self.navigator.state

    @property
    def current_card(self) -> Flashcard | None:
        return self.navigator.current_card

    @property
    def busy(self) -> bool:
        return self._lock.locked()

    @asynccontextmanager
    async def _exclusive(self) -> AsyncIterator[None]:
        if self._lock.locked():
            raise SessionBusyError()
        async with self._lock:
            yield

    async def import_file(
        self,
        source: ByteSource,
        progress: ProgressReporter | None = None,
    ) -> str:
        """Extract an upload's text into the session notes.

        Raises:
            SessionBusyError: If another load is running
            ValidationError: If the upload is rejected
            ExtractionError: If no text can be extracted
        """
        async with self._exclusive():
            text = await extract_upload(source, self.settings, progress=progress)
            self.notes = text
            return text

    async def generate(self, text: str | None = None) -> Deck:
        """Generate a deck from ``text`` (or the current notes) and load it.

        Raises:
            SessionBusyError: If another load is running
            SynthesisError: If no deck could be generated
        """
        async with self._exclusive():
            notes = self.notes if text is None else text
            deck = await synthesize(
                notes, generator=self.generator, settings=self.settings
            )
            self.notes = notes
            self.navigator.load_deck(deck)
            logger.info(f"Loaded deck of {len(deck)} cards")
            return deck

    async def generate_from_file(
        self,
        source: ByteSource,
        progress: ProgressReporter | None = None,
    ) -> Deck:
        """Import an upload and generate a deck from it."""
        await self.import_file(source, progress=progress)
        return await self.generate()

    def load_deck(self, deck: Deck) -> NavigatorState:
        """Replace the deck directly, e.g. with an imported one."""
        return self.navigator.load_deck(deck)

    def next(self) -> NavigatorState:
        return self.navigator.next()

    def previous(self) -> NavigatorState:
        return self.navigator.previous()

    def flip(self) -> NavigatorState:
        return self.navigator.flip()

    def face(self) -> CardFace | None:
        """Render the current card, or None before any deck is loaded."""
        return render_card(self.deck, self.state)

    def export(self, output: str | Path | None = None) -> str:
        """Export the loaded deck as JSON.

        Raises:
            ValueError: If no deck is loaded
        """
        if self.deck.is_empty:
            raise ValueError("No flashcards to export")
        return export_json(self.deck, output=output)
