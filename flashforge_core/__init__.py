"""flashforge-core: turn study notes and documents into flashcard decks.

Uploads are validated, converted to text and handed to a card generator;
pasted notes go straight to the generator. The resulting deck is reviewed
card by card through a small navigation state machine.

    >>> from flashforge_core import StudySession, BytesSource
    >>> session = StudySession()
    >>> await session.generate_from_file(BytesSource(data, "application/pdf"))
    >>> session.face().text
    >>> session.flip()

The same flow is available as a LangGraph pipeline:

    >>> from flashforge_core.graph import build_ingest_graph
    >>> graph = build_ingest_graph()
    >>> result = await graph.ainvoke({"notes": "..."})
"""

from flashforge_core.config import Settings, get_settings
from flashforge_core.errors import (
    DecodeFailedError,
    EmptyContentError,
    EmptyInputError,
    ExtractionError,
    FileTooLargeError,
    FlashForgeError,
    GenerationFailedError,
    NoCardsProducedError,
    SessionBusyError,
    SynthesisError,
    UnsupportedTypeError,
    ValidationError,
)
from flashforge_core.extractors import BytesSource, PathSource
from flashforge_core.pipeline import extract_upload, synthesize, validate_file
from flashforge_core.review import DeckNavigator, NavigatorState, render_card
from flashforge_core.schemas.cards import CardType, Deck, Flashcard
from flashforge_core.session import StudySession

__version__ = "0.1.0"

__all__ = [
    # Entry points
    "StudySession",
    "extract_upload",
    "synthesize",
    "validate_file",
    # Review
    "DeckNavigator",
    "NavigatorState",
    "render_card",
    # Schemas
    "CardType",
    "Deck",
    "Flashcard",
    # Sources
    "BytesSource",
    "PathSource",
    # Settings
    "Settings",
    "get_settings",
    # Errors
    "FlashForgeError",
    "ValidationError",
    "UnsupportedTypeError",
    "FileTooLargeError",
    "ExtractionError",
    "DecodeFailedError",
    "EmptyContentError",
    "SynthesisError",
    "EmptyInputError",
    "GenerationFailedError",
    "NoCardsProducedError",
    "SessionBusyError",
]
