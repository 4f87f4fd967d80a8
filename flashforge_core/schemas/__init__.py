"""Data schemas for the pipeline."""

from flashforge_core.schemas.cards import CardType, Deck, Flashcard
from flashforge_core.schemas.uploads import FileMeta, SupportedMimeType, UploadedFile

__all__ = [
    # Cards
    "CardType",
    "Deck",
    "Flashcard",
    # Uploads
    "FileMeta",
    "SupportedMimeType",
    "UploadedFile",
]
