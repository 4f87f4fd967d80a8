"""Flashcard and deck schemas."""

from collections.abc import Sequence
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

MULTIPLE_CHOICE_OPTION_COUNT = 4


class CardType(str, Enum):
    """Kinds of flashcard; the kind fixes which fields a card carries."""

    BASIC = "basic"
    MULTIPLE_CHOICE = "multiple-choice"
    FILL_BLANK = "fill-blank"

    @property
    def label(self) -> str:
        """Human readable name shown on the card face."""
        return _TYPE_LABELS[self]


_TYPE_LABELS = {
    CardType.BASIC: "Basic",
    CardType.MULTIPLE_CHOICE: "Multiple Choice",
    CardType.FILL_BLANK: "Fill in the Blank",
}


class Flashcard(BaseModel):
    """A single question/answer card.

    ``options`` and ``correct_option`` exist only on multiple-choice cards;
    the validator rejects any other pairing, so an instance is always
    well-shaped.
    """

    id: str = Field(..., min_length=1, description="Unique id within a deck")
    question: str = Field(..., description="Question/prompt side")
    answer: str = Field(..., description="Answer side")
    type: CardType = Field(..., description="Card kind")
    options: tuple[str, ...] | None = Field(
        None, description="Exactly four choices, multiple-choice only"
    )
    correct_option: int | None = Field(
        None,
        alias="correctOption",
        description="Index of the right choice, multiple-choice only",
    )

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @field_validator("question", "answer")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be empty")
        return value

    @model_validator(mode="after")
    def _check_shape(self) -> "Flashcard":
        if self.type is CardType.MULTIPLE_CHOICE:
            if self.options is None or self.correct_option is None:
                raise ValueError(
                    "multiple-choice cards require options and correctOption"
                )
            if len(self.options) != MULTIPLE_CHOICE_OPTION_COUNT:
                raise ValueError(
                    f"multiple-choice cards need exactly "
                    f"{MULTIPLE_CHOICE_OPTION_COUNT} options, got {len(self.options)}"
                )
            if not 0 <= self.correct_option < len(self.options):
                raise ValueError(
                    f"correctOption {self.correct_option} is out of range"
                )
        elif self.options is not None or self.correct_option is not None:
            raise ValueError(
                f"{self.type.value} cards must not carry options or correctOption"
            )
        return self

    @classmethod
    def basic(cls, id: str, question: str, answer: str) -> "Flashcard":
        """Build a plain question/answer card."""
        return cls(id=id, question=question, answer=answer, type=CardType.BASIC)

    @classmethod
    def fill_blank(cls, id: str, question: str, answer: str) -> "Flashcard":
        """Build a cloze-style card; the question holds the blank."""
        return cls(id=id, question=question, answer=answer, type=CardType.FILL_BLANK)

    @classmethod
    def multiple_choice(
        cls,
        id: str,
        question: str,
        answer: str,
        options: Sequence[str],
        correct_option: int,
    ) -> "Flashcard":
        """Build a four-option multiple-choice card."""
        return cls(
            id=id,
            question=question,
            answer=answer,
            type=CardType.MULTIPLE_CHOICE,
            options=tuple(options),
            correct_option=correct_option,
        )

    def to_payload(self) -> dict[str, Any]:
        """Serialize to the deck JSON object shape; absent fields are omitted."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class Deck(BaseModel):
    """An ordered, immutable set of cards produced by one synthesis call."""

    cards: tuple[Flashcard, ...] = Field(default_factory=tuple)
    source: str = Field("fallback", description="Generator that produced the deck")
    source_hash: str | None = Field(
        None, description="SHA-256 of the text the deck was generated from"
    )

    model_config = ConfigDict(frozen=True)

    @field_validator("cards")
    @classmethod
    def _unique_ids(cls, cards: tuple[Flashcard, ...]) -> tuple[Flashcard, ...]:
        seen: set[str] = set()
        for card in cards:
            if card.id in seen:
                raise ValueError(f"duplicate card id '{card.id}'")
            seen.add(card.id)
        return cards

    def __len__(self) -> int:
        return len(self.cards)

    def __getitem__(self, index: int) -> Flashcard:
        return self.cards[index]

    @property
    def is_empty(self) -> bool:
        return not self.cards

    def to_payload(self) -> list[dict[str, Any]]:
        """Serialize the cards as the exported JSON array."""
        return [card.to_payload() for card in self.cards]

    @classmethod
    def from_payload(
        cls, payload: Sequence[dict[str, Any]], source: str = "import"
    ) -> "Deck":
        """Rebuild a deck from its JSON array form, validating every card."""
        return cls(
            cards=tuple(Flashcard.model_validate(item) for item in payload),
            source=source,
        )
