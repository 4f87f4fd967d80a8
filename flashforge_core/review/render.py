"""What the review surface shows for the current navigator state."""

from pydantic import BaseModel, ConfigDict, Field

from flashforge_core.review.navigator import NavigatorState
from flashforge_core.schemas.cards import CardType, Deck


def option_letter(index: int) -> str:
    """Label for an option position: 0 -> "A", 1 -> "B", ..."""
    return chr(ord("A") + index)


class LabeledOption(BaseModel):
    """One multiple-choice option with its letter."""

    letter: str
    text: str

    model_config = ConfigDict(frozen=True)


class CardFace(BaseModel):
    """The visible side of the current card."""

    position: int = Field(..., description="1-based card number")
    total: int = Field(..., description="Cards in the deck")
    type_label: str
    flipped: bool
    text: str = Field(..., description="Question on the front, answer on the back")
    options: tuple[LabeledOption, ...] = Field(
        default_factory=tuple, description="Front of multiple-choice cards only"
    )
    correct_letter: str | None = Field(
        None, description="Back of multiple-choice cards only"
    )

    model_config = ConfigDict(frozen=True)

    @property
    def counter(self) -> str:
        return f"Card {self.position} of {self.total}"


def render_card(deck: Deck, state: NavigatorState) -> CardFace | None:
    """Build the face for ``state``; None when the deck has no cards.

    Front: the question, plus lettered options for multiple-choice cards.
    Back: the answer, plus the correct letter for multiple-choice cards.
    """
    if deck.is_empty:
        return None

    card = deck[state.index]
    is_choice = card.type is CardType.MULTIPLE_CHOICE
    common = {
        "position": state.index + 1,
        "total": len(deck),
        "type_label": card.type.label,
        "flipped": state.flipped,
    }

    if state.flipped:
        return CardFace(
            **common,
            text=card.answer,
            correct_letter=option_letter(card.correct_option) if is_choice else None,
        )

    options = ()
    if is_choice:
        options = tuple(
            LabeledOption(letter=option_letter(i), text=text)
            for i, text in enumerate(card.options)
        )
    return CardFace(**common, text=card.question, options=options)
