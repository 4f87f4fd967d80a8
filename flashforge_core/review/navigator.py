"""Deck review state machine.

State is ``(index, flipped)`` over a deck of N cards:

- load_deck: any state -> (0, False)
- next:      (i, f) -> ((i + 1) mod N, False)
- previous:  (i, f) -> ((i - 1 + N) mod N, False)
- flip:      (i, f) -> (i, not f)

Navigation is cyclic with no terminal state. On an empty deck there is no
current card and every transition leaves the state at (0, False).
"""

from pydantic import BaseModel, ConfigDict, Field

from flashforge_core.schemas.cards import Deck, Flashcard


class NavigatorState(BaseModel):
    """Position and flip state of one review session."""

    index: int = Field(0, ge=0)
    flipped: bool = False

    model_config = ConfigDict(frozen=True)


INITIAL_STATE = NavigatorState()


class DeckNavigator:
    """Step through and flip the cards of one deck.

    A navigator belongs to a single session; never share one between users.
    """

    def __init__(self, deck: Deck | None = None):
        self._deck = deck or Deck()
        self._state = INITIAL_STATE

    @property
    def deck(self) -> Deck:
        return self._deck

    @property
    def state(self) -> NavigatorState:
        return self._state

    @property
    def current_card(self) -> Flashcard | None:
        if self._deck.is_empty:
            return None
        return self._deck[self._state.index]

    def load_deck(self, deck: Deck) -> NavigatorState:
        """Replace the deck and reset to the first card, front side up."""
        self._deck = deck
        self._state = INITIAL_STATE
        return self._state

    def next(self) -> NavigatorState:
        """Advance one card, wrapping to the start; always shows the front."""
        return self._move(1)

    def previous(self) -> NavigatorState:
        """Go back one card, wrapping to the end; always shows the front."""
        return self._move(-1)

    def flip(self) -> NavigatorState:
        """Toggle between question and answer without moving."""
        if self._deck.is_empty:
            return self._state
        self._state = NavigatorState(
            index=self._state.index, flipped=not self._state.flipped
        )
        return self._state

    def _move(self, step: int) -> NavigatorState:
        count = len(self._deck)
        if count == 0:
            return self._state
        self._state = NavigatorState(index=(self._state.index + step) % count)
        return self._state
