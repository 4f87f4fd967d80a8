"""Deck review: navigation state machine and card faces."""

from flashforge_core.review.navigator import DeckNavigator, NavigatorState
from flashforge_core.review.render import (
    CardFace,
    LabeledOption,
    option_letter,
    render_card,
)

__all__ = [
    "CardFace",
    "DeckNavigator",
    "LabeledOption",
    "NavigatorState",
    "option_letter",
    "render_card",
]
