from __future__ import annotations

from enum import Enum

from .card import Card


class RuleError(Enum):
    """Why the rules engine refused a move."""
    MISSING_CARD        = "missing_card"
    NOT_ENOUGH_CARDS    = "not_enough_cards"
    NO_MATCHING_RANK    = "no_matching_rank"
    CANNOT_BEAT_CARD    = "cannot_beat_card"
    MISSING_ATTACK_CARD = "missing_attack_card"


class MissingCardError(ValueError):
    """Raised by strict hand operations when the card is not in hand."""

    kind = RuleError.MISSING_CARD

    def __init__(self, card: Card) -> None:
        super().__init__(f"{card} is not in hand")
        self.card = card
