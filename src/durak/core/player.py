from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Tuple

from . import card as cards
from .card import Card, Suit
from .errors import MissingCardError


@dataclass(frozen=True, slots=True)
class Player:
    name: str
    hand: Tuple[Card, ...] = ()

    def __post_init__(self) -> None:
        # accept any sequence, store a tuple
        object.__setattr__(self, "hand", tuple(self.hand))

    def draw(self, card: Card) -> Player:
        """New player with ``card`` on the front of the hand. No validation."""
        return replace(self, hand=(card,) + self.hand)

    def discard(self, card: Card) -> Player:
        """Best-effort discard: a card not in hand leaves the hand unchanged."""
        return replace(self, hand=tuple(cards.remove(card, self.hand)))

    def discard_strict(self, card: Card) -> Player:
        if not self.has_card(card):
            raise MissingCardError(card)
        return self.discard(card)

    def has_card(self, card: Card) -> bool:
        return cards.find(card, self.hand) is not None

    def same(self, other: Player) -> bool:
        return self.name == other.name and self.hand == other.hand

    def sorted_hand(self, trump: Suit) -> Tuple[Card, ...]:
        return tuple(sorted(self.hand, key=lambda c: c.sort_key(trump)))

    def __str__(self) -> str:
        return f"{self.name}({len(self.hand)}): " + cards.to_strings(self.hand)


def draw(card: Card, player: Player) -> Player:
    return player.draw(card)


def discard(card: Card, player: Player) -> Player:
    return player.discard(card)


def same(p1: Player, p2: Player) -> bool:
    return p1.same(p2)
