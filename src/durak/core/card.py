from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional, Sequence


class Suit(Enum):
    HEARTS   = "♥"
    CLUBS    = "♣"
    DIAMONDS = "♦"
    SPADES   = "♠"

    def __str__(self) -> str:
        return self.value

    @property
    def letter(self) -> str:
        return self.name[0]

    @property
    def long_name(self) -> str:
        return self.name.title()


# Full 52-card deck: 2 through Ace
RANKS = list(range(2, 15))
RANK_LETTERS = {11: "J", 12: "Q", 13: "K", 14: "A"}
RANK_NAMES = {11: "Jack", 12: "Queen", 13: "King", 14: "Ace"}
_LETTER_RANKS = {v: k for k, v in RANK_LETTERS.items()}
_LETTER_SUITS = {s.letter: s for s in Suit}


@dataclass(frozen=True, slots=True)
class Card:
    rank: int  # one of RANKS
    suit: Suit

    def __post_init__(self) -> None:
        if not isinstance(self.suit, Suit):
            raise ValueError(f"Invalid suit: {self.suit!r}")
        if isinstance(self.rank, bool) or self.rank not in RANKS:
            raise ValueError(f"Invalid rank: {self.rank!r}")

    def is_trump(self, trump: Suit) -> bool:
        return self.suit == trump

    def same_suit(self, other: Card) -> bool:
        return self.suit == other.suit

    def same_rank(self, other: Card) -> bool:
        return self.rank == other.rank

    def same(self, other: Card) -> bool:
        return self.same_rank(other) and self.same_suit(other)

    def sort_key(self, trump: Suit) -> tuple:
        """Non-trumps first (by rank, then suit as tiebreaker), trumps last."""
        is_trump = 1 if self.suit == trump else 0
        return (is_trump, self.rank, list(Suit).index(self.suit))

    def __str__(self) -> str:
        return to_string(self)

    def __repr__(self) -> str:
        return self.__str__()


# ── pairwise predicates ───────────────────────────────────────────────────────

def same_suit(c1: Card, c2: Card) -> bool:
    return c1.same_suit(c2)


def same_rank(c1: Card, c2: Card) -> bool:
    return c1.same_rank(c2)


def same(c1: Card, c2: Card) -> bool:
    return c1.same(c2)


def suit(card: Card) -> Suit:
    return card.suit


def value(card: Card) -> int:
    return card.rank


def compare_rank(c1: Card, c2: Card) -> int:
    """Three-way rank comparison: -1, 0 or 1. Suit is ignored."""
    return (c1.rank > c2.rank) - (c1.rank < c2.rank)


# ── list helpers ──────────────────────────────────────────────────────────────

def has_rank(card: Card, cards: Iterable[Card]) -> bool:
    """True if any card in ``cards`` shares the rank of ``card``."""
    return any(card.same_rank(c) for c in cards)


def find(card: Card, cards: Iterable[Card]) -> Optional[Card]:
    """Exact lookup: the first element with the same rank and suit, or None."""
    for c in cards:
        if card.same(c):
            return c
    return None


def remove(card: Card, cards: Sequence[Card]) -> List[Card]:
    """Return a new list without the first occurrence of ``card``.

    The input is left untouched. If the card is absent the copy is equal to
    the input; later duplicates are preserved.
    """
    out = list(cards)
    for i, c in enumerate(out):
        if card.same(c):
            del out[i]
            break
    return out


# ── formatting ────────────────────────────────────────────────────────────────

def to_string(card: Card) -> str:
    rank = RANK_LETTERS.get(card.rank, str(card.rank))
    return f"{rank}{card.suit.letter}"


def to_long_string(card: Card) -> str:
    rank = RANK_NAMES.get(card.rank, str(card.rank))
    return f"{rank} of {card.suit.long_name}"


def to_strings(cards: Iterable[Card]) -> str:
    return " ".join(to_string(c) for c in cards)


def to_long_strings(cards: Iterable[Card]) -> str:
    return ", ".join(to_long_string(c) for c in cards)


def parse_card(text: str) -> Card:
    """Inverse of to_string: "6H" -> 6 of Hearts, "10S", "QD", ..."""
    text = text.strip().upper()
    if len(text) < 2:
        raise ValueError(f"Cannot parse card: {text!r}")
    rank_part, suit_part = text[:-1], text[-1]
    if suit_part not in _LETTER_SUITS:
        raise ValueError(f"Unknown suit letter in {text!r}")
    if rank_part in _LETTER_RANKS:
        rank = _LETTER_RANKS[rank_part]
    elif rank_part.isdigit() and 2 <= int(rank_part) <= 10:
        rank = int(rank_part)
    else:
        raise ValueError(f"Unknown rank in {text!r}")
    return Card(rank=rank, suit=_LETTER_SUITS[suit_part])
