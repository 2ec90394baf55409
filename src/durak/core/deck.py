from __future__ import annotations

import random
from typing import List, Optional

from .card import Card, Suit, RANKS


def full_deck() -> List[Card]:
    """All 52 cards, ordered by suit then rank."""
    return [Card(rank=r, suit=s) for s in Suit for r in RANKS]


def shuffled_deck(rng: Optional[random.Random] = None) -> List[Card]:
    """Return a freshly shuffled 52-card deck.

    Pass ``random.Random(seed)`` for a reproducible order; without one a new
    unseeded generator is used, so every call is an independent permutation.
    """
    if rng is None:
        rng = random.Random()
    cards = full_deck()
    rng.shuffle(cards)
    return cards
