from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from .card import Card, find


@dataclass(frozen=True, slots=True)
class Trick:
    attack: Card
    defence: Optional[Card] = None

    def is_beaten(self) -> bool:
        return self.defence is not None

    def __str__(self) -> str:
        return f"{self.attack} / {self.defence if self.defence else '_'}"


@dataclass(frozen=True, slots=True)
class Table:
    """Tricks on the table, newest first.

    Equality compares the tricks in order, so two tables holding the same
    tricks in a different order are not equal.

    Attack cards are assumed unique because each one leaves a hand when it
    is played. Nothing here checks it: a table built with with_unbeaten, or
    a hand given a copy through Player.draw, can end up with two tricks on
    the same attack card.
    """
    tricks: Tuple[Trick, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "tricks", tuple(self.tricks))

    @classmethod
    def with_unbeaten(cls, cards: Iterable[Card]) -> Table:
        return cls(tuple(Trick(attack=c) for c in cards))

    def is_empty(self) -> bool:
        return not self.tricks

    def unbeaten_cards(self) -> List[Card]:
        return [t.attack for t in self.tricks if not t.is_beaten()]

    def all_cards(self) -> List[Card]:
        out = []
        for t in self.tricks:
            out.append(t.attack)
            if t.defence:
                out.append(t.defence)
        return out

    def all_beaten(self) -> bool:
        return not self.unbeaten_cards()

    def add_attack(self, card: Card) -> Table:
        return Table((Trick(attack=card),) + self.tricks)

    def add_defence(self, attack_card: Card, card: Card) -> Table:
        """Beat ``attack_card`` with ``card``; the trick moves to the front."""
        for i, t in enumerate(self.tricks):
            if not t.is_beaten() and t.attack.same(attack_card):
                rest = self.tricks[:i] + self.tricks[i + 1:]
                return Table((Trick(attack=t.attack, defence=card),) + rest)
        raise ValueError(f"{attack_card} is not an unbeaten card on the table")

    def has_unbeaten(self, card: Card) -> bool:
        return find(card, self.unbeaten_cards()) is not None

    def __str__(self) -> str:
        if not self.tricks:
            return "(empty)"
        return " | ".join(str(t) for t in self.tricks)


def unbeaten_cards(table: Table) -> List[Card]:
    return table.unbeaten_cards()


def all_cards(table: Table) -> List[Card]:
    return table.all_cards()
