from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional

from .card import Card, Suit, find, has_rank
from .errors import RuleError
from .player import Player
from .table import Table


def beats(def_card: Card, atk_card: Card, trump: Optional[Suit]) -> bool:
    """True if def_card covers atk_card.

    Same suit needs a strictly higher rank. A trump-suit defence card
    always covers, whatever the attack card is.
    """
    if def_card.same_suit(atk_card) and def_card.rank > atk_card.rank:
        return True
    return def_card.is_trump(trump)


@dataclass(frozen=True, slots=True)
class MoveValidator:
    trump: Optional[Suit] = None  # only defence checks need it

    def check_attack(
        self, attacker: Player, card: Card, defender: Player, table: Table
    ) -> Optional[RuleError]:
        """Return the first rule the attack breaks, or None if it is legal."""
        if find(card, attacker.hand) is None:
            return RuleError.MISSING_CARD
        # defender must be able to cover every open attack plus this one
        if len(defender.hand) <= len(table.unbeaten_cards()):
            return RuleError.NOT_ENOUGH_CARDS
        if not self.can_attack(card, table):
            return RuleError.NO_MATCHING_RANK
        return None

    def check_defence(
        self, defender: Player, def_card: Card, atk_card: Card, table: Table
    ) -> Optional[RuleError]:
        if find(def_card, defender.hand) is None:
            return RuleError.MISSING_CARD
        if not table.has_unbeaten(atk_card):
            return RuleError.MISSING_ATTACK_CARD
        if not self.can_defend(def_card, atk_card):
            return RuleError.CANNOT_BEAT_CARD
        return None

    def can_attack(self, card: Card, table: Table) -> bool:
        """
        Opening attack: any card. Further attack cards must match
        a rank already on the table (attack or defence cards).
        """
        if table.is_empty():
            return True
        return has_rank(card, table.all_cards())

    def can_defend(self, def_card: Card, atk_card: Card) -> bool:
        return beats(def_card, atk_card, self.trump)

    def valid_attacks(
        self, hand: Iterable[Card], defender: Player, table: Table
    ) -> List[Card]:
        if len(defender.hand) <= len(table.unbeaten_cards()):
            return []
        return [c for c in hand if self.can_attack(c, table)]

    def valid_defences(self, hand: Iterable[Card], atk_card: Card) -> List[Card]:
        return [c for c in hand if self.can_defend(c, atk_card)]
