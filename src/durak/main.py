from __future__ import annotations

import random

from .core.card import Suit, to_strings
from .core.deck import shuffled_deck
from .core.move_validator import MoveValidator
from .core.player import Player
from .core.table import Table
from .logging_utils import setup_logging
from .ui.console import play_attack, play_defend


def main(seed: int = 1) -> None:
    """Scripted single exchange: deal six each, attack with the lowest card."""
    setup_logging()
    deck = shuffled_deck(random.Random(seed))  # deterministic shuffle for the demo
    trump: Suit = deck[-1].suit

    attacker, defender = Player("You"), Player("Bot")
    for _ in range(6):
        attacker = attacker.draw(deck.pop(0))
        defender = defender.draw(deck.pop(0))
    print(f"Trump suit: {trump}")
    print(f"{attacker.name}: {to_strings(attacker.sorted_hand(trump))}")
    print(f"{defender.name}: {to_strings(defender.sorted_hand(trump))}")

    table = Table()
    card = attacker.sorted_hand(trump)[0]
    attacker, table = play_attack(attacker, card, defender, table)
    valid = MoveValidator(trump).valid_defences(defender.sorted_hand(trump), card)
    if valid:
        defender, table = play_defend(defender, valid[0], card, table, trump)
    else:
        print(f"{defender.name} cannot defend and takes {to_strings(table.all_cards())}")


if __name__ == "__main__":
    main()
