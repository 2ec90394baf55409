"""
console.py — Prints what the rules engine decided.

The core only returns RuleError kinds. This layer turns them into text and
writes them to stdout, and gives the old "report and keep the state"
behaviour to callers that want a plain (player, table) pair back.
"""
from __future__ import annotations

from typing import Optional, Tuple

from ..core.card import Card, Suit
from ..core.errors import RuleError
from ..core.player import Player
from ..core.rules import Ok, attack, defend
from ..core.table import Table
from .locale import t


def describe(error: RuleError, lang: Optional[str] = None) -> str:
    return t(f"error.{error.value}", lang=lang)


def play_attack(
    attacker: Player, card: Card, defender: Player, table: Table
) -> Tuple[Player, Table]:
    """Attack; on a rule violation print why and return the inputs unchanged."""
    result = attack(attacker, card, defender, table)
    if not isinstance(result, Ok):
        print(t("move.rejected", card=card, reason=describe(result.error)))
        return attacker, table
    print(t("move.attack", name=attacker.name, card=card))
    print(f"{t('table.label')}: {result.table}")
    return result.player, result.table


def play_defend(
    defender: Player, def_card: Card, atk_card: Card, table: Table, trump: Suit
) -> Tuple[Player, Table]:
    """Defend; on a rule violation print why and return the inputs unchanged."""
    result = defend(defender, def_card, atk_card, table, trump)
    if not isinstance(result, Ok):
        print(t("move.rejected", card=def_card, reason=describe(result.error)))
        return defender, table
    print(t("move.defend", name=defender.name, attack=atk_card, card=def_card))
    print(f"{t('table.label')}: {result.table}")
    return result.player, result.table
