"""
rules.py — the attack/defend protocol.

Both moves validate first and only then build new snapshots, so a rejected
move hands back no state at all: the caller keeps what it passed in.

Usage:
    result = attack(attacker, card, defender, table)
    if isinstance(result, Ok):
        attacker, table = result.player, result.table
    else:
        handle(result.error)   # a RuleError
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from ..logging_utils import get_logger
from .card import Card, Suit
from .errors import RuleError
from .move_validator import MoveValidator
from .player import Player
from .table import Table

log = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class Ok:
    player: Player
    table: Table

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class Rejected:
    error: RuleError

    @property
    def ok(self) -> bool:
        return False


MoveResult = Union[Ok, Rejected]


def attack(attacker: Player, card: Card, defender: Player, table: Table) -> MoveResult:
    error = MoveValidator().check_attack(attacker, card, defender, table)
    if error is not None:
        log.debug("%s: attack with %s rejected (%s)", attacker.name, card, error.name)
        return Rejected(error)

    new_attacker = attacker.discard(card)
    new_table = table.add_attack(card)
    log.debug("%s attacks with %s -> %s", attacker.name, card, new_table)
    return Ok(player=new_attacker, table=new_table)


def defend(
    defender: Player, def_card: Card, atk_card: Card, table: Table, trump: Suit
) -> MoveResult:
    error = MoveValidator(trump).check_defence(defender, def_card, atk_card, table)
    if error is not None:
        log.debug("%s: %s over %s rejected (%s)", defender.name, def_card, atk_card, error.name)
        return Rejected(error)

    new_defender = defender.discard(def_card)
    new_table = table.add_defence(atk_card, def_card)
    log.debug("%s beats %s with %s -> %s", defender.name, atk_card, def_card, new_table)
    return Ok(player=new_defender, table=new_table)
