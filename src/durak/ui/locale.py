"""
locale.py — Diagnostic strings for English, Russian, and Romanian.

Usage:
    from .locale import t, set_lang, get_lang

    t("error.missing_card")   -> "That card is not in your hand."
    t("move.attack", card="6H", name="Ann")

The starting language comes from the DURAK_LANG environment variable.
"""
from __future__ import annotations

import os

LANGS = ("en", "ru", "ro")

_lang: str = "en"   # "en" | "ru" | "ro"


def get_lang() -> str:
    return _lang


def set_lang(code: str) -> None:
    global _lang
    if code in LANGS:
        _lang = code


def t(key: str, lang: str | None = None, **fmt) -> str:
    """Translate a dot-notation key, then fill in any {placeholders}."""
    node = _STRINGS
    for part in key.split("."):
        if isinstance(node, dict) and part in node:
            node = node[part]
        else:
            return key   # fallback: return the key itself
    if isinstance(node, dict):
        text = node.get(lang or _lang, node.get("en", key))
    else:
        text = str(node)
    return text.format(**fmt) if fmt else text


# ── String table ──────────────────────────────────────────────────────────────
# Each leaf is either a plain string (English only) or {"en":..., "ru":..., "ro":...}

_STRINGS: dict = {

    # ── Rule violations ───────────────────────────────────────────────────────
    "error": {
        "missing_card": {
            "en": "That card is not in your hand.",
            "ru": "Этой карты нет у вас в руке.",
            "ro": "Cartea nu este în mâna ta.",
        },
        "not_enough_cards": {
            "en": "The defender does not have enough cards to cover another attack.",
            "ru": "У защищающегося не хватит карт, чтобы отбить ещё одну атаку.",
            "ro": "Apărătorul nu are destule cărți pentru încă un atac.",
        },
        "no_matching_rank": {
            "en": "You can only attack with a rank already on the table.",
            "ru": "Подкидывать можно только карты достоинства, уже лежащего на столе.",
            "ro": "Poți ataca doar cu o valoare care este deja pe masă.",
        },
        "cannot_beat_card": {
            "en": "That card cannot beat the attack card.",
            "ru": "Эта карта не может побить атакующую карту.",
            "ro": "Această carte nu poate bate cartea de atac.",
        },
        "missing_attack_card": {
            "en": "That attack card is not waiting on the table.",
            "ru": "Такой неотбитой карты на столе нет.",
            "ro": "Cartea de atac nu așteaptă pe masă.",
        },
    },

    # ── Move narration ────────────────────────────────────────────────────────
    "move": {
        "attack": {
            "en": "{name} attacks with {card}",
            "ru": "{name} атакует картой {card}",
            "ro": "{name} atacă cu {card}",
        },
        "defend": {
            "en": "{name} beats {attack} with {card}",
            "ru": "{name} бьёт {attack} картой {card}",
            "ro": "{name} bate {attack} cu {card}",
        },
        "rejected": {
            "en": "✗ {card}: {reason}",
            "ru": "✗ {card}: {reason}",
            "ro": "✗ {card}: {reason}",
        },
    },

    "table": {
        "label": {"en": "Table", "ru": "Стол", "ro": "Masa"},
    },
}


set_lang(os.getenv("DURAK_LANG", "en").lower())
