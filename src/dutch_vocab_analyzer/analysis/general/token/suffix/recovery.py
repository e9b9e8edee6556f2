"""
recovery.py.

Does: Provides the Dutch suffix recovery rules (plural -en/-s, inflected -e,
      diminutive -je family, verb -t/-d). Each rule strips its suffix and returns
      the base only when that base is in the membership set.
Used by: suffix.registry and base_recovery.
"""

from __future__ import annotations

import logging
from collections.abc import Set as AbcSet

log: logging.Logger = logging.getLogger(__name__)

__all__ = [
    "DIMINUTIVE_SUFFIXES",
    "recover_en",
    "recover_s",
    "recover_e",
    "recover_diminutive",
    "recover_t_d",
]

# Longest first so "etje" wins over "tje" and "je"
DIMINUTIVE_SUFFIXES: tuple[str, ...] = ("etje", "tje", "pje", "je")


def _strip_if_member(
    token: str,
    suffix_len: int,
    membership: AbcSet[str],
    rule: str,
    debug: bool,
) -> str | None:
    base = token[:-suffix_len]
    if base in membership:
        if debug:
            log.debug("[%s] %r → %r", rule, token, base)
        return base
    return None


# ─────────────────────────────────────────────
# Plurals: honden → hond, tafels → tafel
# ─────────────────────────────────────────────
def recover_en(token: str, membership: AbcSet[str], debug: bool = False) -> str | None:
    if token.endswith("en") and len(token) > 3:
        return _strip_if_member(token, 2, membership, "EN", debug)
    return None


def recover_s(token: str, membership: AbcSet[str], debug: bool = False) -> str | None:
    if token.endswith("s") and len(token) > 2:
        return _strip_if_member(token, 1, membership, "S", debug)
    return None


# ─────────────────────────────────────────────
# Inflected adjectives: goede → goed
# ─────────────────────────────────────────────
def recover_e(token: str, membership: AbcSet[str], debug: bool = False) -> str | None:
    if token.endswith("e") and len(token) > 2:
        return _strip_if_member(token, 1, membership, "E", debug)
    return None


# ─────────────────────────────────────────────
# Diminutives: huisje → huis, boompje → boom
# ─────────────────────────────────────────────
def recover_diminutive(token: str, membership: AbcSet[str], debug: bool = False) -> str | None:
    """
    Does: Try each diminutive suffix, longest first; every suffix that fits the
          length guard gets its own membership check.
    Returns: First base found, else None.
    """
    for suffix in DIMINUTIVE_SUFFIXES:
        if token.endswith(suffix) and len(token) > len(suffix) + 1:
            base = _strip_if_member(token, len(suffix), membership, f"DIM-{suffix}", debug)
            if base:
                return base
    return None


# ─────────────────────────────────────────────
# Verbs, present tense: werkt → werk, antwoord → antwoor(d)
# ─────────────────────────────────────────────
def recover_t_d(token: str, membership: AbcSet[str], debug: bool = False) -> str | None:
    if token.endswith(("t", "d")) and len(token) > 2:
        return _strip_if_member(token, 1, membership, "T/D", debug)
    return None
