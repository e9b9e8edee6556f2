# src/dutch_vocab_analyzer/analysis/general/token/suffix/registry.py
from __future__ import annotations

"""
suffix.registry

Does: Centralize the suffix recovery rules in their fixed evaluation order and
      provide a first-hit dispatcher.
Returns: RecoverFn type, VARIANT_RULES tuple, and recover_with_registry().
Used by: base_recovery and the classifier.
"""

from collections.abc import Callable
from collections.abc import Set as AbcSet

from dutch_vocab_analyzer.analysis.general.token.suffix.recovery import (
    recover_diminutive,
    recover_e,
    recover_en,
    recover_s,
    recover_t_d,
)

__all__ = ["RecoverFn", "VARIANT_RULES", "recover_with_registry"]

RecoverFn = Callable[[str, AbcSet[str], bool], "str | None"]

# Evaluation order is part of the contract: the first rule that finds a base wins.
VARIANT_RULES: tuple[RecoverFn, ...] = (
    recover_en,          # honden → hond
    recover_s,           # tafels → tafel
    recover_e,           # goede → goed
    recover_diminutive,  # huisje → huis
    recover_t_d,         # werkt → werk
)


def recover_with_registry(
    token: str,
    membership: AbcSet[str],
    debug: bool = False,
) -> str | None:
    """
    Does: Run every rule in order and return the first base found in `membership`.
    Returns: Base string if recovered, else None.
    """
    for fn in VARIANT_RULES:
        base = fn(token, membership, debug)
        if base:
            return base
    return None
