# src/dutch_vocab_analyzer/analysis/general/token/base_recovery.py
# ──────────────────────────────────────────────────────────────
# Token Base Recovery
# Single entrypoint for mapping an inflected token to a registered stem.
# ──────────────────────────────────────────────────────────────

"""
base_recovery.

Does: Map a token to the membership entry it stands for:
      exact hit → ordered suffix rules (single rule, first hit wins).
Returns: recover_base() and is_known_variant().
Used by: The classifier and the orchestrator.

Notes:
- Membership sets are expected lowercase; tokens coming from tokenize() already are.
- Rules never stack: "huisjes" is not reduced to "huis" through -s then -je.
"""

from __future__ import annotations

import logging
from collections.abc import Set as AbcSet

from dutch_vocab_analyzer.analysis.general.token.suffix.registry import recover_with_registry

__all__ = [
    "recover_base",
    "is_known_variant",
]

logger = logging.getLogger(__name__)


def recover_base(token: str, membership: AbcSet[str], *, debug: bool = False) -> str | None:
    """
    Does: Return `token` itself when it is a member, else the base found by the
          first matching suffix rule.
    Returns: Member string or None.
    """
    if not token:
        return None
    if token in membership:
        return token
    base = recover_with_registry(token, membership, debug=debug)
    if debug:
        logger.debug("[recover_base] %r → %r", token, base)
    return base


def is_known_variant(token: str, membership: AbcSet[str], *, debug: bool = False) -> bool:
    """
    Does: Tell whether `token` is absent from `membership` but one suffix rule maps it
          onto a member.
    """
    if not token or token in membership:
        return False
    return recover_with_registry(token, membership, debug=debug) is not None
