# dutch_vocab_analyzer/analysis/vocab/classifier.py
"""
classifier.

Does: Split tokens into matched / unmatched against a membership set, accepting
      inflected forms of registered stems through the ordered suffix rules.
Returns: classify(), analyze_text().
Used by: The orchestrator (phrase saving, phrase refresh) and UI badges.

Precondition: `membership` is lowercase and already excludes mastered entries
(see records.membership_from_entries).
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from collections.abc import Set as AbcSet

from dutch_vocab_analyzer.analysis.general.token import recover_base, tokenize
from dutch_vocab_analyzer.analysis.general.types import ClassificationResult, Mode, Token

__all__ = ["classify", "analyze_text"]

log = logging.getLogger(__name__)


def classify(
    tokens: Iterable[Token],
    membership: AbcSet[str],
    mode: Mode = Mode.MATCH_MEANS_KNOWN,
    *,
    debug: bool = False,
) -> ClassificationResult:
    """
    Does: For each token, exact membership hit → matched; else the first suffix rule
          whose base is a member → matched; otherwise unmatched.
    Returns: ClassificationResult (matched, unmatched, total, novel, mode).
    """
    matched: list[Token] = []
    unmatched: list[Token] = []
    total = 0

    for tok in tokens:
        total += 1
        if recover_base(tok, membership, debug=debug) is not None:
            matched.append(tok)
        else:
            unmatched.append(tok)

    novel = tuple(t for t in unmatched if t not in membership)

    if debug:
        log.debug(
            "[classify] mode=%s total=%d matched=%d unmatched=%d",
            mode.value, total, len(matched), len(unmatched),
        )

    return ClassificationResult(
        matched=tuple(matched),
        unmatched=tuple(unmatched),
        total_tokens=total,
        novel=novel,
        mode=mode,
    )


def analyze_text(
    text: str,
    membership: AbcSet[str],
    mode: Mode = Mode.MATCH_MEANS_KNOWN,
    *,
    debug: bool = False,
) -> ClassificationResult:
    """Does: tokenize() then classify()."""
    return classify(tokenize(text), membership, mode, debug=debug)
