# src/dutch_vocab_analyzer/analysis/general/fuzzy/fuzzy_core.py
from __future__ import annotations

"""
fuzzy_core.py

Does: Near-duplicate lookup against the learner's vocabulary, so that adding
      "hondje" can point at an existing "hond" or a typo like "hnod".
Returns: find_similar_words(), similarity().
Used by: The orchestrator when a word is tapped or typed in.
"""

import logging
from collections.abc import Iterable

from rapidfuzz import fuzz, process

__all__ = [
    "DEFAULT_SIMILARITY_THRESHOLD",
    "similarity",
    "find_similar_words",
]

__docformat__ = "google"

log = logging.getLogger(__name__)

# ── Tunables ─────────────────────────────────────────────────────────────────
DEFAULT_SIMILARITY_THRESHOLD = 85
DEFAULT_LIMIT = 3


def similarity(a: str, b: str) -> float:
    """Does: Levenshtein-based ratio in [0, 100] on lowercased inputs."""
    return float(fuzz.ratio((a or "").lower(), (b or "").lower()))


def find_similar_words(
    word: str,
    vocabulary: Iterable[str],
    *,
    threshold: float = DEFAULT_SIMILARITY_THRESHOLD,
    limit: int | None = DEFAULT_LIMIT,
) -> list[str]:
    """
    Does: Rank vocabulary entries by similarity to `word`, excluding `word` itself.
    Returns: Entries scoring >= threshold, best first (ties broken alphabetically).
    """
    query = (word or "").lower().strip()
    choices = sorted({v.lower() for v in vocabulary if v and v.lower() != query})
    if not query or not choices:
        return []

    hits = process.extract(
        query,
        choices,
        scorer=fuzz.ratio,
        score_cutoff=threshold,
        limit=None,
    )
    ranked = sorted(((choice, score) for choice, score, _idx in hits), key=lambda h: (-h[1], h[0]))
    if limit is not None:
        ranked = ranked[:limit]

    log.debug("Similar to %r: %s", query, ranked)
    return [choice for choice, _score in ranked]
