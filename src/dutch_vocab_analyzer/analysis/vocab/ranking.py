# dutch_vocab_analyzer/analysis/vocab/ranking.py
"""
ranking.

Does: Surface recurring words from past phrases that the learner has not registered yet.
Returns: suggest() → list[WordSuggestion], most frequent first.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from collections.abc import Set as AbcSet

from dutch_vocab_analyzer.analysis.general.token import tokenize
from dutch_vocab_analyzer.analysis.general.types import WordSuggestion

__all__ = ["DEFAULT_MIN_FREQUENCY", "suggest"]

DEFAULT_MIN_FREQUENCY = 2


def suggest(
    texts: Iterable[str],
    exclude: AbcSet[str],
    *,
    min_frequency: int = DEFAULT_MIN_FREQUENCY,
    limit: int | None = None,
) -> list[WordSuggestion]:
    """
    Does: Tokenize every text, drop excluded words, count what is left and keep words
          seen at least `min_frequency` times.
    Returns: Suggestions by descending frequency; ties keep first-occurrence order.

    Each text is deduplicated by tokenize(), so a frequency counts texts, not repeats
    inside one text.
    """
    counts: Counter[str] = Counter()
    for text in texts:
        counts.update(tok for tok in tokenize(text) if tok not in exclude)

    # Counter keeps insertion order, and sorted() is stable
    ranked = sorted(
        (WordSuggestion(word, n) for word, n in counts.items() if n >= min_frequency),
        key=lambda s: -s.frequency,
    )
    if limit is not None:
        ranked = ranked[:limit]
    return ranked
