"""
fuzzy.
=====

Does: Expose the near-duplicate vocabulary lookup.
Exports: find_similar_words, similarity, DEFAULT_SIMILARITY_THRESHOLD
"""

from __future__ import annotations

from .fuzzy_core import (
    DEFAULT_SIMILARITY_THRESHOLD,
    find_similar_words,
    similarity,
)

__all__ = [
    "DEFAULT_SIMILARITY_THRESHOLD",
    "find_similar_words",
    "similarity",
]
