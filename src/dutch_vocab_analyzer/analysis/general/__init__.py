"""
general.
=======

Language-level building blocks shared by the vocabulary layer.

Exports:
- Mode, Difficulty: classification polarity and effort bucket.
- ClassificationResult, WordSuggestion, TextStats: transient results.
"""

from .types import (
    ClassificationResult,
    Difficulty,
    Mode,
    TextStats,
    WordSuggestion,
)

__all__ = [
    "ClassificationResult",
    "Difficulty",
    "Mode",
    "TextStats",
    "WordSuggestion",
]
