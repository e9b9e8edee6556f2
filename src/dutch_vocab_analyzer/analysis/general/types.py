# dutch_vocab_analyzer/analysis/general/types.py
"""
types.py.

Does: Define the transient value objects shared by the tokenizer, classifier and ranker.
Returns: Token alias, Mode/Difficulty enums, ClassificationResult, WordSuggestion, TextStats.
Used by: token/, vocab/ and the orchestrator. Nothing here is persisted.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

__all__ = [
    "Token",
    "Mode",
    "Difficulty",
    "ClassificationResult",
    "WordSuggestion",
    "TextStats",
    "EASY_THRESHOLD",
    "MEDIUM_THRESHOLD",
    "difficulty_for",
]

# lowercase, len >= 2, no edge hyphen/apostrophe
Token = str

EASY_THRESHOLD = 95.0
MEDIUM_THRESHOLD = 80.0


class Mode(str, Enum):
    """What a membership hit means for the learner."""

    MATCH_MEANS_KNOWN = "known"
    MATCH_MEANS_UNKNOWN = "unknown"


class Difficulty(str, Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


def difficulty_for(
    percentage: float,
    *,
    easy: float = EASY_THRESHOLD,
    medium: float = MEDIUM_THRESHOLD,
) -> Difficulty:
    """Does: Bucket a match percentage: >= easy → EASY, >= medium → MEDIUM, else HARD."""
    if percentage >= easy:
        return Difficulty.EASY
    if percentage >= medium:
        return Difficulty.MEDIUM
    return Difficulty.HARD


def _percentage(part: int, total: int) -> float:
    # nothing to learn counts as fully covered
    if total == 0:
        return 100.0
    return 100.0 * part / total


@dataclass(frozen=True)
class ClassificationResult:
    """
    Output of one classify() call.

    `matched` and `unmatched` are disjoint and keep token order. `novel` is the subset of
    `unmatched` with no literal entry in the membership set. The mode only decides which
    list is presented as known or unknown.
    """

    matched: tuple[Token, ...]
    unmatched: tuple[Token, ...]
    total_tokens: int
    novel: tuple[Token, ...]
    mode: Mode = Mode.MATCH_MEANS_KNOWN

    @property
    def matched_count(self) -> int:
        return len(self.matched)

    @property
    def unmatched_count(self) -> int:
        return len(self.unmatched)

    @property
    def match_percentage(self) -> float:
        return _percentage(self.matched_count, self.total_tokens)

    @property
    def difficulty(self) -> Difficulty:
        """
        Bucket of `match_percentage`, regardless of mode.

        Only meaningful as an effort rating in MATCH_MEANS_KNOWN. For the
        mode-aware rating use difficulty_for(known_percentage), which is what
        PhraseAnalyzer.difficulty() does.
        """
        return difficulty_for(self.match_percentage)

    @property
    def known_words(self) -> tuple[Token, ...]:
        if self.mode is Mode.MATCH_MEANS_UNKNOWN:
            return self.unmatched
        return self.matched

    @property
    def unknown_words(self) -> tuple[Token, ...]:
        if self.mode is Mode.MATCH_MEANS_UNKNOWN:
            return self.matched
        return self.unmatched

    @property
    def known_percentage(self) -> float:
        return _percentage(len(self.known_words), self.total_tokens)


@dataclass(frozen=True)
class WordSuggestion:
    word: Token
    frequency: int


@dataclass(frozen=True)
class TextStats:
    total_words: int
    unique_words: int
    average_word_length: float
