# dutch_vocab_analyzer/analysis/vocab/records.py
"""
records.

Does: Value objects and helpers at the persistence boundary: vocabulary entries,
      stored phrases, the comma-joined unknown-word column, word difficulty and
      learning progress.
Used by: The store collaborator, the orchestrator and review content.

Known limitation: the persisted word list is a plain comma-joined string with no
escaping. Tokens never contain commas, so engine output always round-trips;
hand-written values containing commas do not.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import IntEnum

__all__ = [
    "WordDifficulty",
    "VocabularyEntry",
    "PhraseRecord",
    "VocabularyProgress",
    "word_difficulty",
    "membership_from_entries",
    "join_word_list",
    "split_word_list",
    "vocabulary_progress",
]

WORD_SEPARATOR = ","


class WordDifficulty(IntEnum):
    EASY = 0
    MEDIUM = 1
    HARD = 2


def word_difficulty(word: str) -> WordDifficulty:
    """Does: Length heuristic for a newly added word: <=4 easy, <=8 medium, else hard."""
    n = len(word)
    if n <= 4:
        return WordDifficulty.EASY
    if n <= 8:
        return WordDifficulty.MEDIUM
    return WordDifficulty.HARD


@dataclass
class VocabularyEntry:
    word: str
    times_seen: int = 1
    learned: bool = False
    difficulty: WordDifficulty = WordDifficulty.EASY


def membership_from_entries(entries: Iterable[VocabularyEntry]) -> frozenset[str]:
    """Does: Lowercase words of every entry not yet learned (the classifier's membership set)."""
    return frozenset(e.word.lower() for e in entries if not e.learned)


def join_word_list(words: Iterable[str]) -> str:
    return WORD_SEPARATOR.join(words)


def split_word_list(value: str | None) -> list[str]:
    if not value:
        return []
    return [w.strip() for w in value.split(WORD_SEPARATOR) if w.strip()]


@dataclass
class PhraseRecord:
    source_text: str
    target_text: str
    unknown_words_count: int = 0
    unknown_words: str = ""
    id: int | None = None
    times_reviewed: int = 0

    @property
    def unknown_word_list(self) -> list[str]:
        return split_word_list(self.unknown_words)


@dataclass(frozen=True)
class VocabularyProgress:
    pending: int
    learned: int
    learned_percentage: int = 0


def vocabulary_progress(entries: Iterable[VocabularyEntry]) -> VocabularyProgress:
    """Does: Count pending vs learned entries; percentage is floored, 0 when empty."""
    pending = learned = 0
    for e in entries:
        if e.learned:
            learned += 1
        else:
            pending += 1
    total = pending + learned
    pct = learned * 100 // total if total else 0
    return VocabularyProgress(pending=pending, learned=learned, learned_percentage=pct)
