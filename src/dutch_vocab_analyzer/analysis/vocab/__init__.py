# dutch_vocab_analyzer/analysis/vocab/__init__.py
"""
vocab.
=====

Does: Learner-facing vocabulary layer: classification, suggestion ranking,
      persistence records, collaborator contracts, review content, settings.
"""

from __future__ import annotations

from .classifier import analyze_text, classify
from .collaborators import (
    InMemoryVocabularyStore,
    TranslationError,
    Translator,
    VocabularyStore,
)
from .ranking import suggest
from .records import (
    PhraseRecord,
    VocabularyEntry,
    VocabularyProgress,
    WordDifficulty,
    join_word_list,
    membership_from_entries,
    split_word_list,
    vocabulary_progress,
    word_difficulty,
)
from .review import ReviewContent, ReviewKind, build_review_content
from .settings import EngineSettings, load_settings

__all__ = [
    # classification
    "classify",
    "analyze_text",
    "suggest",
    # records
    "VocabularyEntry",
    "PhraseRecord",
    "VocabularyProgress",
    "WordDifficulty",
    "word_difficulty",
    "membership_from_entries",
    "join_word_list",
    "split_word_list",
    "vocabulary_progress",
    # collaborators
    "Translator",
    "TranslationError",
    "VocabularyStore",
    "InMemoryVocabularyStore",
    # review
    "ReviewContent",
    "ReviewKind",
    "build_review_content",
    # settings
    "EngineSettings",
    "load_settings",
]
