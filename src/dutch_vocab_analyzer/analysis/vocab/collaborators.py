"""
collaborators.py.

Does: Define the structural contracts for the collaborators the orchestrator is built
      with (translation backend, vocabulary/phrase storage), plus an in-memory store.
Used by: orchestrator, review, tests.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Protocol, runtime_checkable

from dutch_vocab_analyzer.analysis.vocab.records import PhraseRecord, VocabularyEntry

__all__ = [
    "TranslationError",
    "Translator",
    "VocabularyStore",
    "InMemoryVocabularyStore",
]

log = logging.getLogger(__name__)


class TranslationError(RuntimeError):
    """Raise when the translation backend cannot produce a target-language text."""


@runtime_checkable
class Translator(Protocol):
    """
    Turns source-language text into target-language text.

    Implementations raise TranslationError on any backend failure
    (network, quota, empty answer).
    """

    def translate(self, text: str) -> str: ...


@runtime_checkable
class VocabularyStore(Protocol):
    """Persistence boundary for vocabulary entries and analysed phrases."""

    def entries(self) -> list[VocabularyEntry]: ...
    def get(self, word: str) -> VocabularyEntry | None: ...
    def add(self, entry: VocabularyEntry) -> None: ...
    def increment_seen(self, word: str) -> None: ...
    def phrases(self) -> list[PhraseRecord]: ...
    def save_phrase(self, record: PhraseRecord) -> PhraseRecord: ...
    def update_phrase(self, record: PhraseRecord) -> None: ...


class InMemoryVocabularyStore:
    """Dict/list backed VocabularyStore. Phrase ids are assigned from 1."""

    def __init__(
        self,
        entries: list[VocabularyEntry] | None = None,
        phrases: list[PhraseRecord] | None = None,
    ) -> None:
        self._entries: dict[str, VocabularyEntry] = {}
        self._phrases: dict[int, PhraseRecord] = {}
        self._next_id = 1
        for e in entries or []:
            self.add(e)
        for p in phrases or []:
            self.save_phrase(p)

    # ── vocabulary ───────────────────────────────────────────
    def entries(self) -> list[VocabularyEntry]:
        # most seen first, then alphabetical
        return sorted(self._entries.values(), key=lambda e: (-e.times_seen, e.word))

    def get(self, word: str) -> VocabularyEntry | None:
        return self._entries.get(word.lower())

    def add(self, entry: VocabularyEntry) -> None:
        key = entry.word.lower()
        self._entries[key] = replace(entry, word=key)

    def increment_seen(self, word: str) -> None:
        entry = self._entries.get(word.lower())
        if entry is None:
            log.debug("increment_seen: %r not stored, ignored", word)
            return
        entry.times_seen += 1

    def mark_learned(self, word: str, learned: bool = True) -> None:
        entry = self._entries.get(word.lower())
        if entry is not None:
            entry.learned = learned

    # ── phrases ──────────────────────────────────────────────
    def phrases(self) -> list[PhraseRecord]:
        return list(self._phrases.values())

    def save_phrase(self, record: PhraseRecord) -> PhraseRecord:
        stored = replace(record, id=self._next_id)
        self._phrases[stored.id] = stored
        self._next_id += 1
        return stored

    def update_phrase(self, record: PhraseRecord) -> None:
        if record.id is None or record.id not in self._phrases:
            raise KeyError(f"unknown phrase id: {record.id!r}")
        self._phrases[record.id] = record
