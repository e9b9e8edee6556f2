# orchestrator.py
from __future__ import annotations

"""
orchestrator.py
===============

Does: Wire the word-analysis engine to its collaborators (vocabulary store,
      translator) for the phrase workflow: save a translated phrase with its
      unknown words, register tapped words, keep stored phrase counts fresh,
      propose new words and pick review content.
Returns:
  - PhraseAnalyzer.record_phrase(source, target=None) -> (PhraseRecord, ClassificationResult)
  - PhraseAnalyzer.add_word(word) -> AddWordOutcome | None
  - PhraseAnalyzer.refresh_phrase_counts() -> int
  - PhraseAnalyzer.suggest_words(limit) -> list[WordSuggestion]
  - PhraseAnalyzer.review_content(rng) -> ReviewContent
Used by: Application/UI layers. Collaborators are passed in, never looked up globally.
"""

import logging
import random
from dataclasses import dataclass, replace
from typing import Any

from dutch_vocab_analyzer.analysis.general.fuzzy import find_similar_words
from dutch_vocab_analyzer.analysis.general.token import normalize_word
from dutch_vocab_analyzer.analysis.general.types import (
    ClassificationResult,
    Difficulty,
    Mode,
    WordSuggestion,
    difficulty_for,
)
from dutch_vocab_analyzer.analysis.general.utils.log import debug
from dutch_vocab_analyzer.analysis.vocab.classifier import analyze_text
from dutch_vocab_analyzer.analysis.vocab.collaborators import (
    TranslationError,
    Translator,
    VocabularyStore,
)
from dutch_vocab_analyzer.analysis.vocab.ranking import suggest
from dutch_vocab_analyzer.analysis.vocab.records import (
    PhraseRecord,
    VocabularyEntry,
    join_word_list,
    membership_from_entries,
    word_difficulty,
)
from dutch_vocab_analyzer.analysis.vocab.review import ReviewContent, build_review_content
from dutch_vocab_analyzer.analysis.vocab.settings import EngineSettings, load_settings

logger = logging.getLogger(__name__)

__all__ = [
    "AddWordOutcome",
    "PhraseAnalyzer",
]


@dataclass(frozen=True)
class AddWordOutcome:
    word: str
    created: bool
    # existing entries that look like the same word (typo, inflection)
    similar: tuple[str, ...] = ()


class PhraseAnalyzer:
    """
    Phrase workflow over an injected store and translator.

    `mode` says what the store holds: MATCH_MEANS_UNKNOWN (words still to learn,
    the default) or MATCH_MEANS_KNOWN (words already known). Stored phrases
    always keep the tokens the store does not hold, whatever the mode.
    """

    def __init__(
        self,
        store: VocabularyStore,
        translator: Translator | None = None,
        *,
        mode: Mode = Mode.MATCH_MEANS_UNKNOWN,
        settings: EngineSettings | None = None,
    ) -> None:
        self.store = store
        self.translator = translator
        self.mode = mode
        self.settings = settings or load_settings()

    # =========================================================================
    # Analysis
    # =========================================================================

    def membership(self) -> frozenset[str]:
        return membership_from_entries(self.store.entries())

    def analyze(self, text: str) -> ClassificationResult:
        return analyze_text(text, self.membership(), self.mode)

    def difficulty(self, result: ClassificationResult) -> Difficulty:
        """Does: Effort bucket for a result, using the configured thresholds."""
        return difficulty_for(
            result.known_percentage,
            easy=self.settings.easy_threshold,
            medium=self.settings.medium_threshold,
        )

    def _translate(self, text: str) -> str:
        if self.translator is None:
            raise TranslationError("no translator configured")
        try:
            translated = self.translator.translate(text)
        except TranslationError:
            raise
        except Exception as e:
            raise TranslationError(f"translation failed: {e}") from e
        if not translated or not translated.strip():
            raise TranslationError("translator returned an empty text")
        return translated

    @staticmethod
    def _phrase_words(result: ClassificationResult) -> dict[str, Any]:
        # phrases always persist the tokens outside the membership set
        return {
            "unknown_words_count": result.unmatched_count,
            "unknown_words": join_word_list(result.unmatched),
        }

    def _count_sightings(self, result: ClassificationResult) -> None:
        # the store ignores words it does not hold
        for tok in result.unmatched:
            self.store.increment_seen(tok)

    # =========================================================================
    # Phrases
    # =========================================================================

    def record_phrase(
        self,
        source_text: str,
        target_text: str | None = None,
    ) -> tuple[PhraseRecord, ClassificationResult]:
        """
        Does: Translate (when needed), classify the target text, store the phrase
              with its unmatched words, bump sightings of those words the store holds.
        Raises: TranslationError when a translation is needed and fails.
        """
        if target_text is None:
            target_text = self._translate(source_text)

        result = analyze_text(target_text, self.membership(), self.mode)
        record = self.store.save_phrase(
            PhraseRecord(
                source_text=source_text,
                target_text=target_text,
                **self._phrase_words(result),
            )
        )
        self._count_sightings(result)

        logger.info(
            "Phrase saved: %d unmatched words, %d matched",
            result.unmatched_count, result.matched_count,
        )
        return record, result

    def refresh_phrase_counts(self) -> int:
        """
        Does: Re-classify every stored phrase against the current vocabulary.
        Returns: Number of phrases whose unknown words changed.
        """
        membership = self.membership()
        updated = 0
        for phrase in self.store.phrases():
            result = analyze_text(phrase.target_text, membership, self.mode)
            fields = self._phrase_words(result)
            if (
                fields["unknown_words"] == phrase.unknown_words
                and fields["unknown_words_count"] == phrase.unknown_words_count
            ):
                continue
            self.store.update_phrase(replace(phrase, **fields))
            updated += 1
        debug(f"refreshed {updated} phrase(s)", topic="orchestrator")
        return updated

    def retry_translation(self, record: PhraseRecord) -> PhraseRecord:
        """
        Does: Translate the source text again and re-classify the new target text.
        Raises: TranslationError (the stored phrase is left untouched).
        """
        target = self._translate(record.source_text)
        result = analyze_text(target, self.membership(), self.mode)
        refreshed = replace(record, target_text=target, **self._phrase_words(result))
        self.store.update_phrase(refreshed)
        return refreshed

    # =========================================================================
    # Vocabulary
    # =========================================================================

    def add_word(self, word: str) -> AddWordOutcome | None:
        """
        Does: Register a tapped/typed word. Existing entries get one more sighting,
              new ones get a length-based difficulty. Stored phrases are refreshed.
        Returns: AddWordOutcome, or None when the word is shorter than 2 characters.
        """
        normalized = normalize_word(word)
        if normalized is None:
            logger.debug("Ignoring too short word %r", word)
            return None

        existing = [e.word for e in self.store.entries()]
        if self.store.get(normalized) is not None:
            self.store.increment_seen(normalized)
            outcome = AddWordOutcome(word=normalized, created=False)
        else:
            similar = find_similar_words(
                normalized, existing, threshold=self.settings.fuzzy_threshold
            )
            self.store.add(
                VocabularyEntry(word=normalized, difficulty=word_difficulty(normalized))
            )
            outcome = AddWordOutcome(word=normalized, created=True, similar=tuple(similar))

        debug(f"add_word {normalized!r} created={outcome.created}", topic="orchestrator")
        self.refresh_phrase_counts()
        return outcome

    def suggest_words(self, limit: int | None = None) -> list[WordSuggestion]:
        """Does: Recurring words of stored phrases that are not in the store at all."""
        exclude = {e.word.lower() for e in self.store.entries()}
        texts = [p.target_text for p in self.store.phrases()]
        return suggest(
            texts,
            exclude,
            min_frequency=self.settings.suggestion_min_frequency,
            limit=limit,
        )

    def review_content(self, rng: random.Random | None = None) -> ReviewContent:
        return build_review_content(
            self.store.entries(),
            self.store.phrases(),
            rng,
            self.translator,
            word_count=self.settings.review_word_count,
            phrase_pool=self.settings.review_phrase_pool,
        )
