# dutch_vocab_analyzer/analysis/vocab/review.py
"""
review.

Does: Pick what a practice reminder shows: a handful of pending words with their
      translations, or one of the hardest stored phrases. Delivery and scheduling
      are the caller's business.
Returns: build_review_content() → ReviewContent.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

from dutch_vocab_analyzer.analysis.vocab.collaborators import Translator
from dutch_vocab_analyzer.analysis.vocab.records import PhraseRecord, VocabularyEntry

__all__ = [
    "ReviewKind",
    "ReviewContent",
    "build_review_content",
    "NO_TRANSLATION",
]

log = logging.getLogger(__name__)

NO_TRANSLATION = "[no translation]"
MAX_LISTED_WORDS = 5

_DEFAULT_TITLE = "Time to practise"
_DEFAULT_TEXT = "Record a new phrase to start building your vocabulary"


class ReviewKind(str, Enum):
    DEFAULT = "default"
    WORDS = "words"
    PHRASE = "phrase"


@dataclass(frozen=True)
class ReviewContent:
    title: str
    text: str
    kind: ReviewKind
    # text to read aloud, None when there is nothing to pronounce
    audio_text: str | None = None


def _translate_word(word: str, translator: Translator | None) -> str:
    if translator is None:
        return NO_TRANSLATION
    try:
        translated = translator.translate(word)
    except Exception as e:
        # any backend failure → placeholder
        log.warning("Translation failed for %r: %s", word, e)
        return NO_TRANSLATION
    if not translated or not translated.strip():
        return NO_TRANSLATION
    return translated


def _words_content(
    pending: Sequence[VocabularyEntry],
    rng: random.Random,
    translator: Translator | None,
    word_count: int,
) -> ReviewContent:
    chosen = rng.sample(list(pending), min(word_count, len(pending)))
    pairs = [(e.word, _translate_word(e.word, translator)) for e in chosen]
    return ReviewContent(
        title=f"Words to review ({len(chosen)})",
        text="\n".join(f"{word} -> {translation}" for word, translation in pairs),
        kind=ReviewKind.WORDS,
        audio_text=", ".join(word for word, _ in pairs),
    )


def _phrase_content(
    phrases: Sequence[PhraseRecord],
    rng: random.Random,
    phrase_pool: int,
) -> ReviewContent:
    hardest = sorted(phrases, key=lambda p: -p.unknown_words_count)[:phrase_pool]
    phrase = rng.choice(hardest)
    words = phrase.unknown_word_list

    lines = [phrase.source_text, "", phrase.target_text]
    if words:
        noun = "word" if len(words) == 1 else "words"
        lines += ["", f"{len(words)} new {noun}:", ", ".join(words[:MAX_LISTED_WORDS])]

    return ReviewContent(
        title="Phrase to practise",
        text="\n".join(lines),
        kind=ReviewKind.PHRASE,
        audio_text=phrase.target_text,
    )


def build_review_content(
    entries: Sequence[VocabularyEntry],
    phrases: Sequence[PhraseRecord],
    rng: random.Random | None = None,
    translator: Translator | None = None,
    *,
    word_count: int = 3,
    phrase_pool: int = 10,
) -> ReviewContent:
    """
    Does: Coin flip between WORDS (random pending words + translations) and PHRASE
          (random pick among the `phrase_pool` phrases with most unknown words),
          falling back to whichever has data, else a DEFAULT prompt.
    Returns: ReviewContent.
    """
    rng = rng or random.Random()
    pending = [e for e in entries if not e.learned]
    candidates = [p for p in phrases if p.unknown_words_count > 0]

    if not pending and not candidates:
        return ReviewContent(title=_DEFAULT_TITLE, text=_DEFAULT_TEXT, kind=ReviewKind.DEFAULT)

    prefer_words = rng.random() < 0.5
    if prefer_words and pending:
        return _words_content(pending, rng, translator, word_count)
    if candidates:
        return _phrase_content(candidates, rng, phrase_pool)
    return _words_content(pending, rng, translator, word_count)
