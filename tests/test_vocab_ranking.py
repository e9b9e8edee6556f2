# tests/test_vocab_ranking.py
from __future__ import annotations

"""Tests for analysis/vocab/ranking.py (frequency-based word suggestions)."""

import pytest

from dutch_vocab_analyzer.analysis.general.types import WordSuggestion
from dutch_vocab_analyzer.analysis.vocab.ranking import suggest


def test_suggest_keeps_recurring_words_only():
    out = suggest(["de kat eet", "de kat slaapt"], {"de"})
    assert out == [WordSuggestion("kat", 2)]


def test_suggest_orders_by_frequency_then_first_occurrence():
    texts = ["zon maan", "maan zon ster", "maan ster"]
    out = suggest(texts, set())
    assert out == [
        WordSuggestion("maan", 3),
        WordSuggestion("zon", 2),
        WordSuggestion("ster", 2),
    ]


def test_suggest_counts_each_text_once_per_word():
    # tokenize() deduplicates inside one text
    assert suggest(["kat kat kat"], set()) == []


def test_suggest_normalizes_text_before_counting():
    out = suggest(["De Kat!", "de kat?"], set())
    assert out == [WordSuggestion("de", 2), WordSuggestion("kat", 2)]


def test_suggest_min_frequency_and_limit():
    texts = ["appel peer", "appel", "peer kers", "appel"]
    assert suggest(texts, set(), min_frequency=1, limit=2) == [
        WordSuggestion("appel", 3),
        WordSuggestion("peer", 2),
    ]
    assert suggest(texts, {"appel"}, min_frequency=3) == []


@pytest.mark.parametrize("texts", [[], [""], ["?!"]])
def test_suggest_empty(texts):
    assert suggest(texts, set()) == []
