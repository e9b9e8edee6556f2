# tests/test_vocab_classifier.py
from __future__ import annotations

"""
Tests for analysis/vocab/classifier.py and the ClassificationResult value object.

Does:
  - Walk the inflection scenarios (plural, diminutive, no match).
  - Check completeness, exact-match priority, percentage bounds and the novel list.
  - Check both polarities (MATCH_MEANS_KNOWN / MATCH_MEANS_UNKNOWN).
  - Check determinism, including concurrent calls.
"""

from concurrent.futures import ThreadPoolExecutor

import pytest

from dutch_vocab_analyzer.analysis.general.types import (
    ClassificationResult,
    Difficulty,
    Mode,
    difficulty_for,
)
from dutch_vocab_analyzer.analysis.vocab.classifier import analyze_text, classify


# ──────────────────────────────────────────────────────────────────────────────
# Scenarios
# ──────────────────────────────────────────────────────────────────────────────

@pytest.mark.parametrize(
    "token,member",
    [
        ("honden", "hond"),   # -en plural
        ("tafels", "tafel"),  # -s plural
        ("goede", "goed"),    # inflected adjective
        ("huisje", "huis"),   # diminutive
        ("werkt", "werk"),    # verb, 3rd person
    ],
)
def test_inflected_form_of_member_is_matched(token, member):
    result = classify([token], {member})
    assert result.matched == (token,)
    assert result.unmatched == ()
    assert result.novel == ()
    assert result.match_percentage == 100.0


def test_no_match_is_novel():
    result = classify(["xyz"], set())
    assert result.matched == ()
    assert result.unmatched == ("xyz",)
    assert result.novel == ("xyz",)
    assert result.total_tokens == 1
    assert result.match_percentage == 0.0
    assert result.difficulty is Difficulty.HARD


def test_exact_match_has_priority():
    result = classify(["honden"], {"honden", "hond"})
    assert result.matched == ("honden",)


def test_rules_do_not_stack():
    result = classify(["huisjes"], {"huis"})
    assert result.unmatched == ("huisjes",)


def test_analyze_text_sentence():
    result = analyze_text("De honden en het huisje.", {"hond", "huis", "de"})
    assert result.matched == ("de", "honden", "huisje")
    assert result.unmatched == ("en", "het")
    assert result.novel == ("en", "het")
    assert result.total_tokens == 5
    assert result.match_percentage == pytest.approx(60.0)


# ──────────────────────────────────────────────────────────────────────────────
# Properties
# ──────────────────────────────────────────────────────────────────────────────

CASES = [
    ([], set()),
    (["hallo", "hoe", "gaat", "het"], {"hallo"}),
    (["honden", "katten", "boompje", "werkt"], {"hond", "kat", "boom"}),
    (["de", "kat", "eet"], {"de", "kat", "eet"}),
]


@pytest.mark.parametrize("tokens,membership", CASES)
def test_classification_completeness(tokens, membership):
    result = classify(tokens, membership)
    assert result.matched_count + result.unmatched_count == result.total_tokens == len(tokens)
    assert set(result.matched).isdisjoint(result.unmatched)
    assert set(result.novel) <= set(result.unmatched)
    assert 0.0 <= result.match_percentage <= 100.0


def test_empty_input_is_fully_known():
    result = classify([], {"hond"})
    assert result.total_tokens == 0
    assert result.match_percentage == 100.0
    assert result.known_percentage == 100.0
    assert result.difficulty is Difficulty.EASY


def test_superset_membership_is_full_match():
    tokens = ["de", "kat", "eet"]
    assert classify(tokens, set(tokens) | {"hond"}).match_percentage == 100.0


def test_classify_accepts_generators():
    result = classify((t for t in ["hond", "kat"]), {"hond"})
    assert result.total_tokens == 2


def test_deterministic_and_thread_safe():
    tokens = ["honden", "katten", "boompje", "werkt", "fiets"]
    membership = frozenset({"hond", "boom"})
    expected = classify(tokens, membership)
    with ThreadPoolExecutor(max_workers=4) as pool:
        results = list(pool.map(lambda _: classify(tokens, membership), range(16)))
    assert all(r == expected for r in results)


# ──────────────────────────────────────────────────────────────────────────────
# Modes
# ──────────────────────────────────────────────────────────────────────────────

def test_mode_known_maps_matched_to_known():
    result = classify(["hond", "kat"], {"hond"}, Mode.MATCH_MEANS_KNOWN)
    assert result.known_words == ("hond",)
    assert result.unknown_words == ("kat",)
    assert result.known_percentage == 50.0


def test_mode_unknown_maps_matched_to_unknown():
    result = classify(["hond", "kat", "vis"], {"hond"}, Mode.MATCH_MEANS_UNKNOWN)
    assert result.mode is Mode.MATCH_MEANS_UNKNOWN
    assert result.unknown_words == ("hond",)
    assert result.known_words == ("kat", "vis")
    assert result.match_percentage == pytest.approx(100 / 3)
    assert result.known_percentage == pytest.approx(200 / 3)


# ──────────────────────────────────────────────────────────────────────────────
# Difficulty buckets
# ──────────────────────────────────────────────────────────────────────────────

@pytest.mark.parametrize(
    "pct,expected",
    [
        (100.0, Difficulty.EASY),
        (95.0, Difficulty.EASY),
        (94.9, Difficulty.MEDIUM),
        (80.0, Difficulty.MEDIUM),
        (79.99, Difficulty.HARD),
        (0.0, Difficulty.HARD),
    ],
)
def test_difficulty_for(pct, expected):
    assert difficulty_for(pct) is expected


def test_difficulty_for_custom_thresholds():
    assert difficulty_for(70.0, easy=90, medium=60) is Difficulty.MEDIUM
    assert difficulty_for(90.0, easy=90, medium=60) is Difficulty.EASY


def test_result_difficulty_from_percentage():
    tokens = [f"w{i:02d}" for i in range(20)]
    result = classify(tokens, set(tokens[:19]))
    assert result.match_percentage == 95.0
    assert result.difficulty is Difficulty.EASY
    assert isinstance(result, ClassificationResult)
