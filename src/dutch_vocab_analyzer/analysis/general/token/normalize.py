# dutch_vocab_analyzer/analysis/general/token/normalize.py
# ──────────────────────────────────────────────────────────────
# Tokenization and word normalization
# ──────────────────────────────────────────────────────────────
"""
normalize.

Does: Turn raw target-language text into lowercase, deduplicated word tokens with light
      Unicode hygiene, and normalize single user-entered vocabulary words.
Returns: tokenize(), normalize_word(), text_stats().
Used by: Classifier, suggestion ranker, orchestrator (tap-to-add words).
"""

from __future__ import annotations

import re
import unicodedata

from dutch_vocab_analyzer.analysis.general.types import TextStats, Token

__all__ = [
    "MIN_TOKEN_LENGTH",
    "tokenize",
    "normalize_word",
    "text_stats",
]

MIN_TOKEN_LENGTH = 2

# Anything that is not a-z, a Latin-1 lowercase letter (ß..ÿ minus ÷), a digit,
# whitespace, hyphen or apostrophe becomes a single space.
_DISALLOWED_RE = re.compile(r"[^a-zß-öø-ÿ0-9\s'\-]")

_EDGE_CHARS = "-'"

# Typographic punctuation folded to ASCII before filtering
_FANCY_HYPHENS = {"‐", "‑", "‒", "–", "—", "−"}  # ‐ ‑ ‒ – — −
_FANCY_QUOTES = {"‘", "’", "‛", "′", "ʼ"}  # ‘ ’ ‛ ′ ʼ


# ──────────────────────────────────────────────────────────────
# 0) Light Unicode hygiene
# ──────────────────────────────────────────────────────────────


def _unicode_hygiene(s: str) -> str:
    """
    Does: NFKC fold (composes accents, splits the ĳ ligature), map fancy hyphens to '-'
          and curly quotes to "'".
    Returns: Cleaned string.
    """
    s = unicodedata.normalize("NFKC", s)
    for ch in _FANCY_HYPHENS:
        s = s.replace(ch, "-")
    for ch in _FANCY_QUOTES:
        s = s.replace(ch, "'")
    return s


# ──────────────────────────────────────────────────────────────
# 1) TOKENIZATION
# ──────────────────────────────────────────────────────────────


def tokenize(text: str) -> list[Token]:
    """
    Does: Lowercase `text`, blank out punctuation, split on whitespace, trim edge
          hyphens/apostrophes, drop pieces shorter than 2 and deduplicate.
    Returns: Tokens in first-occurrence order.

    Only edge characters are trimmed: "dag's" and "goed-e" stay as they are.
    """
    if not isinstance(text, str):
        return []
    cleaned = _DISALLOWED_RE.sub(" ", _unicode_hygiene(text).lower())

    seen: set[str] = set()
    tokens: list[Token] = []
    for piece in cleaned.split():
        tok = piece.strip(_EDGE_CHARS)
        if len(tok) < MIN_TOKEN_LENGTH or tok in seen:
            continue
        seen.add(tok)
        tokens.append(tok)
    return tokens


def normalize_word(word: str) -> str | None:
    """
    Does: Normalize one vocabulary word typed or tapped by the learner
          (hygiene, lowercase, whitespace trim).
    Returns: The normalized word, or None when it is shorter than 2 characters.
    """
    if not isinstance(word, str):
        return None
    w = _unicode_hygiene(word).lower().strip()
    if len(w) < MIN_TOKEN_LENGTH:
        return None
    return w


# ──────────────────────────────────────────────────────────────
# 2) TEXT STATS
# ──────────────────────────────────────────────────────────────


def text_stats(text: str) -> TextStats:
    tokens = tokenize(text)
    if not tokens:
        return TextStats(total_words=0, unique_words=0, average_word_length=0.0)
    return TextStats(
        total_words=len(tokens),
        unique_words=len(set(tokens)),
        average_word_length=sum(len(t) for t in tokens) / len(tokens),
    )
