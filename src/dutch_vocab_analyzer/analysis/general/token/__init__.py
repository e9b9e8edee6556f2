# dutch_vocab_analyzer/analysis/general/token/__init__.py
"""
token.
=====

Does: Provide tokenization, word normalization and base recovery.
Exports: tokenize, normalize_word, text_stats, recover_base, is_known_variant
Used by: Classifier, suggestion ranker and orchestrator.
"""

from __future__ import annotations

from .base_recovery import (
    is_known_variant,
    recover_base,
)
from .normalize import (
    MIN_TOKEN_LENGTH,
    normalize_word,
    text_stats,
    tokenize,
)

__all__ = [
    # normalize
    "MIN_TOKEN_LENGTH",
    "tokenize",
    "normalize_word",
    "text_stats",
    # recovery
    "recover_base",
    "is_known_variant",
]
