# dutch_vocab_analyzer/analysis/general/token/suffix/__init__.py
"""
suffix.
======

Does: Provide the ordered suffix recovery rules and their dispatcher.
Exports: VARIANT_RULES, DIMINUTIVE_SUFFIXES, recover_with_registry
Used by: base_recovery and the classifier.
"""

from __future__ import annotations

from .recovery import DIMINUTIVE_SUFFIXES
from .registry import (
    VARIANT_RULES,
    recover_with_registry,
)

__all__ = [
    "DIMINUTIVE_SUFFIXES",
    "VARIANT_RULES",
    "recover_with_registry",
]
