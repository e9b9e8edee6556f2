# dutch_vocab_analyzer/analysis/__init__.py
"""
analysis.
========

Does: Public entry points of the engine.
Exports: tokenize, classify, analyze_text, suggest, Mode, Difficulty, PhraseAnalyzer
"""

from __future__ import annotations

from .general.token import tokenize
from .general.types import ClassificationResult, Difficulty, Mode, WordSuggestion
from .orchestrator import AddWordOutcome, PhraseAnalyzer
from .vocab import analyze_text, classify, suggest

__all__ = [
    "tokenize",
    "classify",
    "analyze_text",
    "suggest",
    "Mode",
    "Difficulty",
    "ClassificationResult",
    "WordSuggestion",
    "PhraseAnalyzer",
    "AddWordOutcome",
]
