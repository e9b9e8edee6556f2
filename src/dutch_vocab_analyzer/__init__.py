"""
dutch_vocab_analyzer
====================

Does: Root package for the Dutch word-analysis engine (tokenizer, known/unknown
      classifier with inflection matching, suggestion ranker) and its phrase workflow.
Returns: Subpackages under `dutch_vocab_analyzer.analysis`.
"""

__all__: list[str] = []
__docformat__ = "google"
