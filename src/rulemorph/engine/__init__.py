"""
Rule-based fallback translation engine.

Strategy selection, template and pairwise rule engines, block-closer
inference, boilerplate wrapping and confidence scoring.
"""

from rulemorph.engine.pairwise import PairwiseChain, get_pairwise_chain, list_supported_pairs
from rulemorph.engine.strategy import select_strategy
from rulemorph.engine.confidence import estimate_confidence
from rulemorph.engine.translator import FallbackTranslator, translate

__all__ = [
    "FallbackTranslator",
    "PairwiseChain",
    "estimate_confidence",
    "get_pairwise_chain",
    "list_supported_pairs",
    "select_strategy",
    "translate",
]
