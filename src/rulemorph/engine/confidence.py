"""
Advisory confidence scores.

Scores are fixed per strategy and pair, never measured, and never change what
gets translated.
"""

from types import MappingProxyType

from rulemorph.config.models import Strategy

TEMPLATE_CONFIDENCE = 60
GENERIC_CONFIDENCE = 25

# Lower where static types must be guessed from literal shapes
PAIRWISE_CONFIDENCE = MappingProxyType({
    ("python", "javascript"): 70,
    ("python", "typescript"): 70,
    ("python", "java"): 65,
    ("python", "ruby"): 65,
    ("python", "cpp"): 60,
    ("python", "go"): 60,
    ("python", "php"): 60,
    ("python", "csharp"): 60,
    ("python", "c"): 55,
    ("python", "swift"): 55,
    ("javascript", "python"): 50,
    ("java", "csharp"): 40,
})


def estimate_confidence(strategy: Strategy, source_id: str, target_id: str) -> int:
    """Get the fixed confidence for a strategy and pair, always within [0, 100]."""
    if strategy == Strategy.TEMPLATE:
        score = TEMPLATE_CONFIDENCE
    elif strategy == Strategy.PAIRWISE:
        score = PAIRWISE_CONFIDENCE.get((source_id, target_id), GENERIC_CONFIDENCE)
    else:
        score = GENERIC_CONFIDENCE
    return max(0, min(100, score))
