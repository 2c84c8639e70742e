"""
RuleMorph - rule-based fallback code translation.
"""

from rulemorph.config.models import Language, Strategy, TranslationRequest, TranslationResult
from rulemorph.engine.translator import FallbackTranslator, translate

__version__ = "1.0.0"

__all__ = [
    "FallbackTranslator",
    "Language",
    "Strategy",
    "TranslationRequest",
    "TranslationResult",
    "translate",
]
