"""
Fallback translator facade.

Entry point used by a translation orchestrator when its primary, externally
hosted translator is unavailable. Translation is synchronous, performs no
I/O, and never raises: quality is reported through the confidence score.
"""

import logging
from typing import Any

from rulemorph.config.models import (
    EngineConfig,
    Language,
    Strategy,
    TranslationRequest,
    TranslationResult,
)
from rulemorph.engine.confidence import estimate_confidence
from rulemorph.engine.generic import generic_translation
from rulemorph.engine.pairwise import get_pairwise_chain
from rulemorph.engine.strategy import select_strategy
from rulemorph.engine.template_engine import translate_with_templates
from rulemorph.languages.registry import LanguageRegistry, get_registry

logger = logging.getLogger(__name__)


class FallbackTranslator:
    """
    Rule-based translator for degraded mode.

    Holds only read-only configuration, so one instance can be shared by
    concurrent callers.

    Usage:
        translator = FallbackTranslator()
        result = translator.translate('print("hi")', "python", "javascript")
        result.translated_code  # 'console.log("hi");'
    """

    def __init__(
        self,
        config: EngineConfig | None = None,
        registry: LanguageRegistry | None = None,
    ):
        self.config = config or EngineConfig()
        self.registry = registry or get_registry()

    def translate(
        self,
        source_code: Any,
        source_language: Language | str,
        target_language: Language | str,
    ) -> TranslationResult:
        """
        Translate source code between two languages.

        Args:
            source_code: Source text (None is treated as empty)
            source_language: Language id or catalog Language
            target_language: Language id or catalog Language

        Returns:
            A displayable TranslationResult with is_fallback=True
        """
        code = "" if source_code is None else str(source_code)
        request = TranslationRequest(
            # Line-oriented rules assume LF endings
            source_code=code.replace("\r\n", "\n"),
            source_language=self.registry.resolve(source_language),
            target_language=self.registry.resolve(target_language),
        )
        return self.translate_request(request)

    def translate_request(self, request: TranslationRequest) -> TranslationResult:
        """Translate a pre-built request."""
        source = request.source_language
        target = request.target_language

        max_lines = self.config.max_source_lines
        if max_lines is not None:
            line_count = request.source_code.count("\n") + 1
            if line_count > max_lines:
                logger.warning(
                    f"Source has {line_count} lines (limit {max_lines}); translation may be slow"
                )

        strategy = select_strategy(
            source.id, target.id, self.registry, prefer_templates=self.config.prefer_templates
        )

        try:
            translated = self._run_strategy(strategy, request)
        except Exception:
            logger.exception(
                f"{strategy.value} translation {source.id} -> {target.id} failed; "
                f"degrading to generic"
            )
            strategy = Strategy.GENERIC
            translated = generic_translation(request.source_code, source, target)

        confidence = estimate_confidence(strategy, source.id, target.id)
        logger.info(
            f"Fallback translation {source.id} -> {target.id} "
            f"via {strategy.value} (confidence {confidence})"
        )
        return TranslationResult(
            translated_code=translated,
            confidence=confidence,
            is_fallback=True,
            strategy=strategy,
        )

    def _run_strategy(self, strategy: Strategy, request: TranslationRequest) -> str:
        source = request.source_language
        target = request.target_language

        if strategy == Strategy.TEMPLATE:
            return translate_with_templates(
                request.source_code,
                self.registry.get_template(source.id),
                self.registry.get_template(target.id),
            )
        if strategy == Strategy.PAIRWISE:
            chain = get_pairwise_chain(source.id, target.id)
            return chain.transform(request.source_code, self.config.block_matching)
        return generic_translation(request.source_code, source, target)


_default_translator = FallbackTranslator()


def translate(
    source_code: str,
    source_language: Language | str,
    target_language: Language | str,
) -> TranslationResult:
    """Translate with the default configuration and language registry."""
    return _default_translator.translate(source_code, source_language, target_language)
