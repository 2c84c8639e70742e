"""
Strategy selection for a (source, target) language pair.
"""

import logging

from rulemorph.config.models import Strategy
from rulemorph.engine.pairwise import get_pairwise_chain
from rulemorph.languages.registry import LanguageRegistry, get_registry

logger = logging.getLogger(__name__)


def select_strategy(
    source_id: str,
    target_id: str,
    registry: LanguageRegistry | None = None,
    prefer_templates: bool = True,
) -> Strategy:
    """
    Choose the translation path for a language pair.

    Depends only on the two ids, never on the code being translated.
    Priority: template (both languages have a template), then the pair's
    dedicated chain, then generic. ``prefer_templates=False`` swaps the first two.
    """
    registry = registry or get_registry()
    has_templates = registry.has_template(source_id) and registry.has_template(target_id)
    has_chain = get_pairwise_chain(source_id, target_id) is not None

    if prefer_templates:
        order = ((has_templates, Strategy.TEMPLATE), (has_chain, Strategy.PAIRWISE))
    else:
        order = ((has_chain, Strategy.PAIRWISE), (has_templates, Strategy.TEMPLATE))

    for available, strategy in order:
        if available:
            logger.debug(f"{source_id} -> {target_id}: {strategy.value} strategy")
            return strategy

    logger.debug(f"{source_id} -> {target_id}: no template or chain, using generic strategy")
    return Strategy.GENERIC
