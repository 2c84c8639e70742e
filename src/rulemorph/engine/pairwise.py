"""
Registry of hand-authored pairwise rule chains.

Each supported (source, target) pair maps to one PairwiseChain whose
``transform`` runs the chain's ordered rules, infers block closers, and wraps
the result in the target's own boilerplate. The registry is built once at
import time and never mutated.
"""

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from rulemorph.config.models import BlockMatching
from rulemorph.engine.blocks import (
    BRACE_CLOSER,
    END_KEYWORD_CLOSER,
    BlockCloser,
    infer_block_closers,
)
from rulemorph.rules.base import Boilerplate, RewriteRule, apply_rules
from rulemorph.rules.python_jvm import (
    PYTHON_TO_CSHARP_BOILERPLATE,
    PYTHON_TO_JAVA_BOILERPLATE,
    get_python_to_csharp_rules,
    get_python_to_java_rules,
)
from rulemorph.rules.python_native import (
    PYTHON_TO_C_BOILERPLATE,
    PYTHON_TO_CPP_BOILERPLATE,
    PYTHON_TO_GO_BOILERPLATE,
    get_python_to_c_rules,
    get_python_to_cpp_rules,
    get_python_to_go_rules,
    get_python_to_swift_rules,
)
from rulemorph.rules.python_ruby import get_python_to_ruby_rules
from rulemorph.rules.python_web import (
    PYTHON_TO_PHP_BOILERPLATE,
    get_python_to_javascript_rules,
    get_python_to_php_rules,
    get_python_to_typescript_rules,
)
from rulemorph.rules.reverse import (
    JAVA_TO_CSHARP_BOILERPLATE,
    get_java_to_csharp_rules,
    get_javascript_to_python_rules,
)

logger = logging.getLogger(__name__)

PairKey = tuple[str, str]


@dataclass(frozen=True)
class PairwiseChain:
    """An ordered rule sequence for one explicitly supported language pair."""

    source_id: str
    target_id: str
    rules: tuple[RewriteRule, ...]
    closer: BlockCloser | None = None
    boilerplate: Boilerplate | None = None

    @property
    def key(self) -> PairKey:
        return (self.source_id, self.target_id)

    def rewrite(self, code: str) -> str:
        """Apply only the ordered rewrite rules."""
        return apply_rules(code, self.rules)

    def transform(self, code: str, block_matching: BlockMatching = BlockMatching.LOOKAHEAD) -> str:
        """
        Translate text with this chain.

        Args:
            code: Source text
            block_matching: Closing-token inference mode

        Returns:
            Translated text, wrapped in the target boilerplate if any
        """
        logger.debug(f"Applying {len(self.rules)} rules for {self.source_id} -> {self.target_id}")
        translated = self.rewrite(code)
        # Header rules must have run before closers are inferred
        if self.closer is not None:
            translated = infer_block_closers(translated, self.closer, block_matching)
        if self.boilerplate is not None:
            translated = self.boilerplate.wrap(translated)
        return translated


def _build_chains() -> dict[PairKey, PairwiseChain]:
    chains = [
        PairwiseChain("python", "javascript", tuple(get_python_to_javascript_rules()), BRACE_CLOSER),
        PairwiseChain("python", "typescript", tuple(get_python_to_typescript_rules()), BRACE_CLOSER),
        PairwiseChain(
            "python", "java", tuple(get_python_to_java_rules()), BRACE_CLOSER, PYTHON_TO_JAVA_BOILERPLATE
        ),
        PairwiseChain(
            "python", "cpp", tuple(get_python_to_cpp_rules()), BRACE_CLOSER, PYTHON_TO_CPP_BOILERPLATE
        ),
        PairwiseChain("python", "c", tuple(get_python_to_c_rules()), BRACE_CLOSER, PYTHON_TO_C_BOILERPLATE),
        PairwiseChain("python", "go", tuple(get_python_to_go_rules()), BRACE_CLOSER, PYTHON_TO_GO_BOILERPLATE),
        PairwiseChain("python", "ruby", tuple(get_python_to_ruby_rules()), END_KEYWORD_CLOSER),
        PairwiseChain(
            "python", "php", tuple(get_python_to_php_rules()), BRACE_CLOSER, PYTHON_TO_PHP_BOILERPLATE
        ),
        PairwiseChain("python", "swift", tuple(get_python_to_swift_rules()), BRACE_CLOSER),
        PairwiseChain(
            "python", "csharp", tuple(get_python_to_csharp_rules()), BRACE_CLOSER, PYTHON_TO_CSHARP_BOILERPLATE
        ),
        PairwiseChain("javascript", "python", tuple(get_javascript_to_python_rules())),
        PairwiseChain(
            "java", "csharp", tuple(get_java_to_csharp_rules()), boilerplate=JAVA_TO_CSHARP_BOILERPLATE
        ),
    ]
    return {chain.key: chain for chain in chains}


PAIRWISE_CHAINS: Mapping[PairKey, PairwiseChain] = MappingProxyType(_build_chains())


def get_pairwise_chain(source_id: str, target_id: str) -> PairwiseChain | None:
    """Get the chain for an exact ordered pair, or None."""
    return PAIRWISE_CHAINS.get((source_id.strip().lower(), target_id.strip().lower()))


def list_supported_pairs() -> list[PairKey]:
    """Get every pair with a dedicated chain, in registration order."""
    return list(PAIRWISE_CHAINS.keys())
