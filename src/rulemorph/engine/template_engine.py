"""
Template-based rule engine.

One shared engine parameterised by the source and target language templates:
output statements and loosely-typed declarations recognised in the source are
re-emitted through the target template, then the target's entry point and
import preamble are added.
"""

import logging
import re
from dataclasses import dataclass
from typing import Callable

from rulemorph.languages.templates import LanguageTemplate

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OutputIdiom:
    """A source-language output statement with a single captured argument."""

    pattern: re.Pattern
    clean: Callable[[str], str] | None = None

    def rewrite(self, code: str, target: LanguageTemplate) -> str:
        def _replace(match: re.Match) -> str:
            content = match.group(1)
            if self.clean is not None:
                content = self.clean(content)
            return target.print_statement(content)

        return self.pattern.sub(_replace, code)


def _clean_printf(content: str) -> str:
    """Normalise the format string quotes and drop literal newlines."""
    content = re.sub(r"""["'](.*)["']""", r'"\1"', content, count=1)
    return content.replace("\\n", "")


_CALL = r"\((.*?)\)"

# Non-greedy: nested parentheses and chained stream operators are not unwrapped.
SOURCE_OUTPUT_IDIOMS: dict[str, tuple[OutputIdiom, ...]] = {
    "javascript": (OutputIdiom(re.compile(r"console\.log" + _CALL + r";?")),),
    "typescript": (OutputIdiom(re.compile(r"console\.log" + _CALL + r";?")),),
    "java": (OutputIdiom(re.compile(r"System\.out\.println" + _CALL + r";?")),),
    "kotlin": (OutputIdiom(re.compile(r"\bprintln" + _CALL)),),
    "cpp": (OutputIdiom(re.compile(r"std::cout\s*<<\s*(.*?)\s*<<\s*std::endl;?")),),
    "c": (OutputIdiom(re.compile(r"\bprintf" + _CALL + r";?"), clean=_clean_printf),),
    "go": (OutputIdiom(re.compile(r"fmt\.Println" + _CALL)),),
    "rust": (OutputIdiom(re.compile(r"\bprintln!" + _CALL + r";?")),),
    "swift": (OutputIdiom(re.compile(r"\bprint" + _CALL)),),
    "ruby": (OutputIdiom(re.compile(r"\bputs\s+(.*?)$", re.MULTILINE)),),
    "php": (OutputIdiom(re.compile(r"\becho\s+(.*?);")),),
}

# The let/const/var family, untyped form only
LOOSE_DECLARATION_SOURCES = frozenset({"javascript", "typescript"})
_LOOSE_DECLARATION = re.compile(r"\b(?:let|const|var)\s+(\w+)\s*=\s*(.*?);")

_ENTRY_POINT_MARKER = re.compile(r"\bmain\b|\bclass\b", re.IGNORECASE)
_PREAMBLE_LINE = re.compile(
    r"^[ \t]*(?:import\b|from\s+\S+\s+import\b|#include\b|using\b|package\b|<\?php).*(?:\n|$)",
    re.MULTILINE,
)


def rewrite_output_statements(code: str, source_id: str, target: LanguageTemplate) -> str:
    """Rewrite recognised output statements into the target's print statement."""
    for idiom in SOURCE_OUTPUT_IDIOMS.get(source_id, ()):
        code = idiom.rewrite(code, target)
    return code


def rewrite_declarations(code: str, source_id: str, target_id: str, target: LanguageTemplate) -> str:
    """Rewrite let/const/var declarations into the target's declaration form."""
    if source_id not in LOOSE_DECLARATION_SOURCES or source_id == target_id:
        return code
    return _LOOSE_DECLARATION.sub(
        lambda m: target.variable_declaration(m.group(1), m.group(2)), code
    )


def strip_preamble_lines(code: str) -> str:
    """Drop residual import/include/using/package lines."""
    return _PREAMBLE_LINE.sub("", code).strip()


def translate_with_templates(
    code: str,
    source_template: LanguageTemplate,
    target_template: LanguageTemplate,
) -> str:
    """
    Translate code through the shared template engine.

    Args:
        code: Source text
        source_template: Template registered for the source language
        target_template: Template registered for the target language

    Returns:
        Translated text; begins with the target's import lines when it has any
    """
    source_id = source_template.language_id
    target_id = target_template.language_id

    translated = rewrite_output_statements(code, source_id, target_template)
    translated = rewrite_declarations(translated, source_id, target_id, target_template)

    if target_template.requires_entry_point and not _ENTRY_POINT_MARKER.search(translated):
        logger.debug(f"Wrapping {target_id} body in an entry point")
        translated = target_template.main_function(strip_preamble_lines(translated))

    if target_template.imports:
        translated = "\n".join(target_template.imports) + "\n\n" + translated

    return translated
