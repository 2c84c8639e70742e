"""
Rewrite rule primitives shared by the pairwise rule chains.

A rule is an ordered (pattern, replacement) pair applied to the whole text
with ``re.sub``. Rules never fail: no match leaves the text unchanged.
"""

import re
from dataclasses import dataclass, field
from typing import Callable, Iterable

Replacement = str | Callable[[re.Match], str]


@dataclass(frozen=True)
class RewriteRule:
    """
    A single textual rewrite.

    Example:
        RewriteRule("py_true", r"\\bTrue\\b", "true")
    """

    name: str
    pattern: str
    replacement: Replacement
    multiline: bool = False
    _regex: re.Pattern = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        flags = re.MULTILINE if self.multiline else 0
        object.__setattr__(self, "_regex", re.compile(self.pattern, flags))

    def apply(self, text: str) -> str:
        return self._regex.sub(self.replacement, text)


def line_rule(name: str, pattern: str, replacement: Replacement) -> RewriteRule:
    """Build a rule whose ``^``/``$`` anchor on individual lines."""
    return RewriteRule(name, pattern, replacement, multiline=True)


def apply_rules(text: str, rules: Iterable[RewriteRule]) -> str:
    """Apply rules in order, each over the output of the previous one."""
    for rule in rules:
        text = rule.apply(text)
    return text


@dataclass(frozen=True)
class Boilerplate:
    """
    Fixed preamble/postamble wrapped around a translated body.

    Every non-blank body line is prefixed with ``indent``.
    """

    header: str = ""
    footer: str = ""
    indent: str = ""

    def wrap(self, body: str) -> str:
        if self.indent:
            body = "\n".join(
                self.indent + line if line.strip() else line for line in body.split("\n")
            )
        return f"{self.header}{body}{self.footer}"


# Assignment prefix shared by the literal-shape declaration rules:
# group 1 is the indentation, group 2 the variable name.
ASSIGN = r"^([ \t]*)(\w+)[ \t]*=[ \t]*"
