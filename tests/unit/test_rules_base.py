"""
Unit tests for rewrite rule primitives.
"""

import re
from dataclasses import FrozenInstanceError

import pytest

from rulemorph.rules.base import ASSIGN, Boilerplate, RewriteRule, apply_rules, line_rule


def test_rewrite_rule_replaces_all_matches():
    rule = RewriteRule("true", r"\bTrue\b", "true")
    assert rule.apply("a = True or True") == "a = true or true"


def test_rewrite_rule_without_match_is_identity():
    rule = RewriteRule("true", r"\bTrue\b", "true")
    assert rule.apply("x = 1") == "x = 1"


def test_rewrite_rule_callable_replacement():
    rule = RewriteRule("upper", r"\b(\w+)!", lambda m: m.group(1).upper())
    assert rule.apply("hi! there") == "HI there"


def test_rewrite_rule_is_immutable():
    rule = RewriteRule("x", r"x", "y")
    with pytest.raises(FrozenInstanceError):
        rule.name = "z"


def test_line_rule_anchors_per_line():
    rule = line_rule("comment", r"^([ \t]*)#[ \t]*(.*?)$", r"\1// \2")
    assert rule.apply("# a\n    # b") == "// a\n    // b"


def test_plain_rule_anchors_whole_text():
    rule = RewriteRule("comment", r"^#(.*)$", r"//\1")
    assert rule.apply("#a\n#b") == "#a\n#b"


def test_apply_rules_runs_in_order():
    rules = [
        RewriteRule("first", r"a", "b"),
        RewriteRule("second", r"b", "c"),
    ]
    assert apply_rules("a", rules) == "c"
    assert apply_rules("a", list(reversed(rules))) == "b"


def test_assign_prefix_groups():
    match = re.match(ASSIGN + r"(\d+)$", "    total = 10")
    assert match.groups() == ("    ", "total", "10")


def test_assign_prefix_ignores_comparison():
    assert re.match(ASSIGN + r"([^=\n]+)$", "x == 5") is None


class TestBoilerplate:
    def test_wrap_without_indent(self):
        wrapper = Boilerplate(header="<?php\n", footer="\n?>")
        assert wrapper.wrap("$x = 1;") == "<?php\n$x = 1;\n?>"

    def test_wrap_leaves_blank_lines_unindented(self):
        wrapper = Boilerplate(header="<h>\n", footer="\n<f>", indent="  ")
        assert wrapper.wrap("a\n\nb") == "<h>\n  a\n\n  b\n<f>"

    def test_wrap_trailing_newline_adds_no_whitespace_line(self):
        wrapper = Boilerplate(header="<h>\n", footer="\n<f>", indent="    ")
        assert wrapper.wrap("x\n") == "<h>\n    x\n\n<f>"

    def test_default_is_identity(self):
        assert Boilerplate().wrap("x\ny") == "x\ny"
