"""
Python -> Ruby rule chain.

Ruby closes blocks with the ``end`` keyword rather than a brace, so headers
lose their trailing colon and gain nothing; the keyword closer adds ``end``.
"""

from rulemorph.rules.base import ASSIGN, RewriteRule, line_rule


def get_python_to_ruby_rules() -> list[RewriteRule]:
    """Get Python -> Ruby rewrite rules in application order."""
    return [
        RewriteRule("print_double", r'\bprint\s*\(\s*"([^"]+)"\s*\)', r'puts "\1"'),
        RewriteRule("print_single", r"\bprint\s*\(\s*'([^']+)'\s*\)", r"puts '\1'"),
        RewriteRule("print_expr", r"\bprint\s*\(\s*([^)]+)\s*\)", r"puts \1"),
        # Ruby needs no declaration; normalises spacing around '='
        line_rule("assign_any", ASSIGN + r"([^=\n]+)$", r"\1\2 = \3"),
        RewriteRule("def", r"\bdef\s+(\w+)\s*\(([^)]*)\)\s*:", r"def \1(\2)"),
        line_rule("return", r"^([ \t]*)return\s+(.+)$", r"\1return \2"),
        RewriteRule("if", r"\bif\s+([^:\n]+?):", r"if \1"),
        RewriteRule("elif", r"\belif\s+([^:\n]+?):", r"elsif \1"),
        RewriteRule("else", r"\belse\s*:", "else"),
        RewriteRule("while", r"\bwhile\s+([^:\n]+?):", r"while \1"),
        RewriteRule(
            "for_range_1",
            r"\bfor\s+(\w+)\s+in\s+range\s*\(\s*(\d+)\s*\)\s*:",
            r"\2.times do |\1|",
        ),
        RewriteRule(
            "for_range_2",
            r"\bfor\s+(\w+)\s+in\s+range\s*\(\s*(\d+),\s*(\d+)\s*\)\s*:",
            r"(\2...\3).each do |\1|",
        ),
        RewriteRule(
            "for_range_3",
            r"\bfor\s+(\w+)\s+in\s+range\s*\(\s*(\d+),\s*(\d+),\s*(\d+)\s*\)\s*:",
            r"(\2...\3).step(\4) do |\1|",
        ),
        RewriteRule("for_each", r"\bfor\s+(\w+)\s+in\s+(.+?):", r"\2.each do |\1|"),
        RewriteRule("append", r"\.append\(", ".push("),
        RewriteRule("len", r"\blen\(([^)]+)\)", r"\1.length"),
        RewriteRule("upper", r"\.upper\(\)", ".upcase"),
        RewriteRule("lower", r"\.lower\(\)", ".downcase"),
        RewriteRule("strip", r"\.strip\(\)", ".strip"),
        RewriteRule("and", r"\band\b", "&&"),
        RewriteRule("or", r"\bor\b", "||"),
        RewriteRule("not", r"\bnot\b", "!"),
        RewriteRule("true", r"\bTrue\b", "true"),
        RewriteRule("false", r"\bFalse\b", "false"),
        RewriteRule("none", r"\bNone\b", "nil"),
        line_rule("comment", r"^([ \t]*)#[ \t]*(.*?)$", r"\1# \2"),
        RewriteRule("try", r"\btry\s*:", "begin"),
        RewriteRule("except_as", r"\bexcept\s+(\w+)\s+as\s+(\w+)\s*:", r"rescue \1 => \2"),
        RewriteRule("except_type", r"\bexcept\s+(\w+)\s*:", r"rescue \1"),
        RewriteRule("except_bare", r"\bexcept\s*:", "rescue"),
        RewriteRule("finally", r"\bfinally\s*:", "ensure"),
        RewriteRule("class", r"\bclass\s+(\w+)\s*:", r"class \1"),
        RewriteRule("class_extends", r"\bclass\s+(\w+)\s*\(\s*(\w+)\s*\)\s*:", r"class \1 < \2"),
    ]
