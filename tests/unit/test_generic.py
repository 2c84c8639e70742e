"""
Unit tests for the generic commented-echo fallback.
"""

from rulemorph.engine.generic import generic_translation
from rulemorph.languages.registry import get_registry


def test_every_source_line_is_commented():
    registry = get_registry()
    code = "x = 1\n\nprint(x)"
    result = generic_translation(code, registry.get("python"), registry.get("rust"))
    lines = result.split("\n")

    assert lines[0] == "// Rule-based translation from Python to Rust"
    for line in code.split("\n"):
        assert f"// {line}" in lines


def test_uses_target_comment_prefix():
    registry = get_registry()
    result = generic_translation("DISPLAY 'HI'.", registry.resolve("cobol"), registry.get("python"))
    assert "# DISPLAY 'HI'." in result.split("\n")
    assert "Original cobol code:" in result


def test_guidance_follows_source():
    registry = get_registry()
    result = generic_translation("a", registry.get("kotlin"), registry.get("scala"))
    assert result.index("// a") < result.index("Convert the above Kotlin code to Scala by hand.")
