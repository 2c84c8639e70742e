"""
Unit tests for the template-based rule engine.
"""

from rulemorph.engine.template_engine import (
    SOURCE_OUTPUT_IDIOMS,
    rewrite_declarations,
    rewrite_output_statements,
    strip_preamble_lines,
    translate_with_templates,
)
from rulemorph.languages.templates import LANGUAGE_TEMPLATES


def templated(code: str, source: str, target: str) -> str:
    return translate_with_templates(code, LANGUAGE_TEMPLATES[source], LANGUAGE_TEMPLATES[target])


def test_javascript_to_java_wraps_and_imports():
    code = 'console.log("hi");\nlet x = 5;'
    assert templated(code, "javascript", "java") == (
        "import java.util.*;\n"
        "\n"
        "public class Main {\n"
        "    public static void main(String[] args) {\n"
        '        System.out.println("hi");\n'
        "        var x = 5;\n"
        "    }\n"
        "}"
    )


def test_cpp_to_go_strips_residual_includes():
    code = "#include <iostream>\nstd::cout << x << std::endl;"
    assert templated(code, "cpp", "go") == (
        'package main\nimport "fmt"\n\nfunc main() {\n    fmt.Println(x)\n}'
    )


def test_output_begins_with_imports_even_without_wrapping():
    code = "public class A {\n    System.out.println(1);\n}"
    result = templated(code, "java", "cpp")
    assert result.startswith("#include <iostream>\n#include <string>\n\n")
    assert "std::cout << 1 << std::endl;" in result
    assert "int main()" not in result


def test_existing_entry_point_is_not_rewrapped():
    code = "public class A {\n    System.out.println(1);\n}"
    result = templated(code, "java", "kotlin")
    assert "println(1)" in result
    assert "fun main()" not in result


def test_printf_cleanup():
    assert templated('printf("hello\\n");', "c", "javascript") == 'console.log("hello");'


def test_ruby_puts_to_php_echo():
    assert templated('puts "hi"', "ruby", "php") == '<?php\n\necho "hi";'


def test_javascript_to_rust_declaration_and_main():
    assert templated("let x = 1;", "javascript", "rust") == "fn main() {\n    let mut x = 1;\n}"


def test_declarations_skipped_for_same_language():
    code = "const y = 1;"
    assert rewrite_declarations(code, "javascript", "javascript", LANGUAGE_TEMPLATES["javascript"]) == code


def test_declarations_only_for_loose_sources():
    code = "var x = 1;"
    assert rewrite_declarations(code, "java", "go", LANGUAGE_TEMPLATES["go"]) == code
    assert rewrite_declarations(code, "typescript", "go", LANGUAGE_TEMPLATES["go"]) == "x := 1"


def test_strip_preamble_lines():
    code = "import os\nfrom x import y\nprint(1)\n  using System;\npackage main\n<?php\nkeep"
    assert strip_preamble_lines(code) == "print(1)\nkeep"


def test_unknown_source_idioms_leave_code_unchanged():
    assert rewrite_output_statements("say 1", "cobol", LANGUAGE_TEMPLATES["go"]) == "say 1"


def test_output_idioms_cover_exactly_the_template_languages():
    assert set(SOURCE_OUTPUT_IDIOMS) == set(LANGUAGE_TEMPLATES)
