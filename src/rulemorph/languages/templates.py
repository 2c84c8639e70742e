"""
Per-language code-generation templates.

A template is a small set of generators (print statement, variable
declaration, import preamble, entry-point wrapper) that lets the shared
template engine target many languages without per-pair rule chains.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, Mapping


def indent_block(body: str, indent: str) -> str:
    """Indent every non-blank line of ``body`` by ``indent``."""
    return "\n".join(indent + line if line.strip() else line for line in body.split("\n"))


@dataclass(frozen=True)
class LanguageTemplate:
    """Code generators for one target language."""

    language_id: str
    print_statement: Callable[[str], str]
    variable_declaration: Callable[[str, str], str]
    imports: tuple[str, ...] = ()
    main_function: Callable[[str], str] | None = None

    @property
    def requires_entry_point(self) -> bool:
        """True when standalone statements must be wrapped in a main function."""
        return self.main_function is not None


def _java_main(body: str) -> str:
    return (
        "public class Main {\n"
        "    public static void main(String[] args) {\n"
        f"{indent_block(body, '        ')}\n"
        "    }\n"
        "}"
    )


def _kotlin_main(body: str) -> str:
    return f"fun main() {{\n{indent_block(body, '    ')}\n}}"


def _c_main(body: str) -> str:
    return f"int main() {{\n{indent_block(body, '    ')}\n    return 0;\n}}"


def _go_main(body: str) -> str:
    return f"func main() {{\n{indent_block(body, '    ')}\n}}"


def _rust_main(body: str) -> str:
    return f"fn main() {{\n{indent_block(body, '    ')}\n}}"


def _build_templates() -> dict[str, LanguageTemplate]:
    templates = [
        LanguageTemplate(
            language_id="javascript",
            print_statement=lambda expr: f"console.log({expr});",
            variable_declaration=lambda name, expr: f"let {name} = {expr};",
        ),
        LanguageTemplate(
            language_id="typescript",
            print_statement=lambda expr: f"console.log({expr});",
            variable_declaration=lambda name, expr: f"let {name} = {expr};",
        ),
        LanguageTemplate(
            language_id="java",
            print_statement=lambda expr: f"System.out.println({expr});",
            variable_declaration=lambda name, expr: f"var {name} = {expr};",
            imports=("import java.util.*;",),
            main_function=_java_main,
        ),
        LanguageTemplate(
            language_id="kotlin",
            print_statement=lambda expr: f"println({expr})",
            variable_declaration=lambda name, expr: f"var {name} = {expr}",
            main_function=_kotlin_main,
        ),
        LanguageTemplate(
            language_id="cpp",
            print_statement=lambda expr: f"std::cout << {expr} << std::endl;",
            variable_declaration=lambda name, expr: f"auto {name} = {expr};",
            imports=("#include <iostream>", "#include <string>"),
            main_function=_c_main,
        ),
        LanguageTemplate(
            language_id="c",
            print_statement=lambda expr: f'printf("%s\\n", {expr});',
            variable_declaration=lambda name, expr: f"int {name} = {expr};",
            imports=("#include <stdio.h>",),
            main_function=_c_main,
        ),
        LanguageTemplate(
            language_id="go",
            print_statement=lambda expr: f"fmt.Println({expr})",
            variable_declaration=lambda name, expr: f"{name} := {expr}",
            imports=("package main", 'import "fmt"'),
            main_function=_go_main,
        ),
        LanguageTemplate(
            language_id="rust",
            print_statement=lambda expr: f'println!("{{}}", {expr});',
            variable_declaration=lambda name, expr: f"let mut {name} = {expr};",
            main_function=_rust_main,
        ),
        LanguageTemplate(
            language_id="swift",
            print_statement=lambda expr: f"print({expr})",
            variable_declaration=lambda name, expr: f"var {name} = {expr}",
        ),
        LanguageTemplate(
            language_id="ruby",
            print_statement=lambda expr: f"puts {expr}",
            variable_declaration=lambda name, expr: f"{name} = {expr}",
        ),
        LanguageTemplate(
            language_id="php",
            print_statement=lambda expr: f"echo {expr};",
            variable_declaration=lambda name, expr: f"${name} = {expr};",
            imports=("<?php",),
        ),
    ]
    return {t.language_id: t for t in templates}


# Read-only, built once at import time and shared across all calls.
LANGUAGE_TEMPLATES: Mapping[str, LanguageTemplate] = MappingProxyType(_build_templates())
