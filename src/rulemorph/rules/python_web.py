"""
Python -> JavaScript, TypeScript and PHP rule chains.

Every chain runs in the same relative order: output statements, literal-typed
assignments, definitions, returns, conditionals, loops, built-in names,
boolean/logical keywords, comments, then exception and class headers.
Reordering changes output because rules overlap (e.g. ``True`` is matched by
both the boolean-assignment rule and the boolean-literal rule).
"""

from rulemorph.rules.base import ASSIGN, Boilerplate, RewriteRule, line_rule


def get_python_to_javascript_rules() -> list[RewriteRule]:
    """Get Python -> JavaScript rewrite rules in application order."""
    return [
        # Output
        RewriteRule("print_double", r'\bprint\s*\(\s*"([^"]+)"\s*\)', r'console.log("\1");'),
        RewriteRule("print_single", r"\bprint\s*\(\s*'([^']+)'\s*\)", r"console.log('\1');"),
        RewriteRule("print_expr", r"\bprint\s*\(\s*([^)]+)\s*\)", r"console.log(\1);"),
        # Literal-typed assignments
        line_rule("assign_str_double", ASSIGN + r'"([^"]*)"$', r'\1let \2 = "\3";'),
        line_rule("assign_str_single", ASSIGN + r"'([^']*)'$", r"\1let \2 = '\3';"),
        line_rule("assign_number", ASSIGN + r"(\d+\.?\d*)$", r"\1let \2 = \3;"),
        line_rule("assign_true", ASSIGN + r"True$", r"\1let \2 = true;"),
        line_rule("assign_false", ASSIGN + r"False$", r"\1let \2 = false;"),
        line_rule("assign_none", ASSIGN + r"None$", r"\1let \2 = null;"),
        line_rule("assign_list", ASSIGN + r"\[(.*?)\]$", r"\1let \2 = [\3];"),
        line_rule("assign_dict", ASSIGN + r"\{(.*?)\}$", r"\1let \2 = {\3};"),
        line_rule("assign_any", ASSIGN + r"([^=\n]+)$", r"\1let \2 = \3;"),
        # Definitions and returns
        RewriteRule("def", r"\bdef\s+(\w+)\s*\(([^)]*)\)\s*:", r"function \1(\2) {"),
        line_rule("return", r"^([ \t]*)return\s+(.+)$", r"\1return \2;"),
        # Conditionals
        RewriteRule("if", r"\bif\s+([^:\n]+?):", r"if (\1) {"),
        RewriteRule("elif", r"\belif\s+([^:\n]+?):", r"} else if (\1) {"),
        RewriteRule("else", r"\belse\s*:", r"} else {"),
        # Loops
        RewriteRule("while", r"\bwhile\s+([^:\n]+?):", r"while (\1) {"),
        RewriteRule(
            "for_range_1",
            r"\bfor\s+(\w+)\s+in\s+range\s*\(\s*(\d+)\s*\)\s*:",
            r"for (let \1 = 0; \1 < \2; \1++) {",
        ),
        RewriteRule(
            "for_range_2",
            r"\bfor\s+(\w+)\s+in\s+range\s*\(\s*(\d+),\s*(\d+)\s*\)\s*:",
            r"for (let \1 = \2; \1 < \3; \1++) {",
        ),
        RewriteRule(
            "for_range_3",
            r"\bfor\s+(\w+)\s+in\s+range\s*\(\s*(\d+),\s*(\d+),\s*(\d+)\s*\)\s*:",
            r"for (let \1 = \2; \1 < \3; \1 += \4) {",
        ),
        RewriteRule("for_each", r"\bfor\s+(\w+)\s+in\s+(.+?):", r"for (let \1 of \2) {"),
        # Built-in names
        RewriteRule("append", r"\.append\(", ".push("),
        RewriteRule("extend", r"\.extend\(", ".push(..."),
        RewriteRule("len", r"\blen\(([^)]+)\)", r"\1.length"),
        RewriteRule("strip", r"\.strip\(\)", ".trim()"),
        RewriteRule("upper", r"\.upper\(\)", ".toUpperCase()"),
        RewriteRule("lower", r"\.lower\(\)", ".toLowerCase()"),
        # Boolean and logical keywords
        RewriteRule("and", r"\band\b", "&&"),
        RewriteRule("or", r"\bor\b", "||"),
        RewriteRule("not", r"\bnot\b", "!"),
        RewriteRule("true", r"\bTrue\b", "true"),
        RewriteRule("false", r"\bFalse\b", "false"),
        RewriteRule("none", r"\bNone\b", "null"),
        # Input
        RewriteRule("input_double", r'\binput\s*\(\s*"([^"]+)"\s*\)', r'prompt("\1")'),
        RewriteRule("input_single", r"\binput\s*\(\s*'([^']+)'\s*\)", r"prompt('\1')"),
        RewriteRule("input_expr", r"\binput\s*\(\s*([^)]*)\s*\)", r"prompt(\1)"),
        # Comments
        line_rule("comment", r"^([ \t]*)#[ \t]*(.*?)$", r"\1// \2"),
        # Exceptions
        RewriteRule("try", r"\btry\s*:", "try {"),
        RewriteRule("except_as", r"\bexcept\s+(\w+)\s+as\s+(\w+)\s*:", r"} catch (\2) {"),
        RewriteRule("except_type", r"\bexcept\s+(\w+)\s*:", r"} catch (\1) {"),
        RewriteRule("except_bare", r"\bexcept\s*:", "} catch (error) {"),
        RewriteRule("finally", r"\bfinally\s*:", "} finally {"),
        # Classes
        RewriteRule("class", r"\bclass\s+(\w+)\s*:", r"class \1 {"),
        RewriteRule("class_extends", r"\bclass\s+(\w+)\s*\(\s*(\w+)\s*\)\s*:", r"class \1 extends \2 {"),
    ]


def get_python_to_typescript_rules() -> list[RewriteRule]:
    """Get Python -> TypeScript rewrite rules in application order."""
    return [
        RewriteRule("print_double", r'\bprint\s*\(\s*"([^"]+)"\s*\)', r'console.log("\1");'),
        RewriteRule("print_single", r"\bprint\s*\(\s*'([^']+)'\s*\)", r"console.log('\1');"),
        RewriteRule("print_expr", r"\bprint\s*\(\s*([^)]+)\s*\)", r"console.log(\1);"),
        # Declared types come from the literal shape
        line_rule("assign_str_double", ASSIGN + r'"([^"]*)"$', r'\1let \2: string = "\3";'),
        line_rule("assign_str_single", ASSIGN + r"'([^']*)'$", r"\1let \2: string = '\3';"),
        line_rule("assign_int", ASSIGN + r"(\d+)$", r"\1let \2: number = \3;"),
        line_rule("assign_float", ASSIGN + r"(\d+\.\d+)$", r"\1let \2: number = \3;"),
        line_rule("assign_true", ASSIGN + r"True$", r"\1let \2: boolean = true;"),
        line_rule("assign_false", ASSIGN + r"False$", r"\1let \2: boolean = false;"),
        line_rule("assign_none", ASSIGN + r"None$", r"\1let \2: any = null;"),
        line_rule("assign_list", ASSIGN + r"\[(.*?)\]$", r"\1let \2: any[] = [\3];"),
        line_rule("assign_any", ASSIGN + r"([^=\n]+)$", r"\1let \2 = \3;"),
        RewriteRule("def", r"\bdef\s+(\w+)\s*\(([^)]*)\)\s*:", r"function \1(\2): void {"),
        line_rule("return", r"^([ \t]*)return\s+(.+)$", r"\1return \2;"),
        RewriteRule("if", r"\bif\s+([^:\n]+?):", r"if (\1) {"),
        RewriteRule("elif", r"\belif\s+([^:\n]+?):", r"} else if (\1) {"),
        RewriteRule("else", r"\belse\s*:", r"} else {"),
        RewriteRule("while", r"\bwhile\s+([^:\n]+?):", r"while (\1) {"),
        RewriteRule(
            "for_range_1",
            r"\bfor\s+(\w+)\s+in\s+range\s*\(\s*(\d+)\s*\)\s*:",
            r"for (let \1: number = 0; \1 < \2; \1++) {",
        ),
        RewriteRule(
            "for_range_2",
            r"\bfor\s+(\w+)\s+in\s+range\s*\(\s*(\d+),\s*(\d+)\s*\)\s*:",
            r"for (let \1: number = \2; \1 < \3; \1++) {",
        ),
        RewriteRule(
            "for_range_3",
            r"\bfor\s+(\w+)\s+in\s+range\s*\(\s*(\d+),\s*(\d+),\s*(\d+)\s*\)\s*:",
            r"for (let \1: number = \2; \1 < \3; \1 += \4) {",
        ),
        RewriteRule("for_each", r"\bfor\s+(\w+)\s+in\s+(.+?):", r"for (let \1 of \2) {"),
        RewriteRule("append", r"\.append\(", ".push("),
        RewriteRule("len", r"\blen\(([^)]+)\)", r"\1.length"),
        RewriteRule("strip", r"\.strip\(\)", ".trim()"),
        RewriteRule("upper", r"\.upper\(\)", ".toUpperCase()"),
        RewriteRule("lower", r"\.lower\(\)", ".toLowerCase()"),
        RewriteRule("and", r"\band\b", "&&"),
        RewriteRule("or", r"\bor\b", "||"),
        RewriteRule("not", r"\bnot\b", "!"),
        RewriteRule("true", r"\bTrue\b", "true"),
        RewriteRule("false", r"\bFalse\b", "false"),
        RewriteRule("none", r"\bNone\b", "null"),
        line_rule("comment", r"^([ \t]*)#[ \t]*(.*?)$", r"\1// \2"),
    ]


def get_python_to_php_rules() -> list[RewriteRule]:
    """Get Python -> PHP rewrite rules in application order."""
    return [
        RewriteRule("print_double", r'\bprint\s*\(\s*"([^"]+)"\s*\)', r'echo "\1";'),
        RewriteRule("print_single", r"\bprint\s*\(\s*'([^']+)'\s*\)", r"echo '\1';"),
        RewriteRule("print_expr", r"\bprint\s*\(\s*([^)]+)\s*\)", r"echo \1;"),
        # PHP variables need no declared type, only the sigil
        line_rule("assign_any", ASSIGN + r"([^=\n]+)$", r"\1$\2 = \3;"),
        RewriteRule("def", r"\bdef\s+(\w+)\s*\(([^)]*)\)\s*:", r"function \1(\2) {"),
        line_rule("return", r"^([ \t]*)return\s+(.+)$", r"\1return \2;"),
        RewriteRule("if", r"\bif\s+([^:\n]+?):", r"if (\1) {"),
        RewriteRule("elif", r"\belif\s+([^:\n]+?):", r"} elseif (\1) {"),
        RewriteRule("else", r"\belse\s*:", r"} else {"),
        RewriteRule("while", r"\bwhile\s+([^:\n]+?):", r"while (\1) {"),
        RewriteRule(
            "for_range_1",
            r"\bfor\s+(\w+)\s+in\s+range\s*\(\s*(\d+)\s*\)\s*:",
            r"for ($\1 = 0; $\1 < \2; $\1++) {",
        ),
        RewriteRule(
            "for_range_2",
            r"\bfor\s+(\w+)\s+in\s+range\s*\(\s*(\d+),\s*(\d+)\s*\)\s*:",
            r"for ($\1 = \2; $\1 < \3; $\1++) {",
        ),
        RewriteRule(
            "for_range_3",
            r"\bfor\s+(\w+)\s+in\s+range\s*\(\s*(\d+),\s*(\d+),\s*(\d+)\s*\)\s*:",
            r"for ($\1 = \2; $\1 < \3; $\1 += \4) {",
        ),
        RewriteRule("for_each", r"\bfor\s+(\w+)\s+in\s+(.+?):", r"foreach (\2 as $\1) {"),
        RewriteRule("append", r"\b(\w+)\.append\((.+?)\)", r"array_push($\1, \2)"),
        RewriteRule("len", r"\blen\(([^)]+)\)", r"count(\1)"),
        RewriteRule("strip", r"\b(\w+)\.strip\(\)", r"trim($\1)"),
        RewriteRule("upper", r"\b(\w+)\.upper\(\)", r"strtoupper($\1)"),
        RewriteRule("lower", r"\b(\w+)\.lower\(\)", r"strtolower($\1)"),
        RewriteRule("and", r"\band\b", "&&"),
        RewriteRule("or", r"\bor\b", "||"),
        RewriteRule("not", r"\bnot\b", "!"),
        RewriteRule("true", r"\bTrue\b", "true"),
        RewriteRule("false", r"\bFalse\b", "false"),
        RewriteRule("none", r"\bNone\b", "null"),
        line_rule("comment", r"^([ \t]*)#[ \t]*(.*?)$", r"\1// \2"),
    ]


PYTHON_TO_PHP_BOILERPLATE = Boilerplate(header="<?php\n", footer="\n?>")
