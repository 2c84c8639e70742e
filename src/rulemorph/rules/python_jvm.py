"""
Python -> Java and Python -> C# rule chains.

Both targets are statically typed, so the assignment rules guess a declared
type from the literal on the right-hand side. Anything that is not a simple
literal is left untouched.
"""

from rulemorph.rules.base import ASSIGN, Boilerplate, RewriteRule, line_rule


def get_python_to_java_rules() -> list[RewriteRule]:
    """Get Python -> Java rewrite rules in application order."""
    return [
        # Output (Java has no single-quoted strings)
        RewriteRule("print_double", r'\bprint\s*\(\s*"([^"]+)"\s*\)', r'System.out.println("\1");'),
        RewriteRule("print_single", r"\bprint\s*\(\s*'([^']+)'\s*\)", r'System.out.println("\1");'),
        RewriteRule("print_expr", r"\bprint\s*\(\s*([^)]+)\s*\)", r"System.out.println(\1);"),
        # Literal-typed assignments
        line_rule("assign_str_double", ASSIGN + r'"([^"]*)"$', r'\1String \2 = "\3";'),
        line_rule("assign_str_single", ASSIGN + r"'([^']*)'$", r'\1String \2 = "\3";'),
        line_rule("assign_int", ASSIGN + r"(\d+)$", r"\1int \2 = \3;"),
        line_rule("assign_float", ASSIGN + r"(\d+\.\d+)$", r"\1double \2 = \3;"),
        line_rule("assign_true", ASSIGN + r"True$", r"\1boolean \2 = true;"),
        line_rule("assign_false", ASSIGN + r"False$", r"\1boolean \2 = false;"),
        line_rule("assign_none", ASSIGN + r"None$", r"\1Object \2 = null;"),
        line_rule(
            "assign_list",
            ASSIGN + r"\[(.*?)\]$",
            r"\1ArrayList<Object> \2 = new ArrayList<>(Arrays.asList(\3));",
        ),
        # Definitions and returns
        RewriteRule("def", r"\bdef\s+(\w+)\s*\(([^)]*)\)\s*:", r"public static void \1(\2) {"),
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
            r"for (int \1 = 0; \1 < \2; \1++) {",
        ),
        RewriteRule(
            "for_range_2",
            r"\bfor\s+(\w+)\s+in\s+range\s*\(\s*(\d+),\s*(\d+)\s*\)\s*:",
            r"for (int \1 = \2; \1 < \3; \1++) {",
        ),
        RewriteRule(
            "for_range_3",
            r"\bfor\s+(\w+)\s+in\s+range\s*\(\s*(\d+),\s*(\d+),\s*(\d+)\s*\)\s*:",
            r"for (int \1 = \2; \1 < \3; \1 += \4) {",
        ),
        RewriteRule("for_each", r"\bfor\s+(\w+)\s+in\s+(.+?):", r"for (var \1 : \2) {"),
        # Built-in names
        RewriteRule("append", r"\.append\(", ".add("),
        RewriteRule("len", r"\blen\(([^)]+)\)", r"\1.size()"),
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
        # Comments
        line_rule("comment", r"^([ \t]*)#[ \t]*(.*?)$", r"\1// \2"),
    ]


PYTHON_TO_JAVA_BOILERPLATE = Boilerplate(
    header=(
        "import java.util.*;\n"
        "\n"
        "public class PythonTranslation {\n"
        "    public static void main(String[] args) {\n"
    ),
    footer="\n    }\n}",
    indent=" " * 8,
)


def get_python_to_csharp_rules() -> list[RewriteRule]:
    """Get Python -> C# rewrite rules in application order."""
    return [
        RewriteRule("print_double", r'\bprint\s*\(\s*"([^"]+)"\s*\)', r'Console.WriteLine("\1");'),
        RewriteRule("print_single", r"\bprint\s*\(\s*'([^']+)'\s*\)", r'Console.WriteLine("\1");'),
        RewriteRule("print_expr", r"\bprint\s*\(\s*([^)]+)\s*\)", r"Console.WriteLine(\1);"),
        line_rule("assign_str_double", ASSIGN + r'"([^"]*)"$', r'\1string \2 = "\3";'),
        line_rule("assign_str_single", ASSIGN + r"'([^']*)'$", r'\1string \2 = "\3";'),
        line_rule("assign_int", ASSIGN + r"(\d+)$", r"\1int \2 = \3;"),
        line_rule("assign_float", ASSIGN + r"(\d+\.\d+)$", r"\1double \2 = \3;"),
        line_rule("assign_true", ASSIGN + r"True$", r"\1bool \2 = true;"),
        line_rule("assign_false", ASSIGN + r"False$", r"\1bool \2 = false;"),
        line_rule("assign_none", ASSIGN + r"None$", r"\1object \2 = null;"),
        line_rule("assign_list", ASSIGN + r"\[(.*?)\]$", r"\1var \2 = new List<object> { \3 };"),
        RewriteRule("def", r"\bdef\s+(\w+)\s*\(([^)]*)\)\s*:", r"public static void \1(\2) {"),
        line_rule("return", r"^([ \t]*)return\s+(.+)$", r"\1return \2;"),
        RewriteRule("if", r"\bif\s+([^:\n]+?):", r"if (\1) {"),
        RewriteRule("elif", r"\belif\s+([^:\n]+?):", r"} else if (\1) {"),
        RewriteRule("else", r"\belse\s*:", r"} else {"),
        RewriteRule("while", r"\bwhile\s+([^:\n]+?):", r"while (\1) {"),
        RewriteRule(
            "for_range_1",
            r"\bfor\s+(\w+)\s+in\s+range\s*\(\s*(\d+)\s*\)\s*:",
            r"for (int \1 = 0; \1 < \2; \1++) {",
        ),
        RewriteRule(
            "for_range_2",
            r"\bfor\s+(\w+)\s+in\s+range\s*\(\s*(\d+),\s*(\d+)\s*\)\s*:",
            r"for (int \1 = \2; \1 < \3; \1++) {",
        ),
        RewriteRule(
            "for_range_3",
            r"\bfor\s+(\w+)\s+in\s+range\s*\(\s*(\d+),\s*(\d+),\s*(\d+)\s*\)\s*:",
            r"for (int \1 = \2; \1 < \3; \1 += \4) {",
        ),
        RewriteRule("for_each", r"\bfor\s+(\w+)\s+in\s+(.+?):", r"foreach (var \1 in \2) {"),
        RewriteRule("append", r"\.append\(", ".Add("),
        RewriteRule("len", r"\blen\(([^)]+)\)", r"\1.Count"),
        RewriteRule("strip", r"\.strip\(\)", ".Trim()"),
        RewriteRule("upper", r"\.upper\(\)", ".ToUpper()"),
        RewriteRule("lower", r"\.lower\(\)", ".ToLower()"),
        RewriteRule("and", r"\band\b", "&&"),
        RewriteRule("or", r"\bor\b", "||"),
        RewriteRule("not", r"\bnot\b", "!"),
        RewriteRule("true", r"\bTrue\b", "true"),
        RewriteRule("false", r"\bFalse\b", "false"),
        RewriteRule("none", r"\bNone\b", "null"),
        line_rule("comment", r"^([ \t]*)#[ \t]*(.*?)$", r"\1// \2"),
    ]


PYTHON_TO_CSHARP_BOILERPLATE = Boilerplate(
    header=(
        "using System;\n"
        "\n"
        "class Program {\n"
        "    static void Main() {\n"
    ),
    footer="\n    }\n}",
    indent=" " * 8,
)
