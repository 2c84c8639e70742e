"""
Python -> C, C++, Go and Swift rule chains.
"""

from rulemorph.rules.base import ASSIGN, Boilerplate, RewriteRule, line_rule


def get_python_to_cpp_rules() -> list[RewriteRule]:
    """Get Python -> C++ rewrite rules in application order."""
    return [
        RewriteRule("print_double", r'\bprint\s*\(\s*"([^"]+)"\s*\)', r'std::cout << "\1" << std::endl;'),
        RewriteRule("print_single", r"\bprint\s*\(\s*'([^']+)'\s*\)", r'std::cout << "\1" << std::endl;'),
        RewriteRule("print_expr", r"\bprint\s*\(\s*([^)]+)\s*\)", r"std::cout << \1 << std::endl;"),
        line_rule("assign_str_double", ASSIGN + r'"([^"]*)"$', r'\1std::string \2 = "\3";'),
        line_rule("assign_str_single", ASSIGN + r"'([^']*)'$", r'\1std::string \2 = "\3";'),
        line_rule("assign_int", ASSIGN + r"(\d+)$", r"\1int \2 = \3;"),
        line_rule("assign_float", ASSIGN + r"(\d+\.\d+)$", r"\1double \2 = \3;"),
        line_rule("assign_true", ASSIGN + r"True$", r"\1bool \2 = true;"),
        line_rule("assign_false", ASSIGN + r"False$", r"\1bool \2 = false;"),
        line_rule("assign_list", ASSIGN + r"\[(.*?)\]$", r"\1std::vector<int> \2 = {\3};"),
        RewriteRule("def", r"\bdef\s+(\w+)\s*\(([^)]*)\)\s*:", r"auto \1(\2) {"),
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
        RewriteRule("for_each", r"\bfor\s+(\w+)\s+in\s+(.+?):", r"for (auto \1 : \2) {"),
        RewriteRule("append", r"\.append\(", ".push_back("),
        RewriteRule("len", r"\blen\(([^)]+)\)", r"\1.size()"),
        RewriteRule("and", r"\band\b", "&&"),
        RewriteRule("or", r"\bor\b", "||"),
        RewriteRule("not", r"\bnot\b", "!"),
        RewriteRule("true", r"\bTrue\b", "true"),
        RewriteRule("false", r"\bFalse\b", "false"),
        RewriteRule("none", r"\bNone\b", "nullptr"),
        line_rule("comment", r"^([ \t]*)#[ \t]*(.*?)$", r"\1// \2"),
    ]


PYTHON_TO_CPP_BOILERPLATE = Boilerplate(
    header=(
        "#include <iostream>\n"
        "#include <string>\n"
        "#include <vector>\n"
        "\n"
        "int main() {\n"
    ),
    footer="\n    return 0;\n}",
    indent=" " * 4,
)


def get_python_to_c_rules() -> list[RewriteRule]:
    """Get Python -> C rewrite rules in application order."""
    return [
        # The format string keeps a literal backslash-n
        RewriteRule("print_double", r'\bprint\s*\(\s*"([^"]+)"\s*\)', r'printf("\1\\n");'),
        RewriteRule("print_single", r"\bprint\s*\(\s*'([^']+)'\s*\)", r'printf("\1\\n");'),
        RewriteRule("print_expr", r"\bprint\s*\(\s*([^)]+)\s*\)", r'printf("%d\\n", \1);'),
        line_rule("assign_str_double", ASSIGN + r'"([^"]*)"$', r'\1char \2[] = "\3";'),
        line_rule("assign_str_single", ASSIGN + r"'([^']*)'$", r'\1char \2[] = "\3";'),
        line_rule("assign_int", ASSIGN + r"(\d+)$", r"\1int \2 = \3;"),
        line_rule("assign_float", ASSIGN + r"(\d+\.\d+)$", r"\1double \2 = \3;"),
        line_rule("assign_true", ASSIGN + r"True$", r"\1int \2 = 1;"),
        line_rule("assign_false", ASSIGN + r"False$", r"\1int \2 = 0;"),
        line_rule("assign_none", ASSIGN + r"None$", r"\1void *\2 = NULL;"),
        line_rule("assign_list", ASSIGN + r"\[(.*?)\]$", r"\1int \2[] = {\3};"),
        RewriteRule("def", r"\bdef\s+(\w+)\s*\(([^)]*)\)\s*:", r"void \1(\2) {"),
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
        RewriteRule("len", r"\blen\(([^)]+)\)", r"(sizeof(\1) / sizeof(\1[0]))"),
        RewriteRule("and", r"\band\b", "&&"),
        RewriteRule("or", r"\bor\b", "||"),
        RewriteRule("not", r"\bnot\b", "!"),
        RewriteRule("true", r"\bTrue\b", "1"),
        RewriteRule("false", r"\bFalse\b", "0"),
        RewriteRule("none", r"\bNone\b", "NULL"),
        line_rule("comment", r"^([ \t]*)#[ \t]*(.*?)$", r"\1// \2"),
    ]


PYTHON_TO_C_BOILERPLATE = Boilerplate(
    header="#include <stdio.h>\n\nint main() {\n",
    footer="\n    return 0;\n}",
    indent=" " * 4,
)


def get_python_to_go_rules() -> list[RewriteRule]:
    """Get Python -> Go rewrite rules in application order."""
    return [
        RewriteRule("print_double", r'\bprint\s*\(\s*"([^"]+)"\s*\)', r'fmt.Println("\1")'),
        RewriteRule("print_single", r"\bprint\s*\(\s*'([^']+)'\s*\)", r'fmt.Println("\1")'),
        RewriteRule("print_expr", r"\bprint\s*\(\s*([^)]+)\s*\)", r"fmt.Println(\1)"),
        # Short variable declarations infer the type from the literal
        line_rule("assign_str_double", ASSIGN + r'"([^"]*)"$', r'\1\2 := "\3"'),
        line_rule("assign_str_single", ASSIGN + r"'([^']*)'$", r'\1\2 := "\3"'),
        line_rule("assign_int", ASSIGN + r"(\d+)$", r"\1\2 := \3"),
        line_rule("assign_float", ASSIGN + r"(\d+\.\d+)$", r"\1\2 := \3"),
        line_rule("assign_true", ASSIGN + r"True$", r"\1\2 := true"),
        line_rule("assign_false", ASSIGN + r"False$", r"\1\2 := false"),
        line_rule("assign_list", ASSIGN + r"\[(.*?)\]$", r"\1\2 := []interface{}{\3}"),
        RewriteRule("def", r"\bdef\s+(\w+)\s*\(([^)]*)\)\s*:", r"func \1(\2) {"),
        RewriteRule("if", r"\bif\s+([^:\n]+?):", r"if \1 {"),
        RewriteRule("elif", r"\belif\s+([^:\n]+?):", r"} else if \1 {"),
        RewriteRule("else", r"\belse\s*:", r"} else {"),
        # Go has no while keyword
        RewriteRule("while", r"\bwhile\s+([^:\n]+?):", r"for \1 {"),
        RewriteRule(
            "for_range_1",
            r"\bfor\s+(\w+)\s+in\s+range\s*\(\s*(\d+)\s*\)\s*:",
            r"for \1 := 0; \1 < \2; \1++ {",
        ),
        RewriteRule(
            "for_range_2",
            r"\bfor\s+(\w+)\s+in\s+range\s*\(\s*(\d+),\s*(\d+)\s*\)\s*:",
            r"for \1 := \2; \1 < \3; \1++ {",
        ),
        RewriteRule(
            "for_range_3",
            r"\bfor\s+(\w+)\s+in\s+range\s*\(\s*(\d+),\s*(\d+),\s*(\d+)\s*\)\s*:",
            r"for \1 := \2; \1 < \3; \1 += \4 {",
        ),
        RewriteRule("for_each", r"\bfor\s+(\w+)\s+in\s+(.+?):", r"for _, \1 := range \2 {"),
        RewriteRule("append", r"\b(\w+)\.append\((.+?)\)", r"\1 = append(\1, \2)"),
        RewriteRule("and", r"\band\b", "&&"),
        RewriteRule("or", r"\bor\b", "||"),
        RewriteRule("not", r"\bnot\b", "!"),
        RewriteRule("true", r"\bTrue\b", "true"),
        RewriteRule("false", r"\bFalse\b", "false"),
        RewriteRule("none", r"\bNone\b", "nil"),
        line_rule("comment", r"^([ \t]*)#[ \t]*(.*?)$", r"\1// \2"),
    ]


PYTHON_TO_GO_BOILERPLATE = Boilerplate(
    header='package main\n\nimport "fmt"\n\nfunc main() {\n',
    footer="\n}",
    indent=" " * 4,
)


def get_python_to_swift_rules() -> list[RewriteRule]:
    """Get Python -> Swift rewrite rules in application order."""
    return [
        RewriteRule("print_double", r'\bprint\s*\(\s*"([^"]+)"\s*\)', r'print("\1")'),
        RewriteRule("print_single", r"\bprint\s*\(\s*'([^']+)'\s*\)", r'print("\1")'),
        RewriteRule("print_expr", r"\bprint\s*\(\s*([^)]+)\s*\)", r"print(\1)"),
        line_rule("assign_str_double", ASSIGN + r'"([^"]*)"$', r'\1var \2 = "\3"'),
        line_rule("assign_str_single", ASSIGN + r"'([^']*)'$", r'\1var \2 = "\3"'),
        line_rule("assign_int", ASSIGN + r"(\d+)$", r"\1var \2 = \3"),
        line_rule("assign_float", ASSIGN + r"(\d+\.\d+)$", r"\1var \2 = \3"),
        line_rule("assign_true", ASSIGN + r"True$", r"\1var \2 = true"),
        line_rule("assign_false", ASSIGN + r"False$", r"\1var \2 = false"),
        line_rule("assign_none", ASSIGN + r"None$", r"\1var \2: Any? = nil"),
        line_rule("assign_list", ASSIGN + r"\[(.*?)\]$", r"\1var \2 = [\3]"),
        RewriteRule("def", r"\bdef\s+(\w+)\s*\(([^)]*)\)\s*:", r"func \1(\2) {"),
        RewriteRule("if", r"\bif\s+([^:\n]+?):", r"if \1 {"),
        RewriteRule("elif", r"\belif\s+([^:\n]+?):", r"} else if \1 {"),
        RewriteRule("else", r"\belse\s*:", r"} else {"),
        RewriteRule("while", r"\bwhile\s+([^:\n]+?):", r"while \1 {"),
        RewriteRule(
            "for_range_1",
            r"\bfor\s+(\w+)\s+in\s+range\s*\(\s*(\d+)\s*\)\s*:",
            r"for \1 in 0..<\2 {",
        ),
        RewriteRule(
            "for_range_2",
            r"\bfor\s+(\w+)\s+in\s+range\s*\(\s*(\d+),\s*(\d+)\s*\)\s*:",
            r"for \1 in \2..<\3 {",
        ),
        RewriteRule(
            "for_range_3",
            r"\bfor\s+(\w+)\s+in\s+range\s*\(\s*(\d+),\s*(\d+),\s*(\d+)\s*\)\s*:",
            r"for \1 in stride(from: \2, to: \3, by: \4) {",
        ),
        # Anchored to the line end: stride(from: ...) above contains colons
        line_rule("for_each", r"\bfor\s+(\w+)\s+in\s+(.+?):[ \t]*$", r"for \1 in \2 {"),
        RewriteRule("len", r"\blen\(([^)]+)\)", r"\1.count"),
        RewriteRule("strip", r"\.strip\(\)", ".trimmingCharacters(in: .whitespaces)"),
        RewriteRule("upper", r"\.upper\(\)", ".uppercased()"),
        RewriteRule("lower", r"\.lower\(\)", ".lowercased()"),
        RewriteRule("and", r"\band\b", "&&"),
        RewriteRule("or", r"\bor\b", "||"),
        RewriteRule("not", r"\bnot\b", "!"),
        RewriteRule("true", r"\bTrue\b", "true"),
        RewriteRule("false", r"\bFalse\b", "false"),
        RewriteRule("none", r"\bNone\b", "nil"),
        line_rule("comment", r"^([ \t]*)#[ \t]*(.*?)$", r"\1// \2"),
    ]
