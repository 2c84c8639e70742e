"""
Rule chains whose source is not Python: JavaScript -> Python and Java -> C#.

JavaScript -> Python turns brace headers into colon headers and drops the
closing braces, relying on the source's own indentation. Java -> C# is a
mostly lexical mapping between two brace languages.
"""

from rulemorph.rules.base import Boilerplate, RewriteRule, line_rule


def get_javascript_to_python_rules() -> list[RewriteRule]:
    """Get JavaScript -> Python rewrite rules in application order."""
    return [
        RewriteRule("console_log", r"console\.log\s*\(\s*([^)]+)\s*\)\s*;?", r"print(\1)"),
        # Statement-initial only, so 'for (let i = 0; ...)' is left for the loop rule
        line_rule(
            "declaration",
            r"^([ \t]*)(?:let|const|var)\s+(\w+)\s*=\s*([^;\n]+);?",
            r"\1\2 = \3",
        ),
        RewriteRule("function", r"\bfunction\s+(\w+)\s*\(([^)]*)\)\s*\{", r"def \1(\2):"),
        RewriteRule("if", r"(?<!else )\bif\s*\(\s*([^)]+)\s*\)\s*\{", r"if \1:"),
        RewriteRule("else_if", r"\}\s*else\s+if\s*\(\s*([^)]+)\s*\)\s*\{", r"elif \1:"),
        RewriteRule("else", r"\}\s*else\s*\{", "else:"),
        RewriteRule(
            "for_counted",
            r"\bfor\s*\(\s*let\s+(\w+)\s*=\s*0\s*;\s*\1\s*<\s*(\d+)\s*;\s*\1\+\+\s*\)\s*\{",
            r"for \1 in range(\2):",
        ),
        RewriteRule(
            "for_of",
            r"\bfor\s*\(\s*(?:let|const|var)\s+(\w+)\s+of\s+([^)]+)\)\s*\{",
            r"for \1 in \2:",
        ),
        RewriteRule("while", r"\bwhile\s*\(\s*([^)]+)\s*\)\s*\{", r"while \1:"),
        RewriteRule("push", r"\.push\(", ".append("),
        RewriteRule("trim", r"\.trim\(\)", ".strip()"),
        RewriteRule("to_upper", r"\.toUpperCase\(\)", ".upper()"),
        RewriteRule("to_lower", r"\.toLowerCase\(\)", ".lower()"),
        RewriteRule("length", r"\b([\w.]+)\.length\b", r"len(\1)"),
        RewriteRule("strict_eq", r"===", "=="),
        RewriteRule("strict_neq", r"!==", "!="),
        RewriteRule("and", r"&&", "and"),
        RewriteRule("or", r"\|\|", "or"),
        RewriteRule("not", r"!(?=[\w(])", "not "),
        RewriteRule("true", r"\btrue\b", "True"),
        RewriteRule("false", r"\bfalse\b", "False"),
        RewriteRule("null", r"\b(?:null|undefined)\b", "None"),
        line_rule("comment", r"^([ \t]*)//[ \t]*(.*)$", r"\1# \2"),
        # Lines holding only a closing brace disappear entirely
        line_rule("closing_brace", r"^[ \t]*\};?[ \t]*(?:\n|$)", ""),
        line_rule("semicolon", r";[ \t]*$", ""),
    ]


def get_java_to_csharp_rules() -> list[RewriteRule]:
    """Get Java -> C# rewrite rules in application order."""
    return [
        RewriteRule(
            "println",
            r"System\.out\.println\s*\(\s*([^)]+)\s*\)\s*;?",
            r"Console.WriteLine(\1);",
        ),
        RewriteRule("print", r"System\.out\.print\s*\(\s*([^)]+)\s*\)\s*;?", r"Console.Write(\1);"),
        RewriteRule(
            "main",
            r"public\s+static\s+void\s+main\s*\(\s*String\[\]\s+\w+\s*\)",
            "static void Main(string[] args)",
        ),
        RewriteRule("string_type", r"\bString\b", "string"),
        RewriteRule("boolean_type", r"\bboolean\b", "bool"),
        RewriteRule("array_list", r"\bArrayList<", "List<"),
        RewriteRule("hash_map", r"\bHashMap<", "Dictionary<"),
        RewriteRule("extends", r"\bextends\b", ":"),
        RewriteRule("list_add", r"\.add\(", ".Add("),
        RewriteRule("size", r"\.size\(\)", ".Count"),
        RewriteRule("str_length", r"\.length\(\)", ".Length"),
        RewriteRule("equals", r"\.equals\(", ".Equals("),
        RewriteRule("to_upper", r"\.toUpperCase\(\)", ".ToUpper()"),
        RewriteRule("to_lower", r"\.toLowerCase\(\)", ".ToLower()"),
        RewriteRule("trim", r"\.trim\(\)", ".Trim()"),
        # Java imports have no direct C# counterpart
        line_rule("import", r"^[ \t]*import\s+[\w.*]+\s*;[ \t]*\n?", ""),
    ]


JAVA_TO_CSHARP_BOILERPLATE = Boilerplate(header="using System;\n\n")
