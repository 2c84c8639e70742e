"""
Unit tests for the pairwise rule chains.
"""

import pytest

from rulemorph.config.models import BlockMatching
from rulemorph.engine.pairwise import (
    PAIRWISE_CHAINS,
    get_pairwise_chain,
    list_supported_pairs,
)


def chain(source: str, target: str):
    found = get_pairwise_chain(source, target)
    assert found is not None, f"missing chain {source} -> {target}"
    return found


def test_registered_pairs():
    """All twelve hand-authored pairs are registered in order."""
    assert list_supported_pairs() == [
        ("python", "javascript"),
        ("python", "typescript"),
        ("python", "java"),
        ("python", "cpp"),
        ("python", "c"),
        ("python", "go"),
        ("python", "ruby"),
        ("python", "php"),
        ("python", "swift"),
        ("python", "csharp"),
        ("javascript", "python"),
        ("java", "csharp"),
    ]


def test_lookup_is_exact_and_case_insensitive():
    assert get_pairwise_chain("Python", " JAVA ") is PAIRWISE_CHAINS[("python", "java")]
    assert get_pairwise_chain("java", "python") is None
    assert get_pairwise_chain("python", "rust") is None


def test_registry_is_read_only():
    with pytest.raises(TypeError):
        PAIRWISE_CHAINS[("python", "rust")] = chain("python", "go")


class TestPythonToJavaScript:
    def test_print_and_assignment(self):
        js = chain("python", "javascript")
        assert js.transform('print("hello")') == 'console.log("hello");'
        assert js.transform("x = 5") == "let x = 5;"

    def test_keyword_inside_string_does_not_span_lines(self):
        code = 'print("do it if you can")\nfor i in range(3):\n    print(i)'
        assert chain("python", "javascript").transform(code) == (
            'console.log("do it if you can");\nfor (let i = 0; i < 3; i++) {\n    console.log(i);\n}'
        )

    def test_if_elif_else(self):
        code = "if x > 1:\n    a = 1\nelif x < 0:\n    a = 2\nelse:\n    a = 3"
        assert chain("python", "javascript").transform(code) == (
            "if (x > 1) {\n"
            "    let a = 1;\n"
            "} else if (x < 0) {\n"
            "    let a = 2;\n"
            "} else {\n"
            "    let a = 3;\n"
            "}"
        )

    def test_function_and_return(self):
        code = "def add(a, b):\n    return a + b"
        assert chain("python", "javascript").transform(code) == (
            "function add(a, b) {\n    return a + b;\n}"
        )

    def test_for_each(self):
        code = "for item in items:\n    print(item)"
        assert chain("python", "javascript").transform(code) == (
            "for (let item of items) {\n    console.log(item);\n}"
        )

    def test_for_range_with_step(self):
        result = chain("python", "javascript").rewrite("for i in range(0, 10, 2):")
        assert result == "for (let i = 0; i < 10; i += 2) {"

    def test_len_after_assignment(self):
        assert chain("python", "javascript").rewrite("n = len(items)") == "let n = items.length;"

    def test_logical_keywords(self):
        code = "if a and not b:\n    x = True"
        assert chain("python", "javascript").transform(code) == (
            "if (a && ! b) {\n    let x = true;\n}"
        )

    def test_comment_keeps_indentation(self):
        code = "if x:\n    # note\n    y = 1"
        assert chain("python", "javascript").transform(code) == (
            "if (x) {\n    // note\n    let y = 1;\n}"
        )

    def test_try_except(self):
        code = "try:\n    risky()\nexcept ValueError as e:\n    handle(e)"
        assert chain("python", "javascript").transform(code) == (
            "try {\n    risky()\n} catch (e) {\n    handle(e)\n}"
        )

    def test_class_with_base(self):
        code = "class Dog(Animal):\n    pass"
        assert chain("python", "javascript").transform(code) == (
            "class Dog extends Animal {\n    pass\n}"
        )


class TestPythonToTypeScript:
    def test_declared_types_from_literals(self):
        ts = chain("python", "typescript")
        assert ts.rewrite('name = "Ann"') == 'let name: string = "Ann";'
        assert ts.rewrite("count = 3") == "let count: number = 3;"
        assert ts.rewrite("ok = False") == "let ok: boolean = false;"

    def test_function_return_type(self):
        assert chain("python", "typescript").rewrite("def greet():") == "function greet(): void {"


class TestPythonToJava:
    def test_blank_lines_stay_empty_inside_wrapper(self):
        result = chain("python", "java").transform("x = 1\n\ny = 2\n")
        assert all(line.strip() or not line for line in result.split("\n"))

    def test_counted_loop_wrapped_in_class(self):
        code = "for i in range(3):\n    print(i)"
        assert chain("python", "java").transform(code) == (
            "import java.util.*;\n"
            "\n"
            "public class PythonTranslation {\n"
            "    public static void main(String[] args) {\n"
            "        for (int i = 0; i < 3; i++) {\n"
            "            System.out.println(i);\n"
            "        }\n"
            "    }\n"
            "}"
        )

    def test_literal_typed_assignments(self):
        java = chain("python", "java")
        assert java.rewrite("name = 'Bob'") == 'String name = "Bob";'
        assert java.rewrite("ratio = 0.5") == "double ratio = 0.5;"
        assert java.rewrite("flag = True") == "boolean flag = true;"
        assert java.rewrite("x = None") == "Object x = null;"
        assert java.rewrite("nums = [1, 2]") == (
            "ArrayList<Object> nums = new ArrayList<>(Arrays.asList(1, 2));"
        )

    def test_boolean_literal_after_assignment_rules(self):
        assert chain("python", "java").rewrite("if x == True:") == "if (x == true) {"


class TestPythonToCSharp:
    def test_output_and_foreach(self):
        cs = chain("python", "csharp")
        assert cs.rewrite('print("hi")') == 'Console.WriteLine("hi");'
        assert cs.rewrite("for x in xs:") == "foreach (var x in xs) {"

    def test_wrapped_in_program(self):
        result = chain("python", "csharp").transform("x = 1")
        assert result.startswith("using System;\n")
        assert "        int x = 1;" in result
        assert result.count("{") == result.count("}")


class TestPythonToNative:
    def test_cpp(self):
        cpp = chain("python", "cpp")
        assert cpp.rewrite("print(x)") == "std::cout << x << std::endl;"
        assert cpp.rewrite("nums.append(4)") == "nums.push_back(4)"
        assert cpp.transform("x = 1") == (
            "#include <iostream>\n"
            "#include <string>\n"
            "#include <vector>\n"
            "\n"
            "int main() {\n"
            "    int x = 1;\n"
            "    return 0;\n"
            "}"
        )

    def test_c(self):
        c = chain("python", "c")
        assert c.rewrite('print("hi")') == 'printf("hi\\n");'
        assert c.rewrite("flag = True") == "int flag = 1;"
        assert c.transform("x = 1").startswith("#include <stdio.h>\n\nint main() {\n")

    def test_go(self):
        go = chain("python", "go")
        assert go.rewrite("if x > 1:") == "if x > 1 {"
        assert go.rewrite("while running:") == "for running {"
        assert go.rewrite("for v in values:") == "for _, v := range values {"
        assert go.rewrite("items.append(3)") == "items = append(items, 3)"
        assert go.rewrite("count = 0") == "count := 0"
        assert go.transform("count = 0").startswith('package main\n\nimport "fmt"\n\nfunc main() {\n')

    def test_swift_ranges(self):
        swift = chain("python", "swift")
        assert swift.rewrite("for i in range(5):") == "for i in 0..<5 {"
        assert swift.rewrite("for i in range(0, 10, 2):") == (
            "for i in stride(from: 0, to: 10, by: 2) {"
        )
        assert swift.rewrite("for name in names:") == "for name in names {"
        assert swift.rewrite("x = None") == "var x: Any? = nil"


class TestPythonToPHP:
    def test_variables_get_sigil_and_tags(self):
        assert chain("python", "php").transform("x = 5") == "<?php\n$x = 5;\n?>"

    def test_foreach_and_elseif(self):
        php = chain("python", "php")
        assert php.rewrite("for item in items:") == "foreach (items as $item) {"
        assert php.rewrite("elif x:") == "} elseif (x) {"

    def test_stepped_range(self):
        php = chain("python", "php")
        assert php.rewrite("for i in range(1, 10, 2):") == "for ($i = 1; $i < 10; $i += 2) {"


class TestPythonToRuby:
    def test_times_loop_body_end_only_in_stack_mode(self):
        code = "for i in range(3):\n    print(i)"
        ruby = chain("python", "ruby")
        assert ruby.transform(code) == "3.times do |i|\n    puts i"
        assert ruby.transform(code, BlockMatching.STACK) == "3.times do |i|\n    puts i\nend"

    def test_if_elsif_else_single_end(self):
        code = "if x > 0:\n    print(x)\nelif x < 0:\n    print(0)\nelse:\n    print(1)"
        assert chain("python", "ruby").transform(code, BlockMatching.STACK) == (
            "if x > 0\n    puts x\nelsif x < 0\n    puts 0\nelse\n    puts 1\nend"
        )

    def test_begin_rescue(self):
        code = "try:\n    risky()\nexcept ValueError as e:\n    log(e)"
        assert chain("python", "ruby").transform(code, BlockMatching.STACK) == (
            "begin\n    risky()\nrescue ValueError => e\n    log(e)\nend"
        )

    def test_nested_blocks_lookahead_vs_stack(self):
        code = 'class Dog(Animal):\n    def bark(self):\n        print("woof")'
        ruby = chain("python", "ruby")
        assert "end" not in ruby.transform(code)
        assert ruby.transform(code, BlockMatching.STACK) == (
            'class Dog < Animal\n    def bark(self)\n        puts "woof"\n    end\nend'
        )


class TestJavaScriptToPython:
    def test_function_branch_and_literals(self):
        code = (
            "function greet(name) {\n"
            "    console.log(name);\n"
            "}\n"
            "let x = 5;\n"
            "if (x === 5 && !done) {\n"
            '    greet("a");\n'
            "} else {\n"
            "    x = null;\n"
            "}"
        )
        result = chain("javascript", "python").transform(code)
        assert result.rstrip("\n") == (
            "def greet(name):\n"
            "    print(name)\n"
            "x = 5\n"
            "if x == 5 and not done:\n"
            '    greet("a")\n'
            "else:\n"
            "    x = None"
        )

    def test_loops(self):
        js = chain("javascript", "python")
        assert js.rewrite("for (let i = 0; i < 3; i++) {") == "for i in range(3):"
        assert js.rewrite("for (const v of values) {") == "for v in values:"

    def test_length_and_comment(self):
        js = chain("javascript", "python")
        assert js.rewrite("n = items.length;") == "n = len(items)"
        assert js.rewrite("  // hi") == "  # hi"

    def test_exclamation_inside_string_untouched(self):
        assert chain("javascript", "python").rewrite('console.log("Hi!");') == 'print("Hi!")'


class TestJavaToCSharp:
    def test_main_class(self):
        code = (
            "import java.util.*;\n"
            "public class Main {\n"
            "    public static void main(String[] args) {\n"
            '        String name = "x";\n'
            "        System.out.println(name);\n"
            "    }\n"
            "}"
        )
        assert chain("java", "csharp").transform(code) == (
            "using System;\n"
            "\n"
            "public class Main {\n"
            "    static void Main(string[] args) {\n"
            '        string name = "x";\n'
            "        Console.WriteLine(name);\n"
            "    }\n"
            "}"
        )

    def test_collections_and_inheritance(self):
        cs = chain("java", "csharp")
        assert cs.rewrite("class Dog extends Animal {") == "class Dog : Animal {"
        assert cs.rewrite("ArrayList<String> xs") == "List<string> xs"
        assert cs.rewrite("n = xs.size();") == "n = xs.Count;"
