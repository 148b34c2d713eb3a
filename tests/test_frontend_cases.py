import json
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

import pytest

from errors import CompileError, LexError, ParseError
from frontend import compile, compile_source, run_pipeline
from lexer import TokenKind

CASES_DIR = Path(__file__).parent / "cases"


TEST_CASES = [
    ("(add 2 (subtract 3 7))", "add(2,subtract(3,7));"),
    ("(count 9 (add 2 6))", "count(9,add(2,6));"),
    ("(sub 3 (mul 8 1))", "sub(3,mul(8,1));"),
    ('(greet "hi")', 'greet("hi");'),
    ("(add 1 2)(sub 3 4)", "add(1,2);\nsub(3,4);"),
    ("", ""),
    ("7 (f 1)", "7\nf(1);"),
    ('7 "x" (f 1)', '7\n"x"\nf(1);'),
]


@pytest.mark.parametrize("source, expected", TEST_CASES)
def test_compile_scenarios(source: str, expected: str):
    assert compile(source) == expected


def test_compile_alias():
    assert compile is compile_source


def test_compile_output_shape_per_statement():
    source = (CASES_DIR / "multiple_statements.lisp").read_text(encoding="utf-8")
    output = compile(source)

    lines = output.split("\n")
    assert lines == ["add(1,2);", "sub(3,4);", 'greet("hello world");']
    for line in lines:
        assert line.endswith(";")
        assert line.count("(") == line.count(")")
        assert line.count(";") == 1


def test_compile_unknown_character():
    with pytest.raises(LexError) as excinfo:
        compile("(add 1 $)")
    assert excinfo.value.char == "$"


def test_compile_propagates_parse_errors():
    with pytest.raises(ParseError):
        compile("(add 1")


def test_compile_is_independent_across_threads():
    sources = [f"(f {n} (g {n}))" for n in range(50)]
    with ThreadPoolExecutor(max_workers=8) as pool:
        outputs = list(pool.map(compile, sources))
    assert outputs == [f"f({n},g({n}));" for n in range(50)]


def test_run_pipeline_collects_artefacts():
    path = CASES_DIR / "nested_calls.lisp"
    result = run_pipeline(path.read_text(encoding="utf-8"), source_name=str(path))

    assert result.ok
    assert result.source_name == str(path)
    assert result.output == "add(2,subtract(3,7));"
    assert result.tokens[0].kind is TokenKind.LEFT_PAREN
    assert result.source_ast.body[0].name == "add"
    assert result.target_ast.body[0].kind == "ExpressionStatement"

    tokens = json.loads(result.tokens_to_json())
    assert tokens[1] == {"kind": "Name", "text": "add"}
    tree = json.loads(result.ast_to_json())
    assert tree["type"] == "Program"
    assert tree["body"][0]["params"][1]["name"] == "subtract"


def test_run_pipeline_stops_at_first_failure():
    result = run_pipeline((CASES_DIR / "bad_character.lisp").read_text(encoding="utf-8"))

    assert not result.ok
    assert isinstance(result.error, LexError)
    assert result.tokens is None
    assert result.source_ast is None
    assert result.output is None


def test_run_pipeline_keeps_tokens_on_parse_failure():
    result = run_pipeline("(add 1 2")

    assert isinstance(result.error, ParseError)
    assert isinstance(result.error, CompileError)
    assert [token.text for token in result.tokens] == ["(", "add", "1", "2"]
    assert result.source_ast is None


def test_compile_deeply_nested_calls():
    depth = 1000
    source = "(f " * depth + "1" + ")" * depth

    assert compile(source) == "f(" * depth + "1" + ")" * depth + ";"

    result = run_pipeline(source)
    assert result.ok, result.error
    assert result.output.count("f(") == depth
