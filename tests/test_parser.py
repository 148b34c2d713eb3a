import pytest

from lexer import tokenize
from parser import (
    CallExpression,
    NumberLiteral,
    ParseError,
    Program,
    StringLiteral,
    node_to_dict,
    parse,
)


def _parse(source: str) -> Program:
    return parse(tokenize(source))


def test_parses_nested_call():
    program = _parse("(add 2 (subtract 3 7))")

    assert isinstance(program, Program)
    assert len(program.body) == 1
    call = program.body[0]
    assert isinstance(call, CallExpression)
    assert call.name == "add"
    assert call.params[0] == NumberLiteral(value="2")
    inner = call.params[1]
    assert isinstance(inner, CallExpression)
    assert inner.name == "subtract"
    assert inner.params == [NumberLiteral(value="3"), NumberLiteral(value="7")]


def test_parses_string_and_empty_call():
    program = _parse('(greet "hi") (now)')
    assert program.body == [
        CallExpression(name="greet", params=[StringLiteral(value="hi")]),
        CallExpression(name="now", params=[]),
    ]


def test_top_level_literals_are_kept():
    program = _parse('7 "x"')
    assert program.body == [NumberLiteral(value="7"), StringLiteral(value="x")]


def test_empty_token_list_gives_empty_program():
    assert parse([]) == Program(body=[])


def test_node_to_dict_uses_kind_as_type():
    payload = node_to_dict(_parse("(add 1)"))
    assert payload == {
        "type": "Program",
        "body": [
            {
                "type": "CallExpression",
                "name": "add",
                "params": [{"type": "NumberLiteral", "value": "1"}],
            }
        ],
    }


@pytest.mark.parametrize(
    "source",
    [
        "(add 1 2",  # unterminated call
        "(",  # end of input where a callee is expected
        "(add (sub 1)",  # inner closed, outer not
    ],
)
def test_premature_end_of_input(source):
    with pytest.raises(ParseError) as excinfo:
        _parse(source)
    assert excinfo.value.token is None
    assert "end of input" in str(excinfo.value)


def test_non_name_callee_is_rejected():
    with pytest.raises(ParseError) as excinfo:
        _parse("(1 2)")
    assert excinfo.value.token.text == "1"
    assert excinfo.value.index == 1


def test_empty_call_is_rejected():
    with pytest.raises(ParseError):
        _parse("()")


def test_stray_right_paren_is_rejected():
    with pytest.raises(ParseError) as excinfo:
        _parse("(add 1))")
    assert excinfo.value.token.text == ")"
    assert excinfo.value.index == 4


def test_bare_name_argument_is_rejected():
    with pytest.raises(ParseError):
        _parse("(add x 1)")


def test_parses_deep_nesting_without_recursion_limit():
    depth = 1000
    program = _parse("(f " * depth + "1" + ")" * depth)

    node = program.body[0]
    levels = 0
    while isinstance(node, CallExpression):
        levels += 1
        assert len(node.params) == 1
        node = node.params[0]
    assert levels == depth
    assert node == NumberLiteral(value="1")


def test_parser_import_resolves_to_project_package():
    import parser as imported

    assert imported.parse is parse
    assert imported.__file__.replace("\\", "/").endswith("parser/__init__.py")
