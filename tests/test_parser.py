import pytest
from ggb_parser import (
    BooleanLiteral,
    CommandStatement,
    FunctionCall,
    Identifier,
    ListLiteral,
    NumberLiteral,
    ParseError,
    Position,
    StringLiteral,
    TupleLiteral,
    iter_children,
    parse_script,
    to_dict,
    try_parse,
)


def _single(source) -> CommandStatement:
    program = parse_script(source)
    assert len(program.body) == 1
    return program.body[0]


def test_command_call():
    stmt = _single("SetValue(a, 1)")

    assert stmt.command_name.name == "SetValue"
    assert stmt.command_name.loc.start == Position(1, 1)
    assert isinstance(stmt.arguments[0], Identifier)
    assert stmt.arguments[0].name == "a"
    assert isinstance(stmt.arguments[1], NumberLiteral)
    assert stmt.arguments[1].value == 1.0
    assert stmt.loc.start == Position(1, 1)
    assert stmt.loc.end == Position(1, 14)


def test_literal_arguments():
    stmt = _single('SetCaption(A, "Hello", true, -2.5)')
    text, flag, number = stmt.arguments[1:]

    assert isinstance(text, StringLiteral) and text.value == "Hello"
    assert isinstance(flag, BooleanLiteral) and flag.value is True
    assert isinstance(number, NumberLiteral) and number.value == -2.5


def test_no_arguments():
    assert _single("ZoomIn()").arguments == ()


def test_assignment_of_command_keeps_command_name():
    stmt = _single("P = Point(1, 2)")

    assert stmt.command_name.name == "Point"
    assert stmt.command_name.loc.start == Position(1, 5)
    assert len(stmt.arguments) == 2
    # the statement still starts at the assignment target
    assert stmt.loc.start == Position(1, 1)


def test_list_assignment():
    stmt = _single("A = {1, 2, 3}")

    assert stmt.command_name.name == "A"
    assert len(stmt.arguments) == 1
    assert isinstance(stmt.arguments[0], ListLiteral)
    assert [e.value for e in stmt.arguments[0].elements] == [1.0, 2.0, 3.0]


def test_empty_and_nested_lists():
    stmt = _single("L = {{}, {1}}")
    outer = stmt.arguments[0]

    assert len(outer.elements) == 2
    assert outer.elements[0].elements == ()
    assert isinstance(outer.elements[1].elements[0], NumberLiteral)


def test_tuple_assignment():
    stmt = _single("A = (0, 0, 3)")
    value = stmt.arguments[0]

    assert isinstance(value, TupleLiteral)
    assert len(value.elements) == 3


def test_parenthesized_single_value_is_not_a_tuple():
    stmt = _single("A = (1)")
    assert isinstance(stmt.arguments[0], NumberLiteral)


def test_empty_tuple_and_trailing_comma():
    empty = _single("f(())").arguments[0]
    assert isinstance(empty, TupleLiteral)
    assert empty.elements == ()

    value = _single("A = (1, 2,)").arguments[0]
    assert isinstance(value, TupleLiteral)
    assert len(value.elements) == 2


def test_plain_value_assignments():
    number = _single("x = 5")
    alias = _single("A = B")

    assert number.command_name.name == "x"
    assert isinstance(number.arguments[0], NumberLiteral)
    assert alias.command_name.name == "A"
    assert alias.arguments[0] == Identifier(name="B", loc=alias.arguments[0].loc)


def test_nested_function_call():
    stmt = _single("SetValue(b, x(A))")
    call = stmt.arguments[1]

    assert isinstance(call, FunctionCall)
    assert call.callee.name == "x"
    assert call.arguments[0].name == "A"


def test_statement_separators():
    program = parse_script("A(1); B(2)\n\nC(3);;\n")
    assert [s.command_name.name for s in program.body] == ["A", "B", "C"]
    assert program.body[2].loc.start == Position(3, 1)


def test_statements_without_separator():
    program = parse_script("A(1) B(2)")
    assert len(program.body) == 2


def test_empty_and_comment_only_sources():
    assert parse_script("").body == ()
    assert parse_script("// nothing here\n").body == ()


def test_string_spanning_lines_keeps_positions():
    program = parse_script('Text("a\nb")\nC(1)')
    assert program.body[1].loc.start == Position(3, 1)


def test_dangling_exponent():
    stmt = _single("A(2e)")
    assert stmt.arguments[0].value == 2.0


def test_unclosed_call():
    with pytest.raises(ParseError) as excinfo:
        parse_script("SetValue(")

    error = excinfo.value
    assert error.position == Position(1, 10)
    assert error.message == "Unexpected token: EOF (value: '')"
    assert str(error) == "Parse error at line 1, column 10: Unexpected token: EOF (value: '')"


def test_missing_parenthesis():
    with pytest.raises(ParseError, match="Expected '\\(' after command name"):
        parse_script("SetValue a")


def test_statement_must_start_with_identifier():
    with pytest.raises(ParseError, match="Expected identifier") as excinfo:
        parse_script("= 5")
    assert excinfo.value.position == Position(1, 1)


def test_unexpected_token_in_arguments():
    with pytest.raises(ParseError, match="Unexpected token: COMMA"):
        parse_script("A(1, , 2)")


def test_error_in_later_statement_aborts_whole_script():
    with pytest.raises(ParseError) as excinfo:
        parse_script("A(1)\nB(\nC(3)")
    assert excinfo.value.position == Position(2, 3)
    assert excinfo.value.message.startswith("Unexpected token: NEWLINE")


def test_try_parse():
    good = try_parse("A(1)")
    bad = try_parse("A(")

    assert good.ok
    assert good.error is None
    assert len(good.program.body) == 1

    assert not bad.ok
    assert bad.program is None
    assert isinstance(bad.error, ParseError)


def test_iter_children():
    program = parse_script("Polygon(A, {B, C}, (1, 2))")
    stmt = program.body[0]

    assert iter_children(program) == (stmt,)
    children = iter_children(stmt)
    assert children[0] is stmt.command_name
    assert len(children) == 4
    assert len(iter_children(children[2])) == 2
    assert len(iter_children(children[3])) == 2
    assert iter_children(stmt.command_name) == ()


def test_to_dict():
    data = to_dict(parse_script("SetValue(a, 1)"))

    assert data["type"] == "Program"
    stmt = data["body"][0]
    assert stmt["type"] == "CommandStatement"
    assert stmt["commandName"] == {
        "type": "Identifier",
        "name": "SetValue",
        "loc": {"start": {"line": 1, "column": 1}, "end": {"line": 1, "column": 1}},
    }
    assert [a["type"] for a in stmt["arguments"]] == ["Identifier", "NumberLiteral"]


def test_nodes_are_immutable():
    stmt = _single("A(1)")
    with pytest.raises(AttributeError):
        stmt.command_name = None


def test_deep_nesting_raises_parse_error():
    with pytest.raises(ParseError, match="Expression nested too deeply"):
        parse_script("A(" + "(" * 2000 + "1" + ")" * 2000 + ")")

    result = try_parse("A = " + "{" * 2000 + "}" * 2000)
    assert not result.ok
    assert result.error.message == "Expression nested too deeply"
