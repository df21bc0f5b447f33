import pytest

from tinyinterp.syntax import (
    Assign,
    NodeType,
    ParseError,
    Print,
    Program,
    Var,
    parse,
)
from tinyinterp.tokenizer import tokenize


def test_empty_program():
    program = parse([])
    assert program.statements == []
    assert program.type is NodeType.PROGRAM


def test_assignment():
    program = parse(tokenize("x = 5"))
    assert program.statements == [Assign("x", 5)]
    stmt = program.statements[0]
    assert stmt.operator == "="
    assert stmt.type is NodeType.ASSIGN


def test_print():
    program = parse(tokenize("print x"))
    assert program.statements == [Print(Var("x"))]
    assert program.statements[0].type is NodeType.PRINT
    assert program.statements[0].target.type is NodeType.VAR


def test_multiple_lines_in_order():
    program = parse(tokenize("a = 1\nb = 22\nprint a\nprint b\n"))
    assert program.statements == [
        Assign("a", 1),
        Assign("b", 22),
        Print(Var("a")),
        Print(Var("b")),
    ]


def test_several_statements_on_one_line():
    program = parse(tokenize("a = 1 print a"))
    assert program.statements == [Assign("a", 1), Print(Var("a"))]


def test_blank_lines_and_stray_tokens_skipped():
    program = parse(tokenize("\n\n7 + \nq = 3\n"))
    assert program.statements == [Assign("q", 3)]


def test_statement_count_matches_lines():
    text = "\n".join(f"v = {n}" for n in range(20))
    program = parse(tokenize(text))
    assert len(program.statements) == 20
    assert [s.value for s in program.statements] == list(range(20))


@pytest.mark.parametrize("text", ["print 5", "print\nx", "print"])
def test_invalid_print_target(text):
    with pytest.raises(ParseError, match="Invalid print target"):
        parse(tokenize(text))


@pytest.mark.parametrize("text", ["x + 5", "x == 5", "x 5", "x"])
def test_invalid_identifier_operation(text):
    with pytest.raises(ParseError, match="Invalid Identifier Operation"):
        parse(tokenize(text))


@pytest.mark.parametrize("text", ["x = y", "x =", "x = \n5"])
def test_invalid_assignment(text):
    with pytest.raises(ParseError, match="Invalid Assignment"):
        parse(tokenize(text))


def test_parse_error_is_value_error():
    with pytest.raises(ValueError):
        parse(tokenize("print 1"))


def test_program_default_independent():
    first = Program()
    first.statements.append(Assign("a", 1))
    assert Program().statements == []