"""Build a syntax tree from a token list."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import IntEnum
from typing import ClassVar, Union

from .tokenizer import Token, TokenType

__all__ = [
    "NodeType",
    "ParseError",
    "Var",
    "Assign",
    "Print",
    "Program",
    "parse",
]


class NodeType(IntEnum):
    """Kinds of syntax tree node."""

    VAR = 0
    INT = 1
    OPERATION = 2
    ASSIGN = 3
    PRINT = 4
    PROGRAM = 5


class ParseError(ValueError):
    """Raised when the tokens do not form a valid statement."""


@dataclass(frozen=True)
class Var:
    """A reference to a variable by name."""

    name: str
    type: ClassVar[NodeType] = NodeType.VAR


@dataclass(frozen=True)
class Assign:
    """``name = value`` with an integer literal on the right."""

    name: str
    value: int
    operator: str = "="
    type: ClassVar[NodeType] = NodeType.ASSIGN


@dataclass(frozen=True)
class Print:
    """``print name``."""

    target: Var
    type: ClassVar[NodeType] = NodeType.PRINT


Statement = Union[Assign, Print]


@dataclass
class Program:
    """The statements of a program, in source order."""

    statements: list[Statement] = field(default_factory=list)
    type: ClassVar[NodeType] = NodeType.PROGRAM


def parse(tokens: Iterable[Token]) -> Program:
    """Parse *tokens* into a :class:`Program`.

    Tokens that begin no statement are skipped. Raises :class:`ParseError`
    when a ``print`` is not followed by an identifier, or an identifier is
    not followed by ``=`` and an integer.
    """
    program = Program()
    stream = iter(tokens)
    for token in stream:
        if token.type is TokenType.PRINT:
            target = next(stream, None)
            if target is None or target.type is not TokenType.IDENTIFIER:
                raise ParseError("Invalid print target")
            program.statements.append(Print(Var(target.value)))
        elif token.type is TokenType.IDENTIFIER:
            op = next(stream, None)
            if op is None or op.type is not TokenType.OPERATOR or op.value != "=":
                raise ParseError("Invalid Identifier Operation")
            literal = next(stream, None)
            if literal is None or literal.type is not TokenType.INT:
                raise ParseError("Invalid Assignment")
            program.statements.append(Assign(token.value, int(literal.value)))
    return program