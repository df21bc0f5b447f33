"""Split program text into tokens."""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from enum import IntEnum

__all__ = [
    "TokenType",
    "Token",
    "is_operator",
    "is_newline",
    "tokenize",
    "format_tokens",
    "print_tokens",
]

PRINT_KEYWORD = "print"


class TokenType(IntEnum):
    """Kinds of token produced by :func:`tokenize`."""

    INT = 0
    IDENTIFIER = 1
    OPERATOR = 2
    NEWLINE = 3
    PRINT = 4


@dataclass(frozen=True)
class Token:
    """A single token: its kind and the exact text it was made from."""

    type: TokenType
    value: str


def is_operator(c: str) -> bool:
    """Return True if *c* is one of the operator characters ``=``, ``+`` or ``-``."""
    return c in ("=", "+", "-")


def is_newline(c: str) -> bool:
    """Return True if *c* is a line feed."""
    return c == "\n"


def _is_alpha(c: str) -> bool:
    return c.isascii() and c.isalpha()


def _is_digit(c: str) -> bool:
    return c.isascii() and c.isdigit()


_CLASSES: tuple[tuple[Callable[[str], bool], TokenType], ...] = (
    (_is_alpha, TokenType.IDENTIFIER),
    (_is_digit, TokenType.INT),
    (is_operator, TokenType.OPERATOR),
    (is_newline, TokenType.NEWLINE),
)


def _iter_tokens(text: str) -> Iterator[Token]:
    # Text ends at the first NUL character, as a C string would.
    text = text.split("\0", 1)[0]
    pos = 0
    size = len(text)
    while pos < size:
        c = text[pos]
        for predicate, kind in _CLASSES:
            if predicate(c):
                end = pos + 1
                while end < size and predicate(text[end]):
                    end += 1
                value = text[pos:end]
                if value == PRINT_KEYWORD:
                    kind = TokenType.PRINT
                yield Token(kind, value)
                pos = end
                break
        else:
            pos += 1


def tokenize(text: str) -> list[Token]:
    """Tokenize *text*.

    Runs of letters, digits, operator characters and line feeds each become
    one token; the word ``print`` becomes a PRINT token. Every other
    character is skipped.
    """
    return list(_iter_tokens(text))


def format_tokens(tokens: Iterable[Token]) -> str:
    """Return the listing of *tokens* that :func:`print_tokens` writes."""
    lines = []
    for index, token in enumerate(tokens):
        shown = "new_line" if token.value.startswith("\n") else token.value
        lines.append(
            f"Token: {index}, Token Value: {shown}, "
            f"Token Indentifier: {int(token.type)}\n"
        )
    return "".join(lines)


def print_tokens(tokens: Iterable[Token]) -> None:
    """Write a listing of *tokens*, one per line, to standard output."""
    sys.stdout.write(format_tokens(tokens))