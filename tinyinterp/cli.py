"""Command line entry point: read a program, parse it and list its tokens."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from .source import read_file
from .syntax import ParseError, parse
from .tokenizer import print_tokens, tokenize

__all__ = ["main"]

DEFAULT_FILE = "tester.txt"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tinyinterp",
        description="Tokenize and parse a program file, then list its tokens.",
    )
    parser.add_argument(
        "filename",
        nargs="?",
        default=DEFAULT_FILE,
        help=f"program file to read (default: {DEFAULT_FILE})",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command; return the process exit status."""
    args = _build_parser().parse_args(argv)
    try:
        text = read_file(args.filename)
    except OSError as exc:
        print(f"Error opening file: {exc}", file=sys.stderr)
        return 1

    tokens = tokenize(text)
    try:
        parse(tokens)
    except ParseError as exc:
        print(exc, file=sys.stderr)
        return 1

    print_tokens(tokens)
    return 0


if __name__ == "__main__":
    sys.exit(main())