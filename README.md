# tinyinterp

tinyinterp reads programs in a very small language. It splits the text into
tokens and parses the tokens into a syntax tree. The language has two kinds
of statement:

```
x = 5
print x
```

- `name = <integer>` assigns an integer literal to a variable.
- `print name` names a variable to print.

## Tokens

`tinyinterp.tokenizer.tokenize(text)` returns a list of `Token` objects, each
with a `type` (a `TokenType`) and the `value` text it was read from:

| Run of characters          | `TokenType`  | Number |
|----------------------------|--------------|--------|
| ASCII digits               | `INT`        | 0      |
| ASCII letters              | `IDENTIFIER` | 1      |
| `=`, `+`, `-`              | `OPERATOR`   | 2      |
| line feeds                 | `NEWLINE`    | 3      |
| the letter run `print`     | `PRINT`      | 4      |

Each maximal run of one class becomes a single token, so `==` is one
operator token and `printx` is an identifier. Every other character
(spaces, tabs, punctuation) is skipped. The text is read only up to the
first NUL character.

`is_operator(c)` and `is_newline(c)` test a single character.
`format_tokens(tokens)` returns a listing, one line per token, and
`print_tokens(tokens)` writes that listing to standard output. Line feed
tokens are shown as `new_line`:

```
Token: 0, Token Value: x, Token Indentifier: 1
Token: 1, Token Value: =, Token Indentifier: 2
Token: 2, Token Value: 5, Token Indentifier: 0
Token: 3, Token Value: new_line, Token Indentifier: 3
Token: 4, Token Value: print, Token Indentifier: 4
Token: 5, Token Value: x, Token Indentifier: 1
Token: 6, Token Value: new_line, Token Indentifier: 3
```

## Parsing

`tinyinterp.syntax.parse(tokens)` returns a `Program` whose `statements`
list holds, in order:

- `Assign(name, value, operator="=")` for an identifier followed by the
  operator `=` and an integer;
- `Print(target)` for `print` followed by an identifier, where `target` is a
  `Var(name)`.

Tokens that start no statement (newlines, integers, operators on their own)
are skipped. `parse` raises `ParseError` (a `ValueError`) with one of these
messages:

- `Invalid print target` — `print` is not followed by an identifier;
- `Invalid Identifier Operation` — an identifier is not followed by `=`;
- `Invalid Assignment` — the `=` is not followed by an integer.

Each node class has a `type` class attribute from `NodeType`.

## Reading files

`tinyinterp.source.read_file(filename)` returns a file's whole contents as
text, replacing bytes that are not valid UTF-8. It raises `OSError` if the
file cannot be read.

## Command line

```
tinyinterp program.txt
```

The file name defaults to `tester.txt` in the current directory. The command
reads the file, tokenizes and parses it, and then writes the token listing
shown above. If the file cannot be read, or the program has a syntax error,
it reports the error on standard error and exits with status 1.

## What it does not do

tinyinterp does not run programs. Assignments store nothing and `print`
statements print nothing; the command only checks that the program parses
and lists its tokens. The `+` and `-` operators are recognised as tokens but
no statement uses them.

## Installation and tests

```
pip install .
pip install .[test]
pytest
```