# pluslex

`pluslex` is a lexical analyser for Plus++, a small teaching language. It reads
a `.plus` source file and writes its token stream to a `.lx` file.

## Installation

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Command line

```
la program
```

The argument is a base name without its extension. The command reads
`program.plus` and writes `program.lx`, with one token per line:

```
Keyword(number)
Identifier(count)
EndOfLine
Operator(:=)
IntConstant(10)
StringConstant("hello")
OpenBlock
CloseBlock
```

A lone `-` is recognised as a token but is not written to the `.lx` file.

When the analysis finishes, the command prints
`Lexical analysis completed successfully. Output written to program.lx`
and exits with status 0. When it finds a lexical error, such as an
unterminated string, an unclosed comment or an unexpected character, it
reports the error with its line and column on standard error and exits with
status 1; the tokens read before the error are still in the `.lx` file. If the
input file cannot be opened or the output file cannot be created, it says so
on standard error and exits with status 1. Called with anything other than
exactly one argument, it prints `Usage: la <filename>` and exits with status 1.

## The language's lexical rules

- Keywords: `number`, `write`, `and`, `newline`, `repeat`, `times`.
- Identifiers begin with an ASCII letter and continue with letters, digits or `_`.
- Integer constants are runs of digits.
- String constants are enclosed in double quotes and may not span lines.
- Comments are enclosed between `*` characters and may span lines.
- Operators and symbols: `:=`, `+=`, `-=`, `-`, `{`, `}`, `;`.
- Spaces, tabs, carriage returns and newlines separate tokens.

## Library use

```python
from pluslex.lexer import tokenize, Lexer, TokenType, LexicalError

for token in tokenize('number x; x := 5;'):
    print(token.type, token.lexeme, token.line, token.column)
```

- `tokenize(source)` returns the list of tokens, without the end-of-input token.
- `Lexer(source).next_token()` returns one `Token` at a time and, once the
  input is used up, a token of type `TokenType.EOF`. Iterating over a `Lexer`
  yields tokens up to, but not including, the end of input.
- A `Token` is a frozen dataclass with `type`, `lexeme`, `line` and `column`
  (the position where it starts, lines counted from 1).
- Malformed input raises `LexicalError`, whose `line` and `column` attributes
  give the position of the error.
- `is_keyword(text)`, `is_identifier_start(ch)` and `is_identifier_char(ch)`
  expose the character and keyword rules.

From `pluslex.cli`:

- `format_token(token)` renders a token in the `.lx` line format, or returns
  `None` for tokens that are not written.
- `make_filename(base, extension)` joins a base name and an extension.
- `analyze(base)` runs the whole `.plus` to `.lx` step for a base name and
  returns the output path; it raises `LexicalError` or `OSError` on failure.
- `main(argv=None)` is the `la` command and returns its exit status.

## What it does not do

`pluslex` only splits source text into tokens. It does not parse Plus++
programs, check them or run them.