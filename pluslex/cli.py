"""Command-line front end: reads NAME.plus and writes tokens to NAME.lx."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from .lexer import Lexer, LexicalError, Token, TokenType

_FIXED_OUTPUT = {
    TokenType.NUMBER_KEYWORD: "Keyword(number)",
    TokenType.WRITE: "Keyword(write)",
    TokenType.AND: "Keyword(and)",
    TokenType.NEWLINE: "Keyword(newline)",
    TokenType.REPEAT: "Keyword(repeat)",
    TokenType.TIMES: "Keyword(times)",
    TokenType.SEMICOLON: "EndOfLine",
    TokenType.ASSIGN: "Operator(:=)",
    TokenType.INCREMENT: "Operator(+=)",
    TokenType.DECREMENT: "Operator(-=)",
    TokenType.LBRACE: "OpenBlock",
    TokenType.RBRACE: "CloseBlock",
}


def make_filename(base: str, extension: str) -> str:
    """Join a base name and an extension (including its dot)."""
    return f"{base}{extension}"


def format_token(token: Token) -> Optional[str]:
    """Return the output line for a token, or None if it is not written."""
    if token.type in _FIXED_OUTPUT:
        return _FIXED_OUTPUT[token.type]
    if token.type is TokenType.IDENTIFIER:
        return f"Identifier({token.lexeme})"
    if token.type is TokenType.NUMBER:
        return f"IntConstant({token.lexeme})"
    if token.type is TokenType.STRING_CONSTANT:
        return f'StringConstant("{token.lexeme}")'
    return None


def analyze(base: str) -> str:
    """Tokenize BASE.plus into BASE.lx and return the output path.

    Tokens read before a lexical error are still written; the error is
    then raised.
    """
    input_path = make_filename(base, ".plus")
    output_path = make_filename(base, ".lx")
    with open(input_path, encoding="utf-8", newline="") as source_file:
        source = source_file.read()
    with open(output_path, "w", encoding="utf-8") as output:
        for token in Lexer(source):
            line = format_token(token)
            if line is not None:
                output.write(line + "\n")
    return output_path


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the lexer on the file named on the command line."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print("Usage: la <filename>", file=sys.stderr)
        return 1

    base = args[0]
    output_path = make_filename(base, ".lx")
    try:
        analyze(base)
    except LexicalError as error:
        print(error, file=sys.stderr)
        print("Lexical analysis failed. Exiting.", file=sys.stderr)
        print("Lexical analysis failed due to errors.", file=sys.stderr)
        return 1
    except OSError as error:
        what = "Error creating output file" if error.filename == output_path else "Error opening input file"
        print(f"{what}: {error.strerror or error}", file=sys.stderr)
        return 1

    print(f"Lexical analysis completed successfully. Output written to {output_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())