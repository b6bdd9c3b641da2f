"""Tokenizer for the Plus++ language."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterator, Optional


class TokenType(Enum):
    """Kinds of tokens produced by the lexer."""

    NUMBER_KEYWORD = auto()
    WRITE = auto()
    AND = auto()
    NEWLINE = auto()
    REPEAT = auto()
    TIMES = auto()

    SEMICOLON = auto()
    ASSIGN = auto()
    INCREMENT = auto()
    DECREMENT = auto()
    LBRACE = auto()
    RBRACE = auto()
    MINUS = auto()

    IDENTIFIER = auto()
    NUMBER = auto()
    STRING_CONSTANT = auto()

    EOF = auto()


_KEYWORDS = {
    "number": TokenType.NUMBER_KEYWORD,
    "write": TokenType.WRITE,
    "and": TokenType.AND,
    "newline": TokenType.NEWLINE,
    "repeat": TokenType.REPEAT,
    "times": TokenType.TIMES,
}

_SINGLE_SYMBOLS = {
    "{": TokenType.LBRACE,
    "}": TokenType.RBRACE,
    ";": TokenType.SEMICOLON,
}

_WHITESPACE = " \t\r"


@dataclass(frozen=True)
class Token:
    """A token with its text and the position where it starts."""

    type: TokenType
    lexeme: str
    line: int
    column: int


class LexicalError(Exception):
    """Raised when the input contains text that is not a valid token."""

    def __init__(self, message: str, line: int, column: int) -> None:
        super().__init__(message)
        self.line = line
        self.column = column


def is_keyword(text: str) -> bool:
    """Return True if the text is a reserved word."""
    return text in _KEYWORDS


def _is_alpha(ch: Optional[str]) -> bool:
    return ch is not None and ch.isascii() and ch.isalpha()


def _is_digit(ch: Optional[str]) -> bool:
    return ch is not None and ch.isascii() and ch.isdigit()


def is_identifier_start(ch: str) -> bool:
    """Return True if the character may begin an identifier."""
    return _is_alpha(ch)


def is_identifier_char(ch: str) -> bool:
    """Return True if the character may continue an identifier."""
    return _is_alpha(ch) or _is_digit(ch) or ch == "_"


class Lexer:
    """Reads tokens one at a time from source text."""

    def __init__(self, source: str) -> None:
        self._text = source
        self._pos = 0
        self.line = 1
        self.column = 0

    def _peek(self) -> Optional[str]:
        if self._pos < len(self._text):
            return self._text[self._pos]
        return None

    def _advance(self) -> Optional[str]:
        ch = self._peek()
        if ch is None:
            return None
        self._pos += 1
        if ch == "\n":
            self.line += 1
            self.column = 0
        else:
            self.column += 1
        return ch

    def _skip_whitespace(self) -> Optional[str]:
        while True:
            ch = self._advance()
            if ch is None or (ch not in _WHITESPACE and ch != "\n"):
                return ch

    def _read_while(self, first: str, predicate) -> str:
        chars = [first]
        while predicate(self._peek()):
            chars.append(self._advance())
        return "".join(chars)

    def _read_string(self, start_col: int) -> Token:
        line = self.line
        chars = []
        while True:
            ch = self._peek()
            if ch is None:
                raise LexicalError(
                    f"Error: Unterminated string constant at line {self.line}, "
                    f"column {start_col}",
                    self.line,
                    start_col,
                )
            if ch == "\n":
                raise LexicalError(
                    f"Unterminated string at line {self.line}", self.line, start_col
                )
            self._advance()
            if ch == '"':
                return Token(TokenType.STRING_CONSTANT, "".join(chars), line, start_col)
            chars.append(ch)

    def _skip_comment(self, start_col: int) -> None:
        while True:
            ch = self._advance()
            if ch is None:
                raise LexicalError(
                    f"Error: Unclosed comment at line {self.line}, column {start_col}",
                    self.line,
                    start_col,
                )
            if ch == "*":
                return

    def _unexpected(self, ch: str, column: int) -> LexicalError:
        return LexicalError(
            f"Lexical error at line {self.line}, column {column}: "
            f"unexpected character '{ch}'",
            self.line,
            column,
        )

    def next_token(self) -> Token:
        """Return the next token; raises LexicalError on invalid input."""
        while True:
            ch = self._skip_whitespace()
            if ch is None:
                return Token(TokenType.EOF, "EOF", self.line, self.column)

            start_col = self.column
            line = self.line

            if _is_alpha(ch):
                word = self._read_while(ch, lambda c: c is not None and is_identifier_char(c))
                return Token(_KEYWORDS.get(word, TokenType.IDENTIFIER), word, line, start_col)

            if _is_digit(ch):
                digits = self._read_while(ch, _is_digit)
                return Token(TokenType.NUMBER, digits, line, start_col)

            if ch == '"':
                return self._read_string(start_col)

            if ch == "*":
                self._skip_comment(start_col)
                continue

            if ch in _SINGLE_SYMBOLS:
                return Token(_SINGLE_SYMBOLS[ch], ch, line, start_col)

            if ch in ":+-":
                if self._peek() == "=":
                    self._advance()
                    kind = {
                        ":": TokenType.ASSIGN,
                        "+": TokenType.INCREMENT,
                        "-": TokenType.DECREMENT,
                    }[ch]
                    return Token(kind, ch + "=", line, start_col)
                if ch == "-":
                    return Token(TokenType.MINUS, "-", line, start_col)

            raise self._unexpected(ch, start_col)

    def __iter__(self) -> Iterator[Token]:
        """Yield tokens up to, but not including, end of input."""
        while True:
            token = self.next_token()
            if token.type is TokenType.EOF:
                return
            yield token


def tokenize(source: str) -> list[Token]:
    """Return all tokens of the source, without the end-of-input token."""
    return list(Lexer(source))