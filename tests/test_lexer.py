import pytest

from pluslex.lexer import (
    LexicalError,
    Lexer,
    Token,
    TokenType,
    is_identifier_char,
    is_identifier_start,
    is_keyword,
    tokenize,
)


def test_keywords_are_recognised():
    source = "number write and newline repeat times"
    tokens = tokenize(source)
    assert [t.type for t in tokens] == [
        TokenType.NUMBER_KEYWORD,
        TokenType.WRITE,
        TokenType.AND,
        TokenType.NEWLINE,
        TokenType.REPEAT,
        TokenType.TIMES,
    ]
    assert [t.lexeme for t in tokens] == source.split()


@pytest.mark.parametrize("word", ["number", "write", "and", "newline", "repeat", "times"])
def test_is_keyword_true(word):
    assert is_keyword(word) is True


@pytest.mark.parametrize("word", ["numbers", "Number", "x", ""])
def test_is_keyword_false(word):
    assert is_keyword(word) is False


def test_identifier_predicates():
    assert is_identifier_start("a") is True
    assert is_identifier_start("1") is False
    assert is_identifier_start("_") is False
    assert is_identifier_char("_") is True
    assert is_identifier_char("7") is True
    assert is_identifier_char("-") is False


def test_identifiers():
    source = "abc x_1 number2"
    tokens = tokenize(source)
    assert all(t.type is TokenType.IDENTIFIER for t in tokens)
    assert [t.lexeme for t in tokens] == source.split()


def test_number_followed_by_identifier():
    tokens = tokenize("12abc")
    assert [(t.type, t.lexeme) for t in tokens] == [
        (TokenType.NUMBER, "12"),
        (TokenType.IDENTIFIER, "abc"),
    ]


def test_numbers():
    tokens = tokenize("123 45")
    assert [(t.type, t.lexeme) for t in tokens] == [
        (TokenType.NUMBER, "123"),
        (TokenType.NUMBER, "45"),
    ]


def test_string_constant():
    tokens = tokenize('"hello world"')
    assert tokens == [Token(TokenType.STRING_CONSTANT, "hello world", 1, 1)]


def test_operators_and_symbols():
    tokens = tokenize(":= += -= - { } ;")
    assert [t.type for t in tokens] == [
        TokenType.ASSIGN,
        TokenType.INCREMENT,
        TokenType.DECREMENT,
        TokenType.MINUS,
        TokenType.LBRACE,
        TokenType.RBRACE,
        TokenType.SEMICOLON,
    ]
    assert [t.lexeme for t in tokens] == ":= += -= - { } ;".split()


def test_comment_is_skipped_and_lines_counted():
    tokens = tokenize("* a comment\nover lines * x")
    assert [(t.type, t.lexeme, t.line) for t in tokens] == [
        (TokenType.IDENTIFIER, "x", 2)
    ]


def test_lines_increase_monotonically():
    tokens = tokenize("a\nb\n\nc")
    lines = [t.line for t in tokens]
    assert lines == sorted(lines)
    assert lines[0] == 1
    assert len(set(lines)) == 3


def test_columns_point_at_lexemes():
    source = '  ab  := 12 ; "txt" {x}'
    for token in tokenize(source):
        start = token.column - 1
        if token.type is TokenType.STRING_CONSTANT:
            assert source[start:start + len(token.lexeme) + 2] == f'"{token.lexeme}"'
        else:
            assert source[start:start + len(token.lexeme)] == token.lexeme


def test_eof_token_repeats():
    lexer = Lexer("")
    first = lexer.next_token()
    second = lexer.next_token()
    assert first.type is TokenType.EOF
    assert first.lexeme == "EOF"
    assert second == first


def test_iteration_stops_before_eof():
    assert [t.lexeme for t in Lexer("x ;")] == ["x", ";"]


def test_error_position_matches_offending_character():
    source = "abc ? def"
    with pytest.raises(LexicalError) as info:
        tokenize(source)
    assert info.value.line == 1
    assert source[info.value.column - 1] == "?"


def test_tokens_before_error_are_produced():
    lexer = Lexer("x := 3 : y")
    seen = []
    with pytest.raises(LexicalError):
        for token in lexer:
            seen.append(token.lexeme)
    assert seen == ["x", ":=", "3"]