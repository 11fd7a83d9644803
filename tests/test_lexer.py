import pytest

from gmml.diagnostics import (
    InvalidNumberError,
    UnexpectedCharacterError,
    UnterminatedStringError,
)
from gmml.lexer import Lexer, TokenKind, lex, scan, token_text


def kinds(text: str, **kwargs) -> list[TokenKind]:
    return [token.kind for token in lex(text, **kwargs)]


def test_empty_source_produces_no_tokens() -> None:
    assert lex("") == []


def test_block_header_tokens() -> None:
    tokens = lex("[ab]\n")

    assert [token.kind for token in tokens] == [
        TokenKind.LBRACKET,
        TokenKind.IDENTIFIER,
        TokenKind.RBRACKET,
        TokenKind.NEWLINE,
    ]
    assert tokens[1].value == "ab"
    assert tokens[1].range.as_tuple() == (1, 3)


def test_all_single_character_symbols() -> None:
    assert kinds(",.()[]{}:=>") == [
        TokenKind.COMMA,
        TokenKind.DOT,
        TokenKind.LPAREN,
        TokenKind.RPAREN,
        TokenKind.LBRACKET,
        TokenKind.RBRACKET,
        TokenKind.LBRACE,
        TokenKind.RBRACE,
        TokenKind.COLON,
        TokenKind.EQUAL,
        TokenKind.GREATER_THAN,
    ]


def test_whitespace_run_is_one_token() -> None:
    tokens = lex(" \t  x")

    assert [token.kind for token in tokens] == [TokenKind.WHITESPACE, TokenKind.IDENTIFIER]
    assert tokens[0].range.as_tuple() == (0, 4)


def test_arrow_and_minus() -> None:
    assert kinds("a->b - >") == [
        TokenKind.IDENTIFIER,
        TokenKind.ARROW,
        TokenKind.IDENTIFIER,
        TokenKind.WHITESPACE,
        TokenKind.MINUS,
        TokenKind.WHITESPACE,
        TokenKind.GREATER_THAN,
    ]


def test_comment_becomes_whitespace_and_keeps_newline() -> None:
    source = "a ; note -> { \nb"
    tokens = lex(source)

    assert [token.kind for token in tokens] == [
        TokenKind.IDENTIFIER,
        TokenKind.WHITESPACE,
        TokenKind.WHITESPACE,
        TokenKind.NEWLINE,
        TokenKind.IDENTIFIER,
    ]
    assert token_text(source, tokens[2]) == "; note -> { "
    assert tokens[2].value is None


def test_comment_at_end_of_input() -> None:
    assert kinds("x;done") == [TokenKind.IDENTIFIER, TokenKind.WHITESPACE]


def test_identifiers_do_not_contain_digits() -> None:
    tokens = lex("ab12 _snake_case")

    assert [(token.kind, token.value) for token in tokens] == [
        (TokenKind.IDENTIFIER, "ab"),
        (TokenKind.NUMBER, 12.0),
        (TokenKind.WHITESPACE, None),
        (TokenKind.IDENTIFIER, "_snake_case"),
    ]


@pytest.mark.parametrize("text", ["0", "7", "12.5", "3.", "000.25", "123.45"])
def test_number_literal_value(text: str) -> None:
    tokens = lex(text)

    assert len(tokens) == 1
    assert tokens[0].kind == TokenKind.NUMBER
    assert tokens[0].value == float(text)


def test_second_decimal_point_ends_number() -> None:
    tokens = lex("1.2.3")

    assert [(token.kind, token.value) for token in tokens] == [
        (TokenKind.NUMBER, 1.2),
        (TokenKind.DOT, None),
        (TokenKind.NUMBER, 3.0),
    ]


@pytest.mark.parametrize("contents", ["", "hello world", "semi ; colon", "back\\slash", "two\nlines", "[not] -> a {block}"])
def test_string_contents_are_verbatim(contents: str) -> None:
    tokens = lex(f'"{contents}"')

    assert len(tokens) == 1
    assert tokens[0].kind == TokenKind.STRING
    assert tokens[0].value == contents


def test_quote_always_closes_string() -> None:
    tokens = lex('"a\\"b')

    assert tokens[0].value == "a\\"
    assert tokens[1].kind == TokenKind.IDENTIFIER
    assert tokens[1].value == "b"


def test_unterminated_string() -> None:
    with pytest.raises(UnterminatedStringError) as excinfo:
        lex('x = "oops\n')

    assert excinfo.value.code == "LEXER_UNTERMINATED_STRING"
    assert excinfo.value.range is not None
    assert excinfo.value.range.as_tuple() == (4, 10)


def test_unexpected_character() -> None:
    with pytest.raises(UnexpectedCharacterError) as excinfo:
        lex("a @")

    assert excinfo.value.char == "@"
    assert excinfo.value.range is not None
    assert excinfo.value.range.as_tuple() == (2, 3)
    assert excinfo.value.code == "LEXER_UNEXPECTED_CHARACTER"


def test_digit_run_that_is_not_a_float_is_invalid_number() -> None:
    # superscript two is a digit to str.isdigit but not to float()
    with pytest.raises(InvalidNumberError) as excinfo:
        lex("x = ²")

    assert excinfo.value.text == "²"
    assert excinfo.value.code == "LEXER_INVALID_NUMBER"


def test_carriage_return_rejected_by_default() -> None:
    with pytest.raises(UnexpectedCharacterError):
        lex("a\r\n")


def test_crlf_is_one_newline_when_allowed() -> None:
    tokens = lex("a\r\nb", allow_crlf=True)

    assert [token.kind for token in tokens] == [
        TokenKind.IDENTIFIER,
        TokenKind.NEWLINE,
        TokenKind.IDENTIFIER,
    ]
    assert tokens[1].range.as_tuple() == (1, 3)


def test_lone_carriage_return_rejected_even_with_crlf() -> None:
    with pytest.raises(UnexpectedCharacterError):
        lex("a\rb", allow_crlf=True)


def test_scan_is_lazy() -> None:
    tokens = scan("a @")

    assert next(tokens).kind == TokenKind.IDENTIFIER
    assert next(tokens).kind == TokenKind.WHITESPACE
    with pytest.raises(UnexpectedCharacterError):
        next(tokens)


def test_lexer_is_not_restartable() -> None:
    lexer = Lexer("a b")

    assert len(list(lexer)) == 3
    assert list(lexer) == []
    assert lexer.is_eof
