"""Lexer."""

from collections.abc import Iterator

from gmml.diagnostics import (
    InvalidNumberError,
    UnexpectedCharacterError,
    UnterminatedStringError,
)
from gmml.lexer.tokens import SINGLE_CHAR_SYMBOLS, Token, TokenKind
from gmml.text import TextRange, slice_text_range


class Lexer:
    """Single-pass lexer that emits whitespace and newlines as tokens.

    Iterating a lexer pulls tokens on demand. The stream ends at end of input
    without a sentinel token and cannot be restarted once exhausted.
    """

    def __init__(self, source: str, *, allow_crlf: bool = False) -> None:
        self._source = source
        self._position = 0
        self._current_start = 0
        self._allow_crlf = allow_crlf

    @property
    def is_eof(self) -> bool:
        return self._position >= len(self._source)

    @property
    def current_range(self) -> TextRange:
        return TextRange(self._current_start, self._position)

    def __iter__(self) -> Iterator[Token]:
        while True:
            token = self.next_token()
            if token is None:
                return
            yield token

    def next_token(self) -> Token | None:
        """Lex the next token, or return None at end of input."""
        self._current_start = self._position
        if self.is_eof:
            return None
        return self._lex_token()

    def _lex_token(self) -> Token:
        ch = self._current_char()

        if ch == " " or ch == "\t":
            self._consume_whitespaces()
            return self._token(TokenKind.WHITESPACE)

        if ch == '"':
            return self._lex_string()

        if ch == ";":
            self._lex_comment()
            return self._token(TokenKind.WHITESPACE)

        symbol = SINGLE_CHAR_SYMBOLS.get(ch)
        if symbol is not None:
            self._advance(1)
            return self._token(symbol)

        if ch == "-":
            if self._peek_char() == ">":
                self._advance(2)
                return self._token(TokenKind.ARROW)
            self._advance(1)
            return self._token(TokenKind.MINUS)

        if ch == "\n":
            self._advance(1)
            return self._token(TokenKind.NEWLINE)

        if ch == "\r" and self._allow_crlf and self._peek_char() == "\n":
            self._advance(2)
            return self._token(TokenKind.NEWLINE)

        if ch.isalpha() or ch == "_":
            return self._lex_identifier()

        if ch.isdigit():
            return self._lex_number()

        self._advance(1)
        raise UnexpectedCharacterError(ch, self.current_range)

    def _lex_string(self) -> Token:
        # Consume opening quote
        self._advance(1)
        while not self.is_eof:
            if self._current_char() == '"':
                contents = self._source[self._current_start + 1 : self._position]
                self._advance(1)
                return self._token(TokenKind.STRING, contents)
            self._advance(1)
        raise UnterminatedStringError(self.current_range)

    def _lex_comment(self) -> None:
        # Consume until end of line, do not consume the newline itself.
        self._advance(1)
        while not self.is_eof and self._current_char() != "\n":
            self._advance(1)

    def _lex_identifier(self) -> Token:
        self._advance(1)
        while not self.is_eof:
            ch = self._current_char()
            if ch.isalpha() or ch == "_":
                self._advance(1)
                continue
            break
        return self._token(TokenKind.IDENTIFIER, slice_text_range(self._source, self.current_range))

    def _lex_number(self) -> Token:
        saw_dot = False
        while not self.is_eof:
            ch = self._current_char()
            if ch.isdigit():
                self._advance(1)
                continue
            if ch == "." and not saw_dot:
                saw_dot = True
                self._advance(1)
                continue
            break

        text = slice_text_range(self._source, self.current_range)
        try:
            value = float(text)
        except ValueError:
            raise InvalidNumberError(text, self.current_range) from None
        return self._token(TokenKind.NUMBER, value)

    def _consume_whitespaces(self) -> None:
        while not self.is_eof:
            ch = self._current_char()
            if ch == " " or ch == "\t":
                self._advance(1)
                continue
            break

    def _token(self, kind: TokenKind, value: str | float | None = None) -> Token:
        return Token(kind, self.current_range, value)

    def _current_char(self) -> str:
        if self.is_eof:
            return "\0"
        return self._source[self._position]

    def _peek_char(self, ahead: int = 1) -> str:
        index = self._position + ahead
        if index >= len(self._source):
            return "\0"
        return self._source[index]

    def _advance(self, steps: int) -> None:
        self._position += steps


def scan(source: str, *, allow_crlf: bool = False) -> Iterator[Token]:
    """Lazily lex `source`. Lex errors surface when the bad token is pulled."""
    return iter(Lexer(source, allow_crlf=allow_crlf))


def lex(source: str, *, allow_crlf: bool = False) -> list[Token]:
    return list(scan(source, allow_crlf=allow_crlf))


def token_text(source: str, token: Token) -> str:
    """Get the text of a token from the source string based on its range."""
    return slice_text_range(source, token.range)


def dump_tokens(tokens: list[Token], source: str) -> None:
    """Print token list with kind, range, value, and text for debugging."""
    for i, tok in enumerate(tokens):
        text = token_text(source, tok)
        print(f"{i:03d} {tok.kind.name:<14} range={tok.range.as_tuple()} value={tok.value!r} text={text!r}")
