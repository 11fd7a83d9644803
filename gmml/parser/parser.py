"""Token cursor used by the recursive-descent grammar."""

from collections.abc import Sequence

from gmml.diagnostics import ExpectedTokenError
from gmml.lexer import Token, TokenKind
from gmml.parser.options import ParserOptions
from gmml.text import TextRange, TextSize


class Parser:
    """Cursor over an immutable token sequence.

    The cursor is a plain index. Backtracking is `checkpoint()` followed by
    `rewind()`. A parser instance drives exactly one parse.
    """

    def __init__(self, tokens: Sequence[Token], options: ParserOptions | None = None) -> None:
        self._tokens = tokens
        self._options = options or ParserOptions()
        self._position = 0

    @property
    def options(self) -> ParserOptions:
        return self._options

    @property
    def position(self) -> int:
        return self._position

    @property
    def at_end(self) -> bool:
        return self._position >= len(self._tokens)

    @property
    def current(self) -> Token | None:
        if self.at_end:
            return None
        return self._tokens[self._position]

    @property
    def current_range(self) -> TextRange:
        token = self.current
        if token is not None:
            return token.range
        if self._tokens:
            return TextRange.empty(self._tokens[-1].range.end)
        return TextRange.empty(TextSize.from_int(0))

    def at(self, kind: TokenKind) -> bool:
        token = self.current
        return token is not None and token.kind == kind

    def bump(self) -> Token:
        token = self.current
        if token is None:
            raise self.expected("token")
        self._position += 1
        return token

    def eat(self, kind: TokenKind) -> Token | None:
        if self.at(kind):
            return self.bump()
        return None

    def expect(self, kind: TokenKind) -> Token:
        token = self.eat(kind)
        if token is None:
            raise self.expected(kind.label)
        return token

    def expected(self, expected: str) -> ExpectedTokenError:
        """Build the error for a production that needed `expected` here."""
        return ExpectedTokenError(expected, self.current, self.current_range)

    def checkpoint(self) -> int:
        return self._position

    def rewind(self, checkpoint: int) -> None:
        self._position = checkpoint

    def skip_blank(self) -> None:
        """Skip newlines and whitespace."""
        while self.at(TokenKind.NEWLINE) or self.at(TokenKind.WHITESPACE):
            self._position += 1

    def skip_whitespace(self) -> None:
        """Skip whitespace only, stopping at a newline."""
        while self.at(TokenKind.WHITESPACE):
            self._position += 1
