"""Lexer tokens."""

from dataclasses import dataclass
from enum import IntEnum
from typing import Final

from gmml.text import TextRange


class TokenKind(IntEnum):
    # -------------------------
    # Trivia tokens (still emitted by the lexer)
    # -------------------------
    WHITESPACE = 10  # also produced for `;` comments
    NEWLINE = 11

    # -------------------------
    # Identifiers / literals
    # -------------------------
    IDENTIFIER = 20
    STRING = 21  # quoted string, no escapes
    NUMBER = 22

    # -------------------------
    # Symbols
    # -------------------------
    LBRACKET = 30  # [
    RBRACKET = 31  # ]
    LPAREN = 32  # (
    RPAREN = 33  # )
    LBRACE = 34  # {
    RBRACE = 35  # }
    COMMA = 36  # ,
    DOT = 37  # .
    COLON = 38  # :
    MINUS = 39  # -
    GREATER_THAN = 40  # >
    EQUAL = 41  # =

    ARROW = 50  # ->

    @property
    def is_trivia(self) -> bool:
        return self in (TokenKind.WHITESPACE, TokenKind.NEWLINE)

    @property
    def label(self) -> str:
        """Short human-readable name used in error messages."""
        return TOKEN_LABELS[self]


TOKEN_LABELS: Final[dict[TokenKind, str]] = {
    TokenKind.WHITESPACE: "whitespace",
    TokenKind.NEWLINE: "newline",
    TokenKind.IDENTIFIER: "identifier",
    TokenKind.STRING: "string",
    TokenKind.NUMBER: "number",
    TokenKind.LBRACKET: "[",
    TokenKind.RBRACKET: "]",
    TokenKind.LPAREN: "(",
    TokenKind.RPAREN: ")",
    TokenKind.LBRACE: "{",
    TokenKind.RBRACE: "}",
    TokenKind.COMMA: ",",
    TokenKind.DOT: ".",
    TokenKind.COLON: ":",
    TokenKind.MINUS: "-",
    TokenKind.GREATER_THAN: ">",
    TokenKind.EQUAL: "=",
    TokenKind.ARROW: "->",
}

SINGLE_CHAR_SYMBOLS: Final[dict[str, TokenKind]] = {
    ",": TokenKind.COMMA,
    ".": TokenKind.DOT,
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
    "[": TokenKind.LBRACKET,
    "]": TokenKind.RBRACKET,
    "{": TokenKind.LBRACE,
    "}": TokenKind.RBRACE,
    ":": TokenKind.COLON,
    "=": TokenKind.EQUAL,
    ">": TokenKind.GREATER_THAN,
}


@dataclass(frozen=True, slots=True)
class Token:
    """A single lexed token.

    `value` holds the identifier name, the string contents (without quotes)
    or the float value of a number. It is None for symbols and trivia.
    """

    kind: TokenKind
    range: TextRange
    value: str | float | None = None

    def describe(self) -> str:
        match self.kind:
            case TokenKind.IDENTIFIER:
                return f"identifier `{self.value}`"
            case TokenKind.STRING:
                return f'string "{self.value}"'
            case TokenKind.NUMBER:
                return f"number {self.value}"
            case TokenKind.WHITESPACE | TokenKind.NEWLINE:
                return self.kind.label
            case _:
                return f"'{self.kind.label}'"
