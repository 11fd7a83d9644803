"""Lexer."""

from gmml.lexer.lexer import Lexer, dump_tokens, lex, scan, token_text
from gmml.lexer.tokens import Token, TokenKind

__all__ = [
    "Lexer",
    "Token",
    "TokenKind",
    "dump_tokens",
    "lex",
    "scan",
    "token_text",
]
