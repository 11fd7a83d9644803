"""GMML front end: lexer, recursive-descent parser and value document."""

from gmml.diagnostics import (
    ConversionError,
    Diagnostic,
    GmmlError,
    LexError,
    ParseError,
)
from gmml.lexer import Token, TokenKind, lex, scan
from gmml.parser import ParserOptions, parse, parse_ast, parse_result
from gmml.pipeline import GmmlParseResult
from gmml.value import Map, Value

__all__ = [
    "ConversionError",
    "Diagnostic",
    "GmmlError",
    "GmmlParseResult",
    "LexError",
    "Map",
    "ParseError",
    "ParserOptions",
    "Token",
    "TokenKind",
    "Value",
    "lex",
    "parse",
    "parse_ast",
    "parse_result",
    "scan",
]
