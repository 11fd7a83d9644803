"""Diagnostics."""

from gmml.diagnostics.codes import (
    CONVERSION_INVALID_TOP_LEVEL,
    CONVERSION_NON_STRING_KEY,
    LEXER_INVALID_NUMBER,
    LEXER_UNEXPECTED_CHARACTER,
    LEXER_UNTERMINATED_STRING,
    PARSER_EXPECTED_TOKEN,
    PARSER_UNEXPECTED_TARGET,
    DiagnosticSpec,
)
from gmml.diagnostics.diagnostic import Diagnostic, Severity
from gmml.diagnostics.errors import (
    ConversionError,
    ExpectedTokenError,
    GmmlError,
    InvalidNumberError,
    InvalidTopLevelError,
    LexError,
    NonStringKeyError,
    ParseError,
    UnexpectedCharacterError,
    UnexpectedTargetError,
    UnterminatedStringError,
)
from gmml.diagnostics.report import has_errors

__all__ = [
    "CONVERSION_INVALID_TOP_LEVEL",
    "CONVERSION_NON_STRING_KEY",
    "LEXER_INVALID_NUMBER",
    "LEXER_UNEXPECTED_CHARACTER",
    "LEXER_UNTERMINATED_STRING",
    "PARSER_EXPECTED_TOKEN",
    "PARSER_UNEXPECTED_TARGET",
    "ConversionError",
    "Diagnostic",
    "DiagnosticSpec",
    "ExpectedTokenError",
    "GmmlError",
    "InvalidNumberError",
    "InvalidTopLevelError",
    "LexError",
    "NonStringKeyError",
    "ParseError",
    "Severity",
    "UnexpectedCharacterError",
    "UnexpectedTargetError",
    "UnterminatedStringError",
    "has_errors",
]
