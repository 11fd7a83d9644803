"""Exceptions raised by the lexer, parser and document builder.

Every error aborts the current parse. Each exception carries a `Diagnostic`
so callers can report it the same way regardless of the stage that failed.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

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
from gmml.diagnostics.diagnostic import Diagnostic

if TYPE_CHECKING:
    from gmml.ast import AstNode
    from gmml.lexer.tokens import Token
    from gmml.text import TextRange
    from gmml.value import Value


class GmmlError(Exception):
    """Base class for all GMML front-end errors."""

    spec: ClassVar[DiagnosticSpec]

    def __init__(self, message: str, range: TextRange | None = None) -> None:
        super().__init__(message)
        self.diagnostic = Diagnostic(
            code=self.spec.code,
            message=message,
            range=range,
            severity=self.spec.severity,
            hint=self.spec.hint,
            category=self.spec.category,
        )

    @property
    def code(self) -> str:
        return self.diagnostic.code

    @property
    def range(self) -> TextRange | None:
        return self.diagnostic.range


# -------------------------
# Lexer
# -------------------------


class LexError(GmmlError):
    pass


class UnterminatedStringError(LexError):
    spec = LEXER_UNTERMINATED_STRING

    def __init__(self, range: TextRange) -> None:
        super().__init__(LEXER_UNTERMINATED_STRING.message, range)


class InvalidNumberError(LexError):
    spec = LEXER_INVALID_NUMBER

    def __init__(self, text: str, range: TextRange) -> None:
        self.text = text
        super().__init__(f"Invalid number literal {text!r}", range)


class UnexpectedCharacterError(LexError):
    spec = LEXER_UNEXPECTED_CHARACTER

    def __init__(self, char: str, range: TextRange) -> None:
        self.char = char
        super().__init__(f"Unexpected character {char!r}", range)


# -------------------------
# Parser
# -------------------------


class ParseError(GmmlError):
    pass


class ExpectedTokenError(ParseError):
    """A production required a specific construct and found something else.

    `found` is None when the input ended.
    """

    spec = PARSER_EXPECTED_TOKEN

    def __init__(self, expected: str, found: Token | None, range: TextRange | None) -> None:
        self.expected = expected
        self.found = found
        found_text = found.describe() if found is not None else "end of input"
        super().__init__(f"Expected {expected}, found {found_text}", range)


class UnexpectedTargetError(ParseError):
    spec = PARSER_UNEXPECTED_TARGET

    def __init__(self, context: str, target: AstNode, range: TextRange | None) -> None:
        self.context = context
        self.target = target
        super().__init__(f"Unexpected target {type(target).__name__}: {context}", range)


# -------------------------
# Document assembly
# -------------------------


class ConversionError(GmmlError):
    pass


class InvalidTopLevelError(ConversionError):
    spec = CONVERSION_INVALID_TOP_LEVEL

    def __init__(self, value: Value) -> None:
        self.value = value
        super().__init__(f"{CONVERSION_INVALID_TOP_LEVEL.message} Got {type(value).__name__}.")


class NonStringKeyError(ConversionError):
    spec = CONVERSION_NON_STRING_KEY

    def __init__(self, key: Value) -> None:
        self.key = key
        super().__init__(f"{CONVERSION_NON_STRING_KEY.message} Got {type(key).__name__}.")
