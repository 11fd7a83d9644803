"""Diagnostic codes and messages."""

from dataclasses import dataclass
from typing import Final, Literal

Severity = Literal["error", "warning"]


@dataclass(frozen=True, slots=True)
class DiagnosticSpec:
    code: str
    message: str
    hint: str | None = None
    severity: Severity = "error"
    category: str | None = None


LEXER_UNTERMINATED_STRING: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_UNTERMINATED_STRING",
    message="Unterminated string literal.",
    hint="Close the string with a double quote. Escaped quotes are not supported.",
    severity="error",
    category="lexer",
)

LEXER_INVALID_NUMBER: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_INVALID_NUMBER",
    message="Invalid number literal.",
    hint="Numbers are ASCII digits with at most one decimal point, e.g. `123.45`.",
    severity="error",
    category="lexer",
)

LEXER_UNEXPECTED_CHARACTER: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_UNEXPECTED_CHARACTER",
    message="Unexpected character.",
    severity="error",
    category="lexer",
)

PARSER_EXPECTED_TOKEN: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_EXPECTED_TOKEN",
    message="Expected token",
    severity="error",
    category="parser",
)

PARSER_UNEXPECTED_TARGET: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_UNEXPECTED_TARGET",
    message="Unexpected statement target",
    hint="Use `leaf = value` for leaves and `a -> b : value` for edges.",
    severity="error",
    category="parser",
)

CONVERSION_INVALID_TOP_LEVEL: Final[DiagnosticSpec] = DiagnosticSpec(
    code="CONVERSION_INVALID_TOP_LEVEL",
    message="Top-level value is not a (name, content) block pair.",
    severity="error",
    category="conversion",
)

CONVERSION_NON_STRING_KEY: Final[DiagnosticSpec] = DiagnosticSpec(
    code="CONVERSION_NON_STRING_KEY",
    message="Block name is not a string.",
    severity="error",
    category="conversion",
)
