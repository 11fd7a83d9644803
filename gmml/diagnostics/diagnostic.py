"""Diagnostics core types."""

from dataclasses import dataclass

from gmml.diagnostics.codes import Severity
from gmml.text import TextRange, line_col


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic emitted by the lexer, parser and document builder.

    `range` is None for diagnostics that have no source location, such as
    document assembly over already reduced values.
    """

    code: str
    message: str
    range: TextRange | None
    severity: Severity = "error"
    hint: str | None = None
    category: str | None = None

    def render(self, source: str | None = None) -> str:
        location = ""
        if self.range is not None:
            if source is None:
                start, end = self.range.as_tuple()
                location = f" at {start}..{end}"
            else:
                line, column = line_col(source, self.range.start)
                location = f" at {line}:{column}"
        text = f"{self.severity} {self.code}{location}: {self.message}"
        if self.hint:
            text += f" (hint: {self.hint})"
        return text
