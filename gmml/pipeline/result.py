"""Parse carrier for callers that want errors returned instead of raised."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from gmml.diagnostics import has_errors

if TYPE_CHECKING:
    from gmml.ast import AstBlock
    from gmml.diagnostics import Diagnostic, GmmlError
    from gmml.value import Map


@dataclass(slots=True)
class GmmlParseResult:
    """Outcome of one parse call.

    Exactly one of `document` and `error` is set. There is no partial
    document: the first error aborts the whole parse.
    """

    source_text: str
    blocks: tuple[AstBlock, ...] | None = None
    document: Map | None = None
    error: GmmlError | None = None
    diagnostics: list[Diagnostic] = field(default_factory=list)

    @property
    def has_errors(self) -> bool:
        return has_errors(self.diagnostics)

    def unwrap(self) -> Map:
        """Return the document or re-raise the error that aborted the parse."""
        if self.error is not None:
            raise self.error
        assert self.document is not None
        return self.document

    def render_diagnostics(self) -> list[str]:
        return [diagnostic.render(self.source_text) for diagnostic in self.diagnostics]
