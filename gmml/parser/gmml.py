"""High-level parse entrypoints for GMML source text."""

from __future__ import annotations

from typing import TYPE_CHECKING

from gmml.ast import AstBlock
from gmml.diagnostics import GmmlError
from gmml.lexer import lex
from gmml.parser.grammar import parse_document
from gmml.parser.options import ParserOptions
from gmml.parser.parser import Parser
from gmml.value import Map, reduce_document

if TYPE_CHECKING:
    from gmml.pipeline import GmmlParseResult


def parse_ast(text: str, options: ParserOptions | None = None) -> tuple[AstBlock, ...]:
    resolved_options = options or ParserOptions()
    tokens = lex(text, allow_crlf=resolved_options.allow_crlf)
    parser = Parser(tokens, options=resolved_options)
    return parse_document(parser)


def parse(text: str, options: ParserOptions | None = None) -> Map:
    """Parse `text` into a document mapping block names to their content.

    Raises the first `GmmlError` hit while lexing, parsing or assembling.
    """
    return reduce_document(parse_ast(text, options))


def parse_result(text: str, options: ParserOptions | None = None) -> GmmlParseResult:
    from gmml.pipeline import GmmlParseResult

    try:
        blocks = parse_ast(text, options)
        document = reduce_document(blocks)
    except GmmlError as error:
        return GmmlParseResult(source_text=text, error=error, diagnostics=[error.diagnostic])
    return GmmlParseResult(source_text=text, blocks=blocks, document=document)
