"""Parser (token cursor + recursive-descent grammar)."""

from gmml.parser.gmml import parse, parse_ast, parse_result
from gmml.parser.grammar import (
    parse_block,
    parse_content,
    parse_document,
    parse_key,
    parse_message,
    parse_statement,
    parse_struct,
    parse_target,
    parse_value,
)
from gmml.parser.options import ParserOptions
from gmml.parser.parser import Parser

__all__ = [
    "Parser",
    "ParserOptions",
    "parse",
    "parse_ast",
    "parse_block",
    "parse_content",
    "parse_document",
    "parse_key",
    "parse_message",
    "parse_result",
    "parse_statement",
    "parse_struct",
    "parse_target",
    "parse_value",
]
