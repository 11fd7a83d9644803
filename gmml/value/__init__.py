"""Value model and AST reduction."""

from gmml.value.model import (
    Edge,
    Map,
    Message,
    Number,
    Pair,
    String,
    Symbol,
    Value,
    Vec,
)
from gmml.value.reduce import build_document, reduce_document, reduce_node

__all__ = [
    "Edge",
    "Map",
    "Message",
    "Number",
    "Pair",
    "String",
    "Symbol",
    "Value",
    "Vec",
    "build_document",
    "reduce_document",
    "reduce_node",
]
