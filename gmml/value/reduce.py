"""Reduce the GMML AST into values and assemble the document."""

from __future__ import annotations

from collections.abc import Iterable

from gmml.ast import (
    AstBlock,
    AstEdge,
    AstEdgeDef,
    AstField,
    AstLeafDef,
    AstMessage,
    AstNode,
    AstNumber,
    AstString,
    AstStruct,
    AstSymbol,
)
from gmml.diagnostics import InvalidTopLevelError, NonStringKeyError
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


def reduce_node(node: AstNode) -> Value:
    match node:
        case AstString(text=text):
            return String(text)
        case AstNumber(value=value):
            return Number(value)
        case AstSymbol(name=name):
            return Symbol(name)
        case AstEdge(source=source, dest=dest):
            return Edge(reduce_node(source), reduce_node(dest))
        case AstLeafDef(target=target, stmt=stmt) | AstEdgeDef(target=target, stmt=stmt):
            return Pair(reduce_node(target), reduce_node(stmt))
        case AstField(key=key, value=value):
            return Pair(reduce_node(key), reduce_node(value))
        case AstStruct(entries=entries):
            return Vec(tuple(reduce_node(entry) for entry in entries))
        case AstMessage(name=name, args=args):
            return Message(name, tuple(reduce_node(arg) for arg in args))
        case AstBlock(name=name, content=content):
            return Pair(String(name), Vec(tuple(reduce_node(statement) for statement in content)))
        case _:
            raise TypeError(f"Not an AST node: {node!r}")


def build_document(blocks: Iterable[Value]) -> Map:
    """Fold reduced blocks into the document.

    Each value must be `Pair(String(name), content)`. The first block with a
    given name wins; later blocks with the same name are dropped.
    """
    entries: dict[str, Value] = {}
    for block in blocks:
        if not isinstance(block, Pair):
            raise InvalidTopLevelError(block)
        if not isinstance(block.key, String):
            raise NonStringKeyError(block.key)
        if block.key.value not in entries:
            entries[block.key.value] = block.value
    return Map(entries)


def reduce_document(blocks: Iterable[AstBlock]) -> Map:
    return build_document(reduce_node(block) for block in blocks)
