"""Typed AST produced by the GMML grammar."""

from gmml.ast.model import (
    AstBlock,
    AstEdge,
    AstEdgeDef,
    AstField,
    AstKey,
    AstLeafDef,
    AstMessage,
    AstNode,
    AstNumber,
    AstStatement,
    AstString,
    AstStruct,
    AstSymbol,
    AstTarget,
    AstValue,
)

__all__ = [
    "AstBlock",
    "AstEdge",
    "AstEdgeDef",
    "AstField",
    "AstKey",
    "AstLeafDef",
    "AstMessage",
    "AstNode",
    "AstNumber",
    "AstStatement",
    "AstString",
    "AstStruct",
    "AstSymbol",
    "AstTarget",
    "AstValue",
]
