"""AST data model for GMML source."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class AstSymbol:
    """Bare identifier reference. A leaf when it stands alone as a target."""

    name: str


@dataclass(frozen=True, slots=True)
class AstString:
    """Quoted string literal, contents taken verbatim."""

    text: str


@dataclass(frozen=True, slots=True)
class AstNumber:
    value: float


@dataclass(frozen=True, slots=True)
class AstEdge:
    """Directed relation `source -> dest` between two keys."""

    source: AstKey
    dest: AstKey


@dataclass(frozen=True, slots=True)
class AstLeafDef:
    """Assignment `target = stmt`."""

    target: AstKey
    stmt: AstValue


@dataclass(frozen=True, slots=True)
class AstEdgeDef:
    """Edge annotation `a -> b : stmt`."""

    target: AstEdge
    stmt: AstValue


@dataclass(frozen=True, slots=True)
class AstField:
    """One `key: value` entry of a struct."""

    key: AstKey
    value: AstValue


@dataclass(frozen=True, slots=True)
class AstStruct:
    entries: tuple[AstField, ...]


@dataclass(frozen=True, slots=True)
class AstMessage:
    """Call-like value `name(arg, ...)`."""

    name: str
    args: tuple[AstValue, ...]


@dataclass(frozen=True, slots=True)
class AstBlock:
    """Top-level `[name]` section preserving statement order."""

    name: str
    content: tuple[AstStatement, ...]


type AstKey = AstSymbol | AstString | AstNumber
type AstTarget = AstKey | AstEdge
type AstValue = AstStruct | AstString | AstNumber | AstSymbol | AstMessage
type AstStatement = AstTarget | AstLeafDef | AstEdgeDef
type AstNode = AstBlock | AstStatement | AstValue | AstField


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
