"""Generic value model the AST is reduced into."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType


@dataclass(frozen=True, slots=True)
class String:
    value: str


@dataclass(frozen=True, slots=True)
class Number:
    value: float


@dataclass(frozen=True, slots=True)
class Symbol:
    name: str


@dataclass(frozen=True, slots=True)
class Message:
    name: str
    args: tuple[Value, ...]


@dataclass(frozen=True, slots=True)
class Edge:
    source: Value
    dest: Value


@dataclass(frozen=True, slots=True)
class Pair:
    key: Value
    value: Value


@dataclass(frozen=True, slots=True)
class Vec:
    items: tuple[Value, ...]

    def __iter__(self) -> Iterator[Value]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __getitem__(self, index: int) -> Value:
        return self.items[index]


@dataclass(frozen=True, slots=True)
class Map:
    """Read-only name -> value mapping with unique keys in insertion order."""

    entries: Mapping[str, Value]

    def __post_init__(self) -> None:
        object.__setattr__(self, "entries", MappingProxyType(dict(self.entries)))

    def __getitem__(self, key: str) -> Value:
        return self.entries[key]

    def __contains__(self, key: object) -> bool:
        return key in self.entries

    def __iter__(self) -> Iterator[str]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def get(self, key: str, default: Value | None = None) -> Value | None:
        return self.entries.get(key, default)

    def items(self):
        return self.entries.items()


type Value = String | Number | Symbol | Message | Edge | Pair | Vec | Map


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
]
