"""Implicit element records produced while indexing a file."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from pydantic import BaseModel, Field

if TYPE_CHECKING:
    from collections.abc import Iterator

    from tree_sitter import Node

    from indexing.keys import IndexKey

# Schema version constant
SCHEMA_VERSION = 1


@dataclass(frozen=True)
class ImplicitElement:
    """A synthesized symbol derived from a descriptor object literal."""

    name: str
    index_key: IndexKey | str
    declaring_node: Node


@dataclass
class IndexingPayload:
    """Append-only sequence of implicit elements for one file."""

    elements: list[ImplicitElement] = field(default_factory=list)

    def add_implicit_element(self, element: ImplicitElement) -> None:
        self.elements.append(element)

    def __iter__(self) -> Iterator[ImplicitElement]:
        return iter(self.elements)

    def __len__(self) -> int:
        return len(self.elements)


class OccurrenceRecord(BaseModel):
    """An index occurrence emitted for an implicit element."""

    schema_version: int = Field(default=SCHEMA_VERSION)
    path: str
    index: str
    name: str
    start_line: int
    start_col: int


class StubLiteralRecord(BaseModel):
    """A literal that must be kept in the file's stub."""

    schema_version: int = Field(default=SCHEMA_VERSION)
    path: str
    text: str
    start_line: int
    start_col: int


__all__ = [
    "SCHEMA_VERSION",
    "ImplicitElement",
    "IndexingPayload",
    "OccurrenceRecord",
    "StubLiteralRecord",
]
