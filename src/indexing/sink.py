"""Occurrence sinks receiving `(index_id, name)` pairs."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol


class OccurrenceSink(Protocol):
    def occurrence(self, index_id: str, name: str) -> None: ...


@dataclass
class CollectingSink:
    """In-memory sink keeping occurrences in emission order."""

    occurrences: list[tuple[str, str]] = field(default_factory=list)

    def occurrence(self, index_id: str, name: str) -> None:
        self.occurrences.append((index_id, name))


__all__ = ["CollectingSink", "OccurrenceSink"]
