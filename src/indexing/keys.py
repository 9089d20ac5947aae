"""Index keys attached to implicit elements and their registry."""

from __future__ import annotations

from enum import Enum

COMPONENTS_INDEX = "vue.components"
OPTIONS_INDEX = "vue.options"


class IndexKey(str, Enum):
    """Tag classifying which logical index an implicit element belongs to."""

    COMPONENTS = "vuec"
    OPTIONS = "vueo"


def _key_value(key: IndexKey | str) -> str:
    return key.value if isinstance(key, IndexKey) else key


class IndexRegistry:
    """Maps index keys to the index identifiers occurrences are emitted to.

    Built once at startup and passed explicitly to the indexer.
    """

    def __init__(self, entries: dict[str, str] | None = None) -> None:
        self._entries: dict[str, str] = dict(entries or {})

    @classmethod
    def default(cls) -> IndexRegistry:
        registry = cls()
        registry.register(IndexKey.COMPONENTS, COMPONENTS_INDEX)
        registry.register(IndexKey.OPTIONS, OPTIONS_INDEX)
        return registry

    def register(self, key: IndexKey | str, index_id: str) -> None:
        self._entries[_key_value(key)] = index_id

    def lookup(self, key: IndexKey | str) -> str | None:
        return self._entries.get(_key_value(key))

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.lookup(key) is not None

    def __len__(self) -> int:
        return len(self._entries)

    def items(self) -> list[tuple[str, str]]:
        return sorted(self._entries.items())


__all__ = ["COMPONENTS_INDEX", "OPTIONS_INDEX", "IndexKey", "IndexRegistry"]
