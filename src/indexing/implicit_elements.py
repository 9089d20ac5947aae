"""Implicit element indexing for Vue descriptor object literals."""

from __future__ import annotations

from typing import TYPE_CHECKING

from indexing.models import ImplicitElement, IndexingPayload
from patterns.descriptors import match_descriptor

if TYPE_CHECKING:
    from tree_sitter import Node

    from indexing.keys import IndexRegistry
    from indexing.sink import OccurrenceSink
    from parse.source_file import SourceFile


def on_property_visited(
    prop: Node,
    source_file: SourceFile,
    payload: IndexingPayload | None = None,
) -> ImplicitElement | None:
    """Build the implicit element for a visited property, if any.

    When `payload` is given the element is appended to it.
    """
    match = match_descriptor(prop, source_file)
    if match is None:
        return None

    element = ImplicitElement(
        name=match.name,
        index_key=match.index_key,
        declaring_node=prop,
    )
    if payload is not None:
        payload.add_implicit_element(element)
    return element


def process_any_property(
    prop: Node,
    source_file: SourceFile,
    out_data: IndexingPayload | None = None,
) -> IndexingPayload | None:
    """Handler entry point: returns the payload, created on the first match."""
    out = out_data if out_data is not None else IndexingPayload()
    element = on_property_visited(prop, source_file, out)
    if element is None:
        return out_data
    return out


def index_implicit_element(
    element: ImplicitElement,
    sink: OccurrenceSink | None,
    registry: IndexRegistry,
) -> bool:
    """Emit one occurrence for `element` if its key is registered."""
    index_id = registry.lookup(element.index_key)
    if index_id is None:
        return False

    if sink is not None:
        sink.occurrence(index_id, element.name)
    return True


__all__ = ["index_implicit_element", "on_property_visited", "process_any_property"]
