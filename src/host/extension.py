"""Framework handler extension point.

A framework contributes a `FrameworkIndexingHandler`: a named bundle of
strategy functions the host calls while indexing. Handlers are registered
once at startup.
"""

from __future__ import annotations

from functools import partial
from typing import TYPE_CHECKING, NamedTuple

from indexing.implicit_elements import index_implicit_element, process_any_property
from indexing.keys import IndexRegistry
from resolve.loop_variables import add_type_from_resolve_result
from stubs.significance import should_create_stub_for_literal

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

    from tree_sitter import Node

    from indexing.models import ImplicitElement, IndexingPayload
    from indexing.sink import OccurrenceSink
    from parse.source_file import SourceFile
    from resolve.iteration import TypeEvaluator


class FrameworkIndexingHandler(NamedTuple):
    name: str
    process_any_property: Callable[
        [Node, SourceFile, IndexingPayload | None], IndexingPayload | None
    ]
    should_create_stub_for_literal: Callable[[Node | None, SourceFile], bool]
    index_implicit_element: Callable[[ImplicitElement, OccurrenceSink | None], bool]
    add_type_from_resolve_result: Callable[
        [TypeEvaluator | None, object | None, bool], bool
    ]


class ExtensionPoint:
    """Ordered set of framework handlers, unique by name."""

    def __init__(self) -> None:
        self._handlers: list[FrameworkIndexingHandler] = []

    def register(self, handler: FrameworkIndexingHandler) -> None:
        if any(existing.name == handler.name for existing in self._handlers):
            msg = f"Framework handler '{handler.name}' is already registered"
            raise ValueError(msg)
        self._handlers.append(handler)

    def __iter__(self) -> Iterator[FrameworkIndexingHandler]:
        return iter(tuple(self._handlers))

    def __len__(self) -> int:
        return len(self._handlers)


def create_vue_handler(registry: IndexRegistry | None = None) -> FrameworkIndexingHandler:
    """Build the Vue handler bound to an index registry."""
    resolved_registry = registry if registry is not None else IndexRegistry.default()
    return FrameworkIndexingHandler(
        name="vue",
        process_any_property=process_any_property,
        should_create_stub_for_literal=should_create_stub_for_literal,
        index_implicit_element=partial(
            index_implicit_element, registry=resolved_registry
        ),
        add_type_from_resolve_result=add_type_from_resolve_result,
    )


def default_extension_point(registry: IndexRegistry | None = None) -> ExtensionPoint:
    extension_point = ExtensionPoint()
    extension_point.register(create_vue_handler(registry))
    return extension_point


__all__ = [
    "ExtensionPoint",
    "FrameworkIndexingHandler",
    "create_vue_handler",
    "default_extension_point",
]
