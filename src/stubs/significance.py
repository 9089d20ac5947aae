"""Stub significance policy for literal expressions.

Array elements and `required:` values are only worth keeping in a stub when
they can belong to a Vue descriptor: anywhere in a `.vue` file, elsewhere
only inside a call whose callee references `Vue`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from parse.treesitter_js import callee_of, is_literal, node_text, reference_chain

if TYPE_CHECKING:
    from tree_sitter import Node

    from parse.source_file import SourceFile

_CALL_TYPES = frozenset({"call_expression", "new_expression"})
_STOP_TYPES = frozenset({"expression_statement"})


def _is_required_value(literal: Node, parent: Node) -> bool:
    if parent.type != "pair" or parent.child_by_field_name("value") != literal:
        return False
    key = parent.child_by_field_name("key")
    return key is not None and key.type == "property_identifier" and (
        node_text(key) == "required"
    )


def _find_enclosing_call(node: Node) -> Node | None:
    parent = node.parent
    while parent is not None:
        if parent.type in _CALL_TYPES:
            return parent
        if parent.type in _STOP_TYPES:
            return None
        parent = parent.parent
    return None


def inside_vue_descriptor(literal: Node) -> bool:
    call = _find_enclosing_call(literal)
    if call is None:
        return False
    chain = reference_chain(callee_of(call))
    return chain is not None and "Vue" in chain


def has_significant_value(literal: Node, source_file: SourceFile) -> bool:
    parent = literal.parent
    if parent is None:
        return False

    if parent.type != "array" and not _is_required_value(literal, parent):
        return False

    return source_file.is_sfc or inside_vue_descriptor(literal)


def should_create_stub_for_literal(node: Node | None, source_file: SourceFile) -> bool:
    if not is_literal(node):
        return False
    assert node is not None
    return has_significant_value(node, source_file)


__all__ = [
    "has_significant_value",
    "inside_vue_descriptor",
    "should_create_stub_for_literal",
]
