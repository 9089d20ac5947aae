"""Recognition of Vue descriptor object literals.

Three shapes are recognized, always from the first property of a top-level
object literal:

- ``Vue.component("name", {...})``: explicit component registration;
- ``export default {...}`` inside a ``.vue`` file: single-file component;
- ``new Vue({...})`` and ``Vue.extend({...})``: linked root-instance
  descriptor.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from indexing.keys import IndexKey
from parse.treesitter_js import (
    call_arguments,
    callee_of,
    find_property_value,
    is_accurate_reference_name,
    is_quoted_literal,
    object_properties,
    string_literal_value,
    unquoted_text,
)

if TYPE_CHECKING:
    from tree_sitter import Node

    from parse.source_file import SourceFile


@dataclass(frozen=True)
class DescriptorMatch:
    name: str
    index_key: IndexKey


def descriptor_object(prop: Node) -> Node | None:
    """Return the object literal `prop` opens, if it is eligible for matching.

    Only the first property of an object literal is eligible, and only when
    that object literal is not itself the value of another property.
    """
    obj = prop.parent
    if obj is None or obj.type != "object":
        return None

    properties = object_properties(obj)
    if not properties or properties[0] != prop:
        return None

    parent = obj.parent
    if parent is None or parent.type == "pair":
        return None
    return obj


def _enclosing_call(obj: Node) -> Node | None:
    arguments = obj.parent
    if arguments is None or arguments.type != "arguments":
        return None
    call = arguments.parent
    if call is None or call.type not in ("call_expression", "new_expression"):
        return None
    return call


def is_default_export(obj: Node) -> bool:
    parent = obj.parent
    if parent is None or parent.type != "export_statement":
        return False
    if not any(child.type == "default" for child in parent.children):
        return False
    return parent.child_by_field_name("value") == obj


def match_component_export(obj: Node, source_file: SourceFile) -> DescriptorMatch | None:
    if not source_file.is_sfc or not is_default_export(obj):
        return None

    name = string_literal_value(find_property_value(obj, "name"))
    if name is None:
        name = source_file.name_without_extension
    return DescriptorMatch(name=name, index_key=IndexKey.COMPONENTS)


def match_component_registration(obj: Node) -> DescriptorMatch | None:
    call = _enclosing_call(obj)
    if call is None or call.type != "call_expression":
        return None
    if not is_accurate_reference_name(callee_of(call), "Vue", "component"):
        return None

    args = call_arguments(call)
    if len(args) > 1 and args[1] == obj and is_quoted_literal(args[0]):
        return DescriptorMatch(
            name=unquoted_text(args[0]), index_key=IndexKey.COMPONENTS
        )
    return None


def is_linked_instance_descriptor(obj: Node) -> bool:
    call = _enclosing_call(obj)
    if call is None:
        return False

    args = call_arguments(call)
    if not args or args[0] != obj:
        return False

    callee = callee_of(call)
    if call.type == "new_expression":
        return is_accurate_reference_name(callee, "Vue")
    return is_accurate_reference_name(callee, "Vue", "extend")


def match_linked_instance(obj: Node) -> DescriptorMatch | None:
    if not is_linked_instance_descriptor(obj):
        return None

    binding = string_literal_value(find_property_value(obj, "el"))
    return DescriptorMatch(name=binding or "", index_key=IndexKey.OPTIONS)


def match_descriptor(prop: Node, source_file: SourceFile) -> DescriptorMatch | None:
    """Match a visited property against the descriptor shapes in priority order."""
    obj = descriptor_object(prop)
    if obj is None:
        return None

    if is_default_export(obj) and source_file.is_sfc:
        return match_component_export(obj, source_file)

    return match_component_registration(obj) or match_linked_instance(obj)


__all__ = [
    "DescriptorMatch",
    "descriptor_object",
    "is_default_export",
    "is_linked_instance_descriptor",
    "match_component_export",
    "match_component_registration",
    "match_descriptor",
    "match_linked_instance",
]
