"""Tree-sitter helpers for JavaScript syntax trees."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from tree_sitter import Language, Node, Parser, Tree
from tree_sitter_javascript import language as get_javascript_language

from utils import unquote_string

if TYPE_CHECKING:
    from collections.abc import Iterator

_PARSER: Parser | None = None

LITERAL_TYPES = frozenset({"string", "number", "true", "false", "null", "regex"})

PROPERTY_TYPES = frozenset(
    {
        "pair",
        "method_definition",
        "shorthand_property_identifier",
    }
)

_ESCAPES = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "b": "\b",
    "f": "\f",
    "v": "\v",
}

_CODE_POINT_ESCAPE = re.compile(
    r"x([0-9a-fA-F]{2})|u([0-9a-fA-F]{4})|u\{([0-9a-fA-F]+)\}"
)
_OCTAL_ESCAPE = re.compile(r"[0-7]{1,3}")


def _get_parser() -> Parser:
    """Initialize and return the Tree-sitter parser with JavaScript language."""
    global _PARSER
    if _PARSER is None:
        lang = Language(get_javascript_language())
        _PARSER = Parser(lang)

    return _PARSER


def parse_javascript(source_bytes: bytes) -> Tree:
    return _get_parser().parse(source_bytes)


def node_text(node: Node | None) -> str:
    if node is None or node.text is None:
        return ""
    return node.text.decode("utf8", errors="ignore")


def is_literal(node: Node | None) -> bool:
    return node is not None and node.type in LITERAL_TYPES


def is_quoted_literal(node: Node | None) -> bool:
    return node is not None and node.type == "string"


def _decode_escape(escaped: str) -> str:
    """Decode the body of an escape sequence (the text after the backslash)."""
    if escaped[:1] in ("\n", "\r", "\u2028", "\u2029"):
        # line continuation
        return ""

    match = _CODE_POINT_ESCAPE.fullmatch(escaped)
    if match is not None:
        digits = next(group for group in match.groups() if group is not None)
        code_point = int(digits, 16)
        if code_point <= 0x10FFFF:
            return chr(code_point)
        return escaped

    if _OCTAL_ESCAPE.fullmatch(escaped):
        return chr(int(escaped, 8))
    return _ESCAPES.get(escaped, escaped)


def _join_surrogates(value: str) -> str:
    # "\uD83D\uDE00" decodes to a surrogate pair that must become one character
    try:
        return value.encode("utf-16-le", "surrogatepass").decode("utf-16-le")
    except UnicodeDecodeError:
        return value


def string_literal_value(node: Node | None) -> str | None:
    """Return the decoded value of a string literal, or None for other nodes.

    Supports single-character, ``\\xHH``, ``\\uHHHH``, ``\\u{H...}`` and legacy
    octal escapes, and drops line continuations.
    """
    if not is_quoted_literal(node):
        return None
    assert node is not None

    parts: list[str] = []
    for child in node.children:
        if child.type == "string_fragment":
            parts.append(node_text(child))
        elif child.type == "escape_sequence":
            parts.append(_decode_escape(node_text(child)[1:]))
    return _join_surrogates("".join(parts))


def unquoted_text(node: Node) -> str:
    return unquote_string(node_text(node))


def object_properties(obj: Node) -> list[Node]:
    """Return the properties of an object literal in source order."""
    return [child for child in obj.named_children if child.type in PROPERTY_TYPES]


def find_property(obj: Node, name: str) -> Node | None:
    """Find the first `pair` of an object literal whose key is `name`."""
    for prop in object_properties(obj):
        if prop.type != "pair":
            continue
        key = prop.child_by_field_name("key")
        if key is None:
            continue
        if key.type == "property_identifier" and node_text(key) == name:
            return prop
        if key.type == "string" and string_literal_value(key) == name:
            return prop
    return None


def find_property_value(obj: Node, name: str) -> Node | None:
    prop = find_property(obj, name)
    if prop is None:
        return None
    return prop.child_by_field_name("value")


def reference_chain(node: Node | None) -> list[str] | None:
    """Return identifiers of a plain reference expression like `Vue.component`.

    Returns None when the expression is not a chain of identifiers, for
    example a call result, a computed member access or optional chaining.
    """
    if node is None:
        return None

    if node.type == "identifier":
        return [node_text(node)]

    if node.type == "member_expression":
        if any(child.type == "optional_chain" for child in node.children):
            return None
        prop = node.child_by_field_name("property")
        if prop is None or prop.type != "property_identifier":
            return None
        qualifier = reference_chain(node.child_by_field_name("object"))
        if qualifier is None:
            return None
        return [*qualifier, node_text(prop)]

    return None


def is_accurate_reference_name(node: Node | None, *names: str) -> bool:
    """Check that `node` references exactly the qualified name `names`."""
    chain = reference_chain(node)
    return chain is not None and chain == list(names)


def callee_of(call: Node) -> Node | None:
    if call.type == "call_expression":
        return call.child_by_field_name("function")
    if call.type == "new_expression":
        return call.child_by_field_name("constructor")
    return None


def call_arguments(call: Node) -> list[Node]:
    arguments = call.child_by_field_name("arguments")
    if arguments is None or arguments.type != "arguments":
        return []
    return [child for child in arguments.named_children if child.type != "comment"]


def iter_nodes(node: Node, node_type: str) -> Iterator[Node]:
    """Yield every descendant of `node` (inclusive) of the given type, in order."""
    stack = [node]
    while stack:
        current = stack.pop()
        if current.type == node_type:
            yield current
        stack.extend(reversed(current.children))


def iter_literals(node: Node) -> Iterator[Node]:
    stack = [node]
    while stack:
        current = stack.pop()
        if current.type in LITERAL_TYPES:
            yield current
            continue
        stack.extend(reversed(current.children))


__all__ = [
    "LITERAL_TYPES",
    "PROPERTY_TYPES",
    "call_arguments",
    "callee_of",
    "find_property",
    "find_property_value",
    "is_accurate_reference_name",
    "is_literal",
    "is_quoted_literal",
    "iter_literals",
    "iter_nodes",
    "node_text",
    "object_properties",
    "parse_javascript",
    "reference_chain",
    "string_literal_value",
    "unquoted_text",
]
