"""Tree-sitter based section extraction for Vue single-file components."""

from __future__ import annotations

from dataclasses import dataclass

from tree_sitter import Language, Node, Parser, Tree
from tree_sitter_html import language as get_html_language

_PARSER: Parser | None = None


@dataclass(frozen=True)
class ScriptBlock:
    """The `<script>` section of a `.vue` file."""

    source: bytes
    start_byte: int
    start_line: int
    lang: str | None = None


@dataclass(frozen=True)
class VForDirective:
    """A `v-for` attribute found in the `<template>` section."""

    tag_name: str
    value: str
    line: int
    col: int


def _get_parser() -> Parser:
    """Initialize and return the Tree-sitter parser with HTML language."""
    global _PARSER
    if _PARSER is None:
        lang = Language(get_html_language())
        _PARSER = Parser(lang)

    return _PARSER


def parse_sfc(source_bytes: bytes) -> Tree:
    return _get_parser().parse(source_bytes)


def _text(node: Node | None) -> str:
    if node is None or node.text is None:
        return ""
    return node.text.decode("utf8", errors="ignore")


def _start_tag(node: Node) -> Node | None:
    for child in node.children:
        if child.type in ("start_tag", "self_closing_tag"):
            return child
    return None


def _tag_name(node: Node) -> str:
    start_tag = _start_tag(node)
    if start_tag is None:
        return ""
    for child in start_tag.children:
        if child.type == "tag_name":
            return _text(child).lower()
    return ""


def _attribute_value(attribute: Node) -> str | None:
    for child in attribute.children:
        if child.type == "attribute_value":
            return _text(child)
        if child.type == "quoted_attribute_value":
            for inner in child.children:
                if inner.type == "attribute_value":
                    return _text(inner)
            return ""
    return None


def _attributes(node: Node) -> dict[str, str | None]:
    start_tag = _start_tag(node)
    if start_tag is None:
        return {}
    attributes: dict[str, str | None] = {}
    for child in start_tag.children:
        if child.type != "attribute":
            continue
        name_node = next(
            (inner for inner in child.children if inner.type == "attribute_name"),
            None,
        )
        if name_node is None:
            continue
        attributes.setdefault(_text(name_node), _attribute_value(child))
    return attributes


def find_module(source_bytes: bytes) -> ScriptBlock | None:
    """Return the first `<script>` block of a `.vue` file.

    Blocks without content are skipped. Returns None when the component
    has no script.
    """
    root = parse_sfc(source_bytes).root_node
    for child in root.children:
        if child.type != "script_element":
            continue
        raw_text = next(
            (inner for inner in child.children if inner.type == "raw_text"), None
        )
        if raw_text is None:
            continue
        attributes = _attributes(child)
        return ScriptBlock(
            source=source_bytes[raw_text.start_byte : raw_text.end_byte],
            start_byte=raw_text.start_byte,
            start_line=raw_text.start_point[0],
            lang=attributes.get("lang"),
        )
    return None


def _find_template(root: Node) -> Node | None:
    for child in root.children:
        if child.type == "element" and _tag_name(child) == "template":
            return child
    return None


def find_vfor_directives(source_bytes: bytes) -> list[VForDirective]:
    """Collect `v-for` directives of the `<template>` section in document order."""
    template = _find_template(parse_sfc(source_bytes).root_node)
    if template is None:
        return []

    directives: list[VForDirective] = []
    stack = [template]
    while stack:
        node = stack.pop()
        if node.type == "element":
            value = _attributes(node).get("v-for")
            if value:
                start_tag = _start_tag(node)
                assert start_tag is not None
                directives.append(
                    VForDirective(
                        tag_name=_tag_name(node),
                        value=value,
                        line=start_tag.start_point[0] + 1,
                        col=start_tag.start_point[1] + 1,
                    )
                )
        stack.extend(reversed(node.children))
    return directives


__all__ = [
    "ScriptBlock",
    "VForDirective",
    "find_module",
    "find_vfor_directives",
    "parse_sfc",
]
