"""The `v-for` template expression dialect.

`v-for="item in items"` binds its alias directly under the loop, while the
parenthesized form `v-for="(item, index) in items"` nests the aliases in a
`VForAliases` list. The first alias always denotes the iterated element.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from parse.treesitter_js import parse_javascript

if TYPE_CHECKING:
    from tree_sitter import Node, Tree

VUE_JS = "vue-js"

_FOR_ALIAS_RE = re.compile(r"^([\s\S]*?)\s+(?:in|of)\s+([\s\S]*)$")
_BRACKETS = {"(": ")", "[": "]", "{": "}"}


@dataclass(eq=False)
class TemplateVariable:
    """A variable declared by a template expression."""

    name: str
    parent: VForExpression | VForAliases
    language: str = VUE_JS


@dataclass(eq=False)
class VForAliases:
    """Parenthesized alias list of a `v-for` expression."""

    parent: VForExpression
    variables: list[TemplateVariable] = field(default_factory=list)


@dataclass(eq=False)
class VForExpression:
    """A parsed `v-for` directive value."""

    text: str
    collection_text: str
    collection_tree: Tree | None = None
    aliases: VForAliases | None = None
    variables: list[TemplateVariable] = field(default_factory=list)

    def get_reference_expression(self) -> Node | None:
        """Return the iterated collection expression."""
        if self.collection_tree is None:
            return None
        statement = self.collection_tree.root_node.named_child(0)
        if statement is None or statement.type != "expression_statement":
            return None
        wrapper = statement.named_child(0)
        if wrapper is None or wrapper.type != "parenthesized_expression":
            return None
        for child in wrapper.named_children:
            if child.type != "comment":
                return child
        return None

    def get_variables(self) -> list[TemplateVariable]:
        return list(self.variables)


def split_aliases(text: str) -> list[str]:
    """Split an alias list on commas outside of brackets.

    Examples:
        >>> split_aliases("item, index")
        ['item', 'index']
        >>> split_aliases("{ id, label }, i")
        ['{ id, label }', 'i']
    """
    parts: list[str] = []
    closers: list[str] = []
    current: list[str] = []
    for char in text:
        if char in _BRACKETS:
            closers.append(_BRACKETS[char])
        elif closers and char == closers[-1]:
            closers.pop()
        elif char == "," and not closers:
            parts.append("".join(current).strip())
            current = []
            continue
        current.append(char)
    parts.append("".join(current).strip())
    return [part for part in parts if part]


def parse_vfor(text: str) -> VForExpression | None:
    """Parse a `v-for` value; returns None when it has no `in`/`of` clause."""
    match = _FOR_ALIAS_RE.match(text.strip())
    if match is None:
        return None

    alias_text = match.group(1).strip()
    collection_text = match.group(2).strip()

    collection_tree = None
    if collection_text:
        collection_tree = parse_javascript(f"({collection_text});".encode())

    vfor = VForExpression(
        text=text,
        collection_text=collection_text,
        collection_tree=collection_tree,
    )

    if alias_text.startswith("(") and alias_text.endswith(")"):
        aliases = VForAliases(parent=vfor)
        aliases.variables = [
            TemplateVariable(name=name, parent=aliases)
            for name in split_aliases(alias_text[1:-1])
        ]
        vfor.aliases = aliases
        vfor.variables = aliases.variables
    elif alias_text:
        vfor.variables = [TemplateVariable(name=alias_text, parent=vfor)]

    return vfor


__all__ = [
    "VUE_JS",
    "TemplateVariable",
    "VForAliases",
    "VForExpression",
    "parse_vfor",
    "split_aliases",
]
