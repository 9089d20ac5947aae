"""Element types of iterated template expressions."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Callable

    from tree_sitter import Node

    from template.vfor import VForExpression

_LITERAL_KINDS = {
    "string": "string",
    "template_string": "string",
    "number": "number",
    "true": "boolean",
    "false": "boolean",
    "null": "null",
    "regex": "RegExp",
    "object": "object",
    "array": "array",
    "arrow_function": "function",
    "function_expression": "function",
}


class TypeEvaluator(Protocol):
    def add_type(self, type_text: str, source: object) -> None: ...


if TYPE_CHECKING:
    IterableElementTypeCalculator = Callable[[TypeEvaluator, Node, VForExpression], bool]


@dataclass
class TypeEvaluationContext:
    """Records the types written by calculators, in evaluation order."""

    types: list[tuple[str, object]] = field(default_factory=list)

    def add_type(self, type_text: str, source: object) -> None:
        self.types.append((type_text, source))

    @property
    def last_type(self) -> str | None:
        return self.types[-1][0] if self.types else None


def _array_element_type(array: Node) -> str | None:
    kinds: list[str] = []
    for element in array.named_children:
        if element.type == "comment":
            continue
        kind = _LITERAL_KINDS.get(element.type)
        if kind is None:
            return None
        if kind not in kinds:
            kinds.append(kind)
    if not kinds:
        return None
    return "|".join(kinds)


def element_type_of_iterable(
    evaluator: TypeEvaluator,
    collection: Node,
    loop: VForExpression,
) -> bool:
    """Infer the element type of a literal collection.

    Only literal collections are understood: arrays of literals, numeric
    ranges (`n in 10`) and strings. Returns False for anything else.
    """
    if collection.type == "array":
        element_type = _array_element_type(collection)
    elif collection.type == "number":
        element_type = "number"
    elif collection.type in ("string", "template_string"):
        element_type = "string"
    else:
        element_type = None

    if element_type is None:
        return False

    evaluator.add_type(element_type, loop)
    return True


__all__ = [
    "TypeEvaluationContext",
    "TypeEvaluator",
    "element_type_of_iterable",
]
