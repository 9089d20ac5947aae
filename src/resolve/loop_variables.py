"""Type forwarding for `v-for` aliases."""

from __future__ import annotations

from typing import TYPE_CHECKING

from resolve.iteration import element_type_of_iterable
from template.vfor import VUE_JS, TemplateVariable, VForExpression

if TYPE_CHECKING:
    from resolve.iteration import IterableElementTypeCalculator, TypeEvaluator


def enclosing_vfor(variable: TemplateVariable) -> VForExpression | None:
    """Return the loop declaring `variable`, looking through an alias list."""
    parent = variable.parent
    if isinstance(parent, VForExpression):
        return parent
    grandparent = getattr(parent, "parent", None)
    if isinstance(grandparent, VForExpression):
        return grandparent
    return None


def add_type_from_resolve_result(
    evaluator: TypeEvaluator | None,
    result: object | None,
    framework_active: bool,
    calculator: IterableElementTypeCalculator = element_type_of_iterable,
) -> bool:
    """Resolve the element type of the first alias of a `v-for` loop.

    Returns False for any other variable so that a fallback strategy may
    handle it.
    """
    if result is None or evaluator is None or not framework_active:
        return False
    if not isinstance(result, TemplateVariable) or result.language != VUE_JS:
        return False

    vfor = enclosing_vfor(result)
    if vfor is None:
        return False

    reference = vfor.get_reference_expression()
    variables = vfor.get_variables()
    if reference is None or not variables or variables[0] is not result:
        return False
    return calculator(evaluator, reference, vfor)


__all__ = [
    "add_type_from_resolve_result",
    "enclosing_vfor",
]
