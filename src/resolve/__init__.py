"""Type resolution hooks for template variables."""

from resolve.iteration import TypeEvaluationContext, element_type_of_iterable
from resolve.loop_variables import add_type_from_resolve_result

__all__ = [
    "TypeEvaluationContext",
    "add_type_from_resolve_result",
    "element_type_of_iterable",
]
