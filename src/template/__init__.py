"""Vue template expression dialect."""

from template.vfor import (
    VUE_JS,
    TemplateVariable,
    VForAliases,
    VForExpression,
    parse_vfor,
)

__all__ = [
    "VUE_JS",
    "TemplateVariable",
    "VForAliases",
    "VForExpression",
    "parse_vfor",
]
