"""Records for resolved `v-for` alias types."""

from __future__ import annotations

from pydantic import BaseModel, Field

from indexing.models import SCHEMA_VERSION


class VForTypeRecord(BaseModel):
    """The element type resolved for the first alias of a `v-for` loop."""

    schema_version: int = Field(default=SCHEMA_VERSION)
    path: str
    expression: str
    variable: str
    element_type: str
    line: int
    col: int


__all__ = ["VForTypeRecord"]
