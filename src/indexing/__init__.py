"""Implicit element indexing for Vue descriptors."""

from indexing.keys import COMPONENTS_INDEX, OPTIONS_INDEX, IndexKey, IndexRegistry
from indexing.models import ImplicitElement, IndexingPayload, OccurrenceRecord

__all__ = [
    "COMPONENTS_INDEX",
    "OPTIONS_INDEX",
    "ImplicitElement",
    "IndexKey",
    "IndexRegistry",
    "IndexingPayload",
    "OccurrenceRecord",
]
