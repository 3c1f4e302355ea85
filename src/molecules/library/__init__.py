"""Generic constant libraries: unique indices and derived collections."""

from .collection import DerivedMapping, DerivedSequence, derive_grouped_mapping, derive_mapping, derive_sequence
from .index import AttributeIndex, resolve_accessor
from .registry import Collection, Library

__all__ = [
    "AttributeIndex",
    "resolve_accessor",
    "DerivedSequence",
    "DerivedMapping",
    "derive_sequence",
    "derive_mapping",
    "derive_grouped_mapping",
    "Collection",
    "Library",
]
