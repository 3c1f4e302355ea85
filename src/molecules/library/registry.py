"""Registry of named indices and derived collections over a closed record set."""

from __future__ import annotations

import logging
import threading
from typing import Any, Callable, Dict, Generic, Iterable, Iterator, Optional, Tuple, TypeVar, Union

from molecules.errors import DuplicateRegistrationError, UnknownNameError

from .collection import DerivedMapping, DerivedSequence, derive_grouped_mapping, derive_mapping, derive_sequence
from .index import Accessor, AttributeIndex

logger = logging.getLogger(__name__)

R = TypeVar("R")

Collection = Union[DerivedSequence, DerivedMapping]


class Library(Generic[R]):
    """Fixed set of records with named lookups built once at registration.

    The record set is closed at construction. ``register_index`` and
    ``register_collection`` build immediately and cache the result; names are
    write-once within their kind. Registration is serialized, reads are not.
    """

    def __init__(self, records: Iterable[R]):
        self._records: Tuple[R, ...] = tuple(records)
        self._indices: Dict[str, AttributeIndex] = {}
        self._collections: Dict[str, Collection] = {}
        self._lock = threading.Lock()

    @property
    def records(self) -> Tuple[R, ...]:
        return self._records

    def __iter__(self) -> Iterator[R]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)

    @property
    def index_names(self) -> Tuple[str, ...]:
        return tuple(self._indices)

    @property
    def collection_names(self) -> Tuple[str, ...]:
        return tuple(self._collections)

    def register_index(self, name: str, accessor: Optional[Accessor] = None) -> AttributeIndex:
        """Build and store a unique index; ``accessor`` defaults to the attribute ``name``."""
        with self._lock:
            if name in self._indices:
                raise DuplicateRegistrationError(f"Index '{name}' is already registered")
            index = AttributeIndex.build(self._records, name if accessor is None else accessor)
            self._indices[name] = index
        logger.debug("Built index %r with %d keys over %d records", name, len(index), len(self._records))
        return index

    def register_collection(
        self, name: str, transform: Callable[[R], Any], keyed: bool = False, grouped: bool = False
    ) -> Collection:
        """Build and store a derived collection.

        With ``keyed=True`` the transform returns ``(value, key)`` pairs and the
        result is a ``DerivedMapping`` with unique keys; otherwise it is a
        ``DerivedSequence``. ``grouped=True`` also takes ``(value, key)`` pairs
        but maps each key to the tuple of all its values.
        """
        if grouped:
            kind, build = "grouped", derive_grouped_mapping
        elif keyed:
            kind, build = "keyed", derive_mapping
        else:
            kind, build = "ordered", derive_sequence
        with self._lock:
            if name in self._collections:
                raise DuplicateRegistrationError(f"Collection '{name}' is already registered")
            collection = build(self._records, transform)
            self._collections[name] = collection
        logger.debug("Built %s collection %r with %d entries", kind, name, len(collection))
        return collection

    def index(self, name: str) -> AttributeIndex:
        try:
            return self._indices[name]
        except KeyError as exc:
            raise UnknownNameError("index", name, self.index_names) from exc

    def collection(self, name: str) -> Collection:
        try:
            return self._collections[name]
        except KeyError as exc:
            raise UnknownNameError("collection", name, self.collection_names) from exc

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({len(self._records)} records, "
            f"indices={list(self._indices)}, collections={list(self._collections)})"
        )


__all__ = ["Library", "Collection"]
