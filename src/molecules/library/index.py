"""Unique attribute indices over a closed set of records."""

from __future__ import annotations

from operator import attrgetter
from types import MappingProxyType
from typing import Callable, Generic, Hashable, Iterable, Iterator, Mapping, Optional, TypeVar, Union

from molecules.errors import DuplicateKeyError

K = TypeVar("K", bound=Hashable)
R = TypeVar("R")

Accessor = Union[str, Callable[[R], Optional[K]]]


def resolve_accessor(accessor: Accessor) -> Callable[[R], Optional[K]]:
    """Turn an attribute name into a getter; callables pass through."""
    if isinstance(accessor, str):
        return attrgetter(accessor)
    if not callable(accessor):
        raise TypeError(f"accessor must be an attribute name or callable, got {accessor!r}")
    return accessor


class AttributeIndex(Mapping[K, R], Generic[K, R]):
    """Read-only mapping from a unique key to the record that carries it.

    Records whose key is ``None`` are left out of the index.
    """

    def __init__(self, entries: Mapping[K, R]):
        self._entries = MappingProxyType(dict(entries))

    @classmethod
    def build(cls, records: Iterable[R], accessor: Accessor) -> "AttributeIndex[K, R]":
        """Index ``records`` by ``accessor``, rejecting duplicate keys."""
        getter = resolve_accessor(accessor)
        entries: dict = {}
        for record in records:
            key = getter(record)
            if key is None:
                continue
            if key in entries:
                raise DuplicateKeyError(key, entries[key], record)
            entries[key] = record
        return cls(entries)

    def lookup(self, key: K) -> Optional[R]:
        """Record for ``key``, or ``None`` when absent or unhashable."""
        try:
            return self._entries.get(key)
        except TypeError:
            return None

    def __getitem__(self, key: K) -> R:
        return self._entries[key]

    def __iter__(self) -> Iterator[K]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({len(self)} keys)"


__all__ = ["Accessor", "AttributeIndex", "resolve_accessor"]
