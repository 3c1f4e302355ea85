"""Derived collections: filter-map a record set into a sequence or mapping.

A transform returns ``None`` to drop a record. For sequences it otherwise
returns the value to keep; for mappings it returns a ``(value, key)`` pair.
Grouped mappings collect every value under a shared key instead of rejecting
the repeat.
Output order follows the order of the records.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Callable, Hashable, Iterable, Iterator, Mapping, Optional, Sequence, Tuple, TypeVar

from molecules.errors import DuplicateKeyError

R = TypeVar("R")
T = TypeVar("T")
K = TypeVar("K", bound=Hashable)


class DerivedSequence(Sequence[T]):
    """Immutable, order-preserving sequence produced by ``derive_sequence``."""

    def __init__(self, items: Iterable[T]):
        self._items = tuple(items)

    def __getitem__(self, index):
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, DerivedSequence):
            return self._items == other._items
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._items)!r})"


class DerivedMapping(Mapping[K, T]):
    """Immutable, insertion-ordered mapping produced by ``derive_mapping``."""

    def __init__(self, entries: Mapping[K, T]):
        self._entries = MappingProxyType(dict(entries))

    def __getitem__(self, key: K) -> T:
        return self._entries[key]

    def __iter__(self) -> Iterator[K]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({dict(self._entries)!r})"


def derive_sequence(records: Iterable[R], transform: Callable[[R], Optional[T]]) -> DerivedSequence[T]:
    """Keep ``transform(record)`` for every record where it is not ``None``."""
    return DerivedSequence(value for value in map(transform, records) if value is not None)


def derive_mapping(
    records: Iterable[R], transform: Callable[[R], Optional[Tuple[T, K]]]
) -> DerivedMapping[K, T]:
    """Map ``key -> value`` for every record where ``transform`` yields ``(value, key)``.

    A key produced twice raises ``DuplicateKeyError``.
    """
    entries: dict = {}
    owners: dict = {}
    for record in records:
        pair = transform(record)
        if pair is None:
            continue
        value, key = pair
        if key in entries:
            raise DuplicateKeyError(key, owners[key], record)
        entries[key] = value
        owners[key] = record
    return DerivedMapping(entries)


def derive_grouped_mapping(
    records: Iterable[R], transform: Callable[[R], Optional[Tuple[T, K]]]
) -> DerivedMapping[K, Tuple[T, ...]]:
    """Map ``key -> (value, ...)`` collecting every value that shares a key.

    Values under one key keep the order of the records.
    """
    groups: dict = {}
    for record in records:
        pair = transform(record)
        if pair is None:
            continue
        value, key = pair
        groups.setdefault(key, []).append(value)
    return DerivedMapping({key: tuple(values) for key, values in groups.items()})


__all__ = [
    "DerivedSequence",
    "DerivedMapping",
    "derive_sequence",
    "derive_mapping",
    "derive_grouped_mapping",
]
