"""Exception types raised by formula parsing and library construction."""

from __future__ import annotations

from typing import Any


class MoleculesError(Exception):
    """Base class for all errors raised by this package."""


class ParseError(MoleculesError, ValueError):
    """Malformed formula text."""

    def __init__(self, message: str, text: str, position: int | None = None):
        self.text = text
        self.position = position
        where = "" if position is None else f" at position {position}"
        super().__init__(f"{message}{where} in formula {text!r}")


class UnknownElementError(MoleculesError, KeyError):
    """Element symbol absent from an element table."""

    def __init__(self, symbol: str, table: str | None = None):
        self.symbol = symbol
        self.table = table
        self.message = f"Unknown element {symbol!r}" + (f" in element table '{table}'" if table else "")
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


class DuplicateKeyError(MoleculesError, ValueError):
    """Two records produced the same key for an index that must be unique."""

    def __init__(self, key: Any, first: Any, second: Any):
        self.key = key
        self.first = first
        self.second = second
        super().__init__(f"Duplicate key {key!r} for {first!r} and {second!r}")


class DuplicateRegistrationError(MoleculesError, ValueError):
    """A name was registered twice on the same library."""


class UnknownNameError(MoleculesError, KeyError):
    """Query for an index or collection that was never registered."""

    def __init__(self, kind: str, name: str, available: tuple[str, ...] = ()):
        self.kind = kind
        self.name = name
        listing = ", ".join(available) or "<empty>"
        self.message = f"Unknown {kind} '{name}'. Available: {listing}"
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


__all__ = [
    "MoleculesError",
    "ParseError",
    "UnknownElementError",
    "DuplicateKeyError",
    "DuplicateRegistrationError",
    "UnknownNameError",
]
