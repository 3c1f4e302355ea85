"""Empirical formulas: parsing, algebra and mass evaluation.

Two grammars are understood. The simple grammar is a run of element symbols,
each optionally followed by a parenthesised positive count::

    C(2)H(2)NO  ->  {C: 2, H: 2, N: 1, O: 1}

The signed grammar joins simple fragments with ``+`` and ``-`` (a leading
``+`` is optional); each fragment is added to or subtracted from the total::

    -CO+H  ->  {C: -1, H: 1, O: -1}

Counts that cancel to zero are dropped, so a formula never holds a zero entry.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import cached_property
from typing import Dict, Iterator, Mapping, Tuple

from molecules.errors import ParseError, UnknownElementError

from .elements import DEFAULT_ELEMENT_TABLE, ElementTable

_SIGNS = {"+": 1, "-": -1}


@dataclass(frozen=True)
class EmpiricalFormula:
    """Immutable element -> count multiset with a derived mass.

    ``terms`` holds ``(symbol, count)`` pairs sorted by symbol with no zero
    counts. Equality and hashing only consider ``terms``.
    """

    terms: Tuple[Tuple[str, int], ...] = ()
    elements: ElementTable = field(default=DEFAULT_ELEMENT_TABLE, compare=False, repr=False)

    def __post_init__(self) -> None:
        symbols = [symbol for symbol, _ in self.terms]
        if symbols != sorted(set(symbols)):
            raise ValueError(f"terms must be sorted with unique symbols, got {self.terms}")
        if any(count == 0 for _, count in self.terms):
            raise ValueError(f"terms must not contain zero counts, got {self.terms}")

    @classmethod
    def from_counts(
        cls, counts: Mapping[str, int], elements: ElementTable = DEFAULT_ELEMENT_TABLE
    ) -> "EmpiricalFormula":
        """Build a formula from a mapping, pruning zero counts."""
        return cls(
            terms=tuple(sorted((symbol, int(count)) for symbol, count in counts.items() if count)),
            elements=elements,
        )

    @property
    def counts(self) -> Dict[str, int]:
        return dict(self.terms)

    @cached_property
    def mass(self) -> float:
        """Sum of count * atomic mass over all elements."""
        return float(sum(count * self.elements.mass(symbol) for symbol, count in self.terms))

    def __getitem__(self, symbol: str) -> int:
        return self.counts.get(symbol, 0)

    def __contains__(self, symbol: object) -> bool:
        return any(symbol == s for s, _ in self.terms)

    def __iter__(self) -> Iterator[str]:
        return (symbol for symbol, _ in self.terms)

    def __len__(self) -> int:
        return len(self.terms)

    def __add__(self, other: "EmpiricalFormula") -> "EmpiricalFormula":
        if not isinstance(other, EmpiricalFormula):
            return NotImplemented
        return add(self, other)

    def __sub__(self, other: "EmpiricalFormula") -> "EmpiricalFormula":
        if not isinstance(other, EmpiricalFormula):
            return NotImplemented
        return subtract(self, other)

    def __neg__(self) -> "EmpiricalFormula":
        return EmpiricalFormula(
            terms=tuple((symbol, -count) for symbol, count in self.terms),
            elements=self.elements,
        )


def _combine(a: EmpiricalFormula, b: EmpiricalFormula, sign: int) -> EmpiricalFormula:
    counts = a.counts
    for symbol, count in b.terms:
        if symbol not in a.elements:
            raise UnknownElementError(symbol, a.elements.name)
        counts[symbol] = counts.get(symbol, 0) + sign * count
    return EmpiricalFormula.from_counts(counts, elements=a.elements)


def add(a: EmpiricalFormula, b: EmpiricalFormula) -> EmpiricalFormula:
    """Elementwise sum of two formulas.

    The result uses ``a``'s element table. Operands built against different
    tables may be combined, but every element of ``b`` must be in ``a``'s
    table, otherwise ``UnknownElementError`` is raised here.
    """
    return _combine(a, b, 1)


def subtract(a: EmpiricalFormula, b: EmpiricalFormula) -> EmpiricalFormula:
    """Elementwise difference ``a - b``; table handling as in ``add``."""
    return _combine(a, b, -1)


def formula_mass(formula: EmpiricalFormula, elements: ElementTable | None = None) -> float:
    """Mass of ``formula``, optionally against a different element table."""
    if elements is None:
        return formula.mass
    return float(sum(count * elements.mass(symbol) for symbol, count in formula.terms))


def _read_symbol(text: str, pos: int, elements: ElementTable) -> Tuple[str, int]:
    end = pos + 1
    if end < len(text) and text[end].islower():
        end += 1
    symbol = text[pos:end]
    if symbol not in elements:
        raise ParseError(f"unknown element {symbol!r}", text, pos)
    return symbol, end


def _read_count(text: str, pos: int, end: int) -> Tuple[int, int]:
    close = text.find(")", pos + 1, end)
    nested = text.find("(", pos + 1, end)
    if close == -1 or (nested != -1 and nested < close):
        raise ParseError("unbalanced parenthesis", text, pos)
    digits = text[pos + 1 : close]
    if not digits.isascii() or not digits.isdigit() or int(digits) <= 0:
        raise ParseError(f"count must be a positive integer, got {digits!r}", text, pos + 1)
    return int(digits), close + 1


def _scan_fragment(
    text: str, pos: int, end: int, elements: ElementTable, counts: Dict[str, int], sign: int
) -> None:
    if pos == end:
        raise ParseError("expected an element symbol", text, pos)
    while pos < end:
        char = text[pos]
        if char == ")":
            raise ParseError("unbalanced parenthesis", text, pos)
        if char == "(":
            raise ParseError("count without an element symbol", text, pos)
        if not char.isascii() or not char.isupper():
            raise ParseError(f"unexpected character {char!r}", text, pos)
        symbol, pos = _read_symbol(text, pos, elements)
        count = 1
        if pos < end and text[pos] == "(":
            count, pos = _read_count(text, pos, end)
        counts[symbol] = counts.get(symbol, 0) + sign * count


def parse_simple(text: str, elements: ElementTable = DEFAULT_ELEMENT_TABLE) -> EmpiricalFormula:
    """Parse the simple grammar, e.g. ``"C(2)H(2)NO"``.

    Raises ``ParseError`` for unknown elements, non-positive or non-integer
    counts, unbalanced parentheses, signs, or empty text.
    """
    stripped = text.strip()
    counts: Dict[str, int] = {}
    _scan_fragment(stripped, 0, len(stripped), elements, counts, 1)
    return EmpiricalFormula.from_counts(counts, elements=elements)


def parse(text: str, elements: ElementTable = DEFAULT_ELEMENT_TABLE) -> EmpiricalFormula:
    """Parse the signed grammar, e.g. ``"-CO+H"``.

    Plain simple-grammar text is accepted as a single positive term.
    """
    stripped = text.strip()
    counts: Dict[str, int] = {}
    pos = 0
    while True:
        sign = 1
        if pos < len(stripped) and stripped[pos] in _SIGNS:
            sign = _SIGNS[stripped[pos]]
            pos += 1
        end = pos
        while end < len(stripped) and stripped[end] not in _SIGNS:
            end += 1
        _scan_fragment(stripped, pos, end, elements, counts, sign)
        if end == len(stripped):
            break
        pos = end
    return EmpiricalFormula.from_counts(counts, elements=elements)


__all__ = [
    "EmpiricalFormula",
    "add",
    "subtract",
    "formula_mass",
    "parse",
    "parse_simple",
]
