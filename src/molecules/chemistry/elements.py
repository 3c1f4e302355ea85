"""Element mass tables and preset lookup.

An ``ElementTable`` maps element symbols to atomic masses. Presets are built
from RDKit's periodic table; custom tables can be created from any mapping.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterator, Mapping

from rdkit import Chem

from molecules.errors import UnknownElementError

MAX_ATOMIC_NUMBER = 118
MASS_KINDS = ("monoisotopic", "average")


@dataclass(frozen=True)
class ElementTable(Mapping[str, float]):
    """Read-only mapping from element symbol to atomic mass."""

    name: str
    masses: Mapping[str, float]

    def __hash__(self) -> int:
        return hash(self.name)

    def __post_init__(self) -> None:
        object.__setattr__(self, "masses", MappingProxyType(dict(self.masses)))

    def __getitem__(self, symbol: str) -> float:
        return self.masses[symbol]

    def __iter__(self) -> Iterator[str]:
        return iter(self.masses)

    def __len__(self) -> int:
        return len(self.masses)

    def mass(self, symbol: str) -> float:
        """Return the mass of ``symbol``, raising ``UnknownElementError`` if absent."""
        try:
            return self.masses[symbol]
        except KeyError as exc:
            raise UnknownElementError(symbol, self.name) from exc

    @classmethod
    def from_rdkit(cls, kind: str = "monoisotopic", name: str | None = None) -> "ElementTable":
        """Build a table from RDKit's periodic table.

        ``kind="monoisotopic"`` uses the mass of the most common isotope,
        ``kind="average"`` the standard atomic weight.
        """
        if kind not in MASS_KINDS:
            raise ValueError(f"kind must be one of {MASS_KINDS}, got {kind}")
        table = Chem.GetPeriodicTable()
        lookup = table.GetMostCommonIsotopeMass if kind == "monoisotopic" else table.GetAtomicWeight
        masses = {
            table.GetElementSymbol(z): float(lookup(z))
            for z in range(1, MAX_ATOMIC_NUMBER + 1)
        }
        return cls(name=name or kind, masses=masses)


MONOISOTOPIC = ElementTable.from_rdkit("monoisotopic")
AVERAGE = ElementTable.from_rdkit("average")

ELEMENT_TABLES: dict[str, ElementTable] = {
    MONOISOTOPIC.name: MONOISOTOPIC,
    AVERAGE.name: AVERAGE,
}

DEFAULT_ELEMENT_TABLE: ElementTable = MONOISOTOPIC


def get_element_table(name: str) -> ElementTable:
    """Resolve an element table preset by name."""
    try:
        return ELEMENT_TABLES[name]
    except KeyError as exc:
        available = ", ".join(sorted(ELEMENT_TABLES)) or "<empty>"
        raise KeyError(f"Unknown element table '{name}'. Available: {available}") from exc


__all__ = [
    "ElementTable",
    "MASS_KINDS",
    "MONOISOTOPIC",
    "AVERAGE",
    "ELEMENT_TABLES",
    "DEFAULT_ELEMENT_TABLE",
    "get_element_table",
]
