"""Residue library: lookups by letter, abbreviation and name plus derived views."""

from __future__ import annotations

from typing import Iterable, Optional

from molecules.library import AttributeIndex, DerivedMapping, DerivedSequence, Library

from .catalog import RESIDUES
from .residue import Residue


def _common(residue: Residue) -> Optional[Residue]:
    return residue if residue.common else None


def _residue_by_byte(residue: Residue):
    if not residue.common or residue.byte is None:
        return None
    return residue, residue.byte


def _mass_by_byte(residue: Residue):
    if not residue.common or residue.byte is None:
        return None
    return residue.residue_mass, residue.byte


def _byte_by_mass(residue: Residue):
    if not residue.common or residue.byte is None:
        return None
    return residue.byte, residue.residue_mass


class ResidueLibrary(Library[Residue]):
    """Library of residues with its standard indices and collections.

    Indices: ``letter``, ``abbr``, ``name``. Collections: ``common`` (the 20
    common residues in catalog order), ``residue_index`` (byte of the letter ->
    residue), ``residue_mass_index`` (byte of the letter -> residue mass) and
    ``residue_byte_by_mass`` (residue mass -> bytes of every letter with that
    mass, in catalog order; isobaric residues such as I and L share a key).
    """

    def __init__(self, residues: Iterable[Residue] = RESIDUES):
        super().__init__(residues)
        self.register_index("letter")
        self.register_index("abbr")
        self.register_index("name")
        self.register_collection("common", _common)
        self.register_collection("residue_index", _residue_by_byte, keyed=True)
        self.register_collection("residue_mass_index", _mass_by_byte, keyed=True)
        self.register_collection("residue_byte_by_mass", _byte_by_mass, grouped=True)

    @property
    def by_letter(self) -> AttributeIndex:
        return self.index("letter")

    @property
    def by_abbr(self) -> AttributeIndex:
        return self.index("abbr")

    @property
    def by_name(self) -> AttributeIndex:
        return self.index("name")

    @property
    def common(self) -> DerivedSequence:
        return self.collection("common")

    @property
    def residue_index(self) -> DerivedMapping:
        return self.collection("residue_index")

    @property
    def residue_mass_index(self) -> DerivedMapping:
        return self.collection("residue_mass_index")

    @property
    def residue_byte_by_mass(self) -> DerivedMapping:
        return self.collection("residue_byte_by_mass")

    def get(self, key: str) -> Optional[Residue]:
        """Look up a residue by letter, then abbreviation, then full name."""
        for name in ("letter", "abbr", "name"):
            residue = self.index(name).lookup(key)
            if residue is not None:
                return residue
        return None


RESIDUE_LIBRARY = ResidueLibrary()

__all__ = ["ResidueLibrary", "RESIDUE_LIBRARY"]
