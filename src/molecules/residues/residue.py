"""Amino acid residue records."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from molecules.chemistry import (
    DEFAULT_ELEMENT_TABLE,
    ElementTable,
    EmpiricalFormula,
    formula_mass,
    parse,
    parse_simple,
)

CLASSIFICATIONS = ("common", "standard", "uncommon")

# Formula of the residue backbone, added to every side chain.
BACKBONE = parse_simple("C(2)H(2)NO")

# Added to a residue to obtain its immonium ion.
DELTA_IMMONIUM = parse("-CO+H")


@dataclass(frozen=True)
class Residue:
    """An amino acid residue: side chain plus backbone, with derived masses.

    Masses are unrounded monoisotopic (or whatever table the side chain was
    parsed against), uncharged and without N- or C-terminus.
    """

    letter: Optional[str]
    abbr: str
    name: str
    side_chain: EmpiricalFormula
    classification: Optional[str] = None

    formula: EmpiricalFormula = field(init=False, repr=False)
    byte: Optional[int] = field(init=False, repr=False)
    side_chain_mass: float = field(init=False, repr=False)
    residue_mass: float = field(init=False, repr=False)
    immonium_ion_mass: float = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.letter is not None and (len(self.letter) != 1 or not self.letter.isascii()):
            raise ValueError(f"letter must be a single ASCII character or None, got {self.letter!r}")
        if self.classification is not None and self.classification not in CLASSIFICATIONS:
            raise ValueError(f"classification must be one of {CLASSIFICATIONS}, got {self.classification!r}")

        formula = self.side_chain + BACKBONE
        object.__setattr__(self, "formula", formula)
        object.__setattr__(self, "byte", None if self.letter is None else ord(self.letter))
        object.__setattr__(self, "side_chain_mass", self.side_chain.mass)
        object.__setattr__(self, "residue_mass", formula.mass)
        delta = formula_mass(DELTA_IMMONIUM, formula.elements)
        object.__setattr__(self, "immonium_ion_mass", formula.mass + delta)

    @classmethod
    def from_record(
        cls,
        letter: Optional[str],
        abbr: str,
        name: str,
        side_chain_formula: str,
        classification: Optional[str] = None,
        elements: ElementTable = DEFAULT_ELEMENT_TABLE,
    ) -> "Residue":
        """Create a residue from a side chain written in the simple grammar."""
        return cls(letter, abbr, name, parse_simple(side_chain_formula, elements), classification)

    @property
    def common(self) -> bool:
        return self.classification == "common"

    @property
    def standard(self) -> bool:
        """True for common and standard residues."""
        return self.classification in ("common", "standard")


__all__ = ["Residue", "CLASSIFICATIONS", "BACKBONE", "DELTA_IMMONIUM"]
