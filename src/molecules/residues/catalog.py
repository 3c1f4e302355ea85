"""Catalog of amino acid residues: the 22 lettered residues plus uncommon ones."""

from __future__ import annotations

from typing import Optional, Tuple

from molecules.chemistry import DEFAULT_ELEMENT_TABLE, ElementTable

from .residue import Residue

# (letter, abbreviation, name, side chain formula, classification)
RESIDUE_DATA: Tuple[Tuple[Optional[str], str, str, str, str], ...] = (
    ("A", "Ala", "Alanine", "CH(3)", "common"),
    ("C", "Cys", "Cysteine", "CH(3)S", "common"),
    ("D", "Asp", "Aspartic Acid", "C(2)H(3)O(2)", "common"),
    ("E", "Glu", "Glutamic Acid", "C(3)H(5)O(2)", "common"),
    ("F", "Phe", "Phenylalanine", "C(7)H(7)", "common"),
    ("G", "Gly", "Glycine", "H", "common"),
    ("H", "His", "Histidine", "C(4)H(5)N(2)", "common"),
    ("I", "Ile", "Isoleucine", "C(4)H(9)", "common"),
    ("K", "Lys", "Lysine", "C(4)H(10)N", "common"),
    ("L", "Leu", "Leucine", "C(4)H(9)", "common"),
    ("M", "Met", "Methionine", "C(3)H(7)S", "common"),
    ("N", "Asn", "Asparagine", "C(2)H(4)NO", "common"),
    ("O", "Pyl", "Pyrrolysine", "C(9)H(17)NO", "standard"),
    ("P", "Pro", "Proline", "C(3)H(5)", "common"),
    ("Q", "Gln", "Glutamine", "C(3)H(6)NO", "common"),
    ("R", "Arg", "Arginine", "C(4)H(10)N(3)", "common"),
    ("S", "Ser", "Serine", "CH(3)O", "common"),
    ("T", "Thr", "Threonine", "C(2)H(5)O", "common"),
    ("U", "Sec", "Selenocysteine", "CH(3)Se", "standard"),
    ("V", "Val", "Valine", "C(3)H(7)", "common"),
    ("W", "Trp", "Tryptophan", "C(9)H(8)N", "common"),
    ("Y", "Tyr", "Tyrosine", "C(7)H(7)O", "common"),
    (None, "Orn", "Ornithine", "C(3)H(8)N", "uncommon"),
    (None, "Aba", "Aminobutyric Acid", "C(2)H(5)", "uncommon"),
    (None, "AECys", "Aminoethylcysteine", "C(3)H(8)NS", "uncommon"),
    (None, "Aib", "alpha-Aminoisobutyric Acid", "C(2)H(5)", "uncommon"),
    (None, "CMCys", "Carboxymethylcysteine", "C(3)H(5)O(2)S", "uncommon"),
    (None, "Dha", "Dehydroalanine", "CH", "uncommon"),
    (None, "Dhb", "Dehydroamino-alpha-butyric Acid", "C(2)H(3)", "uncommon"),
    (None, "Hyl", "Hydroxylysine", "C(4)H(10)NO", "uncommon"),
    (None, "Hyp", "Hydroxyproline", "C(3)H(5)O", "uncommon"),
    (None, "Iva", "Isovaline", "C(3)H(7)", "uncommon"),
    (None, "nLeu", "Norleucine", "C(4)H(9)", "uncommon"),
    (None, "Pip", "2-Piperidinecarboxylic Acid", "C(4)H(7)", "uncommon"),
    (None, "pGlu", "Pyroglutamic Acid", "C(3)H(3)O", "uncommon"),
    (None, "Sar", "Sarcosine", "CH(3)", "uncommon"),
)


def build_residues(
    data=RESIDUE_DATA, elements: ElementTable = DEFAULT_ELEMENT_TABLE
) -> Tuple[Residue, ...]:
    """Create residues from ``(letter, abbr, name, side chain, classification)`` rows."""
    return tuple(Residue.from_record(*row, elements=elements) for row in data)


RESIDUES = build_residues()

__all__ = ["RESIDUE_DATA", "RESIDUES", "build_residues"]
