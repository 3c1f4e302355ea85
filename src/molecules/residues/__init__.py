"""Amino acid residue constants and their library."""

from .catalog import RESIDUE_DATA, RESIDUES, build_residues
from .library import RESIDUE_LIBRARY, ResidueLibrary
from .residue import BACKBONE, CLASSIFICATIONS, DELTA_IMMONIUM, Residue
from .tables import ASCII_SIZE, byte_indexed_array, immonium_mass_array, residue_mass_array, residue_masses

__all__ = [
    "Residue",
    "CLASSIFICATIONS",
    "BACKBONE",
    "DELTA_IMMONIUM",
    "RESIDUE_DATA",
    "RESIDUES",
    "build_residues",
    "ResidueLibrary",
    "RESIDUE_LIBRARY",
    "ASCII_SIZE",
    "byte_indexed_array",
    "residue_mass_array",
    "immonium_mass_array",
    "residue_masses",
]
