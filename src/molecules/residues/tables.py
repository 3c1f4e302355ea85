"""Byte-indexed numpy lookup tables for residue masses."""

from __future__ import annotations

from typing import Mapping

import numpy as np

from .library import RESIDUE_LIBRARY, ResidueLibrary

ASCII_SIZE = 128


def byte_indexed_array(values: Mapping[int, float], size: int = ASCII_SIZE) -> np.ndarray:
    """Scatter ``byte -> value`` into a float64 array; unset slots are ``nan``."""
    table = np.full((size,), np.nan, dtype=np.float64)
    for byte, value in values.items():
        if not 0 <= byte < size:
            raise ValueError(f"byte {byte} does not fit in a table of size {size}")
        table[byte] = value
    return table


def residue_mass_array(library: ResidueLibrary = RESIDUE_LIBRARY, size: int = ASCII_SIZE) -> np.ndarray:
    """Residue masses indexed by the byte of the residue letter."""
    return byte_indexed_array(library.residue_mass_index, size=size)


def immonium_mass_array(library: ResidueLibrary = RESIDUE_LIBRARY, size: int = ASCII_SIZE) -> np.ndarray:
    """Immonium ion masses indexed by the byte of the residue letter."""
    values = {byte: residue.immonium_ion_mass for byte, residue in library.residue_index.items()}
    return byte_indexed_array(values, size=size)


def residue_masses(sequence: str, table: np.ndarray | None = None) -> np.ndarray:
    """Per-residue masses for a one-letter sequence, e.g. ``"GASP"``.

    Raises ``ValueError`` for letters without an entry in ``table``.
    """
    if table is None:
        table = residue_mass_array()
    if not sequence.isascii():
        raise ValueError(f"sequence must be ASCII, got {sequence!r}")
    codes = np.frombuffer(sequence.encode("ascii"), dtype=np.uint8)
    if codes.size and codes.max() >= table.shape[0]:
        raise ValueError(f"sequence {sequence!r} has letters outside the table")
    masses = table[codes]
    missing = np.isnan(masses)
    if missing.any():
        unknown = sorted({sequence[i] for i in np.nonzero(missing)[0]})
        raise ValueError(f"Unknown residue letters {unknown} in sequence {sequence!r}")
    return masses


__all__ = [
    "ASCII_SIZE",
    "byte_indexed_array",
    "residue_mass_array",
    "immonium_mass_array",
    "residue_masses",
]
