import numpy as np
import pytest

from molecules.residues import (
    RESIDUE_LIBRARY,
    byte_indexed_array,
    immonium_mass_array,
    residue_mass_array,
    residue_masses,
)


def test_residue_mass_array_is_indexed_by_byte():
    table = residue_mass_array()
    assert table.shape == (128,)
    assert table.dtype == np.float64
    assert np.isclose(table[ord("A")], RESIDUE_LIBRARY.by_letter["A"].residue_mass)
    assert np.isnan(table[ord("B")])
    assert np.isnan(table[ord("U")])
    assert np.count_nonzero(~np.isnan(table)) == 20


def test_immonium_mass_array():
    table = immonium_mass_array()
    assert np.isclose(table[ord("A")], RESIDUE_LIBRARY.by_letter["A"].immonium_ion_mass)


def test_byte_indexed_array_rejects_out_of_range():
    with pytest.raises(ValueError):
        byte_indexed_array({200: 1.0})


def test_residue_masses_for_sequence():
    masses = residue_masses("GASP")
    expected = [RESIDUE_LIBRARY.by_letter[letter].residue_mass for letter in "GASP"]
    assert np.allclose(masses, expected)
    assert residue_masses("").shape == (0,)


def test_residue_masses_rejects_unknown_letters():
    with pytest.raises(ValueError, match="B"):
        residue_masses("GABX")
    with pytest.raises(ValueError):
        residue_masses("GÅ")
