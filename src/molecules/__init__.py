"""Empirical formulas and constant libraries of amino acid residues."""

from .errors import (
    DuplicateKeyError,
    DuplicateRegistrationError,
    MoleculesError,
    ParseError,
    UnknownElementError,
    UnknownNameError,
)

__all__ = [
    "MoleculesError",
    "ParseError",
    "UnknownElementError",
    "DuplicateKeyError",
    "DuplicateRegistrationError",
    "UnknownNameError",
]
