"""Element tables and empirical formula algebra."""

from .elements import (
    AVERAGE,
    DEFAULT_ELEMENT_TABLE,
    ELEMENT_TABLES,
    MONOISOTOPIC,
    ElementTable,
    get_element_table,
)
from .formula import EmpiricalFormula, add, formula_mass, parse, parse_simple, subtract

__all__ = [
    "ElementTable",
    "MONOISOTOPIC",
    "AVERAGE",
    "ELEMENT_TABLES",
    "DEFAULT_ELEMENT_TABLE",
    "get_element_table",
    "EmpiricalFormula",
    "add",
    "subtract",
    "formula_mass",
    "parse",
    "parse_simple",
]
