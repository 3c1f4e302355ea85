import pytest

from molecules.chemistry import ElementTable, EmpiricalFormula, add, formula_mass, parse, parse_simple, subtract
from molecules.errors import UnknownElementError


def test_add_is_elementwise():
    total = parse_simple("CH(3)") + parse_simple("C(2)H(2)NO")
    assert total.counts == {"C": 3, "H": 5, "N": 1, "O": 1}
    assert add(parse_simple("CH(3)"), parse_simple("C(2)H(2)NO")) == total


def test_signed_delta_cancels_against_base():
    base = parse_simple("CO")
    combined = base + parse("-CO+H")
    assert combined.counts == {"H": 1}
    assert all(count != 0 for _, count in combined.terms)


def test_subtract_round_trips_add():
    a = parse_simple("C(3)H(7)NO(2)S")
    b = parse("-H(2)O+N")
    assert subtract(add(a, b), b) == a
    assert (a + b) - b == a


def test_subtract_is_not_commutative():
    a = parse_simple("C(2)")
    b = parse_simple("C")
    assert (a - b).counts == {"C": 1}
    assert (b - a).counts == {"C": -1}


def test_operands_are_not_mutated():
    a = parse_simple("CH(3)")
    b = parse_simple("H")
    a + b
    a - b
    assert a.counts == {"C": 1, "H": 3}
    assert b.counts == {"H": 1}


def test_mass_is_additive():
    a = parse_simple("C(9)H(17)NO")
    b = parse_simple("CH(3)Se")
    assert (a + b).mass == pytest.approx(a.mass + b.mass)
    assert (a - b).mass == pytest.approx(a.mass - b.mass)


def test_mass_of_backbone():
    # C2H2NO, monoisotopic
    assert parse_simple("C(2)H(2)NO").mass == pytest.approx(56.013639, abs=1e-5)


def test_from_counts_prunes_zero():
    formula = EmpiricalFormula.from_counts({"C": 1, "H": 0})
    assert formula.counts == {"C": 1}
    assert len(formula) == 1


def test_terms_must_be_canonical():
    with pytest.raises(ValueError):
        EmpiricalFormula(terms=(("H", 1), ("C", 1)))
    with pytest.raises(ValueError):
        EmpiricalFormula(terms=(("C", 0),))


def test_formulas_are_hashable_values():
    assert hash(parse_simple("CH(3)")) == hash(parse("H(3)C"))
    assert {parse_simple("CO"), parse("OC")} == {parse_simple("CO")}


def test_mass_requires_known_elements():
    table = ElementTable("carbon_only", {"C": 12.0})
    formula = EmpiricalFormula.from_counts({"C": 1, "H": 4}, elements=table)
    with pytest.raises(UnknownElementError):
        formula.mass


def test_formula_mass_against_other_table():
    table = ElementTable("nominal", {"C": 12.0, "H": 1.0, "N": 14.0, "O": 16.0})
    formula = parse_simple("C(2)H(2)NO")
    assert formula_mass(formula, table) == pytest.approx(56.0)
    assert formula_mass(formula) == formula.mass


def test_negation():
    assert (-parse("-CO+H")).counts == {"C": 1, "O": 1, "H": -1}


def test_combining_rejects_elements_missing_from_left_table():
    organic = ElementTable("organic", {"C": 12.0, "H": 1.0})
    methane = parse_simple("CH(4)", organic)
    selenium = parse_simple("Se")
    with pytest.raises(UnknownElementError):
        methane + selenium
    with pytest.raises(UnknownElementError):
        methane - selenium
    # Shared elements combine and keep the left table.
    assert (methane + parse_simple("CH(2)")).mass == pytest.approx(30.0)
