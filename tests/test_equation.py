from __future__ import annotations

import pytest

from chem_balancer.equation import (
    Equation,
    EquationSides,
    Species,
    format_equation,
    normalize_arrow,
    parse_equation,
    parse_species,
    split_equation,
)
from chem_balancer.normalize import Solution


def test_ascii_arrow():
    assert split_equation("C3H8 + O2 -> CO2 + H2O") == EquationSides(
        left=["C3H8", "O2"], right=["CO2", "H2O"]
    )


@pytest.mark.parametrize(
    "arrow", ["->", "=>", "-->", "==>", "<->", "<-->", "<=>", "→", "⇒", "⇌", "⟷"]
)
def test_arrow_spellings(arrow):
    sides = split_equation(f"C3H8 + O2 {arrow} CO2 + H2O")
    assert sides is not None
    assert sides.left == ["C3H8", "O2"]
    assert sides.right == ["CO2", "H2O"]


def test_weird_spacing():
    assert split_equation(" Fe + O2   =>   Fe2O3 ") == EquationSides(
        left=["Fe", "O2"], right=["Fe2O3"]
    )


def test_no_arrow_or_several_arrows():
    assert split_equation("H2 + O2 CO2 + H2O") is None
    assert split_equation("A -> B -> C") is None
    assert split_equation("") is None


def test_empty_chunks_dropped():
    assert split_equation("H2 + + O2 -> H2O +") == EquationSides(left=["H2", "O2"], right=["H2O"])
    assert split_equation("-> H2O") == EquationSides(left=[], right=["H2O"])


def test_normalize_arrow():
    assert normalize_arrow("A ⇌ B") == "A -> B"
    assert normalize_arrow("A ===> B") == "A -> B"


def test_parse_species():
    assert parse_species("2H2O") == Species("H2O", 2)
    assert parse_species("  H2O") == Species("H2O", 1)
    assert parse_species("10 Fe ") == Species("Fe", 10)
    assert parse_species("CuSO4·5H2O") == Species("CuSO4·5H2O", 1)


def test_parse_equation():
    eq = parse_equation("2 H2 + O2 -> 2 H2O")
    assert eq == Equation(
        left=(Species("H2", 2), Species("O2", 1)),
        right=(Species("H2O", 2),),
    )
    assert eq.left_formulas == ["H2", "O2"]
    assert eq.right_formulas == ["H2O"]
    assert parse_equation("H2 + O2") is None


def test_format_equation():
    eq = parse_equation("2 H2 + O2 -> 2 H2O")
    assert format_equation(eq) == "2 H2 + O2 -> 2 H2O"

    eq = parse_equation("C3H8 + O2 → CO2 + H2O")
    sol = Solution(left=(1, 5), right=(3, 4))
    assert format_equation(eq, sol) == "C3H8 + 5 O2 -> 3 CO2 + 4 H2O"
