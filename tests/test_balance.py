from __future__ import annotations

from chem_balancer.balance import element_balance, equation_balance, side_counts, total_atoms
from chem_balancer.equation import Equation, Species, parse_equation


def test_balanced_equation():
    bal = equation_balance(parse_equation("2 H2 + O2 -> 2 H2O"))
    assert bal.left_sum == {"H": 4, "O": 2}
    assert bal.right_sum == {"H": 4, "O": 2}
    assert bal.diff == {"H": 0, "O": 0}
    assert bal.balanced
    assert bal.unbalanced_elements == []
    assert bal.hint() == "Already balanced."


def test_unbalanced_equation():
    bal = element_balance([Species("H2"), Species("O2")], [Species("H2O")])
    assert bal.elements == ["H", "O"]
    assert bal.diff == {"H": 0, "O": 1}
    assert not bal.balanced
    assert bal.unbalanced_elements == ["O"]
    assert bal.hint() == "Focus on balancing O first."


def test_per_species_counts_are_weighted():
    counts = side_counts([Species("CO2", 2), Species("H2O", 3)])
    assert counts == [{"C": 2, "O": 4}, {"H": 6, "O": 3}]


def test_empty_equation():
    bal = equation_balance(Equation(left=(), right=()))
    assert bal.elements == []
    assert not bal.balanced
    assert bal.hint() == "Enter an equation first."


def test_total_atoms():
    assert total_atoms({"H": 4, "O": 2}) == 6
    assert total_atoms({}) == 0
