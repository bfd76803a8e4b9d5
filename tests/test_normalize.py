from __future__ import annotations

import logging
from fractions import Fraction as F

import pytest

from chem_balancer.normalize import Solution, to_integer_coefficients
from chem_balancer.stoichiometry import build_matrix


@pytest.fixture
def propane():
    return build_matrix(["C3H8", "O2"], ["CO2", "H2O"])


def test_clears_denominators(propane):
    sol = to_integer_coefficients([F(1, 4), F(5, 4), F(3, 4), F(1)], propane)
    assert sol == Solution(left=(1, 5), right=(3, 4))
    assert sol.as_vector() == [1, 5, 3, 4]


def test_negative_majority_is_flipped(propane):
    sol = to_integer_coefficients([F(-1, 4), F(-5, 4), F(-3, 4), F(-1)], propane)
    assert sol == Solution(left=(1, 5), right=(3, 4))


def test_reduced_by_gcd(propane):
    assert to_integer_coefficients([2, 10, 6, 8], propane) == Solution((1, 5), (3, 4))


def test_rejects_zero_and_mixed_vectors(propane):
    assert to_integer_coefficients([0, 0, 0, 0], propane) is None
    assert to_integer_coefficients([1, 5, 3, 0], propane) is None
    assert to_integer_coefficients([1, -5, 3, 4], propane) is None


def test_failed_verification_is_logged(propane, caplog):
    with caplog.at_level(logging.WARNING, logger="chem_balancer.normalize"):
        assert to_integer_coefficients([1, 1, 1, 1], propane) is None
    assert "does not balance" in caplog.text


def test_length_mismatch(propane):
    with pytest.raises(ValueError):
        to_integer_coefficients([1, 2], propane)
