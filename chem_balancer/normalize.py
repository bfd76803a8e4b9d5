"""Rational null-space vector -> minimal positive integer coefficients."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from fractions import Fraction
from typing import Sequence

from .stoichiometry import StoichMatrix
from .utils import clear_denominators, primitive_int

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Solution:
    """Balancing coefficients, one per species, in input order."""

    left: tuple[int, ...]
    right: tuple[int, ...]

    def __post_init__(self):
        object.__setattr__(self, "left", tuple(int(c) for c in self.left))
        object.__setattr__(self, "right", tuple(int(c) for c in self.right))

    def as_vector(self) -> list[int]:
        return list(self.left) + list(self.right)


def to_integer_coefficients(vector: Sequence[Fraction], stoich: StoichMatrix) -> Solution | None:
    """Scale, sign-fix and reduce ``vector``, then verify it against ``stoich``.

    Steps:
    1) multiply by the LCM of the denominators
    2) negate if more entries are negative than positive; a sign still
       mixed after that means some species would have to switch sides
    3) absolute values, divided by their GCD
    4) require every entry > 0 and A x = 0 exactly

    Returns None when any check fails.
    """
    if len(vector) != stoich.n_species:
        raise ValueError(f"vector has {len(vector)} entries, expected {stoich.n_species}")

    ints = clear_denominators([Fraction(v) for v in vector])
    if not any(ints):
        return None

    neg = sum(1 for v in ints if v < 0)
    pos = sum(1 for v in ints if v > 0)
    if neg > pos:
        ints = [-v for v in ints]
    if any(v < 0 for v in ints):
        logger.debug("mixed signs %s: a species would switch sides", ints)
        return None

    coeffs = primitive_int([abs(v) for v in ints])
    if any(c == 0 for c in coeffs):
        return None

    if not stoich.balances(coeffs):
        logger.warning("candidate %s does not balance %s; discarding", coeffs, stoich.elements)
        return None

    return Solution(left=tuple(coeffs[: stoich.n_left]), right=tuple(coeffs[stoich.n_left:]))
