"""Shared integer helpers for the normalizer.

This module provides:
- gcd / lcm over lists of integers
- primitive form of an integer vector (divide by GCD)
- denominator clearing for Fraction vectors
"""

from __future__ import annotations

import math
from fractions import Fraction
from typing import Sequence


def lcm_list(xs: Sequence[int]) -> int:
    """Least common multiple of a list of integers (1 for an empty list)."""
    return math.lcm(*xs)


def gcd_list(xs: Sequence[int]) -> int:
    """GCD of a list of integers; zeros do not count, and all-zero gives 1."""
    return math.gcd(*xs) or 1


def primitive_int(vec: Sequence[int]) -> list[int]:
    """Divide an integer vector by the GCD of its entries."""
    g = gcd_list(list(vec))
    return [x // g for x in vec]


def clear_denominators(vec: Sequence[Fraction]) -> list[int]:
    """Scale a rational vector by the LCM of its denominators.

    The result is an integer vector proportional to ``vec`` with the same signs.
    """
    L = lcm_list([f.denominator for f in vec])
    return [int(f * L) for f in vec]
