"""Public API for balancing equations.

This module defines:
- BalanceAnalysis dataclass
- analyze_balanceability(): can the reaction be balanced with every species present?
- solve_equation(): the "auto solve" entry point
- balance_text(): parse + solve a textual equation
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from .equation import Equation, parse_equation
from .formula import count_elements
from .normalize import Solution, to_integer_coefficients
from .rational import (
    DEFAULT_COEFF_BOUND,
    DEFAULT_MAX_FREE,
    choose_balancing_vector,
    rational_nullspace,
)
from .stoichiometry import CountFn, build_matrix


@dataclass(frozen=True)
class BalanceAnalysis:
    balanceable: bool
    nullity: int
    suggestion: Solution | None = None


@dataclass(frozen=True)
class BalancedEquation:
    equation: Equation
    solution: Solution


def analyze_balanceability(
    left: Sequence[str],
    right: Sequence[str],
    count_fn: CountFn = count_elements,
    *,
    coeff_bound: int = DEFAULT_COEFF_BOUND,
    max_free: int = DEFAULT_MAX_FREE,
) -> BalanceAnalysis:
    """Decide whether ``left -> right`` balances with all species present.

    1) build the signed element matrix
    2) exact rational null space (bounded search when nullity > 1)
    3) minimal positive integer coefficients, verified exactly

    Returns:
      BalanceAnalysis with the suggested coefficients when balanceable.
    """
    stoich = build_matrix(left, right, count_fn)
    if stoich.is_empty:
        return BalanceAnalysis(balanceable=False, nullity=0)

    basis = rational_nullspace(stoich.matrix, n_cols=stoich.n_species)
    k = len(basis)
    vec = choose_balancing_vector(basis, coeff_bound=coeff_bound, max_free=max_free)
    if vec is None:
        return BalanceAnalysis(balanceable=False, nullity=k)

    suggestion = to_integer_coefficients(vec, stoich)
    if suggestion is None:
        return BalanceAnalysis(balanceable=False, nullity=k)
    return BalanceAnalysis(balanceable=True, nullity=k, suggestion=suggestion)


def solve_equation(
    left: Sequence[str],
    right: Sequence[str],
    count_fn: CountFn = count_elements,
    *,
    coeff_bound: int = DEFAULT_COEFF_BOUND,
    max_free: int = DEFAULT_MAX_FREE,
) -> Solution | None:
    """Minimal positive integer coefficients for ``left -> right``, or None."""
    res = analyze_balanceability(
        left, right, count_fn, coeff_bound=coeff_bound, max_free=max_free
    )
    return res.suggestion if res.balanceable else None


def balance_text(
    text: str,
    *,
    coeff_bound: int = DEFAULT_COEFF_BOUND,
    max_free: int = DEFAULT_MAX_FREE,
) -> BalancedEquation | None:
    """Parse ``text`` and balance it; typed coefficients are ignored."""
    eq = parse_equation(text)
    if eq is None:
        return None
    sol = solve_equation(
        eq.left_formulas, eq.right_formulas, coeff_bound=coeff_bound, max_free=max_free
    )
    if sol is None:
        return None
    return BalancedEquation(equation=eq, solution=sol)
