"""Exact rational null space of a stoichiometric matrix.

Goal:
Find x != 0 with A x = 0 where every species takes part, i.e. all entries of
x nonzero and of one sign (products are already negated in A).

We provide:
- rref(): reduced row echelon form via sympy, entries as Fractions
- rational_nullspace(): one basis vector per free column (sympy nullspace)
- choose_balancing_vector(): the 1-D case directly; for larger null spaces a
  bounded search over small integer combinations of the basis
- solve_nullspace_vector(): both steps for a StoichMatrix

No floating point is used anywhere here, so the integer check done by the
normalizer afterwards is exact.
"""

from __future__ import annotations

import itertools
import logging
from fractions import Fraction
from typing import Sequence

import sympy as sp

from .stoichiometry import StoichMatrix

logger = logging.getLogger(__name__)

# search combination coefficients in [-DEFAULT_COEFF_BOUND, DEFAULT_COEFF_BOUND]
DEFAULT_COEFF_BOUND = 3
# give up above this many free columns ((2*bound+1)**max_free combinations)
DEFAULT_MAX_FREE = 4

RationalVector = list[Fraction]


def _to_fraction(x) -> Fraction:
    # sympy Rational -> Fraction; otherwise coerce via str
    if isinstance(x, sp.Rational):
        return Fraction(int(x.p), int(x.q))
    return Fraction(str(x))


def _sympy_matrix(matrix, n_cols: int | None = None) -> sp.Matrix:
    rows = [[int(a) for a in row] for row in matrix]
    if not rows:
        return sp.zeros(0, n_cols or 0)
    if not rows[0]:
        return sp.zeros(len(rows), 0)
    return sp.Matrix(rows)


def rref(matrix, n_cols: int | None = None) -> tuple[list[RationalVector], list[int]]:
    """Reduced row echelon form of an integer matrix, exactly.

    Returns:
      (rows, pivots): the reduced rows (nonzero rows first) and the pivot
      column of each of the first len(pivots) rows.
    """
    R, pivots = _sympy_matrix(matrix, n_cols).rref()
    rows = [[_to_fraction(x) for x in R.row(i)] for i in range(R.rows)]
    return rows, list(pivots)


def rational_nullspace(matrix, n_cols: int | None = None) -> list[RationalVector]:
    """Rational basis of {x | A x = 0}.

    sympy builds one vector per free column f: x_f = 1, the other free
    columns 0, and every pivot column back-substituted from the reduced rows.

    ``n_cols`` is only needed when the matrix has no rows.
    """
    S = _sympy_matrix(matrix, n_cols)
    if S.rows == 0:
        return [[Fraction(int(i == j)) for j in range(S.cols)] for i in range(S.cols)]
    return [[_to_fraction(x) for x in v] for v in S.nullspace()]


def nullity(matrix, n_cols: int | None = None) -> int:
    S = _sympy_matrix(matrix, n_cols)
    return S.cols - S.rank()


def _same_strict_sign(v: Sequence[Fraction]) -> bool:
    return all(x > 0 for x in v) or all(x < 0 for x in v)


def _combine(coeffs: Sequence[int], basis: Sequence[RationalVector]) -> RationalVector:
    n = len(basis[0])
    return [sum((c * b[j] for c, b in zip(coeffs, basis)), Fraction(0)) for j in range(n)]


def search_feasible_combination(
    basis: Sequence[RationalVector],
    *,
    coeff_bound: int = DEFAULT_COEFF_BOUND,
) -> RationalVector | None:
    """Smallest integer combination of ``basis`` with all entries one strict sign.

    Combinations c in [-coeff_bound, coeff_bound]^k are tried in order of
    sum |c_i|, ties broken lexicographically.
    """
    if coeff_bound < 0:
        raise ValueError("coeff_bound must be >= 0")
    if not basis:
        return None

    rng = range(-coeff_bound, coeff_bound + 1)
    combos = [c for c in itertools.product(rng, repeat=len(basis)) if any(c)]
    combos.sort(key=lambda c: (sum(abs(x) for x in c), c))

    for coeffs in combos:
        v = _combine(coeffs, basis)
        if _same_strict_sign(v):
            logger.debug("feasible combination %s", coeffs)
            return v
    return None


def choose_balancing_vector(
    basis: Sequence[RationalVector],
    *,
    coeff_bound: int = DEFAULT_COEFF_BOUND,
    max_free: int = DEFAULT_MAX_FREE,
) -> RationalVector | None:
    """Pick the null-space vector to balance with from a rational basis.

    Nullity 1 gives the basis vector itself; larger null spaces go through
    search_feasible_combination() when they have at most ``max_free`` vectors.
    """
    if max_free < 1:
        raise ValueError("max_free must be >= 1")
    if not basis:
        return None
    if len(basis) == 1:
        return list(basis[0])
    if len(basis) > max_free:
        logger.debug("nullity %d exceeds max_free=%d", len(basis), max_free)
        return None
    return search_feasible_combination(basis, coeff_bound=coeff_bound)


def solve_nullspace_vector(
    stoich: StoichMatrix,
    *,
    coeff_bound: int = DEFAULT_COEFF_BOUND,
    max_free: int = DEFAULT_MAX_FREE,
) -> RationalVector | None:
    """A rational null-space vector of ``stoich`` suitable for balancing.

    Returns None when the matrix is empty, has a trivial null space, or when
    no sign-feasible combination exists within the search bounds.
    """
    if stoich.is_empty:
        return None

    basis = rational_nullspace(stoich.matrix, n_cols=stoich.n_species)
    logger.debug(
        "elements=%s species=%d nullity=%d", stoich.elements, stoich.n_species, len(basis)
    )
    return choose_balancing_vector(basis, coeff_bound=coeff_bound, max_free=max_free)
