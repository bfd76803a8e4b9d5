from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Sequence

import numpy as np
from numpy.typing import NDArray

from .formula import ElementCount, count_elements

CountFn = Callable[[str], ElementCount]


@dataclass(frozen=True)
class StoichMatrix:
    """Element-by-species matrix of a reaction.

    Layout:
      A = [ L | -R ]

    Shapes:
      matrix: (n_elements, n_left + n_right), Python ints (dtype=object)
      elements: sorted element symbols, one per row

    Left (reactant) columns hold the raw element counts, right (product)
    columns their negation, so a coefficient vector x balances the
    reaction exactly when A x = 0.
    """

    matrix: NDArray[np.object_]
    elements: tuple[str, ...]
    n_left: int

    def __post_init__(self):
        A = np.asarray(self.matrix, dtype=object)
        if A.ndim != 2 and A.size == 0:
            A = np.zeros((len(self.elements), 0), dtype=object)
        if A.ndim != 2:
            raise ValueError(f"matrix must be 2-D, got shape {A.shape}")
        object.__setattr__(self, "matrix", A)
        object.__setattr__(self, "elements", tuple(self.elements))
        if A.shape[0] != len(self.elements):
            raise ValueError(f"matrix has {A.shape[0]} rows but {len(self.elements)} elements")
        if not 0 <= self.n_left <= A.shape[1]:
            raise ValueError(f"n_left={self.n_left} out of range for {A.shape[1]} columns")

    @property
    def n_species(self) -> int:
        return int(self.matrix.shape[1])

    @property
    def n_right(self) -> int:
        return self.n_species - self.n_left

    @property
    def is_empty(self) -> bool:
        return self.matrix.size == 0

    def residual(self, x: Sequence[int]) -> list[int]:
        """Exact A x with Python integers."""
        if len(x) != self.n_species:
            raise ValueError(f"x has {len(x)} entries but matrix has {self.n_species} columns")
        xs = [int(c) for c in x]
        return [sum(a * c for a, c in zip(row, xs)) for row in self.matrix.tolist()]

    def balances(self, x: Sequence[int]) -> bool:
        return not any(self.residual(x))


def build_matrix(
    left: Sequence[str],
    right: Sequence[str],
    count_fn: CountFn = count_elements,
) -> StoichMatrix:
    """Build the signed stoichiometric matrix for ``left -> right``.

    No species, or species without any element, gives an empty matrix
    rather than an error.
    """
    left_counts = [count_fn(f) for f in left]
    right_counts = [count_fn(f) for f in right]

    elements = sorted({el for c in left_counts + right_counts for el in c})

    # object dtype keeps exact Python ints; counts can exceed int64
    A = np.zeros((len(elements), len(left) + len(right)), dtype=object)
    for j, counts in enumerate(left_counts):
        for i, el in enumerate(elements):
            A[i, j] = counts.get(el, 0)
    for k, counts in enumerate(right_counts):
        col = len(left) + k
        for i, el in enumerate(elements):
            A[i, col] = -counts.get(el, 0)

    return StoichMatrix(matrix=A, elements=tuple(elements), n_left=len(left))
