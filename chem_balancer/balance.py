"""Element balance of an equation at the coefficients the user typed.

Used for live feedback while coefficients are edited by hand: per-side
atom totals, the left-minus-right difference per element, and a hint on
which element to fix next.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from .equation import Equation, Species
from .formula import ElementCount, count_elements, merge_elements, scale_counts, sum_counts
from .stoichiometry import CountFn


@dataclass(frozen=True)
class ElementBalance:
    left_counts: list[ElementCount]
    right_counts: list[ElementCount]
    left_sum: ElementCount
    right_sum: ElementCount
    diff: dict[str, int]
    elements: list[str]

    @property
    def balanced(self) -> bool:
        return bool(self.elements) and all(d == 0 for d in self.diff.values())

    @property
    def unbalanced_elements(self) -> list[str]:
        return [el for el in self.elements if self.diff[el] != 0]

    def hint(self) -> str:
        if not self.elements:
            return "Enter an equation first."
        unbalanced = self.unbalanced_elements
        if not unbalanced:
            return "Already balanced."
        return f"Focus on balancing {unbalanced[0]} first."


def total_atoms(counts: ElementCount) -> int:
    return sum(counts.values())


def side_counts(species: Sequence[Species], count_fn: CountFn = count_elements) -> list[ElementCount]:
    """Coefficient-weighted element counts, one mapping per species."""
    return [scale_counts(count_fn(sp.formula), sp.coefficient) for sp in species]


def element_balance(
    left: Sequence[Species],
    right: Sequence[Species],
    count_fn: CountFn = count_elements,
) -> ElementBalance:
    left_counts = side_counts(left, count_fn)
    right_counts = side_counts(right, count_fn)
    left_sum = sum_counts(left_counts)
    right_sum = sum_counts(right_counts)
    elements = merge_elements(left_sum, right_sum)
    diff = {el: left_sum.get(el, 0) - right_sum.get(el, 0) for el in elements}
    return ElementBalance(
        left_counts=left_counts,
        right_counts=right_counts,
        left_sum=left_sum,
        right_sum=right_sum,
        diff=diff,
        elements=elements,
    )


def equation_balance(equation: Equation, count_fn: CountFn = count_elements) -> ElementBalance:
    return element_balance(equation.left, equation.right, count_fn)
