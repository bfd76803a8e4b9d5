"""Equation splitting and species parsing.

Arrow spellings are normalized to a single ``->`` before splitting:

  ->  =>  -->  ==>  <->  <-->  <=>  →  ⇒  ⇌  ⟷

An equation needs exactly one arrow; anything else is "no equation" (None),
never an exception.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

ARROW = "->"

_arrows = re.compile(r"⇌|<=>|⟷|⇒|→|<-+>|=+>|-+>")
_leading_coeff = re.compile(r"^\s*(\d+)\s*(.*)$", re.DOTALL)


@dataclass(frozen=True)
class EquationSides:
    left: list[str] = field(default_factory=list)
    right: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class Species:
    formula: str
    coefficient: int = 1


@dataclass(frozen=True)
class Equation:
    left: tuple[Species, ...]
    right: tuple[Species, ...]

    @property
    def left_formulas(self) -> list[str]:
        return [sp.formula for sp in self.left]

    @property
    def right_formulas(self) -> list[str]:
        return [sp.formula for sp in self.right]


def normalize_arrow(text: str) -> str:
    return _arrows.sub(ARROW, text)


def _side(chunk: str) -> list[str]:
    return [s.strip() for s in chunk.split("+") if s.strip()]


def split_equation(text: str) -> EquationSides | None:
    """Split an equation into left/right species chunks.

    Returns None unless the text holds exactly one arrow.
    """
    parts = normalize_arrow(text).split(ARROW)
    if len(parts) != 2:
        return None
    lhs, rhs = parts
    return EquationSides(left=_side(lhs), right=_side(rhs))


def parse_species(chunk: str) -> Species:
    """Split an optional leading coefficient off a species chunk."""
    m = _leading_coeff.match(chunk)
    if m:
        return Species(formula=m.group(2).strip(), coefficient=int(m.group(1)))
    return Species(formula=chunk.strip())


def parse_equation(text: str) -> Equation | None:
    sides = split_equation(text)
    if sides is None:
        return None
    return Equation(
        left=tuple(parse_species(s) for s in sides.left),
        right=tuple(parse_species(s) for s in sides.right),
    )


def format_equation(equation: Equation, coefficients=None) -> str:
    """Render an equation, optionally with replacement coefficients.

    ``coefficients`` is anything with ``left``/``right`` integer sequences
    (e.g. a Solution); by default the species' own coefficients are used.
    A coefficient of 1 is omitted.
    """
    if coefficients is None:
        left = [sp.coefficient for sp in equation.left]
        right = [sp.coefficient for sp in equation.right]
    else:
        left, right = list(coefficients.left), list(coefficients.right)

    def side(species, coeffs) -> str:
        return " + ".join(
            sp.formula if c == 1 else f"{c} {sp.formula}" for sp, c in zip(species, coeffs)
        )

    return f"{side(equation.left, left)} {ARROW} {side(equation.right, right)}"
