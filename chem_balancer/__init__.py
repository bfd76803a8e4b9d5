"""Chemical formula parsing and exact equation balancing.

Core contract:
- inputs: formula strings, or an equation "A + B -> C + D"
- workflow: split equation -> tokenize -> count elements -> signed element
  matrix -> exact rational null space -> minimal positive integer coefficients

Every function is pure; nothing is cached between calls.
"""

from .tokens import tokenize
from .formula import count_elements, evaluate_formula, merge_elements, scale_counts, sum_counts
from .equation import Equation, Species, format_equation, parse_equation, parse_species, split_equation
from .stoichiometry import StoichMatrix, build_matrix
from .normalize import Solution
from .api import BalanceAnalysis, analyze_balanceability, balance_text, solve_equation
from .balance import ElementBalance, element_balance

__version__ = "0.1.0"
