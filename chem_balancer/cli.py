"""Command line front end.

Usage:
    chem-balance count "CuSO4·5H2O"
    chem-balance solve "C3H8 + O2 -> CO2 + H2O"
    chem-balance check "2 H2 + O2 -> 2 H2O"
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Sequence

from .api import analyze_balanceability
from .balance import equation_balance, total_atoms
from .equation import format_equation, parse_equation
from .formula import count_elements
from .rational import DEFAULT_COEFF_BOUND, DEFAULT_MAX_FREE

logger = logging.getLogger(__name__)


def _format_counts(counts: dict[str, int]) -> str:
    return " ".join(f"{el}:{n}" for el, n in counts.items())


def cmd_count(args: argparse.Namespace) -> int:
    counts = count_elements(args.formula)
    if args.json:
        print(json.dumps({"formula": args.formula, "counts": counts, "atoms": total_atoms(counts)}, ensure_ascii=False))
    else:
        print(f"{args.formula}: {_format_counts(counts)} ({total_atoms(counts)} atoms)")
    return 0


def cmd_solve(args: argparse.Namespace) -> int:
    eq = parse_equation(args.equation)
    if eq is None:
        print("error: expected exactly one arrow (->, =>, →, ⇌ ...)", file=sys.stderr)
        return 1

    res = analyze_balanceability(
        eq.left_formulas,
        eq.right_formulas,
        coeff_bound=args.coeff_bound,
        max_free=args.max_free,
    )
    logger.info("nullity=%d balanceable=%s", res.nullity, res.balanceable)

    if args.json:
        payload = {
            "balanceable": res.balanceable,
            "nullity": res.nullity,
            "left": list(res.suggestion.left) if res.suggestion else None,
            "right": list(res.suggestion.right) if res.suggestion else None,
        }
        if res.suggestion:
            payload["equation"] = format_equation(eq, res.suggestion)
        print(json.dumps(payload, ensure_ascii=False))
    elif res.suggestion:
        print(format_equation(eq, res.suggestion))
    else:
        print("Not balanceable with all species present.", file=sys.stderr)

    return 0 if res.balanceable else 1


def cmd_check(args: argparse.Namespace) -> int:
    eq = parse_equation(args.equation)
    if eq is None:
        print("error: expected exactly one arrow (->, =>, →, ⇌ ...)", file=sys.stderr)
        return 1

    bal = equation_balance(eq)
    if args.json:
        print(json.dumps({
            "left": bal.left_sum,
            "right": bal.right_sum,
            "diff": bal.diff,
            "balanced": bal.balanced,
            "hint": bal.hint(),
        }, ensure_ascii=False))
    else:
        print(f"{'element':<8}{'left':>6}{'right':>6}{'diff':>6}")
        for el in bal.elements:
            print(f"{el:<8}{bal.left_sum.get(el, 0):>6}{bal.right_sum.get(el, 0):>6}{bal.diff[el]:>6}")
        print(bal.hint())

    return 0 if bal.balanced else 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chem-balance", description="Count atoms and balance chemical equations"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    parser.add_argument("--json", action="store_true", help="machine-readable output")
    sub = parser.add_subparsers(dest="cmd", required=True)

    p_count = sub.add_parser("count", help="element counts of a formula")
    p_count.add_argument("formula")
    p_count.set_defaults(func=cmd_count)

    p_solve = sub.add_parser("solve", help="minimal integer coefficients of an equation")
    p_solve.add_argument("equation")
    p_solve.add_argument("--coeff-bound", type=int, default=DEFAULT_COEFF_BOUND,
                         help="search bound for underdetermined reactions")
    p_solve.add_argument("--max-free", type=int, default=DEFAULT_MAX_FREE,
                         help="largest null space searched")
    p_solve.set_defaults(func=cmd_solve)

    p_check = sub.add_parser("check", help="element balance at the typed coefficients")
    p_check.add_argument("equation")
    p_check.set_defaults(func=cmd_check)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
