"""Formula evaluation: token stream -> element counts.

Groups are evaluated with an explicit stack of accumulators, one per open
group, seeded with a root accumulator. Each group is accumulated on its own
and only merged into its parent (scaled by the group multiplier) when it
closes.

Counts are plain ``dict[str, int]`` sorted by symbol; an element with a zero
total never appears.
"""

from __future__ import annotations

import logging
from typing import Iterable, Sequence

from .tokens import DotToken, ElementToken, GroupToken, MATCHING, NumberToken, Token, tokenize

logger = logging.getLogger(__name__)

ElementCount = dict[str, int]


def _add(into: ElementCount, symbol: str, n: int) -> None:
    into[symbol] = into.get(symbol, 0) + n


def _merge_scaled(into: ElementCount, group: ElementCount, mult: int) -> None:
    for symbol, n in group.items():
        _add(into, symbol, n * mult)


def _sorted_counts(counts: ElementCount) -> ElementCount:
    return {el: n for el, n in sorted(counts.items()) if n != 0}


def _matching_close(tokens: Sequence[Token], start: int) -> int:
    """Index just past the group opened at ``tokens[start]`` (by depth, any family)."""
    depth = 0
    for j in range(start, len(tokens)):
        t = tokens[j]
        if isinstance(t, GroupToken):
            if t.is_open:
                depth += 1
            elif t.is_close:
                depth -= 1
                if depth == 0:
                    return j + 1
    return len(tokens)


def evaluate_formula(tokens: Sequence[Token]) -> ElementCount:
    """Evaluate a token stream into element counts."""
    stack: list[ElementCount] = [{}]
    openers: list[str] = []

    i = 0
    n = len(tokens)
    while i < n:
        t = tokens[i]
        nxt = tokens[i + 1] if i + 1 < n else None

        if isinstance(t, ElementToken):
            _add(stack[-1], t.symbol, t.count)
            i += 1

        elif isinstance(t, GroupToken):
            if t.is_open:
                openers.append(t.char)
                stack.append({})
                i += 1
                continue
            if len(stack) == 1:
                logger.debug("ignoring unmatched %r", t.char)
                i += 1
                continue
            opener = openers.pop()
            if opener != MATCHING[t.char]:
                logger.debug("group opened with %r closed with %r", opener, t.char)
            group = stack.pop()
            mult = 1
            if isinstance(nxt, NumberToken):
                mult = nxt.value
                i += 2
            else:
                i += 1
            _merge_scaled(stack[-1], group, mult)

        elif isinstance(t, DotToken):
            if isinstance(nxt, NumberToken):
                # hydrate: everything after ".N" is one sub-formula
                sub = evaluate_formula(tokens[i + 2:])
                _merge_scaled(stack[-1], sub, nxt.value)
                break
            i += 1

        elif isinstance(t, NumberToken):
            if isinstance(nxt, ElementToken):
                _add(stack[-1], nxt.symbol, nxt.count * t.value)
                i += 2
            elif isinstance(nxt, GroupToken) and nxt.is_open:
                j = _matching_close(tokens, i + 1)
                sub = evaluate_formula(tokens[i + 1:j])
                _merge_scaled(stack[-1], sub, t.value)
                i = j
            else:
                i += 1

        else:
            i += 1

    # groups left open at end of input close with multiplier 1
    while len(stack) > 1:
        group = stack.pop()
        _merge_scaled(stack[-1], group, 1)

    return _sorted_counts(stack[0])


def count_elements(formula: str) -> ElementCount:
    """Element counts of a formula string, sorted by symbol.

    >>> count_elements("Al2(SO4)3")
    {'Al': 2, 'O': 12, 'S': 3}
    """
    return evaluate_formula(tokenize(formula))


def scale_counts(counts: ElementCount, k: int) -> ElementCount:
    """Multiply every count by ``k``."""
    return _sorted_counts({el: n * k for el, n in counts.items()})


def sum_counts(counts_list: Iterable[ElementCount]) -> ElementCount:
    """Element-wise sum of several count mappings."""
    out: ElementCount = {}
    for counts in counts_list:
        _merge_scaled(out, counts, 1)
    return _sorted_counts(out)


def merge_elements(lhs: ElementCount, rhs: ElementCount) -> list[str]:
    """Sorted union of the symbols appearing in either mapping."""
    return sorted(set(lhs) | set(rhs))
