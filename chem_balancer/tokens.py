"""Formula tokenizer.

A formula string is lexed into a flat token stream:

  GroupToken    one of ( ) [ ] { }
  ElementToken  symbol (uppercase + optional lowercase) with its multiplicity
  NumberToken   a digit run that does not directly follow a symbol
  DotToken      hydrate separator (middle dot or ASCII period)

Whitespace is ignored and unknown characters are skipped, so that slightly
malformed notation still produces a usable stream.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Union

logger = logging.getLogger(__name__)

OPENERS = "([{"
CLOSERS = ")]}"
MATCHING = {")": "(", "]": "[", "}": "{"}


@dataclass(frozen=True)
class GroupToken:
    char: str

    @property
    def is_open(self) -> bool:
        return self.char in OPENERS

    @property
    def is_close(self) -> bool:
        return self.char in CLOSERS


@dataclass(frozen=True)
class ElementToken:
    symbol: str
    count: int = 1


@dataclass(frozen=True)
class NumberToken:
    value: int


@dataclass(frozen=True)
class DotToken:
    pass


Token = Union[GroupToken, ElementToken, NumberToken, DotToken]

# Alternation order matters: digits right after a symbol belong to the symbol.
_matcher = re.compile(
    r"(?P<DOT>[·.])"
    r"|(?P<GROUP>[()\[\]{}])"
    r"|(?P<ELEM>[A-Z][a-z]?)(?P<COUNT>[0-9]*)"
    r"|(?P<NUM>[0-9]+)"
    r"|(?P<INVALID>.)"
)

_whitespace = re.compile(r"\s+")

# digit runs longer than this are skipped as malformed
MAX_DIGITS = 100


def tokenize(formula: str) -> list[Token]:
    """Lex ``formula`` into tokens, left to right."""
    s = _whitespace.sub("", formula)
    tokens: list[Token] = []
    for mob in _matcher.finditer(s):
        kind = mob.lastgroup
        if kind == "DOT":
            tokens.append(DotToken())
        elif kind == "GROUP":
            tokens.append(GroupToken(mob.group("GROUP")))
        elif kind in ("ELEM", "COUNT"):
            digits = mob.group("COUNT")
            if len(digits) > MAX_DIGITS:
                logger.debug("skipping %s with %d-digit count", mob.group("ELEM"), len(digits))
                continue
            tokens.append(ElementToken(mob.group("ELEM"), int(digits) if digits else 1))
        elif kind == "NUM":
            if len(mob.group("NUM")) > MAX_DIGITS:
                logger.debug("skipping %d-digit number", len(mob.group("NUM")))
                continue
            tokens.append(NumberToken(int(mob.group("NUM"))))
        else:
            logger.debug("skipping %r at %d in %r", mob.group(), mob.start(), s)
    return tokens
