from __future__ import annotations

import logging

from .errors import InvalidNotation
from .models import INT_MAX, Sign, Term


logger = logging.getLogger(__name__)

_EXAMPLE = "Example: '2d6+1d4-3'."

_MAX_DIGITS = len(str(INT_MAX))

_MAX_DICE = 1000


def _describe(ch: str) -> str:
    return "end of input" if not ch else repr(ch)


class _Cursor:
    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0

    def peek(self) -> str:
        return self.text[self.pos] if self.pos < len(self.text) else ""

    def at_end(self) -> bool:
        return self.pos >= len(self.text)


def _parse_integer(cur: _Cursor, what: str) -> int:
    start = cur.pos
    while "0" <= cur.peek() <= "9":
        cur.pos += 1

    digits = cur.text[start : cur.pos]
    if not digits:
        raise InvalidNotation(
            f"Expected {what} at position {start}, found {_describe(cur.peek())}. {_EXAMPLE}"
        )

    significant = digits.lstrip("0")
    if len(significant) > _MAX_DIGITS or (significant and int(significant) > INT_MAX):
        raise InvalidNotation(
            f"Number '{digits}' at position {start} is too large (max {INT_MAX}). {_EXAMPLE}"
        )
    if not significant:
        raise InvalidNotation(
            f"{what.capitalize()} at position {start} must be a positive integer. {_EXAMPLE}"
        )
    return int(significant)


def _parse_operand(cur: _Cursor, sign: Sign) -> Term:
    amount = _parse_integer(cur, "a number")
    if cur.peek() != "d":
        return Term(sign=sign, amount=amount, sides=1)

    cur.pos += 1
    sides = _parse_integer(cur, "a side count")
    if sides > 1 and amount > _MAX_DICE:
        raise InvalidNotation(f"Too many dice: {amount} (max {_MAX_DICE}). {_EXAMPLE}")
    return Term(sign=sign, amount=amount, sides=sides)


def _parse_signed_term(cur: _Cursor) -> Term:
    op = cur.peek()
    if op not in ("+", "-"):
        raise InvalidNotation(
            f"Expected '+' or '-' at position {cur.pos}, found {_describe(op)}. {_EXAMPLE}"
        )
    cur.pos += 1
    return _parse_operand(cur, 1 if op == "+" else -1)


def parse(text: str | None) -> list[Term]:
    """Parse ``text`` into its terms, in left-to-right order.

    Raises InvalidNotation for empty input, anything off-grammar, and zero or
    out-of-range magnitudes.
    """

    if not text:
        raise InvalidNotation(f"Empty input. {_EXAMPLE}")

    cur = _Cursor(text)
    try:
        terms = [_parse_operand(cur, 1)]
        while not cur.at_end():
            terms.append(_parse_signed_term(cur))
    except InvalidNotation as e:
        logger.debug("Rejected notation %r: %s", text, e)
        raise

    logger.debug("Parsed %r into %d term(s)", text, len(terms))
    return terms
