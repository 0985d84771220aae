from __future__ import annotations

import logging
import secrets
import uuid
from collections.abc import Iterable
from datetime import datetime, timezone
from typing import Any

from .errors import ArithmeticOverflow, InvalidTerm
from .formatting import render
from .models import INT_MAX, INT_MIN, EvaluationResult, Outcome, RandomSource, Term
from .parser import parse


logger = logging.getLogger(__name__)


def _now_utc_iso() -> str:
    return datetime.now(timezone.utc).replace(microsecond=0).isoformat().replace("+00:00", "Z")


def _check_range(value: int, what: str) -> int:
    if not INT_MIN <= value <= INT_MAX:
        raise ArithmeticOverflow(f"{what} {value} is outside [{INT_MIN}, {INT_MAX}].")
    return value


def _validate(term: Term) -> None:
    if term.amount <= 0:
        raise InvalidTerm(f"Amount must be positive, got {term.amount} in '{term}'.")
    if term.sides <= 0:
        raise InvalidTerm(f"Sides must be positive, got {term.sides} in '{term}'.")
    if term.sign not in (1, -1):
        raise InvalidTerm(f"Sign must be +1 or -1, got {term.sign}.")


def resolve(term: Term, rng: RandomSource) -> Outcome:
    """Resolve a single term. Constants never consult ``rng``."""

    _validate(term)

    if term.is_constant:
        subtotal = _check_range(term.sign * term.amount, f"Subtotal of '{term}'")
        return Outcome(term=term, rolls=(), subtotal=subtotal)

    rolls = tuple(rng.randint(1, term.sides) for _ in range(term.amount))
    subtotal = _check_range(term.sign * sum(rolls), f"Subtotal of '{term}'")
    return Outcome(term=term, rolls=rolls, subtotal=subtotal)


def evaluate(terms: Iterable[Term], rng: RandomSource) -> EvaluationResult:
    """Resolve every term in order and sum the subtotals.

    Raises InvalidTerm for non-positive magnitudes and ArithmeticOverflow when a
    subtotal or the running total leaves the 32-bit signed range. Nothing is
    returned on failure.
    """

    outcomes: list[Outcome] = []
    total = 0
    for term in terms:
        outcome = resolve(term, rng)
        total = _check_range(total + outcome.subtotal, "Running total")
        outcomes.append(outcome)

    logger.debug("Evaluated %d term(s), total %d", len(outcomes), total)
    return EvaluationResult(grand_total=total, outcomes=tuple(outcomes))


def roll_from_text(text: str, rng: RandomSource | None = None) -> dict[str, Any]:
    """Parse, validate, then roll. Raises DiceError for invalid input."""

    terms = parse(text)
    if rng is None:
        rng = secrets.SystemRandom()

    result = evaluate(terms, rng)
    display = render(result, text)

    return {
        "request_id": uuid.uuid4().hex,
        "timestamp": _now_utc_iso(),
        "input": text,
        "terms": [
            {
                "notation": o.term.notation,
                "sign": o.term.sign,
                "amount": o.term.amount,
                "sides": o.term.sides,
                "rolls": list(o.rolls),
                "subtotal": o.subtotal,
            }
            for o in result.outcomes
        ],
        "total": result.grand_total,
        "title": display.title,
        "subtitle": display.subtitle,
        "copy_text": display.copy_text,
    }
