from __future__ import annotations

from dataclasses import dataclass

from .models import EvaluationResult, Outcome


@dataclass(frozen=True)
class RollDisplay:
    title: str
    subtitle: str
    copy_text: str


def signed(value: int) -> str:
    return f"{value:+d}"


def total_breakdown(result: EvaluationResult) -> str:
    """Signed subtotals run together, e.g. ``+8+1-3``."""
    return "".join(signed(o.subtotal) for o in result.outcomes)


def roll_line(outcome: Outcome) -> str:
    """Each roll carrying the term's sign, then the term in parentheses, e.g. ``+3+5(2d6)``.

    Constants have no rolls, so they render as just ``(5)``.
    """
    mark = "-" if outcome.term.sign < 0 else "+"
    rolls = "".join(f"{mark}{r}" for r in outcome.rolls)
    return f"{rolls}({outcome.term.notation})"


def title(result: EvaluationResult) -> str:
    return f"{result.grand_total} = {total_breakdown(result)}"


def subtitle(result: EvaluationResult) -> str:
    return " ".join(roll_line(o) for o in result.outcomes)


def copy_text(result: EvaluationResult, notation: str) -> str:
    return f"{result.grand_total} ({notation})"


def render(result: EvaluationResult, notation: str) -> RollDisplay:
    return RollDisplay(
        title=title(result),
        subtitle=subtitle(result),
        copy_text=copy_text(result, notation),
    )
