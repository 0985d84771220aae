from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Protocol, TypeAlias


# Integers follow a 32-bit signed range; anything outside is rejected, never wrapped.
INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

Sign: TypeAlias = Literal[1, -1]


class RandomSource(Protocol):
    """Anything with an inclusive ``randint``, e.g. ``random.Random`` or ``secrets.SystemRandom``."""

    def randint(self, a: int, b: int) -> int: ...


@dataclass(frozen=True)
class Term:
    """One signed unit of an expression.

    ``sides == 1`` encodes a bare constant: it always yields ``amount`` and
    never touches the random source.
    """

    sign: Sign
    amount: int
    sides: int

    @property
    def is_constant(self) -> bool:
        return self.sides == 1

    @property
    def notation(self) -> str:
        if self.is_constant:
            return str(self.amount)
        return f"{self.amount}d{self.sides}"

    def __str__(self) -> str:
        return ("-" if self.sign < 0 else "+") + self.notation


@dataclass(frozen=True)
class Outcome:
    term: Term
    rolls: tuple[int, ...]
    subtotal: int


@dataclass(frozen=True)
class EvaluationResult:
    grand_total: int
    outcomes: tuple[Outcome, ...]
