from __future__ import annotations


class DiceError(ValueError):
    """User-facing evaluation errors (fail-fast, no partial result)."""

    code = "DICE_ERROR"

    def __init__(self, message: str) -> None:
        super().__init__(f"[{self.code}] {message}")


class InvalidNotation(DiceError):
    """Empty input, or input that does not match the dice grammar."""

    code = "INVALID_NOTATION"


class InvalidTerm(DiceError):
    """A term with a non-positive amount or side count reached evaluation."""

    code = "INVALID_TERM"


class ArithmeticOverflow(DiceError):
    code = "ARITHMETIC_OVERFLOW"
