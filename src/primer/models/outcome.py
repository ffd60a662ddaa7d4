"""Outcome types for the guessing game."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class Ordering(str, enum.Enum):
    """How a guess compares with the secret number."""

    LESS = "less"
    EQUAL = "equal"
    GREATER = "greater"


@dataclass(frozen=True)
class GuessResult:
    """One accepted guess and how it compared.

    ``attempt`` is 1-based and counts only guesses that parsed.
    """

    guess: int
    ordering: Ordering
    attempt: int

    @property
    def is_correct(self) -> bool:
        return self.ordering is Ordering.EQUAL
