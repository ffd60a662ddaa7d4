"""Primer: annotated introductory exercises.

A number-guessing game and a short tour of names, rebinding, constants,
and scoping. Each exercise is usable as a library, from the ``primer`` CLI,
or through the walkthroughs in ``cookbook/``.
"""

from primer._version import __version__

# Guessing game
from primer.game import GuessingGame, compare, parse_guess, play

# Variables tour
from primer.variables import THREE_HOURS_IN_SECONDS, demonstrate

# Models
from primer.models.config import GameConfig, U32_MAX
from primer.models.outcome import GuessResult, Ordering

# Exceptions
from primer.exceptions import (
    GameOverError,
    GuessParseError,
    InputClosedError,
    InputReadError,
    PrimerError,
)

__all__ = [
    "__version__",
    "GuessingGame",
    "compare",
    "parse_guess",
    "play",
    "THREE_HOURS_IN_SECONDS",
    "demonstrate",
    "GameConfig",
    "U32_MAX",
    "GuessResult",
    "Ordering",
    "GameOverError",
    "GuessParseError",
    "InputClosedError",
    "InputReadError",
    "PrimerError",
]
