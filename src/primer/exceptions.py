"""Primer exception hierarchy.

All Primer-specific exceptions inherit from PrimerError.
"""


class PrimerError(Exception):
    """Base exception for all Primer errors."""


class GuessParseError(PrimerError):
    """Raised when a line of input is not a valid guess.

    Recoverable: the game loop skips the line and prompts again.
    """

    def __init__(self, raw: str) -> None:
        self.raw = raw
        super().__init__(f"Not a valid guess: {raw.strip()!r}")


class InputReadError(PrimerError):
    """Raised when reading a guess from the input stream fails."""

    def __init__(self, message: str = "Failed to read guess.") -> None:
        super().__init__(message)


class InputClosedError(InputReadError):
    """Raised when the input stream is exhausted before a correct guess."""

    def __init__(self) -> None:
        super().__init__("Input closed before the secret number was guessed.")


class GameOverError(PrimerError):
    """Raised when submitting a guess to a game that is already won."""

    def __init__(self, secret: int) -> None:
        self.secret = secret
        super().__init__(f"Game is already over (the secret number was {secret}).")
