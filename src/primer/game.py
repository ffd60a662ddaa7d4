"""Number-guessing game.

A secret number is drawn from an inclusive range. Each turn reads one line,
parses it as an unsigned integer, and reports whether the guess is too low,
too high, or correct. Lines that do not parse are skipped without counting
as an attempt. The game ends exactly when the guess equals the secret.
"""

from __future__ import annotations

import logging
import random
import re
from collections.abc import Callable
from typing import Optional

from primer.exceptions import (
    GameOverError,
    GuessParseError,
    InputClosedError,
    InputReadError,
)
from primer.models.config import GameConfig, U32_MAX
from primer.models.outcome import GuessResult, Ordering

logger = logging.getLogger(__name__)

# Optional leading "+", then ASCII digits only (no sign "-", no "_" separators).
_GUESS_RE = re.compile(r"\+?[0-9]+")
_U32_DIGITS = len(str(U32_MAX))

_MESSAGES = {
    Ordering.LESS: "Too low - try again.",
    Ordering.GREATER: "Too high - try again.",
}


def parse_guess(raw: str) -> int:
    """Parse one line of input as an unsigned 32-bit guess.

    Surrounding whitespace (including the trailing newline) is ignored.

    Raises:
        GuessParseError: If the text is not a non-negative integer that
            fits in 32 bits.
    """
    text = raw.strip()
    if not _GUESS_RE.fullmatch(text):
        raise GuessParseError(raw)
    # Leading zeros never change the value; anything longer than
    # U32_MAX's digits cannot fit.
    digits = text.lstrip("+").lstrip("0") or "0"
    if len(digits) > _U32_DIGITS:
        raise GuessParseError(raw)
    value = int(digits)
    if value > U32_MAX:
        raise GuessParseError(raw)
    return value


def compare(guess: int, secret: int) -> Ordering:
    """Compare a guess with the secret."""
    if guess < secret:
        return Ordering.LESS
    if guess > secret:
        return Ordering.GREATER
    return Ordering.EQUAL


class GuessingGame:
    """State for one round of the guessing game.

    Args:
        config: Range and seed. Defaults to ``GameConfig()`` (1 to 100).
        rng: Random source. Defaults to ``random.Random(config.seed)``.
        secret: Fixed secret number, bypassing the random draw. Must lie
            within the configured range.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        *,
        rng: Optional[random.Random] = None,
        secret: Optional[int] = None,
    ) -> None:
        self.config = config or GameConfig()
        if secret is None:
            rng = rng or random.Random(self.config.seed)
            secret = rng.randint(self.config.low, self.config.high)
        elif not self.config.low <= secret <= self.config.high:
            raise ValueError(
                f"secret {secret} outside range "
                f"{self.config.low}..{self.config.high}"
            )
        self._secret = secret
        self._history: list[GuessResult] = []
        logger.debug("Secret number drawn: %d", self._secret)

    @property
    def secret(self) -> int:
        return self._secret

    @property
    def attempts(self) -> int:
        """Number of guesses that parsed."""
        return len(self._history)

    @property
    def history(self) -> list[GuessResult]:
        return list(self._history)

    @property
    def finished(self) -> bool:
        return bool(self._history) and self._history[-1].is_correct

    @property
    def prompt(self) -> str:
        return f"Guess a number between {self.config.low} and {self.config.high}."

    def submit(self, raw: str) -> GuessResult:
        """Parse and score one line of input.

        Raises:
            GuessParseError: If the line is not a valid guess. The attempt
                counter is left unchanged.
            GameOverError: If the secret has already been guessed.
        """
        if self.finished:
            raise GameOverError(self._secret)
        guess = parse_guess(raw)
        result = GuessResult(
            guess=guess,
            ordering=compare(guess, self._secret),
            attempt=self.attempts + 1,
        )
        self._history.append(result)
        return result

    def describe(self, result: GuessResult) -> str:
        """Return the message shown to the player for a scored guess."""
        if result.is_correct:
            return f"Correct - the secret number was {self._secret}"
        return _MESSAGES[result.ordering]


def play(
    game: GuessingGame,
    read_line: Callable[[], str],
    emit: Callable[[str], None],
    report: Optional[Callable[[GuessResult, str], None]] = None,
) -> GuessResult:
    """Run the prompt/read/compare loop until the secret is guessed.

    ``read_line`` follows ``io.TextIOBase.readline``: it returns an empty
    string once the stream is exhausted. ``report`` receives each scored
    guess with its verdict message; without it the verdict goes to ``emit``.

    Raises:
        InputReadError: If ``read_line`` raises ``OSError`` or the input
            is not valid text in the stream's encoding.
        InputClosedError: If the input ends before a correct guess.
    """
    while True:
        emit(game.prompt)

        try:
            line = read_line()
        except (OSError, UnicodeDecodeError) as exc:
            raise InputReadError() from exc
        if line == "":
            raise InputClosedError()

        try:
            result = game.submit(line)
        except GuessParseError as exc:
            logger.debug("Skipping input: %s", exc)
            continue

        emit(f"Your guess: {result.guess}")
        if report is None:
            emit(game.describe(result))
        else:
            report(result, game.describe(result))

        if result.is_correct:
            logger.info("Secret guessed in %d attempt(s)", result.attempt)
            return result
