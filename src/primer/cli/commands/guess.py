"""primer guess -- play the number-guessing game."""

from __future__ import annotations

import sys
from typing import Optional

import click
from pydantic import ValidationError

from primer.cli.formatting import format_error, format_line, format_result, get_console


@click.command()
@click.option("--low", default=1, type=int, envvar="PRIMER_LOW", show_default=True, help="Smallest possible secret.")
@click.option("--high", default=100, type=int, envvar="PRIMER_HIGH", show_default=True, help="Largest possible secret.")
@click.option("--seed", default=None, type=int, envvar="PRIMER_SEED", help="Seed for a reproducible secret.")
def guess(low: int, high: int, seed: Optional[int]) -> None:
    """Guess the secret number, one line per guess.

    Lines that are not whole non-negative numbers are ignored.
    The game ends when the guess is correct.
    """
    from primer.exceptions import PrimerError
    from primer.game import GuessingGame, play
    from primer.models.config import GameConfig

    console = get_console()

    try:
        config = GameConfig(low=low, high=high, seed=seed)
    except ValidationError as e:
        format_error(_describe_invalid(e), console)
        raise SystemExit(1) from None

    game = GuessingGame(config)

    try:
        play(
            game,
            sys.stdin.readline,
            emit=lambda text: format_line(text, console),
            report=lambda result, message: format_result(result, message, console),
        )
    except PrimerError as e:
        format_error(str(e), console)
        raise SystemExit(1) from None


def _describe_invalid(error: ValidationError) -> str:
    """First validation error, prefixed with the option it came from."""
    first = error.errors()[0]
    if first["loc"]:
        return f"--{first['loc'][0]}: {first['msg']}"
    return first["msg"]
