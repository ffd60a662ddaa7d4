"""Guessing Game

Part 1 - A scripted round: build a game with a fixed secret, feed it guesses
one at a time with submit(), and look at what comes back. No keyboard needed.

Part 2 - The real thing: play() drives the prompt/read/compare loop against
your terminal until you find the secret.

Demonstrates: GameConfig, GuessingGame, submit(), GuessResult, Ordering,
              GuessParseError, play(), InputReadError
"""

import sys

from primer import (
    GameConfig,
    GuessingGame,
    GuessParseError,
    InputReadError,
    Ordering,
    play,
)


# ---------------------------------------------------------------------------
# Part 1: A scripted round
# ---------------------------------------------------------------------------

def part1_scripted_round():
    """Play a round where we already know the answer."""
    print("=" * 60)
    print("PART 1 - Scripted round")
    print("=" * 60)

    # GameConfig is a pydantic model. Keyword arguments are validated when
    # the object is built: GameConfig(low=10, high=5) raises right here
    # instead of failing later inside the game.
    config = GameConfig(low=1, high=100)

    # Passing secret= skips the random draw, which makes the round repeatable.
    game = GuessingGame(config, secret=42)

    # A tuple is a fixed sequence; the loop below binds each item to `raw`
    # in turn. Note the raw strings still carry their newline, exactly as
    # they would when read from a terminal.
    for raw in ("10\n", "banana\n", "-3\n", "90\n", "42\n"):
        # try/except is how Python signals "this might not work". A line that
        # is not a whole non-negative number raises GuessParseError, and we
        # simply move on to the next one: `continue` restarts the loop.
        try:
            result = game.submit(raw)
        except GuessParseError as exc:
            print(f"skipped:  {exc}")
            continue

        # f-strings evaluate the expressions inside {} and format them into
        # the string. Any expression works, including attribute access.
        print(f"guess #{result.attempt}: {result.guess:>3}  -> {result.ordering.value}")

        # Enum members are singletons, so `is` is the idiomatic comparison.
        if result.ordering is Ordering.EQUAL:
            print(game.describe(result))
            # `break` leaves the loop early. Anything after the winning guess
            # is never submitted.
            break

    # Parse failures did not count: only three guesses were accepted.
    print(f"\nattempts: {game.attempts}, finished: {game.finished}")


# ---------------------------------------------------------------------------
# Part 2: Interactive play
# ---------------------------------------------------------------------------

def part2_interactive():
    """Play against the terminal until the secret is found."""
    print("\n" + "=" * 60)
    print("PART 2 - Your turn (Ctrl-D to give up)")
    print("=" * 60)

    # Without secret= or a seed, the secret comes from an OS-seeded RNG.
    game = GuessingGame()

    # Functions are ordinary values in Python: sys.stdin.readline and print
    # are handed to play() without calling them. play() calls them for us,
    # once per line read and once per line shown.
    try:
        result = play(game, sys.stdin.readline, print)
    except InputReadError as exc:
        # Running out of input is fatal. There is nothing left to read, so
        # retrying would loop forever.
        print(f"\nGame abandoned: {exc} (it was {game.secret})")
        return

    print(f"Found it in {result.attempt} guesses.")


if __name__ == "__main__":
    part1_scripted_round()
    part2_interactive()
