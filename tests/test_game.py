"""Tests for the guessing game.

Covers:
- parse_guess accepts unsigned 32-bit integers and rejects everything else
- compare returns the right Ordering
- GuessingGame counts only accepted guesses and refuses guesses after a win
- play() skips bad input, ends exactly on the secret, and aborts on EOF/OSError
"""

import io
import random

import pytest
from hypothesis import given
from hypothesis import strategies as st

from primer.exceptions import (
    GameOverError,
    GuessParseError,
    InputClosedError,
    InputReadError,
)
from primer.game import GuessingGame, compare, parse_guess, play
from primer.models.config import GameConfig, U32_MAX
from primer.models.outcome import Ordering


# ---------------------------------------------------------------------------
# parse_guess
# ---------------------------------------------------------------------------


class TestParseGuess:
    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("42\n", 42),
            ("  7  \n", 7),
            ("0", 0),
            ("+15", 15),
            ("007", 7),
            (str(U32_MAX), U32_MAX),
            ("0" * 5000 + "7", 7),
            ("+0000", 0),
        ],
    )
    def test_valid(self, raw, expected):
        assert parse_guess(raw) == expected

    @pytest.mark.parametrize(
        "raw",
        [
            "", "\n", "abc", "-5", "4.2", "1_000", "12abc", "1 2", "++1",
            str(U32_MAX + 1), "1" + "0" * 10, "9" * 5000,
        ],
    )
    def test_invalid(self, raw):
        with pytest.raises(GuessParseError) as exc_info:
            parse_guess(raw)
        assert exc_info.value.raw == raw

    @given(st.integers(min_value=0, max_value=U32_MAX))
    def test_any_u32_parses(self, value):
        assert parse_guess(f"{value}\n") == value

    @given(st.integers(max_value=-1))
    def test_negative_never_parses(self, value):
        with pytest.raises(GuessParseError):
            parse_guess(str(value))


class TestCompare:
    def test_less(self):
        assert compare(3, 10) is Ordering.LESS

    def test_greater(self):
        assert compare(11, 10) is Ordering.GREATER

    def test_equal(self):
        assert compare(10, 10) is Ordering.EQUAL


# ---------------------------------------------------------------------------
# GuessingGame
# ---------------------------------------------------------------------------


class TestGuessingGame:
    def test_seed_is_reproducible(self, config):
        assert GuessingGame(config).secret == GuessingGame(config).secret

    def test_custom_rng(self):
        rng = random.Random(99)
        expected = random.Random(99).randint(1, 100)
        assert GuessingGame(rng=rng).secret == expected

    @given(st.integers(min_value=0, max_value=10_000))
    def test_secret_within_range(self, seed):
        cfg = GameConfig(low=5, high=9, seed=seed)
        assert 5 <= GuessingGame(cfg).secret <= 9

    def test_single_value_range(self):
        assert GuessingGame(GameConfig(low=7, high=7)).secret == 7

    def test_fixed_secret_outside_range_rejected(self):
        with pytest.raises(ValueError):
            GuessingGame(GameConfig(low=1, high=10), secret=11)

    def test_submit_scores_guess(self, game):
        result = game.submit("10\n")
        assert result.guess == 10
        assert result.ordering is Ordering.LESS
        assert result.attempt == 1
        assert not result.is_correct
        assert not game.finished

    def test_parse_failure_not_counted(self, game):
        with pytest.raises(GuessParseError):
            game.submit("banana\n")
        assert game.attempts == 0
        game.submit("50")
        assert game.attempts == 1

    def test_out_of_range_guess_is_compared(self, game):
        assert game.submit("500").ordering is Ordering.GREATER

    def test_win_finishes_game(self, game):
        game.submit("41")
        result = game.submit("42")
        assert result.is_correct
        assert result.attempt == 2
        assert game.finished
        assert [r.guess for r in game.history] == [41, 42]

    def test_submit_after_win_raises(self, game):
        game.submit("42")
        with pytest.raises(GameOverError) as exc_info:
            game.submit("42")
        assert exc_info.value.secret == 42

    def test_describe(self, game):
        assert game.describe(game.submit("1")) == "Too low - try again."
        assert game.describe(game.submit("99")) == "Too high - try again."
        assert game.describe(game.submit("42")) == "Correct - the secret number was 42"

    def test_prompt_uses_range(self):
        game = GuessingGame(GameConfig(low=10, high=20), secret=15)
        assert game.prompt == "Guess a number between 10 and 20."


# ---------------------------------------------------------------------------
# play loop
# ---------------------------------------------------------------------------


class TestPlay:
    def test_terminates_on_correct_guess(self, game, lines, transcript):
        result = play(game, lines("10", "90", "42", "1"), transcript.append)
        assert result.guess == 42
        assert result.attempt == 3
        assert transcript == [
            "Guess a number between 1 and 100.",
            "Your guess: 10",
            "Too low - try again.",
            "Guess a number between 1 and 100.",
            "Your guess: 90",
            "Too high - try again.",
            "Guess a number between 1 and 100.",
            "Your guess: 42",
            "Correct - the secret number was 42",
        ]

    def test_bad_input_is_skipped(self, game, lines, transcript):
        result = play(game, lines("abc", "-3", "", "9999999999", "42"), transcript.append)
        assert result.attempt == 1
        assert transcript.count("Guess a number between 1 and 100.") == 5
        assert transcript[-2:] == ["Your guess: 42", "Correct - the secret number was 42"]

    def test_out_of_range_does_not_crash(self, game, lines, transcript):
        play(game, lines("4000000000", "0", "42"), transcript.append)
        assert "Too high - try again." in transcript
        assert "Too low - try again." in transcript

    def test_report_receives_verdicts(self, game, lines, transcript):
        reported = []
        play(
            game,
            lines("50", "42"),
            transcript.append,
            report=lambda result, message: reported.append((result.ordering, message)),
        )
        assert reported == [
            (Ordering.GREATER, "Too high - try again."),
            (Ordering.EQUAL, "Correct - the secret number was 42"),
        ]
        assert "Too high - try again." not in transcript

    def test_eof_aborts(self, game, lines, transcript):
        with pytest.raises(InputClosedError):
            play(game, lines("1", "2"), transcript.append)
        assert game.attempts == 2
        assert not game.finished

    def test_read_error_aborts(self, game, transcript):
        def broken() -> str:
            raise OSError("stdin is gone")

        with pytest.raises(InputReadError) as exc_info:
            play(game, broken, transcript.append)
        assert str(exc_info.value) == "Failed to read guess."
        assert isinstance(exc_info.value.__cause__, OSError)

    def test_input_closed_is_read_error(self):
        assert issubclass(InputClosedError, InputReadError)

    def test_very_long_number_is_skipped(self, game, lines, transcript):
        result = play(game, lines("9" * 5000, "0" * 5000 + "42"), transcript.append)
        assert result.guess == 42
        assert result.attempt == 1
        assert transcript.count("Guess a number between 1 and 100.") == 2

    def test_undecodable_input_aborts(self, game, transcript):
        stream = io.TextIOWrapper(io.BytesIO(b"\xff\xfe\n42\n"), encoding="utf-8")

        with pytest.raises(InputReadError) as exc_info:
            play(game, stream.readline, transcript.append)
        assert str(exc_info.value) == "Failed to read guess."
        assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)
        assert game.attempts == 0
