"""Shared test fixtures for Primer."""

import io

import pytest

from primer.game import GuessingGame
from primer.models.config import GameConfig


@pytest.fixture
def config() -> GameConfig:
    return GameConfig(low=1, high=100, seed=1234)


@pytest.fixture
def game() -> GuessingGame:
    """A game whose secret is fixed at 42."""
    return GuessingGame(GameConfig(), secret=42)


@pytest.fixture
def lines():
    """Build a readline callable over the given input lines."""

    def _make(*values: str):
        return io.StringIO("".join(f"{v}\n" for v in values)).readline

    return _make


@pytest.fixture
def transcript() -> list[str]:
    return []
