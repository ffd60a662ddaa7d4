"""Primer data models."""

from primer.models.config import GameConfig, U32_MAX
from primer.models.outcome import GuessResult, Ordering

__all__ = ["GameConfig", "U32_MAX", "GuessResult", "Ordering"]
