"""Configuration models for Primer.

GameConfig holds the guessing game's range and optional seed.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field, model_validator

# Guesses are parsed as unsigned 32-bit integers.
U32_MAX = 2**32 - 1


class GameConfig(BaseModel):
    """Settings for a single guessing game."""

    model_config = {"frozen": True}

    low: int = Field(default=1, ge=0, le=U32_MAX)
    high: int = Field(default=100, ge=0, le=U32_MAX)
    seed: Optional[int] = None  # None = seeded by the OS

    @model_validator(mode="after")
    def _check_range(self) -> GameConfig:
        if self.low > self.high:
            raise ValueError(
                f"low ({self.low}) must not be greater than high ({self.high})"
            )
        return self
