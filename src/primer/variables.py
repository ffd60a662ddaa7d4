"""A short tour of names and bindings.

Covers names that are never rebound, immutable values, rebinding, module
constants, scopes, and rebinding a name to a value of a different type.
"""

from __future__ import annotations

from typing import Final

from pydantic import BaseModel, ValidationError

# Constants are ALL_CAPS by convention. ``Final`` lets type checkers flag
# reassignment; the interpreter itself does not enforce it.
THREE_HOURS_IN_SECONDS: Final = 60 * 60 * 3


class _FrozenValue(BaseModel):
    model_config = {"frozen": True}

    x: int


def _inner_scope(z: int) -> str:
    # A function body is a new scope: this ``z`` hides the caller's
    # until the function returns.
    z = z * 2
    return f"The value of z within this scope is {z}."


def demonstrate() -> list[str]:
    """Return the lines printed by the variables tour, in order."""
    lines: list[str] = []

    # Immutable values
    x: int = 5
    lines.append(f"The value of x is {x}.")

    frozen = _FrozenValue(x=x)
    try:
        frozen.x = 6  # type: ignore[misc]
    except ValidationError as exc:
        lines.append(f"x cannot be reassigned: {exc.errors()[0]['msg'].lower()}")

    # Rebinding
    y = 10
    lines.append(f"The value of y is {y}.")
    y = 12
    lines.append(f"The value of y is now {y}.")

    # Constants
    lines.append(f"Three hours is equal to {THREE_HOURS_IN_SECONDS} seconds.")

    # Scopes
    z = 5
    z = 10  # the first value is never read
    lines.append(_inner_scope(z))
    lines.append(f"The value of z within this scope is {z}.")

    # Rebinding to a new type, built from the old value
    spaces = "     "
    spaces = len(spaces)
    lines.append(f"There are {spaces} spaces in the string.")

    return lines
