"""Rich formatting helpers for the Primer CLI.

Rich auto-detects TTY and degrades gracefully when piped (no ANSI codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape

if TYPE_CHECKING:
    from primer.models.outcome import GuessResult


def get_console() -> Console:
    """Create a Rich Console that auto-detects TTY for graceful pipe degradation."""
    return Console(stderr=False)


_STYLES = {
    "less": "yellow",
    "greater": "yellow",
    "equal": "bold green",
}


def format_line(text: str, console: Console) -> None:
    """Print a plain game line without markup or highlighting."""
    console.print(escape(text), highlight=False)


def format_result(result: GuessResult, message: str, console: Console) -> None:
    """Print the verdict for a scored guess."""
    style = _STYLES[result.ordering.value]
    console.print(f"[{style}]{escape(message)}[/{style}]", highlight=False)


def format_lesson(lines: list[str], console: Console) -> None:
    """Print the variables tour, one line per statement."""
    for line in lines:
        format_line(line, console)


def format_error(message: str, console: Console) -> None:
    """Display an error message."""
    console.print(f"[red]Error:[/red] {escape(message)}", highlight=False)
