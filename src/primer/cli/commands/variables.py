"""primer variables -- walk through names, rebinding, constants, and scopes."""

from __future__ import annotations

import click

from primer.cli.formatting import format_lesson, get_console


@click.command()
def variables() -> None:
    """Print the variables tour."""
    from primer.variables import demonstrate

    format_lesson(demonstrate(), get_console())
