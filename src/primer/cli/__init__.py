"""Primer CLI -- terminal front end for the exercises.

This module is NEVER imported from primer/__init__.py.
It is only loaded via the ``primer`` entry point defined in pyproject.toml.
"""

from __future__ import annotations

import logging

import click
from dotenv import find_dotenv, load_dotenv
from rich.console import Console
from rich.logging import RichHandler

_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


@click.group()
@click.option(
    "--log-level",
    default="WARNING",
    envvar="PRIMER_LOG_LEVEL",
    type=click.Choice(_LOG_LEVELS, case_sensitive=False),
    help="Logging verbosity (logs go to stderr).",
)
@click.version_option(package_name="primer")
@click.pass_context
def cli(ctx: click.Context, log_level: str) -> None:
    """Primer: annotated introductory exercises."""
    ctx.ensure_object(dict)
    ctx.obj["log_level"] = log_level.upper()
    _configure_logging(ctx.obj["log_level"])


def _configure_logging(level: str) -> None:
    """Route the ``primer`` logger through Rich on stderr."""
    logger = logging.getLogger("primer")
    logger.setLevel(level)
    logger.propagate = False
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)
    logger.addHandler(
        RichHandler(console=Console(stderr=True), show_path=False)
    )


def main() -> None:
    """Console script entry point: load ``.env`` then dispatch."""
    # Search from the working directory, not from this package's location.
    load_dotenv(find_dotenv(usecwd=True))
    cli(obj={})


# Register subcommands after cli group is defined
from primer.cli.commands.guess import guess  # noqa: E402
from primer.cli.commands.variables import variables  # noqa: E402

cli.add_command(guess)
cli.add_command(variables)
