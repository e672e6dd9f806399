"""Greeting and arithmetic commands wrapping the domain functions.

Contents:
    * :func:`cli_greet` - Print ``greet(NAME)``.
    * :func:`cli_add` - Print ``add(A, B)``.
    * :func:`cli_multiply` - Print ``multiply(A, B)``.
"""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import rich_click as click

from greetcalc.domain.behaviors import Number, add, greet, multiply

from ..constants import CLICK_CONTEXT_SETTINGS, NUMERIC_CONTEXT_SETTINGS
from ..params import NUMBER

logger = logging.getLogger(__name__)


@click.command("greet", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("name")
def cli_greet(name: str) -> None:
    """Greet NAME, e.g. ``greetcalc greet World`` prints ``Hello, World!``."""
    with lib_log_rich.runtime.bind(job_id="cli-greet", extra={"command": "greet"}):
        logger.info("Executing greet command")
        click.echo(greet(name))


@click.command("add", context_settings=NUMERIC_CONTEXT_SETTINGS)
@click.argument("a", type=NUMBER)
@click.argument("b", type=NUMBER)
def cli_add(a: Number, b: Number) -> None:
    """Print the sum of A and B."""
    with lib_log_rich.runtime.bind(job_id="cli-add", extra={"command": "add"}):
        logger.info("Executing add command", extra={"a": a, "b": b})
        click.echo(add(a, b))


@click.command("multiply", context_settings=NUMERIC_CONTEXT_SETTINGS)
@click.argument("a", type=NUMBER)
@click.argument("b", type=NUMBER)
def cli_multiply(a: Number, b: Number) -> None:
    """Print the product of A and B."""
    with lib_log_rich.runtime.bind(job_id="cli-multiply", extra={"command": "multiply"}):
        logger.info("Executing multiply command", extra={"a": a, "b": b})
        click.echo(multiply(a, b))


__all__ = ["cli_add", "cli_greet", "cli_multiply"]
