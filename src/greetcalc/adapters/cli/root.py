"""The ``greetcalc`` command group and its global options."""

from __future__ import annotations

import lib_cli_exit_tools
import rich_click as click

from greetcalc import __init__conf__
from greetcalc.adapters.logging import init_logging

from .commands import cli_add, cli_config, cli_greet, cli_info, cli_multiply
from .constants import CLICK_CONTEXT_SETTINGS
from .context import resolve_state


@click.group(
    help=__init__conf__.title,
    context_settings=CLICK_CONTEXT_SETTINGS,
    invoke_without_command=True,
)
@click.version_option(
    version=__init__conf__.version,
    prog_name=__init__conf__.shell_command,
    message=f"{__init__conf__.shell_command} version {__init__conf__.version}",
)
@click.option("--traceback/--no-traceback", default=False, help="Show full Python traceback on errors")
@click.option("--profile", default=None, help="Load configuration from a named profile (e.g., 'production', 'test')")
@click.option(
    "--set",
    "set_overrides",
    multiple=True,
    metavar="SECTION.KEY=VALUE",
    help="Override a configuration setting (repeatable).",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool, profile: str | None, set_overrides: tuple[str, ...]) -> None:
    """Resolve configuration, start logging, then run the subcommand.

    Without a subcommand the help text is printed.
    """
    lib_cli_exit_tools.config.traceback = traceback
    lib_cli_exit_tools.config.traceback_force_color = traceback
    ctx.obj = resolve_state(profile, set_overrides)
    init_logging(ctx.obj.config)

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


for _command in (cli_info, cli_greet, cli_add, cli_multiply, cli_config):
    cli.add_command(_command)


__all__ = ["cli"]
