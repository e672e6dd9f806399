"""Configuration display command."""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import rich_click as click

from greetcalc.adapters.config.display import display_config
from greetcalc.domain.enums import OutputFormat

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import CliState, pass_state, resolve_state
from ..exit_codes import ExitCode

logger = logging.getLogger(__name__)


@click.command("config", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option(
    "--format",
    "output_format",
    type=click.Choice([f.value for f in OutputFormat], case_sensitive=False),
    default=OutputFormat.HUMAN.value,
    help="Output format (human-readable or JSON)",
)
@click.option("--section", default=None, help="Show only a specific configuration section (e.g., 'lib_log_rich')")
@click.option("--profile", default=None, help="Read another profile; root --set overrides still apply")
@pass_state
@click.pass_context
def cli_config(
    ctx: click.Context,
    state: CliState,
    output_format: str,
    section: str | None,
    profile: str | None,
) -> None:
    """Display the current merged configuration from all sources.

    Precedence: defaults -> app -> host -> user -> dotenv -> env
    """
    if profile:
        state = resolve_state(profile, state.overrides)
    fmt = OutputFormat(output_format.lower())

    extra = {"command": "config", "format": fmt.value, "profile": state.profile}
    with lib_log_rich.runtime.bind(job_id="cli-config", extra=extra):
        logger.info("Displaying configuration", extra={"section": section})
        try:
            display_config(state.config, output_format=fmt, section=section, profile=state.profile)
        except ValueError as exc:
            click.echo(f"Error: {exc}", err=True)
            ctx.exit(ExitCode.INVALID_ARGUMENT)


__all__ = ["cli_config"]
