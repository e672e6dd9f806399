"""Configuration state the root group resolves once and hands to subcommands."""

from __future__ import annotations

from dataclasses import dataclass

import click
from lib_layered_config import Config

from greetcalc.adapters.config.loader import get_config
from greetcalc.adapters.config.overrides import apply_overrides


@dataclass(frozen=True, slots=True)
class CliState:
    """Configuration in effect for one invocation.

    Attributes:
        config: Layered configuration with ``--set`` overrides applied.
        profile: Profile the configuration was read from, if any.
        overrides: Raw ``--set`` values, kept so a subcommand that switches
            profile can reapply them.
    """

    config: Config
    profile: str | None = None
    overrides: tuple[str, ...] = ()


def resolve_state(profile: str | None, overrides: tuple[str, ...] = ()) -> CliState:
    """Read configuration for ``profile`` and apply ``overrides`` on top.

    Raises:
        click.BadParameter: The profile name is rejected by the loader.
        click.UsageError: An override is not ``SECTION.KEY=VALUE``.
    """
    try:
        config = get_config(profile=profile)
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="--profile") from exc
    try:
        config = apply_overrides(config, overrides)
    except ValueError as exc:
        raise click.UsageError(str(exc)) from exc
    return CliState(config=config, profile=profile, overrides=overrides)


pass_state = click.make_pass_decorator(CliState)


__all__ = ["CliState", "pass_state", "resolve_state"]
