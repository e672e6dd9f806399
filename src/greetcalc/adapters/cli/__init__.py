"""rich-click command-line interface for greetcalc.

Public facade for the CLI subsystem; consumers import from here and stay
insulated from the internal module layout.
"""

from __future__ import annotations

from .commands import cli_add, cli_config, cli_greet, cli_info, cli_multiply
from .constants import CLICK_CONTEXT_SETTINGS, NUMERIC_CONTEXT_SETTINGS
from .context import CliState, pass_state, resolve_state
from .exit_codes import ExitCode
from .main import main
from .params import NUMBER, NumberParamType
from .root import cli

__all__ = [
    "CLICK_CONTEXT_SETTINGS",
    "NUMERIC_CONTEXT_SETTINGS",
    "ExitCode",
    "NUMBER",
    "NumberParamType",
    "CliState",
    "pass_state",
    "resolve_state",
    "cli",
    "main",
    "cli_add",
    "cli_config",
    "cli_greet",
    "cli_info",
    "cli_multiply",
]
