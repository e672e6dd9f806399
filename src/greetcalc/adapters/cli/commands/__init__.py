"""CLI command implementations, re-exported for registration on the root group.

Contents:
    * Info command from :mod:`.info`
    * Greeting and arithmetic commands from :mod:`.utility`
    * Config display command from :mod:`.config`
"""

from __future__ import annotations

from .config import cli_config
from .info import cli_info
from .utility import cli_add, cli_greet, cli_multiply

__all__ = [
    "cli_add",
    "cli_config",
    "cli_greet",
    "cli_info",
    "cli_multiply",
]
