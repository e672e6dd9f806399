"""Exit codes set by greetcalc itself.

Usage errors keep click's own code (2); crashes and signals are mapped by
``lib_cli_exit_tools``.
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """Exit codes following errno conventions.

    Example:
        >>> int(ExitCode.INVALID_ARGUMENT)
        22
    """

    SUCCESS = 0
    INVALID_ARGUMENT = 22


__all__ = ["ExitCode"]
