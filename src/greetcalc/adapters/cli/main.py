"""Run the ``greetcalc`` group and turn its outcome into a process exit code."""

from __future__ import annotations

import sys
import threading
from collections.abc import Iterator, Sequence
from contextlib import contextmanager

import click
import lib_cli_exit_tools
import lib_log_rich.runtime

from greetcalc import __init__conf__

from .constants import TRACEBACK_SUMMARY_LIMIT, TRACEBACK_VERBOSE_LIMIT
from .exit_codes import ExitCode
from .root import cli


@contextmanager
def _session() -> Iterator[None]:
    """Undo process-wide side effects of a run once it is over.

    ``--traceback`` writes into ``lib_cli_exit_tools.config``; the previous
    flags come back afterwards so repeated in-process runs start clean.
    """
    flags = lib_cli_exit_tools.config
    saved = (flags.traceback, flags.traceback_force_color)
    try:
        yield
    finally:
        flags.traceback, flags.traceback_force_color = saved
        # logging is shut down from the main thread only
        if threading.current_thread() is threading.main_thread() and lib_log_rich.runtime.is_initialised():
            lib_log_rich.runtime.shutdown()


def _report(exc: BaseException) -> int:
    verbose = bool(lib_cli_exit_tools.config.traceback)
    lib_cli_exit_tools.print_exception_message(
        trace_back=verbose,
        length_limit=TRACEBACK_VERBOSE_LIMIT if verbose else TRACEBACK_SUMMARY_LIMIT,
    )
    return lib_cli_exit_tools.get_system_exit_code(exc)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI with ``argv`` (default ``sys.argv[1:]``) and return the exit code.

    Click usage errors print click's own message; any other exception is
    summarised by ``lib_cli_exit_tools``, in full under ``--traceback``.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    with _session():
        try:
            outcome = cli.main(args=args, prog_name=__init__conf__.shell_command, standalone_mode=False)
        except click.ClickException as exc:
            exc.show()
            return exc.exit_code
        except BaseException as exc:  # noqa: BLE001
            return _report(exc)
    # click hands back the code of ctx.exit(n) instead of raising
    return outcome if isinstance(outcome, int) else ExitCode.SUCCESS


__all__ = ["main"]
