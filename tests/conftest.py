"""Shared pytest fixtures for domain, CLI and module-entry tests.

CLI tests run the real group; where a test needs to control configuration
or observe display, it patches the module attribute the CLI calls.
"""

from __future__ import annotations

import dataclasses
import re
from collections.abc import Callable, Iterator
from pathlib import Path
from typing import Any

import lib_cli_exit_tools
import pytest
from click.testing import CliRunner
from lib_layered_config import Config


def _load_dotenv() -> None:
    """Load the project ``.env`` when present so local LOG_* settings apply."""
    from dotenv import load_dotenv

    env_file = Path(__file__).parent.parent / ".env"
    if env_file.exists():
        load_dotenv(env_file)


_load_dotenv()

ANSI_ESCAPE_PATTERN = re.compile(r"\x1B\[[0-?]*[ -/]*[@-~]")
CONFIG_FIELDS: tuple[str, ...] = tuple(field.name for field in dataclasses.fields(type(lib_cli_exit_tools.config)))


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a fresh CliRunner per test.

    Assert on ``result.stdout``; log records may land on stderr.
    """
    return CliRunner()


@pytest.fixture
def strip_ansi() -> Callable[[str], str]:
    """Return a helper that strips ANSI escape sequences from rich output."""

    def _strip(value: str) -> str:
        return ANSI_ESCAPE_PATTERN.sub("", value)

    return _strip


@pytest.fixture
def managed_traceback_state() -> Iterator[None]:
    """Start from clean ``lib_cli_exit_tools.config`` flags and put the old ones back afterwards."""
    saved = {name: getattr(lib_cli_exit_tools.config, name) for name in CONFIG_FIELDS}
    lib_cli_exit_tools.reset_config()
    lib_cli_exit_tools.config.traceback = False
    lib_cli_exit_tools.config.traceback_force_color = False
    try:
        yield
    finally:
        for name, value in saved.items():
            setattr(lib_cli_exit_tools.config, name, value)


@pytest.fixture
def clear_config_cache() -> Iterator[None]:
    """Clear the ``get_config`` cache before and after the test."""
    from greetcalc.adapters.config import loader

    loader.get_config.cache_clear()
    yield
    loader.get_config.cache_clear()


@pytest.fixture
def config_factory() -> Callable[[dict[str, Any]], Config]:
    """Build real ``Config`` objects from plain dicts without touching the filesystem."""

    def _factory(data: dict[str, Any]) -> Config:
        return Config(data, {})

    return _factory


@pytest.fixture
def config_source(monkeypatch: pytest.MonkeyPatch) -> Callable[[Callable[[str | None], Config]], list[str | None]]:
    """Route the CLI's configuration reads through a test function.

    Call it with ``build(profile) -> Config``; it returns the list of
    profiles requested, in order.
    """
    from greetcalc.adapters.cli import context

    def _install(build: Callable[[str | None], Config]) -> list[str | None]:
        requested: list[str | None] = []

        def _get_config(*, profile: str | None = None, **_: Any) -> Config:
            requested.append(profile)
            return build(profile)

        monkeypatch.setattr(context, "get_config", _get_config)
        return requested

    return _install


@pytest.fixture
def display_calls(monkeypatch: pytest.MonkeyPatch) -> list[dict[str, Any]]:
    """Record what the ``config`` command asks to display instead of rendering it."""
    from greetcalc.adapters.cli.commands import config as config_command

    calls: list[dict[str, Any]] = []

    def _recording_display(config: Config, **kwargs: Any) -> None:
        calls.append({"config": config, **kwargs})

    monkeypatch.setattr(config_command, "display_config", _recording_display)
    return calls
