"""CLI utility stories: greet, add and multiply commands plus the NUMBER type."""

from __future__ import annotations

import math

import click
import pytest
from click.testing import CliRunner, Result

from greetcalc.adapters import cli as cli_mod
from greetcalc.adapters.cli.params import NUMBER


def _invoke(runner: CliRunner, *args: str) -> Result:
    return runner.invoke(cli_mod.cli, list(args))


# ======================== greet ========================


@pytest.mark.os_agnostic
def test_greet_prints_the_greeting(cli_runner: CliRunner) -> None:
    result = _invoke(cli_runner, "greet", "World")

    assert result.exit_code == 0
    assert result.stdout == "Hello, World!\n"


@pytest.mark.os_agnostic
def test_greet_accepts_an_empty_name(cli_runner: CliRunner) -> None:
    result = _invoke(cli_runner, "greet", "")

    assert result.exit_code == 0
    assert result.stdout == "Hello, !\n"


@pytest.mark.os_agnostic
def test_greet_without_a_name_is_a_usage_error(cli_runner: CliRunner) -> None:
    result = _invoke(cli_runner, "greet")

    assert result.exit_code == click.UsageError.exit_code


# ======================== add / multiply ========================


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("args", "expected"),
    [
        (("add", "2", "3"), "5"),
        (("add", "-1", "1"), "0"),
        (("add", "0.5", "0.25"), "0.75"),
        (("add", "1e3", "1"), "1001.0"),
        (("add", "inf", "1"), "inf"),
        (("multiply", "4", "5"), "20"),
        (("multiply", "-3", "2"), "-6"),
        (("multiply", "0.5", "4"), "2.0"),
        (("multiply", "-inf", "2"), "-inf"),
    ],
)
def test_arithmetic_commands_print_the_result(
    cli_runner: CliRunner,
    args: tuple[str, ...],
    expected: str,
) -> None:
    result = _invoke(cli_runner, *args)

    assert result.exit_code == 0, result.output
    assert result.stdout.strip() == expected


@pytest.mark.os_agnostic
def test_multiply_by_nan_prints_nan(cli_runner: CliRunner) -> None:
    result = _invoke(cli_runner, "multiply", "nan", "3")

    assert result.exit_code == 0
    assert result.stdout.strip() == "nan"


@pytest.mark.os_agnostic
@pytest.mark.parametrize("command", ["add", "multiply"])
def test_arithmetic_commands_reject_non_numeric_operands(
    cli_runner: CliRunner,
    command: str,
) -> None:
    result = _invoke(cli_runner, command, "two", "3")

    assert result.exit_code == click.UsageError.exit_code
    assert "is not a number" in result.output


@pytest.mark.os_agnostic
def test_arithmetic_commands_require_two_operands(
    cli_runner: CliRunner,
) -> None:
    result = _invoke(cli_runner, "add", "1")

    assert result.exit_code == click.UsageError.exit_code


@pytest.mark.os_agnostic
def test_arithmetic_command_help_still_works(cli_runner: CliRunner) -> None:
    result = _invoke(cli_runner, "multiply", "--help")

    assert result.exit_code == 0
    assert "product" in result.stdout


# ======================== NUMBER parameter type ========================


@pytest.mark.os_agnostic
@pytest.mark.parametrize(("raw", "expected"), [("42", 42), ("-7", -7), ("1_000", 1000), (" 3 ", 3)])
def test_number_keeps_integer_literals_integral(raw: str, expected: int) -> None:
    value = NUMBER.convert(raw, None, None)

    assert value == expected
    assert isinstance(value, int)


@pytest.mark.os_agnostic
@pytest.mark.parametrize(("raw", "expected"), [("2.5", 2.5), ("-0.125", -0.125), ("1e3", 1000.0), ("-inf", -math.inf)])
def test_number_falls_back_to_float(raw: str, expected: float) -> None:
    value = NUMBER.convert(raw, None, None)

    assert value == expected
    assert isinstance(value, float)


@pytest.mark.os_agnostic
def test_number_passes_existing_numbers_through() -> None:
    assert NUMBER.convert(7, None, None) == 7
    assert NUMBER.convert(0.5, None, None) == 0.5


@pytest.mark.os_agnostic
@pytest.mark.parametrize("raw", ["", "abc", "1,5", "0x1G"])
def test_number_rejects_unparseable_text(raw: str) -> None:
    with pytest.raises(click.BadParameter, match="is not a number"):
        NUMBER.convert(raw, None, None)
