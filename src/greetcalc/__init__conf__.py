"""Static package metadata surfaced to CLI commands and documentation.

Keep these values in sync with ``pyproject.toml``; ``tests/test_metadata.py``
fails when they drift apart.

Contents:
    * Metadata constants (name, version, shell command, ...).
    * ``LAYEREDCONF_*`` identifiers used to locate configuration files.
    * :func:`print_info` - render the metadata block.
"""

from __future__ import annotations

#: Distribution name declared in ``pyproject.toml``.
name = "greetcalc"
#: Human-readable summary shown in CLI help output.
title = "Greeting and arithmetic helpers with a read-only aggregate"
#: Current release version.
version = "1.0.0"
#: Repository homepage.
homepage = "https://github.com/greetcalc/greetcalc"
#: Author attribution.
author = "greetcalc contributors"
#: Contact email.
author_email = "maintainers@greetcalc.dev"
#: Console-script name published by the package.
shell_command = "greetcalc"

#: Vendor segment used by lib_layered_config (macOS/Windows paths).
LAYEREDCONF_VENDOR = "greetcalc"
#: Application segment used by lib_layered_config (macOS/Windows paths).
LAYEREDCONF_APP = "greetcalc"
#: Slug used for XDG paths and ``GREETCALC___*`` environment variables.
LAYEREDCONF_SLUG = "greetcalc"


def print_info() -> None:
    """Print the summarised metadata block used by the CLI ``info`` command.

    Example:
        >>> print_info()  # doctest: +ELLIPSIS
        Info for greetcalc:
        ...
    """
    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("homepage", homepage),
        ("author", author),
        ("author_email", author_email),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    print("\n".join(lines))


__all__ = [
    "LAYEREDCONF_APP",
    "LAYEREDCONF_SLUG",
    "LAYEREDCONF_VENDOR",
    "author",
    "author_email",
    "homepage",
    "name",
    "print_info",
    "shell_command",
    "title",
    "version",
]
