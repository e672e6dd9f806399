"""Read-only aggregate bundling the utility functions under one handle."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from .behaviors import Number, add, greet, multiply


@dataclass(frozen=True, slots=True)
class UtilityBundle:
    """Frozen record referencing the greeting and arithmetic functions.

    Consumers that prefer a single import can call through the record
    instead of importing each function by name. The fields hold the very
    same function objects as the module-level exports.

    Attributes:
        greet: Greeting formatter.
        add: Numeric addition.
        multiply: Numeric multiplication.

    Example:
        >>> default.greet("World")
        'Hello, World!'
        >>> default.add is add
        True
    """

    greet: Callable[[str], str]
    add: Callable[[Number, Number], Number]
    multiply: Callable[[Number, Number], Number]


default = UtilityBundle(greet=greet, add=add, multiply=multiply)
"""The aggregate instance, built once at import time."""


__all__ = [
    "UtilityBundle",
    "default",
]
