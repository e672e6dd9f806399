"""Pure domain functions with no I/O or framework dependencies."""

from __future__ import annotations

from typing import TypeAlias

Number: TypeAlias = int | float
"""Operand and result type of the arithmetic helpers."""

GREETING_PREFIX = "Hello, "
GREETING_SUFFIX = "!"


def greet(name: str) -> str:
    """Return a greeting addressed to ``name``.

    Any string is accepted, including the empty string.

    Example:
        >>> greet("World")
        'Hello, World!'
        >>> greet("")
        'Hello, !'
    """
    return f"{GREETING_PREFIX}{name}{GREETING_SUFFIX}"


def add(a: Number, b: Number) -> Number:
    """Return the sum of ``a`` and ``b``.

    Uses Python's native ``+``; float rounding, ``inf`` and ``nan`` behave
    exactly as they do for the built-in operator.

    Example:
        >>> add(2, 3)
        5
        >>> add(-1, 1)
        0
    """
    return a + b


def multiply(a: Number, b: Number) -> Number:
    """Return the product of ``a`` and ``b``.

    Example:
        >>> multiply(4, 5)
        20
        >>> multiply(-3, 2)
        -6
    """
    return a * b


__all__ = [
    "GREETING_PREFIX",
    "GREETING_SUFFIX",
    "Number",
    "add",
    "greet",
    "multiply",
]
