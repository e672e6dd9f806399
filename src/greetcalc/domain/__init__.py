"""Domain layer - pure functions with no I/O or framework dependencies.

Contents:
    * :mod:`.behaviors` - Greeting and arithmetic functions
    * :mod:`.bundle` - The read-only aggregate over those functions
    * :mod:`.enums` - Domain enumerations (OutputFormat)
"""

from __future__ import annotations

from .behaviors import (
    GREETING_PREFIX,
    GREETING_SUFFIX,
    Number,
    add,
    greet,
    multiply,
)
from .bundle import UtilityBundle, default
from .enums import OutputFormat

__all__ = [
    # Behaviors
    "GREETING_PREFIX",
    "GREETING_SUFFIX",
    "Number",
    "add",
    "greet",
    "multiply",
    # Aggregate
    "UtilityBundle",
    "default",
    # Enums
    "OutputFormat",
]
