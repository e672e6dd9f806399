"""Public package surface exposing the utility functions and their aggregate.

Routes imports through the architectural layers:
- Domain exports: ``greet``, ``add``, ``multiply`` and the ``default`` bundle
- Configuration: the cached layered ``get_config`` loader
- Metadata: package information
"""

from __future__ import annotations

# Metadata
from .__init__conf__ import print_info

# Configuration
from .adapters.config.loader import get_config

# Domain exports
from .domain.behaviors import (
    GREETING_PREFIX,
    GREETING_SUFFIX,
    Number,
    add,
    greet,
    multiply,
)
from .domain.bundle import UtilityBundle, default

__all__ = [
    "GREETING_PREFIX",
    "GREETING_SUFFIX",
    "Number",
    "UtilityBundle",
    "add",
    "default",
    "get_config",
    "greet",
    "multiply",
    "print_info",
]
