"""Adapters layer - infrastructure and framework integrations.

Contents:
    * :mod:`.config` - Configuration loading, display, and overrides
    * :mod:`.logging` - Logging setup with lib_log_rich
    * :mod:`.cli` - rich-click CLI integration
"""

from __future__ import annotations

__all__: list[str] = []
