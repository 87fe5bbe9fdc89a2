"""Adapters layer - infrastructure and framework integrations.

Contents:
    * :mod:`.cli` - Click CLI framework integration
    * :mod:`.config` - Configuration loading with lib_layered_config
    * :mod:`.logging` - Logging setup with lib_log_rich
    * :mod:`.serialization` - JSON rendering with orjson
    * :mod:`.memory` - In-memory test doubles
"""

from __future__ import annotations

__all__: list[str] = []
