"""Configuration adapter - loading and typed section access.

Provides adapters for configuration management using lib_layered_config.

Contents:
    * :mod:`.loader` - Configuration loading with caching
    * :mod:`.settings` - ``[cli]`` section parsing
"""

from __future__ import annotations

from .loader import get_config, get_default_config_path, validate_profile
from .settings import CliConfigModel, load_cli_settings

__all__ = [
    "CliConfigModel",
    "get_config",
    "get_default_config_path",
    "load_cli_settings",
    "validate_profile",
]
