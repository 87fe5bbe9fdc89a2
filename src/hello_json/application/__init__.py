"""Application layer - port definitions.

Contents:
    * :mod:`.ports` - Callable Protocol definitions for adapter functions
"""

from __future__ import annotations

from .ports import FlushLogging, GetConfig, InitLogging, RenderGreeting

__all__ = [
    "FlushLogging",
    "GetConfig",
    "InitLogging",
    "RenderGreeting",
]
