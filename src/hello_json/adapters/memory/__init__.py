"""In-memory adapter implementations for testing.

Lightweight implementations of the I/O-bound application ports -- no
filesystem, no environment, no logging framework.

Contents:
    * :mod:`.config` - In-memory configuration adapter
    * :mod:`.logging` - In-memory logging adapters
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .config import get_config_in_memory
from .logging import flush_logging_in_memory, init_logging_in_memory

# Static conformance assertions
if TYPE_CHECKING:
    from hello_json.application.ports import FlushLogging, GetConfig, InitLogging

    _assert_get_config: GetConfig = get_config_in_memory
    _assert_init_logging: InitLogging = init_logging_in_memory
    _assert_flush_logging: FlushLogging = flush_logging_in_memory

__all__ = [
    "flush_logging_in_memory",
    "get_config_in_memory",
    "init_logging_in_memory",
]
