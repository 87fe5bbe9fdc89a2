"""In-memory logging adapters for testing.

No-op implementations of the InitLogging and FlushLogging protocols.
"""

from __future__ import annotations

from lib_layered_config import Config


def init_logging_in_memory(config: Config) -> None:
    """No-op -- satisfies the InitLogging protocol without side effects."""


def flush_logging_in_memory() -> None:
    """No-op -- satisfies the FlushLogging protocol."""


__all__ = ["flush_logging_in_memory", "init_logging_in_memory"]
