"""Application ports — callable Protocol definitions for adapter functions.

Each Protocol class defines a ``__call__`` method whose signature exactly
matches the corresponding adapter function, so module-level functions
satisfy them through structural subtyping (PEP 544).

System Role:
    Sits between domain and adapters. ``Config`` is imported under
    ``TYPE_CHECKING`` only, keeping lib_layered_config out of this layer at
    runtime.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from ..domain.behaviors import Greeting

if TYPE_CHECKING:
    from lib_layered_config import Config


class GetConfig(Protocol):
    """Load layered configuration with application defaults."""

    def __call__(self, *, profile: str | None = ..., start_dir: str | None = ...) -> Config: ...


class InitLogging(Protocol):
    """Initialize lib_log_rich runtime with the provided configuration."""

    def __call__(self, config: Config) -> None: ...


class FlushLogging(Protocol):
    """Drain pending log records before stdout is written."""

    def __call__(self) -> None: ...


class RenderGreeting(Protocol):
    """Serialize a greeting record to a single line of text (no newline)."""

    def __call__(self, greeting: Greeting) -> str: ...


__all__ = [
    "FlushLogging",
    "GetConfig",
    "InitLogging",
    "RenderGreeting",
]
