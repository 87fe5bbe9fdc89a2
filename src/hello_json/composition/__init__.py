"""Composition root wiring adapters to application ports."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

# Configuration services
from ..adapters.config.loader import get_config

# Logging services
from ..adapters.logging.setup import flush_logging, init_logging

# Serialization services
from ..adapters.serialization.json_renderer import render_greeting

# Static conformance assertions — pyright verifies that each adapter function
# structurally satisfies its corresponding Protocol at type-check time.
if TYPE_CHECKING:
    from ..application.ports import FlushLogging, GetConfig, InitLogging, RenderGreeting

    _assert_get_config: GetConfig = get_config
    _assert_init_logging: InitLogging = init_logging
    _assert_flush_logging: FlushLogging = flush_logging
    _assert_render_greeting: RenderGreeting = render_greeting


@dataclass(frozen=True, slots=True)
class AppServices:
    """Frozen container holding all application port implementations."""

    get_config: GetConfig
    init_logging: InitLogging
    flush_logging: FlushLogging
    render_greeting: RenderGreeting


def build_production() -> AppServices:
    """Wire production adapters into an AppServices container."""
    return AppServices(
        get_config=get_config,
        init_logging=init_logging,
        flush_logging=flush_logging,
        render_greeting=render_greeting,
    )


def build_testing() -> AppServices:
    """Wire in-memory adapters into an AppServices container.

    Rendering is pure and keeps its production implementation; only the
    configuration and logging boundaries are replaced.

    Returns:
        AppServices container with in-memory adapters.
    """
    from ..adapters.memory import (
        flush_logging_in_memory,
        get_config_in_memory,
        init_logging_in_memory,
    )

    return AppServices(
        get_config=get_config_in_memory,
        init_logging=init_logging_in_memory,
        flush_logging=flush_logging_in_memory,
        render_greeting=render_greeting,
    )


__all__ = [
    # Configuration
    "get_config",
    # Logging
    "flush_logging",
    "init_logging",
    # Serialization
    "render_greeting",
    # Composition
    "AppServices",
    "build_production",
    "build_testing",
]
