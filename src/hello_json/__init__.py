"""Public package surface exposing the greeting builder, renderer, and metadata.

Routes imports through the architectural layers:
- Domain exports: greeting record and builder
- Composition exports: wired adapter services (configuration, rendering)
- Metadata: package information
"""

from __future__ import annotations

# Metadata
from .__init__conf__ import print_info

# Composition exports (wired adapters)
from .composition import get_config, render_greeting

# Domain exports
from .domain.behaviors import (
    GREETING_VALUE,
    Greeting,
    build_greeting,
)

__all__ = [
    "GREETING_VALUE",
    "Greeting",
    "build_greeting",
    "get_config",
    "print_info",
    "render_greeting",
]
