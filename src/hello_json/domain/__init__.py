"""Domain layer - pure business logic with no I/O or framework dependencies.

Contents:
    * :mod:`.behaviors` - Greeting record and builder
    * :mod:`.errors` - Domain exception types
"""

from __future__ import annotations

from .behaviors import (
    ARGS_KEY,
    GREETING_KEY,
    GREETING_VALUE,
    Greeting,
    build_greeting,
)
from .errors import ConfigurationError, GreetingEncodingError

__all__ = [
    # Behaviors
    "ARGS_KEY",
    "GREETING_KEY",
    "GREETING_VALUE",
    "Greeting",
    "build_greeting",
    # Errors
    "ConfigurationError",
    "GreetingEncodingError",
]
