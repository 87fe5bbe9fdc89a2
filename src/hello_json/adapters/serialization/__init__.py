"""Serialization adapter - greeting rendering with orjson.

Contents:
    * :mod:`.json_renderer` - Compact JSON rendering
"""

from __future__ import annotations

from .json_renderer import render_greeting

__all__ = ["render_greeting"]
