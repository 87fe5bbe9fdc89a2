"""Shared CLI constants.

Contents:
    * :data:`PASSTHROUGH_CONTEXT_SETTINGS` - Click settings that leave every token uninterpreted.
    * :data:`TRACEBACK_SUMMARY_LIMIT` - Character budget for truncated tracebacks.
    * :data:`TRACEBACK_VERBOSE_LIMIT` - Character budget for verbose tracebacks.
"""

from __future__ import annotations

from typing import Any, Final

#: Context settings for the greeting command, which owns no options at all.
#: help_option_names: no ``-h``/``--help`` interception
#: ignore_unknown_options: option-looking tokens are kept as arguments
#: allow_interspersed_args: parsing stops at the first positional (the program name)
PASSTHROUGH_CONTEXT_SETTINGS: Final[dict[str, Any]] = {
    "help_option_names": [],
    "ignore_unknown_options": True,
    "allow_extra_args": True,
    "allow_interspersed_args": False,
}

#: Character budget used when printing truncated tracebacks.
TRACEBACK_SUMMARY_LIMIT: Final[int] = 500

#: Character budget used when verbose tracebacks are enabled.
TRACEBACK_VERBOSE_LIMIT: Final[int] = 10_000

__all__ = [
    "PASSTHROUGH_CONTEXT_SETTINGS",
    "TRACEBACK_SUMMARY_LIMIT",
    "TRACEBACK_VERBOSE_LIMIT",
]
