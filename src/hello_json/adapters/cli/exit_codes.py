"""POSIX-conventional exit codes for CLI error paths.

Contents:
    * :class:`ExitCode` — IntEnum of all exit codes used by this application.
    * :func:`exit_code_for` — map an exception to its exit code.
"""

from __future__ import annotations

from enum import IntEnum

import lib_cli_exit_tools

from hello_json.domain.errors import ConfigurationError, GreetingEncodingError


class ExitCode(IntEnum):
    """POSIX-conventional exit codes for CLI error paths.

    Values follow sysexits.h where applicable:

    * 0–1: generic success / failure
    * 65: EX_DATAERR
    * 78: EX_CONFIG

    Example:
        >>> int(ExitCode.INVALID_ENCODING)
        65
    """

    SUCCESS = 0
    GENERAL_ERROR = 1
    INVALID_ENCODING = 65
    CONFIG_ERROR = 78


def exit_code_for(exc: BaseException) -> int:
    """Return the process exit code for an exception that reached the CLI boundary.

    Domain errors map to their sysexits code; everything else is resolved by
    ``lib_cli_exit_tools`` (signals, ``SystemExit`` payloads, broken pipes, errno).

    Examples:
        >>> exit_code_for(GreetingEncodingError("bad"))
        65
        >>> exit_code_for(ConfigurationError("bad"))
        78
    """
    if isinstance(exc, GreetingEncodingError):
        return int(ExitCode.INVALID_ENCODING)
    if isinstance(exc, ConfigurationError):
        return int(ExitCode.CONFIG_ERROR)
    return lib_cli_exit_tools.get_system_exit_code(exc)


__all__ = ["ExitCode", "exit_code_for"]
