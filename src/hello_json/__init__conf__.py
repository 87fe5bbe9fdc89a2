"""Static package metadata surfaced to the CLI, config loader, and docs.

The ``version`` line is kept in sync with ``pyproject.toml``; the
``LAYEREDCONF_*`` identifiers decide where lib_layered_config looks for
configuration files on each platform.
"""

from __future__ import annotations

from typing import Final

name = "hello_json"
title = "Print a JSON greeting that echoes the invocation arguments"
version = "1.0.0"
shell_command = "hello-json"

#: Vendor directory on macOS/Windows (e.g. ``%APPDATA%\\<vendor>\\<app>``).
LAYEREDCONF_VENDOR: Final[str] = "hello-json"
#: Application directory on macOS/Windows.
LAYEREDCONF_APP: Final[str] = "Hello JSON"
#: Linux XDG directory name (``~/.config/<slug>/``); derived from the project name.
LAYEREDCONF_SLUG: Final[str] = "hello-json"


def print_info() -> None:
    """Print the package metadata as an aligned key/value block.

    Example:
        >>> print_info()  # doctest: +ELLIPSIS
        Info for hello_json:
        <BLANKLINE>
            name          = hello_json
        ...
    """
    fields = (
        ("name", name),
        ("title", title),
        ("version", version),
        ("shell_command", shell_command),
        ("config_vendor", LAYEREDCONF_VENDOR),
        ("config_app", LAYEREDCONF_APP),
        ("config_slug", LAYEREDCONF_SLUG),
    )
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    print("\n".join(lines))


__all__ = [
    "LAYEREDCONF_APP",
    "LAYEREDCONF_SLUG",
    "LAYEREDCONF_VENDOR",
    "name",
    "print_info",
    "shell_command",
    "title",
    "version",
]
