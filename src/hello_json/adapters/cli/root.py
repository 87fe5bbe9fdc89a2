"""The greeting command.

The command owns no options. It receives the complete invocation vector,
program name first, as a single variadic argument. :func:`main` prefixes the
vector with ``--`` so Click's parser stops before the first real token and
hands every token over verbatim, a program name such as ``-bash`` and later
``--`` separators included.

Contents:
    * :func:`cli` - Print the greeting record as one line of JSON.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import rich_click as click

from hello_json import __init__conf__
from hello_json.adapters.config.settings import load_cli_settings
from hello_json.adapters.logging.setup import log_scope
from hello_json.domain.behaviors import build_greeting

from .constants import PASSTHROUGH_CONTEXT_SETTINGS
from .context import apply_traceback_preferences

if TYPE_CHECKING:
    from hello_json.composition import AppServices

logger = logging.getLogger(__name__)


@click.command(
    __init__conf__.shell_command,
    help=__init__conf__.title,
    context_settings=PASSTHROUGH_CONTEXT_SETTINGS,
    add_help_option=False,
)
@click.argument("argv", nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def cli(ctx: click.Context, argv: tuple[str, ...]) -> None:
    """Echo the invocation arguments inside a JSON greeting.

    Loads configuration, initializes logging, and applies the configured
    traceback preference before building and printing the record. Logs are
    flushed first so stdout holds nothing but the JSON line.

    Example:
        >>> from click.testing import CliRunner
        >>> from hello_json.composition import build_testing
        >>> result = CliRunner().invoke(cli, ["prog", "foo"], obj=build_testing)
        >>> result.stdout
        '{"Hello":"World","args":["prog","foo"]}\\n'
    """
    # ctx.obj is always the services factory (production or test)
    if not callable(ctx.obj):
        raise RuntimeError("Services factory not provided. This is a bug.")
    services: AppServices = ctx.obj()  # type: ignore[assignment]  # Click's obj is typed as Any
    config = services.get_config()
    services.init_logging(config)
    apply_traceback_preferences(load_cli_settings(config).traceback)

    with log_scope("hello-json", argc=len(argv)):
        logger.info("Rendering greeting", extra={"argc": len(argv)})
        rendered = services.render_greeting(build_greeting(argv))

    services.flush_logging()
    click.echo(rendered)


__all__ = ["cli"]
