# topmark:header:start
#
#   project      : TomlMarshal
#   file         : main.py
#   file_relpath : src/tomlmarshal/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TomlMarshal command-line interface.

Group-level options are resolved once and placed into ``ctx.obj``; subcommands only
read them. The log level comes from ``TOMLMARSHAL_LOG_LEVEL`` when set, otherwise from
the ``-v``/``-q`` counts.
"""

from __future__ import annotations

import click

from tomlmarshal.cli.commands.normalize import normalize_command
from tomlmarshal.cli.commands.types import types_command
from tomlmarshal.cli.commands.version import version_command
from tomlmarshal.cli.options import (
    common_color_options,
    common_verbose_options,
    resolve_verbosity,
)
from tomlmarshal.config.logging import get_logger, resolve_env_log_level, setup_logging

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    no_color: bool,
) -> None:
    """Initialize shared state (log level and color) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        no_color (bool): Whether ``--no-color`` was passed.
    """
    ctx.obj = ctx.obj or {}

    level_cli: int = resolve_verbosity(verbose, quiet)
    level_env: int | None = resolve_env_log_level()
    level: int = level_env if level_env is not None else level_cli
    ctx.obj["log_level"] = level
    setup_logging(level=level)
    logger.debug("log level %s (env=%s, cli=%s)", level, level_env, level_cli)

    ctx.obj["color_enabled"] = not no_color
    if no_color:
        ctx.color = False


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="TomlMarshal CLI: inspect TOML documents through the TomlMarshal value model.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    no_color: bool,
) -> None:
    """Entry point for the TomlMarshal CLI."""
    init_common_state(ctx, verbose=verbose, quiet=quiet, no_color=no_color)

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


cli.add_command(version_command)

cli.add_command(normalize_command)

cli.add_command(types_command)

if __name__ == "__main__":
    cli()
