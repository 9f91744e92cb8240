# topmark:header:start
#
#   project      : TomlMarshal
#   file         : normalize.py
#   file_relpath : src/tomlmarshal/cli/commands/normalize.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TomlMarshal `normalize` command.

Parses a TOML document into the value model and renders it back, which drops comments
and formatting. The result is printed to stdout.
"""

from __future__ import annotations

from pathlib import Path

import click

from tomlmarshal.cli.io import read_document
from tomlmarshal.config.logging import get_logger
from tomlmarshal.io.render import render

logger = get_logger(__name__)


@click.command(
    name="normalize",
    help="Print a TOML document after a round-trip through the value model.",
)
@click.argument(
    "path",
    type=click.Path(dir_okay=False, path_type=Path),
)
def normalize_command(path: Path) -> None:
    """Print the normalized form of ``path``.

    Args:
        path (Path): The TOML document.
    """
    table = read_document(path)
    logger.info("Normalizing %s (%d top-level keys)", path, len(table))
    click.echo(render(table), nl=False)
