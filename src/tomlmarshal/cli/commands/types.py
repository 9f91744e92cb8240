# topmark:header:start
#
#   project      : TomlMarshal
#   file         : types.py
#   file_relpath : src/tomlmarshal/cli/commands/types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TomlMarshal `types` command.

Prints one line per leaf of a TOML document: its dotted path, a tab, and the type name
used in decode error messages (``integer``, ``string``, ``table``...). Array elements
are shown as ``path[i]``.
"""

from __future__ import annotations

from pathlib import Path

import click

from tomlmarshal.cli.io import read_document
from tomlmarshal.diagnostics import iter_leaves


@click.command(
    name="types",
    help="List every leaf of a TOML document with its value type.",
)
@click.argument(
    "path",
    type=click.Path(dir_okay=False, path_type=Path),
)
def types_command(path: Path) -> None:
    """Print ``<path>\\t<type>`` for each leaf of ``path``."""
    ctx = click.get_current_context()
    color: bool = bool(ctx.obj and ctx.obj.get("color_enabled", True))
    for key_path, value in iter_leaves(read_document(path)):
        type_name: str = value.type_str()
        if color:
            type_name = click.style(type_name, fg="cyan")
        click.echo(f"{key_path}\t{type_name}")
