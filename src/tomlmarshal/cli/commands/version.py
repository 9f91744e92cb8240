# topmark:header:start
#
#   project      : TomlMarshal
#   file         : version.py
#   file_relpath : src/tomlmarshal/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TomlMarshal `version` command.

Prints the current TomlMarshal version as installed in the active Python environment.
"""

from __future__ import annotations

import click

from tomlmarshal.constants import TOMLMARSHAL_VERSION


@click.command(
    name="version",
    help="Show the current version of TomlMarshal.",
)
def version_command() -> None:
    """Show the current version of TomlMarshal."""
    click.echo(TOMLMARSHAL_VERSION)
