# topmark:header:start
#
#   project      : TomlMarshal
#   file         : errors.py
#   file_relpath : src/tomlmarshal/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the TomlMarshal CLI.

Usage:
    Raise these from commands to print a one-line message on stderr and exit with
    the matching [`ExitCode`][tomlmarshal.cli.exit_codes.ExitCode]. Library errors
    (`TomlParseError`, `OSError`) are translated in
    [`tomlmarshal.cli.io`][tomlmarshal.cli.io].
"""

from __future__ import annotations

from typing import IO, Any

import click

from tomlmarshal.cli.exit_codes import ExitCode


class TomlMarshalError(click.ClickException):
    """Base class for all TomlMarshal CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:
        """Return the plain error message text (no color)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:
        """Print the error to stderr, bright red when the context allows color."""
        ctx: click.Context | None = click.get_current_context(silent=True)
        color: bool | None = ctx.color if ctx is not None else None
        click.echo(
            click.style(f"Error: {self.format_message()}", fg="bright_red"),
            file=file,
            err=True,
            color=color,
        )


class TomlMarshalUsageError(TomlMarshalError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class TomlMarshalParseError(TomlMarshalError):
    """Error for documents that are not valid TOML."""

    exit_code = ExitCode.PARSE_ERROR


class TomlMarshalFileNotFoundError(TomlMarshalError):
    """Error when the input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class TomlMarshalIOError(TomlMarshalError):
    """Error for any other failure reading the input."""

    exit_code = ExitCode.IO_ERROR
