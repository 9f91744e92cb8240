# topmark:header:start
#
#   project      : TomlMarshal
#   file         : options.py
#   file_relpath : src/tomlmarshal/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI options (verbosity, color) and their resolution logic."""

from __future__ import annotations

import logging
from typing import Callable, ParamSpec, TypeVar

import click

from tomlmarshal.cli.errors import TomlMarshalUsageError
from tomlmarshal.config.logging import TRACE_LEVEL

P = ParamSpec("P")
R = TypeVar("R")


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve a logging level from the ``-v`` and ``-q`` counts.

    Args:
        verbose_count (int): Number of ``-v`` flags.
        quiet_count (int): Number of ``-q`` flags.

    Returns:
        int: ``TRACE`` for ``-vvv``, ``DEBUG`` for ``-vv``, ``INFO`` for ``-v``,
        ``ERROR`` for ``-q`` and ``WARNING`` otherwise.

    Raises:
        TomlMarshalUsageError: If both flags are given.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise TomlMarshalUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")

    if verbose_count >= 3:  # -vvv
        return TRACE_LEVEL
    if verbose_count == 2:  # -vv
        return logging.DEBUG
    if verbose_count == 1:  # -v
        return logging.INFO
    if quiet_count >= 1:  # -q
        return logging.ERROR
    return logging.WARNING


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add counting ``-v/--verbose`` and ``-q/--quiet`` options to a command."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase log verbosity. Repeat up to three times for TRACE output.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Only log errors.",
    )(f)
    return f


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add a ``--no-color`` flag to a command."""
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        default=False,
        help="Disable ANSI colors in program output.",
    )(f)
    return f
