# topmark:header:start
#
#   project      : TomlMarshal
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers for invoking the TomlMarshal click group."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from click.testing import CliRunner, Result

from tomlmarshal.cli.exit_codes import ExitCode
from tomlmarshal.cli.main import cli
from tomlmarshal.config import logging

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence


@pytest.fixture(autouse=True)
def restore_logging() -> Iterator[None]:
    """Reattach the suite's log handler after a command rebinds it to the runner's stderr."""
    yield
    logging.setup_logging(level=logging.TRACE_LEVEL)


def run_cli(argv: Sequence[str]) -> Result:
    """Invoke the CLI in-process.

    Args:
        argv (Sequence[str]): CLI argument vector, e.g. ``["types", "doc.toml"]``.

    Returns:
        Result: The `click.testing.Result` produced by `CliRunner.invoke`.
    """
    runner = CliRunner()
    return runner.invoke(cli, list(argv))


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0).

    Args:
        result (Result): The Result object returned by `run_cli`.
    """
    assert result.exit_code == ExitCode.SUCCESS, result.output
