# topmark:header:start
#
#   project      : TomlMarshal
#   file         : test_cli_commands.py
#   file_relpath : tests/cli/test_cli_commands.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests: `version`, `normalize`, `types` and exit codes."""

from __future__ import annotations

from typing import TYPE_CHECKING

from tests.cli.conftest import assert_SUCCESS, run_cli
from tests.conftest import mark_cli
from tomlmarshal.cli.exit_codes import ExitCode
from tomlmarshal.constants import TOMLMARSHAL_VERSION

if TYPE_CHECKING:
    from pathlib import Path

DOCUMENT = """\
# comment
name = "edge" # trailing
ports = [80, 443]

[server]
host = "localhost"
"""


def _write(tmp_path: Path, text: str = DOCUMENT) -> Path:
    path: Path = tmp_path / "doc.toml"
    path.write_text(text, encoding="utf-8")
    return path


@mark_cli
def test_version_outputs_installed_version() -> None:
    result = run_cli(["--no-color", "version"])
    assert_SUCCESS(result)
    assert result.output.strip() == TOMLMARSHAL_VERSION


@mark_cli
def test_group_without_command_prints_help() -> None:
    result = run_cli([])
    assert_SUCCESS(result)
    assert "normalize" in result.output
    assert "types" in result.output


@mark_cli
def test_normalize_strips_comments(tmp_path: Path) -> None:
    result = run_cli(["normalize", str(_write(tmp_path))])
    assert_SUCCESS(result)
    assert "#" not in result.output
    assert 'name = "edge"' in result.output
    assert "[server]" in result.output


@mark_cli
def test_types_lists_every_leaf(tmp_path: Path) -> None:
    result = run_cli(["--no-color", "types", str(_write(tmp_path))])
    assert_SUCCESS(result)
    assert result.output.splitlines() == [
        "name\tstring",
        "ports[0]\tinteger",
        "ports[1]\tinteger",
        "server.host\tstring",
    ]


@mark_cli
def test_missing_file_exit_code(tmp_path: Path) -> None:
    result = run_cli(["types", str(tmp_path / "missing.toml")])
    assert result.exit_code == ExitCode.FILE_NOT_FOUND, result.output
    assert "File not found" in result.output


@mark_cli
def test_parse_error_exit_code(tmp_path: Path) -> None:
    result = run_cli(["normalize", str(_write(tmp_path, "a = \n"))])
    assert result.exit_code == ExitCode.PARSE_ERROR, result.output


@mark_cli
def test_undecodable_bytes_exit_code(tmp_path: Path) -> None:
    path: Path = tmp_path / "latin1.toml"
    path.write_bytes(b'name = "caf\xe9"\n')
    result = run_cli(["types", str(path)])
    assert result.exit_code == ExitCode.IO_ERROR, result.output


@mark_cli
def test_verbose_and_quiet_are_exclusive() -> None:
    result = run_cli(["-v", "-q", "version"])
    assert result.exit_code == ExitCode.USAGE_ERROR, result.output
