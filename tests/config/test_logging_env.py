# topmark:header:start
#
#   project      : TomlMarshal
#   file         : test_logging_env.py
#   file_relpath : tests/config/test_logging_env.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for log level resolution from the environment and the CLI flags."""

from __future__ import annotations

import logging as std_logging

import pytest

from tests.conftest import parametrize
from tomlmarshal.cli.errors import TomlMarshalUsageError
from tomlmarshal.cli.options import resolve_verbosity
from tomlmarshal.config.logging import (
    LOG_LEVEL_ENV_VAR,
    TRACE_LEVEL,
    get_logger,
    resolve_env_log_level,
)


@parametrize(
    "raw, expected",
    [
        ("trace", TRACE_LEVEL),
        ("DEBUG", std_logging.DEBUG),
        (" warn ", std_logging.WARNING),
        ("15", 15),
        ("bogus", None),
    ],
)
def test_env_log_level(monkeypatch: pytest.MonkeyPatch, raw: str, expected: int | None) -> None:
    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, raw)
    assert resolve_env_log_level() == expected


def test_env_log_level_unset() -> None:
    assert resolve_env_log_level() is None


@parametrize(
    "verbose, quiet, expected",
    [
        (0, 0, std_logging.WARNING),
        (1, 0, std_logging.INFO),
        (2, 0, std_logging.DEBUG),
        (3, 0, TRACE_LEVEL),
        (0, 1, std_logging.ERROR),
    ],
)
def test_resolve_verbosity(verbose: int, quiet: int, expected: int) -> None:
    assert resolve_verbosity(verbose, quiet) == expected


def test_verbose_and_quiet_conflict() -> None:
    with pytest.raises(TomlMarshalUsageError):
        resolve_verbosity(1, 1)


def test_trace_method(caplog: pytest.LogCaptureFixture) -> None:
    logger = get_logger("tomlmarshal.tests")
    with caplog.at_level(TRACE_LEVEL, logger="tomlmarshal.tests"):
        logger.trace("state %s", "Start")
    assert "state Start" in caplog.text
