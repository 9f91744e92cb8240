# topmark:header:start
#
#   project      : TomlMarshal
#   file         : constants.py
#   file_relpath : src/tomlmarshal/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TomlMarshal Constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version
from typing import Final

try:
    TOMLMARSHAL_VERSION: str = get_version("tomlmarshal")
except PackageNotFoundError:  # running from a source checkout
    TOMLMARSHAL_VERSION = "0.0.0"

# Signed 64-bit bounds for TOML integers.
INTEGER_MIN: Final[int] = -(2**63)
INTEGER_MAX: Final[int] = 2**63 - 1

# Record field names use underscores; TOML documents often use hyphens.
FIELD_WORD_SEPARATOR: Final[str] = "_"
KEY_WORD_SEPARATOR: Final[str] = "-"

PATH_SEPARATOR: Final[str] = "."
