# topmark:header:start
#
#   project      : TomlMarshal
#   file         : io.py
#   file_relpath : src/tomlmarshal/cli/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Input helpers shared by CLI commands.

Reads a TOML document and maps library failures onto CLI errors (and hence exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from tomlmarshal.cli.errors import (
    TomlMarshalFileNotFoundError,
    TomlMarshalIOError,
    TomlMarshalParseError,
)
from tomlmarshal.config.logging import get_logger
from tomlmarshal.errors import TomlParseError
from tomlmarshal.io.loaders import load_toml_value

if TYPE_CHECKING:
    from pathlib import Path

    from tomlmarshal.config.logging import TomlMarshalLogger
    from tomlmarshal.value.model import Table

logger: TomlMarshalLogger = get_logger(__name__)


def read_document(path: Path) -> Table:
    """Read and parse ``path``.

    Args:
        path (Path): The TOML document.

    Returns:
        Table: The document's root table.

    Raises:
        TomlMarshalFileNotFoundError: If ``path`` does not exist.
        TomlMarshalIOError: If ``path`` cannot be read.
        TomlMarshalParseError: If the content is not valid TOML.
    """
    try:
        return load_toml_value(path)
    except FileNotFoundError as exc:
        raise TomlMarshalFileNotFoundError(f"File not found: {path}") from exc
    except TomlParseError as exc:
        raise TomlMarshalParseError(f"{path}: {exc}") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise TomlMarshalIOError(f"Cannot read {path}: {exc}") from exc
