# topmark:header:start
#
#   project      : TomlMarshal
#   file         : loaders.py
#   file_relpath : src/tomlmarshal/io/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Parse TOML text into a value tree.

Parsing is done with `tomlkit`; the parsed document is unwrapped to plain Python data
and converted with [`from_python`][tomlmarshal.value.convert.from_python].
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from tomlmarshal.config.logging import get_logger
from tomlmarshal.errors import TomlParseError
from tomlmarshal.value.convert import from_python
from tomlmarshal.value.model import Table

if TYPE_CHECKING:
    from pathlib import Path

    from tomlmarshal.config.logging import TomlMarshalLogger

logger: TomlMarshalLogger = get_logger(__name__)


def parse(text: str) -> Table:
    """Parse a TOML document.

    Args:
        text (str): TOML source text.

    Returns:
        Table: The document's root table.

    Raises:
        TomlParseError: If ``text`` is not valid TOML.
    """
    try:
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except TomlkitParseError as exc:
        logger.debug("TOML parse error: %s", exc)
        raise TomlParseError(str(exc), line=exc.line, col=exc.col) from exc
    data_any: Any = doc.unwrap()
    root = from_python(data_any)
    if not isinstance(root, Table):
        # tomlkit always yields a mapping for a document
        raise TomlParseError(f"TOML document root is not a table: {type(data_any).__name__}")
    return root


def load_toml_value(path: Path) -> Table:
    """Read and parse a TOML file.

    Args:
        path (Path): Path to a UTF-8 TOML document.

    Returns:
        Table: The document's root table.

    Raises:
        OSError: If the file cannot be read.
        TomlParseError: If the content is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
    except OSError as exc:
        logger.error("Error reading TOML from %s: %s", path, exc)
        raise
    logger.debug("Parsing %s (%d bytes)", path, len(text))
    return parse(text)
