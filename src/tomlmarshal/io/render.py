# topmark:header:start
#
#   project      : TomlMarshal
#   file         : render.py
#   file_relpath : src/tomlmarshal/io/render.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Render a value tree as TOML text.

The value tree is converted to plain Python data and serialized with `tomlkit`.
Comments and original formatting are not preserved.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, cast

import tomlkit

from tomlmarshal.io.loaders import parse
from tomlmarshal.value.convert import to_python_table

if TYPE_CHECKING:
    from tomlmarshal.value.model import Table


def _tomlkit_dumps(data: Mapping[str, object]) -> str:
    """Typed wrapper around tomlkit.dumps() for strict type checking."""
    return cast("str", cast("Any", tomlkit).dumps(cast("Mapping[str, Any]", data)))


def _is_section(value: object) -> bool:
    if isinstance(value, dict):
        return True
    items = cast("list[object]", value) if isinstance(value, list) else []
    return bool(items) and all(isinstance(item, dict) for item in items)


def _sections_last(data: dict[str, object]) -> dict[str, object]:
    """Reorder entries so plain key/value pairs precede sub-tables, recursively.

    A key written after a ``[table]`` header would otherwise belong to that table.
    """
    ordered: dict[str, object] = {}
    for want_section in (False, True):
        for key, value in data.items():
            if _is_section(value) != want_section:
                continue
            if isinstance(value, dict):
                ordered[key] = _sections_last(cast("dict[str, object]", value))
            elif want_section:
                ordered[key] = [
                    _sections_last(cast("dict[str, object]", item))
                    for item in cast("list[object]", value)
                ]
            else:
                ordered[key] = value
    return ordered


def render(table: Table) -> str:
    """Serialize a table to a TOML document.

    Args:
        table (Table): Root table.

    Returns:
        str: The rendered TOML document.
    """
    return _tomlkit_dumps(_sections_last(to_python_table(table)))


def normalize(text: str) -> str:
    """Round-trip TOML text through the value model, dropping comments and formatting.

    Args:
        text (str): Raw TOML content.

    Returns:
        str: The normalized TOML document.

    Raises:
        TomlParseError: If ``text`` is not valid TOML.
    """
    return render(parse(text))
