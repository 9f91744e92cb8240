# topmark:header:start
#
#   project      : TomlMarshal
#   file         : convert.py
#   file_relpath : src/tomlmarshal/value/convert.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Conversions between plain Python data and the value model.

The TOML parser hands back plain ``dict``/``list``/scalar structures (``tomlkit``'s
``unwrap()`` output); the renderer consumes the same shapes. These helpers translate
between that representation and [`Value`][tomlmarshal.value.model.Value].
"""

from __future__ import annotations

import datetime as dt
from collections.abc import Mapping
from typing import TYPE_CHECKING, cast

from tomlmarshal.config.logging import get_logger
from tomlmarshal.value.model import Array, Boolean, Datetime, Float, Integer, String, Table

if TYPE_CHECKING:
    from tomlmarshal.config.logging import TomlMarshalLogger
    from tomlmarshal.value.model import Value

logger: TomlMarshalLogger = get_logger(__name__)


def from_python(obj: object) -> Value:
    """Convert a parsed TOML structure into a value tree.

    Args:
        obj (object): A ``dict``/``list``/``str``/``int``/``float``/``bool`` or
            datetime object, possibly nested.

    Returns:
        Value: The equivalent value tree.

    Raises:
        TypeError: If ``obj`` (or a nested item) has no TOML counterpart, or a
            mapping key is not a string.
    """
    # bool before int: bool is a subclass of int
    if isinstance(obj, bool):
        return Boolean(obj)
    if isinstance(obj, int):
        return Integer(int(obj))
    if isinstance(obj, float):
        return Float(float(obj))
    if isinstance(obj, str):
        return String(str(obj))
    if isinstance(obj, (dt.datetime, dt.date, dt.time)):
        return Datetime(obj)
    if isinstance(obj, Mapping):
        entries: dict[str, Value] = {}
        for key, item in cast("Mapping[object, object]", obj).items():
            if not isinstance(key, str):
                raise TypeError(f"TOML table keys must be strings, got {type(key).__name__}")
            entries[key] = from_python(item)
        return Table(entries)
    if isinstance(obj, (list, tuple)):
        return Array([from_python(item) for item in cast("list[object]", obj)])
    raise TypeError(f"No TOML representation for {type(obj).__name__}: {obj!r}")


def to_python(value: Value) -> object:
    """Convert a value tree back into plain Python data.

    Args:
        value (Value): The value tree.

    Returns:
        object: Nested ``dict``/``list``/scalar data suitable for a TOML renderer.
    """
    match value:
        case Table(entries=entries):
            return {key: to_python(item) for key, item in entries.items()}
        case Array(items=items):
            return [to_python(item) for item in items]
        case String(value=s):
            return s
        case Integer(value=i):
            return i
        case Float(value=f):
            return f
        case Boolean(value=b):
            return b
        case Datetime(value=d):
            return d
    logger.debug("Unexpected value in to_python: %r", value)
    raise TypeError(f"Not a TOML value: {value!r}")


def to_python_table(table: Table) -> dict[str, object]:
    """Convert a `Table` into a plain ``dict``."""
    return cast("dict[str, object]", to_python(table))
