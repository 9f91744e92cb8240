# topmark:header:start
#
#   project      : TomlMarshal
#   file         : __init__.py
#   file_relpath : src/tomlmarshal/value/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Value model: the dynamically-typed TOML tree exchanged with the parser and renderer."""

from __future__ import annotations

from .convert import from_python, to_python, to_python_table
from .model import Array, Boolean, Datetime, Float, Integer, String, Table, Value
from .types import TypeName

# --- Exported symbols ---

__all__: list[str] = [
    "Array",
    "Boolean",
    "Datetime",
    "Float",
    "Integer",
    "String",
    "Table",
    "TypeName",
    "Value",
    "from_python",
    "to_python",
    "to_python_table",
]
