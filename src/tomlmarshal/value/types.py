# topmark:header:start
#
#   project      : TomlMarshal
#   file         : types.py
#   file_relpath : src/tomlmarshal/value/types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Stable type names for the value model.

These names appear in decode error messages, so they are part of the user-facing
contract and must not change.
"""

from __future__ import annotations

from enum import Enum


class TypeName(str, Enum):
    """Diagnostic name of each value variant."""

    TABLE = "table"
    ARRAY = "array"
    STRING = "string"
    INTEGER = "integer"
    FLOAT = "float"
    BOOLEAN = "boolean"
    DATETIME = "datetime"

    def __str__(self) -> str:
        return self.value
