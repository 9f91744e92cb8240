# topmark:header:start
#
#   project      : TomlMarshal
#   file         : model.py
#   file_relpath : src/tomlmarshal/value/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Dynamically-typed TOML value tree.

A value is exactly one of the variants below. The variants are frozen dataclasses so a
value cannot be rebound after construction; the containers held by `Table` and `Array`
are only ever mutated by the [`Decoder`][tomlmarshal.decoder.Decoder] while it strips
consumed entries out of a tree it owns.

Sections:
    * Scalars: `String`, `Integer`, `Float`, `Boolean`, `Datetime`.
    * Containers: `Table` (string-keyed), `Array` (ordered).
    * `Value`: the union alias used throughout the package.
"""

from __future__ import annotations

import datetime as dt
from dataclasses import dataclass, field
from typing import Union

from tomlmarshal.constants import INTEGER_MAX, INTEGER_MIN
from tomlmarshal.value.types import TypeName


@dataclass(frozen=True)
class String:
    """A TOML string."""

    value: str

    def type_str(self) -> str:
        """Return the diagnostic type name (``"string"``)."""
        return TypeName.STRING.value

    def clone(self) -> String:
        """Return a structural copy (scalars are shared)."""
        return self


@dataclass(frozen=True)
class Integer:
    """A TOML integer, restricted to the signed 64-bit range."""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError(f"Integer expects an int, got {type(self.value).__name__}")
        if not INTEGER_MIN <= self.value <= INTEGER_MAX:
            raise ValueError(f"Integer out of 64-bit range: {self.value}")

    def type_str(self) -> str:
        """Return the diagnostic type name (``"integer"``)."""
        return TypeName.INTEGER.value

    def clone(self) -> Integer:
        """Return a structural copy (scalars are shared)."""
        return self


@dataclass(frozen=True)
class Float:
    """A TOML float (IEEE 754 double)."""

    value: float

    def type_str(self) -> str:
        """Return the diagnostic type name (``"float"``)."""
        return TypeName.FLOAT.value

    def clone(self) -> Float:
        """Return a structural copy (scalars are shared)."""
        return self


@dataclass(frozen=True)
class Boolean:
    """A TOML boolean."""

    value: bool

    def type_str(self) -> str:
        """Return the diagnostic type name (``"boolean"``)."""
        return TypeName.BOOLEAN.value

    def clone(self) -> Boolean:
        """Return a structural copy (scalars are shared)."""
        return self


@dataclass(frozen=True)
class Datetime:
    """A TOML offset/local date-time, local date or local time."""

    value: dt.datetime | dt.date | dt.time

    def type_str(self) -> str:
        """Return the diagnostic type name (``"datetime"``)."""
        return TypeName.DATETIME.value

    def clone(self) -> Datetime:
        """Return a structural copy (scalars are shared)."""
        return self


@dataclass(frozen=True)
class Array:
    """An ordered sequence of values."""

    items: list[Value] = field(default_factory=lambda: [])

    def type_str(self) -> str:
        """Return the diagnostic type name (``"array"``)."""
        return TypeName.ARRAY.value

    def clone(self) -> Array:
        """Return a deep structural copy."""
        return Array([item.clone() for item in self.items])

    def __len__(self) -> int:
        return len(self.items)


@dataclass(frozen=True)
class Table:
    """A mapping from string keys to values.

    Key order follows insertion order; the encoder and decoder do not depend on it
    except for positional map access (`read_map_key` / `read_map_element`).
    """

    entries: dict[str, Value] = field(default_factory=lambda: {})

    def type_str(self) -> str:
        """Return the diagnostic type name (``"table"``)."""
        return TypeName.TABLE.value

    def clone(self) -> Table:
        """Return a deep structural copy."""
        return Table({key: value.clone() for key, value in self.entries.items()})

    def get(self, key: str) -> Value | None:
        """Return the value stored under ``key`` or None."""
        return self.entries.get(key)

    def __contains__(self, key: object) -> bool:
        return key in self.entries

    def __len__(self) -> int:
        return len(self.entries)


Value = Union[Table, Array, String, Integer, Float, Boolean, Datetime]
