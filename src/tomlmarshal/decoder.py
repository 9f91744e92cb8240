# topmark:header:start
#
#   project      : TomlMarshal
#   file         : decoder.py
#   file_relpath : src/tomlmarshal/decoder.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Decoder: rebuild application data from a TOML value tree.

The decoder owns the value it was given and strips out whatever an adapter reads.
What remains in `Decoder.toml` afterwards is the *leftover*: keys and elements no
adapter asked for. ``None`` means the input was consumed completely.

Consumption rules:

- Leaf reads take the value out of the slot.
- `read_record` leaves the residual table in place, or ``None`` when it is empty.
  Each `read_record_field` pops its key and puts back whatever its sub-decoder did
  not consume, so unused nested keys stay visible at their original location.
- `read_sequence` drops consumed elements and keeps the others.
- `read_dynamic_map` always clears the slot: a map has no fixed key set, so there is
  nothing meaningful to report as unused.
- `read_tagged_union` tries each variant on a copy of the held value and keeps the
  first one that decodes.

Errors carry the dotted path of the field being decoded (`Decoder.cur_field`).
"""

from __future__ import annotations

import datetime as dt
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING, Final, TypeVar, cast

from tomlmarshal.config.logging import get_logger
from tomlmarshal.constants import FIELD_WORD_SEPARATOR, KEY_WORD_SEPARATOR
from tomlmarshal.diagnostics import join_path, mismatch
from tomlmarshal.errors import (
    DecodeError,
    ExpectedMapElement,
    ExpectedMapKey,
    NilTooLong,
    NoEnumVariants,
)
from tomlmarshal.value.model import (
    Array,
    Boolean,
    Datetime,
    Float,
    Integer,
    String,
    Table,
)
from tomlmarshal.value.types import TypeName

if TYPE_CHECKING:
    from tomlmarshal.config.logging import TomlMarshalLogger
    from tomlmarshal.errors import DecodeErrorKind
    from tomlmarshal.value.model import Value

logger: TomlMarshalLogger = get_logger(__name__)

T = TypeVar("T")
S = TypeVar("S", String, Integer, Float, Boolean, Datetime, Table, Array)

ReadBody = Callable[["Decoder"], T]
ReadSizedBody = Callable[["Decoder", int], T]
ReadOptionalBody = Callable[["Decoder", bool], T]

_TYPE_NAMES: Final[dict[type, str]] = {
    Table: TypeName.TABLE.value,
    Array: TypeName.ARRAY.value,
    String: TypeName.STRING.value,
    Integer: TypeName.INTEGER.value,
    Float: TypeName.FLOAT.value,
    Boolean: TypeName.BOOLEAN.value,
    Datetime: TypeName.DATETIME.value,
}


class _Consumed:
    """Marks an array slot whose element has been fully read.

    This is deliberately not a `Value`: a real ``Integer(0)`` element must never be
    mistaken for a consumed slot.
    """

    _instance: _Consumed | None = None

    def __new__(cls) -> _Consumed:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def clone(self) -> _Consumed:
        return self

    def __repr__(self) -> str:
        return "<consumed>"


CONSUMED: Final[_Consumed] = _Consumed()


def hyphenate(name: str) -> str:
    """Return ``name`` with every underscore replaced by a hyphen.

    Record fields are identifiers (``max_connections``) while TOML documents commonly
    use hyphenated keys (``max-connections``); field lookup falls back to this form.
    """
    return name.replace(FIELD_WORD_SEPARATOR, KEY_WORD_SEPARATOR)


class Decoder:
    """Consumes a TOML value tree on behalf of an adapter.

    Attributes:
        toml (Value | None): The value still held. After a decode this is the leftover.
        cur_field (str | None): Dotted path of the value being decoded.
    """

    def __init__(self, toml: Value | None, cur_field: str | None = None) -> None:
        self.toml: Value | None = toml
        self.cur_field: str | None = cur_field

    def __repr__(self) -> str:
        return f"Decoder(toml={self.toml!r}, cur_field={self.cur_field!r})"

    def sub_decoder(self, toml: Value | None, field: str) -> Decoder:
        """Return a decoder for a nested value, with ``field`` appended to the path."""
        return Decoder(toml, join_path(self.cur_field, field))

    def err(self, kind: DecodeErrorKind) -> DecodeError:
        """Return a `DecodeError` of ``kind`` at the current path."""
        return DecodeError(kind, self.cur_field)

    def mismatch(self, expected: str) -> DecodeError:
        """Return the "missing" or "wrong type" error for the held value."""
        return mismatch(expected, self.toml, self.cur_field)

    # --- Scalars ---

    def read_scalar(self, expected: type[S]) -> S:
        """Take the held value if it is an instance of ``expected``.

        Args:
            expected (type[S]): The value variant wanted (e.g. `Integer`).

        Returns:
            S: The held value. The slot is cleared.

        Raises:
            DecodeError: ``ExpectedField`` when nothing is held, ``ExpectedType`` when
                the held value is another variant. The slot is left untouched.
        """
        held: Value | None = self.toml
        if isinstance(held, expected):
            self.toml = None
            return held
        raise self.mismatch(_TYPE_NAMES[expected])

    def read_nil(self) -> None:
        """Read the unit value: an empty string.

        Raises:
            DecodeError: ``NilTooLong`` for a non-empty string.
        """
        held: Value | None = self.toml
        if isinstance(held, String) and held.value:
            raise self.err(NilTooLong())
        self.read_scalar(String)

    def read_int(self) -> int:
        """Read an integer."""
        return self.read_scalar(Integer).value

    def read_float(self) -> float:
        """Read a float."""
        return self.read_scalar(Float).value

    def read_bool(self) -> bool:
        """Read a boolean."""
        return self.read_scalar(Boolean).value

    def read_str(self) -> str:
        """Read a string."""
        return self.read_scalar(String).value

    def read_char(self) -> str:
        """Read a one-character string.

        Raises:
            DecodeError: ``ExpectedType`` (``string``) for strings of any other length.
        """
        held: Value | None = self.toml
        if isinstance(held, String) and len(held.value) == 1:
            self.toml = None
            return held.value
        raise self.mismatch(TypeName.STRING.value)

    def read_datetime(self) -> dt.datetime | dt.date | dt.time:
        """Read a date-time, date or time."""
        return self.read_scalar(Datetime).value

    # --- Records ---

    def read_record(self, body: ReadBody[T]) -> T:
        """Read a table through ``body``.

        Args:
            body (ReadBody[T]): Calls `read_record_field` for each field and builds the
                result.

        Returns:
            T: Whatever ``body`` returns.

        Raises:
            DecodeError: When the held value is not a table.
        """
        if not isinstance(self.toml, Table):
            raise self.mismatch(TypeName.TABLE.value)
        result: T = body(self)
        held: Value | None = self.toml
        if isinstance(held, Table) and len(held) == 0:
            self.toml = None
        return result

    def read_record_field(self, name: str, body: ReadBody[T]) -> T:
        """Read the field ``name`` of the held table.

        The key is looked up as ``name``, then in hyphenated form. Whatever the field's
        sub-decoder leaves behind is put back under ``name``.

        Args:
            name (str): Field name.
            body (ReadBody[T]): Reads the field's value from the sub-decoder.

        Returns:
            T: Whatever ``body`` returns.

        Raises:
            DecodeError: When the held value is not a table, or from ``body``.
        """
        table: Value | None = self.toml
        if not isinstance(table, Table):
            raise self.mismatch(TypeName.TABLE.value)
        value: Value | None = table.entries.pop(name, None)
        if value is None:
            value = table.entries.pop(hyphenate(name), None)
        sub: Decoder = self.sub_decoder(value, name)
        result: T = body(sub)
        if sub.toml is not None:
            logger.trace("field %s has leftover %r", sub.cur_field, sub.toml)
            table.entries[name] = sub.toml
        return result

    # --- Sequences ---

    def read_sequence(self, body: ReadSizedBody[T]) -> T:
        """Read an array through ``body``.

        Args:
            body (ReadSizedBody[T]): Receives the decoder and the array length; reads
                elements with `read_sequence_element`.

        Returns:
            T: Whatever ``body`` returns.

        Raises:
            DecodeError: When the held value is not an array.
        """
        held: Value | None = self.toml
        if not isinstance(held, Array):
            raise self.mismatch(TypeName.ARRAY.value)
        result: T = body(self, len(held))
        held = self.toml
        if isinstance(held, Array):
            held.items[:] = [item for item in held.items if item is not CONSUMED]
            if len(held) == 0:
                self.toml = None
        return result

    def read_sequence_element(self, index: int, body: ReadBody[T]) -> T:
        """Read the element at ``index`` of the held array.

        An index past the end reads as an absent value, so ``body`` reports the
        missing element itself.

        Raises:
            DecodeError: When the held value is not an array, or from ``body``.
        """
        held: Value | None = self.toml
        if not isinstance(held, Array):
            raise self.mismatch(TypeName.ARRAY.value)
        in_range: bool = 0 <= index < len(held)
        element: Value | None = None
        if in_range:
            slot: object = held.items[index]
            element = None if slot is CONSUMED else cast("Value", slot)
            held.items[index] = cast("Value", CONSUMED)
        sub: Decoder = self.sub_decoder(element, "")
        result: T = body(sub)
        if in_range and sub.toml is not None:
            held.items[index] = sub.toml
        return result

    def read_tuple(self, body: ReadSizedBody[T]) -> T:
        """Read a fixed-size tuple stored as an array."""
        return self.read_sequence(body)

    def read_tuple_element(self, index: int, body: ReadBody[T]) -> T:
        """Read one tuple element."""
        return self.read_sequence_element(index, body)

    # --- Optionals ---

    def read_optional(self, body: ReadOptionalBody[T]) -> T:
        """Call ``body`` with whether a value is held.

        Nothing is consumed here; ``body`` reads the value when it is present.
        """
        return body(self, self.toml is not None)

    # --- Tagged unions ---

    def read_tagged_union(self, names: Sequence[str], body: ReadSizedBody[T]) -> T:
        """Decode a tagged union by trying each variant in order.

        Each attempt runs against its own copy of the held value. The first attempt
        that succeeds wins and its leftover replaces the held value; the others leave
        no trace.

        Args:
            names (Sequence[str]): Variant names, in trial order.
            body (ReadSizedBody[T]): Receives a trial decoder and the variant index.

        Returns:
            T: The result of the first successful attempt.

        Raises:
            DecodeError: The first attempt's error when all fail, ``NoEnumVariants``
                when ``names`` is empty.
        """
        first_error: DecodeError | None = None
        for index, name in enumerate(names):
            snapshot: Value | None = self.toml.clone() if self.toml is not None else None
            trial: Decoder = self.sub_decoder(snapshot, "")
            try:
                result: T = body(trial, index)
            except DecodeError as exc:
                logger.debug("variant %s rejected: %s", name, exc)
                if first_error is None:
                    first_error = exc
                continue
            logger.trace("variant %s selected", name)
            self.toml = trial.toml
            return result
        if first_error is not None:
            raise first_error
        raise self.err(NoEnumVariants())

    def read_variant_arg(
        self,
        index: int,  # pylint: disable=unused-argument
        body: ReadBody[T],
    ) -> T:
        """Read one payload argument of the variant being tried."""
        return body(self)

    # --- Dynamic maps ---

    def read_dynamic_map(self, body: ReadSizedBody[T]) -> T:
        """Read a string-keyed map through ``body``.

        Args:
            body (ReadSizedBody[T]): Receives the decoder and the entry count; reads
                entries with `read_map_key` / `read_map_element`.

        Returns:
            T: Whatever ``body`` returns. The slot is always cleared.

        Raises:
            DecodeError: When the held value is not a table.
        """
        held: Value | None = self.toml
        if not isinstance(held, Table):
            raise self.mismatch(TypeName.TABLE.value)
        result: T = body(self, len(held))
        self.toml = None
        return result

    def _map_table(self) -> Table:
        held: Value | None = self.toml
        if not isinstance(held, Table):
            raise self.mismatch(TypeName.TABLE.value)
        return held

    def read_map_key(self, index: int, body: ReadBody[T]) -> T:
        """Read the ``index``-th key of the held table as a string value.

        Raises:
            DecodeError: ``ExpectedMapKey`` when the table has fewer entries.
        """
        table: Table = self._map_table()
        keys: list[str] = list(table.entries)
        if not 0 <= index < len(keys):
            raise self.err(ExpectedMapKey(index))
        key: str = keys[index]
        return body(self.sub_decoder(String(key), key))

    def read_map_element(self, index: int, body: ReadBody[T]) -> T:
        """Read a copy of the ``index``-th value of the held table.

        The value is decoded at the map's own path; only keys extend it. The table
        entry itself is never consumed, so reading the same element twice sees the
        same value.

        Raises:
            DecodeError: ``ExpectedMapElement`` when the table has fewer entries.
        """
        table: Table = self._map_table()
        values: list[Value] = list(table.entries.values())
        if not 0 <= index < len(values):
            raise self.err(ExpectedMapElement(index))
        return body(self.sub_decoder(values[index].clone(), ""))
