# topmark:header:start
#
#   project      : TomlMarshal
#   file         : encoder.py
#   file_relpath : src/tomlmarshal/encoder.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Encoder: turn adapter emission calls into a TOML `Table`.

The encoder keeps a single "what happens to the next value" slot:

- `Start`: nothing pending; a bare value here is an error (`NEEDS_KEY`).
- `NextKey(name)`: the next value is stored under ``name`` in `Encoder.toml`.
- `NextArray(items)`: the next value is appended to ``items``.
- `NextMapKey`: the next value must be a string and becomes the pending key.

Every nested operation swaps the slot, runs its body, then swaps the previous state
back. Nested records are emitted into a fresh `Encoder` whose table is then stored as
a single value, so the slot never needs more than one level of history.

The top-level record is the exception: it is emitted straight into ``self.toml``.
"""

from __future__ import annotations

import datetime as dt
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Union

from tomlmarshal.config.logging import get_logger
from tomlmarshal.errors import EncodeError, EncodeErrorKind, EncoderContractError
from tomlmarshal.value.model import Array, Boolean, Datetime, Float, Integer, String, Table

if TYPE_CHECKING:
    from tomlmarshal.config.logging import TomlMarshalLogger
    from tomlmarshal.value.model import Value

logger: TomlMarshalLogger = get_logger(__name__)

EmitBody = Callable[["Encoder"], None]


# --- Encoder states ---


@dataclass(frozen=True)
class Start:
    """No pending context."""


@dataclass(frozen=True)
class NextKey:
    """The next value is bound to ``name``."""

    name: str


@dataclass
class NextArray:
    """The next value is appended to ``items``."""

    items: list[Value] = field(default_factory=lambda: [])


@dataclass(frozen=True)
class NextMapKey:
    """The next value is a dynamic-map key."""


EncoderState = Union[Start, NextKey, NextArray, NextMapKey]


class Encoder:
    """Collects emitted values into a TOML table.

    Attributes:
        toml (dict[str, Value]): The table being built. Read it (or wrap it with
            `Table`) once the top-level value has been emitted.
        state (EncoderState): The pending context for the next emitted value.
    """

    def __init__(self) -> None:
        self.toml: dict[str, Value] = {}
        self.state: EncoderState = Start()

    def _replace_state(self, new: EncoderState) -> EncoderState:
        old: EncoderState = self.state
        self.state = new
        logger.trace("encoder state %r -> %r", old, new)
        return old

    # --- Scalars ---

    def emit_scalar(self, value: Value) -> None:
        """Route ``value`` into the active context.

        Args:
            value (Value): Any value; arrays and tables built elsewhere are accepted too.

        Raises:
            EncodeError: ``NEEDS_KEY`` with no pending context, ``INVALID_MAP_KEY_TYPE``
                when a non-string is emitted as a map key.
        """
        state: EncoderState = self._replace_state(Start())
        match state:
            case NextKey(name=name):
                self.toml[name] = value
            case NextArray(items=items):
                items.append(value)
                self.state = state
            case NextMapKey():
                if not isinstance(value, String):
                    raise EncodeError(EncodeErrorKind.INVALID_MAP_KEY_TYPE)
                self.state = NextKey(value.value)
            case Start():
                raise EncodeError(EncodeErrorKind.NEEDS_KEY)

    def emit_nil(self) -> None:
        """Emit the unit value, represented as an empty string."""
        self.emit_scalar(String(""))

    def emit_int(self, value: int) -> None:
        """Emit an integer.

        Raises:
            ValueError: If ``value`` does not fit in 64 bits.
        """
        self.emit_scalar(Integer(value))

    def emit_float(self, value: float) -> None:
        """Emit a float."""
        self.emit_scalar(Float(float(value)))

    def emit_bool(self, value: bool) -> None:
        """Emit a boolean."""
        self.emit_scalar(Boolean(value))

    def emit_str(self, value: str) -> None:
        """Emit a string."""
        self.emit_scalar(String(value))

    def emit_char(self, value: str) -> None:
        """Emit a single character as a one-character string.

        Raises:
            ValueError: If ``value`` is not exactly one character long.
        """
        if len(value) != 1:
            raise ValueError(f"Expected a single character, got {value!r}")
        self.emit_scalar(String(value))

    def emit_datetime(self, value: dt.datetime | dt.date | dt.time) -> None:
        """Emit a date-time, date or time."""
        self.emit_scalar(Datetime(value))

    # --- Records ---

    def emit_record(self, body: EmitBody) -> None:
        """Emit a table whose entries are produced by ``body``.

        Args:
            body (EmitBody): Calls `emit_record_field` once per field.

        Raises:
            EncodeError: ``INVALID_MAP_KEY_LOCATION`` when a map key is expected.
        """
        state: EncoderState = self._replace_state(Start())
        match state:
            case NextKey(name=name):
                nested = Encoder()
                body(nested)
                self.toml[name] = Table(nested.toml)
            case NextArray(items=items):
                nested = Encoder()
                body(nested)
                items.append(Table(nested.toml))
                self.state = state
            case Start():
                body(self)
            case NextMapKey():
                raise EncodeError(EncodeErrorKind.INVALID_MAP_KEY_LOCATION)

    def emit_record_field(self, name: str, body: EmitBody) -> None:
        """Emit one field of the current record.

        Args:
            name (str): Key under which the field is stored.
            body (EmitBody): Emits exactly one value (or an absent optional).

        Raises:
            EncodeError: ``NO_VALUE`` when ``body`` did not emit a value.
        """
        old: EncoderState = self._replace_state(NextKey(name))
        body(self)
        if not isinstance(self.state, Start):
            logger.debug("field %r left encoder in state %r", name, self.state)
            raise EncodeError(EncodeErrorKind.NO_VALUE)
        self.state = old

    # --- Sequences ---

    def emit_sequence(self, body: EmitBody) -> None:
        """Emit an array whose elements are produced by ``body``.

        The collected array is routed through `emit_scalar` under the context that was
        active before the sequence started.
        """
        old: EncoderState = self._replace_state(NextArray())
        body(self)
        state: EncoderState = self._replace_state(old)
        if not isinstance(state, NextArray):
            raise EncoderContractError(f"sequence body left the encoder in state {state!r}")
        self.emit_scalar(Array(state.items))

    def emit_sequence_element(
        self,
        index: int,  # pylint: disable=unused-argument
        body: EmitBody,
    ) -> None:
        """Emit one array element."""
        body(self)

    def emit_tuple(self, body: EmitBody) -> None:
        """Emit a fixed-size tuple as an array."""
        self.emit_sequence(body)

    def emit_tuple_element(self, index: int, body: EmitBody) -> None:
        """Emit one tuple element."""
        self.emit_sequence_element(index, body)

    # --- Optionals ---

    def emit_optional_present(self, body: EmitBody) -> None:
        """Emit a present optional value: ``body`` emits it in place."""
        body(self)

    def emit_optional_absent(self) -> None:
        """Emit an absent optional value.

        Under a record field the key is simply left out of the table.

        Raises:
            EncodeError: ``INVALID_MAP_KEY_LOCATION`` when a map key is expected.
            EncoderContractError: Inside an array (arrays cannot hold a hole) or with
                no pending context at all.
        """
        state: EncoderState = self._replace_state(Start())
        match state:
            case NextKey(name=name):
                logger.trace("omitting absent field %r", name)
            case NextArray():
                raise EncoderContractError("cannot encode an absent value inside an array")
            case NextMapKey():
                raise EncodeError(EncodeErrorKind.INVALID_MAP_KEY_LOCATION)
            case Start():
                raise EncoderContractError("cannot encode an absent value without a key")

    # --- Tagged unions ---

    def emit_tagged_union(self, body: EmitBody) -> None:
        """Emit a tagged union. No discriminant is written: ``body`` emits the payload."""
        body(self)

    def emit_variant(self, name: str, index: int, body: EmitBody) -> None:
        """Emit the selected variant of a tagged union."""
        logger.trace("emitting variant %s (#%d)", name, index)
        body(self)

    def emit_variant_arg(
        self,
        index: int,  # pylint: disable=unused-argument
        body: EmitBody,
    ) -> None:
        """Emit one payload argument of a variant."""
        body(self)

    # --- Dynamic maps ---

    def emit_dynamic_map(self, body: EmitBody) -> None:
        """Emit a string-keyed map; ``body`` pairs `emit_map_key` with `emit_map_value`."""
        self.emit_record(body)

    def emit_map_key(
        self,
        index: int,  # pylint: disable=unused-argument
        body: EmitBody,
    ) -> None:
        """Emit the key of the next map entry.

        Raises:
            EncodeError: ``INVALID_MAP_KEY_LOCATION`` when called while another value
                is pending, or when ``body`` did not produce a key.
        """
        old: EncoderState = self._replace_state(NextMapKey())
        if not isinstance(old, Start):
            raise EncodeError(EncodeErrorKind.INVALID_MAP_KEY_LOCATION)
        body(self)
        if not isinstance(self.state, NextKey):
            raise EncodeError(EncodeErrorKind.INVALID_MAP_KEY_LOCATION)

    def emit_map_value(
        self,
        index: int,  # pylint: disable=unused-argument
        body: EmitBody,
    ) -> None:
        """Emit the value of the current map entry under the pending key."""
        body(self)
