# topmark:header:start
#
#   project      : TomlMarshal
#   file         : errors.py
#   file_relpath : src/tomlmarshal/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by the encoder, the decoder and the parser boundary.

Encode and decode failures are kept apart:

- `EncodeError` signals that an adapter broke the emission protocol (a value with no
  key, a field with no value, a non-string map key). These are programmer errors.
- `DecodeError` signals that the input data does not have the shape the adapter asked
  for. These are expected, user-facing errors and carry the dotted path of the
  offending key.

`EncoderContractError` is raised for the one encode condition that has no recoverable
meaning at all: an absent optional value inside an array.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

from tomlmarshal.value.types import TypeName

# --- Encode side ---


class EncodeErrorKind(Enum):
    """Ways an adapter can violate the emission protocol."""

    NEEDS_KEY = "needs_key"
    NO_VALUE = "no_value"
    INVALID_MAP_KEY_LOCATION = "invalid_map_key_location"
    INVALID_MAP_KEY_TYPE = "invalid_map_key_type"


_ENCODE_MESSAGES: dict[EncodeErrorKind, str] = {
    EncodeErrorKind.NEEDS_KEY: "a value was emitted without a pending key",
    EncodeErrorKind.NO_VALUE: "a key was emitted without a value",
    EncodeErrorKind.INVALID_MAP_KEY_LOCATION: "a map key was emitted at an invalid location",
    EncodeErrorKind.INVALID_MAP_KEY_TYPE: "a map key must be a string",
}


class EncodeError(Exception):
    """An adapter emitted values in an order the encoder cannot represent."""

    def __init__(self, kind: EncodeErrorKind) -> None:
        super().__init__(_ENCODE_MESSAGES[kind])
        self.kind: EncodeErrorKind = kind

    def __repr__(self) -> str:
        return f"EncodeError({self.kind.name})"


class EncoderContractError(RuntimeError):
    """An adapter asked for something TOML cannot express at all."""


# --- Decode side ---


def _humanize(type_name: str) -> str:
    if type_name == TypeName.TABLE.value:
        return "a section"
    return f"a value of type `{type_name}`"


@dataclass(frozen=True)
class ExpectedField:
    """A value was required but nothing was present at the location."""

    type_name: str

    def message(self) -> str:
        """Render the message fragment for this kind."""
        if self.type_name == TypeName.TABLE.value:
            return "expected a section"
        return f"expected a value of type `{self.type_name}`"


@dataclass(frozen=True)
class ExpectedType:
    """A value was present but had the wrong shape."""

    expected: str
    found: str

    def message(self) -> str:
        """Render the message fragment for this kind."""
        return f"expected {_humanize(self.expected)}, but found {_humanize(self.found)}"


@dataclass(frozen=True)
class ExpectedMapKey:
    """Dynamic-map iteration asked for a key past the end of the table."""

    index: int

    def message(self) -> str:
        """Render the message fragment for this kind."""
        return f"expected at least {self.index + 1} keys"


@dataclass(frozen=True)
class ExpectedMapElement:
    """Dynamic-map iteration asked for a value past the end of the table."""

    index: int

    def message(self) -> str:
        """Render the message fragment for this kind."""
        return f"expected at least {self.index + 1} elements"


@dataclass(frozen=True)
class NoEnumVariants:
    """A tagged union was decoded with an empty candidate list."""

    def message(self) -> str:
        """Render the message fragment for this kind."""
        return "expected an enum variant to decode to"


@dataclass(frozen=True)
class NilTooLong:
    """The unit value was expected as an empty string, but the string had content."""

    def message(self) -> str:
        """Render the message fragment for this kind."""
        return "expected 0-length string"


DecodeErrorKind = Union[
    ExpectedField,
    ExpectedType,
    ExpectedMapKey,
    ExpectedMapElement,
    NoEnumVariants,
    NilTooLong,
]


class DecodeError(Exception):
    """The input does not match the shape requested by an adapter.

    Attributes:
        kind (DecodeErrorKind): What went wrong.
        field (str | None): Dotted path of the key being decoded, if any.
    """

    def __init__(self, kind: DecodeErrorKind, field: str | None = None) -> None:
        self.kind: DecodeErrorKind = kind
        self.field: str | None = field
        super().__init__(self.render())

    def render(self) -> str:
        """Return the one-line, user-facing message.

        Returns:
            str: e.g. ``expected a value of type `integer` for the key `server.port```.
        """
        text: str = self.kind.message()
        if self.field is not None:
            text += f" for the key `{self.field}`"
        return text

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"DecodeError(kind={self.kind!r}, field={self.field!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DecodeError):
            return NotImplemented
        return self.kind == other.kind and self.field == other.field

    def __hash__(self) -> int:
        return hash((self.kind, self.field))


# --- Parser boundary ---


class TomlParseError(ValueError):
    """TOML source text could not be parsed.

    Attributes:
        line (int | None): 1-based line reported by the parser, if known.
        col (int | None): 1-based column reported by the parser, if known.
    """

    def __init__(self, message: str, *, line: int | None = None, col: int | None = None) -> None:
        super().__init__(message)
        self.line: int | None = line
        self.col: int | None = col
