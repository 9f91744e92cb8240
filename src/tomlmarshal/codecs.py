# topmark:header:start
#
#   project      : TomlMarshal
#   file         : codecs.py
#   file_relpath : src/tomlmarshal/codecs.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Built-in codecs: adapters for types the application does not own.

Codecs are composed explicitly; nothing is derived from annotations at runtime.

Example:
    ```python
    from dataclasses import dataclass

    from tomlmarshal.codecs import INT, STR, Field, ListOf, OptionalOf, Record


    @dataclass
    class Server:
        host: str
        ports: list[int]
        name: str | None = None


    SERVER = Record(
        Server,
        [
            Field("host", STR),
            Field("ports", ListOf(INT)),
            Field("name", OptionalOf(STR)),
        ],
    )
    ```

Sections:
    * Scalars: `INT`, `FLOAT`, `BOOL`, `STR`, `CHAR`, `NIL`, `DATETIME`.
    * Containers: `ListOf`, `SetOf`, `TupleOf`, `OptionalOf`, `MapOf`.
    * Records: `Record` + `Field`.
    * Tagged unions: `TaggedUnion` + `Variant`.
    * Bridging: `Adapted` for classes implementing `Encodable` / `Decodable`.
"""

from __future__ import annotations

import datetime as dt
from collections.abc import Callable, Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from functools import partial
from typing import TYPE_CHECKING, Any, Final, Generic, TypeVar

from tomlmarshal.config.logging import get_logger
from tomlmarshal.decoder import Decoder
from tomlmarshal.encoder import Encoder

if TYPE_CHECKING:
    from tomlmarshal.config.logging import TomlMarshalLogger
    from tomlmarshal.protocol import Codec

logger: TomlMarshalLogger = get_logger(__name__)

T = TypeVar("T")
V = TypeVar("V")

# --- Scalars ---


@dataclass(frozen=True)
class Scalar(Generic[T]):
    """A leaf codec built from one emit method and one read method."""

    name: str
    emit: Callable[[Encoder, T], None]
    read: Callable[[Decoder], T]

    def encode(self, value: T, encoder: Encoder) -> None:
        """Emit ``value`` as a scalar."""
        self.emit(encoder, value)

    def decode(self, decoder: Decoder) -> T:
        """Read a scalar."""
        return self.read(decoder)


def _emit_nil(encoder: Encoder, _value: None) -> None:
    encoder.emit_nil()


INT: Final[Scalar[int]] = Scalar("int", Encoder.emit_int, Decoder.read_int)
FLOAT: Final[Scalar[float]] = Scalar("float", Encoder.emit_float, Decoder.read_float)
BOOL: Final[Scalar[bool]] = Scalar("bool", Encoder.emit_bool, Decoder.read_bool)
STR: Final[Scalar[str]] = Scalar("str", Encoder.emit_str, Decoder.read_str)
CHAR: Final[Scalar[str]] = Scalar("char", Encoder.emit_char, Decoder.read_char)
NIL: Final[Scalar[None]] = Scalar("nil", _emit_nil, Decoder.read_nil)
DATETIME: Final[Scalar[dt.datetime | dt.date | dt.time]] = Scalar(
    "datetime", Encoder.emit_datetime, Decoder.read_datetime
)


# --- Containers ---


@dataclass(frozen=True)
class ListOf(Generic[T]):
    """A ``list`` stored as a TOML array."""

    item: Codec[T]

    def encode(self, value: Sequence[T], encoder: Encoder) -> None:
        """Emit every element in order."""

        def body(e: Encoder) -> None:
            for index, element in enumerate(value):
                e.emit_sequence_element(index, partial(self.item.encode, element))

        encoder.emit_sequence(body)

    def decode(self, decoder: Decoder) -> list[T]:
        """Read every element of the held array."""
        return decoder.read_sequence(
            lambda d, length: [d.read_sequence_element(i, self.item.decode) for i in range(length)]
        )


@dataclass(frozen=True)
class SetOf(Generic[T]):
    """A ``set`` stored as a TOML array (sorted when the elements are orderable)."""

    item: Codec[T]

    def encode(self, value: Iterable[T], encoder: Encoder) -> None:
        """Emit the elements, sorted when possible for stable output."""
        elements: list[T] = list(value)
        try:
            elements = sorted(elements)  # type: ignore[type-var]
        except TypeError:
            # Unorderable elements keep iteration order
            logger.debug("SetOf elements are not orderable; keeping iteration order")
        ListOf(self.item).encode(elements, encoder)

    def decode(self, decoder: Decoder) -> set[T]:
        """Read the held array into a set."""
        return set(ListOf(self.item).decode(decoder))


class TupleOf:
    """A fixed-size ``tuple`` stored as a TOML array, one codec per position."""

    def __init__(self, *items: Codec[Any]) -> None:
        self.items: tuple[Codec[Any], ...] = items

    def __repr__(self) -> str:
        return f"TupleOf{self.items!r}"

    def encode(self, value: Sequence[Any], encoder: Encoder) -> None:
        """Emit each position with its codec.

        Raises:
            ValueError: If ``value`` does not have one element per codec.
        """
        if len(value) != len(self.items):
            raise ValueError(f"Expected a {len(self.items)}-tuple, got {len(value)} elements")

        def body(e: Encoder) -> None:
            for index, (codec, element) in enumerate(zip(self.items, value)):
                e.emit_tuple_element(index, partial(codec.encode, element))

        encoder.emit_tuple(body)

    def decode(self, decoder: Decoder) -> tuple[Any, ...]:
        """Read one element per codec; extra elements stay in the leftover."""
        return decoder.read_tuple(
            lambda d, _length: tuple(
                d.read_tuple_element(i, codec.decode) for i, codec in enumerate(self.items)
            )
        )


@dataclass(frozen=True)
class OptionalOf(Generic[T]):
    """A value that may be absent (``None``).

    Absent record fields are omitted from the table. ``None`` cannot be stored inside
    an array.
    """

    inner: Codec[T]

    def encode(self, value: T | None, encoder: Encoder) -> None:
        """Emit the value, or mark it absent."""
        if value is None:
            encoder.emit_optional_absent()
        else:
            encoder.emit_optional_present(partial(self.inner.encode, value))

    def decode(self, decoder: Decoder) -> T | None:
        """Read the value when present, else return None."""
        return decoder.read_optional(
            lambda d, present: self.inner.decode(d) if present else None
        )


@dataclass(frozen=True)
class MapOf(Generic[V]):
    """A string-keyed ``dict`` stored as a TOML table."""

    value: Codec[V]

    def encode(self, mapping: Mapping[str, V], encoder: Encoder) -> None:
        """Emit one key/value pair per entry."""

        def body(e: Encoder) -> None:
            for index, (key, item) in enumerate(mapping.items()):
                e.emit_map_key(index, partial(STR.encode, key))
                e.emit_map_value(index, partial(self.value.encode, item))

        encoder.emit_dynamic_map(body)

    def decode(self, decoder: Decoder) -> dict[str, V]:
        """Read every entry of the held table."""

        def body(d: Decoder, length: int) -> dict[str, V]:
            out: dict[str, V] = {}
            for index in range(length):
                key: str = d.read_map_key(index, STR.decode)
                out[key] = d.read_map_element(index, self.value.decode)
            return out

        return decoder.read_dynamic_map(body)


# --- Records ---


@dataclass(frozen=True)
class Field:
    """One record field.

    Attributes:
        name (str): TOML key (also the attribute / constructor argument by default).
        codec (Codec[Any]): Codec for the field's value.
        attr (str | None): Attribute and constructor keyword when it differs from
            ``name``.
    """

    name: str
    codec: Codec[Any]
    attr: str | None = None

    @property
    def attribute(self) -> str:
        """Return the attribute name this field reads and the factory keyword it fills."""
        return self.attr or self.name


@dataclass(frozen=True)
class Record(Generic[T]):
    """An object stored as a TOML table, one key per `Field`.

    Encoding reads each field's attribute; decoding calls ``factory`` with one keyword
    argument per field.
    """

    factory: Callable[..., T]
    fields: Sequence[Field] = field(default_factory=lambda: ())

    def encode(self, value: T, encoder: Encoder) -> None:
        """Emit one record field per `Field`, in declaration order."""

        def body(e: Encoder) -> None:
            for f in self.fields:
                e.emit_record_field(f.name, partial(f.codec.encode, getattr(value, f.attribute)))

        encoder.emit_record(body)

    def decode(self, decoder: Decoder) -> T:
        """Read every field, then build the object."""

        def body(d: Decoder) -> T:
            kwargs: dict[str, Any] = {
                f.attribute: d.read_record_field(f.name, f.codec.decode) for f in self.fields
            }
            return self.factory(**kwargs)

        return decoder.read_record(body)


# --- Tagged unions ---


def _identity(value: Any) -> Any:
    return value


@dataclass(frozen=True)
class Variant:
    """One alternative of a `TaggedUnion`.

    Attributes:
        name (str): Variant name (diagnostics only; not written to TOML).
        codec (Codec[Any]): Codec for the variant's payload.
        match (type | Callable[[Any], bool]): Selects this variant when encoding: a
            class (``isinstance``) or a predicate.
        wrap (Callable[[Any], Any]): Builds the union value from a decoded payload.
        unwrap (Callable[[Any], Any]): Extracts the payload from a union value.
    """

    name: str
    codec: Codec[Any]
    match: type | Callable[[Any], bool]
    wrap: Callable[[Any], Any] = _identity
    unwrap: Callable[[Any], Any] = _identity

    def matches(self, value: object) -> bool:
        """Return True if ``value`` should be encoded as this variant."""
        if isinstance(self.match, type):
            return isinstance(value, self.match)
        return bool(self.match(value))


class TaggedUnion:
    """A value that is one of several variants, with no tag written to TOML.

    Decoding tries the variants in declaration order and keeps the first that
    decodes, so list narrower shapes first (e.g. ``int`` before ``float``).
    """

    def __init__(self, *variants: Variant) -> None:
        self.variants: tuple[Variant, ...] = variants

    def __repr__(self) -> str:
        return f"TaggedUnion{tuple(v.name for v in self.variants)!r}"

    def encode(self, value: Any, encoder: Encoder) -> None:
        """Emit the payload of the first variant matching ``value``.

        Raises:
            TypeError: If no variant matches.
        """
        for index, variant in enumerate(self.variants):
            if not variant.matches(value):
                continue
            emit_payload = partial(variant.codec.encode, variant.unwrap(value))

            def body(e: Encoder, variant: Variant = variant, index: int = index) -> None:
                e.emit_variant(variant.name, index, lambda e: e.emit_variant_arg(0, emit_payload))

            encoder.emit_tagged_union(body)
            return
        raise TypeError(f"No variant of {self!r} matches {value!r}")

    def decode(self, decoder: Decoder) -> Any:
        """Try each variant in turn on the held value."""

        def body(d: Decoder, index: int) -> Any:
            variant: Variant = self.variants[index]
            return variant.wrap(d.read_variant_arg(0, variant.codec.decode))

        return decoder.read_tagged_union([v.name for v in self.variants], body)


# --- Bridging ---


class Adapted(Generic[T]):
    """Codec for a class that implements `Encodable` and `Decodable` itself."""

    def __init__(self, cls: type[T]) -> None:
        self.cls: type[T] = cls

    def __repr__(self) -> str:
        return f"Adapted({self.cls.__name__})"

    def encode(self, value: T, encoder: Encoder) -> None:
        """Delegate to ``value.encode``."""
        value.encode(encoder)  # type: ignore[attr-defined]

    def decode(self, decoder: Decoder) -> T:
        """Delegate to ``cls.decode``."""
        return self.cls.decode(decoder)  # type: ignore[attr-defined]
