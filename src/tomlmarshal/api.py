# topmark:header:start
#
#   project      : TomlMarshal
#   file         : api.py
#   file_relpath : src/tomlmarshal/api.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Top-level encode/decode entry points.

Encoding always raises on failure (`EncodeError`); whether that aborts the program is
the caller's decision. Decoding comes in three strengths:

- `decode` / `decode_str` return ``None`` on any failure.
- `decode_or_raise` raises the full `DecodeError`.
- `decode_with_leftover` also returns what the adapter did not consume.

`load` reads a file and records unused keys in an optional `DiagnosticLog`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from tomlmarshal.config.logging import get_logger
from tomlmarshal.decoder import Decoder
from tomlmarshal.diagnostics import leftover_paths, record_unused_keys
from tomlmarshal.encoder import Encoder
from tomlmarshal.errors import DecodeError, TomlParseError
from tomlmarshal.io.loaders import load_toml_value, parse
from tomlmarshal.io.render import render
from tomlmarshal.value.model import Table

if TYPE_CHECKING:
    from pathlib import Path

    from tomlmarshal.config.logging import TomlMarshalLogger
    from tomlmarshal.diagnostics import DiagnosticLog
    from tomlmarshal.protocol import Codec
    from tomlmarshal.value.model import Value

logger: TomlMarshalLogger = get_logger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class Decoded(Generic[T]):
    """Result of `decode_with_leftover`.

    Attributes:
        value (T): The decoded object.
        leftover (Value | None): Input the adapter did not consume, or None.
        unused_keys (list[str]): Dotted paths of the unconsumed leaves.
    """

    value: T
    leftover: Value | None
    unused_keys: list[str] = field(default_factory=lambda: [])


# --- Encoding ---


def encode(obj: Any, codec: Codec[Any] | None = None) -> Table:
    """Encode ``obj`` into a TOML table.

    Args:
        obj (Any): The object to encode. Without ``codec`` it must implement
            `Encodable`.
        codec (Codec[Any] | None): Codec for ``obj`` when it does not encode itself.

    Returns:
        Table: The encoded root table.

    Raises:
        EncodeError: If the adapter violates the emission protocol.
        EncoderContractError: If the adapter emits an absent value inside an array.
    """
    encoder = Encoder()
    if codec is None:
        obj.encode(encoder)
    else:
        codec.encode(obj, encoder)
    return Table(encoder.toml)


def encode_str(obj: Any, codec: Codec[Any] | None = None) -> str:
    """Encode ``obj`` and render it as a TOML document."""
    return render(encode(obj, codec))


# --- Decoding ---


def _run(decoder: Decoder, codec: Codec[T] | type[T]) -> T:
    if isinstance(codec, type):
        return codec.decode(decoder)  # type: ignore[attr-defined]
    return codec.decode(decoder)


def decode_or_raise(value: Value, codec: Codec[T] | type[T]) -> T:
    """Decode ``value`` with ``codec`` (a `Codec` or a `Decodable` class).

    Raises:
        DecodeError: If ``value`` does not have the shape ``codec`` expects.
    """
    return _run(Decoder(value), codec)


def decode(value: Value, codec: Codec[T] | type[T]) -> T | None:
    """Decode ``value``, returning None on any decode failure."""
    try:
        return decode_or_raise(value, codec)
    except DecodeError as exc:
        logger.debug("decode failed: %s", exc)
        return None


def decode_with_leftover(value: Value, codec: Codec[T] | type[T]) -> Decoded[T]:
    """Decode ``value`` and report what was not consumed.

    Raises:
        DecodeError: If ``value`` does not have the shape ``codec`` expects.
    """
    decoder = Decoder(value)
    result: T = _run(decoder, codec)
    return Decoded(result, decoder.toml, leftover_paths(decoder.toml))


def decode_str(text: str, codec: Codec[T] | type[T]) -> T | None:
    """Parse ``text`` and decode it, returning None on a parse or decode failure."""
    try:
        table: Table = parse(text)
    except TomlParseError as exc:
        logger.debug("parse failed: %s", exc)
        return None
    return decode(table, codec)


def load(
    path: Path,
    codec: Codec[T] | type[T],
    *,
    diagnostics: DiagnosticLog | None = None,
) -> T:
    """Read, parse and decode a TOML file.

    Args:
        path (Path): The TOML file.
        codec (Codec[T] | type[T]): Codec or `Decodable` class for the root table.
        diagnostics (DiagnosticLog | None): Receives one warning per unused key.

    Returns:
        T: The decoded object.

    Raises:
        OSError: If the file cannot be read.
        TomlParseError: If the file is not valid TOML.
        DecodeError: If the document does not have the expected shape.
    """
    decoded: Decoded[T] = decode_with_leftover(load_toml_value(path), codec)
    if diagnostics is not None:
        record_unused_keys(decoded.leftover, diagnostics)
    elif decoded.unused_keys:
        logger.info("%s: %d unused key(s)", path, len(decoded.unused_keys))
    return decoded.value
