# topmark:header:start
#
#   project      : TomlMarshal
#   file         : protocol.py
#   file_relpath : src/tomlmarshal/protocol.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Adapter protocols for taking part in encoding and decoding.

Types never get discovered by introspection. A type takes part by driving the
[`Encoder`][tomlmarshal.encoder.Encoder] and [`Decoder`][tomlmarshal.decoder.Decoder]
itself, in one of two ways:

- A class you own implements `Encodable` and/or `Decodable` directly:

    ```python
    class Server:
        def __init__(self, host: str, port: int) -> None:
            self.host, self.port = host, port

        def encode(self, encoder: Encoder) -> None:
            def body(e: Encoder) -> None:
                e.emit_record_field("host", lambda e: e.emit_str(self.host))
                e.emit_record_field("port", lambda e: e.emit_int(self.port))

            encoder.emit_record(body)

        @classmethod
        def decode(cls, decoder: Decoder) -> Server:
            return decoder.read_record(
                lambda d: cls(
                    d.read_record_field("host", lambda d: d.read_str()),
                    d.read_record_field("port", lambda d: d.read_int()),
                )
            )
    ```

- A type you do not own (``int``, ``list``, ``dict``...) goes through a `Codec`, a
  separate object that knows how to emit and read it. See
  [`tomlmarshal.codecs`][tomlmarshal.codecs] for the built-in ones.

Both sides must emit (or read) exactly one value per value position.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, TypeVar, runtime_checkable

if TYPE_CHECKING:
    from tomlmarshal.decoder import Decoder
    from tomlmarshal.encoder import Encoder

T = TypeVar("T")
D = TypeVar("D", bound="Decodable")


@runtime_checkable
class Encodable(Protocol):
    """A value that can emit itself into an encoder."""

    def encode(self, encoder: Encoder) -> None:
        """Emit exactly one value into ``encoder``.

        Raises:
            EncodeError: When the emission protocol is violated.
        """
        ...


@runtime_checkable
class Decodable(Protocol):
    """A type that can build an instance of itself from a decoder."""

    @classmethod
    def decode(cls: type[D], decoder: Decoder) -> D:
        """Read exactly one value from ``decoder`` and build an instance.

        Raises:
            DecodeError: When the held value does not have the expected shape.
        """
        ...


@runtime_checkable
class Codec(Protocol[T]):
    """Encoder/decoder pair for values of type ``T``."""

    def encode(self, value: T, encoder: Encoder) -> None:
        """Emit ``value`` into ``encoder``."""
        ...

    def decode(self, decoder: Decoder) -> T:
        """Read one value from ``decoder``."""
        ...
