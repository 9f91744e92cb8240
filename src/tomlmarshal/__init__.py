# topmark:header:start
#
#   project      : TomlMarshal
#   file         : __init__.py
#   file_relpath : src/tomlmarshal/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TomlMarshal package.

TomlMarshal converts between TOML value trees and application objects. Objects take
part by driving an [`Encoder`][tomlmarshal.encoder.Encoder] or a
[`Decoder`][tomlmarshal.decoder.Decoder] through a small visitor protocol, either
themselves or through a codec from [`tomlmarshal.codecs`][tomlmarshal.codecs]. Decoding
keeps track of which parts of the input were not consumed.
"""

from __future__ import annotations

from tomlmarshal.api import (
    Decoded,
    decode,
    decode_or_raise,
    decode_str,
    decode_with_leftover,
    encode,
    encode_str,
    load,
)
from tomlmarshal.decoder import Decoder
from tomlmarshal.encoder import Encoder
from tomlmarshal.errors import (
    DecodeError,
    EncodeError,
    EncodeErrorKind,
    EncoderContractError,
    TomlParseError,
)
from tomlmarshal.io import parse, render
from tomlmarshal.protocol import Codec, Decodable, Encodable

__all__: list[str] = [
    "Codec",
    "DecodeError",
    "Decodable",
    "Decoded",
    "Decoder",
    "EncodeError",
    "EncodeErrorKind",
    "Encodable",
    "Encoder",
    "EncoderContractError",
    "TomlParseError",
    "decode",
    "decode_or_raise",
    "decode_str",
    "decode_with_leftover",
    "encode",
    "encode_str",
    "load",
    "parse",
    "render",
]
