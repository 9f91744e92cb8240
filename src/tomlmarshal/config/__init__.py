# topmark:header:start
#
#   project      : TomlMarshal
#   file         : __init__.py
#   file_relpath : src/tomlmarshal/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Runtime configuration for TomlMarshal (logging only)."""

from __future__ import annotations

from tomlmarshal.config import logging

__all__: list[str] = ["logging"]
