# topmark:header:start
#
#   project      : TomlMarshal
#   file         : __init__.py
#   file_relpath : src/tomlmarshal/io/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TOML text boundary: parsing into and rendering from the value model.

TomlMarshal uses `tomlkit` for both directions:

- `parse()` / `load_toml_value()` turn TOML text into a root `Table`.
- `render()` turns a `Table` back into TOML text.
- `normalize()` round-trips text through the value model.
"""

from __future__ import annotations

from .loaders import load_toml_value, parse
from .render import normalize, render

# --- Exported symbols ---

__all__: list[str] = [
    "load_toml_value",
    "normalize",
    "parse",
    "render",
]
