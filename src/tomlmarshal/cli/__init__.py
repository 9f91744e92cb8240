# topmark:header:start
#
#   project      : TomlMarshal
#   file         : __init__.py
#   file_relpath : src/tomlmarshal/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Command-line interface for TomlMarshal (built on `click`)."""
