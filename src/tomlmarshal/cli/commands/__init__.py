# topmark:header:start
#
#   project      : TomlMarshal
#   file         : __init__.py
#   file_relpath : src/tomlmarshal/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TomlMarshal CLI subcommands."""
