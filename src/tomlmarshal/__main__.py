# topmark:header:start
#
#   project      : TomlMarshal
#   file         : __main__.py
#   file_relpath : src/tomlmarshal/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Allow ``python -m tomlmarshal``."""

from tomlmarshal.cli.main import cli

if __name__ == "__main__":
    cli()
