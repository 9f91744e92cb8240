# topmark:header:start
#
#   project      : TomlMarshal
#   file         : diagnostics.py
#   file_relpath : src/tomlmarshal/diagnostics.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Dotted paths, mismatch errors and unused-key reporting.

Sections:
    * Paths: `join_path` builds the ``a.b.c`` location carried by decode errors.
    * Errors: `mismatch` chooses between "missing" and "wrong type".
    * Leftovers: `iter_leaves` walks a tree; `leftover_paths` lists what a decode
      did not consume.
    * DiagnosticLog: collects human-readable warnings (one per unused key).
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

from tomlmarshal.config.logging import get_logger
from tomlmarshal.constants import PATH_SEPARATOR
from tomlmarshal.errors import DecodeError, ExpectedField, ExpectedType
from tomlmarshal.value.model import Array, Table

if TYPE_CHECKING:
    from tomlmarshal.config.logging import TomlMarshalLogger
    from tomlmarshal.value.model import Value

logger: TomlMarshalLogger = get_logger(__name__)

# --- Paths ---


def join_path(parent: str | None, name: str) -> str | None:
    """Extend a dotted path with one more component.

    An empty ``name`` keeps the parent path unchanged; this is how sequence elements,
    map values and tagged-union trials share the path of their container.

    Args:
        parent (str | None): Current path, or None at the root.
        name (str): Component to append.

    Returns:
        str | None: The extended path.
    """
    if not name:
        return parent
    if parent is None:
        return name
    return f"{parent}{PATH_SEPARATOR}{name}"


# --- Errors ---


def mismatch(expected: str, held: Value | None, path: str | None) -> DecodeError:
    """Build the error for a read that found the wrong thing.

    Args:
        expected (str): Type name the read wanted.
        held (Value | None): What the decoder currently holds.
        path (str | None): Dotted path of the location.

    Returns:
        DecodeError: ``ExpectedField`` when nothing is held, ``ExpectedType`` otherwise.
    """
    if held is None:
        return DecodeError(ExpectedField(expected), path)
    return DecodeError(ExpectedType(expected, held.type_str()), path)


# --- Leftovers ---


def leftover_paths(leftover: Value | None, prefix: str | None = None) -> list[str]:
    """Return the dotted path of every leaf left unconsumed by a decode.

    Tables are walked key by key; array elements are rendered as ``path[i]``. Empty
    containers are reported at their own path.

    Args:
        leftover (Value | None): The decoder's residue (``Decoder.toml``).
        prefix (str | None): Path of ``leftover`` itself.

    Returns:
        list[str]: Paths in document order. Empty when everything was consumed.
    """
    if leftover is None:
        return []
    return [path for path, _value in iter_leaves(leftover, prefix)]


def iter_leaves(value: Value, path: str | None = None) -> Iterator[tuple[str, Value]]:
    """Yield ``(dotted path, value)`` for every leaf of a value tree.

    Empty tables and arrays count as leaves. The root itself is only yielded when
    ``path`` is given.
    """
    if isinstance(value, Table) and len(value) > 0:
        for key, item in value.entries.items():
            yield from iter_leaves(item, join_path(path, key))
    elif isinstance(value, Array) and len(value) > 0:
        base: str = path or ""
        for index, item in enumerate(value.items):
            yield from iter_leaves(item, f"{base}[{index}]")
    elif path is not None:
        yield path, value


# --- Diagnostic log ---


class DiagnosticLevel(Enum):
    """Severity levels for diagnostics collected while loading a document."""

    WARNING = "warning"


@dataclass(frozen=True)
class Diagnostic:
    """Structured diagnostic with a severity level and message."""

    level: DiagnosticLevel
    message: str


@dataclass
class DiagnosticLog:
    """Mutable collection of diagnostics for one load."""

    items: list[Diagnostic] = field(default_factory=lambda: [])

    def _add(self, diagnostic: Diagnostic) -> None:
        self.items.append(diagnostic)
        logger.trace("Adding [%s]: %r", diagnostic.level.value, diagnostic.message)

    def add_warning(self, message: str) -> None:
        """Add a ``warning`` diagnostic."""
        self._add(Diagnostic(DiagnosticLevel.WARNING, message))

    def has_warning(self) -> bool:
        """Return True if the log contains warning diagnostics."""
        return any(d.level == DiagnosticLevel.WARNING for d in self.items)

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)


def record_unused_keys(leftover: Value | None, diagnostics: DiagnosticLog) -> list[str]:
    """Add one warning per unconsumed key and return the paths.

    Args:
        leftover (Value | None): The decoder's residue.
        diagnostics (DiagnosticLog): Log receiving the warnings.

    Returns:
        list[str]: The unused key paths.
    """
    paths: list[str] = leftover_paths(leftover)
    for path in paths:
        logger.warning("Unused key: %s", path)
        diagnostics.add_warning(f"unused key `{path}`")
    return paths
