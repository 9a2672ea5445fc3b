# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Properties - An immutable, path-keyed store of string values.

This module provides the Properties class, the container produced by the
properties parser. Keys are PropertiesPath instances ('a.b.c'), values
are plain strings, and every mutation returns a new instance.

Key Features:
    - **Immutable**: set() and remove() return new instances
    - **Identity preserving**: a no-op set() or remove() returns self
    - **Path ordered**: iteration follows PropertiesPath ordering, not
      insertion order
    - **Read-only views**: entries(), keys() and values() cannot be mutated

Example:
    Basic usage::

        props = Properties.parse('db.host=localhost\\ndb.port=5432\\n')
        props.get('db.host')            # 'localhost'

        updated = props.set('db.port', '6543')
        props.get('db.port')            # '5432' (unchanged)
        updated.get('db.port')          # '6543'

        props.set('db.host', 'localhost') is props   # True
"""

from __future__ import annotations

from collections.abc import ItemsView, KeysView, Mapping, ValuesView
from types import MappingProxyType
from typing import Any, ClassVar, Iterable, Iterator, Protocol, TYPE_CHECKING, runtime_checkable

from ..exceptions import InvalidPathError, MissingPropertyError, NullArgumentError
from ..path import PropertiesPath

if TYPE_CHECKING:
    from ..printers.indenting import IndentingPrinter, LineEnding


def _check_value(value: Any) -> str:
    if value is None:
        raise NullArgumentError('value')
    if not isinstance(value, str):
        raise TypeError(f"value must be str, not {type(value).__name__}")
    return value


class Properties(Mapping):
    """An immutable mapping from PropertiesPath to string values.

    Properties provides:
    - get(path): Value or None
    - set(path, value) / remove(path): New instances, or self when unchanged
    - entries() / keys() / values(): Read-only views in path order
    - parse(text) / text: The .properties text format

    Paths may be given as PropertiesPath or as dotted text.

    Attributes:
        EMPTY: The shared instance with no entries. Removing the last
            entry of any instance returns it.

    Example:
        >>> props = Properties.EMPTY.set('key.1', 'value1')
        >>> props['key.1']
        'value1'
        >>> props.remove('key.1') is Properties.EMPTY
        True
    """

    __slots__ = ('_entries', '_hash')

    EMPTY: ClassVar[Properties]

    def __new__(
        cls,
        source: Mapping[PropertiesPath | str, str]
        | Iterable[tuple[PropertiesPath | str, str]]
        | None = None,
    ) -> Properties:
        """Create Properties from initial entries.

        Args:
            source: Optional initial entries, a mapping or an iterable of
                (path, value) pairs. Paths may be dotted text. Later pairs
                replace earlier ones with the same path.

        Returns:
            A new instance, or EMPTY when source holds no entries.

        Example:
            >>> Properties({'a.b': '1', 'a.c': '2'})
            >>> Properties([('a.b', '1')])
        """
        entries: dict[PropertiesPath, str] = {}
        if source is not None:
            pairs = source.items() if isinstance(source, Mapping) else source
            for path, value in pairs:
                entries[PropertiesPath.coerce(path)] = _check_value(value)

        empty = cls.__dict__.get('EMPTY')
        if not entries and empty is not None:
            return empty
        return cls._with_entries(entries)

    @staticmethod
    def _freeze(entries: dict[PropertiesPath, str]) -> MappingProxyType:
        """Return a read-only proxy over entries sorted by path."""
        return MappingProxyType(dict(sorted(entries.items())))

    @classmethod
    def _with_entries(cls, entries: dict[PropertiesPath, str]) -> Properties:
        properties = object.__new__(cls)
        properties._entries = cls._freeze(entries)
        properties._hash = None
        return properties

    # ==================== Special Methods ====================

    def __repr__(self) -> str:
        """Return representation showing dotted keys and values."""
        content = {path.value: value for path, value in self._entries.items()}
        return f"Properties({content!r})"

    def __str__(self) -> str:
        """Return the .properties text of this store."""
        return self.text

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[PropertiesPath]:
        """Iterate over paths in path order."""
        return iter(self._entries)

    def __contains__(self, path: object) -> bool:
        if isinstance(path, str):
            try:
                path = PropertiesPath.parse(path)
            except InvalidPathError:
                return False
        return path in self._entries

    def __getitem__(self, path: PropertiesPath | str) -> str:
        """Return the value at path.

        Raises:
            MissingPropertyError: If no value exists at path.
        """
        path = PropertiesPath.coerce(path)
        try:
            return self._entries[path]
        except KeyError:
            raise MissingPropertyError(path) from None

    def __eq__(self, other: Any) -> bool:
        if self is other:
            return True
        if not isinstance(other, Properties):
            return NotImplemented
        return self._entries == other._entries

    def __hash__(self) -> int:
        if self._hash is None:
            self._hash = hash(frozenset(self._entries.items()))
        return self._hash

    # ==================== Core API ====================

    def get(self, path: PropertiesPath | str, default: str | None = None) -> str | None:
        """Return the value at path, or default when absent.

        Raises:
            NullArgumentError: If path is None.
        """
        return self._entries.get(PropertiesPath.coerce(path), default)

    def get_or_fail(self, path: PropertiesPath | str) -> str:
        """Return the value at path, raising MissingPropertyError if absent."""
        return self[path]

    def set(self, path: PropertiesPath | str, value: str) -> Properties:
        """Return a Properties with path set to value.

        Returns self when path is already mapped to an equal value.

        Raises:
            NullArgumentError: If path or value is None.
        """
        path = PropertiesPath.coerce(path)
        value = _check_value(value)

        if self._entries.get(path) == value:
            return self

        entries = dict(self._entries)
        entries[path] = value
        return self._with_entries(entries)

    def remove(self, path: PropertiesPath | str) -> Properties:
        """Return a Properties without path.

        Returns self when path is absent, and EMPTY when the last entry
        is removed.
        """
        path = PropertiesPath.coerce(path)

        if path not in self._entries:
            return self
        if len(self._entries) == 1:
            return Properties.EMPTY

        entries = dict(self._entries)
        del entries[path]
        return self._with_entries(entries)

    # ==================== Views ====================

    def entries(self) -> ItemsView[PropertiesPath, str]:
        """Read-only view of (path, value) pairs in path order."""
        return self._entries.items()

    def items(self) -> ItemsView[PropertiesPath, str]:
        return self._entries.items()

    def keys(self) -> KeysView[PropertiesPath]:
        """Read-only view of paths in path order."""
        return self._entries.keys()

    def values(self) -> ValuesView[str]:
        """Read-only view of values in path order."""
        return self._entries.values()

    def size(self) -> int:
        """Return the number of entries."""
        return len(self._entries)

    @property
    def is_empty(self) -> bool:
        """True if there are no entries."""
        return not self._entries

    @property
    def properties(self) -> Properties:
        """Return self, satisfying HasProperties."""
        return self

    # ==================== Text ====================

    @classmethod
    def parse(cls, text: str) -> Properties:
        """Parse .properties text.

        See genro_props.parsers.properties for the accepted syntax.

        Raises:
            NullArgumentError: If text is None.
            MalformedEscapeError: On a bad \\uXXXX escape.
            MissingAssignmentError: If a key has no '=' or ':'.
            InvalidPathError: If a key is not a valid path.
        """
        from ..parsers.properties import parse_properties
        return parse_properties(text)

    @property
    def text(self) -> str:
        """The .properties text, one CRLF terminated line per entry."""
        from ..printers.properties import write_properties
        return write_properties(self)

    def print_tree(self, printer: IndentingPrinter) -> None:
        """Print every entry on its own line using printer.

        Args:
            printer: The indenting printer receiving the output.
        """
        from ..printers.properties import print_properties_tree
        print_properties_tree(self, printer)

    def tree_to_string(
        self,
        indentation: str = '  ',
        line_ending: LineEnding | None = None,
    ) -> str:
        """Return the output of print_tree() as a string."""
        from ..printers.indenting import IndentingPrinter, LineEnding

        printer = IndentingPrinter(
            indentation=indentation,
            line_ending=line_ending or LineEnding.NL,
        )
        self.print_tree(printer)
        return printer.text


Properties.EMPTY = Properties()


@runtime_checkable
class HasProperties(Protocol):
    """Anything exposing a Properties instance."""

    @property
    def properties(self) -> Properties:
        ...
