# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Hierarchical property keys.

A PropertiesPath is a dot separated sequence of PropertiesName segments,
so a flat properties file doubles as a namespace:

    >>> path = PropertiesPath.parse('db.primary.host')
    >>> path.name
    PropertiesName('host')
    >>> path.parent.value
    'db.primary'
    >>> path.parent.append(PropertiesName('port')).value
    'db.primary.port'

Both classes are immutable, hashable, and compare case-sensitively on
their textual value.
"""

from __future__ import annotations

from functools import total_ordering
from typing import Any, Iterator

from .exceptions import InvalidNameError, InvalidPathError, NullArgumentError

SEPARATOR = '.'


@total_ordering
class PropertiesName:
    """A single, non-empty path segment.

    Example:
        >>> PropertiesName('host').value
        'host'
        >>> PropertiesName('a.b')  # raises InvalidNameError
    """

    __slots__ = ('_value',)

    def __init__(self, value: str) -> None:
        if value is None:
            raise NullArgumentError('name')
        if not isinstance(value, str):
            raise TypeError(f"name must be str, not {type(value).__name__}")
        if not value:
            raise InvalidNameError("Name must not be empty")
        if SEPARATOR in value:
            raise InvalidNameError(f"Name {value!r} cannot contain {SEPARATOR!r}")
        self._value = value

    @property
    def value(self) -> str:
        """The segment text."""
        return self._value

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, PropertiesName):
            return NotImplemented
        return self._value == other._value

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, PropertiesName):
            return NotImplemented
        return self._value < other._value

    def __hash__(self) -> int:
        return hash(self._value)

    def __str__(self) -> str:
        return self._value

    def __repr__(self) -> str:
        return f"PropertiesName({self._value!r})"


@total_ordering
class PropertiesPath:
    """An immutable dotted key made of one or more PropertiesName.

    Instances are created with parse() or by appending to an existing
    path. A single segment path is a root: it has no parent.

    Attributes:
        value: The full dotted text, e.g. 'one.two.three'.
        name: The last segment.
        parent: The path without its last segment, or None for a root.
    """

    __slots__ = ('_names', '_value', '_parent')

    def __init__(self, names: tuple[PropertiesName, ...]) -> None:
        if not names:
            raise InvalidPathError("Path must have at least one name")
        self._names = names
        self._value = SEPARATOR.join(name.value for name in names)
        self._parent: PropertiesPath | None = None

    @classmethod
    def parse(cls, text: str) -> PropertiesPath:
        """Parse dotted text into a path.

        Args:
            text: Text such as 'one.two.three'.

        Returns:
            The parsed PropertiesPath.

        Raises:
            NullArgumentError: If text is None.
            InvalidPathError: If text is empty or any component is empty
                ('a..b', '.a', 'a.').
        """
        if text is None:
            raise NullArgumentError('text')
        if not isinstance(text, str):
            raise TypeError(f"path must be str, not {type(text).__name__}")
        if not text:
            raise InvalidPathError("Path must not be empty")

        segments = text.split(SEPARATOR)
        for index, segment in enumerate(segments):
            if not segment:
                raise InvalidPathError(
                    f"Path {text!r} has an empty component at {index}"
                )
        return cls(tuple(PropertiesName(segment) for segment in segments))

    @classmethod
    def coerce(cls, path: PropertiesPath | str, argument: str = 'path') -> PropertiesPath:
        """Accept a PropertiesPath or its dotted text."""
        if path is None:
            raise NullArgumentError(argument)
        if isinstance(path, PropertiesPath):
            return path
        if isinstance(path, str):
            return cls.parse(path)
        raise TypeError(
            f"{argument} must be PropertiesPath or str, not {type(path).__name__}"
        )

    # ==================== Structure ====================

    @property
    def value(self) -> str:
        """The full dotted text of this path."""
        return self._value

    @property
    def name(self) -> PropertiesName:
        """The last segment."""
        return self._names[-1]

    @property
    def names(self) -> tuple[PropertiesName, ...]:
        """All segments, root first."""
        return self._names

    @property
    def parent(self) -> PropertiesPath | None:
        """The enclosing path, computed once; None for a root path."""
        if self._parent is None and len(self._names) > 1:
            self._parent = PropertiesPath(self._names[:-1])
        return self._parent

    @property
    def is_root(self) -> bool:
        """True if this path has a single segment."""
        return len(self._names) == 1

    def append(self, other: PropertiesName | PropertiesPath | str) -> PropertiesPath:
        """Return a new path with a name or another path appended.

        Args:
            other: A PropertiesName adds one segment. A PropertiesPath, or
                dotted text, adds all of its segments.

        Example:
            >>> PropertiesPath.parse('one.two').append(PropertiesPath.parse('three.four')).value
            'one.two.three.four'
        """
        if other is None:
            raise NullArgumentError('name')
        if isinstance(other, PropertiesName):
            return PropertiesPath(self._names + (other,))
        return PropertiesPath(self._names + PropertiesPath.coerce(other, 'name')._names)

    def __iter__(self) -> Iterator[PropertiesName]:
        return iter(self._names)

    def __len__(self) -> int:
        return len(self._names)

    # ==================== Comparison ====================

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, PropertiesPath):
            return NotImplemented
        return self._value == other._value

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, PropertiesPath):
            return NotImplemented
        return self._value < other._value

    def __hash__(self) -> int:
        return hash(self._value)

    def __str__(self) -> str:
        return self._value

    def __repr__(self) -> str:
        return f"PropertiesPath({self._value!r})"
