# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""JSON interchange for Properties.

A Properties maps to a flat JSON object whose names are the dotted keys
and whose values are the raw, unescaped strings:

    {"db.host": "localhost", "db.port": "5432"}

MarshallRegistry is a plain object owned by the caller. Nothing is
registered at import time; use register_properties() on the registry
that needs it.

Example:
    >>> registry = register_properties(MarshallRegistry())
    >>> registry.marshall_with_type(Properties.EMPTY.set('a', '1'))
    {'type': 'properties', 'value': {'a': '1'}}
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, Callable

from .exceptions import NullArgumentError, UnmarshallError
from .path import PropertiesPath
from .store import Properties

logger = logging.getLogger(__name__)

PROPERTIES_TYPE_NAME = 'properties'


def marshall(properties: Properties) -> dict[str, str]:
    """Convert properties to a JSON compatible dict, in path order."""
    if properties is None:
        raise NullArgumentError('properties')
    return {path.value: value for path, value in properties.entries()}


def unmarshall(node: Any) -> Properties:
    """Convert a JSON object (a dict) back to Properties.

    Raises:
        UnmarshallError: If node is not a dict or a value is not a string.
        InvalidPathError: If a name is not a valid path.
    """
    if node is None:
        raise NullArgumentError('node')
    if not isinstance(node, dict):
        raise UnmarshallError(
            f"Expected JSON object, got {type(node).__name__}", node
        )

    properties = Properties.EMPTY
    for name, value in node.items():
        if not isinstance(value, str):
            raise UnmarshallError(
                f"Property {name!r} must be a string, got {type(value).__name__}",
                node,
            )
        properties = properties.set(PropertiesPath.parse(name), value)
    return properties


def to_json(properties: Properties, **kwargs: Any) -> str:
    """Serialize properties to JSON text; kwargs go to json.dumps."""
    return json.dumps(marshall(properties), **kwargs)


def from_json(text: str) -> Properties:
    """Parse JSON text produced by to_json()."""
    if text is None:
        raise NullArgumentError('text')
    return unmarshall(json.loads(text))


@dataclass(frozen=True)
class MarshallEntry:
    """Marshalling functions registered for one type."""

    type_name: str
    type_: type
    marshaller: Callable[[Any], Any]
    unmarshaller: Callable[[Any], Any]


class MarshallRegistry:
    """Maps types to JSON marshalling functions and type names.

    Typed marshalling wraps a value as {"type": name, "value": json}, so
    it can be read back without knowing its class in advance.
    """

    def __init__(self) -> None:
        self._by_name: dict[str, MarshallEntry] = {}
        self._by_type: dict[type, MarshallEntry] = {}

    def __contains__(self, item: str | type) -> bool:
        return item in self._by_name or item in self._by_type

    def __len__(self) -> int:
        return len(self._by_name)

    def register(
        self,
        type_name: str,
        type_: type,
        marshaller: Callable[[Any], Any],
        unmarshaller: Callable[[Any], Any],
    ) -> MarshallRegistry:
        """Register marshalling functions for type_ under type_name.

        Returns:
            The registry, for chaining.

        Raises:
            ValueError: If type_name or type_ is already registered.
        """
        if type_name in self._by_name:
            raise ValueError(f"Type name {type_name!r} already registered")
        if type_ in self._by_type:
            raise ValueError(f"Type {type_.__name__} already registered")

        entry = MarshallEntry(type_name, type_, marshaller, unmarshaller)
        self._by_name[type_name] = entry
        self._by_type[type_] = entry
        logger.debug("Registered %s as %r", type_.__name__, type_name)
        return self

    def type_name(self, type_: type) -> str:
        """Return the name registered for type_."""
        return self._entry_for_type(type_).type_name

    def marshall(self, value: Any) -> Any:
        """Convert value with the marshaller registered for its type."""
        if value is None:
            raise NullArgumentError('value')
        return self._entry_for_type(type(value)).marshaller(value)

    def unmarshall(self, node: Any, type_: type) -> Any:
        """Convert node with the unmarshaller registered for type_."""
        return self._entry_for_type(type_).unmarshaller(node)

    def marshall_with_type(self, value: Any) -> dict[str, Any]:
        """Marshall value wrapped with its registered type name."""
        if value is None:
            raise NullArgumentError('value')
        entry = self._entry_for_type(type(value))
        return {'type': entry.type_name, 'value': entry.marshaller(value)}

    def unmarshall_with_type(self, node: Any) -> Any:
        """Read back the output of marshall_with_type()."""
        if not isinstance(node, dict) or 'type' not in node or 'value' not in node:
            raise UnmarshallError("Expected object with 'type' and 'value'", node)
        entry = self._by_name.get(node['type'])
        if entry is None:
            raise UnmarshallError(f"Unknown type {node['type']!r}", node)
        return entry.unmarshaller(node['value'])

    def _entry_for_type(self, type_: type) -> MarshallEntry:
        entry = self._by_type.get(type_)
        if entry is None:
            raise TypeError(f"Type {type_.__name__} is not registered")
        return entry


def register_properties(registry: MarshallRegistry) -> MarshallRegistry:
    """Register Properties with registry and return it."""
    if registry is None:
        raise NullArgumentError('registry')
    return registry.register(PROPERTIES_TYPE_NAME, Properties, marshall, unmarshall)
