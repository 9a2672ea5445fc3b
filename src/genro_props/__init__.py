# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Genro-Props - Immutable, path-keyed .properties data.

A lightweight, zero-dependency library that reads and writes the
line oriented key=value .properties format into an immutable store
keyed by dotted paths (Genro Kyō).
"""

__version__ = "0.1.0"

from .exceptions import (
    InvalidNameError,
    InvalidPathError,
    MalformedEscapeError,
    MissingAssignmentError,
    MissingPropertyError,
    NullArgumentError,
    PropertiesError,
    UnmarshallError,
)
from .marshalling import MarshallRegistry, register_properties
from .parsers import PropertiesParser, parse_properties
from .path import SEPARATOR, PropertiesName, PropertiesPath
from .printers import IndentingPrinter, LineEnding, write_properties
from .store import EMPTY, HasProperties, Properties

__all__ = [
    # Core classes
    "Properties",
    "PropertiesName",
    "PropertiesPath",
    "EMPTY",
    "SEPARATOR",
    "HasProperties",
    # Text
    "PropertiesParser",
    "parse_properties",
    "IndentingPrinter",
    "LineEnding",
    "write_properties",
    # JSON
    "MarshallRegistry",
    "register_properties",
    # Exceptions
    "PropertiesError",
    "InvalidNameError",
    "InvalidPathError",
    "MalformedEscapeError",
    "MissingAssignmentError",
    "MissingPropertyError",
    "NullArgumentError",
    "UnmarshallError",
]
