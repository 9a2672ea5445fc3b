# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Properties exceptions.

Every concrete error also derives from the builtin exception a caller
would naturally catch (ValueError, TypeError, KeyError).
"""

from __future__ import annotations

from typing import Any, TYPE_CHECKING

if TYPE_CHECKING:
    from .path import PropertiesPath


class PropertiesError(Exception):
    """Base exception for properties errors."""

    pass


class InvalidNameError(PropertiesError, ValueError):
    """Raised when a name is empty or contains the path separator."""

    pass


class InvalidPathError(PropertiesError, ValueError):
    """Raised when a path contains an empty component."""

    pass


class NullArgumentError(PropertiesError, TypeError):
    """Raised when a required argument is None."""

    def __init__(self, argument: str) -> None:
        super().__init__(f"{argument} is required")
        self.argument = argument


class _TextPositionError(PropertiesError, ValueError):
    """Error located at a character position within parsed text."""

    def __init__(self, message: str, text: str, position: int | None) -> None:
        super().__init__(message)
        self.text = text
        self.position = position


class MalformedEscapeError(_TextPositionError):
    """Raised when a \\u escape is not followed by four hex digits."""

    def __init__(self, text: str, position: int) -> None:
        if position < len(text):
            message = (
                f"Invalid character {text[position]!r} at {position} "
                f"in unicode escape"
            )
        else:
            message = f"Incomplete unicode escape at end of text ({position})"
        super().__init__(message, text, position)


class MissingAssignmentError(_TextPositionError):
    """Raised when a key is not followed by '=' or ':'.

    ``position`` is the offending line terminator, or None when the key
    ran into the end of the text.
    """

    def __init__(self, text: str, position: int | None = None) -> None:
        if position is None:
            message = "Missing assignment following key"
        else:
            message = f"Missing assignment following key at {position}"
        super().__init__(message, text, position)


class MissingPropertyError(PropertiesError, KeyError):
    """Raised when a required property is absent."""

    def __init__(self, path: PropertiesPath) -> None:
        super().__init__(path)
        self.path = path

    def __str__(self) -> str:
        return f'Missing property "{self.path.value}"'


class UnmarshallError(PropertiesError, ValueError):
    """Raised when a JSON value cannot be converted to Properties."""

    def __init__(self, message: str, node: Any = None) -> None:
        super().__init__(message)
        self.node = node
