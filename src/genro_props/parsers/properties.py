# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Parser for .properties text.

The text is read in a single pass by two cooperating state machines:

- _CharDecoder turns raw characters into events, resolving backslash
  escapes ('\\t', '\\uXXXX', ...) and escaped line breaks (continuations).
- _TokenAssembler turns events into comments, keys and values, and
  commits each key/value pair into a Properties.

Events keep track of how a character was written. Only a raw '=' or ':'
ends a key, only a raw line terminator ends a value, and only raw
whitespace is skipped at the start of a value or continuation line.
Nothing is ever right-trimmed.

Syntax:
    # comment                  '!' also starts a comment line
    key = value                ':' may be used instead of '='
    long.key = first \\
               second          continuation, leading blanks skipped
    escapes = \\t \\n \\u0041     \\b \\f \\n \\r \\t \\\\ \\uXXXX

Example:
    >>> props = parse_properties('db.host = localhost\\ndb.port: 5432')
    >>> props['db.port']
    '5432'
"""

from __future__ import annotations

import logging
import re
from enum import Enum, auto
from typing import NamedTuple

from ..exceptions import MalformedEscapeError, MissingAssignmentError, NullArgumentError
from ..path import PropertiesPath
from ..store import Properties

logger = logging.getLogger(__name__)

BACKSLASH = '\\'
CR = '\r'
NL = '\n'

COMMENT_STARTS = frozenset('!#')
KEY_TERMINATORS = frozenset('=:')
WHITESPACE = frozenset(' \t\r\n\f\b\0')

ESCAPES = {
    'b': '\b',
    'f': '\f',
    'n': NL,
    'r': CR,
    't': '\t',
    BACKSLASH: BACKSLASH,
}

HEX_DIGITS = {c: int(c, 16) for c in '0123456789abcdefABCDEF'}

_SURROGATE = re.compile('[\ud800-\udfff]')


class CharMode(Enum):
    """States of the character decoding layer."""

    PLAIN = auto()
    ESCAPING = auto()
    ESCAPING_AFTER_CR = auto()
    ESCAPING_AFTER_NL = auto()
    UNICODE_0 = auto()
    UNICODE_1 = auto()
    UNICODE_2 = auto()
    UNICODE_3 = auto()


class TokenMode(Enum):
    """States of the token assembly layer."""

    SEEKING = auto()
    COMMENT = auto()
    KEY = auto()
    VALUE = auto()


class EventKind(Enum):
    """What the decoding layer produced for the token layer."""

    CHAR = auto()           # unescaped character
    ESCAPED = auto()        # character decoded from an escape
    LINE_END = auto()       # unescaped CR or NL
    CONTINUATION = auto()   # backslash followed by CR or NL


class Event(NamedTuple):
    kind: EventKind
    char: str
    position: int


_NEXT_UNICODE_MODE = {
    CharMode.UNICODE_0: CharMode.UNICODE_1,
    CharMode.UNICODE_1: CharMode.UNICODE_2,
    CharMode.UNICODE_2: CharMode.UNICODE_3,
}


class _CharDecoder:
    """Character layer: raw characters in, events out."""

    __slots__ = ('text', 'mode', 'code_unit')

    def __init__(self, text: str) -> None:
        self.text = text
        self.mode = CharMode.PLAIN
        self.code_unit = 0

    def feed(self, c: str, position: int) -> Event | None:
        """Consume one character, returning an event when one is complete."""
        mode = self.mode

        if mode is CharMode.ESCAPING_AFTER_CR or mode is CharMode.ESCAPING_AFTER_NL:
            self.mode = CharMode.PLAIN
            # CRNL and NLCR after a backslash form one continuation
            if c == (NL if mode is CharMode.ESCAPING_AFTER_CR else CR):
                return None
            mode = CharMode.PLAIN

        if mode is CharMode.PLAIN:
            if c == BACKSLASH:
                self.mode = CharMode.ESCAPING
                return None
            if c == CR or c == NL:
                return Event(EventKind.LINE_END, c, position)
            return Event(EventKind.CHAR, c, position)

        if mode is CharMode.ESCAPING:
            if c == 'u':
                self.mode = CharMode.UNICODE_0
                self.code_unit = 0
                return None
            if c == CR:
                self.mode = CharMode.ESCAPING_AFTER_CR
                return Event(EventKind.CONTINUATION, c, position)
            if c == NL:
                self.mode = CharMode.ESCAPING_AFTER_NL
                return Event(EventKind.CONTINUATION, c, position)
            self.mode = CharMode.PLAIN
            return Event(EventKind.ESCAPED, ESCAPES.get(c, c), position)

        digit = HEX_DIGITS.get(c)
        if digit is None:
            logger.debug("Invalid unicode escape digit %r at %d", c, position)
            raise MalformedEscapeError(self.text, position)
        self.code_unit = self.code_unit * 16 + digit

        if mode is CharMode.UNICODE_3:
            self.mode = CharMode.PLAIN
            return Event(EventKind.ESCAPED, chr(self.code_unit), position)
        self.mode = _NEXT_UNICODE_MODE[mode]
        return None

    def finish(self) -> None:
        """Check the decoder is not inside a unicode escape at end of text.

        A lone trailing backslash is dropped.
        """
        if self.mode in _NEXT_UNICODE_MODE or self.mode is CharMode.UNICODE_3:
            raise MalformedEscapeError(self.text, len(self.text))


class _TokenAssembler:
    """Token layer: events in, committed key/value pairs out."""

    __slots__ = ('text', 'mode', 'properties', 'key', 'buffer', 'key_end', 'skipping')

    def __init__(self, text: str) -> None:
        self.text = text
        self.mode = TokenMode.SEEKING
        self.properties = Properties.EMPTY
        self.key: PropertiesPath | None = None
        self.buffer: list[str] = []
        self.key_end = 0
        self.skipping = False

    @property
    def in_comment(self) -> bool:
        return self.mode is TokenMode.COMMENT

    def comment_char(self, c: str) -> None:
        """Discard a raw comment character; a line terminator ends the comment."""
        if c == CR or c == NL:
            self.mode = TokenMode.SEEKING

    def accept(self, event: Event) -> None:
        mode = self.mode
        if mode is TokenMode.SEEKING:
            self._seek(event)
        elif mode is TokenMode.KEY:
            self._key(event)
        else:
            self._value(event)

    def _seek(self, event: Event) -> None:
        kind, c, _ = event
        if kind is EventKind.LINE_END or kind is EventKind.CONTINUATION:
            return
        if kind is EventKind.CHAR:
            if c in WHITESPACE:
                return
            if c in COMMENT_STARTS:
                self.mode = TokenMode.COMMENT
                return

        self.mode = TokenMode.KEY
        self.buffer = []
        self.key_end = 0
        self.skipping = False
        self._key(event)

    def _key(self, event: Event) -> None:
        kind, c, position = event
        if kind is EventKind.LINE_END:
            logger.debug("Missing assignment at %d", position)
            raise MissingAssignmentError(self.text, position)
        if kind is EventKind.CONTINUATION:
            self.skipping = True
            return
        if kind is EventKind.CHAR:
            if c in KEY_TERMINATORS:
                self.key = PropertiesPath.parse(_join(self.buffer[:self.key_end]))
                self.buffer = []
                self.skipping = True
                self.mode = TokenMode.VALUE
                return
            if c in WHITESPACE:
                if not self.skipping:
                    self.buffer.append(c)
                return

        self.skipping = False
        self.buffer.append(c)
        self.key_end = len(self.buffer)

    def _value(self, event: Event) -> None:
        kind, c, _ = event
        if kind is EventKind.LINE_END:
            self.commit()
            self.mode = TokenMode.SEEKING
            return
        if kind is EventKind.CONTINUATION:
            self.skipping = True
            return
        if self.skipping:
            if kind is EventKind.CHAR and c in WHITESPACE:
                return
            self.skipping = False
        self.buffer.append(c)

    def commit(self) -> None:
        self.properties = self.properties.set(self.key, _join(self.buffer))
        self.key = None
        self.buffer = []

    def finish(self) -> Properties:
        """Close the pending token at end of text and return the result."""
        if self.mode is TokenMode.KEY:
            logger.debug("Missing assignment at end of text")
            raise MissingAssignmentError(self.text)
        if self.mode is TokenMode.VALUE:
            self.commit()
        return self.properties


def _join(chars: list[str]) -> str:
    """Join decoded characters, combining \\uXXXX surrogate pairs."""
    joined = ''.join(chars)
    if _SURROGATE.search(joined) is None:
        return joined
    return joined.encode('utf-16-le', 'surrogatepass').decode('utf-16-le', 'surrogatepass')


class PropertiesParser:
    """Parser for .properties text.

    Example:
        >>> PropertiesParser().parse('key1=111\\rkey2=222')
        Properties({'key1': '111', 'key2': '222'})
    """

    def parse(self, text: str) -> Properties:
        """Parse text into Properties.

        Args:
            text: The complete .properties content.

        Returns:
            The parsed Properties; EMPTY if text holds no entries.

        Raises:
            NullArgumentError: If text is None.
            MalformedEscapeError: If a \\u escape has a non hex digit
                within its four digits, or is cut off by end of text.
            MissingAssignmentError: If a key reaches a line terminator
                or end of text without '=' or ':'.
            InvalidPathError: If a key is empty or has an empty component.
        """
        if text is None:
            raise NullArgumentError('text')

        decoder = _CharDecoder(text)
        assembler = _TokenAssembler(text)

        for position, c in enumerate(text):
            if assembler.in_comment:
                assembler.comment_char(c)
                continue
            event = decoder.feed(c, position)
            if event is not None:
                assembler.accept(event)

        decoder.finish()
        properties = assembler.finish()
        logger.debug("Parsed %d properties from %d characters", len(properties), len(text))
        return properties


def parse_properties(text: str) -> Properties:
    """Parse .properties text into Properties."""
    return PropertiesParser().parse(text)
