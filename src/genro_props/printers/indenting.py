# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""IndentingPrinter - Line and indentation aware text output."""

from __future__ import annotations

import io
import re
from enum import Enum
from typing import TextIO

from ..exceptions import NullArgumentError

_LINE_BREAK = re.compile(r'\r\n|\r|\n')


class LineEnding(Enum):
    """Line terminators accepted by the properties format."""

    CR = '\r'
    NL = '\n'
    CRNL = '\r\n'

    def __str__(self) -> str:
        return self.value


class IndentingPrinter:
    """Writes text to a stream, indenting every line it starts.

    Line breaks inside printed text are normalized to ``line_ending`` and
    the following line is indented to the current level.

    Example:
        >>> printer = IndentingPrinter()
        >>> printer.print('root')
        >>> printer.indent()
        >>> printer.line_start()
        >>> printer.print('child')
        >>> printer.text
        'root\\n  child'
    """

    __slots__ = ('_stream', 'line_ending', 'indentation', '_level', '_at_line_start')

    def __init__(
        self,
        stream: TextIO | None = None,
        line_ending: LineEnding = LineEnding.NL,
        indentation: str = '  ',
    ) -> None:
        """Initialize the printer.

        Args:
            stream: Destination; a new StringIO when omitted.
            line_ending: Terminator written for every line break.
            indentation: Text written once per level at each line start.
        """
        if line_ending is None:
            raise NullArgumentError('line_ending')
        if indentation is None:
            raise NullArgumentError('indentation')
        self._stream = stream if stream is not None else io.StringIO()
        self.line_ending = line_ending
        self.indentation = indentation
        self._level = 0
        self._at_line_start = True

    @property
    def level(self) -> int:
        """Current indentation depth."""
        return self._level

    def indent(self) -> None:
        self._level += 1

    def outdent(self) -> None:
        if self._level == 0:
            raise ValueError("Cannot outdent below level 0")
        self._level -= 1

    def print(self, text: str) -> None:
        """Write text, indenting each line it starts."""
        if text is None:
            raise NullArgumentError('text')

        for index, line in enumerate(_LINE_BREAK.split(text)):
            if index:
                self.println()
            if line:
                if self._at_line_start:
                    self._stream.write(self.indentation * self._level)
                    self._at_line_start = False
                self._stream.write(line)

    def println(self, text: str = '') -> None:
        """Write text followed by the line ending."""
        if text:
            self.print(text)
        self._stream.write(self.line_ending.value)
        self._at_line_start = True

    def line_start(self) -> None:
        """End the current line unless nothing has been written on it."""
        if not self._at_line_start:
            self.println()

    def flush(self) -> None:
        self._stream.flush()

    @property
    def text(self) -> str:
        """Everything written so far, when printing to the default StringIO."""
        if not isinstance(self._stream, io.StringIO):
            raise TypeError("text is only available when printing to a StringIO")
        return self._stream.getvalue()
