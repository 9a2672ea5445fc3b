# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Writers producing .properties text from Properties.

The output is the canonical form read back by genro_props.parsers:
every entry becomes ``key=value`` on its own line, with values escaped
so that parsing the text returns equal Properties.

Escaping rules for values:
    - backspace, form feed, tab and backslash use \\b \\f \\t \\\\
    - other characters below 0x20 or from 0x80 up use \\uXXXX
      (two escapes, a surrogate pair, above U+FFFF)
    - a space starting a line is written '\\ '
    - a CR, NL or CRNL run is written as its escape letters followed by
      a backslash continuation when more of the value follows, so a
      multi line value stays multi line in the text

Keys use the same escapes, and additionally escape space, '=', ':',
'!', '#', CR and NL.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..exceptions import NullArgumentError
from .indenting import IndentingPrinter, LineEnding

if TYPE_CHECKING:
    from ..store import Properties

DEFAULT_LINE_ENDING = LineEnding.CRNL
ASSIGNMENT = '='

BACKSLASH = '\\'
CR = '\r'
NL = '\n'

VALUE_ESCAPES = {
    '\b': '\\b',
    '\f': '\\f',
    '\t': '\\t',
    BACKSLASH: '\\\\',
}

LINE_ESCAPES = {
    CR: '\\r',
    NL: '\\n',
}

KEY_ESCAPES = {
    **VALUE_ESCAPES,
    **LINE_ESCAPES,
    ' ': '\\ ',
    '=': '\\=',
    ':': '\\:',
    '!': '\\!',
    '#': '\\#',
}


def _escape_char(c: str, escapes: dict[str, str]) -> str:
    escaped = escapes.get(c)
    if escaped is not None:
        return escaped

    code = ord(c)
    if 0x20 <= code < 0x80:
        return c
    if code > 0xFFFF:
        code -= 0x10000
        return f'\\u{0xD800 + (code >> 10):04x}\\u{0xDC00 + (code & 0x3FF):04x}'
    return f'\\u{code:04x}'


def encode_key(key: str) -> str:
    """Escape the dotted text of a key."""
    return ''.join(_escape_char(c, KEY_ESCAPES) for c in key)


def encode_value(value: str) -> str:
    """Escape a value, turning embedded line breaks into continuations.

    Example:
        >>> encode_value('a\\tb')
        'a\\\\tb'
        >>> encode_value('one\\ntwo')
        'one\\\\n\\\\\\ntwo'
    """
    if value is None:
        raise NullArgumentError('value')

    out: list[str] = []
    pending = ''
    line_start = True

    for c in value:
        if c == NL and pending == CR:
            pending = CR + NL
            continue
        if c == CR or c == NL:
            if pending:
                _flush_line_ending(out, pending, continued=True)
            pending = c
            continue
        if pending:
            _flush_line_ending(out, pending, continued=True)
            pending = ''
            line_start = True

        if line_start and c == ' ':
            out.append('\\ ')
        else:
            out.append(_escape_char(c, VALUE_ESCAPES))
        line_start = False

    if pending:
        _flush_line_ending(out, pending, continued=False)

    return ''.join(out)


def _flush_line_ending(out: list[str], line_ending: str, continued: bool) -> None:
    out.extend(LINE_ESCAPES[c] for c in line_ending)
    if continued:
        out.append(BACKSLASH)
        out.append(line_ending)


def write_properties(
    properties: Properties,
    line_ending: LineEnding = DEFAULT_LINE_ENDING,
) -> str:
    """Return the .properties text for properties.

    Args:
        properties: The entries to write, in path order.
        line_ending: Terminator written after every entry.

    Returns:
        One ``key=value`` line per entry; '' when properties is empty.
    """
    if properties is None:
        raise NullArgumentError('properties')
    if line_ending is None:
        raise NullArgumentError('line_ending')

    terminator = line_ending.value
    return ''.join(
        f"{encode_key(path.value)}{ASSIGNMENT}{encode_value(value)}{terminator}"
        for path, value in properties.entries()
    )


def print_properties_tree(properties: Properties, printer: IndentingPrinter) -> None:
    """Print one escaped ``key=value`` line per entry through printer.

    Continuation lines are indented to the printer's current level, which
    the parser skips when reading the text back.
    """
    if properties is None:
        raise NullArgumentError('properties')
    if printer is None:
        raise NullArgumentError('printer')

    for path, value in properties.entries():
        printer.line_start()
        printer.print(encode_key(path.value))
        printer.print(ASSIGNMENT)
        printer.print(encode_value(value))

    printer.line_start()
