# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Printers writing Properties back to text.

Example:
    >>> from genro_props.printers import write_properties
    >>> write_properties(props, line_ending=LineEnding.NL)
    'config.name=MyApp\\n'
"""

from .indenting import IndentingPrinter, LineEnding
from .properties import (
    DEFAULT_LINE_ENDING,
    encode_key,
    encode_value,
    print_properties_tree,
    write_properties,
)

__all__ = [
    'DEFAULT_LINE_ENDING',
    'IndentingPrinter',
    'LineEnding',
    'encode_key',
    'encode_value',
    'print_properties_tree',
    'write_properties',
]
