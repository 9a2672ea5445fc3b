# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Parsers for populating Properties from text.

Available parsers:
- properties: the line oriented key=value format (.properties)

Example:
    >>> from genro_props.parsers import parse_properties
    >>> props = parse_properties('config.name = MyApp')
    >>> props['config.name']
    'MyApp'
"""

from .properties import PropertiesParser, parse_properties

__all__ = [
    'PropertiesParser',
    'parse_properties',
]
