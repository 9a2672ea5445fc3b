# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Store package - Immutable path-keyed container.

Example:
    >>> from genro_props import Properties
    >>> props = Properties.EMPTY.set('config.name', 'MyApp')
    >>> props['config.name']
    'MyApp'
"""

from .core import HasProperties, Properties

EMPTY = Properties.EMPTY

__all__ = ["EMPTY", "HasProperties", "Properties"]
