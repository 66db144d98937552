"""Assorted common constants"""

__all__ = [
    'UnsetValue',
    'MAX_LENGTH',
    'CONFIG_ENV_PREFIX',
]

import sys

from datasalad.settings import UnsetValue

MAX_LENGTH = sys.maxsize
"""Upper bound of the default length range of a validated string

Used as ``max_length`` whenever no length restriction is requested.
"""

CONFIG_ENV_PREFIX = 'ARGCHECK_'
"""Prefix of process environment variables holding configuration settings"""
