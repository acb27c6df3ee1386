"""
Eris - pseudo-random number generators in pure Python.

Named after the Greek goddess of chaos, strife and discord.
"""

from .base import (
    RandomGenerator,
    INT_MIN, INT_MAX, LONG_MIN, LONG_MAX,
    to_int32, to_int64
)
from .errors import InvalidParameterError
from .lcg import (
    LinearCongruentialGenerator,
    DEFAULT_MODULUS, DEFAULT_MULTIPLIER, DEFAULT_INCREMENT,
    has_full_period
)
from .parameters import LcgParameters, PARAMETERS

__all__ = [
    'RandomGenerator',
    'INT_MIN', 'INT_MAX', 'LONG_MIN', 'LONG_MAX',
    'to_int32', 'to_int64',
    'InvalidParameterError',
    'LinearCongruentialGenerator',
    'DEFAULT_MODULUS', 'DEFAULT_MULTIPLIER', 'DEFAULT_INCREMENT',
    'has_full_period',
    'LcgParameters', 'PARAMETERS'
]
