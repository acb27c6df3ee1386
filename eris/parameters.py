"""
Well-known parameter sets for linear congruential generators.
"""

from collections import namedtuple


LcgParameters = namedtuple("LcgParameters", ["modulus", "multiplier", "increment"])


# Define named parameter sets
PARAMETERS = {
    # Donald Knuth's MMIX; the modulus is the all-ones 64-bit pattern
    "MMIX": LcgParameters(
        0xFFFFFFFF_FFFFFFFF,
        6364136223846793005,
        1442695040888963407
    ),
    "NUMERICAL_RECIPES": LcgParameters(
        2**32,
        1664525,
        1013904223
    ),
    "MINSTD": LcgParameters(
        2**31 - 1,
        48271,
        0
    ),
    "POSIX_DRAND48": LcgParameters(
        2**48,
        25214903917,
        11
    ),
}
