"""
Linear congruential generator.

The LCG produces a stream of numbers using the recurrence

    X(n+1) = (a * X(n) + c) mod m

where m > 0 is the modulus, 0 < a < m the multiplier and 0 <= c < m the
increment. It needs minimal state and very few operations, but its internal
state is trivially recovered from its output, so it is NOT cryptographically
secure. There is rarely a reason to pick it except compatibility with the
built-in generators of other languages.

The modulus bounds the output: with a modulus of 2**32 the 32 high-order
bits are always zero, so ``next_int()`` will always return 0.
"""

import logging
from math import gcd

from .base import RandomGenerator, MASK64, to_int64
from .errors import InvalidParameterError
from .parameters import PARAMETERS


logger = logging.getLogger(__name__)

# Parameters devised by Donald Knuth for his MMIX processor
DEFAULT_MODULUS, DEFAULT_MULTIPLIER, DEFAULT_INCREMENT = PARAMETERS["MMIX"]


def check_parameters(modulus, multiplier, increment):
    """Raise InvalidParameterError unless 0 < a < m and 0 <= c < m."""
    if modulus <= 0:
        raise InvalidParameterError("modulus", modulus, "must be positive")
    if modulus > MASK64:
        raise InvalidParameterError("modulus", modulus, "does not fit in 64 bits")
    if not 0 < multiplier < modulus:
        raise InvalidParameterError(
            "multiplier", multiplier, "must be non-zero and less than the modulus"
        )
    if not 0 <= increment < modulus:
        raise InvalidParameterError(
            "increment", increment, "must be non-negative and less than the modulus"
        )


def has_full_period(modulus, multiplier, increment):
    """
    Check the Hull-Dobell theorem for the given parameters.

    The period equals the modulus iff c and m are coprime, a - 1 is divisible
    by every prime factor of m, and a - 1 is divisible by 4 when m is.
    """
    if gcd(increment, modulus) != 1:
        return False
    # strip from m every prime it shares with a - 1; what remains is coprime
    remaining = modulus
    a_minus_one = multiplier - 1
    while remaining > 1:
        g = gcd(remaining, a_minus_one)
        if g == 1:
            return False
        remaining //= g
    if modulus % 4 == 0 and a_minus_one % 4 != 0:
        return False
    return True


class LinearCongruentialGenerator(RandomGenerator):
    """
    Random generator based on a linear congruential recurrence.

    Constructed either as ``LinearCongruentialGenerator(seed)`` with the MMIX
    defaults, or as ``LinearCongruentialGenerator(modulus, multiplier,
    increment, seed)``. The default parameters may change in later releases.

    Arguments are reduced to their unsigned 64-bit pattern, so ``-1`` means
    ``0xFFFFFFFFFFFFFFFF`` and ``2**64`` becomes 0, which reduces by plain
    64-bit wraparound. Nothing is checked unless ``validate=True`` is
    passed, in which case out-of-range parameters raise
    ``InvalidParameterError``.

    The seed is the next number the generator returns and is its entire
    state. Instances are not thread-safe.
    """

    def __init__(self, *args, validate=False):
        if len(args) == 1:
            modulus, multiplier, increment = DEFAULT_MODULUS, DEFAULT_MULTIPLIER, DEFAULT_INCREMENT
            (seed,) = args
        elif len(args) == 4:
            modulus, multiplier, increment, seed = args
        else:
            raise TypeError(
                f"expected (seed) or (modulus, multiplier, increment, seed), "
                f"got {len(args)} arguments"
            )

        if validate:
            check_parameters(modulus, multiplier, increment)
            if not has_full_period(modulus, multiplier, increment):
                logger.warning(
                    "LCG parameters m=%#x a=%#x c=%#x do not give a full period",
                    modulus, multiplier, increment
                )

        self._modulus = modulus & MASK64
        self._multiplier = multiplier & MASK64
        self._increment = increment & MASK64
        self._state = seed & MASK64
        logger.debug("Created %r", self)

    @classmethod
    def validated(cls, modulus, multiplier, increment, seed):
        """Construct a generator, rejecting out-of-range parameters."""
        return cls(modulus, multiplier, increment, seed, validate=True)

    @classmethod
    def from_parameters(cls, params, seed, validate=False):
        """Construct a generator from an ``LcgParameters`` set."""
        modulus, multiplier, increment = params
        return cls(modulus, multiplier, increment, seed, validate=validate)

    @property
    def modulus(self):
        return self._modulus

    @property
    def multiplier(self):
        return self._multiplier

    @property
    def increment(self):
        return self._increment

    @property
    def state(self):
        """The next value to be returned, as an unsigned 64-bit int."""
        return self._state

    def has_full_period(self):
        """Return True if these parameters give a period equal to the modulus."""
        # a stored modulus of 0 stands for 2**64
        return has_full_period(self._modulus or 1 << 64, self._multiplier, self._increment)

    def next_long(self):
        """
        Return the current state and advance the recurrence.

        The multiply-add wraps at 64 bits before the unsigned reduction by the
        modulus, so the first value returned is the seed itself.
        """
        result = self._state
        state = (self._multiplier * self._state + self._increment) & MASK64
        # a zero modulus is 2**64 after masking; the wraparound already reduced it
        if self._modulus:
            state %= self._modulus
        self._state = state
        return to_int64(result)

    def __repr__(self):
        return (
            f"LinearCongruentialGenerator(modulus={self._modulus:#x}, "
            f"multiplier={self._multiplier:#x}, increment={self._increment:#x}, "
            f"state={self._state:#x})"
        )
