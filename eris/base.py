"""
Base class for random number generators.

A generator produces successive unpredictable values at four granularities:
booleans, 32-bit signed integers, 64-bit signed integers and doubles.
Concrete generators implement one primitive, either ``next_int`` or
``next_long``, and inherit derivations for everything else.
"""

from abc import ABC


INT_MIN = -2**31
INT_MAX = 2**31 - 1
LONG_MIN = -2**63
LONG_MAX = 2**63 - 1

MASK32 = 0xFFFFFFFF
MASK64 = 0xFFFFFFFF_FFFFFFFF


def to_int32(value):
    """Narrow an int to a signed 32-bit value, wrapping like a Java cast."""
    value &= MASK32
    if value & 0x80000000:
        value -= 1 << 32
    return value


def to_int64(value):
    """Narrow an int to a signed 64-bit value, wrapping like a Java cast."""
    value &= MASK64
    if value & 0x80000000_00000000:
        value -= 1 << 64
    return value


class RandomGenerator(ABC):
    """
    Abstract base class for (pseudo-)random number generators.

    No guarantees are made about thread safety, performance, origin or
    quality of the numbers returned; see each implementation.

    Subclasses must override at least one of ``next_int`` or ``next_long``,
    since the default of each is written in terms of the other. This is
    checked when the subclass is created. Pass ``abstract=True`` in the
    class statement to skip the check for an intermediate base class.
    """

    def __init_subclass__(cls, abstract=False, **kwargs):
        """Reject concrete subclasses that would recurse forever."""
        super().__init_subclass__(**kwargs)
        if abstract:
            return
        if (cls.next_int is RandomGenerator.next_int
                and cls.next_long is RandomGenerator.next_long):
            raise TypeError(
                f"{cls.__name__} must override next_int() or next_long()"
            )

    def next_boolean(self):
        """
        Return the next boolean in the sequence.

        Uses the lowest-order bit of ``next_int()``.
        """
        return (self.next_int() & 0x1) == 0x1

    def next_int(self):
        """
        Return the next signed 32-bit integer in the sequence.

        All values between ``INT_MIN`` and ``INT_MAX`` should occur with
        equal probability. The default takes the upper 32 bits of
        ``next_long()``.
        """
        return to_int32((self.next_long() & MASK64) >> 32)

    def next_long(self):
        """
        Return the next signed 64-bit integer in the sequence.

        All values between ``LONG_MIN`` and ``LONG_MAX`` should occur with
        equal probability. The default combines two calls to ``next_int()``,
        the first supplying the high word.
        """
        high = self.next_int()
        low = self.next_int()
        return to_int64((high << 32) | (low & MASK32))

    def next_double(self):
        """
        Return the next double in the sequence, in the range [0.0, 1.0].

        Computed as ``abs(next_long()) / LONG_MAX``. The upper bound is
        inclusive: ``LONG_MIN`` and values within rounding distance of
        ``LONG_MAX`` give exactly 1.0.
        """
        return abs(self.next_long()) / LONG_MAX

    def __iter__(self):
        return self

    def __next__(self):
        return self.next_long()
