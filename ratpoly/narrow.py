"""This module classifies integers by the narrowest width that can hold them.

The width classes are totally ordered, from UNMEASURED (nothing seen yet) via
the signed 8/16/32/64-bit widths up to ARBITRARY precision. A width of n bits
holds all integers v with abs(v) <= 2**(n-1) - 1, that is, the most-negative
value of each two's complement width is excluded, for symmetry of negation.

The factories in ratpoly.factory track a running width while normalizing and
reducing their inputs, to select the smallest representation for the result.
"""

import enum
from ratpoly.numpy import np


class NarrowWidth(enum.IntEnum):
    """Width classes for integer magnitudes, ordered from narrow to wide."""

    UNMEASURED = 0
    INT8 = 1
    INT16 = 2
    INT32 = 3
    INT64 = 4
    ARBITRARY = 5

    @property
    def bits(self):
        """Bit length of the signed two's complement width (None if not fixed)."""
        return _BITS.get(self)

    @property
    def max_value(self):
        """Largest magnitude held by this width (None if not fixed)."""
        return _MAX_VALUES.get(self)

    def holds(self, value):
        """Test if integer value fits this width."""
        if self is NarrowWidth.ARBITRARY:
            return True

        if self is NarrowWidth.UNMEASURED:
            return False

        return abs(value) <= _MAX_VALUES[self]

    def comp(self, other):
        """Return the wider (more permissive) of the two widths."""
        return self if self >= other else other

    def get_and_comp(self, value):
        """Return the wider of this width and the width of the given value.

        The value is either an int/mpz, or a value holder with a process() method,
        such as ratpoly.factory.IntParameter, which memoizes whether it fits 64 bits.
        """
        if hasattr(value, 'process'):
            return value.process(self)

        return self.comp(width_of(value))


_BITS = {NarrowWidth.INT8: 8, NarrowWidth.INT16: 16, NarrowWidth.INT32: 32, NarrowWidth.INT64: 64}
_MAX_VALUES = {w: (1 << n-1) - 1 for w, n in _BITS.items()}
MAX_INT64 = _MAX_VALUES[NarrowWidth.INT64]


def width_of(value):
    """Return the narrowest width holding the given integer value."""
    v = -abs(value)  # NB: classify on the negated magnitude
    if v < -_MAX_VALUES[NarrowWidth.INT64]:
        return NarrowWidth.ARBITRARY

    if v < -_MAX_VALUES[NarrowWidth.INT32]:
        return NarrowWidth.INT64

    if v < -_MAX_VALUES[NarrowWidth.INT16]:
        return NarrowWidth.INT32

    if v < -_MAX_VALUES[NarrowWidth.INT8]:
        return NarrowWidth.INT16

    return NarrowWidth.INT8


def as_array(values):
    """Return 1D NumPy array of the given integers using the narrowest sufficient dtype.

    Values beyond 64 bits are stored as Python ints in an array of dtype object.
    """
    if not np:
        raise RuntimeError('NumPy not available, install package numpy')

    values = [int(v) for v in values]
    width = NarrowWidth.UNMEASURED
    for v in values:
        width = width.get_and_comp(v)
    dtype = {NarrowWidth.UNMEASURED: np.int8,
             NarrowWidth.INT8: np.int8,
             NarrowWidth.INT16: np.int16,
             NarrowWidth.INT32: np.int32,
             NarrowWidth.INT64: np.int64}.get(width, object)
    if dtype is object:
        a = np.empty(len(values), dtype=object)
        a[:] = values
        return a

    return np.array(values, dtype=dtype)
