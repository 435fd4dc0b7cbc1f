"""This module provides the factories for exact integers and rationals.

A factory accumulates its inputs (whole part, numerator, denominator) in any
order, possibly overwriting earlier inputs, and constructs the result on build().
Each input is wrapped in an IntParameter, which tracks the width of its value.
The rational factory normalizes its inputs to a single fraction with positive
denominator, reduces it to lowest terms, and selects the smallest representation
for the result: an exact integer if the denominator is 1 (unless built strictly),
a FixedRational if numerator and denominator fit 64 bits, an ArbitraryRational
otherwise.

Factories are not shared between threads. Building leaves the inputs as given, so
a factory may be built again after overwriting some inputs, or reset with clear(). The module-level functions from_int(), from_mpz(),
from_numerator_denominator() etc. are the common entry points.
"""

import math
import decimal
from ratpoly import gmpy as gmpy2
from ratpoly import integers
from ratpoly.narrow import NarrowWidth, width_of
from ratpoly.rationals import Rational, FixedRational, ArbitraryRational


class IntParameter:
    """Pending integer input of a factory.

    Memoizes whether its value fits 64 bits, once classified by process().
    """

    __slots__ = 'value', 'exact', '_native'

    def __init__(self, value):
        if value is None:
            raise TypeError('integer value required, got None')

        if isinstance(value, integers.ExactInteger):
            self.exact = value
            value = value.value
        elif isinstance(value, Rational._mix_types):
            self.exact = None
        else:
            raise TypeError(f'integer value required, got {type(value).__name__}')

        self.value = value
        self._native = None

    def process(self, depth):
        """Return the wider of depth and the width of this parameter's value."""
        width = width_of(self.value)
        self._native = width <= NarrowWidth.INT64
        return depth.comp(width)

    def is_native(self):
        """Test if value fits 64 bits."""
        if self._native is None:
            self.process(NarrowWidth.UNMEASURED)
        return self._native

    def as_integer(self):
        """Value as exact integer in minimal representation."""
        if self.exact is None:
            if self.is_native():
                self.exact = integers.FixedInteger.of(int(self.value))
            else:
                self.exact = integers.ArbitraryInteger(self.value)
        return self.exact


class IntegerFactory:
    """Factory for exact integers."""

    __slots__ = '_whole',

    def __init__(self):
        self.clear()

    def clear(self):
        """Reset all inputs, for reuse of this factory."""
        self._whole = None
        return self

    def whole(self, value):
        """Set the whole (integral) part."""
        self._whole = IntParameter(value)
        return self

    def build(self):
        """Return exact integer, unchanged if supplied as such, minimal representation otherwise."""
        if self._whole is None:
            raise RuntimeError('nothing to build, no value supplied')

        return self._whole.as_integer()


class RationalFactory(IntegerFactory):
    """Factory for exact rationals.

    If both whole part and numerator are given, the whole part is added to the
    fraction numerator/denominator. Without numerator, the result is the whole part.
    """

    __slots__ = '_numerator', '_denominator'

    def clear(self):
        super().clear()
        self._numerator = None
        self._denominator = None
        return self

    def numerator(self, value):
        """Set the numerator."""
        self._numerator = IntParameter(value)
        return self

    def denominator(self, value):
        """Set the denominator, which must be nonzero."""
        parameter = IntParameter(value)
        if not parameter.value:
            raise ZeroDivisionError('zero denominator')

        self._denominator = parameter
        return self

    def _normalize(self):
        # combine the inputs into a single fraction n/d with d > 0, inputs left untouched
        w, n, d = self._whole, self._numerator, self._denominator
        if w is None and n is None:
            raise RuntimeError('nothing to build, no value supplied')

        if d is None:
            d = IntParameter(1)
        elif d.value < 0:
            d = IntParameter(-d.value)
            if n is not None:
                n = IntParameter(-n.value)
        if n is None:
            n = IntParameter(w.value * d.value)
        elif w is not None:
            n = IntParameter(w.value * d.value + n.value)
        return n, d

    def _reduce(self):
        n, d = self._normalize()
        depth = NarrowWidth.UNMEASURED.get_and_comp(n).get_and_comp(d)
        n, d = n.value, d.value
        if d != 1:
            if depth <= NarrowWidth.INT64:
                n, d = int(n), int(d)
                g = math.gcd(n, d)
            else:
                g = gmpy2.gcd(n, d)
            if g != 1:
                n //= g
                d //= g
                depth = width_of(n).comp(width_of(d))
        return n, d, depth

    @staticmethod
    def _rational(n, d, depth):
        if depth <= NarrowWidth.INT64:
            return FixedRational(int(n), int(d))

        return ArbitraryRational(n, d)

    def build(self):
        """Return the reduced rational, as an exact integer if the denominator is 1."""
        n, d, depth = self._reduce()
        if d == 1:
            return integers.integer_of(n)

        return self._rational(n, d, depth)

    def build_strict(self):
        """Return the reduced rational, as a Rational even if the denominator is 1."""
        return self._rational(*self._reduce())


def from_int(value):
    """Exact integer for given Python int."""
    if not isinstance(value, int):
        raise TypeError(f'int expected, got {type(value).__name__}')

    return IntegerFactory().whole(value).build()


def from_mpz(value):
    """Exact integer for given mpz (or int) value of arbitrary precision."""
    if isinstance(value, int):
        value = gmpy2.mpz(value)
    return IntegerFactory().whole(value).build()


def from_numerator_denominator(numerator, denominator):
    """Exact rational numerator/denominator in lowest terms."""
    return RationalFactory().numerator(numerator).denominator(denominator).build()


def from_fraction(value):
    """Exact rational for given fractions.Fraction, gmpy2 mpq or Rational."""
    return from_numerator_denominator(value.numerator, value.denominator)


def from_decimal(value):
    """Exact rational for given decimal.Decimal, str or int.

    For instance, from_decimal('1.25') gives 5/4.
    """
    if isinstance(value, int):
        return from_int(value)

    if isinstance(value, str):
        value = decimal.Decimal(value)
    elif not isinstance(value, decimal.Decimal):
        raise TypeError(f'decimal expected, got {type(value).__name__}')

    if not value.is_finite():
        raise ValueError(f'finite decimal expected, got {value}')

    sign, digits, exponent = value.as_tuple()
    n = gmpy2.mpz(''.join(map(str, digits)))
    if sign:
        n = -n
    if exponent >= 0:
        return from_mpz(n * 10**exponent)

    return from_numerator_denominator(n, gmpy2.mpz(10)**-exponent)


def _exact(value):
    if isinstance(value, Rational):
        return value

    if isinstance(value, Rational._frac_types):
        return from_fraction(value)

    return IntegerFactory().whole(value).build()


def from_mixed(whole=None, numerator=None, denominator=None):
    """Exact rational for the mixed number whole numerator/denominator.

    A negative whole part with a nonnegative fraction numerator/denominator
    denotes whole - numerator/denominator, as in -1 1/2 = -3/2.
    Any of the arguments may be omitted, but not all three.
    """
    if whole is None:
        if numerator is None:
            if denominator is None:
                raise TypeError('at least one argument required')

            return _exact(denominator).reciprocal()

        if denominator is None:
            return _exact(numerator)

        return _exact(numerator) / _exact(denominator)

    whole = _exact(whole)
    if numerator is None:
        return whole

    fraction = _exact(numerator)
    if denominator is not None:
        fraction /= _exact(denominator)
    if whole.is_negative() and not fraction.is_negative():
        return whole - fraction

    return whole + fraction
