"""This module supports exact rational numbers.

A rational number is a pair of exact integers n/d held in lowest terms with
positive denominator d. Integers are rationals with denominator 1, see the
subclass ExactInteger in ratpoly.integers.

Two representations are available for proper fractions: FixedRational,
storing numerator and denominator as Python ints within the symmetric 64-bit
range, and ArbitraryRational, storing both as gmpy2 mpz objects. Rationals are
constructed by the factories in ratpoly.factory, which normalize, reduce and
select the smallest representation for the result.

The operators +,-,*,/,//,%,** and function divmod are overloaded, mixing freely
with Python ints, gmpy2 mpz/mpq and fractions.Fraction. The operators
<,<=,>,>=,==,!= follow the numeric order.
"""

import operator
import fractions
from ratpoly import gmpy as gmpy2

factory = None  # set by ratpoly.__init__, see ratpoly.factory
integers = None  # set by ratpoly.__init__, see ratpoly.integers


class Rational:
    """Abstract base class for exact rational numbers.

    Invariant: denominator is positive and coprime to the numerator.
    """

    __slots__ = ()

    _mix_types = (int, gmpy2.MPZ)
    _frac_types = (fractions.Fraction, gmpy2.MPQ)

    def _pair(self):
        """Raw numerator and denominator as a tuple of ints/mpzs."""
        raise NotImplementedError('abstract method')

    @property
    def numerator(self):
        """Numerator as an exact integer."""
        return integers.integer_of(self._pair()[0])

    @property
    def denominator(self):
        """Denominator as an exact (positive) integer."""
        return integers.integer_of(self._pair()[1])

    @classmethod
    def _coerce(cls, other):
        # convert other to raw (numerator, denominator) pair, if possible
        if isinstance(other, Rational):
            return other._pair()

        if isinstance(other, cls._mix_types):
            return other, 1

        if isinstance(other, cls._frac_types):
            return other.numerator, other.denominator

        return NotImplemented

    def whole(self):
        """Integer part, truncated toward zero."""
        n, d = self._pair()
        return integers.integer_of(gmpy2.t_div(n, d))

    def is_zero(self):
        return self._pair()[0] == 0

    def is_one(self):
        return self._pair() == (1, 1)

    def is_negative(self):
        return self._pair()[0] < 0

    def is_whole(self):
        return self._pair()[1] == 1

    def signum(self):
        """Return -1, 0, 1 for negative, zero, positive values, respectively."""
        n = self._pair()[0]
        return (n > 0) - (n < 0)

    def __neg__(self):
        n, d = self._pair()
        return factory.from_numerator_denominator(-n, d)

    def __pos__(self):
        return self

    def __abs__(self):
        return -self if self.is_negative() else self

    def reciprocal(self):
        """Multiplicative inverse."""
        n, d = self._pair()
        if not n:
            raise ZeroDivisionError('reciprocal of zero')

        return factory.from_numerator_denominator(d, n)

    def __add__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        n, d = self._pair()
        m, e = other
        return factory.from_numerator_denominator(n * e + m * d, d * e)

    __radd__ = __add__

    def __sub__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        n, d = self._pair()
        m, e = other
        return factory.from_numerator_denominator(n * e - m * d, d * e)

    def __rsub__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        n, d = self._pair()
        m, e = other
        return factory.from_numerator_denominator(m * d - n * e, d * e)

    def __mul__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        n, d = self._pair()
        m, e = other
        return factory.from_numerator_denominator(n * m, d * e)

    __rmul__ = __mul__

    def __truediv__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        n, d = self._pair()
        m, e = other
        if not m:
            raise ZeroDivisionError('division by zero')

        return factory.from_numerator_denominator(n * e, d * m)

    def __rtruediv__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        n, d = self._pair()
        m, e = other
        if not n:
            raise ZeroDivisionError('division by zero')

        return factory.from_numerator_denominator(m * d, e * n)

    @staticmethod
    def _floor_div(n, d, m, e):
        # floor((n/d) / (m/e)) for d, e > 0
        if not m:
            raise ZeroDivisionError('division by zero')

        return (n * e) // (d * m)

    def __floordiv__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return integers.integer_of(self._floor_div(*self._pair(), *other))

    def __rfloordiv__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return integers.integer_of(self._floor_div(*other, *self._pair()))

    def __mod__(self, other):
        qr = self.__divmod__(other)
        if qr is NotImplemented:
            return NotImplemented

        return qr[1]

    def __rmod__(self, other):
        qr = self.__rdivmod__(other)
        if qr is NotImplemented:
            return NotImplemented

        return qr[1]

    def __divmod__(self, other):
        other_pair = self._coerce(other)
        if other_pair is NotImplemented:
            return NotImplemented

        q = integers.integer_of(self._floor_div(*self._pair(), *other_pair))
        return q, self - q * other

    def __rdivmod__(self, other):
        other_pair = self._coerce(other)
        if other_pair is NotImplemented:
            return NotImplemented

        q = integers.integer_of(self._floor_div(*other_pair, *self._pair()))
        return q, other - q * self

    def quotient_z(self, divisor):
        """Integer quotient of self and divisor, truncated toward zero."""
        other = self._coerce(divisor)
        if other is NotImplemented:
            raise TypeError(f'exact number expected, got {type(divisor).__name__}')

        n, d = self._pair()
        m, e = other
        if not m:
            raise ZeroDivisionError('division by zero')

        u = d * m
        if u < 0:
            n, u = -n, -u
        return integers.integer_of(gmpy2.t_div(n * e, u))

    def quotient_z_with_remainder(self, divisor):
        """Truncated integer quotient q and remainder self - q*divisor."""
        q = self.quotient_z(divisor)
        return q, self - q * divisor

    def remainder(self, divisor):
        """Remainder of truncated division, with the sign of self (or zero)."""
        return self.quotient_z_with_remainder(divisor)[1]

    def __pow__(self, other):
        """Exponentiation with an integral exponent."""
        try:
            k = operator.index(other)
        except TypeError:
            return NotImplemented

        n, d = self._pair()
        if k == 0:
            if not n:
                raise ArithmeticError('0**0 is undefined')

            return integers.ONE

        if k < 0:
            if not n:
                raise ZeroDivisionError('zero raised to a negative power')

            n, d, k = d, n, -k
        return factory.from_numerator_denominator(gmpy2.mpz(n)**k, gmpy2.mpz(d)**k)

    def __rpow__(self, other):
        """Exponentiation of an int, mpz or fraction by an integral exact number."""
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return factory.from_numerator_denominator(*other).__pow__(self)

    def _cmp(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        n, d = self._pair()
        m, e = other
        a, b = n * e, m * d
        return (a > b) - (a < b)

    def compare(self, other):
        """Return -1, 0, 1 if self is less than, equal to, greater than other."""
        c = self._cmp(other)
        if c is NotImplemented:
            raise TypeError(f'exact number expected, got {type(other).__name__}')

        return c

    def __lt__(self, other):
        c = self._cmp(other)
        return c if c is NotImplemented else c < 0

    def __le__(self, other):
        c = self._cmp(other)
        return c if c is NotImplemented else c <= 0

    def __gt__(self, other):
        c = self._cmp(other)
        return c if c is NotImplemented else c > 0

    def __ge__(self, other):
        c = self._cmp(other)
        return c if c is NotImplemented else c >= 0

    def __eq__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return self._pair() == tuple(other)

    def __hash__(self):
        n, d = self._pair()
        if d == 1:
            return ~hash(n)

        return ~(0xAAAAAAAA - hash(n)) ^ (0x55555555 * hash(d))

    def __bool__(self):
        return self._pair()[0] != 0

    def __int__(self):
        n, d = self._pair()
        return int(gmpy2.t_div(n, d))

    def to_fraction(self):
        """Convert to a fractions.Fraction with the same value."""
        n, d = self._pair()
        return fractions.Fraction(int(n), int(d))

    def to_string(self, radix=10):
        """String n/d with numerator and denominator in the given radix (just n if d=1)."""
        n, d = self._pair()
        s = gmpy2.to_digits(n, radix)
        if d != 1:
            s += '/' + gmpy2.to_digits(d, radix)
        return s

    def __repr__(self):
        return self.to_string()


class FixedRational(Rational):
    """Rational with numerator and denominator both within the symmetric 64-bit range."""

    __slots__ = 'num', 'den'

    def __init__(self, num, den):
        self.num = num
        self.den = den

    def _pair(self):
        return self.num, self.den

    @property
    def numerator(self):
        return integers.FixedInteger.of(self.num)

    @property
    def denominator(self):
        return integers.FixedInteger.of(self.den)


class ArbitraryRational(Rational):
    """Rational with numerator and denominator stored at arbitrary precision."""

    __slots__ = 'num', 'den'

    def __init__(self, num, den):
        self.num = gmpy2.mpz(num)
        self.den = gmpy2.mpz(den)

    def _pair(self):
        return self.num, self.den
