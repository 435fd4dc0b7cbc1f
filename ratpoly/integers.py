"""This module supports exact integers in two representations.

FixedInteger holds a Python int within the symmetric signed 64-bit range
[-(2**63-1), 2**63-1] and lazily caches its gmpy2 mpz form. FixedIntegers of
magnitude at most CACHE_DEPTH are shared singletons, so that equal small values
are also identical. ArbitraryInteger holds a gmpy2 mpz of any magnitude.

Arithmetic is implemented once on mpz values in the common base class
ExactInteger, and specialized in FixedInteger to work on the native values
directly when both operands are fixed. All results pass through integer_of(),
which selects the minimal representation; for instance, the sum of two
large but cancelling ArbitraryIntegers is a FixedInteger.

Exact narrowing accessors int8(), int16(), int32(), int64() and char() raise
NarrowingError if the value does not fit the target width; passing exact=False
gives the truncating (wrapping) conversion instead.
"""

import math
import logging
from ratpoly import gmpy as gmpy2
from ratpoly.narrow import NarrowWidth, MAX_INT64
from ratpoly.rationals import Rational

CACHE_DEPTH = 128
CHAR_MAX = 0xFFFF


class NarrowingError(OverflowError):
    """Value does not fit the requested width exactly."""


class ExactInteger(Rational):
    """Abstract base class for exact integers (rationals with denominator 1)."""

    __slots__ = ()

    def _pair(self):
        return self.value, 1

    @property
    def numerator(self):
        return self

    @property
    def denominator(self):
        return ONE

    def whole(self):
        return self

    def to_mpz(self):
        """Value as gmpy2 mpz."""
        raise NotImplementedError('abstract method')

    def __int__(self):
        return int(self.value)

    def __index__(self):
        return int(self.value)

    def _narrow(self, width, exact):
        v = self.value
        if exact:
            if not width.holds(v):
                raise NarrowingError(f'{v} does not fit in a {width.bits}-bit integer')

            return int(v)

        n = width.bits
        v = int(v) & ((1 << n) - 1)
        if v >> (n-1):
            v -= 1 << n
        return v

    def int8(self, exact=True):
        """Value as 8-bit integer."""
        return self._narrow(NarrowWidth.INT8, exact)

    def int16(self, exact=True):
        """Value as 16-bit integer."""
        return self._narrow(NarrowWidth.INT16, exact)

    def int32(self, exact=True):
        """Value as 32-bit integer."""
        return self._narrow(NarrowWidth.INT32, exact)

    def int64(self, exact=True):
        """Value as 64-bit integer."""
        return self._narrow(NarrowWidth.INT64, exact)

    def char(self, exact=True):
        """Value as unsigned 16-bit character code."""
        v = self.value
        if exact and not 0 <= v <= CHAR_MAX:
            raise NarrowingError(f'{v} is not a 16-bit character code')

        return int(v) & CHAR_MAX

    def is_zero(self):
        return self.value == 0

    def is_one(self):
        return self.value == 1

    def is_negative(self):
        return self.value < 0

    def is_whole(self):
        return True

    def is_even(self):
        return self.value % 2 == 0

    def __neg__(self):
        return integer_of(-self.value)

    def __abs__(self):
        return self if self.value >= 0 else integer_of(-self.value)

    @classmethod
    def _coerce_int(cls, other):
        # raw integer value of other, if integral
        if isinstance(other, ExactInteger):
            return other.value

        if isinstance(other, cls._mix_types):
            return other

        return NotImplemented

    def __add__(self, other):
        b = self._coerce_int(other)
        if b is NotImplemented:
            return super().__add__(other)

        return integer_of(self.to_mpz() + b)

    __radd__ = __add__

    def __sub__(self, other):
        b = self._coerce_int(other)
        if b is NotImplemented:
            return super().__sub__(other)

        return integer_of(self.to_mpz() - b)

    def __rsub__(self, other):
        b = self._coerce_int(other)
        if b is NotImplemented:
            return super().__rsub__(other)

        return integer_of(b - self.to_mpz())

    def __mul__(self, other):
        b = self._coerce_int(other)
        if b is NotImplemented:
            return super().__mul__(other)

        return integer_of(self.to_mpz() * b)

    __rmul__ = __mul__

    def __floordiv__(self, other):
        b = self._coerce_int(other)
        if b is NotImplemented:
            return super().__floordiv__(other)

        return integer_of(self.to_mpz() // b)

    def __rfloordiv__(self, other):
        b = self._coerce_int(other)
        if b is NotImplemented:
            return super().__rfloordiv__(other)

        return integer_of(gmpy2.mpz(b) // self.to_mpz())

    def __mod__(self, other):
        b = self._coerce_int(other)
        if b is NotImplemented:
            return super().__mod__(other)

        return integer_of(self.to_mpz() % b)

    def __rmod__(self, other):
        b = self._coerce_int(other)
        if b is NotImplemented:
            return super().__rmod__(other)

        return integer_of(gmpy2.mpz(b) % self.to_mpz())

    def __divmod__(self, other):
        b = self._coerce_int(other)
        if b is NotImplemented:
            return super().__divmod__(other)

        q, r = divmod(self.to_mpz(), b)
        return integer_of(q), integer_of(r)

    def __rdivmod__(self, other):
        b = self._coerce_int(other)
        if b is NotImplemented:
            return super().__rdivmod__(other)

        q, r = divmod(gmpy2.mpz(b), self.to_mpz())
        return integer_of(q), integer_of(r)

    def quotient_z_with_remainder(self, divisor):
        """Quotient truncated toward zero and remainder with the sign of self.

        The remainder is evaluated by subtraction, self - q*divisor.
        """
        b = self._coerce_int(divisor)
        if b is NotImplemented:
            return super().quotient_z_with_remainder(divisor)

        if not b:
            raise ZeroDivisionError('division by zero')

        a = self.to_mpz()
        q = gmpy2.t_div(a, b)
        return integer_of(q), integer_of(a - q * b)

    def quotient_z(self, divisor):
        b = self._coerce_int(divisor)
        if b is NotImplemented:
            return super().quotient_z(divisor)

        if not b:
            raise ZeroDivisionError('division by zero')

        return integer_of(gmpy2.t_div(self.to_mpz(), b))

    def remainder(self, divisor):
        return self.quotient_z_with_remainder(divisor)[1]

    def modulo(self, modulus):
        """Return self mod modulus in range [0, modulus), for positive modulus."""
        m = self._int_arg(modulus)
        if m <= 0:
            raise ArithmeticError('modulus must be positive')

        return integer_of(self.to_mpz() % m)

    def mod_inverse(self, modulus):
        """Return y in range [0, modulus) such that self*y == 1 modulo modulus."""
        m = self._int_arg(modulus)
        if m <= 0:
            raise ArithmeticError('modulus must be positive')

        return integer_of(gmpy2.invert(self.to_mpz(), m))  # ZeroDivisionError if no inverse

    def gcd(self, other):
        """Greatest common divisor (nonnegative)."""
        b = self._int_arg(other)
        if not self.value and not b:
            raise ArithmeticError('gcd(0, 0) is undefined')

        return integer_of(gmpy2.gcd(self.to_mpz(), b))

    def lcm(self, other):
        """Least common multiple (positive)."""
        b = self._int_arg(other)
        if not self.value or not b:
            raise ArithmeticError('lcm with zero is undefined')

        return integer_of(gmpy2.lcm(self.to_mpz(), b))

    def can_divide_by(self, divisor):
        """Test if divisor divides self (False for zero divisor)."""
        b = self._int_arg(divisor)
        return b != 0 and self.to_mpz() % b == 0

    @classmethod
    def _int_arg(cls, a):
        b = cls._coerce_int(a)
        if b is NotImplemented:
            raise TypeError(f'integer expected, got {type(a).__name__}')

        return b

    def root_with_remainder(self, index):
        """Return r and self - r**index, for the index-th root r of self truncated toward zero."""
        k = self._int_arg(index)
        if k < 1:
            raise ValueError('root index must be positive')

        a = self.to_mpz()
        neg = a < 0
        if neg:
            if k%2 == 0:
                raise ArithmeticError('even root of negative number')

            a = -a
        r, s = gmpy2.iroot_rem(a, k)
        if neg:
            r, s = -r, -s
        return integer_of(r), integer_of(s)

    def isqrt_with_remainder(self):
        """Integer square root r of self and remainder self - r*r."""
        return self.root_with_remainder(2)

    def is_prime(self):
        """Test primality by trial division (negative numbers, 0 and 1 are not prime)."""
        return gmpy2.trial_is_prime(self.value)

    def factors(self):
        """Sorted list of positive divisors of abs(self) (empty for zero)."""
        return [integer_of(d) for d in gmpy2.divisors(self.value)]

    def prime_factorization(self):
        """Prime factors in ascending order, with multiplicity (empty if self <= 1)."""
        return [integer_of(p) for p in gmpy2.trial_factor(self.value)]

    def _cmp(self, other):
        b = self._coerce_int(other)
        if b is NotImplemented:
            return super()._cmp(other)

        a = self.value
        return (a > b) - (a < b)

    def __eq__(self, other):
        b = self._coerce_int(other)
        if b is NotImplemented:
            return super().__eq__(other)

        return self.value == b

    def __hash__(self):
        return ~hash(self.value)

    def __bool__(self):
        return self.value != 0

    def to_string(self, radix=10):
        return gmpy2.to_digits(self.value, radix)


class FixedInteger(ExactInteger):
    """Exact integer backed by a Python int in the symmetric 64-bit range."""

    __slots__ = 'value', '_mpz'

    def __init__(self, value):
        self.value = value
        self._mpz = None

    @classmethod
    def of(cls, value):
        """Return FixedInteger for given int value, shared if abs(value) <= CACHE_DEPTH.

        Raises ValueError if value is outside [-(2**63-1), 2**63-1]; in particular
        the value -2**63 is rejected, use integer_of() instead.
        """
        if not isinstance(value, cls._mix_types):
            raise TypeError(f'int required, got {type(value).__name__}')

        value = int(value)
        if -CACHE_DEPTH <= value <= CACHE_DEPTH:
            return _CACHE[value + CACHE_DEPTH]

        if abs(value) > MAX_INT64:
            raise ValueError(f'{value} out of range for FixedInteger')

        return cls(value)

    def to_mpz(self):
        z = self._mpz
        if z is None:
            z = self._mpz = gmpy2.mpz(self.value)
        return z

    def int64(self, exact=True):
        return self.value

    def __neg__(self):
        return FixedInteger.of(-self.value)

    def __abs__(self):
        return self if self.value >= 0 else FixedInteger.of(-self.value)

    def __add__(self, other):
        if isinstance(other, FixedInteger):
            return integer_of(self.value + other.value)

        return super().__add__(other)

    __radd__ = __add__

    def __sub__(self, other):
        if isinstance(other, FixedInteger):
            return integer_of(self.value - other.value)

        return super().__sub__(other)

    def __mul__(self, other):
        if isinstance(other, FixedInteger):
            return integer_of(self.value * other.value)

        return super().__mul__(other)

    __rmul__ = __mul__

    def __floordiv__(self, other):
        if isinstance(other, FixedInteger):
            return integer_of(self.value // other.value)

        return super().__floordiv__(other)

    def __mod__(self, other):
        if isinstance(other, FixedInteger):
            return integer_of(self.value % other.value)

        return super().__mod__(other)

    def quotient_z_with_remainder(self, divisor):
        """Quotient truncated toward zero and remainder with the sign of self.

        For fixed operands the remainder is derived independently of the quotient.
        """
        if not isinstance(divisor, FixedInteger):
            return super().quotient_z_with_remainder(divisor)

        a, b = self.value, divisor.value
        if not b:
            raise ZeroDivisionError('division by zero')

        q = abs(a) // abs(b)
        if (a < 0) != (b < 0):
            q = -q
        r = abs(a) % abs(b)
        if a < 0:
            r = -r
        return integer_of(q), integer_of(r)

    def quotient_z(self, divisor):
        if isinstance(divisor, FixedInteger):
            return self.quotient_z_with_remainder(divisor)[0]

        return super().quotient_z(divisor)

    def modulo(self, modulus):
        if not isinstance(modulus, FixedInteger):
            return super().modulo(modulus)

        m = modulus.value
        if m <= 0:
            raise ArithmeticError('modulus must be positive')

        return FixedInteger.of(self.value % m)

    def gcd(self, other):
        if not isinstance(other, FixedInteger):
            return super().gcd(other)

        if not self.value and not other.value:
            raise ArithmeticError('gcd(0, 0) is undefined')

        return integer_of(math.gcd(self.value, other.value))

    def lcm(self, other):
        if not isinstance(other, FixedInteger):
            return super().lcm(other)

        a, b = self.value, other.value
        if not a or not b:
            raise ArithmeticError('lcm with zero is undefined')

        return integer_of(abs(a * b) // math.gcd(a, b))

    def root_with_remainder(self, index):
        """Return r and self - r**index, for the index-th root r of self truncated toward zero.

        Square roots are computed natively, with the remainder derived directly from r.
        """
        if index != 2:
            return super().root_with_remainder(index)

        a = self.value
        if a < 0:
            raise ArithmeticError('even root of negative number')

        r = math.isqrt(a)
        return FixedInteger.of(r), integer_of(a - r * r)

    def _cmp(self, other):
        if isinstance(other, FixedInteger):
            a, b = self.value, other.value
            return (a > b) - (a < b)

        return super()._cmp(other)

    def __eq__(self, other):
        if isinstance(other, FixedInteger):
            return self is other or self.value == other.value

        return super().__eq__(other)

    __hash__ = ExactInteger.__hash__


class ArbitraryInteger(ExactInteger):
    """Exact integer backed by a gmpy2 mpz of any magnitude."""

    __slots__ = 'value'

    def __init__(self, value):
        self.value = gmpy2.mpz(value)

    def to_mpz(self):
        return self.value


def integer_of(value):
    """Return exact integer for given int/mpz value in minimal representation.

    FixedInteger is used if value fits the symmetric 64-bit range, ArbitraryInteger otherwise.
    """
    if -MAX_INT64 <= value <= MAX_INT64:
        return FixedInteger.of(int(value))

    return ArbitraryInteger(value)


_CACHE = tuple(FixedInteger(v) for v in range(-CACHE_DEPTH, CACHE_DEPTH + 1))
logging.debug(f'Cache {2*CACHE_DEPTH + 1} small FixedIntegers')

ZERO = FixedInteger.of(0)
ONE = FixedInteger.of(1)
