"""This module supports univariate polynomials with exact rational coefficients.

Polynomials are represented as tuples of exact numbers (see ratpoly.rationals).
The polynomial a_0 + a_1 x + ... + a_n x^n corresponds to the tuple
(a_0, a_1, ... , a_n). The tuple is never empty, and its last element a_n is
nonzero unless the polynomial is constant; the zero polynomial is (0,).
The length of a polynomial is limited to MAX_LENGTH coefficients.

Polynomials are created by the functions constant_of(), monomial_of() and
from_coefficients(), where coefficients may be given as exact numbers, Python
ints, gmpy2 mpz/mpq values, or fractions.Fraction values.

The operators +,-,*,/,//,%,** and function divmod are overloaded, where / is
restricted to division by scalars. Division with remainder dispatches on the
length of the divisor, using scalar division for constants, synthetic division
for linear divisors, and long division otherwise.
The operators <,<=,>,>=,==,!= are overloaded as well, ordering polynomials
first by length and then by their coefficients from the highest degree down.
"""

import sys
import operator
from ratpoly import gmpy as gmpy2
from ratpoly import integers
from ratpoly import factory
from ratpoly.rationals import Rational

X = 'x'  # symbol for indeterminate in polynomials

MAX_DEGREE = 65535
MAX_LENGTH = MAX_DEGREE + 1


def check_deg(d):
    """Raise IndexError if d is not a valid degree."""
    if not 0 <= d <= MAX_DEGREE:
        raise IndexError(f'degree {d} not in range 0..{MAX_DEGREE}')


def check_length(n):
    """Raise IndexError if n is not a valid length."""
    if not 1 <= n <= MAX_LENGTH:
        raise IndexError(f'length {n} not in range 1..{MAX_LENGTH}')


def _exact(c):
    # convert c to exact number, if possible
    if isinstance(c, Rational):
        return c

    if isinstance(c, Rational._mix_types):
        return integers.integer_of(c)

    if isinstance(c, Rational._frac_types):
        return factory.from_fraction(c)

    return NotImplemented


def _coefficient(c):
    a = _exact(c)
    if a is NotImplemented:
        raise TypeError(f'exact coefficient expected, got {type(c).__name__}')

    return a


def _make(a):
    # a is a valid coefficient sequence, canonical zero and one are shared
    if len(a) == 1:
        c = a[0]
        if c.is_zero():
            return ZERO

        if c.is_one() and c.is_whole():
            return ONE

    return Polynomial(tuple(a))


def constant_of(c):
    """Constant polynomial c."""
    return _make((_coefficient(c),))


def monomial_of(c, degree=0):
    """Monomial c x^degree."""
    check_deg(degree)
    c = _coefficient(c)
    if c.is_zero():
        return ZERO

    return _make((integers.ZERO,) * degree + (c,))


def from_coefficients(coefficients):
    """Polynomial with given coefficients, constant term first.

    Trailing zero coefficients (for the highest degrees) are dropped.
    """
    a = [_coefficient(c) for c in coefficients]
    while len(a) > 1 and a[-1].is_zero():
        a.pop()
    if not a:
        return ZERO

    check_length(len(a))
    return _make(a)


class Polynomial:
    """Polynomials with exact coefficients, represented as nonempty tuples.

    Invariant: last element of attribute 'value' is nonzero if 'value' has length > 1.
    Use constant_of(), monomial_of() or from_coefficients() to create polynomials.
    """

    __slots__ = 'value'

    def __init__(self, value):
        self.value = value

    @staticmethod
    def _coerce(a):
        if isinstance(a, Polynomial):
            return a

        a = _exact(a)
        if a is NotImplemented:
            return NotImplemented

        return constant_of(a)

    def coefficient(self, i):
        """Coefficient of x^i, zero beyond the degree of this polynomial."""
        check_deg(i)
        a = self.value
        return a[i] if i < len(a) else integers.ZERO

    def __getitem__(self, key):  # NB: no set_item to prevent mutability
        if isinstance(key, slice):
            raise IndexError('slicing of polynomials not supported, use list() or similar')

        return self.coefficient(operator.index(key))

    def __iter__(self):
        yield from self.value

    def __len__(self):
        return len(self.value)

    def length(self):
        """Number of coefficients, degree plus one."""
        return len(self.value)

    def degree(self):
        """Degree of this polynomial (zero for constant polynomials)."""
        return len(self.value) - 1

    def constant(self):
        return self.value[0]

    def lead_coefficient(self):
        return self.value[-1]

    def is_zero(self):
        return len(self.value) == 1 and self.value[0].is_zero()

    def is_one(self):
        return len(self.value) == 1 and self.value[0].is_one()

    def is_constant(self):
        return len(self.value) == 1

    def is_monomial(self):
        """Test if all coefficients except the leading one are zero."""
        return all(c.is_zero() for c in self.value[:-1])

    def to_terms(self, x=X, radix=10):
        """String representation such as '2x^2 - (1/2)x + 1', with numbers in the given radix."""
        a = self.value
        if len(a) == 1:
            return a[0].to_string(radix)

        s = ''
        for i in range(len(a) - 1, -1, -1):
            c = a[i]
            if c.is_zero():
                continue

            if s:
                s += ' - ' if c.is_negative() else ' + '
                c = abs(c)
            if c.is_whole():
                t = c.to_string(radix)
            else:
                t = f'({c.to_string(radix)})'
            if i == 0:
                s += t
                continue

            if c.is_one():
                t = ''
            elif c == -1:
                t = '-'
            if i == 1:
                s += f'{t}{x}'
            else:
                s += f'{t}{x}^{gmpy2.to_digits(i, radix)}'
        return s

    def __repr__(self):
        return self.to_terms()

    @staticmethod
    def _arith(a, b, op):
        # apply op coefficient-wise, cancelling equal-length leading terms on the fly
        m, n = len(a), len(b)
        if m > n:
            return Polynomial(tuple(op(a[i], b[i]) for i in range(n)) + a[n:])

        if m < n:
            zero = integers.ZERO
            return Polynomial(tuple(op(a[i], b[i]) for i in range(m)) +
                              tuple(op(zero, b[i]) for i in range(m, n)))

        k = m - 1
        top = op(a[k], b[k])
        while k and top.is_zero():
            k -= 1
            top = op(a[k], b[k])
        if not k:
            return constant_of(top)

        return Polynomial(tuple(op(a[i], b[i]) for i in range(k)) + (top,))

    def __neg__(self):
        return _make([-c for c in self.value])

    def __pos__(self):
        return self

    def __abs__(self):
        """Polynomial with the magnitudes of the coefficients."""
        if not any(c.is_negative() for c in self.value):
            return self

        return _make([abs(c) for c in self.value])

    def __add__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return self._arith(self.value, other.value, operator.add)

    __radd__ = __add__

    def __sub__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return self._arith(self.value, other.value, operator.sub)

    def __rsub__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return self._arith(other.value, self.value, operator.sub)

    def scaled(self, c):
        """Multiply all coefficients by scalar c."""
        c = _coefficient(c)
        if c.is_zero():
            return ZERO

        if c.is_one():
            return self

        return _make([a_i * c for a_i in self.value])

    def _divided(self, c):
        # divide all coefficients by nonzero scalar c
        if c.is_zero():
            raise ZeroDivisionError('division by zero')

        if c.is_one():
            return self

        return _make([a_i / c for a_i in self.value])

    @staticmethod
    def _mul(a, b):
        # a, b both nonconstant
        n = len(a) + len(b) - 1
        check_length(n)
        c = [integers.ZERO] * n
        for i, a_i in enumerate(a):
            if a_i:
                for j, b_j in enumerate(b):
                    c[i + j] += a_i * b_j
        return Polynomial(tuple(c))

    def __mul__(self, other):
        if not isinstance(other, Polynomial):
            c = _exact(other)
            if c is NotImplemented:
                return NotImplemented

            return self.scaled(c)

        a, b = self.value, other.value
        if len(b) == 1:
            return self.scaled(b[0])

        if len(a) == 1:
            return other.scaled(a[0])

        return self._mul(a, b)

    __rmul__ = __mul__

    def squared(self):
        """Square of this polynomial."""
        a = self.value
        if len(a) == 1:
            return constant_of(a[0] * a[0])

        n = 2 * len(a) - 1
        check_length(n)
        c = [integers.ZERO] * n
        for i, a_i in enumerate(a):
            if a_i:
                c[2*i] += a_i * a_i
                a_i2 = 2 * a_i
                for j in range(i + 1, len(a)):
                    c[i + j] += a_i2 * a[j]
        return Polynomial(tuple(c))

    def __truediv__(self, other):
        """Division by a scalar (or a constant polynomial)."""
        if isinstance(other, Polynomial):
            if len(other.value) != 1:
                return NotImplemented

            c = other.value[0]
        else:
            c = _exact(other)
            if c is NotImplemented:
                return NotImplemented

        return self._divided(c)

    @staticmethod
    def _sweep(a, r):
        # synthetic division of a by x - r, returning quotient coefficients and remainder a(r)
        q = [None] * (len(a) - 1)
        s = a[-1]
        for i in range(len(a) - 2, -1, -1):
            q[i] = s
            s = a[i] + s * r
        return q, s

    def _synthetic_division(self, divisor):
        # divisor is c + m x, with m nonzero
        c, m = divisor.value
        q, s = self._sweep(self.value, -c / m)
        if q:
            q = _make(q)._divided(m)
        else:
            q = ZERO
        return q, constant_of(s)

    @staticmethod
    def _long_division(a, b, remainder=True):
        # a, b with len(a) > len(b) > 2
        n = len(b) - 1
        b_n = b[n]
        q = [None] * (len(a) - n)
        for k in range(len(q) - 1, -1, -1):
            t = a[k + n]
            for i in range(k + 1, min(len(q) - 1, k + n) + 1):
                t -= b[k + n - i] * q[i]
            q[k] = t / b_n
        quotient = Polynomial(tuple(q))
        if not remainder:
            return quotient, None

        # reconstruct remainder from quotient, from degree n-1 down, skipping leading zeros
        r = []
        for pos in range(n - 1, -1, -1):
            t = a[pos]
            for i in range(min(pos, len(q) - 1) + 1):
                t -= b[pos - i] * q[i]
            if r or t:
                r.append(t)
        if not r:
            return quotient, ZERO

        r.reverse()
        return quotient, _make(r)

    def _divmod(self, divisor, remainder=True):
        if divisor.is_zero():
            raise ZeroDivisionError('division by zero polynomial')

        a, b = self.value, divisor.value
        m, n = len(a), len(b)
        if n == 1:
            return self._divided(b[0]), ZERO

        if n == 2:
            return self._synthetic_division(divisor)

        if n > m:
            return ZERO, self

        if n == m:
            q = a[-1] / b[-1]
            r = self - divisor.scaled(q) if remainder else None
            return constant_of(q), r

        return self._long_division(a, b, remainder)

    def __floordiv__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return self._divmod(other, remainder=False)[0]

    def __rfloordiv__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return other._divmod(self, remainder=False)[0]

    def __mod__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return self._divmod(other)[1]

    def __rmod__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return other._divmod(self)[1]

    def __divmod__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return self._divmod(other)

    def __rdivmod__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return other._divmod(self)

    def quotient(self, divisor):
        """Quotient of division with remainder, without computing the remainder."""
        return self // self._intern(divisor)

    def remainder(self, divisor):
        """Remainder of division with remainder, of lower degree than divisor or zero."""
        return self % self._intern(divisor)

    @classmethod
    def _intern(cls, a):
        b = cls._coerce(a)
        if b is NotImplemented:
            raise TypeError(f'polynomial expected, got {type(a).__name__}')

        return b

    def evaluate(self, x):
        """Evaluate polynomial at given x, as remainder of synthetic division by (X - x)."""
        return self._sweep(self.value, _coefficient(x))[1]

    __call__ = evaluate

    def __pow__(self, other):
        """Exponentiation by an integral exponent."""
        try:
            n = operator.index(other)
        except TypeError:
            return NotImplemented

        a = self.value
        if len(a) == 1:
            return constant_of(a[0] ** n)

        if n < 0:
            raise ValueError('negative exponent for nonconstant polynomial')

        if n == 0:
            return ONE

        if n == 1:
            return self

        if n == 2:
            return self.squared()

        check_length(n * (len(a) - 1) + 1)
        b = self
        for i in range(n.bit_length() - 2, -1, -1):
            b = b.squared()
            if (n >> i) & 1:
                b = self._mul(b.value, a)
        return b

    @staticmethod
    def _cmp(a, b):
        # order by length first, then by coefficients from the highest degree down
        if len(a) != len(b):
            return -1 if len(a) < len(b) else 1

        for i in range(len(a) - 1, -1, -1):
            c = a[i].compare(b[i])
            if c:
                return c

        return 0

    def compare(self, other):
        """Return -1, 0, 1 if self is less than, equal to, greater than other."""
        return self._cmp(self.value, self._intern(other).value)

    def compare_degree(self, other):
        """Return -1, 0, 1 if degree of self is less than, equal to, greater than degree of other."""
        m, n = len(self.value), len(self._intern(other).value)
        return (m > n) - (m < n)

    def __lt__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return self._cmp(self.value, other.value) < 0

    def __le__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return self._cmp(self.value, other.value) <= 0

    def __gt__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return self._cmp(self.value, other.value) > 0

    def __ge__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return self._cmp(self.value, other.value) >= 0

    def __eq__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return self is other or self.value == other.value

    def __hash__(self):
        """Product of the coefficient hashes, mixed with the length."""
        h = 1
        for i, c in enumerate(self.value, 1):
            h = (h * (hash(c) or i)) % sys.hash_info.modulus
        return hash((h, len(self.value)))

    def __bool__(self):
        """Truth value testing.

        Return False if this polynomial is zero, True otherwise.
        """
        return not self.is_zero()


ZERO = Polynomial((integers.ZERO,))
ONE = Polynomial((integers.ONE,))
