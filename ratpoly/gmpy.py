"""This module collects all gmpy2 functions used by RatPoly.

Arbitrary-precision integers are gmpy2's mpz objects throughout the package.
Deterministic trial-division routines for primality testing and factorization
are also provided, as well as radix rendering for exact integers.
"""

import math
import logging
from gmpy2 import version, mpz, mpq, gcd, lcm, invert, t_div, isqrt, iroot_rem

logging.debug(f'Load gmpy2 version {version()}')

MPZ = type(mpz(0))
MPQ = type(mpq(0))


def trial_is_prime(x):
    """Return True if x is prime, using trial division up to isqrt(x).

    Negative numbers, 0 and 1 are not prime. Unlike gmpy2.is_prime(), the
    answer is never probabilistic.
    """
    if x <= 2:
        return x == 2

    if x%2 == 0:
        return False

    if isinstance(x, int):
        top = math.isqrt(x)
    else:
        top = isqrt(x)
    d = 3
    while d <= top:
        if x % d == 0:
            return False

        d += 2
    return True


def trial_factor(x):
    """Return the list of prime factors of x in ascending order, with multiplicity.

    Repeated trial division by increasing candidate factors; the empty list is
    returned for x <= 1.
    """
    factors = []
    if x <= 1:
        return factors

    d = 2
    while not trial_is_prime(x):
        q, r = divmod(x, d)
        if r == 0:
            factors.append(d)
            x = q
        else:
            d += 1 if d == 2 else 2
    factors.append(x)
    return factors


def divisors(x):
    """Return the sorted list of positive divisors of abs(x) (empty for x=0)."""
    x = abs(x)
    if not x:
        return []

    if isinstance(x, int):
        top = math.isqrt(x)
    else:
        top = isqrt(x)
    step = 1 if x%2 == 0 else 2  # odd x has odd divisors only
    low, high = [], []
    for d in range(1, int(top) + 1, step):
        if x % d == 0:
            low.append(d)
            if d * d != x:
                high.append(x // d)
    high.reverse()
    return low + high


def to_digits(x, radix=10):
    """Return string representation of integer x in given radix, 2<=radix<=36."""
    if not 2 <= radix <= 36:
        raise ValueError(f'radix {radix} not in range 2..36')

    return mpz(x).digits(radix)
