import operator
import unittest
from ratpoly import gmpy
from ratpoly.integers import (NarrowingError, ExactInteger, FixedInteger, ArbitraryInteger,
                              integer_of, CACHE_DEPTH, ZERO, ONE)
from ratpoly.factory import from_int, from_mpz, from_numerator_denominator
from ratpoly.rationals import Rational


class Representation(unittest.TestCase):

    def test_cache(self):
        self.assertIs(FixedInteger.of(5), FixedInteger.of(5))
        self.assertIs(FixedInteger.of(-CACHE_DEPTH), integer_of(-CACHE_DEPTH))
        self.assertIs(from_int(CACHE_DEPTH), from_mpz(CACHE_DEPTH))
        self.assertIsNot(FixedInteger.of(CACHE_DEPTH + 1), FixedInteger.of(CACHE_DEPTH + 1))
        self.assertIs(from_int(0), ZERO)
        self.assertIs(from_int(1), ONE)
        self.assertIs(from_int(2) - from_int(1), ONE)
        for v in range(-CACHE_DEPTH, CACHE_DEPTH + 1):
            self.assertIs(FixedInteger.of(v), integer_of(v))
            self.assertIs(from_mpz(gmpy.mpz(v)), FixedInteger.of(v))

    def test_range(self):
        self.assertEqual(FixedInteger.of(2**63-1), 2**63-1)
        self.assertEqual(FixedInteger.of(-2**63+1), -2**63+1)
        self.assertRaises(ValueError, FixedInteger.of, -2**63)
        self.assertRaises(ValueError, FixedInteger.of, 2**63)
        self.assertRaises(TypeError, FixedInteger.of, 1.5)
        self.assertRaises(TypeError, FixedInteger.of, None)
        self.assertIsInstance(integer_of(-2**63), ArbitraryInteger)
        self.assertIsInstance(integer_of(-2**63+1), FixedInteger)
        self.assertIsInstance(integer_of(gmpy.mpz(2)**64), ArbitraryInteger)
        self.assertIsInstance(integer_of(gmpy.mpz(2)**62), FixedInteger)
        self.assertTrue(issubclass(ExactInteger, Rational))

    def test_minimal(self):
        a = from_int(2**62)
        b = a + a
        self.assertIsInstance(b, ArbitraryInteger)
        self.assertEqual(b, 2**63)
        c = b - a
        self.assertIsInstance(c, FixedInteger)
        self.assertEqual(c, 2**62)
        d = integer_of(2**100) - integer_of(2**100 - 7)
        self.assertIsInstance(d, FixedInteger)
        self.assertIs(d, FixedInteger.of(7))
        self.assertIsInstance(-integer_of(-2**63), ArbitraryInteger)

    def test_mpz(self):
        for n in (0, -1, 2**63-1, -2**63, 3**100, -5**77):
            self.assertEqual(from_mpz(gmpy.mpz(n)).to_mpz(), n)
            self.assertEqual(from_mpz(n).to_mpz(), n)
        x = FixedInteger.of(1000)
        self.assertIs(x.to_mpz(), x.to_mpz())
        self.assertIsInstance(x.to_mpz(), gmpy.MPZ)

    def test_conversions(self):
        self.assertEqual(int(from_int(-7)), -7)
        self.assertEqual([1, 2, 3][from_int(1)], 2)
        self.assertEqual(operator.index(integer_of(2**70)), 2**70)
        self.assertEqual(from_int(255).to_string(16), 'ff')
        self.assertEqual(integer_of(-2**64).to_string(16), '-10000000000000000')
        self.assertEqual(repr(from_int(-5)), '-5')
        self.assertEqual(from_int(5).numerator, 5)
        self.assertIs(from_int(5).denominator, ONE)
        self.assertIs(from_int(5).whole(), from_int(5))
        self.assertTrue(from_int(5).is_whole())

    def test_predicates(self):
        self.assertTrue(ZERO.is_zero())
        self.assertTrue(ONE.is_one())
        self.assertTrue(from_int(-3).is_negative())
        self.assertFalse(ZERO.is_negative())
        self.assertTrue(from_int(-4).is_even())
        self.assertFalse(integer_of(2**70+1).is_even())
        self.assertEqual(from_int(-3).signum(), -1)
        self.assertEqual(ZERO.signum(), 0)
        self.assertEqual(integer_of(2**70).signum(), 1)
        self.assertFalse(ZERO)
        self.assertTrue(from_int(-1))


class Narrowing(unittest.TestCase):

    def test_int8(self):
        for n in (-127, -1, 0, 1, 127):
            self.assertEqual(from_int(n).int8(), n)
        for n in (-2**70, -129, -128, 128, 2**70):
            self.assertRaises(NarrowingError, integer_of(n).int8)
        self.assertTrue(issubclass(NarrowingError, OverflowError))
        self.assertEqual(from_int(128).int8(exact=False), -128)
        self.assertEqual(from_int(255).int8(exact=False), -1)
        self.assertEqual(from_int(-129).int8(exact=False), 127)
        self.assertEqual(integer_of(2**70 + 3).int8(exact=False), 3)

    def test_wider(self):
        self.assertEqual(from_int(2**15-1).int16(), 2**15-1)
        self.assertRaises(NarrowingError, from_int(-2**15).int16)
        self.assertEqual(from_int(-2**31+1).int32(), -2**31+1)
        self.assertRaises(NarrowingError, from_int(2**31).int32)
        self.assertEqual(from_int(2**31).int32(exact=False), -2**31)
        self.assertEqual(from_int(2**63-1).int64(), 2**63-1)
        self.assertRaises(NarrowingError, integer_of(2**63).int64)
        self.assertRaises(NarrowingError, integer_of(-2**63).int64)
        self.assertEqual(integer_of(2**63).int64(exact=False), -2**63)

    def test_char(self):
        self.assertEqual(from_int(65).char(), 65)
        self.assertEqual(from_int(0xFFFF).char(), 0xFFFF)
        self.assertRaises(NarrowingError, from_int(-1).char)
        self.assertRaises(NarrowingError, from_int(0x10000).char)
        self.assertEqual(from_int(-1).char(exact=False), 0xFFFF)
        self.assertEqual(from_int(0x10041).char(exact=False), 0x41)


class Arithmetic(unittest.TestCase):

    def test_basic(self):
        a, b = from_int(7), from_int(-3)
        self.assertEqual(a + b, 4)
        self.assertEqual(a - b, 10)
        self.assertEqual(a * b, -21)
        self.assertEqual(-a, -7)
        self.assertEqual(abs(b), 3)
        self.assertIs(abs(a), a)
        self.assertEqual(1 + a, 8)
        self.assertEqual(1 - a, -6)
        self.assertEqual(2 * a, 14)
        self.assertEqual(gmpy.mpz(2) * a, 14)
        self.assertEqual(a + integer_of(2**70), 2**70 + 7)
        self.assertEqual(integer_of(2**70) * integer_of(2**70), 2**140)
        self.assertIsInstance(a + b, FixedInteger)
        self.assertRaises(TypeError, operator.add, a, 1.5)
        self.assertRaises(TypeError, operator.mul, a, 1.5)

    def test_division(self):
        a = from_int(-7)
        self.assertEqual(a.quotient_z(2), -3)
        self.assertEqual(a.remainder(2), -1)
        self.assertEqual(a.quotient_z_with_remainder(from_int(2)), (-3, -1))
        self.assertEqual(from_int(7).quotient_z_with_remainder(from_int(-2)), (-3, 1))
        self.assertEqual(a // 2, -4)
        self.assertEqual(a % 2, 1)
        self.assertEqual(divmod(from_int(7), from_int(-2)), (-4, -1))
        self.assertEqual(divmod(7, from_int(-2)), (-4, -1))
        self.assertEqual(7 // from_int(2), 3)
        self.assertEqual(7 % from_int(-2), -1)
        big = integer_of(-(2**70 + 1))
        self.assertEqual(big.quotient_z(2), -(2**69))
        self.assertEqual(big.remainder(2), -1)
        self.assertEqual(big.quotient_z_with_remainder(integer_of(2**69)), (-2, -1))
        self.assertEqual(big // 2, -(2**69) - 1)
        self.assertEqual(big % 2, 1)
        self.assertRaises(ZeroDivisionError, a.quotient_z, 0)
        self.assertRaises(ZeroDivisionError, a.quotient_z, ZERO)
        self.assertRaises(ZeroDivisionError, big.remainder, ZERO)
        self.assertRaises(ZeroDivisionError, operator.floordiv, a, ZERO)
        self.assertRaises(ZeroDivisionError, operator.truediv, a, 0)

    def test_remainder_paths(self):
        for x in (-17, -6, 0, 5, 23, 2**40 + 3):
            for y in (-5, -2, 1, 3, 7):
                a, b = from_int(x), from_int(y)
                q, r = a.quotient_z_with_remainder(b)
                self.assertEqual(ExactInteger.quotient_z_with_remainder(a, b), (q, r))
                self.assertEqual(q * b + r, a)
                self.assertTrue(r.is_zero() or r.signum() == a.signum())

    def test_true_division(self):
        self.assertEqual(from_int(6) / 4, from_numerator_denominator(3, 2))
        self.assertIsInstance(from_int(6) / 3, FixedInteger)
        self.assertEqual(from_int(6) / from_int(3), 2)
        self.assertEqual(1 / from_int(-2), from_numerator_denominator(-1, 2))

    def test_modular(self):
        self.assertEqual(from_int(-7).modulo(3), 2)
        self.assertEqual(from_int(-7).modulo(from_int(3)), 2)
        self.assertEqual(integer_of(-2**70).modulo(3), (-2**70) % 3)
        self.assertRaises(ArithmeticError, from_int(5).modulo, 0)
        self.assertRaises(ArithmeticError, from_int(5).modulo, from_int(-3))
        self.assertEqual(from_int(3).mod_inverse(7), 5)
        self.assertEqual(from_int(-3).mod_inverse(7), 2)
        self.assertEqual(integer_of(2**70).mod_inverse(2**61-1) * 2**70 % (2**61-1), 1)
        self.assertRaises(ZeroDivisionError, from_int(2).mod_inverse, 4)
        self.assertRaises(ArithmeticError, from_int(2).mod_inverse, 0)

    def test_gcd_lcm(self):
        self.assertEqual(from_int(12).gcd(from_int(18)), 6)
        self.assertEqual(from_int(-12).gcd(18), 6)
        self.assertEqual(from_int(0).gcd(from_int(-5)), 5)
        self.assertEqual(integer_of(2**70).gcd(2**65 * 3), 2**65)
        self.assertRaises(ArithmeticError, from_int(0).gcd, from_int(0))
        self.assertRaises(ArithmeticError, from_int(0).gcd, gmpy.mpz(0))
        self.assertEqual(from_int(4).lcm(from_int(6)), 12)
        self.assertEqual(from_int(-4).lcm(from_int(6)), 12)
        self.assertEqual(from_int(-4).lcm(6), 12)
        self.assertEqual(integer_of(2**70).lcm(3), 3 * 2**70)
        self.assertRaises(ArithmeticError, from_int(0).lcm, from_int(6))
        self.assertRaises(ArithmeticError, from_int(4).lcm, 0)
        self.assertRaises(TypeError, from_int(4).gcd, 1.5)

    def test_pow(self):
        self.assertEqual(from_int(2)**10, 1024)
        self.assertEqual(from_int(-3)**3, -27)
        self.assertEqual(from_int(2)**100, 2**100)
        self.assertIsInstance(from_int(2)**100, ArbitraryInteger)
        self.assertEqual(from_int(2)**-2, from_numerator_denominator(1, 4))
        self.assertIs(from_int(5)**0, ONE)
        self.assertEqual(from_int(0)**3, 0)
        self.assertRaises(ArithmeticError, operator.pow, ZERO, 0)
        self.assertRaises(ZeroDivisionError, operator.pow, ZERO, -1)

    def test_roots(self):
        self.assertEqual(from_int(30).root_with_remainder(3), (3, 3))
        self.assertEqual(from_int(-30).root_with_remainder(3), (-3, -3))
        self.assertEqual(from_int(17).isqrt_with_remainder(), (4, 1))
        self.assertEqual(from_int(16).isqrt_with_remainder(), (4, 0))
        self.assertEqual(from_int(5).root_with_remainder(1), (5, 0))
        self.assertEqual(integer_of(2**130).isqrt_with_remainder(), (2**65, 0))
        self.assertEqual(integer_of(-2**99).root_with_remainder(3), (-2**33, 0))
        self.assertRaises(ArithmeticError, from_int(-4).isqrt_with_remainder)
        self.assertRaises(ArithmeticError, integer_of(-2**70).root_with_remainder, 4)
        self.assertRaises(ValueError, from_int(4).root_with_remainder, 0)
        for n in range(200):
            a = from_int(n)
            self.assertEqual(a.isqrt_with_remainder(), ExactInteger.root_with_remainder(a, 2))
        a = from_int(2**62 + 12345)
        r, s = a.isqrt_with_remainder()
        self.assertEqual((r, s), ExactInteger.root_with_remainder(a, 2))
        self.assertEqual(r * r + s, a)

    def test_primes(self):
        self.assertTrue(from_int(2).is_prime())
        self.assertTrue(from_int(97).is_prime())
        self.assertFalse(from_int(1).is_prime())
        self.assertFalse(from_int(0).is_prime())
        self.assertFalse(from_int(-7).is_prime())
        self.assertFalse(from_int(91).is_prime())
        self.assertEqual(from_int(360).prime_factorization(), [2, 2, 2, 3, 3, 5])
        self.assertEqual(from_int(1).prime_factorization(), [])
        self.assertEqual(from_int(-6).prime_factorization(), [])
        self.assertEqual(from_int(12).factors(), [1, 2, 3, 4, 6, 12])
        self.assertEqual(from_int(-7).factors(), [1, 7])
        self.assertEqual(ZERO.factors(), [])
        self.assertIsInstance(from_int(12).factors()[0], FixedInteger)
        self.assertTrue(from_int(12).can_divide_by(4))
        self.assertTrue(from_int(12).can_divide_by(from_int(-3)))
        self.assertFalse(from_int(12).can_divide_by(5))
        self.assertFalse(from_int(12).can_divide_by(0))

    def test_compare(self):
        self.assertEqual(from_int(5), 5)
        self.assertEqual(from_int(5), gmpy.mpz(5))
        self.assertEqual(integer_of(2**70), 2**70)
        self.assertNotEqual(from_int(5), 6)
        self.assertEqual(from_int(5), integer_of(gmpy.mpz(5)))
        self.assertLess(from_int(3), from_int(5))
        self.assertLess(from_int(3), 2**70)
        self.assertGreater(integer_of(2**70), 5)
        self.assertLessEqual(integer_of(-2**70), integer_of(-2**70))
        self.assertGreaterEqual(from_int(0), -1)
        self.assertEqual(from_int(3).compare(5), -1)
        self.assertEqual(integer_of(2**70).compare(from_int(5)), 1)
        self.assertEqual(from_int(5).compare(5), 0)
        self.assertRaises(TypeError, from_int(5).compare, 5.0)
        self.assertRaises(TypeError, operator.lt, from_int(5), 'x')

    def test_hash(self):
        self.assertEqual(hash(from_int(5)), ~hash(5))
        self.assertEqual(hash(integer_of(2**70)), ~hash(gmpy.mpz(2**70)))
        self.assertEqual(hash(from_int(-1)), hash(integer_of(gmpy.mpz(-1))))
        self.assertEqual(len({from_int(5), integer_of(gmpy.mpz(5)), FixedInteger.of(5)}), 1)


if __name__ == "__main__":
    unittest.main()
