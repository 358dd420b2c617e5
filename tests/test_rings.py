import random
import unittest
from fractions import Fraction
from lpoly.rings import ZZ, QQ, GF


class Arithmetic(unittest.TestCase):

    def test_integers(self):
        self.assertEqual(repr(ZZ), 'ZZ')
        self.assertEqual(ZZ.characteristic, 0)
        self.assertFalse(ZZ.is_field)
        self.assertEqual(ZZ(3), 3)
        self.assertEqual(ZZ(Fraction(4, 1)), 4)
        self.assertIsInstance(ZZ(Fraction(4, 1)), int)
        self.assertRaises(TypeError, ZZ, 0.5)
        self.assertRaises(TypeError, ZZ, Fraction(1, 2))
        self.assertEqual(ZZ.from_str('-12'), -12)
        self.assertTrue(ZZ.contains(5))
        self.assertFalse(ZZ.contains(Fraction(5)))

        self.assertTrue(ZZ.is_zero(0))
        self.assertTrue(ZZ.is_one(1))
        self.assertTrue(ZZ.is_unit(-1))
        self.assertFalse(ZZ.is_unit(2))
        self.assertEqual(ZZ.inverse(-1), -1)
        self.assertRaises(ZeroDivisionError, ZZ.inverse, 2)
        self.assertRaises(ZeroDivisionError, ZZ.inverse, 0)

        self.assertEqual(ZZ.divexact(6, -3), -2)
        self.assertRaises(ValueError, ZZ.divexact, 7, 2)
        self.assertRaises(ZeroDivisionError, ZZ.divexact, 1, 0)
        self.assertEqual(ZZ.divides(7, 2)[0], False)
        self.assertEqual(ZZ.divides(0, 0), (True, 0))
        self.assertEqual(ZZ.canonical_unit(-5), -1)
        self.assertEqual(ZZ.canonical_unit(0), 1)
        self.assertEqual(ZZ.gcd(12, -18), 6)

        self.assertEqual(ZZ.power(2, 10), 1024)
        self.assertEqual(ZZ.power(-1, -3), -1)
        self.assertEqual(ZZ.power(1, -5), 1)
        self.assertRaises(ZeroDivisionError, ZZ.power, 2, -1)

        rng = random.Random(1)
        for _ in range(10):
            a = ZZ.random_element(rng=rng, bound=5)
            self.assertTrue(-5 <= a <= 5)

    def test_rationals(self):
        self.assertEqual(repr(QQ), 'QQ')
        self.assertTrue(QQ.is_field)
        self.assertEqual(QQ(2), Fraction(2))
        self.assertIsInstance(QQ(2), Fraction)
        self.assertRaises(TypeError, QQ, 0.5)
        self.assertEqual(QQ.from_str('3/2'), Fraction(3, 2))
        self.assertTrue(QQ.is_unit(Fraction(1, 3)))
        self.assertFalse(QQ.is_unit(QQ.zero))
        self.assertEqual(QQ.inverse(Fraction(2, 3)), Fraction(3, 2))
        self.assertRaises(ZeroDivisionError, QQ.inverse, QQ.zero)
        self.assertEqual(QQ.power(Fraction(2), -2), Fraction(1, 4))
        self.assertEqual(QQ.divexact(Fraction(1), Fraction(3)), Fraction(1, 3))
        self.assertEqual(QQ.canonical_unit(Fraction(-2, 3)), Fraction(-2, 3))
        self.assertEqual(QQ.canonical_unit(QQ.zero), 1)
        self.assertEqual(QQ.gcd(Fraction(2), QQ.zero), 1)
        self.assertEqual(QQ.gcd(QQ.zero, QQ.zero), 0)

        rng = random.Random(2)
        for _ in range(10):
            a = QQ.random_element(rng=rng, bound=3)
            self.assertTrue(QQ.contains(a))
            self.assertTrue(-3 <= a <= 3)

    def test_prime_fields(self):
        F = GF(7)
        self.assertIs(F, GF(7))
        self.assertRaises(ValueError, GF, 8)
        self.assertEqual(repr(F), 'GF(7)')
        self.assertEqual(F.characteristic, 7)
        self.assertEqual(F.order, 7)
        self.assertTrue(F.is_field)

        self.assertEqual(F(10), 3)
        self.assertEqual(F(10), F(3))
        self.assertEqual(hash(F(10)), hash(F(3)))
        self.assertEqual(int(F(-1)), 6)
        self.assertEqual(repr(F(9)), '2')
        self.assertEqual(F.from_str('-1'), 6)
        self.assertRaises(TypeError, F, 0.5)
        self.assertRaises(TypeError, F.element_type, 0.5)
        self.assertNotEqual(F(1), GF(5)(1))

        self.assertEqual(F(3) * F(5), 1)
        self.assertEqual(F(3) + 4, 0)
        self.assertEqual(2 - F(3), F(6))
        self.assertEqual(F(3) - 5, F(5))
        self.assertEqual(-F(1), 6)
        self.assertEqual(+F(1), 1)
        self.assertEqual(F(3) / F(5), 2)
        self.assertEqual(1 / F(3), 5)
        self.assertEqual(F(3).reciprocal(), 5)
        self.assertEqual(F(3)**-1, 5)
        self.assertEqual(F(3)**6, 1)
        self.assertRaises(ZeroDivisionError, pow, F(0), -1)
        self.assertRaises(ZeroDivisionError, F(0).reciprocal)
        self.assertRaises(ZeroDivisionError, F.inverse, F.zero)
        self.assertFalse(F(7))
        self.assertTrue(F(8))

        self.assertTrue(F.is_unit(F(2)))
        self.assertFalse(F.is_unit(F.zero))
        self.assertEqual(F.power(F(2), -1), 4)
        self.assertEqual(F.canonical_unit(F(4)), 4)
        self.assertEqual(F.divexact(F(1), F(4)), 2)
        self.assertEqual(F.gcd(F(3), F(0)), 1)
        self.assertTrue(F.contains(F.random_element(rng=random.Random(3))))


if __name__ == "__main__":
    unittest.main()
