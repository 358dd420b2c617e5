import copy
import operator
import unittest
from fractions import Fraction
from lpoly.rings import ZZ, QQ, GF
from lpoly import polyx


class Arithmetic(unittest.TestCase):

    def setUp(self):
        self.P = polyx.PolynomialRing(ZZ)
        self.x = self.P.gen()
        self.Q = polyx.PolynomialRing(QQ, 'y')
        self.y = self.Q.gen()

    def test_basics(self):
        P, x = self.P, self.x
        self.assertIs(P, polyx.PolynomialRing(ZZ, 'x'))
        self.assertIs(P, polyx.PolynomialRing(ZZ, var='x'))
        self.assertIs(polyx.PolynomialRing(QQ, 'y'), self.Q)
        self.assertEqual(P.__name__, 'ZZ[x]')
        self.assertEqual(P([1, 2, 0]), P([1, 2]))
        self.assertEqual(P([1, 2, 0]).degree(), 1)
        self.assertEqual(P.deg(0), -1)
        self.assertEqual(P.deg(x), 1)
        self.assertEqual(P.zero(), 0)
        self.assertEqual(P.one(), 1)
        self.assertFalse(P.zero())
        self.assertTrue(P.one())
        self.assertEqual(len(x**3), 4)

        p = P.from_terms('x^2+3x-4')
        self.assertEqual(p, P([-4, 3, 1]))
        self.assertEqual(repr(p), 'x^2+3x-4')
        self.assertEqual(p.to_terms('t'), 't^2+3t-4')
        self.assertEqual(P('-x^3 + 2*x'), -x**3 + 2*x)
        self.assertEqual(repr(P(0)), '0')
        self.assertEqual(repr(P([0, -1])), '-x')
        self.assertEqual(repr(P([5])), '5')
        self.assertEqual(repr(P([-1])), '-1')
        self.assertEqual(list((x**2 - 3).terms()), [(2, 1), (0, -3)])
        self.assertEqual(hash(P([1, 2])), hash(P.from_terms('2x+1')))
        self.assertEqual(p(2), 6)
        self.assertEqual(p.evaluate(0), -4)
        self.assertEqual(p(Fraction(1, 2)), Fraction(-9, 4))

        self.assertEqual(p[2], 1)
        self.assertEqual(p[7], 0)
        self.assertEqual(p.coeff(-1), 0)
        self.assertEqual(list(p), [-4, 3, 1])
        self.assertEqual((x + 2).map_coefficients(lambda c: 3*c), 3*x + 6)

    def test_set_coefficient(self):
        P = self.P
        p = P(0)
        self.assertIs(p.set_coefficient(3, 2), p)
        self.assertEqual(p, P([0, 0, 0, 2]))
        p.set_coefficient(0, -1)
        self.assertEqual(p, P([-1, 0, 0, 2]))
        p.set_coefficient(3, 0)
        self.assertEqual(p, -1)
        p.set_coefficient(5, 0)
        self.assertEqual(p.degree(), 0)
        self.assertRaises(IndexError, p.set_coefficient, -1, 1)

    def test_copy(self):
        P, x = self.P, self.x
        p = x**2 + 1
        for q in (p.copy(), copy.copy(p), copy.deepcopy(p), +p, P(p)):
            self.assertIsNot(q.value, p.value)
            q.set_coefficient(0, 5)
            self.assertEqual(p, x**2 + 1)

    def test_arithmetic(self):
        P, x = self.P, self.x
        self.assertEqual((x + 1) * (x - 1), x**2 - 1)
        self.assertEqual(P.add(x, 1), x + 1)
        self.assertEqual(P.sub(1, x), 1 - x)
        self.assertEqual(P.mul(x, [1, 1]), x**2 + x)
        self.assertEqual(-(x - 1), 1 - x)
        self.assertEqual(2 * x, x + x)
        self.assertEqual(x * 0, 0)
        self.assertEqual(x**0, 1)
        self.assertEqual((x + 1)**3, x**3 + 3*x**2 + 3*x + 1)
        self.assertEqual(P(-1)**-3, -1)
        self.assertRaises(ZeroDivisionError, operator.pow, x, -1)
        self.assertEqual(x << 2, x**3)
        self.assertEqual(P.lshift(x, 2), x**3)
        self.assertEqual(x**3 >> 2, x)
        self.assertEqual(P.rshift(x**3, 3), 1)
        self.assertEqual(P(0) << 3, 0)
        self.assertRaises(ValueError, operator.lshift, x, -1)
        self.assertRaises(ValueError, operator.rshift, x, -1)

    def test_division(self):
        P, x = self.P, self.x
        self.assertEqual(P.divexact(x**2 - 1, x - 1), x + 1)
        self.assertEqual((x**2 - 1) / (x + 1), x - 1)
        self.assertEqual(P.divexact(2*x + 4, 2), x + 2)
        self.assertRaises(ValueError, P.divexact, 2*x + 3, 2)
        self.assertRaises(ValueError, P.divexact, x**2, x - 1)
        self.assertRaises(ZeroDivisionError, P.divexact, x, 0)
        self.assertEqual(P.divexact(x**2 + 1, x, check=False), x)
        self.assertEqual(P.divides(x**2 + x, x), (True, x + 1))
        self.assertEqual(P.divides(x + 1, x)[0], False)
        self.assertEqual(P.divides(0, x), (True, 0))

        self.assertEqual(divmod(x**2 + 1, x - 1), (x + 1, 2))
        self.assertEqual(P.divmod(x**2 + 1, x - 1), (x + 1, 2))
        self.assertEqual((x**2 + 1) // (x - 1), x + 1)
        self.assertEqual((x**2 + 1) % (x - 1), 2)
        self.assertEqual(P.mod(x**2 + 1, x - 1), 2)
        self.assertEqual(divmod(x, x**2), (0, x))
        self.assertRaises(ValueError, divmod, x**2, 2*x + 1)
        self.assertRaises(ZeroDivisionError, divmod, x, P(0))
        self.assertRaises(ZeroDivisionError, operator.mod, x, 0)

    def test_remove(self):
        P, x = self.P, self.x
        self.assertEqual(P.remove(x**3 + x**2, x), (2, x + 1))
        self.assertEqual(P.remove(x + 1, x), (0, x + 1))
        self.assertEqual(P.remove(4*x**2 + 12, 2), (2, x**2 + 3))
        self.assertEqual(P.remove((x - 1)**2 * (x + 2), x - 1), (2, x + 2))
        self.assertRaises(ValueError, P.remove, 0, x)
        self.assertRaises(ValueError, P.remove, x, 1)
        self.assertRaises(ValueError, P.remove, x, 0)

    def test_gcd(self):
        P, x = self.P, self.x
        self.assertEqual(P.gcd(x**2 - 1, x**2 - 2*x + 1), x - 1)
        self.assertEqual(P.gcd(6*x + 6, 4*x + 4), 2*x + 2)
        self.assertEqual(P.gcd(-2*x, 0), 2*x)
        self.assertEqual(P.gcd(0, 0), 0)
        self.assertEqual(P.gcd(x**2 + 1, x + 1), 1)
        self.assertEqual(P.gcd(1 - x, 2 - 2*x), x - 1)
        self.assertEqual(P.lcm(x**2 - 1, x - 1), x**2 - 1)
        self.assertEqual(P.lcm(2*x, -3*x), 6*x)
        self.assertEqual(P.lcm(x, 0), 0)
        self.assertRaises(ValueError, P.gcdext, x, x + 1)

        Q, y = self.Q, self.y
        self.assertEqual(Q.gcd(2*y**2 - 2, 4*y - 4), y - 1)
        a, b = y**2 - 1, y**2 - 2*y + 1
        g, s, t = Q.gcdext(a, b)
        self.assertEqual(g, y - 1)
        self.assertEqual(s * a + t * b, g)
        g, s, t = Q.gcdext(0, 3*y)
        self.assertEqual(g, y)
        self.assertEqual(t, Fraction(1, 3))
        self.assertEqual(Q.gcdext(0, 0)[0], 0)

    def test_units(self):
        P, x = self.P, self.x
        self.assertEqual(P(-2*x + 1).canonical_unit(), -1)
        self.assertEqual(P(0).canonical_unit(), 1)
        self.assertTrue(P(-1).is_unit())
        self.assertFalse(P(2).is_unit())
        self.assertFalse(x.is_unit())
        self.assertFalse(P(0).is_unit())
        self.assertEqual(P(-1).inverse(), -1)
        self.assertRaises(ZeroDivisionError, P(2).inverse)
        self.assertEqual((2*self.y + 4).monic(), self.y + 2)
        self.assertEqual(self.Q(Fraction(2, 3)).inverse(), Fraction(3, 2))

    def test_inplace(self):
        P, x = self.P, self.x
        a = x + 1
        b = a.mul_(a, a)
        self.assertIs(b, a)
        self.assertEqual(a, x**2 + 2*x + 1)
        self.assertIs(a.add_(a, -1), a)
        self.assertEqual(a, x**2 + 2*x)
        self.assertIs(a.zero_(), a)
        self.assertEqual(a, 0)

    def test_prime_field(self):
        F = GF(5)
        R = polyx.PolynomialRing(F, 'z')
        z = R.gen()
        self.assertEqual(R.__name__, 'GF(5)[z]')
        self.assertEqual((z + 1)**5, z**5 + 1)
        self.assertEqual(R([6, 7]), 2*z + 1)
        self.assertEqual(divmod(z**2, 2*z), (3*z, 0))
        a, b = z**2 + 1, z + 2
        g, s, t = R.gcdext(a, b)
        self.assertEqual(g, z + 2)
        self.assertEqual(s * a + t * b, g)
        self.assertEqual(R.gcd(3*z**2 + 3, (z + 2)**2), z + 2)
        self.assertEqual((z**2 + 1)(2), 0)
        self.assertEqual(R.from_terms('4z^2+1'), -z**2 + 1)

    def test_errors(self):
        P, Q, x = self.P, self.Q, self.x
        self.assertRaises(TypeError, P, 0.1)
        self.assertRaises(TypeError, operator.add, x, 0.1)
        self.assertRaises(TypeError, operator.mul, 0.1, x)
        self.assertRaises(TypeError, operator.add, x, Q.gen())
        self.assertRaises(TypeError, operator.lshift, x, 0.1)
        self.assertRaises(TypeError, operator.rshift, 0.1, x)
        self.assertRaises(TypeError, operator.pow, x, 0.5)
        self.assertRaises(ValueError, P.from_terms, 'x**2')
        self.assertRaises(ValueError, P.from_terms, 'x^-1')
        self.assertRaises(ValueError, P.from_terms, '1/2x')
        self.assertRaises(IndexError, x.__getitem__, -1)
        self.assertRaises(IndexError, x.__getitem__, 0.5)
        self.assertFalse(x == Q.gen())
        self.assertTrue(x != Q.gen())
        self.assertFalse(x == 0.1)


if __name__ == "__main__":
    unittest.main()
