"""This module supports arithmetic with Laurent polynomials over a base ring.

A Laurent polynomial is a polynomial in X and X^-1. Laurent polynomials are
represented by an ordinary polynomial from module polyx, stored in attribute
'poly', together with an integer shift stored in attribute 'mindeg'.
The Laurent polynomial a_0 X^m + a_1 X^(m+1) + ... + a_n X^(m+n) corresponds
to the polynomial a_0 + a_1 X + ... + a_n X^n with shift m.

The shift m is only a lower bound for the exponents of the nonzero terms.
In general, the constant term a_0 of the polynomial may be zero, and method
canonicalize() must be used to obtain a representation with a_0 nonzero.

Function LaurentPolynomialRing creates types implementing Laurent polynomial
rings, returning the type together with its generator X. The operators
+,-,*,**,/,//,%,<<,>>, and function divmod are overloaded, where / denotes
exact division and << and >> multiply and divide by powers of X, respectively.

Division, inversion, and (extended) GCDs all work by writing the polynomial
of a Laurent polynomial as X^v u, where u has a nonzero constant term. Since
X is a unit, it suffices to work with u, and to account for the exponents
separately.

Construction from an ordinary polynomial does not copy the polynomial. All
arithmetic operations return new Laurent polynomials. The methods with a
trailing underscore in their names, such as mul_(), may update a Laurent
polynomial in-place, but callers must always use their return values.
"""

import functools
import logging
from lpoly import polyx

X = polyx.X


def LaurentPolynomialRing(ring, var=X):
    """Create type for Laurent polynomials over given base ring, in variable var.

    Return the type together with its generator.
    """
    R = _laurent_type(ring, var)
    return R, R.gen()


@functools.cache
def _laurent_type(ring, var):
    P = polyx.PolynomialRing(ring, var)
    name = f'{ring}[{var},{var}^-1]'
    RingLaurentPolynomial = type(name, (LaurentPolynomial,), {'__slots__': ()})
    RingLaurentPolynomial.polyring = P
    RingLaurentPolynomial.base_ring = ring
    RingLaurentPolynomial.var = var
    RingLaurentPolynomial.symbols = (var,)
    RingLaurentPolynomial.characteristic = ring.characteristic
    globals()[name] = RingLaurentPolynomial  # NB: exploit unique name dynamic type
    logging.debug(f'Create Laurent polynomial ring {name}')
    return RingLaurentPolynomial


class LaurentPolynomial:
    """Laurent polynomials over a base ring.

    Invariant: the coefficient of X^k is the coefficient of X^(k - 'mindeg') in 'poly',
    and zero if k < 'mindeg'.
    """

    __slots__ = 'poly', 'mindeg'

    polyring = None
    base_ring = None
    var = X
    symbols = (X,)
    nvars = 1
    characteristic = None

    def __init__(self, value=0, mindeg=0, check=True):
        """Initialize Laurent polynomial to value times X^mindeg (zero polynomial, by default).

        An ordinary polynomial value is used as is, without copying.
        """
        if check:
            value, mindeg = self._intern(value, mindeg)
        self.poly = value
        self.mindeg = mindeg

    @classmethod
    def _intern(cls, a, mindeg):
        # convert a to polynomial and shift, if possible
        P = cls.polyring
        if isinstance(a, LaurentPolynomial):
            if isinstance(a, cls):
                return a.poly.copy(), a.mindeg + mindeg

            if a.var != cls.var:
                raise TypeError(f'Laurent polynomial in variable {cls.var} expected')

            return P(a.poly.value), a.mindeg + mindeg

        if isinstance(a, P):
            return a, mindeg

        if isinstance(a, str):
            a = cls.from_terms(a)
            return a.poly, a.mindeg + mindeg

        return P(a), mindeg

    @classmethod
    def _coerce(cls, a):
        if isinstance(a, LaurentPolynomial):
            if not isinstance(a, cls):
                raise TypeError(f'incompatible Laurent polynomial rings {type(a).__name__} '
                                f'and {cls.__name__}')

            return a

        if isinstance(a, str):
            return cls.from_terms(a)

        a = cls.polyring._coerce(a)
        if a is NotImplemented:
            return NotImplemented

        return cls(cls.polyring(a, check=False), 0, check=False)

    @classmethod
    def _elem(cls, a):
        a = cls._coerce(a)
        if a is NotImplemented:
            raise TypeError(f'Laurent polynomial of type {cls.__name__} expected')

        return a

    def _remove_gen(self):
        """Return v and u such that poly = X^v u and u has a nonzero constant term.

        Laurent polynomial must be nonzero.
        """
        P = self.polyring
        return P.remove(self.poly, P.gen())

    @staticmethod
    def _align(a, b):
        """Return polynomials of a and b aligned to their smallest shift m, and m."""
        m = min(a.mindeg, b.mindeg)
        return a.poly << (a.mindeg - m), b.poly << (b.mindeg - m), m

    @classmethod
    def zero(cls):
        """Zero Laurent polynomial."""
        return cls(cls.polyring.zero(), 0, check=False)

    @classmethod
    def one(cls):
        """Constant Laurent polynomial 1."""
        return cls(cls.polyring.one(), 0, check=False)

    @classmethod
    def gen(cls):
        """Generator X of the Laurent polynomial ring."""
        return cls(cls.polyring.gen(), 0, check=False)

    @classmethod
    def from_terms(cls, s, x=None):
        """Convert string s with sum of powers of x to a Laurent polynomial.

        Exponents may be negative, for example, 'x^-2+3x+5'.
        """
        ring = cls.base_ring
        d = polyx._parse_terms(s, x or cls.var, ring)
        if not d:
            return cls.zero()

        m = min(d)
        a = [ring.zero] * (max(d) - m + 1)
        for i, c in d.items():
            a[i - m] = c
        return cls(cls.polyring(a), m, check=False)

    def to_terms(self, x=None):
        """Convert Laurent polynomial to a string with sum of powers of x."""
        return polyx._format_terms(self.terms(), x or self.var)

    @classmethod
    def random_element(cls, degrees_range, bound=None, rng=None):
        """Random Laurent polynomial with exponents in given range of degrees.

        Coefficients are sampled using the base ring's random_element().
        """
        m = min(degrees_range)
        d = max(degrees_range) - m
        return cls(cls.polyring.random_element(d, bound=bound, rng=rng), m, check=False)

    def copy(self):
        """Copy of Laurent polynomial, not sharing any storage."""
        return type(self)(self.poly.copy(), self.mindeg, check=False)

    __copy__ = copy

    def __deepcopy__(self, memo):
        return self.copy()

    def terms(self):
        """Yield pairs (k, c) for the nonzero terms c X^k, by decreasing exponents k."""
        m = self.mindeg
        for i, c in self.poly.terms():
            yield i + m, c

    def map_coefficients(self, f):
        """Apply f to all coefficients (f(0) is assumed to be 0)."""
        return type(self)(self.poly.map_coefficients(f), self.mindeg, check=False)

    def degrees_range(self):
        """Range of exponents covered by the representation, from mindeg up to lead_degree()."""
        if not self.poly:
            raise ValueError('zero Laurent polynomial has no degrees')

        return range(self.mindeg, self.mindeg + self.poly.degree() + 1)

    def trail_degree(self):
        """Exponent of the term of lowest degree."""
        if not self.poly:
            raise ValueError('zero Laurent polynomial has no trailing degree')

        for i, c in enumerate(self.poly):
            if c:
                return self.mindeg + i

    def lead_degree(self):
        """Exponent of the term of highest degree."""
        if not self.poly:
            raise ValueError('zero Laurent polynomial has no leading degree')

        return self.mindeg + self.poly.degree()

    def coeff(self, i):
        """Coefficient of X^i."""
        if i < self.mindeg:
            return self.base_ring.zero

        return self.poly.coeff(i - self.mindeg)

    def __getitem__(self, key):
        if not isinstance(key, int):
            raise IndexError('use int for indexing Laurent polynomials')

        return self.coeff(key)

    def set_coefficient(self, i, c):
        """Set coefficient of X^i to c, in-place.

        The polynomial is shifted first if i is below mindeg.
        """
        diff = self.mindeg - i
        if diff > 0:
            self.mindeg = i
            self.poly = self.poly << diff
        self.poly = self.poly.set_coefficient(i - self.mindeg, c)
        return self

    def is_zero(self):
        return not self.poly

    def is_monomial(self, k):
        """Test if Laurent polynomial is equal to X^k."""
        t = list(self.poly.terms())
        return len(t) == 1 and t[0][0] + self.mindeg == k and self.base_ring.is_one(t[0][1])

    def is_one(self):
        return self.is_monomial(0)

    def is_gen(self):
        return self.is_monomial(1)

    def canonicalize(self):
        """Copy of Laurent polynomial with polynomial having a nonzero constant term.

        Thus, mindeg is equal to the trailing degree, for a nonzero Laurent polynomial.
        """
        cls = type(self)
        if not self.poly:
            return cls.zero()

        v, u = self._remove_gen()
        return cls(u, self.mindeg + v, check=False)

    def shift_left(self, n):
        """Multiply Laurent polynomial by X^n, for n>=0."""
        if n < 0:
            raise ValueError('negative shift count')

        f = self.canonicalize()  # NB: never shares storage with self
        f.mindeg += n
        return f

    def shift_right(self, n):
        """Divide Laurent polynomial by X^n, for n>=0."""
        if n < 0:
            raise ValueError('negative shift count')

        f = self.canonicalize()  # NB: never shares storage with self
        f.mindeg -= n
        return f

    def __lshift__(self, other):
        if not isinstance(other, int):
            return NotImplemented

        return self.shift_left(other)

    def __rlshift__(self, other):
        return NotImplemented

    def __rshift__(self, other):
        if not isinstance(other, int):
            return NotImplemented

        return self.shift_right(other)

    def __rrshift__(self, other):
        return NotImplemented

    def __call__(self, x):
        """Evaluate Laurent polynomial at given x, which must be invertible if mindeg<0."""
        y = self.poly(x)
        ring = self.base_ring
        b = ring._coerce(x)
        if b is NotImplemented:
            s = x**self.mindeg
        else:
            s = ring.power(b, self.mindeg)
        return s * y

    evaluate = __call__

    def __neg__(self):
        return type(self)(-self.poly, self.mindeg, check=False)

    def __pos__(self):
        return self.copy()

    def __add__(self, other):
        cls = type(self)
        other = cls._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        a, b, m = cls._align(self, other)
        return cls(a + b, m, check=False)

    __radd__ = __add__

    def __sub__(self, other):
        cls = type(self)
        other = cls._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        a, b, m = cls._align(self, other)
        return cls(a - b, m, check=False)

    def __rsub__(self, other):
        cls = type(self)
        other = cls._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        a, b, m = cls._align(other, self)
        return cls(a - b, m, check=False)

    def __mul__(self, other):
        cls = type(self)
        other = cls._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return cls(self.poly * other.poly, self.mindeg + other.mindeg, check=False)

    __rmul__ = __mul__

    def __pow__(self, other):
        """Exponentiation, for negative exponents only for c X^k with c a unit."""
        if not isinstance(other, int):
            return NotImplemented

        cls = type(self)
        if other >= 0:
            return cls(self.poly**other, self.mindeg * other, check=False)

        if not self.poly:
            raise ZeroDivisionError('zero Laurent polynomial raised to negative power')

        v, u = self._remove_gen()
        if u.degree() != 0:
            raise ValueError('negative exponent for Laurent polynomial with more than one term')

        ring = cls.base_ring
        c = u[0]
        if not ring.is_unit(c):
            raise ValueError('negative exponent for Laurent polynomial with non-unit coefficient')

        c = ring.power(c, other)  # NB: power of one is one, also for rings without inverses
        return cls(cls.polyring([c]), (self.mindeg + v) * other, check=False)

    def canonical_unit(self):
        """Canonical unit c X^k, where c is the canonical unit of the leading coefficient
        and k is the trailing degree.
        """
        cls = type(self)
        if not self.poly:
            return cls.one()

        v, _ = self._remove_gen()
        return cls(cls.polyring(self.poly.canonical_unit()), self.mindeg + v, check=False)

    def is_unit(self):
        """Test if Laurent polynomial is invertible, that is, of the form c X^k with c a unit."""
        if not self.poly:
            return False

        _, u = self._remove_gen()
        return u.is_unit()

    def inverse(self):
        """Inverse of Laurent polynomial, which must be a unit."""
        if not self.is_unit():
            raise ZeroDivisionError('inverse does not exist')

        v, u = self._remove_gen()
        return type(self)(u.inverse(), -self.mindeg - v, check=False)

    def reciprocal(self):
        """Multiplicative inverse."""
        return self.inverse()

    @classmethod
    def divexact(cls, a, b, check=True):
        """Quotient of Laurent polynomial a divided by Laurent polynomial b, assuming b divides a.

        If check is set, ValueError is raised if the division is not exact.
        """
        a = cls._elem(a)
        b = cls._elem(b)
        if not b:
            raise ZeroDivisionError('division by zero Laurent polynomial')

        vb, ub = b._remove_gen()
        f = cls.polyring.divexact(a.poly, ub, check=check)
        return cls(f, a.mindeg - b.mindeg - vb, check=False)

    @classmethod
    def divides(cls, a, b):
        """Test if Laurent polynomial b divides Laurent polynomial a.

        Return flag and quotient, where the quotient is meaningless if the flag is False.
        """
        a = cls._elem(a)
        b = cls._elem(b)
        if not b:
            raise ZeroDivisionError('division by zero Laurent polynomial')

        vb, ub = b._remove_gen()
        ok, f = cls.polyring.divides(a.poly, ub)
        return ok, cls(f, a.mindeg - b.mindeg - vb, check=False)

    @classmethod
    def divmod(cls, a, b):
        """Divide Laurent polynomial a by nonzero Laurent polynomial b with remainder.

        Both a and b are written as X^k u with u a polynomial with nonzero constant term,
        and the u parts are divided with remainder. The remainder keeps the trailing
        degree of a. For a=0, the quotient is 1 and the remainder is 0.
        """
        a = cls._elem(a)
        b = cls._elem(b)
        if not b:
            raise ZeroDivisionError('division by zero Laurent polynomial')

        if not a:
            return cls.one(), a.copy()

        va, ua = a._remove_gen()
        vb, ub = b._remove_gen()
        q, r = cls.polyring.divmod(ua, ub)
        m = a.mindeg + va
        return cls(q, m - b.mindeg - vb, check=False), cls(r, m, check=False)

    divrem = divmod

    def __divmod__(self, other):
        cls = type(self)
        other = cls._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return cls.divmod(self, other)

    def __rdivmod__(self, other):
        cls = type(self)
        other = cls._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return cls.divmod(other, self)

    def __floordiv__(self, other):
        cls = type(self)
        other = cls._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return cls.divmod(self, other)[0]

    def __rfloordiv__(self, other):
        cls = type(self)
        other = cls._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return cls.divmod(other, self)[0]

    def __mod__(self, other):
        cls = type(self)
        other = cls._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return cls.divmod(self, other)[1]

    def __rmod__(self, other):
        cls = type(self)
        other = cls._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return cls.divmod(other, self)[1]

    def __truediv__(self, other):
        cls = type(self)
        other = cls._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return cls.divexact(self, other)

    def __rtruediv__(self, other):
        cls = type(self)
        other = cls._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return cls.divexact(other, self)

    @classmethod
    def gcd(cls, a, b):
        """Greatest common divisor of Laurent polynomials a and b.

        The gcd has a polynomial with nonzero constant term normalized by its canonical unit.
        """
        a = cls._elem(a)
        b = cls._elem(b)
        if not a:
            return cls.divexact(b, b.canonical_unit())

        if not b:
            return cls.divexact(a, a.canonical_unit())

        _, ua = a._remove_gen()
        _, ub = b._remove_gen()
        return cls(cls.polyring.gcd(ua, ub), 0, check=False)

    @classmethod
    def gcdext(cls, a, b):
        """Extended GCD for Laurent polynomials a and b, over a coefficient field.

        Return g, s, t satisfying s a + t b = g = gcd(a,b).
        """
        a = cls._elem(a)
        b = cls._elem(b)
        if not a:
            if not b:
                return cls.zero(), cls.zero(), cls.zero()

            u = b.canonical_unit()
            return cls.divexact(b, u), cls.zero(), u.inverse()

        if not b:
            u = a.canonical_unit()
            return cls.divexact(a, u), u.inverse(), cls.zero()

        va, ua = a._remove_gen()
        vb, ub = b._remove_gen()
        g, s, t = cls.polyring.gcdext(ua, ub)
        return (cls(g, 0, check=False),
                cls(s, -a.mindeg - va, check=False),
                cls(t, -b.mindeg - vb, check=False))

    @classmethod
    def lcm(cls, a, b):
        """Least common multiple of Laurent polynomials a and b.

        The lcm is taken of the polynomials with all factors X removed, normalized by its
        canonical unit, and has shift 0.
        """
        a = cls._elem(a)
        b = cls._elem(b)
        if not a or not b:
            return cls.zero()

        _, ua = a._remove_gen()
        _, ub = b._remove_gen()
        return cls(cls.polyring.lcm(ua, ub), 0, check=False)

    def zero_(self):
        """Set Laurent polynomial to zero, reusing its storage if possible."""
        d = self.poly.zero_()
        if d is not self.poly:
            return type(self)(d, 0, check=False)

        self.mindeg = 0
        return self

    def mul_(self, a, b):
        """Set Laurent polynomial to a * b, reusing its storage if possible."""
        cls = type(self)
        a = cls._elem(a)
        b = cls._elem(b)
        m = a.mindeg + b.mindeg
        d = self.poly.mul_(a.poly, b.poly)
        if d is not self.poly:
            return cls(d, m, check=False)

        self.mindeg = m
        return self

    def add_(self, a, b):
        """Set Laurent polynomial to a + b, reusing its storage if possible."""
        cls = type(self)
        a = cls._elem(a)
        b = cls._elem(b)
        a, b, m = cls._align(a, b)
        d = self.poly.add_(a, b)
        if d is not self.poly:
            return cls(d, m, check=False)

        self.mindeg = m
        return self

    def addeq_(self, a):
        """Add a to Laurent polynomial, reusing its storage if possible."""
        return self.add_(self, a)

    def __iadd__(self, other):
        """In-place addition."""
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return self.addeq_(other)

    def __isub__(self, other):
        """In-place subtraction."""
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return self.addeq_(-other)

    def __imul__(self, other):
        """In-place multiplication."""
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return self.mul_(self, other)

    def __repr__(self):
        return self.to_terms()

    def __eq__(self, other):
        """Equality test, independent of the shifts used in the representations."""
        if isinstance(other, LaurentPolynomial) and not isinstance(other, type(self)):
            return False

        if isinstance(other, polyx.Polynomial) and (other.ring is not self.base_ring or
                                                    other.var != self.var):
            return False

        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        a, b, _ = self._align(self, other)
        return a == b

    def __ne__(self, other):
        """Negated equality test."""
        eq = self.__eq__(other)
        if eq is NotImplemented:
            return NotImplemented

        return not eq

    def __hash__(self):
        """Make Laurent polynomials hashable, consistent with equality."""
        f = self.canonicalize()
        return hash((type(self).__name__, f.mindeg, tuple(f.poly)))

    def __bool__(self):
        """Truth value testing.

        Return False if this Laurent polynomial is zero, True otherwise.
        """
        return bool(self.poly)
