"""This module supports the coefficient rings for (Laurent) polynomials.

Three kinds of base rings are provided: the ring of integers ZZ, with Python ints
as elements, the field of rationals QQ, with fractions.Fraction as elements, and
prime fields created by function GF, with instances of a dynamically created type
as elements, using overloaded operators +,-,*,/ and ** for the field arithmetic.

A base ring is an object describing the ring as a mathematical structure.
Its methods implement the operations needed by the polynomial arithmetic, such
as unit tests, inversion of units, exact division, canonical units (to select
one representative per class of associates), and gcds.
"""

import math
import random
import functools
import fractions
from lpoly import gmpy as gmpy2


class BaseRing:
    """Abstract base class for coefficient rings.

    Subclasses set the zero and one elements and implement coercion of values.
    """

    name = None
    characteristic = None
    is_field = None
    zero = None
    one = None

    def __repr__(self):
        return self.name

    def __call__(self, value=0):
        """Coerce value to an element of this ring."""
        a = self._coerce(value)
        if a is NotImplemented:
            raise TypeError(f'element of {self.name} expected, got {type(value).__name__}')

        return a

    def _coerce(self, a):
        raise NotImplementedError('abstract method')

    def contains(self, a):
        """Test if a is an element of this ring (in its native representation)."""
        raise NotImplementedError('abstract method')

    def from_str(self, s):
        """Convert string s to an element of this ring."""
        raise NotImplementedError('abstract method')

    def is_zero(self, a):
        return not a

    def is_one(self, a):
        return a == self.one

    def is_unit(self, a):
        """Test if a is invertible."""
        raise NotImplementedError('abstract method')

    def inverse(self, a):
        """Multiplicative inverse of unit a."""
        raise NotImplementedError('abstract method')

    def power(self, a, n):
        """Return a to the power n, where n<0 requires a to be a unit.

        Powers of one are one, for all n.
        """
        if n < 0:
            if self.is_one(a):
                return a

            a = self.inverse(a)
            n = -n
        return a**n

    def divides(self, a, b):
        """Test if b divides a, returning flag and quotient (meaningless if flag is False)."""
        raise NotImplementedError('abstract method')

    def divexact(self, a, b):
        """Quotient a/b, assuming b divides a."""
        if not b:
            raise ZeroDivisionError('division by zero')

        ok, q = self.divides(a, b)
        if not ok:
            raise ValueError('division not exact')

        return q

    def canonical_unit(self, a):
        """Unit u such that a/u is the canonical representative of the associates of a.

        The canonical unit of zero is one.
        """
        raise NotImplementedError('abstract method')

    def gcd(self, a, b):
        """Greatest common divisor of a and b, normalized by its canonical unit."""
        raise NotImplementedError('abstract method')

    def random_element(self, rng=None, bound=None):
        """Random element of this ring, bounded by bound (if applicable)."""
        raise NotImplementedError('abstract method')


class IntegerRing(BaseRing):
    """Ring of integers, using Python ints."""

    name = 'ZZ'
    characteristic = 0
    is_field = False
    zero = 0
    one = 1

    def _coerce(self, a):
        if isinstance(a, int):
            return int(a)

        if isinstance(a, fractions.Fraction) and a.denominator == 1:
            return a.numerator

        return NotImplemented

    def contains(self, a):
        return isinstance(a, int)

    def from_str(self, s):
        return int(s)

    def is_unit(self, a):
        return a in (1, -1)

    def inverse(self, a):
        if a not in (1, -1):
            raise ZeroDivisionError('inverse does not exist')

        return a

    def divides(self, a, b):
        if not b:
            return not a, 0

        q, r = divmod(a, b)
        return r == 0, q

    def canonical_unit(self, a):
        return -1 if a < 0 else 1

    def gcd(self, a, b):
        return math.gcd(a, b)

    def random_element(self, rng=None, bound=None):
        rng = rng or random
        bound = 100 if bound is None else bound
        return rng.randint(-bound, bound)


class RationalField(BaseRing):
    """Field of rational numbers, using fractions.Fraction."""

    name = 'QQ'
    characteristic = 0
    is_field = True
    zero = fractions.Fraction(0)
    one = fractions.Fraction(1)

    def _coerce(self, a):
        if isinstance(a, fractions.Fraction):
            return a

        if isinstance(a, int):
            return fractions.Fraction(a)

        return NotImplemented

    def contains(self, a):
        return isinstance(a, fractions.Fraction)

    def from_str(self, s):
        return fractions.Fraction(s)

    def is_unit(self, a):
        return a != 0

    def inverse(self, a):
        if a == 0:
            raise ZeroDivisionError('inverse does not exist')

        return 1 / a

    def divides(self, a, b):
        if not b:
            return not a, self.zero

        return True, a / b

    def canonical_unit(self, a):
        return a if a else self.one

    def gcd(self, a, b):
        return self.one if a or b else self.zero

    def random_element(self, rng=None, bound=None):
        rng = rng or random
        bound = 100 if bound is None else bound
        return fractions.Fraction(rng.randint(-bound, bound), rng.randint(1, max(1, bound)))


class PrimeFieldElement:
    """Common base class for prime field elements.

    Invariant: attribute 'value' is reduced modulo the prime modulus.
    """

    __slots__ = 'value'

    modulus = None
    field = None

    def __init__(self, value=0):
        if not isinstance(value, int):
            raise TypeError(f'int required, got {type(value).__name__}')

        self.value = value % self.modulus

    @classmethod
    def _coerce(cls, a):
        if isinstance(a, cls):
            return a.value

        if isinstance(a, int):
            return a

        return NotImplemented

    def __int__(self):
        return self.value

    def __repr__(self):
        return f'{self.value}'

    def __add__(self, other):
        """Addition."""
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return type(self)(self.value + other)

    __radd__ = __add__

    def __sub__(self, other):
        """Subtraction."""
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return type(self)(self.value - other)

    def __rsub__(self, other):
        """Subtraction (with reflected arguments)."""
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return type(self)(other - self.value)

    def __neg__(self):
        """Negation."""
        return type(self)(-self.value)

    def __pos__(self):
        """Unary +."""
        return type(self)(self.value)

    def __mul__(self, other):
        """Multiplication."""
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return type(self)(self.value * other)

    __rmul__ = __mul__

    def __truediv__(self, other):
        """Division."""
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return type(self)(self.value * self._reciprocal(other))

    def __rtruediv__(self, other):
        """Division (with reflected arguments)."""
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return type(self)(other * self._reciprocal(self.value))

    def __pow__(self, other):
        """Exponentiation, for negative exponents only if nonzero."""
        if not isinstance(other, int):
            return NotImplemented

        if other < 0 and not self.value:
            raise ZeroDivisionError('inverse does not exist')

        return type(self)(int(gmpy2.powmod(self.value, other, self.modulus)))

    @classmethod
    def _reciprocal(cls, a):
        if not a % cls.modulus:
            raise ZeroDivisionError('inverse does not exist')

        return int(gmpy2.invert(a, cls.modulus))

    def reciprocal(self):
        """Multiplicative inverse."""
        return type(self)(self._reciprocal(self.value))

    def __eq__(self, other):
        """Equality test."""
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return self.value == other % self.modulus

    def __hash__(self):
        """Make prime field elements hashable (e.g., for caching)."""
        return hash((type(self).__name__, self.value))

    def __bool__(self):
        """Truth value testing.

        Return False if this field element is zero, True otherwise.
        """
        return bool(self.value)


class PrimeField(BaseRing):
    """Prime field GF(p), with elements of type element_type."""

    is_field = True

    def __init__(self, element_type):
        self.element_type = element_type
        p = element_type.modulus
        self.name = f'GF({p})'
        self.characteristic = p
        self.order = p
        self.zero = element_type(0)
        self.one = element_type(1)

    def _coerce(self, a):
        if isinstance(a, self.element_type):
            return a

        if isinstance(a, int):
            return self.element_type(a)

        return NotImplemented

    def contains(self, a):
        return isinstance(a, self.element_type)

    def from_str(self, s):
        return self.element_type(int(s))

    def is_unit(self, a):
        return bool(a)

    def inverse(self, a):
        return a.reciprocal()

    def divides(self, a, b):
        if not b:
            return not a, self.zero

        return True, a / b

    def canonical_unit(self, a):
        return a if a else self.one

    def gcd(self, a, b):
        return self.one if a or b else self.zero

    def random_element(self, rng=None, bound=None):
        rng = rng or random
        return self.element_type(rng.randrange(self.order))


ZZ = IntegerRing()
QQ = RationalField()


@functools.cache
def GF(p):
    """Create prime field of order p."""
    if not gmpy2.is_prime(p):
        raise ValueError('modulus is not a prime')

    GFp = type(f'GF({p})', (PrimeFieldElement,), {'__slots__': ()})
    GFp.__doc__ = 'Class of prime field elements.'
    GFp.modulus = p
    globals()[f'GF({p})'] = GFp  # NB: exploit unique name dynamic field element type
    field = PrimeField(GFp)
    GFp.field = field
    return field
