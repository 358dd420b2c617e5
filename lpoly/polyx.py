"""This module supports arithmetic with polynomials over a base ring.

Polynomials are represented as coefficient lists.
The polynomial a_0 + a_1 X + ... + a_n X^n corresponds
to the list [a_0, a_1, ... , a_n] of base ring elements.
Leading coefficient a_n is nonzero, using [] for the zero polynomial.

The operators +,-,*,<<,>>,/,//,%, and function divmod are overloaded.
Plus some SageMath-style functionality, for instance, to access
coefficients using Python indexing.

GCD, extended GCD, LCM, exact division, removal of factors, and powers
are all supported. Over the integers, GCDs are computed using primitive
pseudo-remainder sequences; extended GCDs require a coefficient field.

Polynomials behave as values, except for a few methods with a trailing
underscore in their names, such as mul_(), which update a polynomial in-place.
"""

import re
import random
import functools
import logging

X = 'x'  # symbol for indeterminate in polynomials


def PolynomialRing(ring, var=X):
    """Create type for polynomials over given base ring, in variable var."""
    return _polynomial_type(ring, var)


@functools.cache
def _polynomial_type(ring, var):
    name = f'{ring}[{var}]'
    RingPolynomial = type(name, (Polynomial,), {'__slots__': ()})
    RingPolynomial.ring = ring
    RingPolynomial.var = var
    globals()[name] = RingPolynomial  # NB: exploit unique name dynamic Polynomial type
    logging.debug(f'Create polynomial ring {name}')
    return RingPolynomial


def _parse_terms(s, x, ring):
    """Parse string s with sum of terms c x^i into a dict mapping exponents i to coefficients c.

    Negative exponents are accepted, leaving it to the caller to reject them.
    """
    d = {}
    s = ''.join(s.split())  # remove all whitespace
    s = re.sub(r'(?<!\^)-', '+-', s)  # NB: keep minus signs of exponents
    for term in s.split('+'):
        if term == '':
            continue

        try:
            if term.find(x) == -1:
                c = term
                i = 0
            elif term.endswith(x):
                c = term[:-len(x)]
                i = 1
            else:
                c, i = term.split(f'{x}^')
                i = int(i)
            if c.endswith('*'):
                c = c[:-1]
            c = {'': '1', '-': '-1'}.get(c, c)
            c = ring.from_str(c)
        except Exception as exc:
            raise ValueError('ill formatted polynomial') from exc

        d[i] = d.get(i, ring.zero) + c
    return d


def _format_terms(terms, x):
    """Convert (exponent, coefficient) pairs, by decreasing exponents, to a string."""
    s = ''
    for i, c in terms:
        c = f'{c}'
        if i == 0:
            s += f'+{c}'  # x^0 = 1
            continue

        c = {'1': '', '-1': '-'}.get(c, c)
        if i == 1:
            s += f'+{c}{x}'  # x^1 = x
        else:
            s += f'+{c}{x}^{i}'
    if s == '':
        return '0'

    return s[1:].replace('+-', '-')


class Polynomial:
    """Polynomials over a base ring represented as lists of base ring elements.

    Invariant: last element of attribute 'value' is nonzero (if 'value' nonempty).
    """

    __slots__ = 'value'

    ring = None
    var = X

    def __init__(self, value=0, check=True):
        """Initialize polynomial to given value (zero polynomial, by default)."""
        if check:
            value = list(self._intern(value))  # NB: never share storage with value
        self.value = value

    @classmethod
    def _intern(cls, a):
        # convert a to cls internal format, if possible
        a = cls._coerce(a)
        if a is NotImplemented:
            raise TypeError(f'polynomial over {cls.ring} expected')

        return a

    @classmethod
    def _coerce(cls, a):
        if isinstance(a, Polynomial):
            if a.ring is not cls.ring or a.var != cls.var:
                raise TypeError(f'polynomial over {cls.ring} in variable {cls.var} expected, '
                                f'got {type(a).__name__}')

            return a.value

        if isinstance(a, str):
            return cls._from_terms(a)

        if isinstance(a, (list, tuple)):
            return cls._from_list(a)

        c = cls.ring._coerce(a)
        if c is NotImplemented:
            return NotImplemented

        return [c] if c else []

    @classmethod
    def _from_list(cls, a):
        ring = cls.ring
        a = [ring(a_i) for a_i in a]
        cls._strip(a)
        return a

    @staticmethod
    def _strip(a):
        while a and not a[-1]:
            a.pop()
        return a

    @classmethod
    def _from_terms(cls, s, x=None):
        d = _parse_terms(s, x or cls.var, cls.ring)
        if any(i < 0 for i in d):
            raise ValueError('negative exponent in polynomial')

        a = [cls.ring.zero] * (max(d.keys(), default=-1) + 1)
        for i, c in d.items():
            a[i] = c
        return cls._strip(a)

    @classmethod
    def from_terms(cls, s, x=None):
        """Convert string s with sum of powers of x to a polynomial."""
        return cls(cls._from_terms(s, x), check=False)

    @classmethod
    def zero(cls):
        """Zero polynomial."""
        return cls([], check=False)

    @classmethod
    def one(cls):
        """Constant polynomial 1."""
        return cls([cls.ring.one], check=False)

    @classmethod
    def gen(cls):
        """Generator X of the polynomial ring."""
        return cls([cls.ring.zero, cls.ring.one], check=False)

    @classmethod
    def random_element(cls, degree, bound=None, rng=None):
        """Random polynomial of degree at most degree.

        Coefficients are sampled using the base ring's random_element().
        """
        a = [cls.ring.random_element(rng=rng, bound=bound) for _ in range(degree + 1)]
        return cls(cls._strip(a), check=False)

    def __getitem__(self, key):
        if not isinstance(key, int):
            raise IndexError('use int for indexing polynomials')

        if key < 0:
            raise IndexError('negative index not allowed for polynomials')

        return self._getitem(key)

    def _getitem(self, key):
        try:
            v = self.value[key]
        except IndexError:
            v = self.ring.zero
        return v

    def coeff(self, key):
        """Coefficient of X^key, which is zero for negative key."""
        if key < 0:
            return self.ring.zero

        return self._getitem(key)

    def set_coefficient(self, key, c):
        """Set coefficient of X^key to c, in-place."""
        if key < 0:
            raise IndexError('negative index not allowed for polynomials')

        c = self.ring(c)
        a = self.value
        if key >= len(a):
            if not c:
                return self

            a.extend([self.ring.zero] * (key + 1 - len(a)))
        a[key] = c
        self._strip(a)
        return self

    def __iter__(self):
        yield from self.value

    def __len__(self):
        """Number of coefficients, up to and including the leading coefficient."""
        return len(self.value)

    def terms(self):
        """Yield pairs (i, c) for the nonzero terms c X^i, by decreasing exponents i."""
        a = self.value
        for i in range(len(a) - 1, -1, -1):
            if a[i]:
                yield i, a[i]

    def __call__(self, x):
        """Evaluate polynomial at given x."""
        y = self.ring.zero
        for c in reversed(self.value):
            y = y * x + c
        return y

    evaluate = __call__

    def map_coefficients(self, f):
        """Apply f to all coefficients (f(0) is assumed to be 0)."""
        cls = type(self)
        return cls([f(c) for c in self.value])

    def copy(self):
        """Copy of polynomial, not sharing any storage."""
        return type(self)(self.value[:], check=False)

    __copy__ = copy

    def __deepcopy__(self, memo):
        return self.copy()

    @staticmethod
    def _deg(a):
        return len(a) - 1

    @classmethod
    def deg(cls, a):
        """Degree of polynomial a (-1 if a is zero polynomial)."""
        a = cls._intern(a)
        return cls._deg(a)

    def degree(self):
        """Degree of polynomial (-1 for zero polynomial)."""
        return self._deg(self.value)

    @classmethod
    def _normalize(cls, a):
        # divide a by the canonical unit of its leading coefficient
        if not a:
            return a

        ring = cls.ring
        u = ring.canonical_unit(a[-1])
        if ring.is_one(u):
            return a

        u = ring.inverse(u)
        return [a_i * u for a_i in a]

    @classmethod
    def _neg(cls, a):
        return [-a_i for a_i in a]

    @classmethod
    def _add(cls, a, b):
        if len(a) < len(b):
            a, b = b, a
        # len(a) >= len(b)
        c = a[:]
        for i, b_i in enumerate(b):
            c[i] += b_i
        return cls._strip(c)

    @classmethod
    def _sub(cls, a, b):
        c = a + [cls.ring.zero] * (len(b) - len(a))
        for i, b_i in enumerate(b):
            c[i] -= b_i
        return cls._strip(c)

    @classmethod
    def _mul(cls, a, b):
        if len(a) > len(b):
            a, b = b, a
        # len(a) <= len(b)
        if not a:
            return []

        zero = cls.ring.zero
        c = [zero] * (len(a) + len(b) - 1)
        for i, a_i in enumerate(a):
            if a_i:
                for j, b_j in enumerate(b):
                    c[i + j] += a_i * b_j
        return cls._strip(c)

    @classmethod
    def _scale(cls, a, c):
        return cls._strip([a_i * c for a_i in a])

    @classmethod
    def _lshift(cls, a, n):
        if n < 0:
            raise ValueError('negative shift count')

        if not a:
            return []

        return [cls.ring.zero] * n + a

    @classmethod
    def _rshift(cls, a, n):
        if n < 0:
            raise ValueError('negative shift count')

        return a[n:]

    @classmethod
    def _divmod(cls, a, b):
        if b == []:
            raise ZeroDivisionError('division by zero polynomial')

        m = len(a)
        n = len(b)
        if m < n:
            return [], a[:]

        ring = cls.ring
        if not ring.is_unit(b[-1]):
            raise ValueError('leading coefficient of divisor not invertible')

        b1 = ring.inverse(b[-1])
        q, r = [ring.zero] * (m - n + 1), a[:]
        for i in range(m - n, -1, -1):
            if len(r) >= i + n:
                q[i] = q_i = r[-1] * b1
                for j in range(n):
                    r[i + j] -= q_i * b[j]
                cls._strip(r)
        return q, r

    @classmethod
    def _mod(cls, a, b):
        return cls._divmod(a, b)[1]

    @classmethod
    def _divides(cls, a, b):
        # exact division of a by b using exact division of coefficients
        if b == []:
            raise ZeroDivisionError('division by zero polynomial')

        m = len(a)
        n = len(b)
        if m < n:
            return not a, []

        ring = cls.ring
        b1 = b[-1]
        q, r = [ring.zero] * (m - n + 1), a[:]
        for i in range(m - n, -1, -1):
            if len(r) >= i + n:
                ok, q_i = ring.divides(r[-1], b1)
                if not ok:
                    return False, cls._strip(q)

                q[i] = q_i
                for j in range(n):
                    r[i + j] -= q_i * b[j]
                cls._strip(r)
        return not r, cls._strip(q)

    @classmethod
    def _divexact(cls, a, b, check=True):
        ok, q = cls._divides(a, b)
        if check and not ok:
            raise ValueError('division not exact')

        return q

    @classmethod
    def _content(cls, a):
        ring = cls.ring
        g = ring.zero
        for a_i in a:
            g = ring.gcd(g, a_i)
            if ring.is_one(g):
                break
        return g

    @classmethod
    def _primitive(cls, a):
        if not a:
            return a

        g = cls._content(a)
        ring = cls.ring
        return [ring.divexact(a_i, g) for a_i in a]

    @classmethod
    def _prem(cls, a, b):
        # pseudo-remainder of a and nonzero b, avoiding divisions in the base ring
        n = len(b)
        b1 = b[-1]
        r = a[:]
        while len(r) >= n:
            d = len(r) - n
            r_1 = r[-1]
            r = cls._scale(r, b1)
            for j in range(n):
                r[d + j] -= r_1 * b[j]
            cls._strip(r)
        return r

    @classmethod
    def _gcd(cls, a, b):
        if cls.ring.is_field:
            while b:
                a, b = b, cls._mod(a, b)
            return cls._normalize(a)

        if not a or not b:
            return cls._normalize(a or b)

        g = cls.ring.gcd(cls._content(a), cls._content(b))
        a, b = cls._primitive(a), cls._primitive(b)
        while b:
            a, b = b, cls._primitive(cls._prem(a, b))
        return cls._normalize(cls._scale(a, g))

    @classmethod
    def _gcdext(cls, a, b):
        ring = cls.ring
        if not ring.is_field:
            raise ValueError(f'extended gcd requires a coefficient field, not {ring}')

        s, s1 = [ring.one], []
        t, t1 = [], [ring.one]
        while b:
            a, (q, b) = b, cls._divmod(a, b)
            s, s1 = s1, cls._sub(s, cls._mul(q, s1))
            t, t1 = t1, cls._sub(t, cls._mul(q, t1))
        if a:
            a1 = ring.inverse(a[-1])
            a = cls._scale(a, a1)
            s = cls._scale(s, a1)
            t = cls._scale(t, a1)
        return a, s, t

    @classmethod
    def _lcm(cls, a, b):
        if not a or not b:
            return []

        return cls._normalize(cls._divexact(cls._mul(a, b), cls._gcd(a, b)))

    @classmethod
    def _canonical_unit(cls, a):
        return cls.ring.canonical_unit(a[-1]) if a else cls.ring.one

    @classmethod
    def _is_unit(cls, a):
        return len(a) == 1 and cls.ring.is_unit(a[0])

    @classmethod
    def _invert(cls, a):
        if not cls._is_unit(a):
            raise ZeroDivisionError('inverse does not exist')

        return [cls.ring.inverse(a[0])]

    @classmethod
    def _remove(cls, a, b):
        # multiplicity v of b in a, and a divided by b^v
        if not a:
            raise ValueError('multiplicity in zero polynomial not defined')

        if cls._is_unit(b) or not b:
            raise ValueError('multiplicity of unit or zero polynomial not defined')

        if len(b) == 2 and not b[0] and cls.ring.is_one(b[1]):
            v = 0
            while not a[v]:
                v += 1
            return v, a[v:]

        v = 0
        while True:
            ok, q = cls._divides(a, b)
            if not ok:
                return v, a[:]

            a = q
            v += 1

    @classmethod
    def _pow(cls, a, n):
        if n < 0:
            a = cls._invert(a)
            n = -n
        if n == 0:
            return [cls.ring.one]

        b = a[:]
        for i in range(n.bit_length()-2, -1, -1):
            b = cls._mul(b, b)
            if (n >> i) & 1:
                b = cls._mul(b, a)
        return b

    def to_terms(self, x=None):
        """Convert polynomial to a string with sum of powers of x."""
        return _format_terms(self.terms(), x or self.var)

    def monic(self):
        """Monic version of polynomial, over a field; zero polynomial remains unchanged."""
        cls = type(self)
        a = self.value
        if a and not cls.ring.is_one(a[-1]):
            a = cls._scale(a, cls.ring.inverse(a[-1]))
        return cls(a[:], check=False)

    def canonical_unit(self):
        """Canonical unit of polynomial (canonical unit of its leading coefficient)."""
        return self._canonical_unit(self.value)

    def is_unit(self):
        """Test if polynomial is invertible."""
        return self._is_unit(self.value)

    def inverse(self):
        """Inverse of polynomial, which must be a unit."""
        cls = type(self)
        return cls(cls._invert(self.value), check=False)

    def __neg__(self):
        cls = type(self)
        return cls(cls._neg(self.value), check=False)

    def __pos__(self):
        return self.copy()

    @classmethod
    def add(cls, a, b):
        """Add polynomials a and b."""
        a = cls._intern(a)
        b = cls._intern(b)
        return cls(cls._add(a, b), check=False)

    def __add__(self, other):
        cls = type(self)
        other = cls._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return cls(cls._add(self.value, other), check=False)

    __radd__ = __add__

    @classmethod
    def sub(cls, a, b):
        """Subtract polynomials a and b."""
        a = cls._intern(a)
        b = cls._intern(b)
        return cls(cls._sub(a, b), check=False)

    def __sub__(self, other):
        cls = type(self)
        other = cls._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return cls(cls._sub(self.value, other), check=False)

    def __rsub__(self, other):
        cls = type(self)
        other = cls._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return cls(cls._sub(other, self.value), check=False)

    @classmethod
    def mul(cls, a, b):
        """Multiply polynomials a and b."""
        a = cls._intern(a)
        b = cls._intern(b)
        return cls(cls._mul(a, b), check=False)

    def __mul__(self, other):
        cls = type(self)
        other = cls._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return cls(cls._mul(self.value, other), check=False)

    __rmul__ = __mul__

    def zero_(self):
        """Set polynomial to zero, in-place."""
        self.value = []
        return self

    def add_(self, a, b):
        """Set polynomial to a + b, in-place."""
        cls = type(self)
        self.value = cls._add(cls._intern(a), cls._intern(b))
        return self

    def mul_(self, a, b):
        """Set polynomial to a * b, in-place."""
        cls = type(self)
        self.value = cls._mul(cls._intern(a), cls._intern(b))
        return self

    @classmethod
    def lshift(cls, a, n):
        """Multiply polynomial a by X^n."""
        a = cls._intern(a)
        return cls(cls._lshift(a, n), check=False)

    def __lshift__(self, other):
        if not isinstance(other, int):
            return NotImplemented

        cls = type(self)
        return cls(cls._lshift(self.value, other), check=False)

    def __rlshift__(self, other):
        return NotImplemented

    @classmethod
    def rshift(cls, a, n):
        """Quotient for polynomial a divided by X^n, assuming a is multiple of X^n."""
        a = cls._intern(a)
        return cls(cls._rshift(a, n), check=False)

    def __rshift__(self, other):
        if not isinstance(other, int):
            return NotImplemented

        cls = type(self)
        return cls(cls._rshift(self.value, other), check=False)

    def __rrshift__(self, other):
        return NotImplemented

    def __floordiv__(self, other):
        cls = type(self)
        other = cls._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return cls(cls._divmod(self.value, other)[0], check=False)

    def __rfloordiv__(self, other):
        cls = type(self)
        other = cls._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return cls(cls._divmod(other, self.value)[0], check=False)

    @classmethod
    def mod(cls, a, b):
        """Reduce polynomial a modulo polynomial b, for nonzero b."""
        a = cls._intern(a)
        b = cls._intern(b)
        return cls(cls._mod(a, b), check=False)

    def __mod__(self, other):
        cls = type(self)
        other = cls._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return cls(cls._mod(self.value, other), check=False)

    def __rmod__(self, other):
        cls = type(self)
        other = cls._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return cls(cls._mod(other, self.value), check=False)

    @classmethod
    def divmod(cls, a, b):
        """Divide polynomial a by polynomial b with remainder, for nonzero b.

        The leading coefficient of b must be a unit.
        """
        a = cls._intern(a)
        b = cls._intern(b)
        q, r = cls._divmod(a, b)
        return cls(q, check=False), cls(r, check=False)

    def __divmod__(self, other):
        cls = type(self)
        other = cls._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        q, r = cls._divmod(self.value, other)
        return cls(q, check=False), cls(r, check=False)

    def __rdivmod__(self, other):
        cls = type(self)
        other = cls._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        q, r = cls._divmod(other, self.value)
        return cls(q, check=False), cls(r, check=False)

    @classmethod
    def divexact(cls, a, b, check=True):
        """Quotient of polynomial a divided by polynomial b, assuming b divides a.

        If check is set, ValueError is raised if the division is not exact.
        """
        a = cls._intern(a)
        b = cls._intern(b)
        return cls(cls._divexact(a, b, check=check), check=False)

    def __truediv__(self, other):
        cls = type(self)
        other = cls._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return cls(cls._divexact(self.value, other), check=False)

    def __rtruediv__(self, other):
        cls = type(self)
        other = cls._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return cls(cls._divexact(other, self.value), check=False)

    @classmethod
    def divides(cls, a, b):
        """Test if polynomial b divides polynomial a.

        Return flag and quotient, where the quotient is meaningless if the flag is False.
        """
        a = cls._intern(a)
        b = cls._intern(b)
        ok, q = cls._divides(a, b)
        return ok, cls(q, check=False)

    def __pow__(self, other):
        if not isinstance(other, int):
            return NotImplemented

        cls = type(self)
        return cls(cls._pow(self.value, other), check=False)

    @classmethod
    def gcd(cls, a, b):
        """Greatest common divisor of polynomials a and b, normalized by its canonical unit."""
        a = cls._intern(a)
        b = cls._intern(b)
        return cls(cls._gcd(a, b), check=False)

    @classmethod
    def gcdext(cls, a, b):
        """Extended GCD for polynomials a and b, over a coefficient field.

        Return d, s, t satisfying s a + t b = d = gcd(a,b).
        """
        a = cls._intern(a)
        b = cls._intern(b)
        d, s, t = cls._gcdext(a, b)
        return cls(d, check=False), cls(s, check=False), cls(t, check=False)

    @classmethod
    def lcm(cls, a, b):
        """Least common multiple of polynomials a and b, normalized by its canonical unit."""
        a = cls._intern(a)
        b = cls._intern(b)
        return cls(cls._lcm(a, b), check=False)

    @classmethod
    def remove(cls, a, b):
        """Return multiplicity v of polynomial b in nonzero polynomial a, and a/b^v."""
        a = cls._intern(a)
        b = cls._intern(b)
        v, u = cls._remove(a, b)
        return v, cls(u, check=False)

    def __repr__(self):
        return _format_terms(self.terms(), self.var)

    def __eq__(self, other):
        """Equality test."""
        if isinstance(other, Polynomial) and (other.ring is not self.ring or other.var != self.var):
            return False

        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented

        return self.value == other

    def __ne__(self, other):
        """Negated equality test."""
        eq = self.__eq__(other)
        if eq is NotImplemented:
            return NotImplemented

        return not eq

    def __hash__(self):
        """Make polynomials hashable (e.g., for LRU caching)."""
        return hash((f'{self.ring}[{self.var}]', tuple(self.value)))

    def __bool__(self):
        """Truth value testing.

        Return False if this polynomial is zero, True otherwise.
        """
        return bool(self.value)
