"""This module collects the gmpy2 functions used by lpoly.

Stubs only using Python built-ins are provided in case the gmpy2 package is not available.
The stubs cover primality testing for prime field construction and modular inversion
and powering for prime field arithmetic.
"""

import os
import logging


try:
    if os.getenv('LPOLY_NOGMPY') == '1':
        raise ImportError  # stubs will be loaded

    from gmpy2 import version, is_prime, powmod, invert
    logging.debug(f'Load gmpy2 version {version()}')
except ImportError:
    # load stubs, if LPOLY_NOGMPY is set, or if gmpy2 import fails
    logging.debug('Load pure Python stubs for gmpy2')
    import random

    def is_prime(x, n=25):
        """Return True if x is probably prime, else False if x is
        definitely composite, performing up to n Miller-Rabin
        primality tests.
        """
        if x <= 2 or x%2 == 0:
            return x == 2

        # odd x >= 3
        for p in (3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41, 43, 47, 53):
            if x % p == 0:
                return x == p

        r, s = 0, x-1
        while s%2 == 0:
            r += 1
            s //= 2
        for _ in range(n):
            a = random.randint(2, x-2)
            b = pow(a, s, x)
            if b in (1, x-1):
                continue
            for _ in range(r-1):
                b = (b * b) % x
                if b == x-1:
                    break
            else:
                return False

        return True

    def powmod(x, y, m):
        """Return (x**y) mod m, for negative y only if x is invertible modulo m."""
        if y < 0:
            return pow(invert(x, m), -y, m)

        return pow(x, y, m)

    def invert(x, m):
        """Return y such that x*y == 1 modulo m.

        Raises ZeroDivisionError if no inverse y exists (or, if m is zero).
        """
        if not m:
            raise ZeroDivisionError('invert() division by 0')

        m = abs(m)
        if m == 1:
            return 0

        a, b, = x, m
        s, s1 = 1, 0
        while b:
            a, (q, b) = b, divmod(a, b)
            s, s1 = s1, s - q * s1
        if a != 1:
            raise ZeroDivisionError('invert() no inverse exists')

        return s + m if s < 0 else s  # ensure 0 < y < m
