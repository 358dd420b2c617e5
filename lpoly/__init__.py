"""lpoly is a Python package for Laurent polynomials over generic rings.

Laurent polynomials are polynomials in one variable whose exponents may be
negative. A Laurent polynomial is represented by an ordinary polynomial together
with an integer shift, the exponent assigned to the constant term of the ordinary
polynomial. All arithmetic reduces to arithmetic on ordinary polynomials.

Coefficient rings are provided by module rings: the integers ZZ, the rationals QQ,
and prime fields GF(p). Ordinary polynomials over these rings are provided by module
polyx, and Laurent polynomials by module lpolyx, for instance:

    from lpoly.rings import ZZ
    from lpoly.lpolyx import LaurentPolynomialRing
    R, x = LaurentPolynomialRing(ZZ, 'x')
    p = x**-2 + 3*x + 5

The usual operators +,-,*,**,/,//,% and function divmod are overloaded, and GCD,
extended GCD, LCM, exact division, inversion of units, evaluation and shifting
are all supported.
"""

__version__ = '0.3.1'
__license__ = 'MIT License'

import os
import sys
import argparse
import logging
import importlib.util


def get_arg_parser():
    """Return parser for command line arguments recognized by lpoly."""
    parser = argparse.ArgumentParser(add_help=False)

    group = parser.add_argument_group('lpoly configuration')
    group.add_argument('--log-level', type=str, metavar='ll',
                       help='logging level ll=debug/info/warning(default)/error')
    group.add_argument('--no-log', action='store_true',
                       help='disable logging messages')
    group.add_argument('--no-gmpy2', action='store_true',
                       help='disable use of gmpy2 package')

    parser.set_defaults(log_level='warning')
    return parser


if os.getenv('READTHEDOCS') != 'True':
    options = get_arg_parser().parse_known_args()[0]

    # Set logging level as early as possible.
    if options.no_log:
        logging.basicConfig(level=logging.CRITICAL)
    else:
        ch = options.log_level[0].upper()
        ch = {'N': '0', 'D': '1', 'I': '2', 'W': '3', 'E': '4', 'C': '5'}.get(ch, ch)
        ch = ch if '0' <= ch <= '5' else '3'  # default to '3'
        level = (logging.NOTSET, logging.DEBUG, logging.INFO, logging.WARNING, logging.ERROR,
                 logging.CRITICAL)[int(ch)]
        if sys.flags.dev_mode:
            level = logging.DEBUG
        logging.basicConfig(format='{asctime} {message}', style='{', level=level, stream=sys.stdout)
        logging.debug(f'Set logging level to {level}: {logging.getLevelName(level)}')
        del ch, level

    # Ensure gmpy2 will not be loaded by lpoly.gmpy, if demanded (using stubs instead).
    env_no_gmpy2 = os.getenv('LPOLY_NOGMPY') == '1'  # check if variable LPOLY_NOGMPY is set
    if not importlib.util.find_spec('gmpy2'):
        # gmpy2 package not available
        if not (options.no_gmpy2 or env_no_gmpy2):
            logging.info('Install package gmpy2 for better performance.')
    else:
        # gmpy2 package available
        if options.no_gmpy2 or env_no_gmpy2:
            logging.info('Use of package gmpy2 inside lpoly disabled.')
            if not env_no_gmpy2:
                os.environ['LPOLY_NOGMPY'] = '1'  # NB: LPOLY_NOGMPY also set for subprocesses

    del options, env_no_gmpy2
