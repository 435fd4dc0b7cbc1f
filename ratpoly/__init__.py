"""RatPoly is a Python package for exact arithmetic with integers, rationals and polynomials.

Integers are represented without loss of precision, using Python ints for values
within the (symmetric) signed 64-bit range and gmpy2's mpz objects beyond that.
Each operation selects the smallest representation for its result, where small
integers are shared instances. Narrowing to 8/16/32/64-bit values is exact by
default, raising NarrowingError if a value does not fit.

Rational numbers are kept in lowest terms with a positive denominator, and are
constructed by factories that normalize, reduce, and select the representation.
Univariate polynomials with exact coefficients support ring arithmetic as well
as division with remainder, using scalar, synthetic or long division depending
on the divisor.

The above operations are all available via Python's operator overloading,
mixing freely with Python ints, gmpy2 mpz/mpq values and fractions.Fraction.

The modules are integers, rationals, factory and polynomials, with narrow
providing the width classification used by the factories.
"""

__version__ = '0.3.0'
__license__ = 'MIT License'

import os
import sys
import argparse
import logging
import importlib.util


def get_arg_parser():
    """Return parser for command line arguments recognized by RatPoly."""
    parser = argparse.ArgumentParser(add_help=False)

    group = parser.add_argument_group('RatPoly help')
    group.add_argument('-V', '--VERSION', action='store_true',
                       help='print RatPoly version number and exit')

    group = parser.add_argument_group('RatPoly configuration')
    group.add_argument('--log-level', type=str, metavar='ll',
                       help='logging level ll=debug/info/warning(default)/error')
    group.add_argument('--no-log', action='store_true',
                       help='disable logging messages')
    group.add_argument('--no-numpy', action='store_true',
                       help='disable use of numpy package')

    parser.set_defaults(log_level='warning')
    return parser


if os.getenv('READTHEDOCS') != 'True':
    options = get_arg_parser().parse_known_args()[0]
    if options.VERSION:
        options.no_log = True

    # Set logging level as early as possible.
    if options.no_log:
        logging.basicConfig(level=logging.WARNING)
    else:
        ch = options.log_level[0].upper()
        ch = {'N': '0', 'D': '1', 'I': '2', 'W': '3', 'E': '4', 'C': '5'}.get(ch, ch)
        ch = ch if '0' <= ch <= '5' else '0'  # default to '0'
        level = int(ch)
        level = (logging.NOTSET, logging.DEBUG, logging.INFO, logging.WARNING, logging.ERROR,
                 logging.CRITICAL)[level]
        if sys.flags.dev_mode:
            level = logging.DEBUG
        logging.basicConfig(format='{asctime} {message}', style='{', level=level, stream=sys.stdout)
        logging.debug(f'Set logging level to {level}: {logging.getLevelName(level)}')
        del ch, level

    # Ensure numpy will not be loaded by ratpoly.numpy, if demanded (saving resources).
    env_no_numpy = os.getenv('RATPOLY_NONUMPY') == '1'  # check if variable RATPOLY_NONUMPY is set
    if importlib.util.find_spec('numpy') and (options.no_numpy or env_no_numpy):
        logging.info('Use of package numpy inside RatPoly disabled.')
        if not env_no_numpy:
            os.environ['RATPOLY_NONUMPY'] = '1'  # NB: RATPOLY_NONUMPY also set for subprocesses

    del options, env_no_numpy

from ratpoly import rationals, integers, factory

# Resolve mutual dependencies between the number modules.
rationals.integers = integers
rationals.factory = factory
