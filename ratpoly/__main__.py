"""Support for an interactive console with RatPoly preloaded.

To launch the console, run:

    python -m ratpoly

Use option -V (--VERSION) to print the version number only. The console
starts by executing the following code:

    from ratpoly.factory import from_int, from_mpz, from_numerator_denominator, from_decimal
    from ratpoly.polynomials import constant_of, monomial_of, from_coefficients
    x = monomial_of(1, 1)

such that, for instance, (x**2 - 1) // (x + 1) can be evaluated directly.
"""

import code
import sys
import ratpoly


def main(preamble=()):
    """Run interactive console after executing the preamble."""
    options = ratpoly.get_arg_parser().parse_known_args()[0]
    if options.VERSION:
        print(f'RatPoly {ratpoly.__version__}')
        return

    console = code.InteractiveConsole({'__name__': '__console__', '__doc__': None})
    for line in preamble:
        console.push(line)
    try:
        import readline  # NoQA
    except ImportError:
        pass

    banner = (f'RatPoly {ratpoly.__version__} console, Python {sys.version.split()[0]}\n'
              'Preloaded: from_int, from_mpz, from_numerator_denominator, from_decimal, '
              'constant_of, monomial_of, from_coefficients, x')
    console.interact(banner=banner, exitmsg='')


if __name__ == '__main__':
    preamble = ('from ratpoly.factory import from_int, from_mpz, from_numerator_denominator, from_decimal',
                'from ratpoly.polynomials import constant_of, monomial_of, from_coefficients',
                'x = monomial_of(1, 1)')
    main(preamble)
