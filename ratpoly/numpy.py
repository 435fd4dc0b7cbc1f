"""This module acts as a stub to avoid a (hard) dependency for the numpy package.

If the numpy package is not available, RatPoly still runs but with less functionality.
Use of NumPy can be disabled to avoid loading the numpy package.

If NumPy is enabled (available and not disabled), sequences of exact integers can be
exported as NumPy arrays whose integer dtype is the narrowest one holding all values,
see ratpoly.narrow.as_array().
"""

import os
import logging

try:
    if os.getenv('RATPOLY_NONUMPY') == '1':
        raise ImportError

    import numpy as np
    logging.debug(f'Load NumPy version {np.__version__}')

    if np.lib.NumpyVersion(np.__version__) < '1.22.0':
        logging.warning(f'NumPy {np.__version__} not (fully) supported. Upgrade to NumPy 1.22+.')
except ImportError:
    np = None
