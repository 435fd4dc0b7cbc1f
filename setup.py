"""RatPoly setup script.

Options:                python setup.py --help
Install by admin/root:  python setup.py install
Install by user:        python setup.py install --user
Install options:        python setup.py install --help
"""

import re
from setuptools import setup

with open('ratpoly/__init__.py', 'r') as f:
    INIT = f.read()
VERSION = re.search(r"^__version__ = '(.*)'", INIT, re.M).group(1)
LICENSE = re.search(r"^__license__ = '(.*)'", INIT, re.M).group(1)

with open('README.md', 'r') as f:
    LONG_DESCRIPTION = f.read()

setup(
    name='ratpoly',
    version=VERSION,
    description='RatPoly -- Exact integer, rational and polynomial arithmetic in Python',
    long_description=LONG_DESCRIPTION,
    long_description_content_type='text/markdown',
    keywords=['exact arithmetic', 'rational numbers', 'arbitrary precision',
              'polynomials', 'synthetic division', 'long division'],
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Environment :: Console',
        'Intended Audience :: Developers',
        'Intended Audience :: Education',
        'Intended Audience :: Science/Research',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
        'Programming Language :: Python :: 3 :: Only',
        'Topic :: Scientific/Engineering :: Mathematics',
        'Topic :: Software Development :: Libraries :: Python Modules'
    ],
    license=LICENSE,
    packages=['ratpoly'],
    platforms=['any'],
    python_requires='>=3.8',
    install_requires=['gmpy2>=2.1'],
    extras_require={'numpy': ['numpy>=1.22']}
)
