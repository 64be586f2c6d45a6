"""
Linear Function Approximation Library.

This library provides feature bases (tile coding, radial basis functions,
Fourier and polynomial bases), dense and sparse feature vectors, and linear
approximators with in-place incremental updates for use in reinforcement
learning.
"""

__version__ = '0.1.0'

# Import submodules to make them available through the package
from lfa_lib import errors
from lfa_lib import features
from lfa_lib import basis
from lfa_lib import function_approx
from lfa_lib import utils

from lfa_lib.errors import (
    DimensionMismatch, InvalidIndex, InvalidConfiguration, NonFiniteInput
)
from lfa_lib.function_approx import LFA

__all__ = [
    'errors',
    'features',
    'basis',
    'function_approx',
    'utils',
    'DimensionMismatch',
    'InvalidIndex',
    'InvalidConfiguration',
    'NonFiniteInput',
    'LFA'
]
