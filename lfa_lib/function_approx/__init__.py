"""
Function approximation module for LFA library.

This module provides the weight store and the linear approximators built on
top of a basis, which are used to approximate value functions and policies
in reinforcement learning.
"""

from lfa_lib.function_approx.base import Approximator
from lfa_lib.function_approx.weights import Weights
from lfa_lib.function_approx.lfa import LFA, ScalarLFA, VectorLFA
from lfa_lib.function_approx.transforms import (
    Transform,
    Identity,
    Softplus,
    Logistic,
    Exp,
    TransformedLFA,
)

__all__ = [
    'Approximator',
    'Weights',
    'LFA',
    'ScalarLFA',
    'VectorLFA',
    'Transform',
    'Identity',
    'Softplus',
    'Logistic',
    'Exp',
    'TransformedLFA'
]
