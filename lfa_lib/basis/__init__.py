"""
Basis module for LFA library.

This module provides the bases that project input points to feature
vectors, and the combinators used to compose them.
"""

from lfa_lib.basis.base import Basis
from lfa_lib.basis.polynomial import Polynomial
from lfa_lib.basis.fourier import Fourier
from lfa_lib.basis.rbf import RBFNetwork
from lfa_lib.basis.tile_coding import TileCoding, tile_hash
from lfa_lib.basis.fixed import Constant
from lfa_lib.basis.composition import Stack, Scale

__all__ = [
    'Basis',
    'Polynomial',
    'Fourier',
    'RBFNetwork',
    'TileCoding',
    'tile_hash',
    'Constant',
    'Stack',
    'Scale'
]
