"""
Feature vector module for LFA library.

This module provides the dense and sparse representations of the output of
a basis projection.
"""

from lfa_lib.features.base import Features
from lfa_lib.features.dense import DenseFeatures
from lfa_lib.features.sparse import SparseFeatures

__all__ = [
    'Features',
    'DenseFeatures',
    'SparseFeatures'
]
