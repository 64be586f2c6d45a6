"""
Utility functions for LFA library.

This module provides validation helpers shared by the basis and
approximator modules.
"""

from lfa_lib.utils.validation import Bounds, as_point, as_bounds, check_int

__all__ = [
    'Bounds',
    'as_point',
    'as_bounds',
    'check_int'
]
