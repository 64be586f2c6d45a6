"""
Polynomial basis.
"""

import itertools
from typing import Any, Dict, Optional

import numpy as np

from lfa_lib.basis.base import Basis
from lfa_lib.errors import DimensionMismatch
from lfa_lib.features import DenseFeatures
from lfa_lib.utils.validation import Bounds, as_bounds, check_int


class Polynomial(Basis):
    """
    Complete polynomial basis of bounded total degree.

    One feature per exponent tuple ``e`` with ``sum(e) <= degree``; the
    activation is ``prod(x[k] ** e[k])``. Exponent tuples are enumerated in
    the lexicographic order of ``itertools.product``, starting with the
    all-zero tuple (the constant term). When bounds are given the input is
    first rescaled to ``[-1, 1]`` per dimension.
    """

    def __init__(self, degree: int, input_dim: int, bounds: Optional[Bounds] = None):
        """
        Initialize a polynomial basis.

        Args:
            degree: Maximum total degree (>= 0)
            input_dim: Input dimensionality (>= 1)
            bounds: Optional (low, high) pair per dimension for rescaling
        """
        self.degree = check_int("degree", degree, 0)
        self._input_dim = check_int("input_dim", input_dim, 1)

        if bounds is not None:
            self._low, self._high = as_bounds(bounds)
            if self._low.shape[0] != self._input_dim:
                raise DimensionMismatch(self._input_dim, self._low.shape[0], "bounds")
        else:
            self._low = self._high = None

        self.exponents = np.array([
            e for e in itertools.product(range(self.degree + 1), repeat=self._input_dim)
            if sum(e) <= self.degree
        ], dtype=np.int64)

        self._log_created(degree=self.degree)

    @staticmethod
    def from_bounds(degree: int, bounds: Bounds) -> 'Polynomial':
        """Build a polynomial basis whose input dimensionality follows the bounds."""
        return Polynomial(degree, len(bounds), bounds)

    @property
    def input_dim(self) -> int:
        return self._input_dim

    @property
    def n_features(self) -> int:
        return self.exponents.shape[0]

    @property
    def is_sparse(self) -> bool:
        return False

    def _project(self, point: np.ndarray) -> DenseFeatures:
        if self._low is not None:
            point = 2.0 * (point - self._low) / (self._high - self._low) - 1.0

        return DenseFeatures(np.prod(point[None, :] ** self.exponents, axis=1))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": "polynomial",
            "degree": self.degree,
            "input_dim": self._input_dim,
            "bounds": (
                None if self._low is None
                else np.column_stack([self._low, self._high]).tolist()
            ),
        }

    @classmethod
    def _from_dict(cls, data: Dict[str, Any]) -> 'Polynomial':
        return cls(data["degree"], data["input_dim"], data.get("bounds"))
