"""
Dense feature vectors.
"""

from typing import Iterator

import numpy as np

from lfa_lib.errors import DimensionMismatch
from lfa_lib.features.base import Features


class DenseFeatures(Features):
    """
    Feature vector with every activation enumerated.

    Every position is meaningful even when its activation is zero.
    """

    def __init__(self, values):
        """
        Initialize a dense feature vector.

        Args:
            values: Sequence of activations, one per feature
        """
        values = np.asarray(values, dtype=np.float64)
        if values.ndim != 1:
            raise DimensionMismatch(1, values.ndim, "dense features rank")

        self.values = values

    @property
    def n_features(self) -> int:
        return self.values.shape[0]

    @property
    def is_sparse(self) -> bool:
        return False

    @property
    def n_active(self) -> int:
        return self.values.shape[0]

    def dot(self, column: np.ndarray) -> float:
        column = self._check_column(column)
        return float(np.dot(self.values, column))

    def scaled_add_into(self, column: np.ndarray, scalar: float) -> None:
        column = self._check_column(column, writable=True)
        column += scalar * self.values

    def indices(self) -> Iterator[int]:
        return iter(range(self.values.shape[0]))

    def to_dense(self) -> np.ndarray:
        return self.values.copy()

    def activations(self) -> np.ndarray:
        return self.values

    def scaled(self, scalar: float) -> 'DenseFeatures':
        return DenseFeatures(self.values * scalar)

    def stack(self, other: Features) -> 'DenseFeatures':
        return DenseFeatures(np.concatenate([self.values, other.to_dense()]))

    def __eq__(self, other) -> bool:
        if not isinstance(other, DenseFeatures):
            return NotImplemented
        return np.array_equal(self.values, other.values)

    __hash__ = None

    def __repr__(self) -> str:
        if self.n_features <= 6:
            return f"DenseFeatures({self.values.tolist()})"
        return f"DenseFeatures(n_features={self.n_features})"
