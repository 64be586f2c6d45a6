"""
Sparse feature vectors.

Only the active indices (and, optionally, their activations) are stored.
Omitted indices are implicitly zero, and every numeric operation runs in
time proportional to the number of active indices.
"""

from typing import Iterable, Iterator, Optional, Tuple, Union

import numpy as np

from lfa_lib.errors import DimensionMismatch, InvalidConfiguration, InvalidIndex
from lfa_lib.features.base import Features
from lfa_lib.features.dense import DenseFeatures


class SparseFeatures(Features):
    """
    Feature vector given by its active indices.

    When no activations are supplied every active index has activation 1.0
    (binary features, as produced by tile coding). Duplicate indices are
    merged by summing their activations, so stored indices are unique.
    """

    def __init__(
        self,
        n_features: int,
        indices: Iterable[int],
        values: Optional[Iterable[float]] = None
    ):
        """
        Initialize a sparse feature vector.

        Args:
            n_features: Declared dimension
            indices: Active indices, each in [0, n_features)
            values: Optional activations, one per index

        Raises:
            InvalidIndex: If an index lies outside [0, n_features)
            DimensionMismatch: If values and indices differ in length
        """
        if int(n_features) != n_features or n_features < 0:
            raise InvalidConfiguration(
                f"n_features must be a non-negative integer, got {n_features!r}"
            )
        self._n_features = int(n_features)

        idx = np.asarray(indices if isinstance(indices, np.ndarray) else list(indices))
        if idx.size == 0:
            idx = np.empty(0, dtype=np.int64)
        elif not np.issubdtype(idx.dtype, np.integer):
            raise TypeError(f"Feature indices must be integers, got dtype {idx.dtype}")
        idx = idx.astype(np.int64).ravel()

        # Out-of-range indices are rejected, never clipped
        out_of_range = (idx < 0) | (idx >= self._n_features)
        if np.any(out_of_range):
            raise InvalidIndex(int(idx[out_of_range][0]), self._n_features)

        if values is None:
            vals = None
        else:
            vals = np.asarray(values, dtype=np.float64).ravel()
            if vals.shape[0] != idx.shape[0]:
                raise DimensionMismatch(idx.shape[0], vals.shape[0], "sparse activations")

        unique, inverse = np.unique(idx, return_inverse=True)
        if unique.shape[0] < idx.shape[0]:
            merged = np.zeros(unique.shape[0])
            np.add.at(merged, inverse, 1.0 if vals is None else vals)
            idx, vals = unique, merged

        self._indices = idx
        self._values = vals

    @staticmethod
    def from_pairs(
        n_features: int,
        pairs: Iterable[Union[int, Tuple[int, float]]]
    ) -> 'SparseFeatures':
        """
        Build a sparse vector from ``(index, activation)`` pairs.

        Bare indices are accepted and given activation 1.0.

        Args:
            n_features: Declared dimension
            pairs: Iterable of indices or (index, activation) pairs

        Returns:
            New SparseFeatures
        """
        indices, values = [], []
        for item in pairs:
            if isinstance(item, tuple):
                index, value = item
            else:
                index, value = item, 1.0
            indices.append(index)
            values.append(value)

        return SparseFeatures(n_features, np.asarray(indices, dtype=np.int64), values)

    @property
    def n_features(self) -> int:
        return self._n_features

    @property
    def is_sparse(self) -> bool:
        return True

    @property
    def n_active(self) -> int:
        return self._indices.shape[0]

    @property
    def is_binary(self) -> bool:
        """Whether every activation is implicitly 1.0."""
        return self._values is None

    def dot(self, column: np.ndarray) -> float:
        column = self._check_column(column)

        if self._values is None:
            return float(np.sum(column[self._indices]))
        return float(np.dot(self._values, column[self._indices]))

    def scaled_add_into(self, column: np.ndarray, scalar: float) -> None:
        column = self._check_column(column, writable=True)

        # Indices are unique so fancy-index assignment does not drop updates
        if self._values is None:
            column[self._indices] += scalar
        else:
            column[self._indices] += scalar * self._values

    def indices(self) -> Iterator[int]:
        return iter(self._indices.tolist())

    def to_dense(self) -> np.ndarray:
        dense = np.zeros(self._n_features)
        dense[self._indices] = self.activations()
        return dense

    def activations(self) -> np.ndarray:
        if self._values is None:
            return np.ones(self._indices.shape[0])
        return self._values

    def scaled(self, scalar: float) -> 'SparseFeatures':
        return SparseFeatures(self._n_features, self._indices, self.activations() * scalar)

    def stack(self, other: Features) -> Features:
        if not other.is_sparse:
            return DenseFeatures(np.concatenate([self.to_dense(), other.to_dense()]))

        indices = np.concatenate([
            self._indices,
            np.fromiter(other.indices(), dtype=np.int64) + self._n_features
        ])
        n_features = self._n_features + other.n_features

        if self.is_binary and getattr(other, 'is_binary', False):
            return SparseFeatures(n_features, indices)
        return SparseFeatures(
            n_features,
            indices,
            np.concatenate([self.activations(), other.activations()])
        )

    def __eq__(self, other) -> bool:
        if not isinstance(other, SparseFeatures):
            return NotImplemented
        if self._n_features != other._n_features:
            return False

        order_a = np.argsort(self._indices)
        order_b = np.argsort(other._indices)
        return (
            np.array_equal(self._indices[order_a], other._indices[order_b]) and
            np.array_equal(self.activations()[order_a], other.activations()[order_b])
        )

    __hash__ = None

    def __repr__(self) -> str:
        return (f"SparseFeatures(n_features={self._n_features}, "
                f"indices={self._indices.tolist()})")
