"""
Base class for feature vectors.

A feature vector is the output of projecting one input point through a
basis. It is held either densely (every activation enumerated) or sparsely
(only the active indices), and both representations expose the same numeric
contract so approximators never need to know which one they received.
"""

from abc import ABC, abstractmethod
from typing import Iterator

import numpy as np

from lfa_lib.errors import DimensionMismatch


class Features(ABC):
    """
    Interface for feature vectors.

    Implementations must compute ``dot`` and ``scaled_add_into`` using only
    the positions they actually store, so sparse vectors stay O(active).
    """

    @property
    @abstractmethod
    def n_features(self) -> int:
        """Declared dimension of the vector."""
        pass

    @property
    @abstractmethod
    def is_sparse(self) -> bool:
        """Whether the vector stores only its active indices."""
        pass

    @property
    @abstractmethod
    def n_active(self) -> int:
        """Number of stored (active) positions."""
        pass

    @abstractmethod
    def dot(self, column: np.ndarray) -> float:
        """
        Inner product with a weight column.

        Args:
            column: 1-D array of length n_features

        Returns:
            Sum of activation[i] * column[i] over active positions
        """
        pass

    @abstractmethod
    def scaled_add_into(self, column: np.ndarray, scalar: float) -> None:
        """
        Add ``scalar * activation`` into a weight column, in place.

        Only active positions are touched.

        Args:
            column: Writable 1-D float array of length n_features
            scalar: Multiplier applied to every activation

        Raises:
            TypeError: If the column is not a writable float numpy array
            DimensionMismatch: If the column length differs from n_features
        """
        pass

    @abstractmethod
    def indices(self) -> Iterator[int]:
        """Iterate over active indices."""
        pass

    @abstractmethod
    def to_dense(self) -> np.ndarray:
        """
        Materialise a dense copy of the vector.

        Meant for diagnostics; predict/update never call it.
        """
        pass

    @abstractmethod
    def activations(self) -> np.ndarray:
        """Activations of the active positions, in ``indices()`` order."""
        pass

    @abstractmethod
    def scaled(self, scalar: float) -> 'Features':
        """Return a copy with every activation multiplied by scalar."""
        pass

    @abstractmethod
    def stack(self, other: 'Features') -> 'Features':
        """
        Concatenate another vector after this one.

        The result is sparse only when both operands are sparse.

        Args:
            other: Vector whose indices are offset by self.n_features

        Returns:
            Vector of dimension self.n_features + other.n_features
        """
        pass

    def l1(self) -> float:
        """Sum of absolute activations."""
        return float(np.sum(np.abs(self.activations())))

    def l2(self) -> float:
        """Euclidean norm of the activations."""
        return float(np.sqrt(np.sum(self.activations() ** 2)))

    def linf(self) -> float:
        """Largest absolute activation (0 for an empty vector)."""
        acts = self.activations()
        return float(np.max(np.abs(acts))) if acts.size else 0.0

    def __len__(self) -> int:
        return self.n_features

    def __mul__(self, scalar: float) -> 'Features':
        return self.scaled(scalar)

    __rmul__ = __mul__

    def _check_column(self, column, writable: bool = False) -> np.ndarray:
        if writable:
            # np.asarray would copy a list and the update would be lost
            if not isinstance(column, np.ndarray):
                raise TypeError(
                    f"In-place updates need a numpy array, got {type(column).__name__}"
                )
            if not column.flags.writeable:
                raise TypeError("Weight column is read-only")
            if not np.issubdtype(column.dtype, np.floating):
                raise TypeError(f"Weight column must be floating point, got dtype {column.dtype}")
        else:
            column = np.asarray(column)

        if column.ndim != 1 or column.shape[0] != self.n_features:
            raise DimensionMismatch(
                self.n_features,
                column.shape[0] if column.ndim == 1 else column.size,
                "weight column"
            )

        return column
