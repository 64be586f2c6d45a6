"""
Weight store for linear function approximation.

This module provides the mutable weight table combined with feature vectors
to produce predictions. Rows correspond to features and columns to outputs.
"""

from typing import Any, Dict, Optional

import numpy as np

from lfa_lib.errors import DimensionMismatch, InvalidIndex
from lfa_lib.features import Features
from lfa_lib.utils.validation import check_int


class Weights:
    """
    Dense (n_features x n_outputs) weight table.

    The table is mutated in place by ``update_column`` and is never resized.
    It provides no locking: callers sharing one instance across threads must
    synchronise writers themselves.
    """

    def __init__(self, n_features: int, n_outputs: int = 1, values: Optional[np.ndarray] = None):
        """
        Initialize a weight table.

        Args:
            n_features: Number of rows (basis output dimension)
            n_outputs: Number of columns (approximator output arity)
            values: Optional initial values of shape (n_features, n_outputs);
                a 1-D array is accepted when n_outputs is 1

        Raises:
            DimensionMismatch: If values do not have the expected shape
        """
        n_features = check_int("n_features", n_features, 1)
        n_outputs = check_int("n_outputs", n_outputs, 1)

        if values is None:
            table = np.zeros((n_features, n_outputs))
        else:
            table = np.array(values, dtype=np.float64)
            if table.ndim == 1 and n_outputs == 1:
                table = table[:, None]
            if table.ndim != 2 or table.shape != (n_features, n_outputs):
                raise DimensionMismatch(
                    n_features * n_outputs, table.size, "initial weights"
                )

        self.values = table

    @staticmethod
    def create(
        n_features: int,
        n_outputs: int = 1,
        weights: Optional[np.ndarray] = None
    ) -> 'Weights':
        """
        Create a new weight table, zero-initialised unless weights are given.

        Args:
            n_features: Number of rows
            n_outputs: Number of columns
            weights: Optional initial values

        Returns:
            New Weights object
        """
        return Weights(n_features, n_outputs, weights)

    @property
    def n_features(self) -> int:
        return self.values.shape[0]

    @property
    def n_outputs(self) -> int:
        return self.values.shape[1]

    @property
    def shape(self):
        return self.values.shape

    def column(self, index: int) -> np.ndarray:
        """
        Return a writable view of one output column.

        Raises:
            InvalidIndex: If the column is outside [0, n_outputs)
        """
        if not 0 <= index < self.n_outputs:
            raise InvalidIndex(index, self.n_outputs)
        return self.values[:, index]

    def predict_column(self, features: Features, column: int) -> float:
        """
        Inner product of a feature vector with one column.

        Args:
            features: Feature vector of dimension n_features
            column: Output column index

        Returns:
            features . weights[:, column]
        """
        return features.dot(self.column(column))

    def predict(self, features: Features) -> np.ndarray:
        """
        Predict every output column from one feature vector.

        Returns:
            Array of length n_outputs
        """
        return np.array([
            features.dot(self.values[:, j]) for j in range(self.n_outputs)
        ])

    def update_column(self, features: Features, column: int, delta: float) -> None:
        """
        Add ``delta * features`` into one column, in place.

        Args:
            features: Feature vector of dimension n_features
            column: Output column index
            delta: Step size times error for this column
        """
        features.scaled_add_into(self.column(column), delta)

    def within(self, other: 'Weights', tolerance: float) -> bool:
        """
        Check if weights are within tolerance of another set of weights.

        Args:
            other: Another Weights object
            tolerance: Tolerance for comparison

        Returns:
            True if all weights are within tolerance, False otherwise
        """
        if self.shape != other.shape:
            return False
        return np.all(np.abs(self.values - other.values) <= tolerance).item()

    def copy(self) -> 'Weights':
        return Weights(self.n_features, self.n_outputs, self.values.copy())

    def to_dict(self) -> Dict[str, Any]:
        """Return the table as plain nested lists."""
        return {
            "n_features": self.n_features,
            "n_outputs": self.n_outputs,
            "values": self.values.tolist(),
        }

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> 'Weights':
        return Weights(data["n_features"], data["n_outputs"], data["values"])

    def __repr__(self) -> str:
        """
        Return a string representation of the weights.

        Returns:
            String representation
        """
        shape_str = 'x'.join(str(dim) for dim in self.values.shape)
        return f"Weights(shape={shape_str})"
