"""
Linear function approximators.

An LFA pairs one basis with one weight table. Predictions are inner products
of the projected features with the weight columns; updates add
``learning_rate * error * features`` into each column. Features are
projected once per call and shared between every column.
"""

from typing import Any, Dict, Optional, Sequence

import numpy as np

from lfa_lib.basis import Basis
from lfa_lib.errors import DimensionMismatch, InvalidConfiguration
from lfa_lib.features import Features
from lfa_lib.function_approx.base import Approximator
from lfa_lib.function_approx.weights import Weights
from lfa_lib.logging import get_logger, log_weights_summary


class LFA(Approximator):
    """
    Linear function approximator over a fixed basis.

    Use the factories ``LFA.scalar``, ``LFA.pair`` and ``LFA.vector`` rather
    than instantiating subclasses directly. The approximator exclusively
    owns its weight table.
    """

    def __init__(self, basis: Basis, weights: Weights):
        """
        Initialize a linear function approximator.

        Args:
            basis: Basis used to project inputs
            weights: Weight table with one row per basis feature

        Raises:
            TypeError: If basis is not a Basis
            DimensionMismatch: If the weight rows do not match the basis
        """
        if not isinstance(basis, Basis):
            raise TypeError("LFA requires a Basis instance")
        if weights.n_features != basis.n_features:
            raise DimensionMismatch(basis.n_features, weights.n_features, "weight rows")

        self.basis = basis
        self.weights = weights

        logger = get_logger()
        logger.debug({
            "event": "approximator_created",
            "approximator": type(self).__name__,
            "basis": type(basis).__name__,
            "n_features": weights.n_features,
            "n_outputs": weights.n_outputs
        })
        log_weights_summary(weights, name="initial_weights")

    @staticmethod
    def scalar(basis: Basis, weights: Optional[np.ndarray] = None) -> 'ScalarLFA':
        """
        Create a single-output approximator.

        Args:
            basis: Basis used to project inputs
            weights: Optional initial weights of length basis.n_features

        Returns:
            New ScalarLFA
        """
        return ScalarLFA(basis, Weights.create(basis.n_features, 1, weights))

    @staticmethod
    def pair(basis: Basis, weights: Optional[np.ndarray] = None) -> 'VectorLFA':
        """Create a two-output approximator."""
        return VectorLFA(basis, Weights.create(basis.n_features, 2, weights))

    @staticmethod
    def vector(
        basis: Basis,
        n_outputs: int,
        weights: Optional[np.ndarray] = None
    ) -> 'VectorLFA':
        """
        Create a multi-output approximator.

        Args:
            basis: Basis used to project inputs
            n_outputs: Number of output columns
            weights: Optional initial weights, shape (basis.n_features, n_outputs)

        Returns:
            New VectorLFA
        """
        return VectorLFA(basis, Weights.create(basis.n_features, n_outputs, weights))

    @property
    def n_features(self) -> int:
        return self.weights.n_features

    @property
    def n_outputs(self) -> int:
        return self.weights.n_outputs

    def embed(self, x) -> Features:
        return self.basis.project(x)

    def evaluate_index(self, features: Features, index: int) -> float:
        """
        Predict a single output column from projected features.

        Args:
            features: Output of embed
            index: Output column

        Returns:
            Prediction for that column
        """
        return self.weights.predict_column(features, index)

    def update_index(
        self,
        features: Features,
        index: int,
        error: float,
        learning_rate: float
    ) -> None:
        """
        Update a single output column from projected features.

        Args:
            features: Output of embed
            index: Output column
            error: Error signal for that column
            learning_rate: Step size multiplying the error
        """
        self.weights.update_column(features, index, learning_rate * float(error))

    def jacobian(self, features: Features) -> np.ndarray:
        """
        Gradient of every output with respect to its weight column.

        For a linear model this is the feature vector itself, repeated once
        per output.

        Returns:
            Dense array of shape (n_features, n_outputs)
        """
        dense = features.to_dense()
        return np.repeat(dense[:, None], self.n_outputs, axis=1)

    def weights_view(self) -> np.ndarray:
        """Writable view of the weight table, shape (n_features, n_outputs)."""
        return self.weights.values

    def within(self, other: Approximator, tolerance: float) -> bool:
        if not isinstance(other, LFA):
            return False
        return self.weights.within(other.weights, tolerance)

    def to_dict(self) -> Dict[str, Any]:
        """
        Snapshot the approximator as plain data.

        Returns:
            Dict holding the approximator kind, basis configuration and
            weight table
        """
        return {
            "type": self._kind,
            "basis": self.basis.to_dict(),
            "weights": self.weights.to_dict(),
        }

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> 'LFA':
        """
        Restore an approximator snapshot produced by ``to_dict``.

        Raises:
            InvalidConfiguration: If the approximator kind is unknown
        """
        kinds = {"scalar_lfa": ScalarLFA, "vector_lfa": VectorLFA}
        if data.get("type") not in kinds:
            raise InvalidConfiguration(f"Unknown approximator type: {data.get('type')!r}")

        basis = Basis.from_dict(data["basis"])
        weights = Weights.from_dict(data["weights"])

        return kinds[data["type"]](basis, weights)

    def _as_errors(self, error: Any) -> np.ndarray:
        errors = np.asarray(error, dtype=np.float64).ravel()
        if errors.shape[0] != self.n_outputs:
            raise DimensionMismatch(self.n_outputs, errors.shape[0], "error signal")
        return errors

    def __repr__(self) -> str:
        return f"{type(self).__name__}(basis={self.basis!r}, weights={self.weights!r})"


class ScalarLFA(LFA):
    """Linear approximator with a single output."""

    _kind = "scalar_lfa"

    def __init__(self, basis: Basis, weights: Weights):
        if weights.n_outputs != 1:
            raise DimensionMismatch(1, weights.n_outputs, "scalar approximator outputs")
        super().__init__(basis, weights)

    def evaluate(self, features: Features) -> float:
        return self.weights.predict_column(features, 0)

    def update_features(self, features: Features, error: Any, learning_rate: float) -> None:
        error = self._as_errors(error)[0]
        self.weights.update_column(features, 0, learning_rate * error)


class VectorLFA(LFA):
    """Linear approximator with a fixed number of outputs."""

    _kind = "vector_lfa"

    def evaluate(self, features: Features) -> np.ndarray:
        return self.weights.predict(features)

    def update_features(
        self,
        features: Features,
        error: Sequence[float],
        learning_rate: float
    ) -> None:
        errors = self._as_errors(error)

        # Columns share a length, so a feature/weight mismatch raises on the
        # first column before anything is written
        for j in range(self.n_outputs):
            self.weights.update_column(features, j, learning_rate * errors[j])

    def _residual(self, target: Any, prediction: np.ndarray) -> np.ndarray:
        return self._as_errors(target) - prediction
