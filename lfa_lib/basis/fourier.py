"""
Fourier basis.

Implements the cosine Fourier basis of Konidaris, Osentoski and Thomas,
"Value Function Approximation in Reinforcement Learning using the Fourier
Basis" (AAAI 2011).
"""

import itertools
from typing import Any, Dict, Optional, Sequence

import numpy as np

from lfa_lib.basis.base import Basis
from lfa_lib.errors import DimensionMismatch, InvalidConfiguration
from lfa_lib.features import DenseFeatures
from lfa_lib.utils.validation import Bounds, as_bounds, check_int


def coefficient_grid(order: int, input_dim: int) -> np.ndarray:
    """
    Enumerate every coefficient vector in ``{0, ..., order} ** input_dim``.

    Vectors are listed in the lexicographic order of ``itertools.product``,
    so the all-zero vector comes first.

    Returns:
        Integer array of shape ((order + 1) ** input_dim, input_dim)
    """
    return np.array(
        list(itertools.product(range(order + 1), repeat=input_dim)),
        dtype=np.int64
    ).reshape(-1, input_dim)


class Fourier(Basis):
    """
    Cosine Fourier basis over a bounded box.

    Feature k is ``cos(pi * c_k . u)`` where ``u`` is the input rescaled to
    ``[0, 1]`` per dimension using the bounds and ``c_k`` is the k-th
    coefficient vector.
    """

    def __init__(
        self,
        order: int,
        bounds: Bounds,
        coefficients: Optional[Sequence[Sequence[int]]] = None
    ):
        """
        Initialize a Fourier basis.

        Args:
            order: Maximum coefficient along each dimension (>= 0)
            bounds: One (low, high) pair per input dimension
            coefficients: Optional explicit coefficient vectors; the full
                grid is used when omitted
        """
        self.order = check_int("order", order, 0)
        self._low, self._high = as_bounds(bounds)
        input_dim = self._low.shape[0]

        if coefficients is None:
            coeffs = coefficient_grid(self.order, input_dim)
        else:
            coeffs = np.asarray(coefficients, dtype=np.int64)
            if coeffs.ndim != 2 or coeffs.shape[0] == 0:
                raise InvalidConfiguration(
                    "Fourier coefficients must be a non-empty 2-D array"
                )
            if coeffs.shape[1] != input_dim:
                raise DimensionMismatch(input_dim, coeffs.shape[1], "Fourier coefficients")
            if np.any(coeffs < 0) or np.any(coeffs > self.order):
                raise InvalidConfiguration(
                    f"Fourier coefficients must lie in [0, {self.order}]"
                )

        self.coefficients = coeffs
        self._scaled = np.pi * coeffs.astype(np.float64)

        self._log_created(order=self.order)

    @staticmethod
    def random(order: int, bounds: Bounds, n_features: int, rng) -> 'Fourier':
        """
        Build a Fourier basis over a random subset of the coefficient grid.

        The all-zero (constant) coefficient vector is always kept; the
        remaining ``n_features - 1`` vectors are drawn without replacement
        using the caller's generator and kept in grid order.

        Args:
            order: Maximum coefficient along each dimension
            bounds: One (low, high) pair per input dimension
            n_features: Number of features to keep (>= 1)
            rng: numpy Generator (or anything with a compatible ``choice``)

        Returns:
            New Fourier basis
        """
        order = check_int("order", order, 0)
        n_features = check_int("n_features", n_features, 1)
        grid = coefficient_grid(order, len(bounds))

        if n_features > grid.shape[0]:
            raise InvalidConfiguration(
                f"n_features={n_features} exceeds the {grid.shape[0]} available "
                f"coefficient vectors"
            )

        chosen = rng.choice(np.arange(1, grid.shape[0]), size=n_features - 1, replace=False)
        rows = np.concatenate([[0], np.sort(np.asarray(chosen, dtype=np.int64))])

        return Fourier(order, bounds, grid[rows])

    @property
    def input_dim(self) -> int:
        return self._low.shape[0]

    @property
    def n_features(self) -> int:
        return self.coefficients.shape[0]

    @property
    def is_sparse(self) -> bool:
        return False

    def _project(self, point: np.ndarray) -> DenseFeatures:
        unit = (point - self._low) / (self._high - self._low)
        return DenseFeatures(np.cos(self._scaled @ unit))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": "fourier",
            "order": self.order,
            "bounds": np.column_stack([self._low, self._high]).tolist(),
            "coefficients": self.coefficients.tolist(),
        }

    @classmethod
    def _from_dict(cls, data: Dict[str, Any]) -> 'Fourier':
        return cls(data["order"], data["bounds"], data.get("coefficients"))
