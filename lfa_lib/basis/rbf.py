"""
Radial basis function network.
"""

import itertools
from typing import Any, Dict, Optional, Sequence, Union

import numpy as np
from scipy.spatial.distance import cdist

from lfa_lib.basis.base import Basis
from lfa_lib.errors import DimensionMismatch, InvalidConfiguration
from lfa_lib.features import DenseFeatures
from lfa_lib.utils.validation import Bounds, as_bounds, check_int


class RBFNetwork(Basis):
    """
    Gaussian radial basis functions with fixed centers and widths.

    Feature i is ``exp(-||x - c_i||^2 / (2 * w_i^2))``.
    """

    def __init__(self, centers, widths: Union[float, Sequence[float]]):
        """
        Initialize an RBF network.

        Args:
            centers: Array of shape (n_centers, input_dim)
            widths: A single width shared by all centers, or one per center
        """
        centers = np.asarray(centers, dtype=np.float64)
        if centers.ndim != 2 or centers.shape[0] == 0 or centers.shape[1] == 0:
            raise InvalidConfiguration(
                "RBF centers must be a non-empty array of shape (n_centers, input_dim)"
            )
        if not np.all(np.isfinite(centers)):
            raise InvalidConfiguration("RBF centers must be finite")

        widths = np.asarray(widths, dtype=np.float64)
        if widths.ndim == 0:
            widths = np.full(centers.shape[0], float(widths))
        elif widths.shape != (centers.shape[0],):
            raise DimensionMismatch(centers.shape[0], widths.size, "RBF widths")

        if not np.all(np.isfinite(widths)) or np.any(widths <= 0.0):
            raise InvalidConfiguration("RBF widths must be finite and positive")

        self.centers = centers
        self.widths = widths
        self._denominators = 2.0 * widths ** 2

        self._log_created(n_centers=centers.shape[0])

    @staticmethod
    def uniform(
        bounds: Bounds,
        n_centers: Union[int, Sequence[int]],
        width: Optional[float] = None
    ) -> 'RBFNetwork':
        """
        Lay centers on an evenly spaced grid spanning the bounds.

        Args:
            bounds: One (low, high) pair per input dimension
            n_centers: Centers per dimension (a single int applies to all)
            width: Shared width; defaults to the smallest grid spacing

        Returns:
            New RBFNetwork with prod(n_centers) centers
        """
        low, high = as_bounds(bounds)
        input_dim = low.shape[0]

        if np.ndim(n_centers) == 0:
            counts = [n_centers] * input_dim
        else:
            counts = list(n_centers)
            if len(counts) != input_dim:
                raise DimensionMismatch(input_dim, len(counts), "centers per dimension")
        counts = [check_int("n_centers", n, 1) for n in counts]

        axes = [np.linspace(l, h, n) for l, h, n in zip(low, high, counts)]
        centers = np.array(list(itertools.product(*axes)))

        if width is None:
            spacings = [(h - l) / (n - 1) for l, h, n in zip(low, high, counts) if n > 1]
            width = min(spacings) if spacings else float(np.max(high - low)) / 2.0

        return RBFNetwork(centers, width)

    @property
    def input_dim(self) -> int:
        return self.centers.shape[1]

    @property
    def n_features(self) -> int:
        return self.centers.shape[0]

    @property
    def is_sparse(self) -> bool:
        return False

    def _project(self, point: np.ndarray) -> DenseFeatures:
        sq_dists = cdist(point[None, :], self.centers, 'sqeuclidean')[0]
        return DenseFeatures(np.exp(-sq_dists / self._denominators))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": "rbf_network",
            "centers": self.centers.tolist(),
            "widths": self.widths.tolist(),
        }

    @classmethod
    def _from_dict(cls, data: Dict[str, Any]) -> 'RBFNetwork':
        return cls(data["centers"], data["widths"])
