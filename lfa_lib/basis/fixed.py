"""
Fixed bases whose output does not depend on the input.
"""

from typing import Any, Dict, Optional

import numpy as np

from lfa_lib.basis.base import Basis
from lfa_lib.errors import InvalidConfiguration
from lfa_lib.features import DenseFeatures
from lfa_lib.utils.validation import check_int


class Constant(Basis):
    """
    Dense basis returning the same activations for every input.

    Mostly used to add bias terms to another basis via ``with_constant``.
    """

    def __init__(self, n_features: int = 1, value: float = 1.0, input_dim: Optional[int] = None):
        """
        Initialize a constant basis.

        Args:
            n_features: Number of constant features (>= 1)
            value: Activation of every feature
            input_dim: Expected input length, or None to accept any length
        """
        self._n_features = check_int("n_features", n_features, 1)
        self._input_dim = None if input_dim is None else check_int("input_dim", input_dim, 1)

        if not np.isfinite(value):
            raise InvalidConfiguration(f"Constant value must be finite, got {value}")
        self.value = float(value)

        self._values = np.full(self._n_features, self.value)
        self._values.flags.writeable = False

    @staticmethod
    def ones(n_features: int = 1) -> 'Constant':
        return Constant(n_features, 1.0)

    @staticmethod
    def zeros(n_features: int = 1) -> 'Constant':
        return Constant(n_features, 0.0)

    @property
    def input_dim(self) -> Optional[int]:
        return self._input_dim

    @property
    def n_features(self) -> int:
        return self._n_features

    @property
    def is_sparse(self) -> bool:
        return False

    def _project(self, point: np.ndarray) -> DenseFeatures:
        return DenseFeatures(self._values.copy())

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": "constant",
            "n_features": self._n_features,
            "value": self.value,
            "input_dim": self._input_dim,
        }

    @classmethod
    def _from_dict(cls, data: Dict[str, Any]) -> 'Constant':
        return cls(data["n_features"], data["value"], data.get("input_dim"))
