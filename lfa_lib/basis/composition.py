"""
Basis combinators.

``Stack`` concatenates the outputs of two bases and ``Scale`` multiplies the
outputs of a basis by a constant. Both preserve the sparse/dense character
of their operands: a stack is sparse only when both operands are sparse.
"""

from typing import Any, Dict

import numpy as np

from lfa_lib.basis.base import Basis
from lfa_lib.errors import DimensionMismatch, InvalidConfiguration
from lfa_lib.features import Features


class Stack(Basis):
    """
    Concatenation of two bases.

    Features of ``b`` follow those of ``a``, offset by ``a.n_features``.
    Stacking is associative: ``Stack(Stack(a, b), c)`` and
    ``Stack(a, Stack(b, c))`` produce identical feature vectors.
    """

    def __init__(self, a: Basis, b: Basis):
        """
        Initialize a stack.

        Args:
            a: Leading basis
            b: Trailing basis

        Raises:
            TypeError: If either operand is not a Basis
            DimensionMismatch: If the operands expect different input lengths
        """
        if not isinstance(a, Basis) or not isinstance(b, Basis):
            raise TypeError("Can only stack Basis instances")

        if a.input_dim is not None and b.input_dim is not None and a.input_dim != b.input_dim:
            raise DimensionMismatch(a.input_dim, b.input_dim, "stacked basis input")

        self.a = a
        self.b = b

        self._log_created(operands=[type(a).__name__, type(b).__name__])

    @property
    def input_dim(self):
        return self.a.input_dim if self.a.input_dim is not None else self.b.input_dim

    @property
    def n_features(self) -> int:
        return self.a.n_features + self.b.n_features

    @property
    def is_sparse(self) -> bool:
        return self.a.is_sparse and self.b.is_sparse

    def _project(self, point: np.ndarray) -> Features:
        return self.a._project(point).stack(self.b._project(point))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": "stack",
            "bases": [self.a.to_dict(), self.b.to_dict()],
        }

    @classmethod
    def _from_dict(cls, data: Dict[str, Any]) -> 'Stack':
        a, b = data["bases"]
        return cls(Basis.from_dict(a), Basis.from_dict(b))

    def __repr__(self) -> str:
        return f"Stack({self.a!r}, {self.b!r})"


class Scale(Basis):
    """
    A basis whose activations are all multiplied by a constant factor.
    """

    def __init__(self, basis: Basis, factor: float):
        if not isinstance(basis, Basis):
            raise TypeError("Can only scale Basis instances")
        if not np.isfinite(factor):
            raise InvalidConfiguration(f"Scale factor must be finite, got {factor}")

        self.basis = basis
        self.factor = float(factor)

        self._log_created(factor=self.factor)

    @property
    def input_dim(self):
        return self.basis.input_dim

    @property
    def n_features(self) -> int:
        return self.basis.n_features

    @property
    def is_sparse(self) -> bool:
        return self.basis.is_sparse

    def _project(self, point: np.ndarray) -> Features:
        return self.basis._project(point).scaled(self.factor)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": "scale",
            "factor": self.factor,
            "basis": self.basis.to_dict(),
        }

    @classmethod
    def _from_dict(cls, data: Dict[str, Any]) -> 'Scale':
        return cls(Basis.from_dict(data["basis"]), data["factor"])

    def __repr__(self) -> str:
        return f"Scale({self.basis!r}, {self.factor})"
