"""
Base class for bases.

A basis is a fixed function from input points to feature vectors. Bases are
stateless with respect to samples: every structure they need (exponents,
coefficients, centers, tile offsets) is fixed at construction time.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

import numpy as np

from lfa_lib.features import Features
from lfa_lib.logging import get_logger
from lfa_lib.utils.validation import as_point


class Basis(ABC):
    """
    Interface for bases.

    Subclasses declare their input dimensionality and output dimension and
    implement ``_project`` on an already validated point. Combinators
    (``stack``, ``scale``, ``with_constant``) build composite bases.
    """

    @property
    @abstractmethod
    def input_dim(self) -> Optional[int]:
        """Expected input length, or None if any length is accepted."""
        pass

    @property
    @abstractmethod
    def n_features(self) -> int:
        """Output dimension, fixed at construction."""
        pass

    @property
    @abstractmethod
    def is_sparse(self) -> bool:
        """Whether projections are sparse feature vectors."""
        pass

    @abstractmethod
    def _project(self, point: np.ndarray) -> Features:
        """
        Project a validated point.

        Args:
            point: 1-D float array of length input_dim

        Returns:
            Feature vector of dimension n_features
        """
        pass

    @abstractmethod
    def to_dict(self) -> Dict[str, Any]:
        """
        Return the basis configuration as plain data.

        The result contains only dicts, lists, numbers, strings and None, and
        ``Basis.from_dict`` rebuilds an equivalent basis from it.
        """
        pass

    def dimension(self) -> int:
        """Output dimension of the basis."""
        return self.n_features

    def project(self, x) -> Features:
        """
        Project an input point to a feature vector.

        Args:
            x: Sequence of reals of length input_dim

        Returns:
            Feature vector of dimension n_features

        Raises:
            DimensionMismatch: If the point has the wrong length
        """
        return self._project(as_point(x, self.input_dim))

    def __call__(self, x) -> Features:
        return self.project(x)

    def __len__(self) -> int:
        return self.n_features

    def stack(self, other: 'Basis') -> 'Basis':
        """
        Concatenate the outputs of this basis and another.

        Args:
            other: Basis whose features follow this one's

        Returns:
            Stack combinator
        """
        from lfa_lib.basis.composition import Stack
        return Stack(self, other)

    def scale(self, factor: float) -> 'Basis':
        """
        Multiply every activation of this basis by a constant.

        Args:
            factor: Finite scale factor

        Returns:
            Scale combinator
        """
        from lfa_lib.basis.composition import Scale
        return Scale(self, factor)

    def __mul__(self, factor: float) -> 'Basis':
        return self.scale(factor)

    __rmul__ = __mul__

    def with_constant(self, value: float = 1.0) -> 'Basis':
        """
        Append a single constant (bias) feature.

        Args:
            value: Activation of the bias feature

        Returns:
            Stack of this basis and a one-feature Constant basis
        """
        from lfa_lib.basis.fixed import Constant
        return self.stack(Constant(1, value, input_dim=self.input_dim))

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> 'Basis':
        """
        Rebuild a basis from the output of ``to_dict``.

        Args:
            data: Plain-data basis configuration

        Returns:
            Equivalent basis
        """
        from lfa_lib.basis.registry import basis_from_dict
        return basis_from_dict(data)

    def _log_created(self, **details) -> None:
        get_logger().debug({
            "event": "basis_created",
            "basis": type(self).__name__,
            "input_dim": self.input_dim,
            "n_features": self.n_features,
            "sparse": self.is_sparse,
            **details
        })

    def __repr__(self) -> str:
        return (f"{type(self).__name__}(input_dim={self.input_dim}, "
                f"n_features={self.n_features})")
