"""
Output transforms and transformed linear approximators.

A transformed LFA outputs ``f(w . phi(x))`` for a fixed differentiable
function ``f``. Updates follow the chain rule, scaling the caller's error by
``f'(w . phi(x))`` before it is applied along the features.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict

import numpy as np
from scipy.special import expit

from lfa_lib.errors import InvalidConfiguration
from lfa_lib.features import Features
from lfa_lib.function_approx.base import Approximator, Prediction
from lfa_lib.function_approx.lfa import LFA


class Transform(ABC):
    """Elementwise differentiable output transform."""

    name: str = ""

    @abstractmethod
    def __call__(self, x):
        pass

    @abstractmethod
    def grad(self, x):
        """Derivative of the transform evaluated at x."""
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class Identity(Transform):
    name = "identity"

    def __call__(self, x):
        return x

    def grad(self, x):
        return np.ones_like(x, dtype=np.float64)


class Softplus(Transform):
    """``log(1 + exp(x))``; keeps outputs positive (e.g. standard deviations)."""

    name = "softplus"

    def __call__(self, x):
        return np.logaddexp(0.0, x)

    def grad(self, x):
        return expit(x)


class Logistic(Transform):
    """``1 / (1 + exp(-x))``; keeps outputs in (0, 1)."""

    name = "logistic"

    def __call__(self, x):
        return expit(x)

    def grad(self, x):
        s = expit(x)
        return s * (1.0 - s)


class Exp(Transform):
    name = "exp"

    def __call__(self, x):
        return np.exp(x)

    def grad(self, x):
        return np.exp(x)


TRANSFORMS = {t.name: t for t in (Identity, Softplus, Logistic, Exp)}


class TransformedLFA(Approximator):
    """
    Linear approximator followed by an output transform.

    Wraps (and owns) an LFA; projection and weight storage are delegated to
    it unchanged.
    """

    def __init__(self, lfa: LFA, transform: Transform):
        if not isinstance(lfa, LFA):
            raise TypeError("TransformedLFA requires an LFA instance")
        if not isinstance(transform, Transform):
            raise TypeError("transform must be a Transform instance")

        self.lfa = lfa
        self.transform = transform

    @staticmethod
    def scalar(basis, transform: Transform) -> 'TransformedLFA':
        return TransformedLFA(LFA.scalar(basis), transform)

    @staticmethod
    def vector(basis, n_outputs: int, transform: Transform) -> 'TransformedLFA':
        return TransformedLFA(LFA.vector(basis, n_outputs), transform)

    @property
    def n_features(self) -> int:
        return self.lfa.n_features

    @property
    def n_outputs(self) -> int:
        return self.lfa.n_outputs

    @property
    def weights(self):
        return self.lfa.weights

    def embed(self, x) -> Features:
        return self.lfa.embed(x)

    def evaluate(self, features: Features) -> Prediction:
        output = self.transform(self.lfa.evaluate(features))
        return float(output) if self.n_outputs == 1 else output

    def update_features(self, features: Features, error: Any, learning_rate: float) -> None:
        errors = self.lfa._as_errors(error)
        linear = np.atleast_1d(self.lfa.evaluate(features))

        self.lfa.update_features(features, errors * self.transform.grad(linear), learning_rate)

    def jacobian(self, features: Features) -> np.ndarray:
        """
        Gradient of every transformed output with respect to its weights.

        Returns:
            Dense array of shape (n_features, n_outputs)
        """
        linear = np.atleast_1d(self.lfa.evaluate(features))
        return self.lfa.jacobian(features) * self.transform.grad(linear)[None, :]

    def _residual(self, target: Any, prediction: Prediction) -> Any:
        return self.lfa._residual(target, prediction)

    def within(self, other: Approximator, tolerance: float) -> bool:
        if not isinstance(other, TransformedLFA) or other.transform.name != self.transform.name:
            return False
        return self.lfa.within(other.lfa, tolerance)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": "transformed_lfa",
            "transform": self.transform.name,
            "approximator": self.lfa.to_dict(),
        }

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> 'TransformedLFA':
        try:
            transform = TRANSFORMS[data["transform"]]()
        except KeyError as e:
            raise InvalidConfiguration(f"Unknown transform: {data.get('transform')!r}") from e

        return TransformedLFA(LFA.from_dict(data["approximator"]), transform)

    def __repr__(self) -> str:
        return f"TransformedLFA({self.lfa!r}, {self.transform!r})"
