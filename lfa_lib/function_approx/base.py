"""
Base class for approximators.

This module provides the abstract interface shared by every approximator:
project an input once, predict from the projected features, and update the
weights in place from a caller-supplied error signal.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Union

import numpy as np

from lfa_lib.features import Features

# A prediction is a float for scalar approximators and an array otherwise
Prediction = Union[float, np.ndarray]


class Approximator(ABC):
    """
    Interface for function approximators.

    An approximator maps input points to scalar or vector predictions. The
    error signal driving an update (TD error, gradient of a loss, ...) is
    always computed by the caller; the approximator only scales it by the
    learning rate and applies it along the features.
    """

    @property
    @abstractmethod
    def n_features(self) -> int:
        """Dimension of the feature vectors the approximator consumes."""
        pass

    @property
    @abstractmethod
    def n_outputs(self) -> int:
        """Number of output columns."""
        pass

    @abstractmethod
    def embed(self, x) -> Features:
        """
        Project an input point to its feature vector.

        Args:
            x: Input point

        Returns:
            Feature vector, reusable for evaluate and update_features
        """
        pass

    @abstractmethod
    def evaluate(self, features: Features) -> Prediction:
        """
        Predict from an already projected feature vector.

        Args:
            features: Output of embed

        Returns:
            Prediction for the projected point
        """
        pass

    @abstractmethod
    def update_features(self, features: Features, error: Any, learning_rate: float) -> None:
        """
        Update the weights in place from a projected feature vector.

        Args:
            features: Output of embed
            error: Error signal, one value per output
            learning_rate: Step size multiplying the error
        """
        pass

    @abstractmethod
    def within(self, other: 'Approximator', tolerance: float) -> bool:
        """
        Check if this approximator is within tolerance of another.

        Args:
            other: Another approximator of the same type
            tolerance: Tolerance for comparison

        Returns:
            True if within tolerance, False otherwise
        """
        pass

    def predict(self, x) -> Prediction:
        """
        Evaluate the approximator at a single point.

        Args:
            x: Input point

        Returns:
            Predicted output value(s)
        """
        return self.evaluate(self.embed(x))

    def __call__(self, x) -> Prediction:
        return self.predict(x)

    def update(self, x, error: Any, learning_rate: float) -> None:
        """
        Project a point once and update the weights with the given error.

        A failed projection raises before any weight is modified.

        Args:
            x: Input point
            error: Error signal, one value per output
            learning_rate: Step size multiplying the error
        """
        self.update_features(self.embed(x), error, learning_rate)

    def predict_and_update(
        self,
        x,
        target: Union[Any, Callable[[Prediction], Any]],
        learning_rate: float
    ) -> Prediction:
        """
        Predict and update from a single projection of the input.

        Args:
            x: Input point
            target: Either a callable mapping the prediction to an error
                signal, or a target value, in which case the error is
                ``target - prediction``
            learning_rate: Step size multiplying the error

        Returns:
            The prediction made before the update
        """
        features = self.embed(x)
        prediction = self.evaluate(features)

        if callable(target):
            error = target(prediction)
        else:
            error = self._residual(target, prediction)

        self.update_features(features, error, learning_rate)

        return prediction

    def _residual(self, target: Any, prediction: Prediction) -> Any:
        return target - prediction
