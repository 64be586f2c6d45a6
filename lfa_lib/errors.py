"""
Error types for the linear function approximation library.

All errors derive from ``LFAError`` (itself a ``ValueError``) so callers can
catch the whole family at once or a single member.
"""

from typing import Optional


class LFAError(ValueError):
    """Base class for all library errors."""


class DimensionMismatch(LFAError):
    """
    Raised when an input or a configuration has the wrong dimensionality.

    Attributes:
        expected: Dimension the receiver was configured for
        actual: Dimension that was supplied
        what: Optional description of the offending quantity
    """

    def __init__(self, expected: int, actual: int, what: Optional[str] = None):
        self.expected = expected
        self.actual = actual
        self.what = what

        subject = what if what else "input"
        super().__init__(
            f"Dimension mismatch for {subject}: expected={expected}, actual={actual}"
        )


class InvalidIndex(LFAError):
    """
    Raised when a feature index falls outside ``[0, n_features)``.

    Attributes:
        index: The offending index
        n_features: The declared dimension
    """

    def __init__(self, index: int, n_features: int):
        self.index = index
        self.n_features = n_features

        super().__init__(
            f"Index {index} is out of range for dimension {n_features}"
        )


class NonFiniteInput(LFAError):
    """
    Raised when an input point has a NaN or infinite coordinate.

    Attributes:
        coordinate: Position of the first offending coordinate
        value: The offending value
    """

    def __init__(self, coordinate: int, value: float):
        self.coordinate = coordinate
        self.value = value

        super().__init__(
            f"Input coordinate {coordinate} is not finite: {value}"
        )


class InvalidConfiguration(LFAError):
    """Raised when a basis or weight store is constructed with bad parameters."""
