"""
Input and configuration validation helpers.

These helpers turn caller-supplied sequences into numpy arrays and enforce
the dimensionality and configuration rules shared by every basis.
"""

from typing import Optional, Sequence, Tuple

import numpy as np

from lfa_lib.errors import DimensionMismatch, InvalidConfiguration, NonFiniteInput

# A domain is described by one (low, high) pair per input dimension
Bounds = Sequence[Tuple[float, float]]


def as_point(x, input_dim: Optional[int]) -> np.ndarray:
    """
    Convert an input point to a 1-D float array and check its length.

    A bare scalar is treated as a one-dimensional point.

    Args:
        x: Sequence of reals (or a scalar)
        input_dim: Expected length, or None to accept any length

    Returns:
        1-D float64 array

    Raises:
        DimensionMismatch: If the point is not 1-D or has the wrong length
        NonFiniteInput: If a coordinate is NaN or infinite
    """
    point = np.atleast_1d(np.asarray(x, dtype=np.float64))

    if point.ndim != 1:
        raise DimensionMismatch(1, point.ndim, "input rank")

    if input_dim is not None and point.shape[0] != input_dim:
        raise DimensionMismatch(input_dim, point.shape[0])

    finite = np.isfinite(point)
    if not np.all(finite):
        bad = int(np.argmin(finite))
        raise NonFiniteInput(bad, float(point[bad]))

    return point


def as_bounds(bounds: Bounds) -> Tuple[np.ndarray, np.ndarray]:
    """
    Split per-dimension bounds into low and high arrays.

    Args:
        bounds: One (low, high) pair per input dimension

    Returns:
        Tuple of (low, high) float arrays

    Raises:
        InvalidConfiguration: If bounds are empty, malformed, non-finite or
            not strictly increasing
    """
    arr = np.asarray(bounds, dtype=np.float64)

    if arr.ndim != 2 or arr.shape[1] != 2 or arr.shape[0] == 0:
        raise InvalidConfiguration(
            "Bounds must be a non-empty sequence of (low, high) pairs"
        )

    if not np.all(np.isfinite(arr)):
        raise InvalidConfiguration("Bounds must be finite")

    low, high = arr[:, 0].copy(), arr[:, 1].copy()
    if np.any(high <= low):
        raise InvalidConfiguration(
            f"Each bound must satisfy low < high, got {arr.tolist()}"
        )

    return low, high


def check_int(name: str, value, minimum: int) -> int:
    """
    Check that a configuration value is an integer no smaller than minimum.

    Raises:
        InvalidConfiguration: If the check fails
    """
    if isinstance(value, (bool, np.bool_)) or int(value) != value:
        raise InvalidConfiguration(f"{name} must be an integer, got {value!r}")

    value = int(value)
    if value < minimum:
        raise InvalidConfiguration(f"{name} must be >= {minimum}, got {value}")

    return value
