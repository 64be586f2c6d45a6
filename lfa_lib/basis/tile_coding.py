"""
Tile coding.

Tile coding covers a bounded box with several grids (tilings), each shifted
by its own displacement. Projecting a point activates exactly one tile per
tiling, so the output is a sparse binary vector with ``n_tilings`` active
features regardless of the input dimensionality.

With a ``memory_size`` the tile coordinates are folded into a bounded table
by ``tile_hash``. The table is split into ``n_tilings`` partitions whose
sizes differ by at most one, and each tiling hashes into its own partition,
so every row can be reached and the active indices of one projection are
always distinct. Collisions between tiles of the same tiling are accepted.
"""

from typing import Any, Dict, Optional, Sequence, Union

import numpy as np

from lfa_lib.basis.base import Basis
from lfa_lib.errors import DimensionMismatch, InvalidConfiguration
from lfa_lib.features import SparseFeatures
from lfa_lib.utils.validation import Bounds, as_bounds, check_int

# 64-bit FNV-1a parameters
_FNV_OFFSET = 0xcbf29ce484222325
_FNV_PRIME = 0x100000001b3
_MASK64 = 0xFFFFFFFFFFFFFFFF


def tile_hash(tiling: int, coords: Sequence[int], size: int) -> int:
    """
    Map a tiling index and its discretised coordinates to a table slot.

    A word-wise 64-bit FNV-1a fold followed by an xorshift finaliser. The
    function is pure: the same arguments always give the same slot.

    Args:
        tiling: Index of the tiling
        coords: Integer tile coordinates within the tiling
        size: Number of slots (>= 1)

    Returns:
        Slot in [0, size)
    """
    if size < 1:
        raise InvalidConfiguration(f"Hash table size must be >= 1, got {size}")

    h = _FNV_OFFSET
    for value in (tiling, *coords):
        h ^= int(value) & _MASK64
        h = (h * _FNV_PRIME) & _MASK64

    h ^= h >> 33
    h = (h * 0xff51afd7ed558ccd) & _MASK64
    h ^= h >> 33

    return h % size


def default_offsets(n_tilings: int, input_dim: int) -> np.ndarray:
    """
    Asymmetric tiling displacements, in units of one tile width.

    Tiling ``t`` is shifted along dimension ``k`` by
    ``((t * (2k + 1)) mod n_tilings) / n_tilings``, i.e. the displacement
    vector (1, 3, 5, ...) recommended by Sutton and Barto.

    Returns:
        Array of shape (n_tilings, input_dim) with entries in [0, 1)
    """
    t = np.arange(n_tilings)[:, None]
    k = np.arange(input_dim)[None, :]
    return ((t * (2 * k + 1)) % n_tilings) / n_tilings


class TileCoding(Basis):
    """
    Sparse tile-coding basis over a bounded box.

    Inputs are clipped to the bounds before discretisation. Each tiling has
    ``tiles_per_dim + 1`` tiles along every dimension so that its displaced
    grid still covers the whole box.
    """

    def __init__(
        self,
        bounds: Bounds,
        n_tilings: int,
        tiles_per_dim: Union[int, Sequence[int]],
        memory_size: Optional[int] = None,
        offsets=None,
        rng=None
    ):
        """
        Initialize a tile coding.

        Args:
            bounds: One (low, high) pair per input dimension
            n_tilings: Number of tilings (>= 1)
            tiles_per_dim: Tiles spanning the bounds along each dimension
            memory_size: Optional hash table size (>= n_tilings)
            offsets: Optional explicit displacements, shape
                (n_tilings, input_dim), entries in [0, 1) tile widths
            rng: Optional numpy Generator used to draw random displacements
                when offsets are not given
        """
        self._low, self._high = as_bounds(bounds)
        input_dim = self._low.shape[0]

        self.n_tilings = check_int("n_tilings", n_tilings, 1)

        if np.ndim(tiles_per_dim) == 0:
            tiles = [tiles_per_dim] * input_dim
        else:
            tiles = list(tiles_per_dim)
            if len(tiles) != input_dim:
                raise DimensionMismatch(input_dim, len(tiles), "tiles per dimension")
        self.tiles_per_dim = np.array(
            [check_int("tiles_per_dim", n, 1) for n in tiles], dtype=np.int64
        )

        if offsets is not None:
            offsets = np.asarray(offsets, dtype=np.float64)
            if offsets.shape != (self.n_tilings, input_dim):
                raise DimensionMismatch(
                    self.n_tilings * input_dim, offsets.size, "tiling offsets"
                )
            if np.any(offsets < 0.0) or np.any(offsets >= 1.0):
                raise InvalidConfiguration("Tiling offsets must lie in [0, 1)")
        elif rng is not None:
            offsets = np.asarray(
                rng.uniform(0.0, 1.0, size=(self.n_tilings, input_dim)),
                dtype=np.float64
            )
        else:
            offsets = default_offsets(self.n_tilings, input_dim)
        self.offsets = offsets

        # Layout of one tiling: row-major over (tiles_per_dim + 1) per dimension
        self._grid = self.tiles_per_dim + 1
        self._strides = np.concatenate([[1], np.cumprod(self._grid[:-1])]).astype(np.int64)
        self.tiling_size = int(np.prod(self._grid))

        if memory_size is None:
            self.memory_size = None
            self.partition_starts = None
            self._n_features = self.n_tilings * self.tiling_size
        else:
            self.memory_size = check_int("memory_size", memory_size, self.n_tilings)
            # Tiling t owns rows [starts[t], starts[t + 1]); sizes differ by at most one
            self.partition_starts = (
                np.arange(self.n_tilings + 1, dtype=np.int64) * self.memory_size // self.n_tilings
            )
            self._n_features = self.memory_size

        self._log_created(
            n_tilings=self.n_tilings,
            tiles_per_dim=self.tiles_per_dim,
            memory_size=self.memory_size
        )

    @property
    def input_dim(self) -> int:
        return self._low.shape[0]

    @property
    def n_features(self) -> int:
        return self._n_features

    @property
    def is_sparse(self) -> bool:
        return True

    @property
    def hashed(self) -> bool:
        """Whether tile coordinates are folded into a bounded table."""
        return self.memory_size is not None

    def tile_coordinates(self, point: np.ndarray) -> np.ndarray:
        """
        Discretise a validated point in every tiling.

        Returns:
            Integer array of shape (n_tilings, input_dim)
        """
        unit = np.clip((point - self._low) / (self._high - self._low), 0.0, 1.0)
        coords = np.floor(unit[None, :] * self.tiles_per_dim[None, :] + self.offsets)

        return np.minimum(coords.astype(np.int64), self._grid - 1)

    def _project(self, point: np.ndarray) -> SparseFeatures:
        coords = self.tile_coordinates(point)

        if self.partition_starts is None:
            indices = np.arange(self.n_tilings) * self.tiling_size + coords @ self._strides
        else:
            indices = np.array([
                self.partition_starts[t] + tile_hash(
                    t, coords[t], int(self.partition_starts[t + 1] - self.partition_starts[t])
                )
                for t in range(self.n_tilings)
            ], dtype=np.int64)

        return SparseFeatures(self._n_features, indices)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": "tile_coding",
            "bounds": np.column_stack([self._low, self._high]).tolist(),
            "n_tilings": self.n_tilings,
            "tiles_per_dim": self.tiles_per_dim.tolist(),
            "memory_size": self.memory_size,
            "offsets": self.offsets.tolist(),
        }

    @classmethod
    def _from_dict(cls, data: Dict[str, Any]) -> 'TileCoding':
        return cls(
            data["bounds"],
            data["n_tilings"],
            data["tiles_per_dim"],
            memory_size=data.get("memory_size"),
            offsets=data.get("offsets"),
        )
