"""
Tests for tile coding and its hash function.
"""

import unittest
import numpy as np

from lfa_lib.basis import TileCoding, tile_hash
from lfa_lib.basis.tile_coding import default_offsets
from lfa_lib.errors import DimensionMismatch, InvalidConfiguration, NonFiniteInput


class TestTileHash(unittest.TestCase):
    """Test cases for tile_hash."""

    def test_deterministic_and_in_range(self):
        for size in (1, 7, 64, 1000):
            for tiling in range(4):
                for coords in ([0, 0], [3, 1], [10, 20, 30]):
                    slot = tile_hash(tiling, coords, size)
                    self.assertEqual(slot, tile_hash(tiling, coords, size))
                    self.assertGreaterEqual(slot, 0)
                    self.assertLess(slot, size)

    def test_spreads_coordinates(self):
        """Distinct coordinates do not all land in the same few slots."""
        slots = {tile_hash(0, [i, j], 1024) for i in range(16) for j in range(16)}
        self.assertGreater(len(slots), 128)

    def test_invalid_size(self):
        with self.assertRaises(InvalidConfiguration):
            tile_hash(0, [1, 2], 0)


class TestTileCoding(unittest.TestCase):
    """Test cases for the TileCoding basis."""

    def test_default_offsets(self):
        np.testing.assert_allclose(default_offsets(4, 1)[:, 0], [0.0, 0.25, 0.5, 0.75])
        np.testing.assert_allclose(default_offsets(4, 2)[1], [0.25, 0.75])

    def test_unhashed_indices(self):
        basis = TileCoding([(0.0, 1.0)], 4, 4)

        self.assertEqual(basis.n_features, 20)
        self.assertEqual(sorted(basis.project([0.0]).indices()), [0, 5, 10, 15])
        self.assertEqual(sorted(basis.project([1.0]).indices()), [4, 9, 14, 19])

    def test_inputs_are_clipped(self):
        basis = TileCoding([(0.0, 1.0)], 4, 4)
        self.assertEqual(basis.project([-5.0]), basis.project([0.0]))
        self.assertEqual(basis.project([7.0]), basis.project([1.0]))

    def test_exactly_n_tilings_active(self):
        rng = np.random.default_rng(11)
        bounds = [(-1.0, 1.0), (0.0, 10.0), (5.0, 6.0)]
        for memory_size in (None, 24, 512):
            basis = TileCoding(bounds, 8, [4, 5, 6], memory_size=memory_size)
            for _ in range(50):
                x = rng.uniform([-1.5, -1.0, 4.0], [1.5, 11.0, 7.0])
                f = basis.project(x)

                self.assertTrue(f.is_sparse)
                self.assertEqual(f.n_active, 8)
                self.assertEqual(len(set(f.indices())), 8)
                self.assertTrue(all(0 <= i < basis.n_features for i in f.indices()))

    def test_hashed_indices_within_table(self):
        basis = TileCoding([(0.0, 1.0), (0.0, 1.0)], 8, 10, memory_size=64)
        rng = np.random.default_rng(5)

        self.assertEqual(basis.n_features, 64)
        for _ in range(100):
            indices = list(basis.project(rng.uniform(0.0, 1.0, size=2)).indices())
            self.assertEqual(len(indices), 8)
            self.assertTrue(all(0 <= i < 64 for i in indices))

    def test_nearby_points_share_tiles(self):
        basis = TileCoding([(0.0, 1.0)], 8, 10)
        near = set(basis.project([0.500]).indices()) & set(basis.project([0.505]).indices())
        far = set(basis.project([0.1]).indices()) & set(basis.project([0.9]).indices())

        self.assertGreaterEqual(len(near), 6)
        self.assertEqual(len(far), 0)

    def test_random_offsets_from_caller_rng(self):
        bounds = [(0.0, 1.0), (0.0, 1.0)]
        a = TileCoding(bounds, 6, 4, rng=np.random.default_rng(42))
        b = TileCoding(bounds, 6, 4, rng=np.random.default_rng(42))

        self.assertEqual(a.offsets.shape, (6, 2))
        self.assertTrue(np.all((a.offsets >= 0.0) & (a.offsets < 1.0)))
        np.testing.assert_array_equal(a.offsets, b.offsets)
        self.assertEqual(a.project([0.3, 0.7]), b.project([0.3, 0.7]))

    def test_invalid_configuration(self):
        bounds = [(0.0, 1.0)]
        with self.assertRaises(InvalidConfiguration):
            TileCoding(bounds, 0, 4)
        with self.assertRaises(InvalidConfiguration):
            TileCoding(bounds, 2, 0)
        with self.assertRaises(InvalidConfiguration):
            TileCoding(bounds, 4, 4, memory_size=3)
        with self.assertRaises(InvalidConfiguration):
            TileCoding(bounds, 2, 4, offsets=[[0.0], [1.0]])
        with self.assertRaises(DimensionMismatch):
            TileCoding(bounds, 2, [4, 4])

    def test_non_finite_inputs_rejected(self):
        for memory_size in (None, 16):
            basis = TileCoding([(0.0, 1.0)], 4, 4, memory_size=memory_size)
            for bad in (float('nan'), float('inf'), -float('inf')):
                with self.assertRaises(NonFiniteInput) as ctx:
                    basis.project([bad])
                self.assertEqual(ctx.exception.coordinate, 0)

    def test_non_finite_input_names_coordinate(self):
        basis = TileCoding([(0.0, 1.0), (0.0, 1.0)], 4, 4, memory_size=32)
        with self.assertRaises(NonFiniteInput) as ctx:
            basis.project([0.5, float('nan')])
        self.assertEqual(ctx.exception.coordinate, 1)

    def test_hashed_partitions_cover_table(self):
        """Uneven tables spread the remainder rows over the tilings."""
        basis = TileCoding([(0.0, 1.0)], 4, 16, memory_size=10)
        starts = basis.partition_starts

        np.testing.assert_array_equal(starts, [0, 2, 5, 7, 10])
        for x in np.linspace(0.0, 1.0, 41):
            indices = sorted(basis.project([x]).indices())
            for t, index in enumerate(indices):
                self.assertTrue(starts[t] <= index < starts[t + 1])

    def test_dimension_mismatch(self):
        basis = TileCoding([(0.0, 1.0), (0.0, 1.0)], 4, 4)
        with self.assertRaises(DimensionMismatch) as ctx:
            basis.project([0.1, 0.2, 0.3])
        self.assertEqual((ctx.exception.expected, ctx.exception.actual), (2, 3))


if __name__ == '__main__':
    unittest.main()
