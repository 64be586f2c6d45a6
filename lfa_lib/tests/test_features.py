"""
Tests for the features module.
"""

import unittest
import numpy as np

from lfa_lib.errors import DimensionMismatch, InvalidIndex
from lfa_lib.features import DenseFeatures, SparseFeatures


class TestDenseFeatures(unittest.TestCase):
    """Test cases for dense feature vectors."""

    def test_dot_and_scaled_add(self):
        """Dense dot and in-place update run over every position."""
        f = DenseFeatures([1.0, 0.0, 2.0])
        w = np.array([3.0, 5.0, -1.0])

        self.assertAlmostEqual(f.dot(w), 1.0)

        f.scaled_add_into(w, 0.5)
        np.testing.assert_allclose(w, [3.5, 5.0, 0.0])

    def test_scaled_add_into_column_view(self):
        """Updates through a column view reach the underlying table."""
        table = np.zeros((3, 2))
        DenseFeatures([1.0, 2.0, 3.0]).scaled_add_into(table[:, 1], 2.0)

        np.testing.assert_allclose(table[:, 0], 0.0)
        np.testing.assert_allclose(table[:, 1], [2.0, 4.0, 6.0])

    def test_scaled_add_into_rejects_non_array_columns(self):
        """A list would be copied and the update lost, so it is refused."""
        w = [0.0, 0.0, 0.0]
        for f in (DenseFeatures([1.0, 1.0, 1.0]), SparseFeatures(3, [1])):
            with self.assertRaises(TypeError):
                f.scaled_add_into(w, 1.0)
            self.assertEqual(w, [0.0, 0.0, 0.0])

            # dot only reads, so a list is fine there
            self.assertEqual(f.dot(w), 0.0)

    def test_scaled_add_into_rejects_read_only_and_integer_columns(self):
        frozen = np.zeros(3)
        frozen.flags.writeable = False
        f = DenseFeatures([1.0, 2.0, 3.0])

        with self.assertRaises(TypeError):
            f.scaled_add_into(frozen, 1.0)
        with self.assertRaises(TypeError):
            f.scaled_add_into(np.zeros(3, dtype=np.int64), 1.0)

    def test_column_length_mismatch(self):
        f = DenseFeatures([1.0, 2.0])
        with self.assertRaises(DimensionMismatch) as ctx:
            f.dot(np.zeros(3))
        self.assertEqual(ctx.exception.expected, 2)
        self.assertEqual(ctx.exception.actual, 3)

    def test_norms(self):
        f = DenseFeatures([3.0, -4.0])
        self.assertAlmostEqual(f.l1(), 7.0)
        self.assertAlmostEqual(f.l2(), 5.0)
        self.assertAlmostEqual(f.linf(), 4.0)


class TestSparseFeatures(unittest.TestCase):
    """Test cases for sparse feature vectors."""

    def test_binary_dot(self):
        """Binary sparse features sum the selected weights."""
        f = SparseFeatures(5, [0, 3])
        w = np.arange(5, dtype=float)

        self.assertTrue(f.is_binary)
        self.assertEqual(f.n_active, 2)
        self.assertAlmostEqual(f.dot(w), 3.0)

    def test_scaled_add_touches_only_active(self):
        f = SparseFeatures(5, [1, 4], [2.0, -1.0])
        w = np.ones(5)

        f.scaled_add_into(w, 0.5)

        np.testing.assert_allclose(w, [1.0, 2.0, 1.0, 1.0, 0.5])

    def test_dot_matches_dense(self):
        """The sparse path agrees with materialising a dense copy."""
        rng = np.random.default_rng(7)
        for _ in range(20):
            n = int(rng.integers(1, 40))
            k = int(rng.integers(0, n + 1))
            idx = rng.choice(n, size=k, replace=False)
            vals = rng.normal(size=k)
            w = rng.normal(size=n)

            f = SparseFeatures(n, idx, vals)
            self.assertAlmostEqual(f.dot(w), float(np.dot(f.to_dense(), w)), places=10)

    def test_empty_is_valid(self):
        """An empty sparse vector is a no-op for dot and updates."""
        f = SparseFeatures(4, [])
        w = np.array([1.0, 2.0, 3.0, 4.0])

        self.assertEqual(f.dot(w), 0.0)
        f.scaled_add_into(w, 10.0)
        np.testing.assert_allclose(w, [1.0, 2.0, 3.0, 4.0])
        self.assertEqual(list(f.indices()), [])

    def test_index_equal_to_dimension_fails(self):
        with self.assertRaises(InvalidIndex) as ctx:
            SparseFeatures(5, [0, 5])
        self.assertEqual(ctx.exception.index, 5)
        self.assertEqual(ctx.exception.n_features, 5)

    def test_negative_index_fails(self):
        with self.assertRaises(InvalidIndex):
            SparseFeatures(5, [-1])

    def test_duplicate_indices_are_merged(self):
        f = SparseFeatures.from_pairs(4, [(1, 0.5), (1, 0.25), 2])

        self.assertEqual(f.n_active, 2)
        np.testing.assert_allclose(f.to_dense(), [0.0, 0.75, 1.0, 0.0])

    def test_mismatched_values_length(self):
        with self.assertRaises(DimensionMismatch):
            SparseFeatures(4, [0, 1], [1.0])

    def test_scaled(self):
        f = SparseFeatures(3, [2]) * 3.0
        self.assertTrue(f.is_sparse)
        np.testing.assert_allclose(f.to_dense(), [0.0, 0.0, 3.0])

    def test_equality_ignores_order(self):
        self.assertEqual(SparseFeatures(6, [4, 1]), SparseFeatures(6, [1, 4]))
        self.assertNotEqual(SparseFeatures(6, [4, 1]), SparseFeatures(7, [1, 4]))


class TestStacking(unittest.TestCase):
    """Test cases for concatenating feature vectors."""

    def test_sparse_with_sparse_stays_sparse(self):
        f = SparseFeatures(3, [1]).stack(SparseFeatures(4, [0, 3]))

        self.assertTrue(f.is_sparse)
        self.assertEqual(f.n_features, 7)
        self.assertEqual(sorted(f.indices()), [1, 3, 6])

    def test_sparse_with_dense_is_dense(self):
        f = SparseFeatures(2, [0]).stack(DenseFeatures([0.5, 0.25]))

        self.assertFalse(f.is_sparse)
        np.testing.assert_allclose(f.to_dense(), [1.0, 0.0, 0.5, 0.25])

    def test_dense_with_sparse_is_dense(self):
        f = DenseFeatures([2.0]).stack(SparseFeatures(2, [1], [3.0]))

        self.assertFalse(f.is_sparse)
        np.testing.assert_allclose(f.to_dense(), [2.0, 0.0, 3.0])


if __name__ == '__main__':
    unittest.main()
