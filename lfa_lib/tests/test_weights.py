"""
Tests for the weight store.
"""

import unittest
import numpy as np

from lfa_lib.errors import DimensionMismatch, InvalidIndex
from lfa_lib.features import DenseFeatures, SparseFeatures
from lfa_lib.function_approx import Weights


class TestWeights(unittest.TestCase):
    """Test cases for Weights."""

    def test_zero_initialised(self):
        w = Weights.create(4, 2)
        self.assertEqual(w.shape, (4, 2))
        self.assertTrue(np.all(w.values == 0.0))

    def test_initial_values(self):
        w = Weights(3, 1, [1.0, 2.0, 3.0])
        self.assertEqual(w.shape, (3, 1))
        self.assertAlmostEqual(w.predict_column(DenseFeatures([1.0, 1.0, 1.0]), 0), 6.0)

    def test_initial_values_shape_mismatch(self):
        with self.assertRaises(DimensionMismatch):
            Weights(3, 2, np.zeros((2, 3)))

    def test_predict_column_matches_dot(self):
        values = np.arange(12, dtype=float).reshape(4, 3)
        w = Weights(4, 3, values)
        f = SparseFeatures(4, [0, 2], [1.0, -2.0])

        for j in range(3):
            self.assertAlmostEqual(w.predict_column(f, j), f.dot(values[:, j]))
        np.testing.assert_allclose(w.predict(f), f.to_dense() @ values)

    def test_update_column_only_touches_that_column(self):
        w = Weights(3, 2)
        w.update_column(SparseFeatures(3, [1]), 1, 0.5)

        np.testing.assert_allclose(w.values, [[0.0, 0.0], [0.0, 0.5], [0.0, 0.0]])

    def test_zero_learning_rate_is_identity(self):
        rng = np.random.default_rng(1)
        w = Weights(5, 2, rng.normal(size=(5, 2)))
        before = w.copy()

        w.update_column(DenseFeatures(rng.normal(size=5)), 0, 0.0)
        w.update_column(SparseFeatures(5, [1, 3]), 1, 0.0)

        np.testing.assert_array_equal(w.values, before.values)

    def test_update_then_inverse_restores(self):
        rng = np.random.default_rng(2)
        w = Weights(6, 1, rng.normal(size=6))
        before = w.copy()
        f = SparseFeatures(6, [0, 4, 5], rng.normal(size=3))

        w.update_column(f, 0, 0.37)
        self.assertFalse(w.within(before, 1e-12))
        w.update_column(f, 0, -0.37)

        self.assertTrue(w.within(before, 1e-12))

    def test_column_out_of_range(self):
        w = Weights(3, 2)
        with self.assertRaises(InvalidIndex):
            w.predict_column(DenseFeatures([1.0, 1.0, 1.0]), 2)

    def test_feature_dimension_mismatch(self):
        w = Weights(3, 1)
        with self.assertRaises(DimensionMismatch):
            w.update_column(DenseFeatures([1.0, 1.0]), 0, 1.0)
        self.assertTrue(np.all(w.values == 0.0))

    def test_plain_data_round_trip(self):
        w = Weights(2, 2, [[1.0, 2.0], [3.0, 4.0]])
        restored = Weights.from_dict(w.to_dict())

        self.assertEqual(w.to_dict()["values"], [[1.0, 2.0], [3.0, 4.0]])
        self.assertTrue(restored.within(w, 0.0))


if __name__ == '__main__':
    unittest.main()
