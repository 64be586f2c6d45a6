"""
Tests for output transforms and transformed approximators.
"""

import math
import unittest
import numpy as np

from lfa_lib.basis import Polynomial
from lfa_lib.errors import DimensionMismatch
from lfa_lib.function_approx import (
    LFA, TransformedLFA, Identity, Softplus, Logistic, Exp
)


class TestTransforms(unittest.TestCase):
    """Test cases for the transform functions."""

    def test_gradients_match_finite_differences(self):
        eps = 1e-6
        for transform in (Identity(), Softplus(), Logistic(), Exp()):
            for x in (-2.0, 0.0, 1.5):
                numeric = (transform(x + eps) - transform(x - eps)) / (2 * eps)
                self.assertAlmostEqual(float(transform.grad(x)), numeric, places=5)

    def test_softplus_is_stable_for_large_inputs(self):
        self.assertAlmostEqual(float(Softplus()(1000.0)), 1000.0)
        self.assertTrue(np.isfinite(Softplus()(-1000.0)))


class TestTransformedLFA(unittest.TestCase):
    """Test cases for TransformedLFA."""

    def test_softplus_initial_prediction(self):
        fa = TransformedLFA.scalar(Polynomial(1, 1), Softplus())
        prediction = fa.predict([0.3])

        self.assertIsInstance(prediction, float)
        self.assertAlmostEqual(prediction, math.log(2.0))

    def test_update_applies_chain_rule(self):
        fa = TransformedLFA.scalar(Polynomial(0, 1), Logistic())

        # Logistic gradient at 0 is 0.25
        fa.update([0.0], 1.0, 2.0)

        np.testing.assert_allclose(fa.weights.values, [[0.5]])
        self.assertGreater(fa.predict([0.0]), 0.5)

    def test_predict_and_update_moves_toward_target(self):
        fa = TransformedLFA.scalar(Polynomial(1, 1), Softplus())
        x = [0.5]
        start = abs(fa.predict(x) - 3.0)

        for _ in range(200):
            fa.predict_and_update(x, 3.0, 0.2)

        self.assertLess(abs(fa.predict(x) - 3.0), start / 10)

    def test_vector_outputs(self):
        fa = TransformedLFA.vector(Polynomial(0, 1), 2, Exp())

        np.testing.assert_allclose(fa.predict([1.0]), [1.0, 1.0])
        fa.update([1.0], [1.0, -1.0], 0.1)
        np.testing.assert_allclose(fa.weights.values, [[0.1, -0.1]])

        jac = fa.jacobian(fa.embed([1.0]))
        np.testing.assert_allclose(jac, [[math.exp(0.1), math.exp(-0.1)]])

    def test_vector_error_length(self):
        fa = TransformedLFA.vector(Polynomial(0, 1), 2, Softplus())
        with self.assertRaises(DimensionMismatch):
            fa.update([1.0], [1.0, 2.0, 3.0], 0.1)

    def test_round_trip(self):
        fa = TransformedLFA(LFA.pair(Polynomial(2, 1)), Softplus())
        fa.update([0.4], [1.0, -1.0], 0.5)

        restored = TransformedLFA.from_dict(fa.to_dict())

        self.assertTrue(restored.within(fa, 0.0))
        np.testing.assert_allclose(restored.predict([0.4]), fa.predict([0.4]))

    def test_rejects_non_lfa(self):
        with self.assertRaises(TypeError):
            TransformedLFA(object(), Softplus())


if __name__ == '__main__':
    unittest.main()
