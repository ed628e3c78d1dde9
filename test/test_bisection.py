"""
Tests for root-finding with the bisection method.
"""

import math
import unittest

import numpy as np

from roots.bisection import bisection
from roots.constants import TOL
from roots.exit_status import CONVERGED, BEST_EFFORT, NO_SIGN_CHANGE


class TestBisection(unittest.TestCase):
    """Test root-finding with the bisection method."""

    def test_sqrt_two(self):
        """Find the positive root of x^2 - 2 on [0, 2]."""

        def obj(x):
            return x ** 2 - 2

        result = bisection(obj, 0.0, 2.0)

        self.assertTrue(result.converged, "Bisection reported failure!")
        self.assertAlmostEqual(result.root, math.sqrt(2), delta=1e-6)
        self.assertTrue(abs(obj(result.root)) < TOL)

    def test_no_sign_change(self):
        """The precondition check should fail without iterating."""
        calls = []

        def obj(x):
            calls.append(x)
            return x ** 2 + 1

        result = bisection(obj, -1.0, 1.0)

        self.assertEqual(result.status, NO_SIGN_CHANGE)
        self.assertIsNone(result.root)
        self.assertEqual(result.n_iters, 0)
        self.assertEqual(len(calls), 2)
        self.assertEqual(result.n_evals, 2)

    def test_endpoint_roots(self):
        """Roots at the endpoints are returned immediately."""

        def obj(x):
            return x - 1

        result = bisection(obj, 1.0, 3.0)
        self.assertEqual(result.status, CONVERGED)
        self.assertEqual(result.root, 1.0)
        self.assertEqual(result.n_iters, 0)

        result = bisection(obj, -1.0, 1.0)
        self.assertEqual(result.status, CONVERGED)
        self.assertEqual(result.root, 1.0)
        self.assertEqual(result.n_iters, 0)

    def test_best_effort(self):
        """Reaching the iteration cap returns the last midpoint."""

        result = bisection(lambda x: x ** 2 - 2, 0.0, 2.0, max_iters=3)

        self.assertEqual(result.status, BEST_EFFORT)
        self.assertTrue(result.success)
        self.assertFalse(result.converged)
        self.assertEqual(result.root, 1.25)
        self.assertEqual(result.n_iters, 3)
        self.assertEqual(result.n_evals, 5)

    def test_reversed_endpoints(self):
        """The endpoints may be passed in either order."""

        def obj(x):
            return x ** 3 - x - 1

        self.assertEqual(bisection(obj, 1.0, 2.0), bisection(obj, 2.0, 1.0))

    def test_bracket_invariant(self):
        """The bracket must contain a sign change after every iteration."""

        def obj(x):
            return np.exp(x) - 3

        brackets = []
        result = bisection(obj, -1.0, 4.0, callback=lambda i, a, b: brackets.append((a, b)))

        self.assertTrue(result.converged)
        self.assertEqual(len(brackets), result.n_iters - 1)

        width = 5.0
        for a, b in brackets:
            self.assertTrue(np.sign(obj(a)) * np.sign(obj(b)) <= 0)
            self.assertAlmostEqual(b - a, width / 2, delta=1e-12)
            width = b - a

    def test_idempotence(self):
        """Identical inputs give bit-identical results."""

        def obj(x):
            return math.cos(x) - x

        self.assertEqual(bisection(obj, 0.0, 1.0), bisection(obj, 0.0, 1.0))

    def test_numpy_objective(self):
        """Numpy scalars returned by the objective are converted to floats."""

        result = bisection(lambda x: np.float64(x) - 1.5, 0.0, 2.0)

        self.assertEqual(result.root, 1.5)
        self.assertIsInstance(result.root, float)

    def test_invalid_options(self):
        with self.assertRaises(ValueError):
            bisection(lambda x: x, -1.0, 1.0, tol=0.0)
        with self.assertRaises(ValueError):
            bisection(lambda x: x, -1.0, 1.0, max_iters=0)

    def test_errors_propagate(self):
        """Exceptions raised by the objective reach the caller."""

        class Cancelled(Exception):
            pass

        def obj(x):
            if x > 0.5:
                raise Cancelled()
            return x - 0.7

        with self.assertRaises(Cancelled):
            bisection(obj, 0.0, 2.0)


if __name__ == "__main__":
    unittest.main()
