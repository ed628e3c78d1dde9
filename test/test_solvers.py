"""
Tests for looking up and calling root-finders by name.
"""

import logging
import math
import unittest

from parameterized import parameterized  # type: ignore

from roots.solvers import find_root, get_solver, METHODS
from roots.logs import get_logger
from roots.exit_status import BEST_EFFORT


def sqrt_obj(x):
    return x ** 2 - 2


def sqrt_grad(x):
    return 2 * x


class TestSolvers(unittest.TestCase):
    """Test the root-finder index."""

    @parameterized.expand([(method,) for method in METHODS])
    def test_find_root(self, method):
        result = find_root(method, sqrt_obj, 0.0, 2.0, x0=1.0, g=sqrt_grad)

        self.assertTrue(result.converged, f"{method} reported failure!")
        self.assertEqual(result.method, method)
        self.assertAlmostEqual(result.root, math.sqrt(2), delta=1e-6)

    def test_get_solver_options(self):
        solver = get_solver({"name": "bisection", "max_iters": 3})
        result = solver(sqrt_obj, 0.0, 2.0)

        self.assertEqual(result.status, BEST_EFFORT)
        self.assertEqual(result.root, 1.25)

    def test_bad_configs(self):
        with self.assertRaises(ValueError):
            get_solver({})
        with self.assertRaises(ValueError):
            get_solver({"name": "brent"})

    def test_missing_arguments(self):
        with self.assertRaises(ValueError):
            find_root("newton", sqrt_obj, 0.0, 2.0, x0=1.0)
        with self.assertRaises(ValueError):
            find_root("secant", sqrt_obj, 0.0, 2.0)


class TestLogging(unittest.TestCase):
    """Test logger configuration and solver log records."""

    def test_levels(self):
        self.assertEqual(get_logger("roots.test.quiet").level, logging.WARNING)
        self.assertEqual(get_logger("roots.test.verbose", verbose=True).level, logging.INFO)
        self.assertEqual(
            get_logger("roots.test.debug", verbose=True, debug=True).level, logging.DEBUG
        )

    def test_failures_are_logged(self):
        logger = logging.getLogger("roots.bisection")
        with self.assertLogs(logger, level="INFO") as logs:
            find_root("bisection", lambda x: x ** 2 + 1, -1.0, 1.0, logger=logger)

        self.assertEqual(len(logs.records), 1)
        self.assertIn("no sign change", logs.output[0])

    def test_default_logger_is_untouched(self):
        """Calls without a logger leave the package logger configuration alone."""
        package_logger = logging.getLogger("roots")
        level = package_logger.level

        find_root("bisection", sqrt_obj, 0.0, 2.0)

        self.assertEqual(package_logger.level, level)

    def test_custom_logger(self):
        logger = logging.getLogger("roots.test.custom")
        with self.assertLogs(logger, level="DEBUG") as logs:
            find_root("secant", lambda x: math.cos(x) - x, 0.0, 1.0, x0=1.0, logger=logger)

        self.assertIn("converged", logs.output[0])


if __name__ == "__main__":
    unittest.main()
