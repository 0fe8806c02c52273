"""
Unit tests for finite-difference normal estimation.
"""
import math
import unittest

import numpy as np

from surfmesh.config import Boundary
from surfmesh.normals import (
    STEPS_PER_CELL,
    estimate_normal,
    finite_difference_step,
    height_field_normal,
    parametric_normal,
)
from surfmesh.vector import Point3, norm


class TestFiniteDifferenceStep(unittest.TestCase):
    """Test cases for the shared tangent step."""

    def test_uses_shorter_span(self):
        boundary = Boundary(-1.0, 1.0, 0.0, 0.5)
        self.assertAlmostEqual(finite_difference_step(boundary, 4), 0.5 / (STEPS_PER_CELL * 4))

    def test_default_height_field_step(self):
        boundary = Boundary(-1.0, 1.0, -1.0, 1.0)
        self.assertAlmostEqual(finite_difference_step(boundary, 16), 2.0 / (256 * 16))


class TestNormalEstimation(unittest.TestCase):
    """Test cases for the height-field and parametric estimators."""

    def test_flat_height_field_points_up(self):
        n = height_field_normal(lambda x, y: 0.0, 0.3, -0.2, 1e-3)
        np.testing.assert_allclose(n, (0.0, 0.0, 1.0), atol=1e-12)

    def test_tilted_plane(self):
        # z = x has normal (-1, 0, 1) / sqrt(2)
        n = height_field_normal(lambda x, y: x, 0.0, 0.0, 1e-3)
        expected = np.array([-1.0, 0.0, 1.0]) / math.sqrt(2.0)
        np.testing.assert_allclose(n, expected, atol=1e-9)

    def test_paraboloid_close_to_analytic(self):
        x, y = 0.4, -0.3
        n = height_field_normal(lambda px, py: px * px + py * py, x, y, 1e-4)
        analytic = np.array([-2 * x, -2 * y, 1.0])
        analytic /= np.linalg.norm(analytic)
        np.testing.assert_allclose(n, analytic, atol=1e-3)
        self.assertAlmostEqual(norm(n), 1.0, places=12)

    def test_parametric_plane(self):
        n = parametric_normal(lambda u, v: (u, v, 0.0), 0.5, 0.5, 1e-3)
        np.testing.assert_allclose(n, (0.0, 0.0, 1.0), atol=1e-12)

    def test_parametric_swapped_axes_flips_normal(self):
        n = parametric_normal(lambda u, v: (v, u, 0.0), 0.5, 0.5, 1e-3)
        np.testing.assert_allclose(n, (0.0, 0.0, -1.0), atol=1e-12)

    def test_generic_estimator_uses_sampler(self):
        calls = []

        def sample(p1, p2):
            calls.append((p1, p2))
            return Point3(p1, p2, 0.0)

        estimate_normal(sample, 1.0, 2.0, 0.5)
        self.assertEqual(calls, [(1.0, 2.0), (1.5, 2.0), (1.0, 2.5)])

    def test_degenerate_tangents_give_nan(self):
        """Parallel tangents are not corrected."""
        n = parametric_normal(lambda u, v: (u + v, 0.0, 0.0), 0.0, 0.0, 1e-3)
        self.assertTrue(all(math.isnan(c) for c in n))

    def test_surface_function_errors_propagate(self):
        def broken(x, y):
            raise ZeroDivisionError("boom")

        with self.assertRaises(ZeroDivisionError):
            height_field_normal(broken, 0.0, 0.0, 1e-3)


if __name__ == '__main__':
    unittest.main()
