"""
Unit tests for build configuration.
"""
import unittest

import numpy as np

from surfmesh.config import Boundary, Coords, SurfaceConfig
from surfmesh.exceptions import ConfigurationError, InvalidSlicesError


class TestBoundaryAndCoords(unittest.TestCase):
    """Test cases for the domain and texture range value objects."""

    def test_boundary_from_sequence(self):
        boundary = Boundary.from_sequence([-2, 3, 0, 0.5])
        self.assertEqual(boundary, Boundary(-2.0, 3.0, 0.0, 0.5))
        self.assertEqual(boundary.spans(), (5.0, 0.5))
        self.assertEqual(boundary.as_list(), [-2.0, 3.0, 0.0, 0.5])

    def test_boundary_accepts_numpy(self):
        boundary = Boundary.from_sequence(np.array([0.0, 1.0, 0.0, 2.0]))
        self.assertEqual(boundary.max2, 2.0)

    def test_malformed_boundary(self):
        for bad in ([0, 1, 0], [0, 1, 0, 1, 2], "abcd", [0, 1, "a", 1], 5, [0, True, 0, 1]):
            with self.subTest(bad=bad):
                with self.assertRaises(ConfigurationError):
                    Boundary.from_sequence(bad)

    def test_coords_default(self):
        self.assertEqual(Coords().as_list(), [0.0, 1.0, 0.0, 1.0])


class TestSurfaceConfig(unittest.TestCase):
    """Test cases for SurfaceConfig validation and serialization."""

    def test_height_field_defaults(self):
        config = SurfaceConfig.for_height_field()
        self.assertEqual(config.boundary.as_list(), [-1.0, 1.0, -1.0, 1.0])
        self.assertEqual(config.slices, 16)
        self.assertEqual(config.coords.as_list(), [0.0, 1.0, 0.0, 1.0])
        self.assertTrue(config.double_sided)

    def test_parametric_defaults(self):
        config = SurfaceConfig.for_parametric()
        self.assertEqual(config.boundary.as_list(), [0.0, 1.0, 0.0, 1.0])
        self.assertEqual(config.slices, 32)

    def test_sequences_are_coerced(self):
        config = SurfaceConfig(boundary=[0, 2, 0, 4], slices=3, coords=(0, 2, 0, 2))
        self.assertIsInstance(config.boundary, Boundary)
        self.assertIsInstance(config.coords, Coords)
        self.assertEqual(config.coords.max_s, 2.0)

    def test_invalid_slices(self):
        for bad in (0, -3, 1.0, False, "8"):
            with self.subTest(slices=bad):
                with self.assertRaises(InvalidSlicesError):
                    SurfaceConfig(slices=bad)

    def test_double_sided_must_be_bool(self):
        for bad in ("false", 0, 1, None):
            with self.subTest(double_sided=bad):
                with self.assertRaises(ConfigurationError):
                    SurfaceConfig(slices=1, double_sided=bad)

        with self.assertRaises(ConfigurationError):
            SurfaceConfig.from_dict({"slices": 1, "double_sided": "false"})
        self.assertFalse(SurfaceConfig(slices=1, double_sided=False).double_sided)

    def test_numpy_integer_slices(self):
        config = SurfaceConfig(slices=np.int64(5))
        self.assertEqual(config.slices, 5)
        self.assertIs(type(config.slices), int)

    def test_immutable(self):
        config = SurfaceConfig()
        with self.assertRaises(AttributeError):
            config.slices = 4

    def test_replace_validates(self):
        config = SurfaceConfig(slices=4)
        self.assertEqual(config.replace(slices=8).slices, 8)
        self.assertEqual(config.slices, 4)
        with self.assertRaises(InvalidSlicesError):
            config.replace(slices=0)

    def test_dict_round_trip(self):
        config = SurfaceConfig(boundary=[0, 1, -1, 1], slices=6, double_sided=False)
        data = config.as_dict()
        self.assertEqual(data['boundary'], [0.0, 1.0, -1.0, 1.0])
        self.assertNotIn('extra', data)
        self.assertEqual(SurfaceConfig.from_dict(data), config)

    def test_from_dict_keeps_unknown_keys(self):
        config = SurfaceConfig.from_dict({'slices': 2, 'label': 'bowl'})
        self.assertEqual(config.slices, 2)
        self.assertEqual(config.extra, {'label': 'bowl'})
        self.assertEqual(config.as_dict()['extra'], {'label': 'bowl'})


if __name__ == '__main__':
    unittest.main()
