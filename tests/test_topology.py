"""
Unit tests for the grid index generator.
"""
import unittest
from collections import Counter

import numpy as np
import pytest

from surfmesh.exceptions import InvalidSlicesError
from surfmesh.topology import (
    cell_corners,
    grid_faces,
    grid_indices,
    triangles_per_cell,
    vertex_index,
)


def _canonical(triangle):
    """Rotate a triangle so its smallest index comes first, keeping winding."""
    triangle = [int(v) for v in triangle]
    k = triangle.index(min(triangle))
    return tuple(triangle[k:] + triangle[:k])


class TestGridIndices(unittest.TestCase):
    """Test cases for index buffer layout."""

    def test_single_cell_layout(self):
        indices = grid_indices(1)
        block = [0, 1, 3, 0, 3, 2, 0, 3, 1, 0, 2, 3]
        self.assertEqual(indices.tolist(), block + block)
        self.assertEqual(indices.dtype, np.int32)

    def test_lengths(self):
        for slices in (1, 2, 3, 7, 16):
            with self.subTest(slices=slices):
                self.assertEqual(len(grid_indices(slices)), 24 * slices ** 2)
                self.assertEqual(len(grid_indices(slices, double_sided=False)), 6 * slices ** 2)

    def test_index_range(self):
        slices = 5
        indices = grid_indices(slices)
        self.assertGreaterEqual(indices.min(), 0)
        self.assertLess(indices.max(), (slices + 1) ** 2)
        # Every vertex belongs to at least one triangle
        self.assertEqual(len(np.unique(indices)), (slices + 1) ** 2)

    def test_cell_corners(self):
        # slices = 3 -> 4 vertices per row
        self.assertEqual(cell_corners(0, 0, 3), (0, 1, 5, 4))
        self.assertEqual(cell_corners(2, 1, 3), (6, 7, 11, 10))
        self.assertEqual(vertex_index(1, 2, 3), 6)

    def test_winding_duplication_per_cell(self):
        """Each cell gives two vertex sets, each twice per winding."""
        slices = 3
        per_cell = triangles_per_cell()
        self.assertEqual(per_cell, 8)
        faces = grid_faces(slices)

        for cell in range(slices * slices):
            triangles = faces[cell * per_cell:(cell + 1) * per_cell]
            vertex_sets = Counter(frozenset(int(v) for v in t) for t in triangles)
            self.assertEqual(len(vertex_sets), 2)
            self.assertTrue(all(count == 4 for count in vertex_sets.values()))

            windings = Counter(_canonical(t) for t in triangles)
            self.assertEqual(len(windings), 4)
            self.assertTrue(all(count == 2 for count in windings.values()))
            for a, b, c in windings:
                self.assertIn((a, c, b), windings)

    def test_single_sided_has_one_winding(self):
        faces = grid_faces(2, double_sided=False)
        self.assertEqual(faces.shape, (8, 3))
        windings = {_canonical(t) for t in faces}
        self.assertEqual(len(windings), 8)
        for a, b, c in windings:
            self.assertNotIn((a, c, b), windings)


@pytest.mark.parametrize("slices", [0, -1, 2.5, True, "4", None])
def test_invalid_slices_rejected(slices):
    with pytest.raises(InvalidSlicesError):
        grid_indices(slices)
