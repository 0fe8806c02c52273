"""Index buffer generation for a regular (slices+1) x (slices+1) vertex grid."""

import logging
from typing import Tuple

import numpy as np

from .config import validate_slices

logger = logging.getLogger(__name__)

# Number of times the two-winding block is emitted per cell in double-sided mode
DOUBLE_SIDED_PASSES = 2


def vertex_index(row: int, column: int, slices: int) -> int:
    """Flat index of grid vertex ``(row, column)``."""
    return row * (slices + 1) + column


def cell_corners(i: int, j: int, slices: int) -> Tuple[int, int, int, int]:
    """
    Corner vertex indices of cell ``(i, j)``.

    Returns:
        ``(v1, v2, v3, v4)``: lower-left, lower-right, upper-right, upper-left
    """
    above = slices + 1
    current = j * above + i

    # ... v4  v3 ... --- row j + 1
    #
    # ... v1  v2 ... --- row j
    v1 = current
    v2 = current + 1
    v3 = current + 1 + above
    v4 = current + above
    return v1, v2, v3, v4


def triangles_per_cell(double_sided: bool = True) -> int:
    return 4 * DOUBLE_SIDED_PASSES if double_sided else 2


def grid_indices(slices: int, double_sided: bool = True) -> np.ndarray:
    """
    Create the triangle index buffer for a vertex grid.

    Every cell is split along its v1-v3 diagonal. In double-sided mode each
    cell gets both windings, ``(v1,v2,v3) (v1,v3,v4)`` and
    ``(v1,v3,v2) (v1,v4,v3)``, and that block is emitted twice, giving eight
    triangles per cell. Single-sided mode keeps only the first winding.

    Args:
        slices: Grid resolution (cells per side)
        double_sided: Emit both windings

    Returns:
        Flat int32 array, consecutive triples form triangles

    Raises:
        InvalidSlicesError: If slices is not a positive integer
    """
    slices = validate_slices(slices)
    indices = []

    for j in range(slices):  # iterate rows (parameter 2)
        for i in range(slices):  # iterate columns (parameter 1)
            v1, v2, v3, v4 = cell_corners(i, j, slices)

            if not double_sided:
                indices.extend((v1, v2, v3, v1, v3, v4))
                continue

            for _ in range(DOUBLE_SIDED_PASSES):
                indices.extend((v1, v2, v3))
                indices.extend((v1, v3, v4))

                indices.extend((v1, v3, v2))
                indices.extend((v1, v4, v3))

    return np.array(indices, dtype=np.int32)


def grid_faces(slices: int, double_sided: bool = True) -> np.ndarray:
    """Same as :func:`grid_indices`, shaped ``(triangles, 3)``."""
    return grid_indices(slices, double_sided).reshape(-1, 3)
