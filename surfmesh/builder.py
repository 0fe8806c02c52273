"""Grid sampling and buffer assembly."""

import time
import logging

import numpy as np

from .config import SurfaceConfig
from .mesh import MeshBuffers
from .normals import finite_difference_step
from .samplers import SurfaceSampler
from .topology import grid_indices
from .utils.logging import mesh_logger

logger = logging.getLogger(__name__)


def grid_parameter(index: int, slices: int, low: float, high: float) -> float:
    """
    Parameter value of grid line ``index``.

    Interpolates as ``((slices - index) * low + index * high) / slices`` so
    the first and last lines land on the boundary values.
    """
    return ((slices - index) * low + index * high) / slices


def sample_grid(sampler: SurfaceSampler, config: SurfaceConfig):
    """
    Sample vertex positions and normals on the configuration grid.

    Rows follow the second parameter, columns the first; columns vary
    fastest::

        j = 2  . . .   p2
        j = 1  . . .   ^
        j = 0  . . .   |
           i = 0 1 2   ---> p1

    Returns:
        Tuple of flat ``(vertices, normals)`` float64 arrays
    """
    b = config.boundary
    slices = config.slices
    delta = finite_difference_step(b, slices)

    vertices = []
    normals = []

    for j in range(slices + 1):  # iterate parameter 2 (row)
        p2 = grid_parameter(j, slices, b.min2, b.max2)
        for i in range(slices + 1):  # iterate parameter 1 (column)
            p1 = grid_parameter(i, slices, b.min1, b.max1)

            point = sampler.point(p1, p2)
            normal = sampler.normal(p1, p2, delta)

            vertices.extend(point)
            normals.extend(normal)

    return np.array(vertices, dtype=np.float64), np.array(normals, dtype=np.float64)


def build_mesh(sampler: SurfaceSampler, config: SurfaceConfig) -> MeshBuffers:
    """
    Build mesh buffers for a sampled surface.

    Args:
        sampler: Height-field or parametric sampler
        config: Validated build configuration

    Returns:
        Freshly allocated MeshBuffers

    Exceptions raised by the surface function propagate unchanged.
    """
    start = time.perf_counter()

    vertices, normals = sample_grid(sampler, config)
    indices = grid_indices(config.slices, double_sided=config.double_sided)

    buffers = MeshBuffers(
        vertices=vertices,
        normals=normals,
        indices=indices,
        slices=config.slices,
        coords=config.coords,
    )

    degenerate = buffers.degenerate_normal_count()
    if degenerate:
        mesh_logger.warning(
            "Non-finite normals produced",
            kind=sampler.kind,
            count=degenerate,
            vertices=buffers.vertex_count,
        )

    mesh_logger.info(
        "Built surface mesh",
        kind=sampler.kind,
        slices=config.slices,
        vertices=buffers.vertex_count,
        triangles=buffers.triangle_count,
        double_sided=config.double_sided,
        elapsed_ms=round((time.perf_counter() - start) * 1000.0, 3),
    )
    return buffers
