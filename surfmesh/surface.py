"""
Mesh objects for height-field and parametric surfaces.

A surface builds its buffers once when constructed. ``rebuild`` computes a
complete new set of buffers before replacing the old ones, so readers see
either the previous mesh or the new one, never a mix.
"""

import logging
from typing import Optional, Sequence

import numpy as np

from .builder import build_mesh
from .config import (
    SurfaceConfig,
    Boundary,
    Coords,
    DEFAULT_COORDS,
    HEIGHT_FIELD_BOUNDARY,
    HEIGHT_FIELD_SLICES,
    PARAMETRIC_BOUNDARY,
    PARAMETRIC_SLICES,
)
from .mesh import MeshBuffers, PrimitiveType
from .normals import HeightFunction, ParametricFunction
from .samplers import SurfaceSampler, HeightFieldSampler, ParametricSampler

logger = logging.getLogger(__name__)


class Surface:
    """Base class owning a sampler, its configuration and the built buffers."""

    sampler_class = SurfaceSampler

    def __init__(self, function, config: SurfaceConfig):
        self.sampler = self.sampler_class(function)
        self.config = config
        self.buffers = build_mesh(self.sampler, config)

    def rebuild(self,
                boundary: Optional[Sequence[float]] = None,
                slices: Optional[int] = None,
                coords: Optional[Sequence[float]] = None,
                double_sided: Optional[bool] = None) -> MeshBuffers:
        """
        Rebuild the mesh with some parameters changed.

        On failure the previous configuration and buffers stay in place.

        Returns:
            The new buffers
        """
        changes = {}
        if boundary is not None:
            changes['boundary'] = Boundary.from_sequence(boundary)
        if slices is not None:
            changes['slices'] = slices
        if coords is not None:
            changes['coords'] = Coords.from_sequence(coords)
        if double_sided is not None:
            changes['double_sided'] = double_sided

        config = self.config.replace(**changes)
        buffers = build_mesh(self.sampler, config)

        self.config, self.buffers = config, buffers
        return buffers

    @property
    def function(self):
        return self.sampler.function

    @property
    def boundary(self) -> Boundary:
        return self.config.boundary

    @property
    def slices(self) -> int:
        return self.config.slices

    @property
    def coords(self) -> Coords:
        return self.config.coords

    @property
    def vertices(self) -> np.ndarray:
        return self.buffers.vertices

    @property
    def normals(self) -> np.ndarray:
        return self.buffers.normals

    @property
    def indices(self) -> np.ndarray:
        return self.buffers.indices

    @property
    def primitive_type(self) -> PrimitiveType:
        return self.buffers.primitive_type

    def __repr__(self) -> str:
        return (f"{type(self).__name__}({self.sampler!r}, boundary={self.boundary.as_list()}, "
                f"slices={self.slices})")


class HeightFieldSurface(Surface):
    """
    Mesh of the graph ``z = function(x, y)``.

    Args:
        function: Height function ``(x, y) -> z``
        boundary: ``[min_x, max_x, min_y, max_y]``
        slices: Cells along each side of the grid
        coords: ``[min_s, max_s, min_t, max_t]`` texture range, stored only
        double_sided: Emit both triangle windings for every cell
    """

    sampler_class = HeightFieldSampler

    def __init__(self,
                 function: HeightFunction,
                 boundary: Sequence[float] = HEIGHT_FIELD_BOUNDARY,
                 slices: int = HEIGHT_FIELD_SLICES,
                 coords: Sequence[float] = DEFAULT_COORDS,
                 double_sided: bool = True):
        config = SurfaceConfig.for_height_field(boundary, slices, coords, double_sided)
        super().__init__(function, config)


class ParametricSurface(Surface):
    """
    Mesh of the parametric surface ``P = function(u, v)``.

    Args:
        function: Mapping ``(u, v) -> (x, y, z)``
        boundary: ``[min_u, max_u, min_v, max_v]``
        slices: Cells along each side of the grid
        coords: ``[min_s, max_s, min_t, max_t]`` texture range, stored only
        double_sided: Emit both triangle windings for every cell
    """

    sampler_class = ParametricSampler

    def __init__(self,
                 function: ParametricFunction,
                 boundary: Sequence[float] = PARAMETRIC_BOUNDARY,
                 slices: int = PARAMETRIC_SLICES,
                 coords: Sequence[float] = DEFAULT_COORDS,
                 double_sided: bool = True):
        config = SurfaceConfig.for_parametric(boundary, slices, coords, double_sided)
        super().__init__(function, config)
