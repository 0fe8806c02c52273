"""Mesh buffer container handed to rendering and export code."""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Tuple

import numpy as np

from .config import Coords
from .exceptions import MeshBuildError

logger = logging.getLogger(__name__)


class PrimitiveType(str, Enum):
    """How consumers interpret the index buffer."""
    TRIANGLES = "triangles"


def validate_buffers(vertices: np.ndarray, normals: np.ndarray, indices: np.ndarray) -> None:
    """
    Check flat buffer shapes and index ranges.

    Raises:
        MeshBuildError: If the buffers are inconsistent
    """
    if vertices.ndim != 1 or vertices.size % 3 != 0:
        raise MeshBuildError(f"Vertex buffer must be flat with a multiple of 3 values, got shape {vertices.shape}")
    if normals.shape != vertices.shape:
        raise MeshBuildError(f"Normal buffer shape {normals.shape} doesn't match vertices {vertices.shape}")
    if indices.ndim != 1 or indices.size % 3 != 0:
        raise MeshBuildError(f"Index buffer must be flat with a multiple of 3 values, got shape {indices.shape}")

    vertex_count = vertices.size // 3
    if indices.size and (np.any(indices < 0) or np.any(indices >= vertex_count)):
        raise MeshBuildError("Index buffer references vertices outside the vertex buffer")


def _read_only(array: np.ndarray) -> np.ndarray:
    array.setflags(write=False)
    return array


@dataclass(frozen=True, eq=False)
class MeshBuffers:
    """
    Flat vertex, normal, and index buffers for one built surface.

    Arrays are made read-only on creation. ``coords`` is carried through
    untouched for texture mapping on the rendering side.
    """
    vertices: np.ndarray  # 3 * vertex_count float64
    normals: np.ndarray   # 3 * vertex_count float64, unit length
    indices: np.ndarray   # 3 * triangle_count int32
    slices: int
    coords: Coords = field(default_factory=Coords)
    primitive_type: PrimitiveType = PrimitiveType.TRIANGLES

    def __post_init__(self):
        """Validate and freeze buffers on creation."""
        vertices = np.array(self.vertices, dtype=np.float64).ravel()
        normals = np.array(self.normals, dtype=np.float64).ravel()
        indices = np.array(self.indices, dtype=np.int32).ravel()
        validate_buffers(vertices, normals, indices)

        object.__setattr__(self, 'vertices', _read_only(vertices))
        object.__setattr__(self, 'normals', _read_only(normals))
        object.__setattr__(self, 'indices', _read_only(indices))

    def __eq__(self, other):
        """Buffers compare by content; NaN normals at the same place are equal."""
        if not isinstance(other, MeshBuffers):
            return NotImplemented
        return (
            self.slices == other.slices
            and self.coords == other.coords
            and self.primitive_type == other.primitive_type
            and np.array_equal(self.vertices, other.vertices, equal_nan=True)
            and np.array_equal(self.normals, other.normals, equal_nan=True)
            and np.array_equal(self.indices, other.indices)
        )

    def __hash__(self):
        # Equal buffers always share these fields
        return hash((self.slices, self.vertex_count, self.triangle_count,
                     self.coords, self.primitive_type))

    @property
    def vertex_count(self) -> int:
        """Get number of vertices."""
        return self.vertices.size // 3

    @property
    def triangle_count(self) -> int:
        """Get number of triangles."""
        return self.indices.size // 3

    @property
    def positions(self) -> np.ndarray:
        """Vertices shaped ``(vertex_count, 3)``."""
        return self.vertices.reshape(-1, 3)

    @property
    def vertex_normals(self) -> np.ndarray:
        """Normals shaped ``(vertex_count, 3)``."""
        return self.normals.reshape(-1, 3)

    @property
    def faces(self) -> np.ndarray:
        """Indices shaped ``(triangle_count, 3)``."""
        return self.indices.reshape(-1, 3)

    @property
    def grid_shape(self) -> Tuple[int, int]:
        """Vertex grid dimensions ``(rows, columns)``."""
        return self.slices + 1, self.slices + 1

    def vertex(self, row: int, column: int) -> np.ndarray:
        """Position of grid vertex ``(row, column)``."""
        return self.positions[row * (self.slices + 1) + column]

    def normal(self, row: int, column: int) -> np.ndarray:
        """Normal of grid vertex ``(row, column)``."""
        return self.vertex_normals[row * (self.slices + 1) + column]

    def degenerate_normal_count(self) -> int:
        """Number of vertices whose normal has a non-finite component."""
        return int(np.count_nonzero(~np.isfinite(self.vertex_normals).all(axis=1)))

    def single_sided_faces(self) -> np.ndarray:
        """
        Faces with duplicates and reversed copies removed.

        Keeps the first occurrence of each vertex set, preserving its winding.
        """
        seen = set()
        keep = []
        for face in self.faces:
            key = frozenset(int(v) for v in face)
            if key in seen:
                continue
            seen.add(key)
            keep.append(face)
        return np.array(keep, dtype=np.int32).reshape(-1, 3)

    def get_bounding_box(self) -> Tuple[np.ndarray, np.ndarray]:
        """Get mesh bounding box."""
        return np.min(self.positions, axis=0), np.max(self.positions, axis=0)

    def stats(self) -> dict:
        """Summary used by logging and the command line."""
        min_bounds, max_bounds = self.get_bounding_box()
        return {
            "slices": self.slices,
            "vertices": self.vertex_count,
            "triangles": self.triangle_count,
            "degenerate_normals": self.degenerate_normal_count(),
            "bounds_min": [float(v) for v in min_bounds],
            "bounds_max": [float(v) for v in max_bounds],
        }
