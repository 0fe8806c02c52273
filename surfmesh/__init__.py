"""
SurfMesh Package.

Triangulated meshes (positions, normals, triangle indices) for height-field
surfaces ``z = f(x, y)`` and parametric surfaces ``P = f(u, v)``.
"""

__version__ = "0.1.0"

# Import the main exception classes for easy access
from surfmesh.exceptions import (
    SurfMeshException,
    ConfigurationError,
    InvalidSlicesError,
    MeshBuildError,
    ExportError,
    UnknownSurfaceError,
)

from surfmesh.vector import Point3, subtract, cross_product, normalize
from surfmesh.config import SurfaceConfig, Boundary, Coords
from surfmesh.mesh import MeshBuffers, PrimitiveType
from surfmesh.samplers import HeightFieldSampler, ParametricSampler
from surfmesh.builder import build_mesh
from surfmesh.topology import grid_indices
from surfmesh.surface import Surface, HeightFieldSurface, ParametricSurface
from surfmesh.catalog import create_surface, get_available_surfaces

__all__ = [
    'SurfMeshException',
    'ConfigurationError',
    'InvalidSlicesError',
    'MeshBuildError',
    'ExportError',
    'UnknownSurfaceError',
    'Point3',
    'subtract',
    'cross_product',
    'normalize',
    'SurfaceConfig',
    'Boundary',
    'Coords',
    'MeshBuffers',
    'PrimitiveType',
    'HeightFieldSampler',
    'ParametricSampler',
    'build_mesh',
    'grid_indices',
    'Surface',
    'HeightFieldSurface',
    'ParametricSurface',
    'create_surface',
    'get_available_surfaces',
]
