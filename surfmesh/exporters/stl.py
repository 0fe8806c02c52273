"""
STL exporter.

STL stores one normal per facet, so facet normals are recomputed from the
triangle corners; vertex normals are not used.
"""

import struct
import logging

import numpy as np

from ..mesh import MeshBuffers
from .base import MeshExporter
from .registry import register_exporter

# Set up logging
logger = logging.getLogger(__name__)


def calculate_face_normals(positions: np.ndarray, faces: np.ndarray) -> np.ndarray:
    """
    Calculate unit normal vectors for each face.

    Degenerate faces get a zero normal, which STL readers treat as
    "compute it yourself".
    """
    normals = np.zeros((len(faces), 3))

    for i, face in enumerate(faces):
        v0, v1, v2 = positions[face]
        normal = np.cross(v1 - v0, v2 - v0)
        norm = np.linalg.norm(normal)
        if norm > 0:
            normals[i] = normal / norm

    return normals


@register_exporter
class STLExporter(MeshExporter):
    """Exporter for STL format."""

    format_name = "stl"
    file_extensions = ["stl"]
    supports_binary = True

    @classmethod
    def write(cls, buffers: MeshBuffers, filename: str, binary: bool = True, **kwargs) -> None:
        positions = buffers.positions
        faces = buffers.faces
        normals = calculate_face_normals(positions, faces)

        if binary:
            write_binary_stl(positions, faces, normals, filename)
        else:
            write_ascii_stl(positions, faces, normals, filename, kwargs.get('solid_name', 'surfmesh'))


def write_binary_stl(positions: np.ndarray, faces: np.ndarray, normals: np.ndarray, filename: str) -> None:
    """
    Write mesh data to a binary STL file.

    Args:
        positions: Array of vertex coordinates
        faces: Array of face indices
        normals: Array of facet normals
        filename: Output filename
    """
    with open(filename, 'wb') as f:
        # Write STL header (80 bytes)
        f.write(b'surfmesh STL exporter'.ljust(80, b' '))

        # Write number of triangles (4 bytes)
        f.write(struct.pack('<I', len(faces)))

        for i, face in enumerate(faces):
            f.write(struct.pack('<fff', *normals[i]))
            for idx in face:
                f.write(struct.pack('<fff', *positions[idx]))
            # Attribute byte count (2 bytes, usually zero)
            f.write(struct.pack('<H', 0))


def write_ascii_stl(positions: np.ndarray, faces: np.ndarray, normals: np.ndarray,
                    filename: str, solid_name: str = "surfmesh") -> None:
    """Write mesh data to an ASCII STL file."""
    with open(filename, 'w') as f:
        f.write(f"solid {solid_name}\n")
        for i, face in enumerate(faces):
            nx, ny, nz = normals[i]
            f.write(f"  facet normal {nx:.6e} {ny:.6e} {nz:.6e}\n")
            f.write("    outer loop\n")
            for idx in face:
                x, y, z = positions[idx]
                f.write(f"      vertex {x:.6e} {y:.6e} {z:.6e}\n")
            f.write("    endloop\n")
            f.write("  endfacet\n")
        f.write(f"endsolid {solid_name}\n")
