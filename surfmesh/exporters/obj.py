"""
OBJ exporter.

Writes positions, per-vertex normals and triangles as a Wavefront OBJ text
file, which is widely supported across 3D modeling software.
"""

import logging

from ..mesh import MeshBuffers
from .base import MeshExporter
from .registry import register_exporter

# Set up logging
logger = logging.getLogger(__name__)


@register_exporter
class OBJExporter(MeshExporter):
    """Exporter for OBJ format."""

    format_name = "obj"
    file_extensions = ["obj"]
    supports_binary = False  # OBJ is a text-based format

    @classmethod
    def write(cls, buffers: MeshBuffers, filename: str, binary: bool = False, **kwargs) -> None:
        comment = kwargs.get('comment', "surfmesh OBJ export")

        with open(filename, 'w') as f:
            f.write(f"# {comment}\n")
            f.write(f"# vertices: {buffers.vertex_count} triangles: {buffers.triangle_count}\n")

            for x, y, z in buffers.positions:
                f.write(f"v {x:.6f} {y:.6f} {z:.6f}\n")

            for nx, ny, nz in buffers.vertex_normals:
                f.write(f"vn {nx:.6f} {ny:.6f} {nz:.6f}\n")

            # OBJ indices are 1-based
            for a, b, c in buffers.faces + 1:
                f.write(f"f {a}//{a} {b}//{b} {c}//{c}\n")
