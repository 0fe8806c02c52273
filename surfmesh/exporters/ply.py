"""PLY exporter (ASCII) with per-vertex normals."""

import logging

from ..mesh import MeshBuffers
from .base import MeshExporter
from .registry import register_exporter

# Set up logging
logger = logging.getLogger(__name__)


@register_exporter
class PLYExporter(MeshExporter):
    """Exporter for PLY format."""

    format_name = "ply"
    file_extensions = ["ply"]
    supports_binary = False

    @classmethod
    def write(cls, buffers: MeshBuffers, filename: str, binary: bool = False, **kwargs) -> None:
        with open(filename, 'w') as f:
            f.write("ply\n")
            f.write("format ascii 1.0\n")
            f.write("comment surfmesh PLY export\n")
            f.write(f"element vertex {buffers.vertex_count}\n")
            for prop in ("x", "y", "z", "nx", "ny", "nz"):
                f.write(f"property float {prop}\n")
            f.write(f"element face {buffers.triangle_count}\n")
            f.write("property list uchar int vertex_indices\n")
            f.write("end_header\n")

            for position, normal in zip(buffers.positions, buffers.vertex_normals):
                values = " ".join(f"{v:.6f}" for v in (*position, *normal))
                f.write(f"{values}\n")

            for a, b, c in buffers.faces:
                f.write(f"3 {a} {b} {c}\n")
