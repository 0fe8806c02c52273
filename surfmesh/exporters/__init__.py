"""Mesh file exporters for surfmesh."""
import os

from .base import MeshExporter
from .registry import get_available_formats, get_exporter, register_exporter

# Import formats last so they register themselves
from . import obj, stl, ply

from ..exceptions import ExportError
from ..mesh import MeshBuffers


def export_mesh(buffers: MeshBuffers, filename: str, format_name: str = None, **kwargs) -> str:
    """
    Export mesh buffers, picking the format from ``format_name`` or the file extension.

    Returns:
        Path of the written file

    Raises:
        ExportError: If the format is unknown or the file can't be written
    """
    if format_name is None:
        format_name = os.path.splitext(filename)[1].lstrip('.') or 'obj'
    try:
        exporter = get_exporter(format_name)
    except ValueError as e:
        raise ExportError(str(e)) from e
    return exporter.export(buffers, filename, **kwargs)


__all__ = [
    'MeshExporter',
    'export_mesh',
    'get_available_formats',
    'get_exporter',
    'register_exporter',
]
