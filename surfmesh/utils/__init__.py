"""Shared helpers for surfmesh."""

import os

from .logging import StructuredLogger, configure_logging, mesh_logger


def ensure_directory_exists(filepath: str) -> None:
    """Create the parent directory of ``filepath`` if it is missing."""
    directory = os.path.dirname(os.path.abspath(filepath))
    os.makedirs(directory, exist_ok=True)


__all__ = [
    'StructuredLogger',
    'configure_logging',
    'mesh_logger',
    'ensure_directory_exists',
]
