#!/usr/bin/env python3
"""
SurfMesh Exceptions

This module defines custom exceptions used throughout the surfmesh library.
"""

class SurfMeshException(Exception):
    """Base class for all surfmesh exceptions."""
    pass

class ConfigurationError(SurfMeshException):
    """Exception raised when a surface configuration is malformed."""
    pass

class InvalidSlicesError(ConfigurationError, ValueError):
    """Exception raised when the grid resolution is not a positive integer."""
    pass

class MeshBuildError(SurfMeshException):
    """Exception raised when mesh buffers cannot be assembled."""
    pass

class ExportError(SurfMeshException):
    """Exception raised when mesh buffers cannot be written to a file."""
    pass

class UnknownSurfaceError(SurfMeshException, KeyError):
    """Exception raised when a catalog surface name is not registered."""
    pass
