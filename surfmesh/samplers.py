"""
Surface samplers.

A sampler knows how to turn a parameter pair into a vertex position and how
to estimate the normal there. The builder only talks to this interface, so
height fields and parametric surfaces share one grid and index pipeline.
"""

from abc import ABC, abstractmethod

from .normals import HeightFunction, ParametricFunction, height_field_normal, parametric_normal
from .vector import Point3, as_point


class SurfaceSampler(ABC):
    """Base class for surface samplers."""

    kind: str = "surface"

    def __init__(self, function):
        if not callable(function):
            raise TypeError(f"Surface function must be callable, got {type(function).__name__}")
        self.function = function

    @abstractmethod
    def point(self, p1: float, p2: float) -> Point3:
        """Vertex position at parameters ``(p1, p2)``."""

    @abstractmethod
    def normal(self, p1: float, p2: float, delta: float) -> Point3:
        """Estimated unit normal at parameters ``(p1, p2)``."""

    def __repr__(self) -> str:
        name = getattr(self.function, '__name__', repr(self.function))
        return f"{type(self).__name__}({name})"


class HeightFieldSampler(SurfaceSampler):
    """Samples the graph of ``z = f(x, y)``."""

    kind = "height_field"
    function: HeightFunction

    def point(self, p1: float, p2: float) -> Point3:
        return Point3(p1, p2, float(self.function(p1, p2)))

    def normal(self, p1: float, p2: float, delta: float) -> Point3:
        return height_field_normal(self.function, p1, p2, delta)


class ParametricSampler(SurfaceSampler):
    """Samples ``P = f(u, v)`` where ``f`` returns a 3D point."""

    kind = "parametric"
    function: ParametricFunction

    def point(self, p1: float, p2: float) -> Point3:
        return as_point(self.function(p1, p2))

    def normal(self, p1: float, p2: float, delta: float) -> Point3:
        return parametric_normal(self.function, p1, p2, delta)
