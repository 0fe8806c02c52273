"""Vector primitives on 3D points."""

import math
from typing import NamedTuple, Sequence


class Point3(NamedTuple):
    """A position or a direction in 3-space."""
    x: float
    y: float
    z: float


def as_point(value: Sequence[float]) -> Point3:
    """Coerce any 3-sequence (tuple, list, numpy array, Point3) to a Point3."""
    if isinstance(value, Point3):
        return value
    x, y, z = value
    return Point3(float(x), float(y), float(z))


def subtract(a: Point3, b: Point3) -> Point3:
    """Componentwise ``a - b``."""
    return Point3(a.x - b.x, a.y - b.y, a.z - b.z)


def cross_product(a: Point3, b: Point3) -> Point3:
    """Right-handed cross product ``a x b``."""
    return Point3(
        a.y * b.z - a.z * b.y,
        a.z * b.x - a.x * b.z,
        a.x * b.y - a.y * b.x,
    )


def norm(v: Point3) -> float:
    """Euclidean length of ``v``."""
    return math.sqrt(v.x * v.x + v.y * v.y + v.z * v.z)


def normalize(v: Point3) -> Point3:
    """
    Scale ``v`` to unit length.

    A zero-length vector yields NaN in every component, as IEEE 0/0 would.
    No exception is raised and no fallback direction is chosen.
    """
    length = norm(v)
    if length == 0.0:
        return Point3(math.nan, math.nan, math.nan)
    return Point3(v.x / length, v.y / length, v.z / length)
