"""
Finite-difference normal estimation.

Normals are estimated from two tangent vectors obtained by stepping a small
``delta`` along each parameter axis and crossing them. The step is shared by
every vertex of a build.
"""

import logging
from typing import Callable

from .config import Boundary
from .vector import Point3, as_point, subtract, cross_product, normalize

logger = logging.getLogger(__name__)

# Step is this many times smaller than one grid cell along the shorter axis
STEPS_PER_CELL = 256

PointSampler = Callable[[float, float], Point3]
HeightFunction = Callable[[float, float], float]
ParametricFunction = Callable[[float, float], Point3]


def finite_difference_step(boundary: Boundary, slices: int) -> float:
    """
    Compute the tangent step for a build.

    Args:
        boundary: Sampling domain
        slices: Grid resolution

    Returns:
        ``min(span1, span2) / (256 * slices)``
    """
    span1, span2 = boundary.spans()
    return min(span1, span2) / (STEPS_PER_CELL * slices)


def estimate_normal(sample: PointSampler, p1: float, p2: float, delta: float) -> Point3:
    """
    Estimate the unit normal of a sampled surface at ``(p1, p2)``.

    Args:
        sample: Function mapping a parameter pair to a 3D point
        p1: First parameter
        p2: Second parameter
        delta: Finite-difference step

    Returns:
        Normalized cross product of the two forward-difference tangents.
        Parallel or zero tangents give NaN components.
    """
    origin = sample(p1, p2)
    tangent1 = subtract(sample(p1 + delta, p2), origin)
    tangent2 = subtract(sample(p1, p2 + delta), origin)
    return normalize(cross_product(tangent1, tangent2))


def height_field_normal(function: HeightFunction, x: float, y: float, delta: float) -> Point3:
    """Normal of the graph ``z = function(x, y)``."""
    def sample(px, py):
        return Point3(px, py, float(function(px, py)))

    return estimate_normal(sample, x, y, delta)


def parametric_normal(function: ParametricFunction, u: float, v: float, delta: float) -> Point3:
    """Normal of the parametric surface ``P = function(u, v)``."""
    def sample(pu, pv):
        return as_point(function(pu, pv))

    return estimate_normal(sample, u, v, delta)
