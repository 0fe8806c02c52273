"""
Pytest fixtures shared across test modules.
"""
import os
import math

os.environ.setdefault("MPLBACKEND", "Agg")

import pytest

from surfmesh.vector import Point3


@pytest.fixture
def flat_height():
    """Height function of the plane z = 0."""
    def f(x, y):
        return 0.0
    return f


@pytest.fixture
def paraboloid_height():
    """Height function of the bowl z = x² + y²."""
    def f(x, y):
        return x * x + y * y
    return f


@pytest.fixture
def flat_parametric():
    """Parametric plane (u, v) -> (u, v, 0)."""
    def f(u, v):
        return Point3(u, v, 0.0)
    return f


@pytest.fixture
def torus_parametric():
    """Parametric torus, regular everywhere on [0, 1] x [0, 1]."""
    def f(u, v):
        theta = 2.0 * math.pi * u
        phi = 2.0 * math.pi * v
        ring = 1.0 + 0.35 * math.cos(phi)
        return (ring * math.cos(theta), ring * math.sin(theta), 0.35 * math.sin(phi))
    return f
