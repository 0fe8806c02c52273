"""
Catalog of named sample surfaces.

Used by the command line and by tests as ready-made smooth inputs.
"""

import math
import logging
from dataclasses import dataclass
from typing import Callable, Dict, List, Tuple

from .exceptions import UnknownSurfaceError
from .surface import Surface, HeightFieldSurface, ParametricSurface
from .vector import Point3

logger = logging.getLogger(__name__)

HEIGHT_FIELD = "height_field"
PARAMETRIC = "parametric"

TWO_PI = 2.0 * math.pi


@dataclass(frozen=True)
class CatalogEntry:
    """A registered sample surface."""
    name: str
    kind: str
    function: Callable
    boundary: Tuple[float, float, float, float]
    description: str = ""


_CATALOG: Dict[str, CatalogEntry] = {}


def register_surface(name: str, kind: str, boundary: Tuple[float, float, float, float], description: str = ""):
    """Decorator registering a surface function under ``name``."""
    def decorator(function):
        _CATALOG[name.lower()] = CatalogEntry(name.lower(), kind, function, tuple(boundary), description)
        return function
    return decorator


# Height fields

@register_surface("plane", HEIGHT_FIELD, (-1.0, 1.0, -1.0, 1.0), "Flat plane z = 0")
def plane(x, y):
    return 0.0


@register_surface("paraboloid", HEIGHT_FIELD, (-1.0, 1.0, -1.0, 1.0), "Bowl z = x² + y²")
def paraboloid(x, y):
    return x * x + y * y


@register_surface("saddle", HEIGHT_FIELD, (-1.0, 1.0, -1.0, 1.0), "Hyperbolic paraboloid z = x² - y²")
def saddle(x, y):
    return x * x - y * y


@register_surface("ripple", HEIGHT_FIELD, (-3.0, 3.0, -3.0, 3.0), "Radial sine ripple")
def ripple(x, y):
    r = math.hypot(x, y)
    return 0.25 * math.sin(3.0 * r)


@register_surface("gaussian", HEIGHT_FIELD, (-2.0, 2.0, -2.0, 2.0), "Gaussian bump")
def gaussian(x, y):
    return math.exp(-(x * x + y * y))


# Parametric surfaces

@register_surface("sphere", PARAMETRIC, (0.0, 1.0, 0.0, 1.0), "Unit sphere, u = longitude, v = latitude")
def sphere(u, v):
    theta = TWO_PI * u
    phi = math.pi * (v - 0.5)
    return Point3(math.cos(phi) * math.cos(theta), math.cos(phi) * math.sin(theta), math.sin(phi))


@register_surface("torus", PARAMETRIC, (0.0, 1.0, 0.0, 1.0), "Torus with radii 1 and 0.35")
def torus(u, v, major=1.0, minor=0.35):
    theta = TWO_PI * u
    phi = TWO_PI * v
    ring = major + minor * math.cos(phi)
    return Point3(ring * math.cos(theta), ring * math.sin(theta), minor * math.sin(phi))


@register_surface("cylinder", PARAMETRIC, (0.0, 1.0, 0.0, 1.0), "Open unit cylinder of height 1")
def cylinder(u, v):
    theta = TWO_PI * u
    return Point3(math.cos(theta), math.sin(theta), v)


@register_surface("helicoid", PARAMETRIC, (-1.0, 1.0, 0.0, 1.0), "Helicoid with one full turn")
def helicoid(u, v):
    theta = TWO_PI * v
    return Point3(u * math.cos(theta), u * math.sin(theta), v)


def get_available_surfaces() -> List[str]:
    """Get sorted list of catalog surface names."""
    return sorted(_CATALOG)


def get_surface(name: str) -> CatalogEntry:
    """
    Look up a catalog entry.

    Raises:
        UnknownSurfaceError: If ``name`` is not registered
    """
    key = name.lower().strip()
    if key not in _CATALOG:
        raise UnknownSurfaceError(f"Unknown surface: {name}. Available surfaces: {get_available_surfaces()}")
    return _CATALOG[key]


def create_surface(name: str, **overrides) -> Surface:
    """
    Build the mesh object for a catalog surface.

    Args:
        name: Catalog name
        **overrides: ``boundary``, ``slices``, ``coords``, ``double_sided``

    Returns:
        HeightFieldSurface or ParametricSurface
    """
    entry = get_surface(name)
    overrides.setdefault('boundary', entry.boundary)
    logger.debug(f"Creating catalog surface {entry.name} ({entry.kind})")

    if entry.kind == HEIGHT_FIELD:
        return HeightFieldSurface(entry.function, **overrides)
    return ParametricSurface(entry.function, **overrides)
