"""
Configuration classes for surface mesh builds.

This module provides immutable configuration objects for the mesh builder,
with validation, defaults, and dictionary serialization.
"""

import logging
import numbers
from dataclasses import dataclass, field, asdict, fields, replace as dc_replace
from typing import Dict, Any, List, Sequence, Tuple

from .exceptions import ConfigurationError, InvalidSlicesError

# Set up logging
logger = logging.getLogger(__name__)

HEIGHT_FIELD_BOUNDARY = (-1.0, 1.0, -1.0, 1.0)
HEIGHT_FIELD_SLICES = 16
PARAMETRIC_BOUNDARY = (0.0, 1.0, 0.0, 1.0)
PARAMETRIC_SLICES = 32
DEFAULT_COORDS = (0.0, 1.0, 0.0, 1.0)


def _four_reals(name: str, values: Sequence[float]) -> Tuple[float, float, float, float]:
    """Check that ``values`` holds exactly four real numbers and return them as floats."""
    try:
        items = list(values)
    except TypeError:
        raise ConfigurationError(f"{name} must be a sequence of 4 numbers, got {values!r}")
    if len(items) != 4:
        raise ConfigurationError(f"{name} must have 4 values, got {len(items)}")
    for item in items:
        if isinstance(item, bool) or not isinstance(item, numbers.Real):
            raise ConfigurationError(f"{name} values must be real numbers, got {item!r}")
    return tuple(float(item) for item in items)


def validate_slices(slices: Any) -> int:
    """
    Validate the grid resolution.

    Raises:
        InvalidSlicesError: If slices is not a positive integer
    """
    if isinstance(slices, bool) or not isinstance(slices, numbers.Integral):
        raise InvalidSlicesError(f"slices must be an integer, got {slices!r}")
    if slices <= 0:
        raise InvalidSlicesError(f"slices must be positive, got {slices}")
    return int(slices)


@dataclass(frozen=True)
class Boundary:
    """Rectangular sampling domain over the two surface parameters."""
    min1: float
    max1: float
    min2: float
    max2: float

    @classmethod
    def from_sequence(cls, values: Sequence[float]) -> 'Boundary':
        """Create a boundary from ``[min1, max1, min2, max2]``."""
        return cls(*_four_reals("boundary", values))

    def spans(self) -> Tuple[float, float]:
        """Extent along each parameter axis."""
        return self.max1 - self.min1, self.max2 - self.min2

    def as_list(self) -> List[float]:
        return [self.min1, self.max1, self.min2, self.max2]


@dataclass(frozen=True)
class Coords:
    """Texture-coordinate range kept for the rendering side; not used by the builder."""
    min_s: float = 0.0
    max_s: float = 1.0
    min_t: float = 0.0
    max_t: float = 1.0

    @classmethod
    def from_sequence(cls, values: Sequence[float]) -> 'Coords':
        """Create a coordinate range from ``[min_s, max_s, min_t, max_t]``."""
        return cls(*_four_reals("coords", values))

    def as_list(self) -> List[float]:
        return [self.min_s, self.max_s, self.min_t, self.max_t]


@dataclass(frozen=True)
class SurfaceConfig:
    """
    Immutable configuration for one mesh build.

    The configuration is validated on creation, so a SurfaceConfig that
    exists always describes a buildable grid.
    """
    boundary: Boundary = field(default_factory=lambda: Boundary(*HEIGHT_FIELD_BOUNDARY))
    slices: int = HEIGHT_FIELD_SLICES
    coords: Coords = field(default_factory=Coords)
    double_sided: bool = True

    # Optional parameters (stored as dict)
    extra: Dict[str, Any] = field(default_factory=dict, compare=False)

    def __post_init__(self):
        """Coerce sequence inputs and validate configuration after initialization."""
        if not isinstance(self.boundary, Boundary):
            object.__setattr__(self, 'boundary', Boundary.from_sequence(self.boundary))
        if not isinstance(self.coords, Coords):
            object.__setattr__(self, 'coords', Coords.from_sequence(self.coords))
        self.validate()

    def validate(self) -> None:
        """
        Validate configuration parameters.

        Raises:
            InvalidSlicesError: If slices is not a positive integer
            ConfigurationError: If boundary or coords are malformed, or
                double_sided is not a bool
        """
        object.__setattr__(self, 'slices', validate_slices(self.slices))
        _four_reals("boundary", self.boundary.as_list())
        _four_reals("coords", self.coords.as_list())
        if not isinstance(self.double_sided, bool):
            raise ConfigurationError(f"double_sided must be a bool, got {self.double_sided!r}")

        span1, span2 = self.boundary.spans()
        if span1 == 0.0 or span2 == 0.0:
            # Allowed, but every normal will come out non-finite
            logger.warning(f"Boundary has zero extent {self.boundary.as_list()}; normals will be degenerate")

    @classmethod
    def for_height_field(cls, boundary: Sequence[float] = HEIGHT_FIELD_BOUNDARY,
                         slices: int = HEIGHT_FIELD_SLICES,
                         coords: Sequence[float] = DEFAULT_COORDS,
                         double_sided: bool = True) -> 'SurfaceConfig':
        """Configuration with the height-field defaults."""
        return cls(boundary=boundary, slices=slices, coords=coords, double_sided=double_sided)

    @classmethod
    def for_parametric(cls, boundary: Sequence[float] = PARAMETRIC_BOUNDARY,
                       slices: int = PARAMETRIC_SLICES,
                       coords: Sequence[float] = DEFAULT_COORDS,
                       double_sided: bool = True) -> 'SurfaceConfig':
        """Configuration with the parametric-surface defaults."""
        return cls(boundary=boundary, slices=slices, coords=coords, double_sided=double_sided)

    def replace(self, **changes) -> 'SurfaceConfig':
        """Return a new validated configuration with some fields changed."""
        return dc_replace(self, **changes)

    def as_dict(self) -> Dict[str, Any]:
        """
        Get configuration as a dictionary.

        Returns:
            Dictionary with boundary and coords flattened to lists
        """
        result = asdict(self)
        result['boundary'] = self.boundary.as_list()
        result['coords'] = self.coords.as_list()
        # Remove extra if empty
        if not result['extra']:
            del result['extra']
        return result

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> 'SurfaceConfig':
        """
        Create configuration from a dictionary.

        Args:
            config_dict: Dictionary of configuration parameters

        Returns:
            New SurfaceConfig instance
        """
        names = [f.name for f in fields(cls) if f.name != 'extra']
        known_params = {k: v for k, v in config_dict.items() if k in names}
        extra_params = {k: v for k, v in config_dict.items() if k not in names}
        extra_params.update(config_dict.get('extra', {}) or {})
        extra_params.pop('extra', None)

        config = cls(**known_params)
        config.extra.update(extra_params)
        return config
