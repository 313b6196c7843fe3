"""
Configuration constants for Prefab Shapes.

Contains the canonical unit-shape dimensions, default and minimum
tessellation resolutions, numeric tolerances, and the ShapeConfig
dataclass that a builder resolves into before generating geometry.
"""

from dataclasses import dataclass
from enum import Enum
import math

from .errors import ConfigurationError, InvalidTransformError, NotEnoughDivisionsError
from .utils.math_utils import IDENTITY3, Mat3, Vec3, as_mat3, is_finite, is_rotation


# =============================================================================
# SHAPE KINDS
# =============================================================================

class ShapeKind(Enum):
    """
    The closed set of shape families the geometry kernel can generate.

    Each kind has exactly one generator function; dispatch is an explicit
    branch in generators.generate().
    """
    CUBOID = "cuboid"
    QUAD = "quad"
    SPHERE = "sphere"
    CYLINDER = "cylinder"
    CONE = "cone"
    AXES = "axes"


# =============================================================================
# CANONICAL UNIT SHAPES
# =============================================================================

# Cuboid and quad span [-0.5, 0.5] on each of their axes
UNIT_HALF_EXTENT = 0.5

# Sphere is a unit-radius sphere
SPHERE_RADIUS = 1.0

# Cylinder/cone: unit height along Z, base diameter 1
CYLINDER_RADIUS = 0.5
CYLINDER_HALF_HEIGHT = 0.5

# Axes marker: each line is 1 unit long
AXIS_LENGTH = 1.0

# =============================================================================
# TESSELLATION RESOLUTION
# =============================================================================

# Sphere: longitude = divisions around the pole axis, latitude = bands
DEFAULT_LONGITUDE_SEGMENTS = 24
DEFAULT_LATITUDE_SEGMENTS = 12
MIN_LONGITUDE_SEGMENTS = 3
MIN_LATITUDE_SEGMENTS = 2

# Cylinder and cone
DEFAULT_RADIAL_SEGMENTS = 24
MIN_RADIAL_SEGMENTS = 3

# =============================================================================
# TOLERANCES
# =============================================================================

# Allowed deviation of a generated normal from unit length
NORMAL_TOLERANCE = 1e-5

# Allowed deviation of an orientation matrix from orthonormal
ROTATION_TOLERANCE = 1e-4


# =============================================================================
# RESOLVED SHAPE CONFIGURATION
# =============================================================================

@dataclass(frozen=True)
class ShapeConfig:
    """
    Fully resolved configuration for one shape.

    Produced by a builder at finalize time. Validation happens in
    __post_init__, so a ShapeConfig that exists is always safe to hand
    to the geometry kernel.

    Transform order: position' = orientation * (scale ⊙ position) + translation
    """

    kind: ShapeKind
    scale: Vec3 = (1.0, 1.0, 1.0)
    translation: Vec3 = (0.0, 0.0, 0.0)
    orientation: Mat3 = IDENTITY3

    # Sphere
    longitude_segments: int = DEFAULT_LONGITUDE_SEGMENTS
    latitude_segments: int = DEFAULT_LATITUDE_SEGMENTS

    # Cylinder / cone
    radial_segments: int = DEFAULT_RADIAL_SEGMENTS
    top_cap: bool = True
    bottom_cap: bool = True

    def __post_init__(self):
        """Validate configuration values."""
        if not isinstance(self.kind, ShapeKind):
            raise ConfigurationError(f"Unknown shape kind: {self.kind!r}")

        if self.kind is ShapeKind.SPHERE:
            _check_divisions(
                "longitude_segments", self.longitude_segments, MIN_LONGITUDE_SEGMENTS
            )
            _check_divisions(
                "latitude_segments", self.latitude_segments, MIN_LATITUDE_SEGMENTS
            )
        elif self.kind in (ShapeKind.CYLINDER, ShapeKind.CONE):
            _check_divisions(
                "radial_segments", self.radial_segments, MIN_RADIAL_SEGMENTS
            )

        if len(self.scale) != 3 or not is_finite(self.scale):
            raise InvalidTransformError(f"scale must be 3 finite numbers, got {self.scale}")
        if any(s == 0.0 for s in self.scale):
            raise InvalidTransformError(f"scale components must be non-zero, got {self.scale}")

        if len(self.translation) != 3 or not is_finite(self.translation):
            raise InvalidTransformError(
                f"translation must be 3 finite numbers, got {self.translation}"
            )

        try:
            orientation = as_mat3(self.orientation)
        except (TypeError, ValueError) as e:
            raise InvalidTransformError(f"orientation must be a 3x3 matrix: {e}") from e
        if not is_finite([v for row in orientation for v in row]):
            raise InvalidTransformError("orientation contains non-finite values")
        if not is_rotation(orientation, ROTATION_TOLERANCE):
            raise InvalidTransformError(
                "orientation must be a proper rotation (orthonormal, determinant +1)"
            )

    @property
    def mirrored(self) -> bool:
        """True when an odd number of scale components is negative."""
        return math.prod(self.scale) < 0.0

    def resolution(self) -> dict:
        """Resolution keyword arguments for this shape's generator."""
        if self.kind is ShapeKind.SPHERE:
            return {
                'longitude_segments': self.longitude_segments,
                'latitude_segments': self.latitude_segments,
            }
        if self.kind is ShapeKind.CYLINDER:
            return {
                'radial_segments': self.radial_segments,
                'top_cap': self.top_cap,
                'bottom_cap': self.bottom_cap,
            }
        if self.kind is ShapeKind.CONE:
            return {
                'radial_segments': self.radial_segments,
                'bottom_cap': self.bottom_cap,
            }
        return {}


def _check_divisions(parameter: str, value, minimum: int) -> None:
    """Raise unless value is an int >= minimum."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(f"{parameter} must be an integer, got {value!r}")
    if value < minimum:
        raise NotEnoughDivisionsError(parameter, value, minimum)
