"""
Shape builders for Prefab Shapes.

One builder per shape family. By default every shape is unit sized with
its centre at the origin; use the transform methods inherited from
ShapeBuilder to place it.

Example:
    mesh = CuboidBuilder().scale(2.0, 3.0, 4.0).translate(0.0, 0.0, 2.0).build_mesh()
"""

from ..config import (
    DEFAULT_LATITUDE_SEGMENTS,
    DEFAULT_LONGITUDE_SEGMENTS,
    DEFAULT_RADIAL_SEGMENTS,
    ShapeKind,
)
from ..generators.sphere import sphere_index_count, sphere_vertex_count
from .base import ShapeBuilder


class CuboidBuilder(ShapeBuilder):
    """
    Builds a cuboid.

    Default: unit cube [-0.5, 0.5]^3. Each face has its own vertices with
    flat normals (faceted when lit) and a planar (0,0)-(1,1) UV mapping.
    """
    kind = ShapeKind.CUBOID


class QuadBuilder(ShapeBuilder):
    """
    Builds a quad.

    Default: unit square [-0.5, 0.5]^2 in the XY plane facing +Z.
    """
    kind = ShapeKind.QUAD


class AxesBuilder(ShapeBuilder):
    """
    Builds an axes locator.

    Default: three unit lines from the origin along +X, +Y and +Z
    (LINE_LIST). Normals hold each line's direction.
    """
    kind = ShapeKind.AXES


class SphereBuilder(ShapeBuilder):
    """
    Builds a UV sphere.

    Default: unit radius around the Z axis, 24 longitude by 12 latitude
    segments. Normals are smooth (equal to the unit direction) and texture
    coordinates are a spherical projection.
    """
    kind = ShapeKind.SPHERE

    def __init__(self):
        super().__init__()
        self._longitude_segments = DEFAULT_LONGITUDE_SEGMENTS
        self._latitude_segments = DEFAULT_LATITUDE_SEGMENTS

    def with_divisions(self, longitude: int, latitude: int) -> 'SphereBuilder':
        """
        Set the tessellation resolution.

        Args:
            longitude: Segments around the pole axis (minimum 3)
            latitude: Bands from pole to pole (minimum 2)
        """
        self._ensure_configuring()
        self._longitude_segments = longitude
        self._latitude_segments = latitude
        return self

    def num_vertices(self) -> int:
        """Vertex count for the current divisions."""
        return sphere_vertex_count(self._longitude_segments, self._latitude_segments)

    def num_indices(self) -> int:
        """Index count for the current divisions."""
        return sphere_index_count(self._longitude_segments, self._latitude_segments)

    def _resolution_settings(self) -> dict:
        return {
            'longitude_segments': self._longitude_segments,
            'latitude_segments': self._latitude_segments,
        }

    def _copy_resolution_from(self, other: 'SphereBuilder') -> None:
        self._longitude_segments = other._longitude_segments
        self._latitude_segments = other._latitude_segments


class CylinderBuilder(ShapeBuilder):
    """
    Builds a capped cylinder.

    Default: diameter 1, height 1 along Z, 24 radial segments, both caps.
    Wall normals are radial; cap normals are (0, 0, +-1).
    """
    kind = ShapeKind.CYLINDER

    def __init__(self):
        super().__init__()
        self._radial_segments = DEFAULT_RADIAL_SEGMENTS
        self._top_cap = True
        self._bottom_cap = True

    def with_segments(self, radial: int) -> 'CylinderBuilder':
        """Set the number of segments around the axis (minimum 3)."""
        self._ensure_configuring()
        self._radial_segments = radial
        return self

    def with_caps(self, top: bool = True, bottom: bool = True) -> 'CylinderBuilder':
        """Choose which end caps to generate."""
        self._ensure_configuring()
        self._top_cap = bool(top)
        self._bottom_cap = bool(bottom)
        return self

    def _resolution_settings(self) -> dict:
        return {
            'radial_segments': self._radial_segments,
            'top_cap': self._top_cap,
            'bottom_cap': self._bottom_cap,
        }

    def _copy_resolution_from(self, other: 'CylinderBuilder') -> None:
        self._radial_segments = other._radial_segments
        self._top_cap = other._top_cap
        self._bottom_cap = other._bottom_cap


class ConeBuilder(ShapeBuilder):
    """
    Builds a cone.

    Default: base diameter 1, height 1 along Z, 24 radial segments, base
    cap included. Placed so the average of its distinct sample positions
    is the origin, which puts the base slightly below z = 0. Wall normals
    follow the slant.
    """
    kind = ShapeKind.CONE

    def __init__(self):
        super().__init__()
        self._radial_segments = DEFAULT_RADIAL_SEGMENTS
        self._bottom_cap = True

    def with_segments(self, radial: int) -> 'ConeBuilder':
        """Set the number of segments around the axis (minimum 3)."""
        self._ensure_configuring()
        self._radial_segments = radial
        return self

    def with_cap(self, bottom: bool = True) -> 'ConeBuilder':
        """Choose whether to generate the base cap."""
        self._ensure_configuring()
        self._bottom_cap = bool(bottom)
        return self

    def _resolution_settings(self) -> dict:
        return {
            'radial_segments': self._radial_segments,
            'top_cap': False,
            'bottom_cap': self._bottom_cap,
        }

    def _copy_resolution_from(self, other: 'ConeBuilder') -> None:
        self._radial_segments = other._radial_segments
        self._bottom_cap = other._bottom_cap


BUILDERS = {
    ShapeKind.CUBOID: CuboidBuilder,
    ShapeKind.QUAD: QuadBuilder,
    ShapeKind.AXES: AxesBuilder,
    ShapeKind.SPHERE: SphereBuilder,
    ShapeKind.CYLINDER: CylinderBuilder,
    ShapeKind.CONE: ConeBuilder,
}


def create_builder(kind: ShapeKind) -> ShapeBuilder:
    """Create a fresh builder for a shape kind."""
    return BUILDERS[kind]()
