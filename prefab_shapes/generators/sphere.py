"""
Sphere generator for Prefab Shapes.

Generates a unit-radius UV sphere around the Z axis by walking latitude
bands from the south pole (v = 0) to the north pole (v = 1).

Layout:
- Each pole is a degenerate ring of `longitude_segments` coincident
  vertices, one per fan triangle, each with its own u so the texture
  does not collapse to a single column at the pole.
- Interior rings carry `longitude_segments + 1` vertices; the last one
  duplicates the first position with u = 1 so the texture wraps cleanly
  across the seam.
- Pole bands are triangle fans; every other band is a strip of quads.
"""

import math

from ..config import SPHERE_RADIUS
from ..models.vertex import Topology
from ..utils.math_utils import scale_vec
from .base import GeometryData


def sphere_vertex_count(longitude_segments: int, latitude_segments: int) -> int:
    """Number of vertices generate_sphere() emits."""
    return 2 * longitude_segments + (latitude_segments - 1) * (longitude_segments + 1)


def sphere_index_count(longitude_segments: int, latitude_segments: int) -> int:
    """Number of indices generate_sphere() emits."""
    return 6 * longitude_segments * (latitude_segments - 1)


def generate_sphere(longitude_segments: int, latitude_segments: int) -> GeometryData:
    """
    Generate the unit sphere.

    Args:
        longitude_segments: Divisions around the pole axis (>= 3)
        latitude_segments: Bands from pole to pole (>= 2)

    Returns:
        GeometryData (TRIANGLE_LIST)
    """
    geometry = GeometryData(topology=Topology.TRIANGLE_LIST)
    lon = longitude_segments
    lat = latitude_segments

    # Lookup tables; the seam column reuses angle 0 so positions match exactly
    lon_tab = [
        (math.cos(2.0 * math.pi * (j % lon) / lon), math.sin(2.0 * math.pi * (j % lon) / lon))
        for j in range(lon + 1)
    ]
    lat_tab = [
        (math.cos(-0.5 * math.pi + math.pi * i / lat), math.sin(-0.5 * math.pi + math.pi * i / lat))
        for i in range(lat + 1)
    ]

    def add_sample(i: int, j: int, u: float) -> int:
        cos_lat, sin_lat = lat_tab[i]
        cos_lon, sin_lon = lon_tab[j]
        if i == 0 or i == lat:
            direction = (0.0, 0.0, sin_lat)
        else:
            direction = (cos_lat * cos_lon, cos_lat * sin_lon, sin_lat)
        return geometry.add_vertex(
            scale_vec(direction, SPHERE_RADIUS), direction, (u, i / lat)
        )

    # South pole, one vertex per fan triangle
    south = [add_sample(0, j, (j + 0.5) / lon) for j in range(lon)]

    # Interior rings with seam vertex
    rings = [
        [add_sample(i, j, j / lon) for j in range(lon + 1)]
        for i in range(1, lat)
    ]

    # North pole
    north = [add_sample(lat, j, (j + 0.5) / lon) for j in range(lon)]

    # South fan
    first = rings[0]
    for j in range(lon):
        geometry.add_triangle(south[j], first[j + 1], first[j])

    # Interior bands
    for lower, upper in zip(rings, rings[1:]):
        for j in range(lon):
            geometry.add_quad(lower[j], lower[j + 1], upper[j + 1], upper[j])

    # North fan
    last = rings[-1]
    for j in range(lon):
        geometry.add_triangle(last[j], last[j + 1], north[j])

    return geometry
