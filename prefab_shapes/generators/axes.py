"""
Axes marker generator for Prefab Shapes.

Three unit-length lines from the origin along +X, +Y and +Z. Each
vertex normal holds the direction of its axis; texture coordinates are
unused and left at (0, 0). Renderers colour the lines themselves.
"""

from ..config import AXIS_LENGTH
from ..models.vertex import Topology
from ..utils.math_utils import scale_vec
from .base import GeometryData

AXIS_DIRECTIONS = (
    (1.0, 0.0, 0.0),
    (0.0, 1.0, 0.0),
    (0.0, 0.0, 1.0),
)


def generate_axes() -> GeometryData:
    """
    Generate the axes marker.

    Returns:
        GeometryData with 6 vertices and 6 indices (LINE_LIST)
    """
    geometry = GeometryData(topology=Topology.LINE_LIST)

    for direction in AXIS_DIRECTIONS:
        start = geometry.add_vertex((0.0, 0.0, 0.0), direction)
        end = geometry.add_vertex(scale_vec(direction, AXIS_LENGTH), direction)
        geometry.add_line(start, end)

    return geometry
