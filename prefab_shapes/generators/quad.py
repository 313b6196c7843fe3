"""
Quad generator for Prefab Shapes.

A single unit rectangle in the XY plane facing +Z.
"""

from ..config import UNIT_HALF_EXTENT
from ..models.vertex import Topology
from .base import GeometryData


def generate_quad() -> GeometryData:
    """
    Generate the unit quad.

    Returns:
        GeometryData with 4 vertices and 6 indices (TRIANGLE_LIST)
    """
    geometry = GeometryData(topology=Topology.TRIANGLE_LIST)
    h = UNIT_HALF_EXTENT
    normal = (0.0, 0.0, 1.0)

    # CCW seen from +Z
    v0 = geometry.add_vertex((-h, -h, 0.0), normal, (0.0, 0.0))
    v1 = geometry.add_vertex((h, -h, 0.0), normal, (1.0, 0.0))
    v2 = geometry.add_vertex((h, h, 0.0), normal, (1.0, 1.0))
    v3 = geometry.add_vertex((-h, h, 0.0), normal, (0.0, 1.0))
    geometry.add_quad(v0, v1, v2, v3)

    return geometry
