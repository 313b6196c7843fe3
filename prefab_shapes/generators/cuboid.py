"""
Cuboid generator for Prefab Shapes.

Generates a unit cube spanning [-0.5, 0.5] on every axis. Each face has
its own four vertices so that normals stay flat (faceted lighting) and
every face carries a full (0,0)-(1,1) UV rectangle.
"""

from ..config import UNIT_HALF_EXTENT
from ..models.vertex import Topology
from ..utils.math_utils import add, cross, scale_vec
from .base import GeometryData

# (outward normal, face "right" direction) per face; face "up" = normal x right,
# which makes (right, up) a CCW basis when viewed from outside
FACES = (
    ((1.0, 0.0, 0.0), (0.0, 1.0, 0.0)),
    ((-1.0, 0.0, 0.0), (0.0, -1.0, 0.0)),
    ((0.0, 1.0, 0.0), (-1.0, 0.0, 0.0)),
    ((0.0, -1.0, 0.0), (1.0, 0.0, 0.0)),
    ((0.0, 0.0, 1.0), (1.0, 0.0, 0.0)),
    ((0.0, 0.0, -1.0), (-1.0, 0.0, 0.0)),
)

# Face corners as (right, up) signs with their texture coordinates, CCW
CORNERS = (
    ((-1.0, -1.0), (0.0, 0.0)),
    ((1.0, -1.0), (1.0, 0.0)),
    ((1.0, 1.0), (1.0, 1.0)),
    ((-1.0, 1.0), (0.0, 1.0)),
)


def generate_cuboid() -> GeometryData:
    """
    Generate the unit cuboid.

    Returns:
        GeometryData with 24 vertices and 36 indices (TRIANGLE_LIST)
    """
    geometry = GeometryData(topology=Topology.TRIANGLE_LIST)
    h = UNIT_HALF_EXTENT

    for normal, right in FACES:
        up = cross(normal, right)
        center = scale_vec(normal, h)

        corner_indices = []
        for (sr, su), texcoord in CORNERS:
            position = add(center, add(scale_vec(right, sr * h), scale_vec(up, su * h)))
            corner_indices.append(geometry.add_vertex(position, normal, texcoord))

        geometry.add_quad(*corner_indices)

    return geometry
