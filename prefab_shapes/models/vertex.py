"""
Vertex data model for Prefab Shapes.

Provides the Vertex record shared across all shapes and the Topology
enum describing how a mesh's index list groups into primitives.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class Topology(Enum):
    """Primitive topology of an index sequence."""
    TRIANGLE_LIST = "triangle_list"
    LINE_LIST = "line_list"

    @property
    def group_size(self) -> int:
        """Number of indices per primitive."""
        return 3 if self is Topology.TRIANGLE_LIST else 2


@dataclass(frozen=True, slots=True)
class Vertex:
    """
    One vertex of a generated shape.

    Attributes:
        position: (x, y, z) in model space
        normal: Unit-length (x, y, z) normal
        texcoord: (u, v) texture coordinate, (0, 0) where a shape has no UVs
    """
    position: Tuple[float, float, float]
    normal: Tuple[float, float, float]
    texcoord: Tuple[float, float] = (0.0, 0.0)
