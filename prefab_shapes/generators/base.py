"""
Shared geometry accumulator for the shape generators.

Generators append vertices and primitives to a GeometryData instance;
the builder later transforms it and freezes it into a MeshBuffer.
"""

from dataclasses import dataclass, field
from typing import Iterator, List, Tuple

from ..models.vertex import Topology, Vertex


@dataclass
class GeometryData:
    """
    Vertices and indices of a unit shape under construction.

    Indices are 0-based. Quads passed to add_quad must be in CCW order
    as seen from outside the solid.
    """
    vertices: List[Vertex] = field(default_factory=list)
    indices: List[int] = field(default_factory=list)
    topology: Topology = Topology.TRIANGLE_LIST

    def add_vertex(
        self,
        position: Tuple[float, float, float],
        normal: Tuple[float, float, float],
        texcoord: Tuple[float, float] = (0.0, 0.0)
    ) -> int:
        """
        Add a vertex and return its 0-based index.
        """
        self.vertices.append(Vertex(position, normal, texcoord))
        return len(self.vertices) - 1

    def add_triangle(self, v1: int, v2: int, v3: int) -> None:
        """Add a triangle (CCW from outside)."""
        self.indices.extend((v1, v2, v3))

    def add_quad(self, v1: int, v2: int, v3: int, v4: int) -> None:
        """
        Add a quad as two triangles: (v1, v2, v3) and (v1, v3, v4).

        Args:
            v1, v2, v3, v4: Vertex indices in CCW order
        """
        self.indices.extend((v1, v2, v3))
        self.indices.extend((v1, v3, v4))

    def add_line(self, v1: int, v2: int) -> None:
        """Add a line segment."""
        self.indices.extend((v1, v2))

    def recenter(self) -> Tuple[float, float, float]:
        """
        Shift every vertex so the mean of the distinct positions is the origin.

        Coincident vertices (seams, poles, apex) count once.

        Returns:
            The offset that was added to each position
        """
        unique = list(dict.fromkeys(v.position for v in self.vertices))
        n = len(unique)
        offset = tuple(-sum(p[k] for p in unique) / n for k in range(3))

        self.vertices = [
            Vertex(
                tuple(p + o for p, o in zip(v.position, offset)),
                v.normal,
                v.texcoord,
            )
            for v in self.vertices
        ]
        return offset

    def __iter__(self) -> Iterator:
        """Unpack as (vertices, indices, topology)."""
        return iter((self.vertices, self.indices, self.topology))
