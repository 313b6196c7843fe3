"""
Mesh buffer model for Prefab Shapes.

Provides the immutable MeshBuffer produced by a shape builder, the fixed
vertex attribute layout exposed to render adapters, and as_renderable()
which flattens a buffer into the form a GPU upload expects.

Note on indexing:
    - Indices are 0-based (GPU convention)
    - Triangles are counter-clockwise when viewed from outside the solid
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple

import numpy as np

from .vertex import Topology, Vertex
from ..config import ShapeKind


@dataclass(frozen=True)
class VertexAttribute:
    """One attribute in an interleaved vertex layout."""
    name: str
    components: int
    dtype: str = "f32"


POSITION = VertexAttribute("position", 3)
NORMAL = VertexAttribute("normal", 3)
TEXCOORD = VertexAttribute("texcoord", 2)

# Fixed attribute order for lit, textured shapes
SURFACE_LAYOUT: Tuple[VertexAttribute, ...] = (POSITION, NORMAL, TEXCOORD)

# Line shapes (axes) only expose position; colour is supplied by the renderer
LINE_LAYOUT: Tuple[VertexAttribute, ...] = (POSITION,)


@dataclass(frozen=True)
class MeshBuffer:
    """
    A finished, renderable shape.

    Constructed once by a builder and never modified afterwards. Holds no
    reference back to the builder that produced it.

    Attributes:
        vertices: Ordered vertices
        indices: 0-based vertex indices, grouped by topology
        topology: How indices group into primitives
        kind: Shape family that produced the mesh
    """
    vertices: Tuple[Vertex, ...]
    indices: Tuple[int, ...]
    topology: Topology
    kind: Optional[ShapeKind] = None

    def vertex_count(self) -> int:
        """Get number of vertices."""
        return len(self.vertices)

    def index_count(self) -> int:
        """Get number of indices."""
        return len(self.indices)

    def primitive_count(self) -> int:
        """Get number of triangles (or lines for LINE_LIST)."""
        return len(self.indices) // self.topology.group_size

    def primitives(self) -> List[Tuple[int, ...]]:
        """Index groups, one tuple per triangle or line."""
        size = self.topology.group_size
        return [
            tuple(self.indices[i:i + size])
            for i in range(0, len(self.indices), size)
        ]

    def layout(self) -> Tuple[VertexAttribute, ...]:
        """Vertex attribute layout for this mesh's topology."""
        if self.topology is Topology.LINE_LIST:
            return LINE_LAYOUT
        return SURFACE_LAYOUT

    def interleaved(self) -> np.ndarray:
        """
        Vertex data as a flat float32 array in layout order.

        Suitable for direct upload into a GPU vertex buffer. The array is
        read-only; copy it before modifying.
        """
        if self.layout() is SURFACE_LAYOUT:
            rows = [(*v.position, *v.normal, *v.texcoord) for v in self.vertices]
        else:
            rows = [v.position for v in self.vertices]

        data = np.array(rows, dtype='f4').reshape(-1)
        data.flags.writeable = False
        return data

    def validate(self) -> List[str]:
        """
        Validate mesh integrity.

        Returns:
            List of validation error messages (empty if valid)
        """
        errors = []

        if not self.vertices:
            errors.append("Mesh has no vertices")
            return errors

        size = self.topology.group_size
        if len(self.indices) % size != 0:
            errors.append(
                f"Index count {len(self.indices)} is not a multiple of {size} "
                f"({self.topology.value})"
            )

        max_idx = len(self.vertices)
        for i, idx in enumerate(self.indices):
            if idx < 0 or idx >= max_idx:
                errors.append(
                    f"Index {i} has invalid vertex index {idx} "
                    f"(valid range: 0-{max_idx - 1})"
                )

        return errors

    def compute_bounds(self) -> Optional[Tuple[Tuple[float, float, float],
                                               Tuple[float, float, float]]]:
        """
        Compute bounding box of the mesh.

        Returns:
            ((min_x, min_y, min_z), (max_x, max_y, max_z)) or None if empty
        """
        if not self.vertices:
            return None

        xs = [v.position[0] for v in self.vertices]
        ys = [v.position[1] for v in self.vertices]
        zs = [v.position[2] for v in self.vertices]

        return (
            (min(xs), min(ys), min(zs)),
            (max(xs), max(ys), max(zs))
        )

    def centroid(self, unique: bool = True) -> Optional[Tuple[float, float, float]]:
        """
        Unweighted average of vertex positions.

        Args:
            unique: Average distinct positions only, so seam and pole
                duplicates do not bias the result

        Returns:
            (x, y, z) or None if empty
        """
        if not self.vertices:
            return None

        positions = [v.position for v in self.vertices]
        if unique:
            seen = {}
            for p in positions:
                seen.setdefault(tuple(round(c, 6) for c in p), p)
            positions = list(seen.values())

        n = len(positions)
        return (
            sum(p[0] for p in positions) / n,
            sum(p[1] for p in positions) / n,
            sum(p[2] for p in positions) / n,
        )

    def __repr__(self) -> str:
        kind = self.kind.value if self.kind else "mesh"
        return (
            f"MeshBuffer({kind}, vertices={len(self.vertices)}, "
            f"indices={len(self.indices)}, topology={self.topology.value})"
        )


@dataclass(frozen=True, eq=False)
class RenderableData:
    """
    What a render adapter needs to draw a mesh.

    Attributes:
        layout: Attribute order of vertex_data
        vertex_data: Interleaved float32 vertex data
        indices: 0-based index list
        topology: Primitive topology
    """
    layout: Tuple[VertexAttribute, ...]
    vertex_data: np.ndarray
    indices: Tuple[int, ...]
    topology: Topology

    @property
    def stride(self) -> int:
        """Floats per vertex."""
        return sum(attr.components for attr in self.layout)

    @property
    def vertex_count(self) -> int:
        """Number of vertices in vertex_data."""
        return self.vertex_data.size // self.stride


def as_renderable(mesh: MeshBuffer) -> RenderableData:
    """
    Flatten a mesh buffer for a render adapter.

    Args:
        mesh: Finished mesh

    Returns:
        RenderableData with layout, interleaved vertex data, indices and topology
    """
    return RenderableData(
        layout=mesh.layout(),
        vertex_data=mesh.interleaved(),
        indices=tuple(mesh.indices),
        topology=mesh.topology,
    )
