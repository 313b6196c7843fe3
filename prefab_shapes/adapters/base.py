"""
Render adapter contract for Prefab Shapes.

A render adapter takes finished mesh data and turns it into something a
renderer can draw (a GPU buffer, a Blender object, ...). Builders only
ever call upload(); everything about devices and contexts is the
adapter's business.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Sequence

from ..models.vertex import Topology, Vertex


@dataclass(frozen=True)
class RenderableHandle:
    """
    Opaque reference to an uploaded mesh.

    Attributes:
        handle_id: Adapter-specific identifier
        vertex_count: Number of uploaded vertices
        index_count: Number of uploaded indices
        topology: Primitive topology used for drawing
    """
    handle_id: int
    vertex_count: int
    index_count: int
    topology: Topology


class RenderAdapter(ABC):
    """Base class for render adapters."""

    @abstractmethod
    def upload(
        self,
        vertices: Sequence[Vertex],
        indices: Sequence[int],
        topology: Topology
    ):
        """
        Upload mesh data.

        Args:
            vertices: Ordered vertices
            indices: 0-based indices
            topology: Primitive topology

        Returns:
            A handle the renderer can draw with

        Raises:
            UploadError: If the data cannot be uploaded
        """
        pass
