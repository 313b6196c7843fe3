"""
In-memory render adapter for Prefab Shapes.

Stores uploaded meshes as RenderableData keyed by handle. Used by the
CLI and in tests, and as a reference for writing real GPU adapters.
"""

import logging
from typing import Dict, Sequence

from ..errors import UploadError
from ..models.mesh import MeshBuffer, RenderableData, as_renderable
from ..models.vertex import Topology, Vertex
from .base import RenderableHandle, RenderAdapter

logger = logging.getLogger(__name__)


class InMemoryAdapter(RenderAdapter):
    """
    Render adapter that keeps uploads in a dictionary.

    Behaves like a render context: once closed, further uploads fail
    with UploadError.
    """

    def __init__(self):
        self._buffers: Dict[int, RenderableData] = {}
        self._next_id = 1
        self._closed = False

    @property
    def closed(self) -> bool:
        """True once close() has been called."""
        return self._closed

    def upload(
        self,
        vertices: Sequence[Vertex],
        indices: Sequence[int],
        topology: Topology
    ) -> RenderableHandle:
        """Store the mesh and return its handle."""
        if self._closed:
            logger.warning("Upload rejected: render context is closed")
            raise UploadError("render context is closed")

        mesh = MeshBuffer(tuple(vertices), tuple(indices), topology)
        errors = mesh.validate()
        if errors:
            logger.warning(f"Upload rejected: {errors[0]}")
            raise UploadError(f"Invalid mesh data: {'; '.join(errors)}")

        handle = RenderableHandle(
            handle_id=self._next_id,
            vertex_count=mesh.vertex_count(),
            index_count=mesh.index_count(),
            topology=topology,
        )
        self._buffers[handle.handle_id] = as_renderable(mesh)
        self._next_id += 1

        logger.debug(
            f"Uploaded handle {handle.handle_id}: {handle.vertex_count} vertices, "
            f"{handle.index_count} indices ({topology.value})"
        )
        return handle

    def get(self, handle: RenderableHandle) -> RenderableData:
        """
        Look up uploaded data.

        Raises:
            KeyError: If the handle is unknown or was released
        """
        return self._buffers[handle.handle_id]

    def release(self, handle: RenderableHandle) -> None:
        """Forget an uploaded mesh (no-op if already released)."""
        self._buffers.pop(handle.handle_id, None)

    def close(self) -> None:
        """Release everything and refuse further uploads."""
        self._buffers.clear()
        self._closed = True

    def __len__(self) -> int:
        return len(self._buffers)
