"""
Prefab Shapes - Blender Adapter

Uploads mesh data into Blender as mesh objects. Triangle lists become
faces with a "UVMap" layer; line lists become loose edges.

Only importable inside Blender (or with the bpy module installed).
"""

import logging
from typing import Optional, Sequence

import bpy

from ..errors import UploadError
from ..models.vertex import Topology, Vertex
from .base import RenderableHandle, RenderAdapter

logger = logging.getLogger(__name__)


class BlenderAdapter(RenderAdapter):
    """
    Render adapter creating Blender objects.

    Args:
        collection_name: Collection that receives the objects (created on demand)
        name: Base object name
    """

    def __init__(self, collection_name: str = "Prefab Shapes", name: str = "shape"):
        self.collection_name = collection_name
        self.name = name
        self._objects = {}
        self._next_id = 1

    def upload(
        self,
        vertices: Sequence[Vertex],
        indices: Sequence[int],
        topology: Topology
    ) -> RenderableHandle:
        """Create a Blender object for the mesh and return its handle."""
        name = f"{self.name}_{self._next_id:03d}"
        try:
            obj = _create_object(name, vertices, indices, topology)
            get_or_create_collection(self.collection_name).objects.link(obj)
        except (RuntimeError, TypeError, ValueError) as e:
            logger.warning(f"Failed to create Blender object {name}: {e}")
            raise UploadError(f"Blender mesh creation failed: {e}") from e

        handle = RenderableHandle(
            handle_id=self._next_id,
            vertex_count=len(vertices),
            index_count=len(indices),
            topology=topology,
        )
        self._objects[handle.handle_id] = obj
        self._next_id += 1

        logger.debug(f"Created Blender object {name}")
        return handle

    def get(self, handle: RenderableHandle) -> bpy.types.Object:
        """Blender object for a handle."""
        return self._objects[handle.handle_id]


def _create_object(
    name: str,
    vertices: Sequence[Vertex],
    indices: Sequence[int],
    topology: Topology
) -> bpy.types.Object:
    """
    Build a Blender mesh object from vertex/index data.

    Note:
        - Blender shares vertices between faces, UVs are stored per loop
        - from_pydata expects vertices, edges, faces
    """
    mesh = bpy.data.meshes.new(name)
    positions = [v.position for v in vertices]

    if topology is Topology.LINE_LIST:
        edges = [(indices[i], indices[i + 1]) for i in range(0, len(indices), 2)]
        mesh.from_pydata(positions, edges, [])
    else:
        faces = [
            (indices[i], indices[i + 1], indices[i + 2])
            for i in range(0, len(indices), 3)
        ]
        mesh.from_pydata(positions, [], faces)
        _add_uv_layer(mesh, vertices)

    mesh.update()
    return bpy.data.objects.new(name, mesh)


def _add_uv_layer(mesh: bpy.types.Mesh, vertices: Sequence[Vertex]) -> None:
    """
    Add texture coordinates to a Blender mesh.

    Each loop takes the texcoord of the vertex it references.
    """
    uv_layer = mesh.uv_layers.new(name="UVMap")
    for polygon in mesh.polygons:
        for loop_idx in polygon.loop_indices:
            vertex_idx = mesh.loops[loop_idx].vertex_index
            uv_layer.data[loop_idx].uv = vertices[vertex_idx].texcoord


def get_or_create_collection(
    name: str,
    parent: Optional[bpy.types.Collection] = None
) -> bpy.types.Collection:
    """
    Create or get a collection for shape objects.

    Args:
        name: Collection name
        parent: Parent collection (defaults to scene collection)

    Returns:
        The collection (created or existing)
    """
    if name in bpy.data.collections:
        return bpy.data.collections[name]

    collection = bpy.data.collections.new(name)

    if parent is None:
        parent = bpy.context.scene.collection
    parent.children.link(collection)

    return collection
