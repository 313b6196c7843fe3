"""
Data models for Prefab Shapes.
"""

from .vertex import Vertex, Topology
from .mesh import (
    MeshBuffer,
    RenderableData,
    VertexAttribute,
    SURFACE_LAYOUT,
    LINE_LAYOUT,
    as_renderable,
)

__all__ = [
    'Vertex', 'Topology',
    'MeshBuffer', 'RenderableData', 'VertexAttribute',
    'SURFACE_LAYOUT', 'LINE_LAYOUT',
    'as_renderable',
]
