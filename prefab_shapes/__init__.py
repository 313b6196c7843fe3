"""
Prefab Shapes

Procedurally generated primitive meshes (cuboid, quad, sphere, cylinder,
cone, axes) ready for a GPU rendering pipeline.

Each shape is built with a builder object:

    handle = (CuboidBuilder()
              .translate(0.0, 0.5, 0.0)
              .scale(2.0, 3.0, 4.0)
              .build(adapter))

Can be used as:
- Library: builders produce MeshBuffer objects or upload through a render adapter
- CLI tool: python -m prefab_shapes.main
"""

__version__ = "0.3.0"

from .config import ShapeConfig, ShapeKind
from .errors import (
    BuilderSpentError,
    ConfigurationError,
    InvalidTransformError,
    NotEnoughDivisionsError,
    ShapeCreationError,
    UploadError,
)
from .models import MeshBuffer, RenderableData, Topology, Vertex, as_renderable
from .builders import (
    AxesBuilder,
    ConeBuilder,
    CuboidBuilder,
    CylinderBuilder,
    QuadBuilder,
    SphereBuilder,
    create_builder,
)
from .adapters import InMemoryAdapter, RenderableHandle, RenderAdapter

__all__ = [
    'ShapeConfig', 'ShapeKind',
    'ShapeCreationError', 'ConfigurationError', 'NotEnoughDivisionsError',
    'InvalidTransformError', 'UploadError', 'BuilderSpentError',
    'MeshBuffer', 'RenderableData', 'Topology', 'Vertex', 'as_renderable',
    'AxesBuilder', 'ConeBuilder', 'CuboidBuilder', 'CylinderBuilder',
    'QuadBuilder', 'SphereBuilder', 'create_builder',
    'InMemoryAdapter', 'RenderableHandle', 'RenderAdapter',
]
