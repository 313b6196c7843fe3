"""
Shape builders for Prefab Shapes.
"""

from .base import BuilderState, ShapeBuilder, transform_geometry
from .shapes import (
    AxesBuilder,
    ConeBuilder,
    CuboidBuilder,
    CylinderBuilder,
    QuadBuilder,
    SphereBuilder,
    create_builder,
)

__all__ = [
    'BuilderState',
    'ShapeBuilder',
    'transform_geometry',
    'AxesBuilder',
    'ConeBuilder',
    'CuboidBuilder',
    'CylinderBuilder',
    'QuadBuilder',
    'SphereBuilder',
    'create_builder',
]
