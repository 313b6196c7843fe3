"""
Geometry kernel for Prefab Shapes.

Contains one generator per shape family, each producing a unit-sized,
origin-centred shape, and generate() which dispatches on ShapeKind.
"""

import logging

from ..config import ShapeKind
from .base import GeometryData
from .axes import generate_axes
from .cuboid import generate_cuboid
from .cylinder import cone_base_height, generate_cone, generate_cylinder, generate_frustum
from .quad import generate_quad
from .sphere import generate_sphere, sphere_index_count, sphere_vertex_count

logger = logging.getLogger(__name__)


def generate(kind: ShapeKind, **resolution) -> GeometryData:
    """
    Generate the canonical unit shape of the given kind.

    Args:
        kind: Shape family
        **resolution: Shape-specific resolution parameters
            (see ShapeConfig.resolution())

    Returns:
        GeometryData, unpackable as (vertices, indices, topology)

    Raises:
        ValueError: If kind is not a ShapeKind
    """
    if kind is ShapeKind.CUBOID:
        geometry = generate_cuboid()
    elif kind is ShapeKind.QUAD:
        geometry = generate_quad()
    elif kind is ShapeKind.SPHERE:
        geometry = generate_sphere(**resolution)
    elif kind is ShapeKind.CYLINDER:
        geometry = generate_cylinder(**resolution)
    elif kind is ShapeKind.CONE:
        geometry = generate_cone(**resolution)
    elif kind is ShapeKind.AXES:
        geometry = generate_axes()
    else:
        raise ValueError(f"Unknown shape kind: {kind!r}")

    logger.debug(
        f"Generated unit {kind.value}: {len(geometry.vertices)} vertices, "
        f"{len(geometry.indices)} indices"
    )
    return geometry


__all__ = [
    'GeometryData',
    'generate',
    'generate_axes',
    'generate_cuboid',
    'generate_cone',
    'cone_base_height',
    'generate_cylinder',
    'generate_frustum',
    'generate_quad',
    'generate_sphere',
    'sphere_vertex_count',
    'sphere_index_count',
]
