"""
Utility functions for Prefab Shapes.
"""

from .math_utils import (
    IDENTITY3,
    cross,
    dot,
    length,
    normalize,
    triangle_normal,
    mat_mul,
    mat_vec,
    transpose,
    determinant,
    inverse,
    rotation_x,
    rotation_y,
    rotation_z,
    rotation_from_euler,
    rotation_from_axis_angle,
    is_rotation,
)

__all__ = [
    'IDENTITY3',
    'cross',
    'dot',
    'length',
    'normalize',
    'triangle_normal',
    'mat_mul',
    'mat_vec',
    'transpose',
    'determinant',
    'inverse',
    'rotation_x',
    'rotation_y',
    'rotation_z',
    'rotation_from_euler',
    'rotation_from_axis_angle',
    'is_rotation',
]
